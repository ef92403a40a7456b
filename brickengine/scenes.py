"""Scenes and the manager that loads them onto layers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from brickengine.exceptions import AnotherSceneActiveError, NoSceneActiveError


class SceneLayer(Enum):
    """The layer a scene occupies; one scene per layer at a time."""

    PRIMARY = 0
    SECONDARY = 1


@dataclass
class SceneResetState:
    """Whether a scene resets systems when it starts and when it ends."""

    reset_on_start: bool
    reset_on_end: bool


@dataclass
class EntityComponents:
    """The components and tags of an entity that has not been created yet."""

    components: list = field(default_factory=list)
    tags: list = field(default_factory=list)


class Scene(ABC):
    """A scene with a ``tag`` and a ``layer`` set as class attributes."""

    tag = None
    layer = None

    def __init__(self):
        self.prepared = False
        self.entity_components = None

    def prepare(self):
        """Fill the scene's entity components."""
        self.perform_prepare()
        self.prepared = True

    @abstractmethod
    def perform_prepare(self):
        """Build ``entity_components``; it may stay None."""

    @abstractmethod
    def start(self):
        """Called after the scene's entities have been created."""

    @abstractmethod
    def leave(self):
        """Called before the scene is destroyed."""

    @abstractmethod
    def get_system_state(self):
        """Return the game state this scene runs in."""

    def take_entity_components(self):
        """Hand over the prepared entity components, leaving the scene unprepared."""
        self.prepared = False
        components, self.entity_components = self.entity_components, None
        return components


class SceneManager:
    """Loads scenes onto layers and keeps the game state in step."""

    def __init__(self, entity_manager, game_state_manager):
        self._entity_manager = entity_manager
        self._game_state_manager = game_state_manager
        self._scenes = {}

    def load_scene(self, scene):
        """Activate a scene on its layer and create its entities."""
        layer = scene.layer
        if layer in self._scenes:
            raise AnotherSceneActiveError()
        # Registered first so new entities can pick up the current scene's tag.
        self._scenes[layer] = scene

        if not scene.prepared:
            scene.prepare()
        entity_components = scene.take_entity_components()
        for entity in entity_components or ():
            entity_id = self._entity_manager.create_entity(
                entity.components, None, scene.tag
            )
            for tag in entity.tags:
                self._entity_manager.set_tag(entity_id, tag)
        scene.start()

        primary = self._scenes.get(SceneLayer.PRIMARY)
        if primary is not None:
            state = scene.get_system_state()
            if layer == SceneLayer.PRIMARY or primary.get_system_state() != state:
                self._game_state_manager.set_state(state)

    def create_scene(self, scene_type, *args, **kwargs):
        """Construct a scene of the given type and load it."""
        if not (isinstance(scene_type, type) and issubclass(scene_type, Scene)):
            raise TypeError(f"{scene_type!r} is not a Scene subclass")
        scene = scene_type(*args, **kwargs)
        self.load_scene(scene)
        return scene

    def destroy_scene(self, layer):
        """Leave and remove the scene on a layer, with its entities."""
        scene = self._scenes.pop(layer, None)
        if scene is None:
            return
        scene.leave()
        self._entity_manager.remove_entities_with_tag(scene.tag)

    def destroy_all_scenes(self):
        """Leave and remove every scene, with their entities."""
        for scene in self._scenes.values():
            scene.leave()
            self._entity_manager.remove_entities_with_tag(scene.tag)
        self._scenes.clear()

    def is_scene_active(self, scene_type):
        """Return True when a scene of this type occupies its layer."""
        scene = self._scenes.get(scene_type.layer)
        return scene is not None and scene.tag == scene_type.tag

    def get_layer_tag(self, layer):
        """Return the tag of the scene on a layer."""
        try:
            return self._scenes[layer].tag
        except KeyError:
            raise NoSceneActiveError() from None

    def create_get_primary_tag_function(self):
        """Return a callable giving the primary scene's tag, or None."""

        def primary_tag():
            scene = self._scenes.get(SceneLayer.PRIMARY)
            return scene.tag if scene is not None else None

        return primary_tag

    def get_layer_state(self, layer, default=None):
        """Return the game state of the scene on a layer, or ``default``."""
        scene = self._scenes.get(layer)
        return scene.get_system_state() if scene is not None else default