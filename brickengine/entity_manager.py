"""Entity storage: components, parent/child families and tags."""

from dataclasses import dataclass
from enum import Enum

from brickengine.exceptions import (
    ChildAlreadyHasParentError,
    GrandparentsNotSupportedError,
)

_TRANSFORM = "TransformComponent"
_PHYSICS = "PhysicsComponent"
_IS_NOT_KINEMATIC = "IS_NOT_KINEMATIC"
_WAS_NOT_KINEMATIC = "WAS_NOT_KINEMATIC"


@dataclass
class Position:
    """A point in world space."""

    x: float
    y: float


@dataclass
class Scale:
    """A horizontal and vertical size."""

    x: float
    y: float


def _component_key(component_type):
    """Return the name components of this type are stored under."""
    return getattr(component_type, "component_name", component_type.__name__)


def _swap_kinematic(physics, from_name, to_name):
    kinematic = getattr(physics, "kinematic", None)
    if isinstance(kinematic, Enum) and kinematic.name == from_name:
        physics.kinematic = type(kinematic)[to_name]


class EntityManager:
    """Holds the components of every entity and the relations between entities.

    Components are stored by type name: a class may set ``component_name`` to
    choose it, otherwise its class name is used. Transforms are stored under
    ``TransformComponent`` and physics under ``PhysicsComponent``.
    """

    def __init__(self):
        self._last_entity_id = -1
        self._scene_tag_function = None
        self._components = {}
        self._parents = {}
        self._children = {}
        self._tags_by_entity = {}
        self._entities_by_tag = {}

    def set_current_scene_tag_function(self, fn):
        """Set the callable giving the tag of the current scene, or None."""
        self._scene_tag_function = fn

    def create_entity(self, components, parent=None, scene_tag=None):
        """Create an entity from components and return its id.

        ``parent`` is an optional ``(parent_id, transform_is_relative)`` pair.
        Without an explicit ``scene_tag`` the current scene's tag is used.
        """
        self._last_entity_id += 1
        entity_id = self._last_entity_id

        for component in components:
            self.add_component_to_entity(entity_id, component)

        if parent is not None:
            parent_id, transform_is_relative = parent
            self.set_parent(entity_id, parent_id, transform_is_relative)

        if scene_tag is not None:
            self.set_tag(entity_id, scene_tag)
        elif self._scene_tag_function is not None:
            current_tag = self._scene_tag_function()
            if current_tag is not None:
                self.set_tag(entity_id, current_tag)

        return entity_id

    def get_entities_by_component(self, component_type):
        """Return (entity_id, component) pairs for every entity with the type."""
        return list(self._components.get(_component_key(component_type), {}).items())

    def remove_component_from_entity(self, entity_id, component_type):
        """Remove the component of the given type from the entity, if present."""
        self._components.get(_component_key(component_type), {}).pop(entity_id, None)

    def get_component(self, entity_id, component_type):
        """Return the entity's component of the given type, or None."""
        return self._get(entity_id, _component_key(component_type))

    def get_children_with_component(self, parent_id, component_type):
        """Return (child_id, component) pairs for children holding the type."""
        by_entity = self._components.get(_component_key(component_type), {})
        return [
            (child_id, by_entity[child_id])
            for child_id in sorted(self._children.get(parent_id, ()))
            if child_id in by_entity
        ]

    def add_component_to_entity(self, entity_id, component):
        """Attach a component, replacing one of the same type."""
        key = _component_key(type(component))
        self._components.setdefault(key, {})[entity_id] = component

    def remove_entity(self, entity_id):
        """Remove an entity with its components, tags and family links."""
        for child_id in self.get_children(entity_id):
            self._parents.pop(child_id, None)
        self._children.pop(entity_id, None)

        self.move_out_of_parents_house(entity_id)

        for tag in self._tags_by_entity.pop(entity_id, set()):
            self._entities_by_tag[tag].discard(entity_id)

        for by_entity in self._components.values():
            by_entity.pop(entity_id, None)

    def entity_exists(self, entity_id):
        """Return True when the entity has a transform."""
        return entity_id in self._components.get(_TRANSFORM, {})

    def set_parent(self, child_id, parent_id, transform_is_relative):
        """Make one entity the child of another.

        When the child's transform is not already relative, it is converted
        from world space into the parent's space.
        """
        if self.get_parent(parent_id) is not None:
            raise GrandparentsNotSupportedError()
        if self.get_parent(child_id) is not None:
            raise ChildAlreadyHasParentError()

        child_transform = self._get(child_id, _TRANSFORM)
        if not transform_is_relative:
            parent_position, parent_scale = self.get_absolute_transform(parent_id)
            child_transform.x_pos -= parent_position.x
            child_transform.y_pos -= parent_position.y
            child_transform.x_scale /= parent_scale.x
            child_transform.y_scale /= parent_scale.y

        child_physics = self._get(child_id, _PHYSICS)
        if child_physics is not None:
            _swap_kinematic(child_physics, _IS_NOT_KINEMATIC, _WAS_NOT_KINEMATIC)

        self._parents[child_id] = parent_id
        self._children.setdefault(parent_id, set()).add(child_id)

    def get_parent(self, entity_id):
        """Return the parent's id, or None."""
        return self._parents.get(entity_id)

    def get_children(self, entity_id):
        """Return the set of the entity's children."""
        return set(self._children.get(entity_id, ()))

    def move_out_of_parents_house(self, entity_id):
        """Detach an entity from its parent, returning its transform to world space."""
        parent_id = self._parents.get(entity_id)
        if parent_id is None:
            return

        parent_transform = self._get(parent_id, _TRANSFORM)
        child_transform = self._get(entity_id, _TRANSFORM)
        child_transform.x_pos += parent_transform.x_pos
        child_transform.y_pos += parent_transform.y_pos
        child_transform.x_scale *= parent_transform.x_scale
        child_transform.y_scale *= parent_transform.y_scale

        physics = self._get(entity_id, _PHYSICS)
        if physics is not None:
            _swap_kinematic(physics, _WAS_NOT_KINEMATIC, _IS_NOT_KINEMATIC)

        self._children.get(parent_id, set()).discard(entity_id)
        del self._parents[entity_id]

    def get_absolute_transform(self, entity_id):
        """Return the entity's world-space (Position, Scale)."""
        transform = self._get(entity_id, _TRANSFORM)
        position = Position(transform.x_pos, transform.y_pos)
        scale = Scale(transform.x_scale, transform.y_scale)
        parent_id = self.get_parent(entity_id)
        if parent_id is not None:
            parent_position, parent_scale = self.get_absolute_transform(parent_id)
            position.x += parent_position.x
            position.y += parent_position.y
            scale.x *= parent_scale.x
            scale.y *= parent_scale.y
        return position, scale

    def get_tags(self, entity_id):
        """Return the set of the entity's tags."""
        return set(self._tags_by_entity.get(entity_id, ()))

    def set_tag(self, entity_id, tag):
        """Tag an entity."""
        self._tags_by_entity.setdefault(entity_id, set()).add(tag)
        self._entities_by_tag.setdefault(tag, set()).add(entity_id)

    def remove_tag(self, entity_id, tag):
        """Remove a tag from an entity, if it has it."""
        tags = self._tags_by_entity.get(entity_id)
        if not tags or tag not in tags:
            return
        tags.discard(tag)
        self._entities_by_tag[tag].discard(entity_id)

    def get_entities_with_tag(self, tag):
        """Return the set of entities carrying the tag."""
        return set(self._entities_by_tag.get(tag, ()))

    def remove_entities_with_tag(self, tag):
        """Remove every entity carrying the tag."""
        for entity_id in self.get_entities_with_tag(tag):
            self.remove_entity(entity_id)

    def has_tag(self, entity_id, tag):
        """Return True when the entity carries the tag."""
        return entity_id in self._entities_by_tag.get(tag, ())

    def _get(self, entity_id, key):
        return self._components.get(key, {}).get(entity_id)