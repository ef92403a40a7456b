# brickengine

Building blocks for 2D games on top of pygame:

- `brickengine.entity_manager`: `EntityManager` stores components per
  entity, links entities as parent and child, converts transforms between
  world and parent space, and tags entities. `Position` and `Scale` are
  returned by `get_absolute_transform`.
- `brickengine.scenes`: `Scene`, `SceneManager`, `SceneLayer`
  (`PRIMARY`, `SECONDARY`), `EntityComponents` and `SceneResetState`.
- `brickengine.renderables`: `Color`, `Rect`, `Flip`, and the drawable
  `Texture`, `Circle` and `Line`.
- `brickengine.renderer`: `Renderer` queues renderables per layer and draws
  them onto a pygame surface, lowest layer first.
- `brickengine.renderable_factory`: `RenderableFactory` makes textures from
  image files or text, and circles and lines.
- `brickengine.resource_manager`: `ResourceManager` loads images by path and
  hands out the same texture while anything still holds it.
- `brickengine.sound_manager`: `SoundManager` loops one music track at a
  time from a base directory (`assets/sound` by default).
- `brickengine.util`: `is_equal_to_zero`, `sign` and a seedable `Random`
  with a shared instance from `Random.get_instance()`.
- `brickengine.keycodes`: the `InputKeyCode` enum.
- `brickengine.exceptions`: every error derives from `BrickEngineError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Entities

Components are stored under their class name, or under a class attribute
`component_name` when one is set. Parent/child links and absolute
transforms use the component stored as `TransformComponent`, which needs
`x_pos`, `y_pos`, `x_scale` and `y_scale`.

```python
from dataclasses import dataclass

from brickengine.entity_manager import EntityManager


@dataclass
class TransformComponent:
    x_pos: float
    y_pos: float
    x_scale: float
    y_scale: float


manager = EntityManager()
parent = manager.create_entity([TransformComponent(10, 20, 2, 2)])
child = manager.create_entity([TransformComponent(15, 25, 4, 4)], (parent, False))

position, scale = manager.get_absolute_transform(child)
assert (position.x, position.y) == (15, 25)
assert manager.get_children(parent) == {child}

manager.set_tag(child, "enemy")
assert manager.get_entities_with_tag("enemy") == {child}
```

A parent cannot itself have a parent (`GrandparentsNotSupportedError`),
and an entity cannot be given a second parent
(`ChildAlreadyHasParentError`). If the entity has a physics component
(stored as `PhysicsComponent`) whose `kinematic` enum member is
`IS_NOT_KINEMATIC`, it becomes `WAS_NOT_KINEMATIC` while the entity has a
parent and is set back when the entity leaves it.

## Scenes

Subclass `Scene`, set the class attributes `tag` and `layer`, and
implement `perform_prepare`, `start`, `leave` and `get_system_state`.
`perform_prepare` may fill `self.entity_components` with
`EntityComponents` entries. `SceneManager(entity_manager,
game_state_manager)` creates those entities tagged with the scene's tag,
and calls `game_state_manager.set_state(...)` when a primary scene loads
or when a secondary scene has a different state from the primary one.
Loading onto an occupied layer raises `AnotherSceneActiveError`;
`get_layer_tag` on an empty layer raises `NoSceneActiveError`.
`destroy_scene` and `destroy_all_scenes` remove the scenes' entities.

## Rendering

`Renderer(surface, layers)` draws only the layers it was given. Queue
renderables with `queue_renderable`, then call `draw_screen`; it calls
`pygame.display.flip()` when the surface is the display surface.
`clear_screen` fills the surface and empties the queues.

## What is not included

This package has no game loop, window setup or frame timing, no physics,
collision, animation or rendering systems that update entities each frame,
no input handling beyond the `InputKeyCode` names, and no JSON loading
(`NoPathError`, `NoValidJsonOrPathError` and `ObjectOrTypeError` are
defined but not raised by any module here). A game built on it supplies
these itself.