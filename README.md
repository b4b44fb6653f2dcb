# openempires

A small engine for a real-time strategy game, built from a few pieces:

- `openempires.subsystem`: the `SubSystem` interface (`init`, `shutdown`)
  and `SubSystemRegistry`, a process-wide registry that starts, stops and
  waits on named subsystems.
- `openempires.event_loop`: `EventLoop`, a background thread that sends a
  `TICK` `Event` to every registered `EventLoopListener` about every 16 ms.
- `openempires.event`: `Event`, `EventType` and the `EventLoopListener`
  interface (`on_init`, `on_exit`, `on_event`).
- `openempires.game_state`: `GameState`, an entity registry. Entities are
  created with `create_entity` and carry `Component` instances, one per
  component class.
- `openempires.components`: `TransformComponent`, `GraphicsComponent` and
  `ActionComponent`.
- `openempires.graphics_registry`: `GraphicsID`, which packs entity type,
  action, frame, direction and three custom fields into one integer key, and
  `GraphicsRegistry`, which maps those keys to `GraphicsEntry` images.
  Looking up an unknown id raises `GraphicNotFoundError`.
- `openempires.renderer`: `Renderer`, a pygame window on its own thread that
  clears to dark grey and draws the image of every entity with a
  `GraphicsComponent`.
- `openempires.resource_loader`: `ResourceLoader`, which creates one sample
  entity and loads one bitmap as its texture.
- `openempires.settings` (`GameSettings`), `openempires.types`
  (`Direction`, `WorldSizeType`, `WidthHeight`, `TILE_SIZE`),
  `openempires.vec2d` (`Vec2d`), `openempires.object_pool` (`ObjectPool`)
  and `openempires.logger` (`init_logger`).

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the game

```
openempires
```

This logs to the console and to `build/logs/game.log`, opens a 1024x720
window, starts the event loop and the renderer, creates a sample entity and
loads `test.bmp` from the current directory as its texture. It then runs
until interrupted. Options:

- `--log-file PATH`: where to write the log (truncated on start).
- `--texture PATH`: the bitmap to load.
- `--run-for SECONDS`: shut everything down after this many seconds.

If the bitmap cannot be loaded, start-up fails with a `RuntimeError`.

## Using the entity registry

```python
from openempires.game_state import GameState
from openempires.components import TransformComponent, ActionComponent
from openempires.vec2d import Vec2d

state = GameState.get_instance()
unit = state.create_entity()
state.add_component(unit, TransformComponent(Vec2d(100, 100)))
state.add_component(unit, ActionComponent(0))

transform = state.get_component(unit, TransformComponent)
transform.face(Vec2d(200, 100))
print(transform.rotation, transform.direction)

for entity, transform in state.entities_with(TransformComponent):
    print(entity, transform.position)
```

Adding a component of a class the entity already has replaces it.
`get_component` raises `KeyError` when the component is missing, and both
`get_component` and `destroy_entity` raise `KeyError` for an entity that is
not valid. `clear_all` removes every entity.

## Listening to ticks

```python
from openempires.event import EventLoopListener
from openempires.event_loop import EventLoop

class Counter(EventLoopListener):
    def __init__(self):
        self.ticks = 0

    def on_init(self):
        pass

    def on_exit(self):
        pass

    def on_event(self, event):
        self.ticks += 1

loop = EventLoop()
loop.register_listener(Counter())
loop.init()
# ...
loop.shutdown()
```

## Object pool

`ObjectPool` takes a factory. `reserve(n)` creates `n` objects up front,
`acquire()` hands back the most recently released one or makes a new one,
and `release(obj)` returns it. `pool_size` counts reserved objects and
`free_size` the ones currently available.

## What it does not do

There is no gameplay yet: no map, units, player input or sound. The window
only responds to being closed, which ends the drawing thread but not the
`openempires` command. Every image is drawn scaled into the same fixed
rectangle at (100, 100) rather than at its entity's position, and entities
whose graphic is not registered are skipped with a warning. The volume,
fullscreen and vsync values in `GameSettings` are stored but not used.