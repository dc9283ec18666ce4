# rodgame

The game-logic core of a wave-based shooting gallery. It is written in plain
Python and has no dependencies. The game objects, enemies, scenes, colliders
and windows it manages are objects you supply. Each module states the
attributes and methods it expects of them as a `typing.Protocol`.

## Modules

- `rodgame.settings`: constants for screen size (`SCREEN_WIDTH`,
  `SCREEN_HEIGHT`), frame rate, `GAME_SPEED`, enemy speeds and sprite sizes,
  drop rates, power-up durations and blocker settings.
- `rodgame.gameobjects`: `GameObjectManager` keeps game objects in order and
  looks them up by name. `add_object` registers an object and calls its
  `initialize()`. `process_input`, `update` and `draw` are passed on to the
  enabled objects only, and `update` scales the delta by `GAME_SPEED`.
  `sort_objects_by_z` puts the farthest objects first, and `sort_objects_by_x`
  orders them left to right. `find_object_by_name` returns `None` and logs an
  error when no object has that name.
- `rodgame.pooling`:
  - `GameObjectPool(tag, pool_size, reference, parent, manager)` clones
    `reference`. `initialize()` attaches each clone to `parent`, or else adds
    it to `manager`, and leaves it disabled.
  - `request_poolable()` enables and returns the oldest available object, or
    returns `None` when the pool is empty.
  - `request_poolable_batch(count)` is all or nothing: it returns an empty
    list when fewer than `count` objects are available.
  - `release_poolable` and `release_poolable_batch` disable objects and
    return them to the pool. Objects the pool did not hand out are ignored.
  - `ObjectPoolManager` indexes pools by tag. `get_pool` raises `KeyError`
    for an unknown tag.
  - `BlockerManager` keeps the list of active blockers.
- `rodgame.events`: `EventListener` is an abstract base class with a `key`
  property and `on_event_trigger(parameters)`. `EventBroadcaster` delivers
  `broadcast(key, parameters)` to every listener registered for `key`.
  `unregister_listener` raises `ValueError` for a listener that is not
  registered.
- `rodgame.items`: `ItemManager` has three inventory slots and a queue of
  items waiting to be activated.
  - `add_item(item, active=False)` stores the item in the first free slot and
    returns `False` when every slot is full. With `active=True` it queues the
    item instead.
  - `use_item(index)` empties a slot.
  - `take_active_items()` returns the queue and empties it.
- `rodgame.scenes`: `SceneManager` defers scene changes. `load_scene(tag)`
  only requests the change. `check_load_scene()` unloads the current scene and
  loads the requested one; it raises `KeyError` for an unregistered tag.
  `ViewManager` looks up views by tag, and `get_view` raises `KeyError` for an
  unknown tag.
- `rodgame.physics`: `PhysicsManager.perform()` checks every pair of tracked
  colliders and fires `on_collision_enter`, `on_collision_continue` and
  `on_collision_exit`. Afterwards it drops colliders that were scheduled with
  `untrack_collider` or that are `marked_for_cleanup`.
- `rodgame.windows`: `Partition` is a sub-screen given by its centre and
  size. `contains(point)` excludes the right and bottom edges.
  - `WindowManager.generate_partitions(columns, rows)` splits the screen into
    an even grid.
  - `switch_subscreen(index)` shows one sub-screen on the window and raises
    `IndexError` for an invalid index.
  - `mouse_over_subscreen(position)` shows the sub-screen under the position.
  - These methods call `window.set_view(partition)`. They raise
    `RuntimeError` when no window is set.
- `rodgame.collector`: `ItemCollectorSystem.collect(location)` picks up every
  enabled item that contains the location, newest first. It calls the item's
  `collect()` and marks its collectable as collected.
- `rodgame.powerups`: `PowerUp` lists the kinds of power-up: `HEALTH`,
  `DAMAGE`, `PIERCE`, `INVINCIBILITY` and `FREEZE`.
  - `PowerUpSystem(items, player_lookup, play_sound)` works once per elapsed
    second, not on every call to `perform`.
  - Each time it works, it activates the items queued in the item manager.
    It applies pending health to the player through
    `random_increment_health()`, and counts the timed power-ups down by one.
  - `play_sound`, if given, is called with a sound name whenever a power-up
    is activated.
- `rodgame.director`: `EnemyType` is the enemy rarity: `COMMON`, `UNCOMMON`
  or `ELITE`. `EnemyManager` groups enemy templates by rarity.
  - `EnemyDirector` builds one pool for each template, with 6 objects for a
    common enemy, 3 for an uncommon one and 2 for an elite one.
  - Every 8 seconds of `perform(delta)` it spawns a wave. The wave grows with
    elapsed time and with `partition_count`, is reduced by a random luck
    factor of up to 20 %, and shifts its mix from common toward uncommon and
    elite enemies over time.
  - Pass a seeded `random.Random` as `rng` for repeatable waves.

## Installation

```
pip install .
```

## Example

```python
from rodgame.events import EventBroadcaster, EventListener
from rodgame.items import ItemManager
from rodgame.powerups import PowerUp, PowerUpSystem


class ScoreListener(EventListener):
    def __init__(self):
        self.received = []

    @property
    def key(self):
        return "score"

    def on_event_trigger(self, parameters):
        self.received.append(parameters)


broadcaster = EventBroadcaster()
listener = ScoreListener()
broadcaster.register_listener(listener)
broadcaster.broadcast("score", {"points": 10})
# listener.received == [{"points": 10}]

items = ItemManager()
items.add_item(PowerUp.FREEZE, active=True)
power_ups = PowerUpSystem(items, player_lookup=lambda: None)
power_ups.perform(1.5)
# power_ups.is_active(PowerUp.FREEZE) is True
```

## What this package does not do

It does not draw, play sound, open a window or read the mouse and keyboard.
It has no main loop and no command for starting a game. It does not load
textures, fonts or sound files, and it does not define concrete player,
enemy, item or scene classes. A game built on it provides those objects and
calls the managers' methods from its own loop.

## Running the tests

```
pip install .[test]
pytest
```