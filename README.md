# spacefighter

The simulation core of a top-down arcade space shooter, as a plain Python
library. It holds game state and rules. Drawing, audio, asset loading and the
level that ties objects together come from objects that you pass in.

## Modules

- `spacefighter.vector2` has an immutable `Vector2` with arithmetic, `dot`,
  `cross`, `normalized`, `left`, `right` and `to_point`, and the constants
  `ZERO`, `ONE`, `UNIT_X` and `UNIT_Y`. The module also has the helpers
  `distance`, `distance_squared`, `lerp`, `random_vector` and `parse_vector2`.
- `spacefighter.region` has `Region`, an integer rectangle. It has edge and
  corner properties, `center`, `translate` and `Region.from_corner`.
- `spacefighter.collision_type` and `spacefighter.trigger_type` have the
  bit-mask flags `CollisionType` and `TriggerType`. Combine them with `|` and
  test them with `contains`.
- `spacefighter.gamepad` has controller state: `GamePadState`, with
  `is_button_down`, `is_button_up` and `reset`. It also has `Button`,
  `ButtonState`, `GamePadButtons`, `GamePadDPad`, `GamePadTriggers` and
  `GamePadThumbSticks`.
- `spacefighter.particles` has these classes:
  - `Particle` moves at a fixed velocity until its life runs out.
  - `ParticleInitializer` sets up a particle before it starts.
  - `ParticleEmitter` starts inactive particles from a pool at a rate.
  - `ParticleRenderer` draws particles.
  - `ParticleUpdater` advances particles.
- `spacefighter.resources` has `ResourceManager`. It loads resource types
  that provide `load(path, manager)`, `is_cloneable()` and `clone()`, caches
  them by path, and hands out clones of cached resources that can be cloned.
  If a load fails it raises `OSError`.
- `spacefighter.game_object` has:
  - `GameObject`, the abstract base of every entity.
  - `GameTime`, which holds `elapsed` and `total` seconds.
  - `set_screen_size` and `screen_size`, for the play area. It defaults to
    1600×900.
- `spacefighter.projectile` has `Projectile`, a shot that deactivates once it
  leaves the screen.
- `spacefighter.weapon` has:
  - `Attachment`, the interface for items fitted to a ship.
  - `Weapon`, an attachment that fires from a projectile pool.
  - `Blaster`, a weapon with a cooldown between shots. The cooldown is 0.35 s
    by default.
- `spacefighter.ship` has `Ship`, with hit points, invulnerability, keyed
  attachments (`attach_item`, `get_attachment`, `attachment_at`,
  `get_weapon`) and `fire_weapons`. It also has the `Attachable` interface.
- `spacefighter.enemy_ship` has two ship classes:
  - `EnemyShip` becomes active after a delay set with `initialize`.
  - `BioEnemyShip` drifts down the screen weaving from side to side.
- `spacefighter.explosion` has `Explosion`. It plays an animation at a
  position with a random rotation.
- `spacefighter.collision_manager` has `CollisionManager`. It calls back when
  objects of a registered pair of collision types overlap. The callback gets
  the object with the lower type value first. Pairs with no callback are
  remembered as non-colliding.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
from spacefighter.vector2 import Vector2, lerp
from spacefighter.collision_type import CollisionType

velocity = lerp(Vector2(0, 0), Vector2(10, 0), 0.25)   # Vector2(2.5, 0.0)

enemy_ship = CollisionType.ENEMY | CollisionType.SHIP
assert enemy_ship.contains(CollisionType.SHIP)
```

## The current level

Game objects share one current level, which you set with
`GameObject.set_current_level`. The level is any object that provides the
methods below. Each one is used only if a level has been set.

- `update_sector_position(obj)` is called by every active object's `update`.
- `spawn_explosion(ship)` is called when a ship's hit points run out.
- `alpha()` gives the fade factor that projectiles and enemy ships use when
  drawing.

## What this package does not do

- It has no level class, no enemy waves and no player-controlled ship.
- It has no command, window, renderer or audio output. Sprite batches,
  textures, animations and sounds are objects that you supply.
- It has no keyboard or mouse input handling.

The host program must build the game loop and the level around these pieces.