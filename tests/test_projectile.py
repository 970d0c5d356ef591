from dataclasses import dataclass

import pytest

from spacefighter.collision_type import CollisionType
from spacefighter.game_object import GameObject, GameTime, set_screen_size
from spacefighter.projectile import Projectile
from spacefighter.vector2 import Vector2


@dataclass
class FakeTexture:
    size: Vector2
    center: Vector2


class FakeLevel:
    def __init__(self, alpha=1.0):
        self._alpha = alpha
        self.registered = []

    def update_sector_position(self, game_object):
        self.registered.append(game_object)

    def alpha(self):
        return self._alpha


class FakeSpriteBatch:
    def __init__(self):
        self.calls = []

    def draw(self, *args):
        self.calls.append(args)


TEXTURE = FakeTexture(size=Vector2(8, 8), center=Vector2(4, 4))


@pytest.fixture
def level():
    set_screen_size(800, 600)
    current = FakeLevel(alpha=0.5)
    GameObject.set_current_level(current)
    Projectile.set_texture(TEXTURE)
    yield current
    Projectile.set_texture(None)
    GameObject.set_current_level(None)
    set_screen_size(1600, 900)


def test_defaults(level):
    shot = Projectile()
    assert shot.is_active() is False
    assert shot.damage == 1
    assert shot.speed == 500
    assert shot.collision_radius == 9
    assert shot.direction == -Vector2.UNIT_Y
    assert shot.collision_type() == CollisionType.PLAYER | CollisionType.PROJECTILE
    assert str(shot) == "Player Projectile"


def test_activate_for_enemy(level):
    shot = Projectile()
    shot.activate(Vector2(50, 60), False)
    assert shot.is_active() is True
    assert shot.position == Vector2(50, 60)
    assert shot.collision_type() == CollisionType.ENEMY | CollisionType.PROJECTILE
    assert str(shot) == "Enemy Projectile"
    assert shot.has_mask(CollisionType.ENEMY) is True
    assert shot.has_mask(CollisionType.PLAYER) is False


def test_update_moves_along_direction(level):
    shot = Projectile()
    start = Vector2(100, 300)
    shot.activate(start)
    shot.update(GameTime(elapsed=0.1))
    assert shot.position.x == pytest.approx(start.x)
    assert start.y - shot.position.y == pytest.approx(shot.speed * 0.1)
    assert shot.is_active() is True
    assert level.registered == [shot]


def test_update_leaves_inactive_projectile_alone(level):
    shot = Projectile()
    shot.update(GameTime(elapsed=0.1))
    assert shot.position == Vector2.ZERO
    assert level.registered == []


@pytest.mark.parametrize(
    "start,direction",
    [
        (Vector2(100, -7), -Vector2.UNIT_Y),
        (Vector2(100, 607), Vector2.UNIT_Y),
        (Vector2(-7, 100), -Vector2.UNIT_X),
        (Vector2(807, 100), Vector2.UNIT_X),
    ],
)
def test_leaving_screen_deactivates(level, start, direction):
    shot = Projectile()
    shot.direction = direction
    shot.activate(start)
    shot.update(GameTime(elapsed=0.01))
    assert shot.is_active() is False
    assert level.registered == []


def test_without_texture_edge_is_screen_border(level):
    Projectile.set_texture(None)
    shot = Projectile()
    shot.activate(Vector2(100, -1))
    shot.update(GameTime(elapsed=0.01))
    assert shot.is_active() is False


def test_draw_uses_level_alpha(level):
    shot = Projectile()
    shot.activate(Vector2(10, 20))
    batch = FakeSpriteBatch()
    shot.draw(batch)
    assert batch.calls == [(TEXTURE, Vector2(10, 20), (0.5, 0.5, 0.5, 0.5), TEXTURE.center)]


def test_draw_skips_inactive(level):
    batch = FakeSpriteBatch()
    Projectile().draw(batch)
    assert batch.calls == []


def test_draw_without_texture_raises(level):
    Projectile.set_texture(None)
    shot = Projectile()
    shot.activate(Vector2(10, 20))
    with pytest.raises(RuntimeError):
        shot.draw(FakeSpriteBatch())