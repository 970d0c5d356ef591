import pytest

from spacefighter.collision_type import CollisionType
from spacefighter.game_object import GameObject, GameTime, screen_size, set_screen_size
from spacefighter.vector2 import Vector2


class Body(GameObject):
    def __init__(self, kind=CollisionType.ENEMY | CollisionType.SHIP, radius=10):
        super().__init__()
        self.kind = kind
        self.collision_radius = radius

    def draw(self, sprite_batch):
        sprite_batch.append(self)

    def collision_type(self):
        return self.kind


class FakeLevel:
    def __init__(self):
        self.registered = []

    def update_sector_position(self, game_object):
        self.registered.append(game_object)


@pytest.fixture(autouse=True)
def world():
    set_screen_size(800, 600)
    GameObject.set_current_level(None)
    yield
    set_screen_size(1600, 900)
    GameObject.set_current_level(None)


def test_screen_size_round_trip():
    set_screen_size(320, 240)
    assert screen_size() == (320, 240)


@pytest.mark.parametrize("width,height", [(0, 100), (100, 0), (-5, 10)])
def test_screen_size_rejects_non_positive(width, height):
    with pytest.raises(ValueError):
        set_screen_size(width, height)


def test_game_object_is_abstract():
    with pytest.raises(TypeError):
        GameObject()


def test_indices_increase_by_one_and_survive_moves():
    first = Body()
    second = Body()
    first_index = first.index
    first.set_position(Vector2(40, 50))
    second.set_position(Vector2(-3, 7))
    assert first.index == first_index
    assert second.index == first.index + 1
    assert first.position == Vector2(40, 50)


def test_new_object_is_inactive_and_toggles():
    level = FakeLevel()
    GameObject.set_current_level(level)
    body = Body()
    assert body.is_active() is False
    body.update(GameTime(elapsed=0.016))
    assert level.registered == []
    body.activate()
    assert body.is_active() is True
    body.update(GameTime(elapsed=0.016))
    assert level.registered == [body]
    body.deactivate()
    assert body.is_active() is False
    body.update(GameTime(elapsed=0.016))
    assert level.registered == [body]


def test_set_position_remembers_previous():
    body = Body()
    body.set_position(Vector2(3, 4))
    body.set_position(Vector2(5, 6))
    assert body.position == Vector2(5, 6)
    assert body.previous_position == Vector2(3, 4)


def test_translate_position_adds_offset():
    body = Body()
    start = Vector2(10, 20)
    offset = Vector2(-2, 7)
    body.set_position(start)
    body.translate_position(offset)
    assert body.position == start + offset
    assert body.previous_position == start


def test_half_dimensions_use_collision_radius():
    body = Body(radius=12)
    assert body.half_dimensions() == Vector2(12, 12)


@pytest.mark.parametrize(
    "position,expected",
    [
        (Vector2(400, 300), True),
        (Vector2(805, 300), True),
        (Vector2(810, 300), False),
        (Vector2(-10, 300), False),
        (Vector2(-9, 300), True),
        (Vector2(400, 610), False),
        (Vector2(400, -10), False),
        (Vector2(400, 605), True),
    ],
)
def test_is_on_screen(position, expected):
    body = Body(radius=10)
    body.set_position(position)
    assert body.is_on_screen() is expected


def test_update_registers_active_object_with_level():
    level = FakeLevel()
    GameObject.set_current_level(level)
    body = Body()
    body.activate()
    body.update(GameTime(elapsed=0.016, total=1.0))
    assert level.registered == [body]


def test_update_ignores_inactive_object():
    level = FakeLevel()
    GameObject.set_current_level(level)
    body = Body()
    body.update(GameTime(elapsed=0.016))
    assert level.registered == []


def test_current_level_round_trip():
    level = FakeLevel()
    Body.set_current_level(level)
    assert GameObject.current_level() is level
    assert Body.current_level() is level


def test_masks():
    body = Body(kind=CollisionType.PLAYER | CollisionType.SHIP)
    assert GameObject.has_mask(body, CollisionType.PLAYER) is True
    assert GameObject.has_mask(body, CollisionType.ENEMY) is False
    assert GameObject.is_mask(body, CollisionType.PLAYER | CollisionType.SHIP) is True
    assert GameObject.is_mask(body, CollisionType.PLAYER) is False


def test_base_hit_leaves_object_active():
    body = Body()
    body.activate()
    GameObject.hit(body, 100)
    assert body.is_active() is True