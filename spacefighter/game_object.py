"""The base class for everything that is updated, drawn and checked for collisions."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, ClassVar

from spacefighter.collision_type import CollisionType
from spacefighter.vector2 import Vector2

WHITE = (1.0, 1.0, 1.0, 1.0)

_screen = {"width": 1600, "height": 900}


def set_screen_size(width: int, height: int) -> None:
    """Set the size of the visible play area in pixels."""
    if width <= 0 or height <= 0:
        raise ValueError(f"screen size must be positive, got {width}x{height}")
    _screen["width"] = width
    _screen["height"] = height


def screen_size() -> tuple[int, int]:
    """Return the width and height of the visible play area in pixels."""
    return _screen["width"], _screen["height"]


@dataclass(frozen=True)
class GameTime:
    """Timing values for one frame: seconds since the last frame and since the start."""

    elapsed: float = 0.0
    total: float = 0.0


class GameObject(ABC):
    """An object in a level that can be updated, rendered and collided with."""

    _current_level: ClassVar[Any] = None
    _indices: ClassVar[Iterator[int]] = itertools.count()

    def __init__(self) -> None:
        self.index = next(GameObject._indices)
        self.collision_radius: float = 0.0
        self._active = False
        self._position = Vector2.ZERO
        self._previous_position = Vector2.ZERO

    @classmethod
    def set_current_level(cls, level: Any) -> None:
        """Set the level that all game objects belong to."""
        GameObject._current_level = level

    @classmethod
    def current_level(cls) -> Any:
        """Return the level that all game objects belong to, or None."""
        return GameObject._current_level

    @property
    def position(self) -> Vector2:
        return self._position

    @property
    def previous_position(self) -> Vector2:
        return self._previous_position

    def update(self, game_time: GameTime) -> None:
        """Register the object with its level's collision sectors while it is active."""
        if not self.is_active():
            return
        level = GameObject._current_level
        if level is None:
            return
        level.update_sector_position(self)

    @abstractmethod
    def draw(self, sprite_batch: Any) -> None:
        """Render the object."""

    def is_active(self) -> bool:
        return self._active

    def activate(self) -> None:
        self._active = True

    def deactivate(self) -> None:
        self._active = False

    def half_dimensions(self) -> Vector2:
        """Return half the object's extent; by default the collision radius on both axes."""
        return Vector2(self.collision_radius, self.collision_radius)

    @abstractmethod
    def collision_type(self) -> CollisionType:
        """Return the categories this object collides as."""

    def hit(self, damage: float) -> None:
        """Apply damage; plain game objects ignore it."""

    def has_mask(self, mask: CollisionType) -> bool:
        """Return True if the object's collision type shares a bit with mask."""
        return mask.contains(self.collision_type())

    def is_mask(self, mask: CollisionType) -> bool:
        """Return True if the object's collision type is exactly mask."""
        return self.collision_type() == mask

    def set_position(self, position: Vector2) -> None:
        """Move the object, remembering where it was."""
        self._previous_position = self._position
        self._position = Vector2(position.x, position.y)

    def translate_position(self, offset: Vector2) -> None:
        """Move the object by offset."""
        self.set_position(self._position + offset)

    def is_on_screen(self) -> bool:
        """Return True if any part of the object lies within the screen."""
        half = self.half_dimensions()
        width, height = screen_size()
        pos = self._position
        if pos.y - half.y >= height or pos.y + half.y <= 0:
            return False
        if pos.x - half.x >= width or pos.x + half.x <= 0:
            return False
        return True