"""Bit-mask categories that decide which objects can collide."""

from __future__ import annotations

from enum import IntFlag


class CollisionType(IntFlag):
    """A combination of collision categories, such as a player projectile."""

    NONE = 0
    PLAYER = 1 << 0
    ENEMY = 1 << 1
    SHIP = 1 << 2
    PROJECTILE = 1 << 3

    def contains(self, other: CollisionType) -> bool:
        """Return True if this type shares at least one bit with other."""
        return (int(self) & int(other)) > 0