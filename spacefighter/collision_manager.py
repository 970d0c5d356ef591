"""Decides which pairs of objects collide and reports their collisions."""

from __future__ import annotations

from collections.abc import Callable

from spacefighter.collision_type import CollisionType
from spacefighter.game_object import GameObject

OnCollision = Callable[[GameObject, GameObject], None]


def _ordered(type1: CollisionType, type2: CollisionType) -> tuple[int, int]:
    return (int(type1), int(type2)) if type1 <= type2 else (int(type2), int(type1))


class CollisionManager:
    """Tracks which collision type pairs interact and calls back when they touch."""

    def __init__(self) -> None:
        self._non_collisions: set[tuple[int, int]] = set()
        self._collisions: dict[tuple[int, int], OnCollision] = {}

    def add_collision_type(
        self, type1: CollisionType, type2: CollisionType, callback: OnCollision
    ) -> None:
        """Check objects of these two types for collisions and call callback when they touch.

        The callback receives the object with the lower type value first.
        """
        self._collisions.setdefault(_ordered(type1, type2), callback)

    def add_non_collision_type(self, type1: CollisionType, type2: CollisionType) -> None:
        """Never check objects of these two types against each other."""
        self._non_collisions.add(_ordered(type1, type2))

    def check_collision(self, first: GameObject, second: GameObject) -> None:
        """Call the registered callback if the two objects' circles overlap.

        A pair of types with no registered callback is remembered as non-colliding.
        """
        type1 = first.collision_type()
        type2 = second.collision_type()
        if type1 == type2 or type1 == CollisionType.NONE or type2 == CollisionType.NONE:
            return

        if type1 > type2:
            type1, type2 = type2, type1
            first, second = second, first

        pair = (int(type1), int(type2))
        if pair in self._non_collisions:
            return

        callback = self._collisions.get(pair)
        if callback is None:
            self._non_collisions.add(pair)
            return

        reach = first.collision_radius + second.collision_radius
        if (first.position - second.position).length_squared() <= reach * reach:
            callback(first, second)