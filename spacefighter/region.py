"""Axis-aligned integer rectangles."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from spacefighter.vector2 import Vector2


@dataclass
class Region:
    """A rectangle given by its upper-left corner, width and height."""

    x: int = 0
    y: int = 0
    width: int = 1
    height: int = 1

    @classmethod
    def from_corner(
        cls,
        position: Sequence[int],
        width: int | Sequence[int],
        height: int | None = None,
    ) -> Region:
        """Build a region from a corner point and either a size point or a width and height."""
        if height is None:
            if isinstance(width, int):
                raise TypeError("height is required when width is a number")
            width, height = width
        px, py = position
        return cls(px, py, width, height)

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top_left(self) -> tuple[int, int]:
        return self.left, self.top

    @property
    def top_right(self) -> tuple[int, int]:
        return self.right, self.top

    @property
    def bottom_left(self) -> tuple[int, int]:
        return self.left, self.bottom

    @property
    def bottom_right(self) -> tuple[int, int]:
        return self.right, self.bottom

    @property
    def center(self) -> Vector2:
        return Vector2(self.x, self.y) + Vector2(self.width, self.height) / 2

    def translate(self, dx: int | Sequence[int], dy: int | None = None) -> None:
        """Move the region by dx and dy, or by a point given as dx alone."""
        if dy is None:
            if isinstance(dx, int):
                raise TypeError("dy is required when dx is a number")
            dx, dy = dx
        self.x += dx
        self.y += dy