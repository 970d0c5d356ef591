"""Enemy ships, including the weaving biological kind."""

from __future__ import annotations

import math
from typing import Any

from spacefighter.collision_type import CollisionType
from spacefighter.game_object import GameObject, GameTime
from spacefighter.ship import Ship
from spacefighter.vector2 import Vector2


class EnemyShip(Ship):
    """An enemy ship that becomes active after a delay and leaves once it goes off screen."""

    def __init__(self) -> None:
        super().__init__()
        self.max_hit_points = 1.0
        self.collision_radius = 20
        self.delay_seconds = 0.0
        self.activation_seconds = 0.0

    def update(self, game_time: GameTime) -> None:
        """Count down the activation delay and retire the ship when it has flown off screen."""
        if self.delay_seconds > 0:
            self.delay_seconds -= game_time.elapsed
            if self.delay_seconds <= 0:
                GameObject.activate(self)

        if self.is_active():
            self.activation_seconds += game_time.elapsed
            if self.activation_seconds > 2 and not self.is_on_screen():
                self.deactivate()

        super().update(game_time)

    def initialize(self, position: Vector2, delay_seconds: float) -> None:
        """Place the ship, set its activation delay and restore its hit points."""
        self.set_position(position)
        self.delay_seconds = delay_seconds
        Ship.initialize(self)

    def fire(self) -> None:
        """Enemy ships do not fire unless a subclass says otherwise."""

    def collision_type(self) -> CollisionType:
        return CollisionType.ENEMY | CollisionType.SHIP

    def __str__(self) -> str:
        return "Enemy Ship"


class BioEnemyShip(EnemyShip):
    """A biological enemy that drifts down the screen weaving from side to side.

    The texture must provide ``center`` as a vector.
    """

    def __init__(self, texture: Any = None) -> None:
        super().__init__()
        self.speed = 150.0
        self.max_hit_points = 1.0
        self.collision_radius = 20
        self.texture = texture

    def update(self, game_time: GameTime) -> None:
        if self.is_active():
            sway = math.cos(game_time.total * math.pi + self.index)
            sway *= self.speed * game_time.elapsed * 3.1
            self.translate_position(Vector2(sway, self.speed * game_time.elapsed))
            if not self.is_on_screen():
                self.deactivate()

        super().update(game_time)

    def draw(self, sprite_batch: Any) -> None:
        """Draw the ship turned to face down the screen."""
        if not self.is_active():
            return
        texture = self._require_texture(self.texture)
        sprite_batch.draw(
            texture,
            self.position,
            self._draw_color(),
            texture.center,
            Vector2.ONE,
            math.pi,
            1,
        )