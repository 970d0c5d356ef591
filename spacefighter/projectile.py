"""Projectiles fired by weapons."""

from __future__ import annotations

from typing import Any, ClassVar

from spacefighter.collision_type import CollisionType
from spacefighter.game_object import WHITE, GameObject, GameTime, screen_size
from spacefighter.vector2 import Vector2


class Projectile(GameObject):
    """A shot that flies in a straight line until it leaves the screen or hits something.

    The shared texture must provide ``size`` and ``center`` as vectors.
    """

    _texture: ClassVar[Any] = None

    def __init__(self) -> None:
        super().__init__()
        self.direction = -Vector2.UNIT_Y
        self.collision_radius = 9
        self.speed = 500.0
        self.damage = 1.0
        self.was_shot_by_player = True
        self.projectile_type = CollisionType.PROJECTILE

    @classmethod
    def set_texture(cls, texture: Any) -> None:
        """Set the texture shared by all projectiles."""
        Projectile._texture = texture

    def update(self, game_time: GameTime) -> None:
        """Move the projectile and deactivate it once it is well off the screen."""
        if self.is_active():
            self.translate_position(self.direction * self.speed * game_time.elapsed)

            texture = Projectile._texture
            size = texture.size if texture is not None else Vector2.ZERO
            width, height = screen_size()
            pos = self.position
            if (
                pos.y < -size.y
                or pos.x < -size.x
                or pos.y > height + size.y
                or pos.x > width + size.x
            ):
                self.deactivate()

        super().update(game_time)

    def draw(self, sprite_batch: Any) -> None:
        """Draw the projectile faded with the level's alpha."""
        if not self.is_active():
            return
        texture = Projectile._texture
        if texture is None:
            raise RuntimeError("no texture set for projectiles")
        level = GameObject.current_level()
        alpha = level.alpha() if level is not None else 1.0
        color = tuple(component * alpha for component in WHITE)
        sprite_batch.draw(texture, self.position, color, texture.center)

    def activate(self, position: Vector2, was_shot_by_player: bool = True) -> None:
        """Start the projectile at position."""
        self.was_shot_by_player = was_shot_by_player
        self.set_position(position)
        super().activate()

    def collision_type(self) -> CollisionType:
        owner = CollisionType.PLAYER if self.was_shot_by_player else CollisionType.ENEMY
        return owner | self.projectile_type

    def __str__(self) -> str:
        owner = "Player" if self.was_shot_by_player else "Enemy"
        return f"{owner} Projectile"