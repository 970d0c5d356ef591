"""Explosion animations shown when ships are destroyed."""

from __future__ import annotations

import logging
import math
import random
from typing import Any

from spacefighter.game_object import WHITE, GameTime
from spacefighter.vector2 import Vector2

_log = logging.getLogger(__name__)


class Explosion:
    """An explosion animation played at a position with a random rotation.

    The animation must provide ``update(game_time)``, ``frame(index)`` returning
    an object with ``center``, a settable ``loop_count``, ``play()`` and
    ``is_playing()``; the sound, if any, must provide ``play()``.
    """

    def __init__(
        self,
        animation: Any = None,
        sound: Any = None,
        rng: random.Random | None = None,
    ) -> None:
        self.animation = animation
        self.sound = sound
        self.position = Vector2.ZERO
        self.rotation = 0.0
        self.scale = 1.0
        self._rng = rng if rng is not None else random.Random()

    def update(self, game_time: GameTime) -> None:
        """Advance the animation."""
        if self.animation is None:
            raise RuntimeError("no animation set for explosion")
        self.animation.update(game_time)

    def draw(self, sprite_batch: Any) -> None:
        """Draw the current animation frame while the explosion is playing."""
        if not self.is_active():
            return
        center = self.animation.frame(0).center
        sprite_batch.draw(
            self.animation,
            self.position,
            WHITE,
            center,
            Vector2.ONE * self.scale,
            self.rotation,
        )

    def activate(self, position: Vector2, scale: float = 1.0) -> None:
        """Start the explosion at position, playing its animation once."""
        if self.animation is None:
            raise RuntimeError("no animation set for explosion")
        self.position = position
        self.scale = scale
        self.rotation = self._rng.random() * 2 * math.pi
        self.animation.loop_count = 0
        self.animation.play()
        if self.sound is not None:
            self.sound.play()
        _log.info("Ship destroyed!")

    def is_active(self) -> bool:
        """Return True while the animation is playing."""
        return self.animation is not None and self.animation.is_playing()