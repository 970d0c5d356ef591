"""Particles, and the emitters, initializers, updaters and renderers that drive them."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from spacefighter.vector2 import Vector2

_log = logging.getLogger(__name__)

_WHITE = (1.0, 1.0, 1.0, 1.0)


@dataclass
class Particle:
    """A basic particle that moves with a fixed velocity until its life runs out."""

    position: Vector2 = Vector2.ZERO
    velocity: Vector2 = Vector2.ZERO
    color: Any = _WHITE
    scale: float = 1.0
    life_span: float = 0.0
    life_remaining: float = 0.0
    life_percentage: float = 0.0

    def is_active(self) -> bool:
        """Return True while the particle has life remaining."""
        return self.life_remaining > 0

    def initialize(self, position: Vector2) -> None:
        """Place the particle and restore its full life span."""
        self.position = position
        self.life_remaining = self.life_span

    def update(self, elapsed: float) -> None:
        """Age the particle by elapsed seconds and move it along its velocity."""
        self.life_remaining = max(self.life_remaining - elapsed, 0.0)
        self.life_percentage = (
            self.life_remaining / self.life_span if self.life_span else 0.0
        )
        self.position = self.position + self.velocity * elapsed


class ParticleInitializer:
    """Gives a particle its life span, velocity, scale and color before it starts."""

    def __init__(self, color: Any = _WHITE, scale: float = 1.0) -> None:
        self.color = color
        self.scale = scale
        self.life_span = 0.5
        self.velocity = Vector2.UNIT_Y * 50

    def initialize(self, particle: Particle, position: Vector2) -> None:
        """Configure the particle and start it at position."""
        particle.life_span = self.life_span
        particle.velocity = self.velocity
        particle.scale = self.scale
        particle.color = self.color
        particle.initialize(position)


class ParticleEmitter:
    """Starts inactive particles from a pool at a steady rate."""

    def __init__(
        self,
        initializer: ParticleInitializer,
        pool: Iterable[Particle] | None = None,
        position: Vector2 = Vector2.ZERO,
        max_particles_per_second: int = 100,
    ) -> None:
        self.initializer = initializer
        self.pool = pool
        self.position = position
        self.max_particles_per_second = max_particles_per_second
        self.remaining_particles = 0.0

    def emit(self, amount: float, elapsed: float) -> None:
        """Emit particles; amount between 0 and 1 scales the maximum rate."""
        wanted = amount * self.max_particles_per_second * elapsed
        count = int(wanted)
        self.remaining_particles += wanted - count
        if count <= 0:
            return
        if self.pool is None:
            raise RuntimeError("no particle pool set for emitter")

        for emitted in range(count):
            particle = next((p for p in self.pool if not p.is_active()), None)
            if particle is None:
                self.remaining_particles += count - emitted
                return
            self.initializer.initialize(particle, self.position)


class ParticleRenderer:
    """Draws a particle as a texture centred on its position."""

    def __init__(self, texture: Any = None) -> None:
        self.texture = texture

    def draw(self, particle: Particle, sprite_batch: Any) -> None:
        """Draw the particle with its color and scale, if a texture is set."""
        if self.texture is None:
            _log.warning("No texture set for particle renderer!")
            return
        sprite_batch.draw(
            self.texture,
            particle.position,
            particle.color,
            self.texture.center,
            Vector2.ONE * particle.scale,
        )


class ParticleUpdater:
    """Advances a particle by one frame."""

    def update(self, particle: Particle, elapsed: float) -> None:
        """Update the particle by elapsed seconds."""
        particle.update(elapsed)