"""Ships: game objects with hit points that carry attached items such as weapons."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from spacefighter.game_object import GameObject, GameTime
from spacefighter.trigger_type import TriggerType
from spacefighter.vector2 import Vector2
from spacefighter.weapon import Attachment, Weapon


class Attachable(ABC):
    """An object that items can be attached to."""

    @abstractmethod
    def get_attachment(self, key: str) -> Attachment | None:
        """Return the attached item with this key, or None."""

    @abstractmethod
    def attachment_at(self, index: int) -> Attachment | None:
        """Return the attached item at this position in key order, or None."""


class Ship(GameObject, Attachable):
    """A game object that can be damaged, destroyed and fitted with attachments.

    Attachments are kept in the order of their keys.
    """

    def __init__(self) -> None:
        super().__init__()
        self.set_position(Vector2(0.0, 0.0))
        self.collision_radius = 10
        self.speed = 300.0
        self.max_hit_points = 3.0
        self.hit_points = self.max_hit_points
        self.invulnerable = False
        self._attachments: dict[str, Attachment] = {}

    def _sorted_attachments(self) -> list[Attachment]:
        return [self._attachments[key] for key in sorted(self._attachments)]

    def update(self, game_time: GameTime) -> None:
        """Update every attachment, then the ship itself."""
        for item in self._sorted_attachments():
            item.update(game_time)
        super().update(game_time)

    def hit(self, damage: float) -> None:
        """Apply damage; at zero hit points the ship is deactivated and explodes."""
        if self.invulnerable:
            return
        self.hit_points -= damage
        if self.hit_points > 0:
            return
        GameObject.deactivate(self)
        level = GameObject.current_level()
        if level is not None:
            level.spawn_explosion(self)

    def attach_item(self, item: Attachment, offset: Vector2) -> None:
        """Attach item at offset from the ship's centre, replacing any item with its key."""
        item.attach_to(self, offset)
        self._attachments[item.key] = item

    def get_attachment(self, key: str) -> Attachment | None:
        return self._attachments.get(key)

    def attachment_at(self, index: int) -> Attachment | None:
        if 0 <= index < len(self._attachments):
            return self._sorted_attachments()[index]
        return None

    def get_weapon(self, key: str) -> Weapon | None:
        """Return the attached weapon with this key, or None if there is no such weapon."""
        item = self._attachments.get(key)
        return item if isinstance(item, Weapon) else None

    def initialize(self) -> None:
        """Restore the ship to full hit points."""
        self.hit_points = self.max_hit_points

    def fire_weapons(self, trigger_type: TriggerType = TriggerType.ALL) -> None:
        """Try to fire every attached weapon with the given trigger."""
        for item in self._sorted_attachments():
            if item.attachment_type != "Weapon":
                continue
            item.fire(trigger_type)

    def __str__(self) -> str:
        return "Ship"

    def _draw_color(self) -> tuple[float, ...]:
        from spacefighter.game_object import WHITE

        level = GameObject.current_level()
        alpha = level.alpha() if level is not None else 1.0
        return tuple(component * alpha for component in WHITE)

    def _require_texture(self, texture: Any) -> Any:
        if texture is None:
            raise RuntimeError(f"no texture set for {self}")
        return texture