"""Items that attach to ships, and the weapons among them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from spacefighter.game_object import GameObject, GameTime
from spacefighter.projectile import Projectile
from spacefighter.trigger_type import TriggerType
from spacefighter.vector2 import Vector2


class Attachment(ABC):
    """An item that can be attached to an object at an offset."""

    @abstractmethod
    def attach_to(self, attachable: Any, offset: Vector2) -> None:
        """Attach the item to attachable at offset from its centre."""

    @abstractmethod
    def update(self, game_time: GameTime) -> None:
        """Advance the item by one frame."""

    @property
    @abstractmethod
    def key(self) -> str:
        """The name the item is looked up by."""

    @property
    @abstractmethod
    def attachment_type(self) -> str:
        """The kind of item."""


class Weapon(Attachment):
    """Base class for weapons that fire projectiles from a pool."""

    def __init__(
        self,
        key: str,
        is_attached_to_player: bool = True,
        is_active: bool = True,
        trigger_type: TriggerType = TriggerType.PRIMARY,
    ) -> None:
        self._key = key
        self.is_attached_to_player = is_attached_to_player
        self._active = is_active
        self.trigger_type = trigger_type
        self.projectile_pool: Sequence[Projectile] | None = None
        self.fire_sound: Any = None
        self.offset = Vector2.ZERO
        self._owner: GameObject | None = None

    @property
    def key(self) -> str:
        return self._key

    @property
    def attachment_type(self) -> str:
        return "Weapon"

    def attach_to(self, attachable: Any, offset: Vector2) -> None:
        self._owner = attachable
        self.offset = offset

    def update(self, game_time: GameTime) -> None:
        """Weapons do nothing per frame unless a subclass says otherwise."""

    @abstractmethod
    def fire(self, trigger_type: TriggerType) -> None:
        """Try to fire; a weapon fires only if it is active and ready."""

    def activate(self) -> None:
        self._active = True

    def deactivate(self) -> None:
        self._active = False

    def is_active(self) -> bool:
        """Return True if the weapon is switched on and its owner is active."""
        return self._active and self._owner is not None and self._owner.is_active()

    def position(self) -> Vector2:
        """Return the weapon's position on screen."""
        if self._owner is None:
            raise RuntimeError(f"weapon {self._key!r} is not attached")
        return self._owner.position + self.offset

    def get_projectile(self) -> Projectile | None:
        """Return the first inactive projectile in the pool, or None."""
        return next((p for p in self.projectile_pool or () if not p.is_active()), None)


class Blaster(Weapon):
    """A weapon that fires one projectile at a time with a cooldown between shots."""

    def __init__(
        self,
        key: str,
        is_attached_to_player: bool = True,
        is_active: bool = True,
        trigger_type: TriggerType = TriggerType.PRIMARY,
    ) -> None:
        super().__init__(key, is_attached_to_player, is_active, trigger_type)
        self.cooldown = 0.0
        self.cooldown_seconds = 0.35

    def update(self, game_time: GameTime) -> None:
        if self.cooldown > 0:
            self.cooldown -= game_time.elapsed

    def can_fire(self) -> bool:
        return self.cooldown <= 0

    def reset_cooldown(self) -> None:
        self.cooldown = 0.0

    def fire(self, trigger_type: TriggerType) -> None:
        """Fire if active, cooled down and trigger_type includes this blaster's trigger."""
        if not self.is_active() or not self.can_fire():
            return
        if not trigger_type.contains(self.trigger_type):
            return

        projectile = self.get_projectile()
        if projectile is None:
            return

        if self.fire_sound is not None:
            self.fire_sound.play()

        projectile.activate(self.position(), self.is_attached_to_player)
        self.cooldown = self.cooldown_seconds