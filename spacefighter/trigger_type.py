"""Bit-mask triggers that decouple weapons from input."""

from __future__ import annotations

from enum import IntFlag


class TriggerType(IntFlag):
    """A combination of triggers that can fire a weapon."""

    NONE = 0
    PRIMARY = 1 << 0
    SECONDARY = 1 << 1
    SPECIAL = 1 << 2
    ALL = 0xFFFF

    def contains(self, other: TriggerType) -> bool:
        """Return True if this trigger shares at least one bit with other."""
        return (int(self) & int(other)) > 0