"""State of an Xbox-style game controller."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum, auto
from typing import Any

from spacefighter.vector2 import Vector2


class ButtonState(Enum):
    """Whether a button is held down or not."""

    PRESSED = auto()
    RELEASED = auto()


class Button(Enum):
    """The buttons of an Xbox controller."""

    A = auto()
    B = auto()
    X = auto()
    Y = auto()
    START = auto()
    BACK = auto()
    LEFT_STICK = auto()
    LEFT_SHOULDER = auto()
    RIGHT_STICK = auto()
    RIGHT_SHOULDER = auto()
    DPAD_UP = auto()
    DPAD_DOWN = auto()
    DPAD_LEFT = auto()
    DPAD_RIGHT = auto()


@dataclass
class GamePadDPad:
    """The directions of the directional pad that are pressed."""

    up: ButtonState = ButtonState.RELEASED
    down: ButtonState = ButtonState.RELEASED
    left: ButtonState = ButtonState.RELEASED
    right: ButtonState = ButtonState.RELEASED


@dataclass
class GamePadTriggers:
    """How far the left and right triggers are pulled."""

    left: float = 0.0
    right: float = 0.0


@dataclass
class GamePadThumbSticks:
    """Positions of the left and right thumbsticks."""

    left: Vector2 = Vector2.ZERO
    right: Vector2 = Vector2.ZERO


@dataclass
class GamePadButtons:
    """Whether each face, menu, stick and shoulder button is pressed."""

    a: ButtonState = ButtonState.RELEASED
    b: ButtonState = ButtonState.RELEASED
    x: ButtonState = ButtonState.RELEASED
    y: ButtonState = ButtonState.RELEASED
    start: ButtonState = ButtonState.RELEASED
    back: ButtonState = ButtonState.RELEASED
    left_stick: ButtonState = ButtonState.RELEASED
    left_shoulder: ButtonState = ButtonState.RELEASED
    right_stick: ButtonState = ButtonState.RELEASED
    right_shoulder: ButtonState = ButtonState.RELEASED


_BUTTON_FIELDS: dict[Button, tuple[str, str]] = {
    Button.A: ("buttons", "a"),
    Button.B: ("buttons", "b"),
    Button.X: ("buttons", "x"),
    Button.Y: ("buttons", "y"),
    Button.START: ("buttons", "start"),
    Button.BACK: ("buttons", "back"),
    Button.LEFT_STICK: ("buttons", "left_stick"),
    Button.LEFT_SHOULDER: ("buttons", "left_shoulder"),
    Button.RIGHT_STICK: ("buttons", "right_stick"),
    Button.RIGHT_SHOULDER: ("buttons", "right_shoulder"),
    Button.DPAD_UP: ("dpad", "up"),
    Button.DPAD_DOWN: ("dpad", "down"),
    Button.DPAD_LEFT: ("dpad", "left"),
    Button.DPAD_RIGHT: ("dpad", "right"),
}


@dataclass
class GamePadState:
    """The current state of one controller: buttons, sticks, triggers and pad."""

    is_connected: bool = False
    buttons: GamePadButtons = field(default_factory=GamePadButtons)
    thumbsticks: GamePadThumbSticks = field(default_factory=GamePadThumbSticks)
    triggers: GamePadTriggers = field(default_factory=GamePadTriggers)
    dpad: GamePadDPad = field(default_factory=GamePadDPad)
    joystick: Any = None

    def is_button_down(self, button: Button) -> bool:
        """Return True if the button is pressed."""
        location = _BUTTON_FIELDS.get(button)
        if location is None:
            return False
        group, name = location
        return getattr(getattr(self, group), name) is ButtonState.PRESSED

    def is_button_up(self, button: Button) -> bool:
        """Return True if the button is not pressed."""
        return not self.is_button_down(button)

    def reset(self) -> None:
        """Release every button and zero both triggers; thumbsticks are left as they are."""
        for group in (self.buttons, self.dpad):
            for item in fields(group):
                setattr(group, item.name, ButtonState.RELEASED)
        self.triggers.left = 0.0
        self.triggers.right = 0.0