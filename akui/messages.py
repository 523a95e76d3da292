"""Messages delivered to windows: key presses and touch-screen events."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from akui.geometry import Point


class MessageId(IntEnum):
    """Identifiers of all messages; ``*_START``/``*_END`` bracket each kind."""

    KEY_MESSAGE_START = 0
    KEY_DOWN = 1
    KEY_UP = 2
    KEY_MESSAGE_END = 3
    TOUCH_MESSAGE_START = 4
    TOUCH_MOVE = 5
    TOUCH_DOWN = 6
    TOUCH_UP = 7
    TOUCH_MESSAGE_END = 8


class UiKey(IntEnum):
    """Key codes carried by key messages."""

    A = 1
    B = 2
    SELECT = 3
    START = 4
    RIGHT = 5
    LEFT = 6
    UP = 7
    DOWN = 8
    R = 9
    L = 10
    X = 11
    Y = 12
    TOUCH = 13
    LID = 14


UI_SHIFT_L = 1
"""Shift flag set while the left shoulder button is held."""


@dataclass(frozen=True)
class Message:
    """A message with an identifier."""

    id: MessageId

    def is_key(self) -> bool:
        """True for key messages."""
        return MessageId.KEY_MESSAGE_START < self.id < MessageId.KEY_MESSAGE_END

    def is_touch(self) -> bool:
        """True for touch messages."""
        return MessageId.TOUCH_MESSAGE_START < self.id < MessageId.TOUCH_MESSAGE_END


@dataclass(frozen=True)
class KeyMessage(Message):
    """A key press or release, with the shift state at the time."""

    key_code: int = 0
    shift: int = 0


@dataclass(frozen=True)
class TouchMessage(Message):
    """A touch-screen event at a screen position."""

    position: Point = field(default_factory=Point)

    def x(self) -> int:
        return self.position.x

    def y(self) -> int:
        return self.position.y