"""Per-frame input state and its dispatch to the window manager."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import IntFlag
from typing import Callable

from akui.geometry import Point
from akui.messages import UI_SHIFT_L, UiKey
from akui.window import WindowManager


class Key(IntFlag):
    """Hardware key bits."""

    A = 1 << 0
    B = 1 << 1
    SELECT = 1 << 2
    START = 1 << 3
    RIGHT = 1 << 4
    LEFT = 1 << 5
    UP = 1 << 6
    DOWN = 1 << 7
    R = 1 << 8
    L = 1 << 9
    X = 1 << 10
    Y = 1 << 11
    TOUCH = 1 << 12
    LID = 1 << 13


@dataclass(frozen=True)
class InputState:
    """Keys and touch-screen state for one frame."""

    keys_held: int = 0
    keys_up: int = 0
    keys_down: int = 0
    keys_down_repeat: int = 0
    touch_pt: Point = field(default_factory=Point)
    moved_pt: Point = field(default_factory=Point)
    touch_down: bool = False
    touch_up: bool = False
    touch_held: bool = False
    touch_moved: bool = False


class InputTracker:
    """Derives touch transitions between frames and measures how long input stayed idle."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock if clock is not None else time.monotonic
        self._last = InputState()
        self._current = InputState()
        self._last_input_time = self._clock()
        self._idle_ms = 0

    @property
    def input(self) -> InputState:
        """The state produced by the latest ``update``."""
        return self._current

    @property
    def idle_ms(self) -> int:
        """Milliseconds during which the input has not changed."""
        return self._idle_ms

    def update(
        self,
        touch: Point | None,
        keys_down: int = 0,
        keys_up: int = 0,
        keys_held: int = 0,
        keys_down_repeat: int = 0,
    ) -> InputState:
        """Build this frame's state; ``touch`` at (0, 0) or ``None`` means no touch."""
        last = self._last
        touch_pt = touch if touch is not None else Point()
        moved = Point()
        touch_moved = False
        if touch_pt.x == 0 and touch_pt.y == 0:
            touch_up = last.touch_held
            if touch_up:
                touch_pt = last.touch_pt
            touch_down = False
            touch_held = False
        else:
            if not last.touch_held:
                touch_down = True
            else:
                moved = touch_pt - last.touch_pt
                touch_moved = moved.x != 0 or moved.y != 0
                touch_down = False
            touch_up = False
            touch_held = True

        state = InputState(
            keys_held=keys_held & 0xFFFFFFFF,
            keys_up=keys_up & 0xFFFFFFFF,
            keys_down=keys_down & 0xFFFFFFFF,
            keys_down_repeat=keys_down_repeat & 0xFFFFFFFF,
            touch_pt=touch_pt,
            moved_pt=moved,
            touch_down=touch_down,
            touch_up=touch_up,
            touch_held=touch_held,
            touch_moved=touch_moved,
        )
        if state == last:
            self._idle_ms = int((self._clock() - self._last_input_time) * 1000) & 0xFFFFFFFF
        else:
            self.reset_idle()
        self._last = state
        self._current = state
        return state

    def reset_idle(self) -> None:
        """Restart the idle measurement from now."""
        self._last_input_time = self._clock()
        self._idle_ms = 0


# (hardware bit, key code, whether auto-repeat also triggers it), in dispatch order
_KEY_MAP = (
    (Key.A, UiKey.A, False),
    (Key.B, UiKey.B, False),
    (Key.X, UiKey.X, False),
    (Key.Y, UiKey.Y, False),
    (Key.R, UiKey.R, False),
    (Key.L, UiKey.L, False),
    (Key.START, UiKey.START, True),
    (Key.SELECT, UiKey.SELECT, False),
    (Key.LEFT, UiKey.LEFT, True),
    (Key.RIGHT, UiKey.RIGHT, True),
    (Key.UP, UiKey.UP, True),
    (Key.DOWN, UiKey.DOWN, True),
)


def process_input(inputs: InputState, manager: WindowManager) -> bool:
    """Send this frame's events to ``manager``; stops sending once one is handled."""
    shift = UI_SHIFT_L if inputs.keys_held & Key.L else 0
    handled = False
    for key, code, repeats in _KEY_MAP:
        if inputs.keys_down & key or (repeats and inputs.keys_down_repeat & key):
            handled = handled or manager.on_key_down(code, shift)
    if inputs.keys_up & Key.L:
        handled = handled or manager.on_key_up(UiKey.L, shift)
    pt = inputs.touch_pt
    if inputs.touch_down:
        handled = handled or manager.on_touch_down(pt.x, pt.y)
    if inputs.touch_up:
        handled = handled or manager.on_touch_up(pt.x, pt.y)
    if inputs.touch_moved:
        handled = handled or manager.on_touch_move(inputs.moved_pt.x, inputs.moved_pt.y, pt)
    return handled