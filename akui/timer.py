"""A frame timer built on a free-running 16-bit hardware counter."""

from __future__ import annotations

import math
from typing import Callable

CLOCK_HZ = 33.514 * 1_000_000
"""Counter frequency in ticks per second."""

_COUNTER_SPAN = 65536
_FPS_WINDOW = 60


class Timer:
    """Tracks elapsed time and frame rate from a wrapping 16-bit counter.

    ``counter`` returns the counter's current value; ``on_overflow`` must be
    called every time the counter wraps.
    """

    def __init__(self, counter: Callable[[], int]) -> None:
        self._counter = counter
        self._overflow = 0
        self._last_time = 0.0
        self._current_time = 0.0
        self._fps = 0.0
        self._fps_counter = 0
        self._last_tick = 0

    @property
    def time(self) -> float:
        """Seconds at the latest ``update_timer``."""
        return self._current_time

    @property
    def fps(self) -> float:
        return self._fps

    def _read(self) -> int:
        return self._counter() & 0xFFFF

    def on_overflow(self) -> None:
        """Account for one wrap of the counter."""
        self._overflow += _COUNTER_SPAN

    def update_timer(self) -> float:
        """Sample the counter and return the time in seconds."""
        self._current_time = (self._overflow + self._read()) / CLOCK_HZ
        return self._current_time

    def update_fps(self) -> float:
        """Count a frame; every 61 frames recompute the frame rate."""
        previous = self._fps_counter
        self._fps_counter += 1
        if previous > _FPS_WINDOW:
            elapsed = self._current_time - self._last_time
            self._fps = self._fps_counter / elapsed if elapsed else math.inf
            self._fps_counter = 0
            self._last_time = self._current_time
        return self._fps

    def get_tick(self) -> int:
        """The current tick count, corrected for a wrap not yet accounted for."""
        tick = self._overflow + self._read()
        if tick < self._last_tick:
            tick += _COUNTER_SPAN
        self._last_tick = tick
        return tick

    def tick_to_us(self, tick: int) -> float:
        """Convert ticks to microseconds."""
        return tick / CLOCK_HZ * 1000 * 1000