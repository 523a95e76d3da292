"""Simple widgets (static text, progress bar) and the drawing interfaces they share."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol

from akui.geometry import Point
from akui.window import Window, WindowManager

FORM_TEXT_COLOR = 17 | (12 << 5)
"""Default colour of text drawn on forms (15-bit BGR)."""

PROGRESS_COLOR_1 = 0xFC00
PROGRESS_COLOR_2 = 0x800F


class Canvas(Protocol):
    """The drawing surface widgets paint on."""

    font_height: int

    def set_pen_color(self, color: int, engine: str) -> None: ...

    def fill_rect(
        self, color1: int, color2: int, x: int, y: int, w: int, h: int, engine: str
    ) -> None: ...

    def mask_blt(
        self,
        pixels: Sequence[int],
        x: int,
        y: int,
        w: int,
        h: int,
        engine: str,
        stride: int | None = None,
    ) -> None: ...

    def text_out_rect(self, x: int, y: int, w: int, h: int, text: str, engine: str) -> None: ...

    def text_width(self, text: str) -> int: ...


@dataclass(frozen=True)
class Bitmap:
    """A 15-bit image stored row by row, one pixel per entry."""

    width: int
    height: int
    pixels: Sequence[int] = field(default_factory=tuple)

    @property
    def pitch(self) -> int:
        """Bytes per row."""
        return self.width * 2

    @property
    def valid(self) -> bool:
        return len(self.pixels) > 0


ImageLoader = Callable[[str], Optional[Bitmap]]


class StaticText(Window):
    """A text label drawn inside its rectangle."""

    def __init__(
        self,
        x: int,
        y: int,
        w: int,
        h: int,
        parent: Window | None = None,
        text: str = "",
        *,
        manager: WindowManager | None = None,
        canvas: Canvas | None = None,
        text_color: int = FORM_TEXT_COLOR,
    ) -> None:
        super().__init__(parent, text, manager=manager)
        self._position = Point(x, y)
        self._size = Point(w, h)
        self._text_color = text_color
        self.canvas = canvas

    @property
    def text_color(self) -> int:
        return self._text_color

    def set_text_color(self, color: int) -> None:
        self._text_color = color

    def draw(self) -> None:
        if self.canvas is None:
            return
        self.canvas.set_pen_color(self._text_color, self.engine)
        self.canvas.text_out_rect(
            self._position.x, self._position.y, self._size.x, self._size.y, self.text, self.engine
        )

    def load_appearance(self, filename: str) -> StaticText:
        return self


class ProgressBar(Window):
    """A horizontal bar filled to a percentage of its width."""

    def __init__(
        self,
        x: int,
        y: int,
        w: int,
        h: int,
        parent: Window | None = None,
        text: str = "",
        *,
        manager: WindowManager | None = None,
        canvas: Canvas | None = None,
        image_loader: ImageLoader | None = None,
    ) -> None:
        super().__init__(parent, text, manager=manager)
        self._percent = 0
        self._bar: Bitmap | None = None
        self.canvas = canvas
        self.image_loader = image_loader
        self.set_size(Point(w, h))
        self.set_position(Point(x, y))

    @property
    def percent(self) -> int:
        return self._percent

    @property
    def bar_bitmap(self) -> Bitmap | None:
        return self._bar

    def set_percent(self, percent: int) -> None:
        self._percent = percent & 0xFF

    def bar_width(self) -> int:
        """Filled width in pixels, kept within one byte."""
        return (self._percent * self.size.x // 100) & 0xFF

    def draw(self) -> None:
        if self.canvas is None:
            return
        width = self.bar_width()
        pos = self.position
        bar = self._bar
        if bar is not None and bar.valid:
            self.canvas.mask_blt(
                bar.pixels, pos.x, pos.y, width, bar.height, self.engine, stride=bar.pitch >> 1
            )
            return
        for row in range(self.size.y):
            if row & 1:
                colors = (PROGRESS_COLOR_1, PROGRESS_COLOR_2)
            else:
                colors = (PROGRESS_COLOR_2, PROGRESS_COLOR_1)
            self.canvas.fill_rect(*colors, pos.x, pos.y + row, width, 1, self.engine)

    def load_appearance(self, filename: str) -> ProgressBar:
        """Load the bar image and take its size."""
        bar = self.image_loader(filename) if self.image_loader is not None else None
        self._bar = bar if bar is not None and bar.valid else None
        if self._bar is not None:
            self.set_size(Point(self._bar.width, self._bar.height))
        else:
            self.set_size(Point(0, 0))
        return self