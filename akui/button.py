"""Push buttons that react to the touch screen."""

from __future__ import annotations

from enum import IntEnum

from akui.geometry import Point, Rect
from akui.messages import Message, MessageId, TouchMessage
from akui.signals import Signal
from akui.widgets import Bitmap, Canvas, ImageLoader
from akui.window import Window, WindowManager

BUTTON_TEXT_COLOR = 17 | (12 << 5)
"""Default button label colour (15-bit BGR)."""

TEXT_MARGIN = 4


class ButtonState(IntEnum):
    UP = 0
    DOWN = 1


class ButtonStyle(IntEnum):
    SINGLE = 0
    PRESS = 1
    TOGGLE = 2


class Alignment(IntEnum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


class Button(Window):
    """A button emitting ``pressed`` on touch-down and ``clicked`` on release inside it.

    Releasing the pen outside a pressed button emits ``released`` instead.
    """

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
        text_color: int = BUTTON_TEXT_COLOR,
    ) -> None:
        super().__init__(parent, text, manager=manager)
        self._captured = False
        self._state = ButtonState.UP
        self._size = Point(w, h)
        self._position = Point(x, y)
        self.text_color = text_color
        self.style = ButtonStyle.SINGLE
        self.alignment = Alignment.CENTER
        self.canvas = canvas
        self.image_loader = image_loader
        self._background: Bitmap | None = None
        self.clicked = Signal()
        self.pressed = Signal()
        self.released = Signal()

    @property
    def state(self) -> ButtonState:
        return self._state

    @property
    def background(self) -> Bitmap | None:
        return self._background

    def process(self, msg: Message) -> bool:
        if self.is_visible and msg.is_touch() and isinstance(msg, TouchMessage):
            return self.process_touch_message(msg)
        return False

    def _hit_rect(self) -> Rect:
        pos, size = self._position, self._size
        return Rect.from_coords(pos.x, pos.y, pos.x + size.x, pos.y + size.y)

    def process_touch_message(self, msg: TouchMessage) -> bool:
        handled = False
        if msg.id == MessageId.TOUCH_UP:
            if self._captured:
                if self._hit_rect().surrounds(msg.position):
                    self.on_clicked()
                else:
                    self.on_released()
                self._captured = False
                handled = True
            self._state = ButtonState.UP
        if msg.id == MessageId.TOUCH_DOWN:
            if self._hit_rect().surrounds(msg.position):
                self.on_pressed()
                self._captured = True
                self._state = ButtonState.DOWN
                handled = True
        return handled

    def on_pressed(self) -> None:
        """Called when the button is pressed; emits ``pressed``."""
        self.pressed.emit()

    def on_released(self) -> None:
        """Called when the pen leaves the button before release; emits ``released``."""
        self.released.emit()

    def on_clicked(self) -> None:
        """Called when the button is released inside itself; emits ``clicked``."""
        self.clicked.emit()

    def text_position(self, text_width: int, font_height: int) -> Point:
        """Where the label of ``text_width`` pixels is drawn."""
        pos, size = self._position, self._size
        y = pos.y + ((size.y - font_height) >> 1) + 1
        if self.alignment == Alignment.CENTER:
            x = pos.x + ((size.x - text_width) >> 1)
        elif self.alignment == Alignment.RIGHT:
            x = pos.x + (size.x - text_width - TEXT_MARGIN)
        else:
            x = pos.x + TEXT_MARGIN
        if self._state == ButtonState.DOWN:
            x += 1
            y += 1
        return Point(x, y)

    def draw(self) -> None:
        canvas = self.canvas
        if canvas is None:
            return
        bg = self._background
        if bg is not None and bg.valid:
            height = bg.height
            pixels = bg.pixels
            if self.style != ButtonStyle.SINGLE:
                height //= 2
                if self._state == ButtonState.DOWN:
                    pixels = pixels[bg.width * (bg.height // 2):]
            canvas.mask_blt(pixels, self._position.x, self._position.y, bg.width, height, self.engine)
        where = self.text_position(canvas.text_width(self.text), canvas.font_height)
        canvas.set_pen_color(self.text_color, self.engine)
        canvas.text_out_rect(where.x, where.y, self._size.x, self._size.y, self.text, self.engine)

    def load_appearance(self, filename: str) -> Button:
        """Load the button image and size the button to it."""
        bg = self.image_loader(filename) if self.image_loader is not None else None
        self._background = bg if bg is not None and bg.valid else None
        if self._background is not None:
            height = self._background.height
            if self.style != ButtonStyle.SINGLE:
                height //= 2
            self.set_size(Point(self._background.width, height))
        return self