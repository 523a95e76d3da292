"""A spin box: a value picked from a list with previous/next buttons."""

from __future__ import annotations

from typing import Protocol

from akui.button import Button
from akui.form import Form
from akui.geometry import Point
from akui.paths import SystemFileNames
from akui.signals import Signal
from akui.uisettings import UISettings, rgb15
from akui.widgets import Canvas, ImageLoader, StaticText
from akui.window import Window, WindowManager

_DEFAULT_FONT_HEIGHT = 12
_BUTTON_SIZE = 18


class _FrameCanvas(Canvas, Protocol):
    def frame_rect(self, x: int, y: int, w: int, h: int, thickness: int, engine: str) -> None: ...


def _u8(value: int) -> int:
    return value & 0xFF


def _div_trunc(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class SpinBox(Form):
    """Shows one item of a list; the side buttons step through the list."""

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
        canvas: _FrameCanvas | None = None,
        image_loader: ImageLoader | None = None,
        settings: UISettings | None = None,
        paths: SystemFileNames | None = None,
    ) -> None:
        super().__init__(x, y, w, h, parent, text, manager=manager)
        self.canvas = canvas
        self.paths = paths
        self.settings = settings if settings is not None else UISettings()
        self._items: list[str] = []
        self._selected_item_id = 0
        self.component_clicked = Signal()
        self.changed = Signal()

        def make_button() -> Button:
            return Button(
                0, 0, 0, 0, self, "",
                manager=self.manager,
                canvas=canvas,
                image_loader=image_loader,
                text_color=self.settings.button_text_color,
            )

        self._prev_button = make_button()
        self._next_button = make_button()
        self._item_text = StaticText(
            0, 0, 0, 0, self, "spinbox",
            manager=self.manager,
            canvas=canvas,
            text_color=self.settings.form_text_color,
        )
        self._normal_color = self.settings.spin_box_normal_color
        self._focused_color = self.settings.spin_box_focus_color
        self._frame_color = self.settings.spin_box_frame_color
        self._item_text.set_text_color(self.settings.spin_box_text_color)

        self._prev_button.pressed.connect(self, self.select_prev)
        self._prev_button.pressed.connect(self, self.on_component_clicked)
        self._next_button.pressed.connect(self, self.select_next)
        self._next_button.pressed.connect(self, self.on_component_clicked)

        self.add_child_window(self._item_text)
        self.add_child_window(self._prev_button)
        self.add_child_window(self._next_button)

        self._item_text.set_text_color(rgb15(31, 31, 31))

        self._prev_button.set_size(Point(_BUTTON_SIZE, _BUTTON_SIZE))
        self._prev_button.set_relative_position(Point(0, 0))

        cx = _u8(self._prev_button.window_rectangle().width())
        self._item_text.set_relative_position(Point(cx, 0))
        self._item_text.set_size(Point(w - _BUTTON_SIZE * 2, _BUTTON_SIZE))

        cx = _u8(self.window_rectangle().width() - self._next_button.window_rectangle().width())
        self._next_button.set_size(Point(_BUTTON_SIZE, _BUTTON_SIZE))
        self._next_button.set_relative_position(Point(cx, 0))

        self.select_item(0)

    @property
    def items(self) -> tuple[str, ...]:
        return tuple(self._items)

    @property
    def selected_item_id(self) -> int:
        return self._selected_item_id

    @property
    def prev_button(self) -> Button:
        return self._prev_button

    @property
    def next_button(self) -> Button:
        return self._next_button

    @property
    def item_text(self) -> StaticText:
        return self._item_text

    def _font_height(self) -> int:
        return self.canvas.font_height if self.canvas is not None else _DEFAULT_FONT_HEIGHT

    def _text_width(self, text: str) -> int:
        return self.canvas.text_width(text) if self.canvas is not None else 0

    def select_item(self, item_id: int) -> None:
        """Select the item at ``item_id``; out-of-range ids are remembered but show nothing."""
        self._selected_item_id = item_id & 0xFFFFFFFF
        if self._selected_item_id >= len(self._items):
            return
        self._item_text.set_text(self._items[self._selected_item_id])
        self.arrange_button()
        self.arrange_text()
        self.arrange_children()
        self.changed(self)

    def select_next(self) -> None:
        if self._selected_item_id == len(self._items) - 1:
            return
        self.select_item(self._selected_item_id + 1)

    def select_prev(self) -> None:
        if self._selected_item_id == 0:
            return
        self.select_item(self._selected_item_id - 1)

    def insert_item(self, item: str, position: int) -> None:
        """Insert ``item`` before ``position``; positions past the end are ignored."""
        if not 0 <= position <= len(self._items):
            return
        self._items.insert(position, item)

    def remove_item(self, position: int) -> None:
        """Remove the item at ``position``; out-of-range positions are ignored."""
        if not 0 <= position < len(self._items):
            return
        del self._items[position]

    def on_component_clicked(self) -> None:
        self.component_clicked(self)

    def arrange_button(self) -> None:
        """Stretch the buttons to the box height and place them at its edges."""
        size = self.size
        prev, nxt = self._prev_button, self._next_button
        prev.set_size(Point(prev.size.x, size.y))
        prev.set_relative_position(Point(0, _div_trunc(size.y - prev.size.y, 2)))

        x = _u8(prev.size.x)
        self._item_text.set_relative_position(
            Point(x, _div_trunc(size.y - self._font_height(), 2))
        )

        x = _u8(size.x - nxt.size.x)
        nxt.set_size(Point(nxt.size.x, size.y))
        nxt.set_relative_position(Point(x, size.y - nxt.size.y))

    def arrange_text(self) -> None:
        """Centre the selected item's text in the box."""
        width = 0
        if self._items and self._selected_item_id < len(self._items):
            width = self._text_width(self._items[self._selected_item_id])
        width = min(width, self._item_text.size.x)
        height = self._font_height()
        self._item_text.set_relative_position(
            Point((self.size.x - width) >> 1, (self.size.y - height) >> 1)
        )

    def _arrange(self) -> None:
        self.arrange_button()
        self.arrange_text()
        self.arrange_children()

    def _on_resize(self) -> None:
        self._arrange()

    def _on_move(self) -> None:
        self._arrange()

    def draw(self) -> None:
        bar_color = self._normal_color
        if self.is_active():
            bar_color = self._focused_color
            self._item_text.set_text_color(self.settings.spin_box_text_highlight_color)
        else:
            self._item_text.set_text_color(self.settings.spin_box_text_color)

        canvas = self.canvas
        if canvas is not None:
            prev, nxt = self._prev_button, self._next_button
            body_x = _u8(prev.position.x + prev.size.x)
            fill_width = _u8(self.window_rectangle().size.x - nxt.size.x - prev.size.x)
            canvas.set_pen_color(bar_color, self.engine)
            canvas.fill_rect(
                bar_color, bar_color, body_x, self.position.y, fill_width, prev.size.y, self.engine
            )
            canvas.set_pen_color(self._frame_color, self.engine)
            canvas.frame_rect(
                body_x, self.position.y, fill_width, prev.size.y,
                self.settings.thickness, self.engine,
            )

        self._prev_button.draw()
        self._item_text.draw()
        self._next_button.draw()

    def load_appearance(self, filename: str) -> SpinBox:
        """Load the arrow button images of the current skin."""
        if self.paths is not None:
            self._prev_button.load_appearance(self.paths.spin_button_left)
            self._next_button.load_appearance(self.paths.spin_button_right)
        return self