"""Base window class and the window manager that routes input to windows."""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from dataclasses import dataclass

from akui.geometry import Point, Rect
from akui.messages import KeyMessage, Message, MessageId, TouchMessage
from akui.signals import Signal, SlotHolder


class Window(SlotHolder, ABC):
    """A rectangular on-screen element that draws itself and handles messages.

    Besides the overridable hooks, every window announces its life-cycle
    events through signals: ``shown``, ``hidden``, ``focus_gained``,
    ``focus_lost``, ``text_changed`` and ``updated``.
    """

    def __init__(
        self,
        parent: Window | None = None,
        text: str = "",
        *,
        manager: WindowManager | None = None,
    ) -> None:
        super().__init__()
        self.parent = parent
        self._text = text
        self._size = Point(0, 0)
        self._position = Point(0, 0)
        self._relative_position = Point(0, 0)
        self._visible = True
        self._size_set_by_user = False
        self._focusable = True
        self.engine = "main"
        self._manager = manager if manager is not None else window_manager()
        self.shown = Signal()
        self.hidden = Signal()
        self.focus_gained = Signal()
        self.focus_lost = Signal()
        self.text_changed = Signal()
        self.updated = Signal()

    # -- attributes -------------------------------------------------------

    @property
    def manager(self) -> WindowManager:
        return self._manager

    @property
    def text(self) -> str:
        """The window's label or title."""
        return self._text

    @property
    def size(self) -> Point:
        return self._size

    @property
    def position(self) -> Point:
        """Position in screen coordinates."""
        return self._position

    @property
    def relative_position(self) -> Point:
        """Position relative to the containing form."""
        return self._relative_position

    @property
    def is_visible(self) -> bool:
        return self._visible

    @property
    def is_focusable(self) -> bool:
        return self._focusable

    @property
    def size_set_by_user(self) -> bool:
        return self._size_set_by_user

    # -- geometry ---------------------------------------------------------

    def set_window_rectangle(self, rect: Rect) -> Window:
        self.set_size(rect.size)
        self.set_position(rect.position)
        return self

    def window_rectangle(self) -> Rect:
        return Rect.from_points(self._position, self._position + self._size)

    def set_text(self, text: str) -> Window:
        self._text = text
        self._on_text_changed()
        return self

    def set_size(self, size: Point) -> Window:
        self._size = size
        self._on_resize()
        self._size_set_by_user = True
        return self

    def set_position(self, position: Point) -> Window:
        self._position = position
        self._on_move()
        return self

    def set_relative_position(self, position: Point) -> Window:
        self._relative_position = position
        return self

    # -- focus ------------------------------------------------------------

    def is_focused(self) -> bool:
        return self._manager.focused_window is self

    def enable_focused(self) -> Window:
        self._on_gained_focus()
        return self

    def disable_focused(self) -> Window:
        self._on_lost_focus()
        return self

    def disable_focus(self) -> Window:
        """Make this window unable to take the focus."""
        self._focusable = False
        return self

    # -- hierarchy --------------------------------------------------------

    def window_below(self, p: Point) -> Window | None:
        """The window under ``p``, or ``None``."""
        if self._visible and self.window_rectangle().surrounds(p):
            return self
        return None

    def does_hierarchy_contain(self, window: Window | None) -> bool:
        return window is self

    def top_level_window(self) -> Window:
        window = self
        while window.parent is not None:
            window = window.parent
        return window

    # -- visibility and rendering -----------------------------------------

    def show(self) -> Window:
        self._visible = True
        self._on_show()
        return self

    def hide(self) -> Window:
        self._visible = False
        self._on_hide()
        return self

    def process(self, msg: Message) -> bool:
        """Handle ``msg``; return True if it was consumed."""
        return False

    def render(self) -> Window:
        if self._visible:
            self.draw()
        return self

    def update(self) -> None:
        """Advance per-frame state and emit ``updated``."""
        self.updated.emit()

    @abstractmethod
    def draw(self) -> None:
        """Draw the window."""

    @abstractmethod
    def load_appearance(self, filename: str) -> Window:
        """Load this window's look from ``filename``."""

    # -- hooks for subclasses ---------------------------------------------

    def _on_show(self) -> None:
        self.shown.emit()

    def _on_hide(self) -> None:
        self.hidden.emit()

    def _on_gained_focus(self) -> None:
        self.focus_gained.emit()

    def _on_lost_focus(self) -> None:
        self.focus_lost.emit()

    def _on_resize(self) -> None:
        pass

    def _on_move(self) -> None:
        pass

    def _on_text_changed(self) -> None:
        self.text_changed.emit()


@dataclass
class _WindowRec:
    window: Window | None
    focused: Window | None = None


class WindowManager:
    """A stack of top-level windows; only the topmost one receives input."""

    def __init__(self) -> None:
        self._background: list[_WindowRec] = []
        self._current = _WindowRec(None)
        self._focused: Window | None = None
        self._window_below_pen: Window | None = None
        self._captured: Window | None = None

    @property
    def focused_window(self) -> Window | None:
        return self._focused

    @property
    def current_window(self) -> Window | None:
        return self._current.window

    @property
    def background_windows(self) -> list[Window]:
        return [rec.window for rec in self._background if rec.window is not None]

    @property
    def window_below_pen(self) -> Window | None:
        return self._window_below_pen

    def set_focused_window(self, window: Window | None) -> None:
        if window is self._focused:
            return
        if window is not None and not window.is_focusable:
            return
        if self._focused is not None:
            self._focused.disable_focused()
        self._focused = window
        if window is not None:
            window.enable_focused()

    def add_window(self, window: Window) -> WindowManager:
        """Put ``window`` on top, remembering the focus of the one below."""
        if self._current.window is not None:
            self._current.focused = self._focused
            self._background.append(self._current)
        self._current = _WindowRec(window)
        self.set_focused_window(window)
        self._update_background()
        return self

    def remove_window(self, window: Window) -> WindowManager:
        """Remove ``window``; if it was on top, restore the window below it."""
        if window is self._current.window:
            if not self._background:
                self._current = _WindowRec(None)
            else:
                self._current = self._background.pop()
                self.set_focused_window(self._current.focused)
        else:
            for rec in self._background:
                if rec.window is window:
                    self._background.remove(rec)
                    break
        if self._focused is not None and window.does_hierarchy_contain(self._focused):
            self._focused = self._current.window
        self._update_background()
        return self

    def update(self) -> WindowManager:
        window = self._current.window
        if window is not None:
            window.update()
            window.render()
        return self

    def _update_background(self) -> None:
        windows = self.background_windows
        for window in windows:
            window.update()
        for window in windows:
            window.render()
        self.update()

    def process(self, msg: Message) -> bool:
        """Hand ``msg`` to the topmost window."""
        window = self._current.window
        if window is None:
            return False
        return window.process(msg)

    def _check_for_window_below_pen(self, point: Point) -> None:
        self._window_below_pen = None
        window = self._current.window
        if window is not None and window.is_visible:
            self._window_below_pen = window.window_below(point)

    def _update_focus_if_necessary(self) -> None:
        below = self._window_below_pen
        if below is not self._focused:
            self.set_focused_window(below)
        if below is not None and not below.is_focusable:
            self._captured = below

    def _process_touch_message(self, msg: TouchMessage) -> bool:
        if self._window_below_pen is not None:
            return self._window_below_pen.process(msg)
        return self.process(msg)

    def on_key_down(self, key_code: int, shift: int) -> bool:
        return self.process(KeyMessage(MessageId.KEY_DOWN, key_code, shift))

    def on_key_up(self, key_code: int, shift: int) -> bool:
        return self.process(KeyMessage(MessageId.KEY_UP, key_code, shift))

    def on_touch_down(self, x: int, y: int) -> bool:
        self._captured = None
        point = Point(x, y)
        self._check_for_window_below_pen(point)
        handled = self._process_touch_message(TouchMessage(MessageId.TOUCH_DOWN, point))
        self._update_focus_if_necessary()
        return handled

    def on_touch_up(self, x: int, y: int) -> bool:
        point = Point(x, y)
        self._check_for_window_below_pen(point)
        msg = TouchMessage(MessageId.TOUCH_UP, point)
        if self._captured is not None:
            captured, self._captured = self._captured, None
            return captured.process(msg)
        if self._focused is not None and self._window_below_pen is not self._focused:
            return self._focused.process(msg)
        return self._process_touch_message(msg)

    def on_touch_move(self, x: int, y: int, pen: Point) -> bool:
        """Dispatch a move by ``(x, y)``; ``pen`` is the current touch point."""
        msg = TouchMessage(MessageId.TOUCH_MOVE, Point(x, y))
        self._check_for_window_below_pen(pen)
        return self._process_touch_message(msg)


@functools.lru_cache(maxsize=None)
def window_manager() -> WindowManager:
    """The shared window manager."""
    return WindowManager()