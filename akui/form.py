"""Forms: windows that hold and lay out child windows."""

from __future__ import annotations

from typing import Callable

from akui.geometry import Point
from akui.messages import KeyMessage, Message, MessageId, UiKey
from akui.window import Window, WindowManager

SCREEN_WIDTH = 256
SCREEN_HEIGHT = 192

ID_OK = 1
ID_CANCEL = 0


def _div_trunc(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class Form(Window):
    """A window with children placed relative to its own position."""

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
    ) -> None:
        self._children: list[Window] = []
        super().__init__(parent, text, manager=manager)
        self._size = Point(w, h)
        self._position = Point(x, y)
        self._modal_ret: int | None = None

    @property
    def children(self) -> list[Window]:
        return list(self._children)

    @property
    def modal_ret(self) -> int | None:
        """The result set by ``on_ok``/``on_cancel``, or ``None`` while pending."""
        return self._modal_ret

    def add_child_window(self, window: Window) -> Form:
        self._children.append(window)
        window.set_position(self._position + window.relative_position)
        return self

    def remove_child_window(self, window: Window) -> Form:
        self._children = [c for c in self._children if c is not window]
        return self

    def arrange_children(self) -> Form:
        for child in self._children:
            child.set_position(self._position + child.relative_position)
        return self

    def draw(self) -> None:
        for child in self._children:
            child.render()

    def process(self, msg: Message) -> bool:
        handled = False
        if self.is_visible and msg.is_touch():
            for child in self._children:
                if child.process(msg):
                    handled = True
                    break
        if not handled:
            handled = super().process(msg)
        return handled

    def process_key_message(self, msg: KeyMessage) -> bool:
        """Move the focus between children with the direction keys."""
        if msg.id != MessageId.KEY_DOWN:
            return False
        if not UiKey.RIGHT <= msg.key_code <= UiKey.DOWN:
            return False
        children = self._children
        count = len(children)
        forward = msg.key_code in (UiKey.DOWN, UiKey.RIGHT)
        i = 0
        while i < count:
            if children[i].is_focused():
                if forward:
                    i += 1
                    if i == count:
                        i = 0
                else:
                    if i == 0:
                        i = count
                    i -= 1
                if children[i].is_visible:
                    self.manager.set_focused_window(children[i])
                    return True
            i += 1
        if children and children[0].is_visible:
            self.manager.set_focused_window(children[0])
            return True
        return False

    def window_below(self, p: Point) -> Window | None:
        found = super().window_below(p)
        if found is not None:
            for child in reversed(self._children):
                below = child.window_below(p)
                if below is not None:
                    return below
        return found

    def _on_resize(self) -> None:
        self.arrange_children()

    def _on_move(self) -> None:
        self.arrange_children()

    def on_ok(self) -> None:
        self._modal_ret = ID_OK

    def on_cancel(self) -> None:
        self._modal_ret = ID_CANCEL

    def center_screen(self) -> None:
        self._position = Point(
            _div_trunc(SCREEN_WIDTH - self._size.x, 2),
            _div_trunc(SCREEN_HEIGHT - self._size.y, 2),
        )

    def is_active(self) -> bool:
        """True if the form or any of its children has the focus."""
        return self.is_focused() or any(c.is_focused() for c in self._children)

    def disable_focus(self) -> Form:
        for child in self._children:
            child.disable_focus()
        super().disable_focus()
        return self

    def do_modal(self, pump: Callable[[], None]) -> int | None:
        """Show the form on top and run ``pump`` each frame until it has a result."""
        self.manager.add_window(self)
        self.show()
        while True:
            pump()
            self.manager.update()
            if self._modal_ret is not None:
                break
        self.manager.remove_window(self)
        return self._modal_ret

    def do_static(self, pump: Callable[[], None]) -> int | None:
        """Show the form on top and run a single frame."""
        self.manager.add_window(self)
        self.show()
        pump()
        self.manager.update()
        return self._modal_ret