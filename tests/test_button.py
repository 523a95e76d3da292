import pytest

from akui.button import Alignment, Button, ButtonState, ButtonStyle
from akui.geometry import Point
from akui.messages import KeyMessage, MessageId, TouchMessage, UiKey
from akui.signals import SlotHolder
from akui.widgets import Bitmap
from akui.window import WindowManager


class _Canvas:
    font_height = 12

    def __init__(self):
        self.calls = []

    def set_pen_color(self, color, engine):
        self.calls.append(("pen", color))

    def fill_rect(self, color1, color2, x, y, w, h, engine):
        self.calls.append(("fill", color1, color2, x, y, w, h))

    def mask_blt(self, pixels, x, y, w, h, engine, stride=None):
        self.calls.append(("blt", list(pixels), x, y, w, h))

    def text_out_rect(self, x, y, w, h, text, engine):
        self.calls.append(("text", x, y, w, h, text))

    def text_width(self, text):
        return 6 * len(text)


@pytest.fixture
def manager():
    return WindowManager()


@pytest.fixture
def button(manager):
    return Button(10, 20, 60, 18, None, "ok", manager=manager)


def _touch(kind, x, y):
    return TouchMessage(kind, Point(x, y))


def _recorder(button):
    holder = SlotHolder()
    events = []
    button.pressed.connect(holder, lambda: events.append("pressed"))
    button.clicked.connect(holder, lambda: events.append("clicked"))
    return events


def test_press_and_click(button):
    events = _recorder(button)
    assert button.process(_touch(MessageId.TOUCH_DOWN, 30, 25)) is True
    assert button.state == ButtonState.DOWN
    assert button.process(_touch(MessageId.TOUCH_UP, 31, 26)) is True
    assert button.state == ButtonState.UP
    assert events == ["pressed", "clicked"]


def test_release_outside_does_not_click(button):
    events = _recorder(button)
    button.process(_touch(MessageId.TOUCH_DOWN, 30, 25))
    assert button.process(_touch(MessageId.TOUCH_UP, 200, 150)) is True
    assert events == ["pressed"]
    assert button.state == ButtonState.UP


def test_touch_up_without_capture(button):
    assert button.process(_touch(MessageId.TOUCH_UP, 30, 25)) is False


def test_touch_down_outside(button):
    events = _recorder(button)
    assert button.process(_touch(MessageId.TOUCH_DOWN, 0, 0)) is False
    assert events == []
    assert button.state == ButtonState.UP


def test_edges_are_inside(button):
    assert button.process(_touch(MessageId.TOUCH_DOWN, 70, 38)) is True


def test_hidden_button_ignores_touch(button):
    button.hide()
    assert button.process(_touch(MessageId.TOUCH_DOWN, 30, 25)) is False


def test_key_messages_ignored(button):
    assert button.process(KeyMessage(MessageId.KEY_DOWN, UiKey.A, 0)) is False


def test_text_position_left(button):
    button.alignment = Alignment.LEFT
    assert button.text_position(20, 12).x == button.position.x + 4


def test_text_position_right(button):
    button.alignment = Alignment.RIGHT
    where = button.text_position(20, 12)
    assert where.x + 20 + 4 == button.position.x + button.size.x


def test_text_position_center_is_symmetric(button):
    where = button.text_position(20, 12)
    left_gap = where.x - button.position.x
    right_gap = button.position.x + button.size.x - (where.x + 20)
    assert left_gap == right_gap


def test_text_shifts_when_down(button):
    up = button.text_position(20, 12)
    button.process(_touch(MessageId.TOUCH_DOWN, 30, 25))
    assert button.text_position(20, 12) == up + Point(1, 1)


def test_load_appearance_single_style(manager):
    bmp = Bitmap(4, 6, tuple(range(24)))
    b = Button(0, 0, 1, 1, None, "x", manager=manager, image_loader=lambda name: bmp)
    b.load_appearance("btn.bmp")
    assert b.size == Point(4, 6)


def test_load_appearance_press_style_halves_height(manager):
    bmp = Bitmap(4, 6, tuple(range(24)))
    b = Button(0, 0, 1, 1, None, "x", manager=manager, image_loader=lambda name: bmp)
    b.style = ButtonStyle.PRESS
    b.load_appearance("btn.bmp")
    assert b.size == Point(4, 3)


def test_load_appearance_missing_image_keeps_size(button):
    button.image_loader = lambda name: None
    button.load_appearance("missing.bmp")
    assert button.size == Point(60, 18)
    assert button.background is None


def test_draw_down_uses_second_half_of_image(manager):
    canvas = _Canvas()
    bmp = Bitmap(2, 4, tuple(range(8)))
    b = Button(0, 0, 1, 1, None, "go", manager=manager, canvas=canvas,
               image_loader=lambda name: bmp)
    b.style = ButtonStyle.PRESS
    b.load_appearance("btn.bmp")
    b.process(_touch(MessageId.TOUCH_DOWN, 1, 1))
    b.draw()
    blt = next(c for c in canvas.calls if c[0] == "blt")
    assert blt[1] == list(range(4, 8))
    assert blt[4:] == (2, 2)


def test_draw_writes_label_in_text_color(button):
    canvas = _Canvas()
    button.canvas = canvas
    button.text_color = 0x7FFF
    button.draw()
    where = button.text_position(12, 12)
    assert ("pen", 0x7FFF) in canvas.calls
    assert canvas.calls[-1] == ("text", where.x, where.y, 60, 18, "ok")