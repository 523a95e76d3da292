# akui

A compact widget toolkit for a 256×192 two-screen handheld menu. It provides
geometry types, key and touch messages, a signal/slot system, a window manager
with focus and capture handling, forms, buttons, static text, progress bars,
spin boxes, UI colour settings, input tracking and a tick-based timer.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Modules

- `akui.geometry`: `Point` (also used as a size) and `Rect`. You can build a
  rectangle from two corners with `Rect.from_coords` or `Rect.from_points`.
  Rectangles support inclusive hit testing (`surrounds`), `translate_by`,
  `expand_by` / `expand_width_by` / `expand_height_by`, and corner queries.
- `akui.messages`: `MessageId`, `UiKey`, `UI_SHIFT_L`, `Message` (with
  `is_key` / `is_touch`), `KeyMessage` and `TouchMessage`.
- `akui.signals`: `Signal` and `SlotHolder`.
  - `Signal.connect(receiver, slot)` records a slot that belongs to a receiver.
  - `emit` (or calling the signal) calls the slots in connection order.
  - `SlotHolder.disconnect_all` removes every connection to a holder.
- `akui.textutil`:
  - `unicode_to_local_string` encodes UTF-16 code units as UTF-8 bytes and
    stops at the first zero unit.
  - `format_string` does printf-style formatting.
  - `binary_find` returns the index of an equivalent element in a sorted
    sequence, or `None` if there is none.
- `akui.paths`: `system_dir` and `SystemFileNames`. `SystemFileNames` gives
  the paths of save lists, settings, skin images, language text, fonts,
  icons and cheats for a given skin, language and mode.
- `akui.window`:
  - `Window` is the abstract base class. Subclasses implement `draw` and
    `load_appearance`. It also has the signals `shown`, `hidden`,
    `focus_gained`, `focus_lost`, `text_changed` and `updated`.
  - `WindowManager` keeps a stack of top-level windows, the focus, and touch
    capture.
  - `window_manager()` returns a shared manager.
- `akui.form`: `Form` lays out child windows relative to its own position.
  - It routes touch messages to its children.
  - `process_key_message` moves focus between children with the direction
    keys.
  - `on_ok` / `on_cancel` set `modal_ret`.
  - `do_modal(pump)` calls `pump` every frame until a result is set.
    `do_static(pump)` runs one frame.
- `akui.button`: `Button` with `ButtonState`, `ButtonStyle` and `Alignment`.
  - It emits `pressed` on touch-down inside the button.
  - It emits `clicked` on release inside the button, and `released` on
    release outside it.
  - `text_position` computes where the label goes.
- `akui.widgets`: `StaticText` and `ProgressBar`, plus the `Canvas` protocol,
  the `Bitmap` image type and the `ImageLoader` callable type that widgets
  draw and load images with.
- `akui.spinbox`: `SpinBox`, a form with previous/next buttons that steps
  through a list of items. It emits `changed` and `component_clicked`.
- `akui.uisettings`: `UISettings` holds widget colours and frame thickness.
  `load_settings` overrides them from the `[global settings]` section of an
  INI file. `rgb15` packs a 15-bit colour.
- `akui.userinput`: `Key` bit flags, the frozen `InputState`, and
  `InputTracker`.
  - `InputTracker` derives touch down/up/move transitions and idle time from
    raw per-frame input.
  - `process_input` sends a frame's events to a `WindowManager`.
- `akui.timer`: `Timer` turns a wrapping 16-bit counter running at 33.514 MHz
  into seconds, frames per second, ticks and microseconds.

## Example

```python
from akui.button import Button
from akui.form import Form
from akui.window import WindowManager

manager = WindowManager()
form = Form(0, 0, 256, 192, None, "main", manager=manager)
ok = Button(10, 10, 46, 18, form, "OK", manager=manager)
form.add_child_window(ok)

clicks = []
ok.clicked.connect(form, lambda: clicks.append("ok"))

manager.add_window(form)
manager.on_touch_down(20, 15)
manager.on_touch_up(20, 15)
assert clicks == ["ok"]
```

## What this package does not do

The package computes layout, state and event routing. The program that uses
it supplies everything that touches a device:

- **Drawing.** Widgets paint through a `Canvas` object that you pass in. When
  no canvas is given, `draw()` does nothing.
- **Images.** Images come from an `ImageLoader` callable that returns a
  `Bitmap`. The package decodes no image files itself.
- **Input.** Touch points and key bits must be fed to
  `InputTracker.update`. The package reads no input device itself.
- **Timing.** `Timer` reads its counter through a callable that you provide,
  and it expects `on_overflow` to be called whenever the counter wraps.
- **Main loop.** There is no application or main loop. The frame loop of
  `Form.do_modal` runs whatever `pump` callable you give it.