"""Colours and line thickness shared by the widgets, loadable from a skin's INI file."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

SETTINGS_SECTION = "global settings"


def rgb15(r: int, g: int, b: int) -> int:
    """Pack 5-bit red, green and blue into a 15-bit colour."""
    return (r & 0x1F) | ((g & 0x1F) << 5) | ((b & 0x1F) << 10)


_INI_KEYS = {
    "show_calendar": "showCalendar",
    "form_frame_color": "formFrameColor",
    "form_body_color": "formBodyColor",
    "form_text_color": "formTextColor",
    "form_title_text_color": "formTitleTextColor",
    "button_text_color": "buttonTextColor",
    "spin_box_normal_color": "spinBoxNormalColor",
    "spin_box_focus_color": "spinBoxFocusColor",
    "spin_box_text_color": "spinBoxTextColor",
    "spin_box_text_highlight_color": "spinBoxTextHiLightColor",
    "spin_box_frame_color": "spinBoxFrameColor",
    "list_view_bar_color1": "listViewBarColor1",
    "list_view_bar_color2": "listViewBarColor2",
    "list_text_color": "listTextColor",
    "list_text_highlight_color": "listTextHighLightColor",
    "pop_menu_text_color": "popMenuTextColor",
    "pop_menu_text_highlight_color": "popMenuTextHighLightColor",
    "pop_menu_bar_color": "popMenuBarColor",
    "thickness": "thickness",
}


def _read_section(path: str | Path, section: str) -> dict[str, str]:
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        return {}
    values: dict[str, str] = {}
    current: str | None = None
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line[0] in ";#":
            continue
        if line.startswith("[") and line.endswith("]"):
            current = line[1:-1].strip()
            continue
        if current == section and "=" in line:
            key, _, value = line.partition("=")
            values[key.strip().lower()] = value.strip()
    return values


def _parse_int(value: str) -> int | None:
    for base in (0, 10):
        try:
            return int(value, base)
        except ValueError:
            continue
    return None


@dataclass
class UISettings:
    """Widget colours (15-bit) and frame thickness."""

    show_calendar: bool = True
    form_frame_color: int = rgb15(23, 25, 4)
    form_body_color: int = rgb15(30, 29, 22)
    form_text_color: int = rgb15(17, 12, 0)
    form_title_text_color: int = rgb15(11, 11, 11)
    button_text_color: int = rgb15(17, 12, 0)
    spin_box_normal_color: int = rgb15(0, 0, 31)
    spin_box_focus_color: int = rgb15(0, 31, 0)
    spin_box_text_color: int = rgb15(31, 31, 31)
    spin_box_text_highlight_color: int = rgb15(31, 31, 31)
    spin_box_frame_color: int = rgb15(11, 11, 11)
    list_view_bar_color1: int = rgb15(0, 11, 19)
    list_view_bar_color2: int = rgb15(0, 5, 9)
    list_text_color: int = 0
    list_text_highlight_color: int = 0
    pop_menu_text_color: int = rgb15(0, 0, 0)
    pop_menu_text_highlight_color: int = rgb15(31, 31, 31)
    pop_menu_bar_color: int = rgb15(0, 11, 19)
    thickness: int = 1

    def load_settings(self, path: str | Path) -> UISettings:
        """Override settings with those found in ``path``; missing ones stay as they are."""
        values = _read_section(path, SETTINGS_SECTION)
        for f in fields(self):
            raw = values.get(_INI_KEYS[f.name].lower())
            if raw is None:
                continue
            number = _parse_int(raw)
            if number is None:
                continue
            if f.name == "show_calendar":
                setattr(self, f.name, bool(number))
            elif f.name == "thickness":
                setattr(self, f.name, number & 0xFFFFFFFF)
            else:
                setattr(self, f.name, number & 0xFFFF)
        return self