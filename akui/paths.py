"""Locations of the menu's system files on the memory card."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_FONT = "liberation.pcf"

_SYSTEM_FOLDER = "_nds"
_DEVICE_BY_MODE = {False: "fat", True: "sd"}


def system_dir(dsi_mode: bool = False) -> str:
    """The system directory for the given mode."""
    device = _DEVICE_BY_MODE[bool(dsi_mode)]
    return f"{device}:/{_SYSTEM_FOLDER}/"


@dataclass(frozen=True)
class SystemFileNames:
    """System file paths for one skin and one language."""

    ui_name: str
    lang_directory: str = ""
    dsi_mode: bool = False

    @property
    def system_dir(self) -> str:
        return system_dir(self.dsi_mode)

    @property
    def official_savelist(self) -> str:
        return self.system_dir + "savelist.bin"

    @property
    def custom_savelist(self) -> str:
        return self.system_dir + "gamedata.bin"

    @property
    def last_saveinfo(self) -> str:
        return self.system_dir + "lastsave.ini"

    @property
    def last_gba_saveinfo(self) -> str:
        return self.system_dir + "lastgba.ini"

    @property
    def sdcard_list(self) -> str:
        return self.system_dir + "sdlist.ini"

    @property
    def global_settings(self) -> str:
        return self.system_dir + "globalsettings.ini"

    @property
    def favorites(self) -> str:
        return self.system_dir + "favorites.ini"

    @property
    def backlight(self) -> str:
        return self.system_dir + "backlight.ini"

    @property
    def ui_directory(self) -> str:
        return self.system_dir + "ui/"

    @property
    def ui_current_directory(self) -> str:
        return self.ui_directory + self.ui_name + "/"

    def ui_file(self, name: str) -> str:
        """Path of ``name`` inside the current skin's directory."""
        return self.ui_current_directory + name

    @property
    def user_custom(self) -> str:
        return self.ui_file("custom.ini")

    @property
    def ui_settings(self) -> str:
        return self.ui_file("uisettings.ini")

    @property
    def upper_screen_bg(self) -> str:
        return self.ui_file("upper_screen.bmp")

    @property
    def lower_screen_bg(self) -> str:
        return self.ui_file("lower_screen.bmp")

    @property
    def form_title_left(self) -> str:
        return self.ui_file("title_left.bmp")

    @property
    def form_title_middle(self) -> str:
        return self.ui_file("title_bg.bmp")

    @property
    def form_title_right(self) -> str:
        return self.ui_file("title_right.bmp")

    @property
    def button2(self) -> str:
        return self.ui_file("btn2.bmp")

    @property
    def button3(self) -> str:
        return self.ui_file("btn3.bmp")

    @property
    def button4(self) -> str:
        return self.ui_file("btn4.bmp")

    @property
    def spin_button_left(self) -> str:
        return self.ui_file("spin_btn_left.bmp")

    @property
    def spin_button_right(self) -> str:
        return self.ui_file("spin_btn_right.bmp")

    @property
    def brightness_button(self) -> str:
        return self.ui_file("brightness.bmp")

    @property
    def folder_up_button(self) -> str:
        return self.ui_file("folder_up.bmp")

    @property
    def start_menu_bg(self) -> str:
        return self.ui_file("menu_bg.bmp")

    @property
    def clock_numbers(self) -> str:
        return self.ui_file("calendar/clock_numbers.bmp")

    @property
    def clock_colon(self) -> str:
        return self.ui_file("calendar/clock_colon.bmp")

    @property
    def day_numbers(self) -> str:
        return self.ui_file("calendar/day_numbers.bmp")

    @property
    def year_numbers(self) -> str:
        return self.ui_file("calendar/year_numbers.bmp")

    @property
    def card_icon_blue(self) -> str:
        return self.ui_file("card_icon_blue.bmp")

    @property
    def progress_wnd_bg(self) -> str:
        return self.ui_file("progress_wnd.bmp")

    @property
    def progress_bar_bg(self) -> str:
        return self.ui_file("progress_bar.bmp")

    @property
    def gba_frame(self) -> str:
        return self.ui_file("gbaframe.bmp")

    @property
    def ui_icons_directory(self) -> str:
        return self.ui_file("icons/")

    @property
    def language_directory(self) -> str:
        return self.system_dir + "language/"

    @property
    def language_text(self) -> str:
        return self.language_directory + self.lang_directory + "/language.txt"

    @property
    def fonts_directory(self) -> str:
        return self.system_dir + "fonts/"

    @property
    def icons_directory(self) -> str:
        return self.system_dir + "icons/"

    @property
    def cheats(self) -> str:
        return self.system_dir + "cheats/usrcheat.dat"