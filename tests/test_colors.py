from dataclasses import fields

from microui.geometry import Color
from microui.terminal.colors import (
    DESKTOP_CYAN,
    DESKTOP_PATTERN,
    SCROLL_TRACK_CHAR,
    STATUS_BAR_BG,
    ThemeColors,
    borland_theme,
    tui_theme,
)


def test_themes_are_opaque():
    for theme in (tui_theme(), borland_theme()):
        for f in fields(ThemeColors):
            assert getattr(theme, f.name).a == 255


def test_themes_differ():
    assert tui_theme() != borland_theme()


def test_theme_values_pinned():
    assert borland_theme().window_bg == Color(0, 170, 170)
    assert borland_theme().check_active == Color(255, 255, 0)
    assert tui_theme().window_bg == Color(40, 40, 50)
    assert tui_theme().scroll_thumb == Color(100, 100, 120)


def test_borland_window_matches_desktop_cyan():
    theme = borland_theme()
    assert theme.window_bg == DESKTOP_CYAN
    assert theme.panel_bg == theme.window_bg
    assert STATUS_BAR_BG == DESKTOP_CYAN


def test_borland_border_is_black():
    assert borland_theme().border == Color(0, 0, 0)


def test_text_is_white_in_both_themes():
    assert tui_theme().text == borland_theme().text == Color(255, 255, 255)


def test_pattern_and_track_share_shade():
    theme = borland_theme()
    assert theme.check_bg == DESKTOP_CYAN
    assert DESKTOP_PATTERN == SCROLL_TRACK_CHAR == "\u2591"