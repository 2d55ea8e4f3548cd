"""Colour themes and fixed colours for terminal rendering."""

from __future__ import annotations

from dataclasses import dataclass

from ..geometry import Color


@dataclass(frozen=True)
class ThemeColors:
    """The set of colours a theme assigns to UI elements."""

    text: Color
    border: Color
    window_bg: Color
    window_title: Color
    window_border: Color
    title_text: Color
    panel_bg: Color
    button: Color
    button_hover: Color
    button_active: Color
    base: Color
    base_hover: Color
    base_focus: Color
    check_bg: Color
    check_active: Color
    scroll_base: Color
    scroll_thumb: Color


def tui_theme() -> ThemeColors:
    """A high-contrast dark theme for terminals."""
    return ThemeColors(
        text=Color(255, 255, 255),
        border=Color(100, 100, 100),
        window_bg=Color(40, 40, 50),
        window_title=Color(60, 60, 80),
        window_border=Color(80, 80, 100),
        title_text=Color(255, 255, 255),
        panel_bg=Color(30, 30, 40),
        button=Color(70, 70, 90),
        button_hover=Color(90, 90, 120),
        button_active=Color(110, 110, 150),
        base=Color(50, 50, 60),
        base_hover=Color(60, 60, 70),
        base_focus=Color(70, 70, 80),
        check_bg=Color(60, 60, 70),
        check_active=Color(80, 180, 80),
        scroll_base=Color(50, 50, 60),
        scroll_thumb=Color(100, 100, 120),
    )


def borland_theme() -> ThemeColors:
    """A classic blue and cyan text-mode theme."""
    return ThemeColors(
        text=Color(255, 255, 255),
        border=Color(0, 0, 0),
        window_bg=Color(0, 170, 170),
        window_title=Color(0, 0, 170),
        window_border=Color(0, 0, 0),
        title_text=Color(255, 255, 255),
        panel_bg=Color(0, 170, 170),
        button=Color(0, 170, 0),
        button_hover=Color(0, 255, 0),
        button_active=Color(255, 255, 255),
        base=Color(0, 0, 170),
        base_hover=Color(0, 0, 200),
        base_focus=Color(0, 0, 255),
        check_bg=Color(0, 170, 170),
        check_active=Color(255, 255, 0),
        scroll_base=Color(0, 85, 85),
        scroll_thumb=Color(0, 255, 255),
    )


DESKTOP_BLUE = Color(0, 0, 168)
DESKTOP_CYAN = Color(0, 170, 170)
DESKTOP_PATTERN = "\u2591"

SCROLL_TRACK_CHAR = "\u2591"
SCROLL_THUMB_CHAR = "\u2588"

SCROLL_TRACK_FG = Color(0, 128, 128)
SCROLL_TRACK_BG = Color(0, 0, 128)
SCROLL_THUMB_FG = Color(0, 0, 0)
SCROLL_THUMB_BG = Color(0, 255, 255)

STATUS_BAR_FG = Color(0, 0, 0)
STATUS_BAR_BG = Color(0, 170, 170)