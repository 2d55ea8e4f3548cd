"""Option flags, response flags, clip results and colour identifiers."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class Opt(IntFlag):
    """Option flags accepted by controls and containers."""

    NONE = 0
    ALIGN_CENTER = 1 << 0
    ALIGN_RIGHT = 1 << 1
    NO_INTERACT = 1 << 2
    NO_FRAME = 1 << 3
    NO_RESIZE = 1 << 4
    NO_SCROLL = 1 << 5
    NO_CLOSE = 1 << 6
    NO_TITLE = 1 << 7
    HOLD_FOCUS = 1 << 8
    AUTO_SIZE = 1 << 9
    POPUP = 1 << 10
    CLOSED = 1 << 11
    EXPANDED = 1 << 12


class Res(IntFlag):
    """Response flags returned by controls."""

    NONE = 0
    CHANGE = 1 << 0
    SUBMIT = 1 << 1
    ACTIVE = 1 << 2


class Clip(IntEnum):
    """How much of a rectangle a clip region hides."""

    NONE = 0
    PART = 1
    ALL = 2


class ColorId(IntEnum):
    """Identifiers of the style colours used when drawing frames."""

    TEXT = 0
    BORDER = 1
    WINDOW_BG = 2
    TITLE_BG = 3
    TITLE_TEXT = 4
    PANEL_BG = 5
    BUTTON = 6
    BUTTON_HOVER = 7
    BUTTON_FOCUS = 8
    BASE = 9
    BASE_HOVER = 10
    BASE_FOCUS = 11
    SCROLL_BASE = 12
    SCROLL_THUMB = 13