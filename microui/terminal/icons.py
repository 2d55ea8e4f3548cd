"""Characters used to draw icons in a terminal."""

from __future__ import annotations

from ..commands import Icon

ICON_RUNE_CLOSE = "\u25a0"
ICON_RUNE_CHECK = "\u2713"
ICON_RUNE_COLLAPSED = "\u25ba"
ICON_RUNE_EXPANDED = "\u25bc"
ICON_RUNE_FALLBACK = "\u25a1"
ICON_RUNE_RESIZE = "\u2518"

_ICON_RUNES = {
    Icon.CLOSE: ICON_RUNE_CLOSE,
    Icon.CHECK: ICON_RUNE_CHECK,
    Icon.COLLAPSED: ICON_RUNE_COLLAPSED,
    Icon.EXPANDED: ICON_RUNE_EXPANDED,
    Icon.RESIZE: ICON_RUNE_RESIZE,
}


def icon_to_rune(icon_id: int) -> str:
    """Return the character that stands for an icon id, or a fallback box."""
    return _ICON_RUNES.get(icon_id, ICON_RUNE_FALLBACK)