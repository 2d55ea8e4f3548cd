"""A double-buffered grid of terminal cells that draw commands paint into."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Optional, Tuple

from ..geometry import Color, Rect, Vec2
from .colors import (
    SCROLL_THUMB_BG,
    SCROLL_THUMB_CHAR,
    SCROLL_THUMB_FG,
    SCROLL_TRACK_BG,
    SCROLL_TRACK_CHAR,
    SCROLL_TRACK_FG,
)
from .icons import icon_to_rune

SHADOW_BG = Color(0, 0, 0)
SHADOW_FG = Color(85, 85, 85)

BOX_TOP_LEFT = "\u250c"
BOX_TOP_RIGHT = "\u2510"
BOX_BOTTOM_LEFT = "\u2514"
BOX_BOTTOM_RIGHT = "\u2518"
BOX_HORIZONTAL = "\u2500"
BOX_VERTICAL = "\u2502"

_FNV_OFFSET = 14695981039346656037
_FNV_PRIME = 1099511628211
_MASK64 = (1 << 64) - 1


class ColorMode(IntEnum):
    """Colour depth of the terminal."""

    AUTO = 0
    COLOR_16 = 1
    COLOR_256 = 2
    TRUE_COLOR = 3


@dataclass(frozen=True)
class Cell:
    """A terminal cell; an empty char means nothing was drawn there."""

    char: str = ""
    fg: Optional[Color] = None
    bg: Optional[Color] = None


def darken_color(color: Optional[Color], factor: float) -> Color:
    """Scale the RGB channels of a colour by factor; None becomes opaque black."""
    if color is None:
        return Color(0, 0, 0, 255)

    def scale(channel: int) -> int:
        return min(max(int(channel * factor), 0), 255)

    return Color(scale(color.r), scale(color.g), scale(color.b), color.a)


def color_key(color: Optional[Color]) -> int:
    """Pack a colour's RGB into one integer; None gives 0."""
    if color is None:
        return 0
    return (color.r << 16) | (color.g << 8) | color.b


def _blank_grid(width: int, height: int) -> List[List[Cell]]:
    return [[Cell() for _ in range(width)] for _ in range(height)]


class Renderer:
    """Paints into a back buffer; swap() publishes it for reading."""

    def __init__(self, width: int, height: int) -> None:
        self._lock = threading.RLock()
        self._width = width
        self._height = height
        self._front = _blank_grid(width, height)
        self._back = _blank_grid(width, height)
        self.clip_rect = Rect(0, 0, width, height)
        self.color_mode = ColorMode.AUTO

    @property
    def width(self) -> int:
        """Width in cells."""
        return self._width

    @property
    def height(self) -> int:
        """Height in rows."""
        return self._height

    def resize(self, width: int, height: int) -> None:
        """Change the size, clearing both buffers, unless it is unchanged."""
        with self._lock:
            if width == self._width and height == self._height:
                return
            self._width = width
            self._height = height
            self._front = _blank_grid(width, height)
            self._back = _blank_grid(width, height)
            self.clip_rect = Rect(0, 0, width, height)

    def clear(self) -> None:
        """Reset every cell of the back buffer to empty."""
        self._back = _blank_grid(self._width, self._height)

    def fill_background(self, char: str, fg: Optional[Color], bg: Optional[Color]) -> None:
        """Fill the whole back buffer with one character and colours."""
        cell = Cell(char, fg, bg)
        self._back = [[cell] * self._width for _ in range(self._height)]

    def swap(self) -> None:
        """Exchange the front and back buffers."""
        with self._lock:
            self._front, self._back = self._back, self._front

    def get_cell(self, x: int, y: int) -> Cell:
        """Return the back-buffer cell at (x, y), or an empty cell outside."""
        if not self._in_bounds(x, y):
            return Cell()
        return self._back[y][x]

    def _in_clip(self, x: int, y: int) -> bool:
        c = self.clip_rect
        return c.x <= x < c.x + c.w and c.y <= y < c.y + c.h

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _clipped_cells(self, x: int, y: int, w: int, h: int) -> Iterator[Tuple[int, int]]:
        c = self.clip_rect
        x1 = max(x, c.x)
        y1 = max(y, c.y)
        x2 = min(x + w, c.x + c.w)
        y2 = min(y + h, c.y + c.h)
        for cy in range(y1, y2):
            for cx in range(x1, x2):
                if self._in_bounds(cx, cy):
                    yield cx, cy

    def draw_rect(self, pos: Vec2, size: Vec2, color: Optional[Color]) -> None:
        """Fill a rectangle with spaces on color; a 1x1 rect draws a cursor."""
        if size.x == 1 and size.y == 1:
            x, y = pos.x, pos.y
            if self._in_clip(x, y) and self._in_bounds(x, y):
                existing = self._back[y][x]
                char = " " if existing.char in ("", " ") else existing.char
                self._back[y][x] = Cell(char, existing.bg, color)
            return
        cell = Cell(" ", None, color)
        for x, y in self._clipped_cells(pos.x, pos.y, size.x, size.y):
            self._back[y][x] = cell

    def draw_shadow(self, rect: Rect, factor: float) -> None:
        """Darken the cells in rect, keeping their characters."""
        classic = self.color_mode == ColorMode.COLOR_16
        for x, y in self._clipped_cells(rect.x, rect.y, rect.w, rect.h):
            existing = self._back[y][x]
            if classic:
                self._back[y][x] = Cell(existing.char, SHADOW_FG, SHADOW_BG)
            else:
                self._back[y][x] = Cell(
                    existing.char,
                    darken_color(existing.fg, factor),
                    darken_color(existing.bg, factor),
                )

    def draw_box(self, rect: Rect, color: Optional[Color]) -> None:
        """Outline rect with box-drawing characters."""
        x1, y1 = rect.x, rect.y
        x2, y2 = rect.x + rect.w - 1, rect.y + rect.h - 1
        self._set_cell(x1, y1, BOX_TOP_LEFT, color)
        self._set_cell(x2, y1, BOX_TOP_RIGHT, color)
        self._set_cell(x1, y2, BOX_BOTTOM_LEFT, color)
        self._set_cell(x2, y2, BOX_BOTTOM_RIGHT, color)
        for x in range(x1 + 1, x2):
            self._set_cell(x, y1, BOX_HORIZONTAL, color)
            self._set_cell(x, y2, BOX_HORIZONTAL, color)
        for y in range(y1 + 1, y2):
            self._set_cell(x1, y, BOX_VERTICAL, color)
            self._set_cell(x2, y, BOX_VERTICAL, color)

    def _set_cell(self, x: int, y: int, char: str, fg: Optional[Color]) -> None:
        if not (self._in_clip(x, y) and self._in_bounds(x, y)):
            return
        self._back[y][x] = Cell(char, fg, self._back[y][x].bg)

    def set_cell_full(
        self, x: int, y: int, char: str, fg: Optional[Color], bg: Optional[Color]
    ) -> None:
        """Set a cell outright, ignoring the clip rectangle."""
        if self._in_bounds(x, y):
            self._back[y][x] = Cell(char, fg, bg)

    def fill_rect_char(
        self, rect: Rect, char: str, fg: Optional[Color], bg: Optional[Color]
    ) -> None:
        """Fill rect with one character and colours, within the clip."""
        cell = Cell(char, fg, bg)
        for x, y in self._clipped_cells(rect.x, rect.y, rect.w, rect.h):
            self._back[y][x] = cell

    def draw_scroll_track(self, rect: Rect) -> None:
        """Draw a scrollbar track."""
        self.fill_rect_char(rect, SCROLL_TRACK_CHAR, SCROLL_TRACK_FG, SCROLL_TRACK_BG)

    def draw_scroll_thumb(self, rect: Rect) -> None:
        """Draw a scrollbar thumb."""
        self.fill_rect_char(rect, SCROLL_THUMB_CHAR, SCROLL_THUMB_FG, SCROLL_THUMB_BG)

    def draw_text(self, text: str, pos: Vec2, font: object, color: Optional[Color]) -> None:
        """Write text one character per cell, keeping each cell's background."""
        c = self.clip_rect
        y = pos.y
        if not c.y <= y < c.y + c.h:
            return
        for offset, char in enumerate(text):
            x = pos.x + offset
            if c.x <= x < c.x + c.w and self._in_bounds(x, y):
                self._back[y][x] = Cell(char, color, self._back[y][x].bg)

    def draw_icon(self, icon_id: int, rect: Rect, color: Optional[Color]) -> None:
        """Draw an icon's character at the centre of rect."""
        x = rect.x + rect.w // 2
        y = rect.y + rect.h // 2
        if self._in_clip(x, y) and self._in_bounds(x, y):
            self._back[y][x] = Cell(icon_to_rune(icon_id), color, self._back[y][x].bg)

    def set_clip(self, rect: Rect) -> None:
        """Set the rectangle later drawing is confined to."""
        self.clip_rect = rect

    def render_to_string(self) -> str:
        """Return the back buffer's characters as lines of text."""
        return "\n".join(
            "".join(cell.char or " " for cell in row) for row in self._back
        )

    def render_to_ansi(self) -> str:
        """Return the back buffer as text with 24-bit ANSI colour escapes."""
        out: List[str] = []
        for y, row in enumerate(self._back):
            cur_fg = cur_bg = 0
            needs_reset = False
            for cell in row:
                new_fg = color_key(cell.fg)
                new_bg = color_key(cell.bg)
                fg_changed = new_fg != cur_fg
                bg_changed = new_bg != cur_bg
                if fg_changed or bg_changed:
                    if new_fg == 0 and new_bg == 0:
                        if needs_reset:
                            out.append("\x1b[0m")
                            needs_reset = False
                    else:
                        parts: List[str] = []
                        if fg_changed:
                            parts.append(_rgb_code(38, new_fg) if new_fg else "39")
                        if bg_changed:
                            parts.append(_rgb_code(48, new_bg) if new_bg else "49")
                        out.append("\x1b[" + ";".join(parts) + "m")
                        needs_reset = True
                    cur_fg, cur_bg = new_fg, new_bg
                out.append(cell.char or " ")
            if needs_reset:
                out.append("\x1b[0m")
            if y < self._height - 1:
                out.append("\n")
        return "".join(out)

    def content_hash(self) -> int:
        """Return a 64-bit FNV-1a style hash of the back buffer."""
        value = _FNV_OFFSET
        for row in self._back:
            for cell in row:
                for part in (ord(cell.char) if cell.char else 0, color_key(cell.fg), color_key(cell.bg)):
                    value ^= part
                    value = (value * _FNV_PRIME) & _MASK64
        return value

    def visible_cells(
        self, x0: int, y0: int, x1: int, y1: int
    ) -> Iterator[Tuple[int, int, Cell]]:
        """Yield (x, y, cell) for front-buffer cells with content in [x0,x1)x[y0,y1)."""
        with self._lock:
            front = self._front
            width, height = self._width, self._height
            for y in range(max(y0, 0), min(y1, height)):
                for x in range(max(x0, 0), min(x1, width)):
                    cell = front[y][x]
                    if not cell.char and cell.fg is None and cell.bg is None:
                        continue
                    yield x, y, Cell(cell.char or " ", cell.fg, cell.bg)


def _rgb_code(prefix: int, key: int) -> str:
    return f"{prefix};2;{(key >> 16) & 0xFF};{(key >> 8) & 0xFF};{key & 0xFF}"