"""Row and column layout of controls inside a container body."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Sequence

from .geometry import Rect, Vec2

_FAR_NEGATIVE = -0x1000000
_FALLBACK_BODY = Rect(0, 0, 800, 600)


class _NextType(IntEnum):
    NONE = 0
    ABSOLUTE = 1
    RELATIVE = 2


@dataclass(frozen=True)
class LayoutStyle:
    """The style values that decide default control sizes and gaps."""

    size: Vec2 = Vec2(68, 10)
    padding: Vec2 = Vec2(5, 5)
    spacing: int = 4


@dataclass
class Layout:
    """Layout state of one container; position is relative to the body."""

    body: Rect = field(default_factory=Rect)
    position: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=Vec2)
    max: Vec2 = field(default_factory=lambda: Vec2(_FAR_NEGATIVE, _FAR_NEGATIVE))
    widths: List[int] = field(default_factory=list)
    items: int = 0
    item_index: int = 0
    next_row: int = 0
    indent: int = 0
    next: Rect = field(default_factory=Rect)
    next_type: _NextType = _NextType.NONE
    size_override_w: int = 0
    size_override_h: int = 0


class LayoutEngine:
    """A stack of layouts that hands out rectangles for successive controls."""

    def __init__(
        self,
        style: Optional[LayoutStyle] = None,
        default_body: Rect = Rect(),
    ) -> None:
        self.style = style if style is not None else LayoutStyle()
        self.default_body = default_body
        self.last_rect = Rect()
        self._layouts: List[Layout] = []
        self._columns: List[Rect] = []

    @property
    def current(self) -> Layout:
        """The innermost layout, created over the default body if none exists."""
        if not self._layouts:
            body = self.default_body
            if body.is_empty():
                body = _FALLBACK_BODY
            self._layouts.append(Layout(body=body))
        return self._layouts[-1]

    def __len__(self) -> int:
        return len(self._layouts)

    @property
    def column_depth(self) -> int:
        """Number of columns currently open."""
        return len(self._columns)

    def row(self, columns: int, widths: Optional[Sequence[int]], height: int) -> None:
        """Start a row of `columns` items; None keeps the previous widths."""
        layout = self.current
        if widths is not None:
            kept = list(widths[:columns])
            layout.widths = kept + [0] * (columns - len(kept))
        layout.items = columns
        layout.position = Vec2(layout.indent, layout.next_row)
        layout.size = Vec2(layout.size.x, height)
        layout.item_index = 0

    def next(self) -> Rect:
        """Return the rectangle for the next control and advance the layout."""
        layout = self.current
        style = self.style

        if layout.next_type != _NextType.NONE:
            next_type = layout.next_type
            layout.next_type = _NextType.NONE
            res = layout.next
            if next_type == _NextType.ABSOLUTE:
                self.last_rect = res
                return res
            x, y, w, h = res.x, res.y, res.w, res.h
        else:
            if layout.item_index == layout.items:
                self.row(layout.items, None, layout.size.y)
            x, y = layout.position.x, layout.position.y

            if layout.size_override_w:
                w = layout.size_override_w
                layout.size_override_w = 0
            elif layout.items > 0 and layout.item_index < len(layout.widths):
                w = layout.widths[layout.item_index]
            else:
                w = layout.size.x

            if layout.size_override_h:
                h = layout.size_override_h
                layout.size_override_h = 0
            else:
                h = layout.size.y

            if w == 0:
                w = style.size.x + style.padding.x * 2
            if h == 0:
                h = style.size.y + style.padding.y * 2
            if w < 0:
                w += layout.body.w - x + 1
            if h < 0:
                h += layout.body.h - y + 1
            layout.item_index += 1

        layout.position = Vec2(layout.position.x + w + style.spacing, layout.position.y)
        layout.next_row = max(layout.next_row, y + h + style.spacing)

        x += layout.body.x
        y += layout.body.y
        layout.max = Vec2(max(layout.max.x, x + w), max(layout.max.y, y + h))

        self.last_rect = Rect(x, y, w, h)
        return self.last_rect

    def push(self, body: Rect, scroll: Vec2 = Vec2()) -> None:
        """Push a layout for a container body shifted by its scroll offset."""
        self._layouts.append(
            Layout(body=Rect(body.x - scroll.x, body.y - scroll.y, body.w, body.h))
        )
        self.row(1, [0], 0)

    def pop(self) -> Optional[Layout]:
        """Pop the innermost layout; return it, or None when there is none."""
        return self._layouts.pop() if self._layouts else None

    def set_width(self, width: int) -> None:
        """Override the width of the next control only."""
        self.current.size_override_w = width

    def set_height(self, height: int) -> None:
        """Override the height of the next control only."""
        self.current.size_override_h = height

    def set_next(self, rect: Rect, relative: bool) -> None:
        """Use `rect` for the next control, body-relative or absolute."""
        layout = self.current
        layout.next = rect
        layout.next_type = _NextType.RELATIVE if relative else _NextType.ABSOLUTE

    def begin_column(self) -> None:
        """Open a sub-layout in the next cell of the current row."""
        column_rect = self.next()
        self._columns.append(column_rect)
        self.push(column_rect)

    def end_column(self) -> None:
        """Close the current column and fold its extent into the parent."""
        if not self._columns:
            return
        child = self.current
        self.pop()
        parent = self.current

        new_pos_x = child.position.x + child.body.x - parent.body.x
        if new_pos_x > parent.position.x:
            parent.position = Vec2(new_pos_x, parent.position.y)
        parent.next_row = max(
            parent.next_row, child.next_row + child.body.y - parent.body.y
        )
        parent.max = Vec2(max(parent.max.x, child.max.x), max(parent.max.y, child.max.y))
        self._columns.pop()


def expand_rect(rect: Rect, n: int) -> Rect:
    """Grow a rectangle by n on every side."""
    return Rect(rect.x - n, rect.y - n, rect.w + n * 2, rect.h + n * 2)


def expand_rect_xy(rect: Rect, nx: int, ny: int) -> Rect:
    """Grow a rectangle by nx horizontally and ny vertically on each side."""
    return Rect(rect.x - nx, rect.y - ny, rect.w + nx * 2, rect.h + ny * 2)