"""Basic geometric value types: points, rectangles and colours."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An integer 2D vector or point."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Rect:
    """An integer rectangle given by its top-left corner and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def is_empty(self) -> bool:
        """Return True when the rectangle covers no area."""
        return self.w <= 0 or self.h <= 0


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour channel {name}={value} outside 0..255")