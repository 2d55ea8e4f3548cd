"""Containers: windows, panels and popups that persist across frames."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import Rect, Vec2


@dataclass
class Container:
    """State of a window, panel or popup kept between frames."""

    id: int = 0
    name: str = ""
    rect: Rect = field(default_factory=Rect)
    body: Rect = field(default_factory=Rect)
    content_size: Vec2 = field(default_factory=Vec2)
    scroll: Vec2 = field(default_factory=Vec2)
    zindex: int = 0
    open: bool = False
    opt: int = 0
    head_idx: int = 0
    tail_idx: int = 0