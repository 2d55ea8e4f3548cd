"""Render commands and the per-frame command buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Iterator, List, Optional

from .geometry import Color, Rect, Vec2


class CommandKind(IntEnum):
    """The type of a render command."""

    RECT = 0
    TEXT = 1
    CLIP = 2
    ICON = 3
    BOX = 4
    SCROLL_TRACK = 5
    SCROLL_THUMB = 6


class Icon(IntEnum):
    """Built-in icon identifiers."""

    CLOSE = 1
    CHECK = 2
    COLLAPSED = 3
    EXPANDED = 4
    RESIZE = 5
    MAX = 6


@dataclass
class Command:
    """A single render command."""

    kind: CommandKind
    rect: Rect = field(default_factory=Rect)
    pos: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=Vec2)
    text: str = ""
    color: Optional[Color] = None
    icon: int = 0
    font: Any = None


class CommandBuffer:
    """An ordered list of render commands, cleared and refilled every frame."""

    def __init__(self, capacity: int = 0) -> None:
        self.capacity = capacity
        self._cmds: List[Command] = []

    def push(self, cmd: Command) -> None:
        """Append a command."""
        self._cmds.append(cmd)

    def reset(self) -> None:
        """Remove every command."""
        self._cmds.clear()

    def each_range(self, start: int, end: int) -> Iterator[Command]:
        """Yield the commands in [start, end), clamped to the buffer."""
        start = max(start, 0)
        end = min(end, len(self._cmds))
        yield from self._cmds[start:end]

    def __iter__(self) -> Iterator[Command]:
        return iter(self._cmds)

    def __len__(self) -> int:
        return len(self._cmds)

    def __getitem__(self, index: int) -> Command:
        return self._cmds[index]