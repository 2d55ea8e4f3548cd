"""Mouse, keyboard and text input state gathered between frames."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from enum import IntEnum
from typing import Set, Union

from .geometry import Vec2


class MouseButton(IntEnum):
    """A mouse button."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class Key(IntEnum):
    """A keyboard key."""

    SHIFT = 0
    CTRL = 1
    ALT = 2
    ENTER = 3
    BACKSPACE = 4
    DELETE = 5
    ESCAPE = 6
    LEFT = 7
    RIGHT = 8
    UP = 9
    DOWN = 10
    HOME = 11
    END = 12
    PAGE_UP = 13
    PAGE_DOWN = 14
    TAB = 15
    SPACE = 16


@dataclass(frozen=True)
class MouseEvent:
    """A mouse button press or release at a position."""

    x: int
    y: int
    button: MouseButton = MouseButton.LEFT
    down: bool = True


@dataclass(frozen=True)
class KeyEvent:
    """A key press or release."""

    key: Key
    down: bool = True


@dataclass(frozen=True)
class TextEvent:
    """A typed character."""

    char: str


InputEvent = Union[MouseEvent, KeyEvent, TextEvent]


class InputState:
    """Input collected for the current frame; safe to feed from other threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.mouse_pos = Vec2()
        self.mouse_held: Set[MouseButton] = set()
        self.mouse_pressed: Set[MouseButton] = set()
        self.scroll_delta = Vec2()
        self.keys_held: Set[Key] = set()
        self.keys_pressed: Set[Key] = set()
        self.text = ""
        self.queue: "queue.Queue[InputEvent]" = queue.Queue()

    def mouse_move(self, x: int, y: int) -> None:
        """Update the mouse position."""
        with self._lock:
            self.mouse_pos = Vec2(x, y)

    def mouse_down(self, x: int, y: int, button: MouseButton) -> None:
        """Record a button press at a position."""
        with self._lock:
            self.mouse_pos = Vec2(x, y)
            self.mouse_held.add(button)
            self.mouse_pressed.add(button)

    def mouse_up(self, x: int, y: int, button: MouseButton) -> None:
        """Record a button release at a position."""
        with self._lock:
            self.mouse_pos = Vec2(x, y)
            self.mouse_held.discard(button)

    def scroll(self, dx: int, dy: int) -> None:
        """Accumulate wheel deltas (positive is right/down)."""
        with self._lock:
            self.scroll_delta = Vec2(self.scroll_delta.x + dx, self.scroll_delta.y + dy)

    def key_down(self, key: Key) -> None:
        """Record a key press; it counts as pressed only if it was not held."""
        with self._lock:
            if key not in self.keys_held:
                self.keys_pressed.add(key)
            self.keys_held.add(key)

    def key_up(self, key: Key) -> None:
        """Record a key release."""
        with self._lock:
            self.keys_held.discard(key)

    def text_char(self, char: str) -> None:
        """Append one typed character."""
        with self._lock:
            self.text += char

    def text_input(self, text: str) -> None:
        """Append typed text for the current frame."""
        with self._lock:
            self.text += text

    def handle(self, event: InputEvent) -> None:
        """Apply a single input event."""
        if isinstance(event, MouseEvent):
            if event.down:
                self.mouse_down(event.x, event.y, event.button)
            else:
                self.mouse_up(event.x, event.y, event.button)
        elif isinstance(event, KeyEvent):
            if event.down:
                self.key_down(event.key)
            else:
                self.key_up(event.key)
        elif isinstance(event, TextEvent):
            self.text_char(event.char)
        else:
            raise TypeError(f"not an input event: {event!r}")

    def process_queue(self) -> int:
        """Apply every queued event without blocking; return how many ran."""
        count = 0
        while True:
            try:
                event = self.queue.get_nowait()
            except queue.Empty:
                return count
            self.handle(event)
            count += 1