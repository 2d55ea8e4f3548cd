"""Fixed-size pools with bounded growth, stacks, and LRU pool slots."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Generic, Iterator, List, Optional, Sequence, TypeVar

T = TypeVar("T")

log = logging.getLogger(__name__)


class PoolExhaustedError(RuntimeError):
    """Raised when a pool has reached its maximum size."""


@dataclass
class PoolItem:
    """A pool slot holding an id and the frame it was last used in."""

    id: int = 0
    last_update: int = 0


class _Slot(Generic[T]):
    __slots__ = ("value", "used")

    def __init__(self, value: T, used: bool = False) -> None:
        self.value = value
        self.used = used


class GrowPool(Generic[T]):
    """A pool that hands out fixed slots first, then grows up to a maximum.

    Slot values are built by ``factory``; without one, every slot holds None.
    """

    def __init__(
        self,
        fixed_size: int,
        max_size: int,
        factory: Optional[Callable[[], T]] = None,
    ) -> None:
        self._factory = factory
        self._fixed: List[_Slot[T]] = [_Slot(self._make()) for _ in range(fixed_size)]
        self._grow: List[_Slot[T]] = []
        self.max_size = max_size
        self._lock = threading.Lock()

    def _make(self) -> T:
        if self._factory is None:
            return None  # type: ignore[return-value]
        return self._factory()

    def alloc(self) -> T:
        """Take a free slot and return its value."""
        with self._lock:
            for slot in self._fixed:
                if not slot.used:
                    slot.used = True
                    return slot.value
            total = len(self._fixed) + len(self._grow)
            if total >= self.max_size:
                raise PoolExhaustedError(f"pool exhausted: {total} >= {self.max_size}")
            slot = _Slot(self._make(), used=True)
            self._grow.append(slot)
            if len(self._grow) == 1:
                log.warning("pool started growing beyond fixed size")
            return slot.value

    @property
    def grown(self) -> int:
        """Number of slots allocated beyond the fixed size."""
        return len(self._grow)

    def __len__(self) -> int:
        return sum(1 for slot in self._fixed if slot.used) + len(self._grow)


class GrowStack(Generic[T]):
    """A simple last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: List[T] = []

    def push(self, value: T) -> None:
        """Push a value on top."""
        self._items.append(value)

    def pop(self) -> Optional[T]:
        """Remove and return the top value, or None when empty."""
        return self._items.pop() if self._items else None

    def peek(self) -> Optional[T]:
        """Return the top value without removing it, or None when empty."""
        return self._items[-1] if self._items else None

    def reset(self) -> None:
        """Remove every value."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)


def pool_update(items: Sequence[PoolItem], index: int, frame: int) -> None:
    """Mark the slot at index as used in the given frame."""
    items[index].last_update = frame


def pool_init(items: Sequence[PoolItem], item_id: int, frame: int) -> int:
    """Assign item_id to the least recently used slot and return its index."""
    min_frame = frame
    min_idx = 0
    for idx, item in enumerate(items):
        if item.last_update < min_frame:
            min_frame = item.last_update
            min_idx = idx
    items[min_idx].id = item_id
    pool_update(items, min_idx, frame)
    return min_idx


def pool_get(items: Sequence[PoolItem], item_id: int) -> Optional[int]:
    """Return the index of the slot holding item_id, or None."""
    return next((idx for idx, item in enumerate(items) if item.id == item_id), None)