"""A FIFO queue whose capacity grows in powers of two."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class RingQueue(Generic[T]):
    """First-in first-out queue; capacity doubles whenever it fills up."""

    def __init__(self, min_size: int = 1) -> None:
        if min_size < 0:
            raise ValueError("min_size must not be negative")
        self._capacity = 1 << max(min_size - 1, 0).bit_length()
        self._items: deque[T] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def push(self, item: T) -> None:
        """Append an item at the tail."""
        self._items.append(item)
        if len(self._items) == self._capacity:
            self._capacity *= 2

    def pop(self) -> T:
        """Remove and return the item at the head."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items