"""A fixed-capacity ring buffer of optional items."""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class BufferFullError(Exception):
    """Raised when writing to a buffer whose every slot is occupied."""


class NonContiguousError(Exception):
    """Raised when the stored items wrap around the end of the storage."""


class CircularBuffer(Generic[T]):
    """A ring buffer over ``capacity`` slots, each holding an item or ``None``.

    ``head`` is the slot read next and ``tail`` the slot written next. An
    empty slot at ``head`` while ``head == tail`` means the buffer is empty;
    an occupied one means it is full.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.buffer: List[Optional[T]] = [None] * capacity
        self.head = 0
        self.tail = 0

    def _is_full(self) -> bool:
        return self.head == self.tail and self.buffer[self.head] is not None

    def _is_empty(self) -> bool:
        return self.head == self.tail and self.buffer[self.head] is None

    def write(self, item: Optional[T]) -> None:
        """Store ``item`` at the tail; raise BufferFullError if there is no room."""
        if self._is_full():
            raise BufferFullError("Circular buffer is full")
        self.buffer[self.tail] = item
        self.tail = (self.tail + 1) % self.capacity

    def read(self) -> Optional[T]:
        """Remove and return the item at the head, or None if the buffer is empty."""
        if self._is_empty():
            return None
        item = self.buffer[self.head]
        self.buffer[self.head] = None
        self.head = (self.head + 1) % self.capacity
        return item

    def clear(self) -> None:
        """Empty every slot and reset both positions."""
        self.buffer = [None] * self.capacity
        self.head = 0
        self.tail = 0

    def __len__(self) -> int:
        if self.head == self.tail:
            return 0
        if self.tail > self.head:
            return self.tail - self.head
        return self.capacity - self.head + self.tail

    def overwrite(self, item: Optional[T]) -> None:
        """Write ``item``, replacing the oldest item when the buffer is full."""
        if not self._is_full():
            self.write(item)
            return
        self.buffer[self.head] = item
        self.head = (self.head + 1) % self.capacity
        self.tail = (self.tail + 1) % self.capacity

    def make_contiguous(self) -> None:
        """Rotate the storage so that the items start at slot 0 when they wrap."""
        if self.tail < self.head:
            self.buffer = self.buffer[self.head:] + self.buffer[: self.head]
            self.tail = (self.tail + self.head) % self.capacity
            self.head = 0

    def _slot(self, index: int) -> int:
        if not 0 <= index < self.capacity:
            raise IndexError("Index out of bounds")
        return (self.head + index) % self.capacity

    def __getitem__(self, index: int) -> Optional[T]:
        return self.buffer[self._slot(index)]

    def __setitem__(self, index: int, value: Optional[T]) -> None:
        self.buffer[self._slot(index)] = value

    def as_list(self) -> List[Optional[T]]:
        """Return the raw storage; raise NonContiguousError if the items wrap."""
        if self.tail < self.head:
            raise NonContiguousError("Vector is non continous")
        return list(self.buffer)