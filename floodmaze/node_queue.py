"""A first-in, first-out queue of grid positions with distances."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class QueueNode:
    """A grid position with its distance."""

    x: int
    y: int
    distance: int


class NodeQueue:
    """FIFO queue of QueueNode entries."""

    def __init__(self) -> None:
        self._items: deque[QueueNode] = deque()

    def push(self, x: int, y: int, distance: int) -> None:
        self._items.append(QueueNode(x, y, distance))

    def pop(self) -> QueueNode:
        """Remove and return the oldest node; IndexError if the queue is empty."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)