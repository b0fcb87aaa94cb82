"""Fixed-capacity circular queue of upcoming pieces."""

import logging
from typing import Iterator, List, Optional

from tetris_stack.errors import EmptyContainerError
from tetris_stack.piece import Piece

logger = logging.getLogger(__name__)


class PieceQueue:
    """Circular FIFO buffer of pieces.

    Slots are reused through modulo indexing, so nothing is ever shifted.
    ``count`` decides empty vs full; front == back alone is ambiguous.
    """

    CAPACITY = 5

    def __init__(self, capacity: int = CAPACITY):
        """Initialize an empty queue.

        Args:
            capacity: Maximum number of pieces held
        """
        if capacity < 1:
            raise ValueError(f"Queue capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.items: List[Optional[Piece]] = [None] * capacity
        self.front = 0
        self.back = 0
        self.count = 0

    def is_empty(self) -> bool:
        """Check if the queue holds no pieces."""
        return self.count == 0

    def is_full(self) -> bool:
        """Check if the queue is at capacity."""
        return self.count == self.capacity

    def enqueue(self, piece: Piece) -> bool:
        """Append a piece at the back.

        Args:
            piece: Piece to append

        Returns:
            False if the queue was full and the piece was dropped
        """
        if self.is_full():
            logger.debug("Queue full, dropping %s", piece)
            return False
        self.items[self.back] = piece
        self.back = (self.back + 1) % self.capacity
        self.count += 1
        return True

    def dequeue(self) -> Piece:
        """Remove and return the front piece.

        Raises:
            EmptyContainerError: If the queue is empty
        """
        if self.is_empty():
            raise EmptyContainerError("dequeue from empty queue")
        piece = self.items[self.front]
        self.items[self.front] = None
        self.front = (self.front + 1) % self.capacity
        self.count -= 1
        return piece

    def _index(self, offset: int) -> int:
        if not 0 <= offset < self.count:
            raise IndexError(f"Queue offset {offset} out of range (count={self.count})")
        return (self.front + offset) % self.capacity

    def peek_at(self, offset: int) -> Piece:
        """Get the piece at a logical position (0 = front).

        Args:
            offset: Distance from the front

        Returns:
            Piece at that position
        """
        return self.items[self._index(offset)]

    def swap_at(self, offset: int, piece: Piece) -> Piece:
        """Replace the piece at a logical position, keeping the rest in order.

        Args:
            offset: Distance from the front
            piece: Replacement piece

        Returns:
            The piece that was replaced
        """
        index = self._index(offset)
        old = self.items[index]
        self.items[index] = piece
        return old

    def to_list(self) -> List[Piece]:
        """Export pieces ordered front to back."""
        return [self.peek_at(i) for i in range(self.count)]

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[Piece]:
        return iter(self.to_list())

    def __repr__(self) -> str:
        return f"PieceQueue({' '.join(str(p) for p in self.to_list())})"
