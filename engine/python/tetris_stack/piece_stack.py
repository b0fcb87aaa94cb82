"""Fixed-capacity reserve stack."""

import logging
from typing import Iterator, List, Optional

from tetris_stack.errors import EmptyContainerError
from tetris_stack.piece import Piece

logger = logging.getLogger(__name__)


class PieceStack:
    """Top-indexed LIFO buffer of reserved pieces. ``top == -1`` means empty."""

    CAPACITY = 3

    def __init__(self, capacity: int = CAPACITY):
        if capacity < 1:
            raise ValueError(f"Stack capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.items: List[Optional[Piece]] = [None] * capacity
        self.top = -1

    def is_empty(self) -> bool:
        return self.top == -1

    def is_full(self) -> bool:
        return self.top == self.capacity - 1

    def push(self, piece: Piece) -> bool:
        """Push a piece on top.

        Returns:
            False if the stack was full and the piece was dropped
        """
        if self.is_full():
            logger.debug("Stack full, dropping %s", piece)
            return False
        self.top += 1
        self.items[self.top] = piece
        return True

    def pop(self) -> Piece:
        """Remove and return the top piece.

        Raises:
            EmptyContainerError: If the stack is empty
        """
        if self.is_empty():
            raise EmptyContainerError("pop from empty stack")
        piece = self.items[self.top]
        self.items[self.top] = None
        self.top -= 1
        return piece

    def _index(self, depth: int) -> int:
        if not 0 <= depth <= self.top:
            raise IndexError(f"Stack depth {depth} out of range (top={self.top})")
        return self.top - depth

    def peek_at(self, depth: int) -> Piece:
        """Get the piece ``depth`` slots below the top (0 = top)."""
        return self.items[self._index(depth)]

    def swap_at(self, depth: int, piece: Piece) -> Piece:
        """Replace the piece ``depth`` slots below the top and return the old one."""
        index = self._index(depth)
        old = self.items[index]
        self.items[index] = piece
        return old

    def to_list(self) -> List[Piece]:
        """Export pieces ordered top to bottom."""
        return [self.items[i] for i in range(self.top, -1, -1)]

    def __len__(self) -> int:
        return self.top + 1

    def __iter__(self) -> Iterator[Piece]:
        return iter(self.to_list())

    def __repr__(self) -> str:
        return f"PieceStack({' '.join(str(p) for p in self.to_list())})"
