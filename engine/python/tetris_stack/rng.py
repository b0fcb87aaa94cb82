"""Piece generator with a session-wide id counter.

Kinds are drawn uniformly at random from the 7-symbol alphabet. Ids start at 0
and go up by one per generated piece, so they are unique within a session.
"""

import itertools
import random
import time
from typing import Iterable, Iterator, Optional

from tetris_stack.piece import PIECE_KINDS, Piece


class PieceGenerator:
    """Infinite, lazily evaluated piece sequence."""

    def __init__(self, seed: Optional[int] = None, kinds: Optional[Iterable[str]] = None):
        """Initialize the generator.

        Args:
            seed: Random seed (wall clock if None)
            kinds: Fixed kind sequence to cycle through instead of random draws
        """
        if seed is None:
            seed = time.time_ns()
        self.seed = seed
        self.rng = random.Random(seed)
        self._kinds: Optional[Iterator[str]] = None
        if kinds is not None:
            fixed = list(kinds)
            if not fixed:
                raise ValueError("kinds must not be empty")
            for kind in fixed:
                if kind not in PIECE_KINDS:
                    raise ValueError(f"Invalid piece kind: {kind}")
            self._kinds = itertools.cycle(fixed)
        self._counter = 0

    @property
    def next_id(self) -> int:
        """Id the next generated piece will receive."""
        return self._counter

    def next(self) -> Piece:
        """Generate the next piece.

        Returns:
            New piece with the current counter as its id
        """
        if self._kinds is not None:
            kind = next(self._kinds)
        else:
            kind = self.rng.choice(PIECE_KINDS)
        piece = Piece(kind, self._counter)
        self._counter += 1
        return piece

    def __iter__(self) -> "PieceGenerator":
        return self

    def __next__(self) -> Piece:
        return self.next()
