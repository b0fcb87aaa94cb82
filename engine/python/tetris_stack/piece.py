"""Piece values moved between the queue and the reserve stack.

A piece is just a kind symbol plus the id it was generated with.
Pieces are immutable, so copying one between containers is a plain assignment.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

# Piece kinds in generation order (index is what the RNG picks)
PIECE_KINDS: List[str] = ["I", "O", "T", "L", "S", "Z", "J"]


@dataclass(frozen=True)
class Piece:
    """A generated piece: kind symbol and unique id."""

    kind: str
    id: int

    def __post_init__(self):
        if self.kind not in PIECE_KINDS:
            raise ValueError(f"Invalid piece kind: {self.kind}")
        if self.id < 0:
            raise ValueError(f"Invalid piece id: {self.id}")

    @property
    def label(self) -> str:
        """Short label used by the console, e.g. ``T3``."""
        return f"{self.kind}{self.id}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert piece to dictionary for serialization."""
        return {"kind": self.kind, "id": self.id}

    def __str__(self) -> str:
        return f"[{self.label}]"
