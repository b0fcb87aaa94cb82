"""Piece queue / reserve stack environment.

Provides reset() and step() plus one method per player command. Every command
checks its pre-conditions before touching any container, so a rejected command
leaves the session exactly as it was.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional

from tetris_stack.errors import (
    EmptyContainerError,
    FailureReason,
    FullContainerError,
    InsufficientOccupancyError,
    PieceContainerError,
)
from tetris_stack.piece import Piece
from tetris_stack.piece_queue import PieceQueue
from tetris_stack.piece_stack import PieceStack
from tetris_stack.rng import PieceGenerator

logger = logging.getLogger(__name__)


class Command(Enum):
    """Player commands."""
    PLAY = "PLAY"                # Play the queue front
    RESERVE = "RESERVE"          # Move the queue front onto the stack
    USE_RESERVE = "USE_RESERVE"  # Use the stack top
    SWAP_ONE = "SWAP_ONE"        # Exchange queue front and stack top
    SWAP_THREE = "SWAP_THREE"    # Exchange first three of each


@dataclass
class Observation:
    """Snapshot of the session state."""
    schema_version: str
    tick: int
    queue: List[Piece]  # front -> back
    stack: List[Piece]  # top -> bottom
    queue_capacity: int
    stack_capacity: int
    next_id: int
    seed: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert observation to dictionary for serialization."""
        return {
            "schema_version": self.schema_version,
            "tick": self.tick,
            "queue": {
                "pieces": [p.to_dict() for p in self.queue],
                "count": len(self.queue),
                "capacity": self.queue_capacity,
            },
            "stack": {
                "pieces": [p.to_dict() for p in self.stack],
                "count": len(self.stack),
                "capacity": self.stack_capacity,
            },
            "generator": {
                "next_id": self.next_id,
                "seed": self.seed,
            },
        }


@dataclass
class StepResult:
    """Outcome of a single command."""
    command: Command
    ok: bool
    obs: Observation
    message: str
    pieces: List[Piece] = field(default_factory=list)
    reason: Optional[FailureReason] = None

    @property
    def info(self) -> Dict[str, Any]:
        """Outcome details for display or serialization."""
        return {
            "command": self.command.value,
            "reason": self.reason.value if self.reason else None,
            "message": self.message,
            "pieces": [p.to_dict() for p in self.pieces],
        }


class StackEnv:
    """Session engine owning the piece queue, reserve stack and generator."""

    SCHEMA_VERSION = "s1.0.0"

    def __init__(
        self,
        queue_capacity: int = PieceQueue.CAPACITY,
        stack_capacity: int = PieceStack.CAPACITY,
        swap_depth: int = 3,
    ):
        """Initialize the environment.

        Args:
            queue_capacity: Number of upcoming pieces kept in the queue
            stack_capacity: Maximum number of reserved pieces
            swap_depth: Pieces exchanged by SWAP_THREE
        """
        if swap_depth < 1 or swap_depth > min(queue_capacity, stack_capacity):
            raise ValueError(
                f"swap_depth must be between 1 and {min(queue_capacity, stack_capacity)}, "
                f"got {swap_depth}"
            )
        self.queue_capacity = queue_capacity
        self.stack_capacity = stack_capacity
        self.swap_depth = swap_depth

        self.queue = PieceQueue(queue_capacity)
        self.stack = PieceStack(stack_capacity)
        self.generator: Optional[PieceGenerator] = None

        self.tick = 0
        self.seed = 0

        self._handlers: Dict[Command, Callable[[], List[Piece]]] = {
            Command.PLAY: self._play,
            Command.RESERVE: self._reserve,
            Command.USE_RESERVE: self._use_reserve,
            Command.SWAP_ONE: self._swap_one,
            Command.SWAP_THREE: self._swap_three,
        }

    def reset(self, seed: Optional[int] = None, kinds: Optional[Iterable[str]] = None) -> Observation:
        """Start a new session.

        Args:
            seed: Random seed (wall clock if None)
            kinds: Fixed kind sequence for the generator (random if None)

        Returns:
            Initial observation with a full queue and an empty stack
        """
        self.generator = PieceGenerator(seed, kinds)
        self.seed = self.generator.seed
        self.queue = PieceQueue(self.queue_capacity)
        self.stack = PieceStack(self.stack_capacity)
        self.tick = 0

        while not self.queue.is_full():
            self.queue.enqueue(self.generator.next())

        logger.debug("Session reset: seed=%s queue=%s", self.seed, self.queue)
        return self._build_observation()

    def step(self, command: Command) -> StepResult:
        """Execute one player command.

        Args:
            command: Command to execute

        Returns:
            Step result with outcome and resulting observation
        """
        if self.generator is None:
            raise RuntimeError("Environment not initialized. Call reset() first.")

        self.tick += 1
        try:
            pieces = self._handlers[command]()
        except PieceContainerError as e:
            logger.debug("%s rejected: %s", command.value, e)
            return StepResult(
                command=command,
                ok=False,
                obs=self._build_observation(),
                message=str(e),
                reason=e.reason,
            )

        message = self._describe(command, pieces)
        logger.debug("%s: %s", command.value, message)
        return StepResult(
            command=command,
            ok=True,
            obs=self._build_observation(),
            message=message,
            pieces=pieces,
        )

    def observe(self) -> Observation:
        """Get the current observation without changing state."""
        if self.generator is None:
            raise RuntimeError("Environment not initialized. Call reset() first.")
        return self._build_observation()

    def play(self) -> StepResult:
        return self.step(Command.PLAY)

    def reserve(self) -> StepResult:
        return self.step(Command.RESERVE)

    def use_reserve(self) -> StepResult:
        return self.step(Command.USE_RESERVE)

    def swap_one(self) -> StepResult:
        return self.step(Command.SWAP_ONE)

    def swap_three(self) -> StepResult:
        return self.step(Command.SWAP_THREE)

    # Handlers raise before mutating anything, or run to completion.

    def _play(self) -> List[Piece]:
        if self.queue.is_empty():
            raise EmptyContainerError("Queue is empty, cannot play.")
        played = self.queue.dequeue()
        self._refill()
        return [played]

    def _reserve(self) -> List[Piece]:
        # Full stack is reported even when the queue is also empty
        if self.stack.is_full():
            raise FullContainerError("Reserve stack is full, cannot reserve.")
        if self.queue.is_empty():
            raise EmptyContainerError("Queue is empty, cannot reserve.")
        reserved = self.queue.dequeue()
        self.stack.push(reserved)
        self._refill()
        return [reserved]

    def _use_reserve(self) -> List[Piece]:
        if self.stack.is_empty():
            raise EmptyContainerError("Reserve stack is empty.")
        return [self.stack.pop()]

    def _swap_one(self) -> List[Piece]:
        if self.queue.is_empty() or self.stack.is_empty():
            raise EmptyContainerError(
                "Need a piece in both the queue and the reserve stack to swap."
            )
        return self._exchange(1)

    def _swap_three(self) -> List[Piece]:
        depth = self.swap_depth
        if len(self.queue) < depth or len(self.stack) < depth:
            raise InsufficientOccupancyError(
                f"Need {depth} pieces in both the queue and the reserve stack to swap."
            )
        return self._exchange(depth)

    def _exchange(self, depth: int) -> List[Piece]:
        """Swap queue position i with stack position i for i < depth.

        Returns:
            Pieces now at the queue front followed by pieces now on the stack
        """
        for i in range(depth):
            from_queue = self.queue.peek_at(i)
            from_stack = self.stack.swap_at(i, from_queue)
            self.queue.swap_at(i, from_stack)
        moved_to_queue = [self.queue.peek_at(i) for i in range(depth)]
        moved_to_stack = [self.stack.peek_at(i) for i in range(depth)]
        return moved_to_queue + moved_to_stack

    def _refill(self) -> None:
        """Generate exactly one piece to replace the one taken from the front."""
        self.queue.enqueue(self.generator.next())

    def _describe(self, command: Command, pieces: List[Piece]) -> str:
        if command == Command.PLAY:
            return f"Piece {pieces[0]} played."
        if command == Command.RESERVE:
            return f"Piece {pieces[0]} moved to the reserve."
        if command == Command.USE_RESERVE:
            return f"Reserved piece {pieces[0]} used."
        if command == Command.SWAP_ONE:
            return "Swapped the queue front with the reserve stack top."
        return (
            f"Swapped the first {self.swap_depth} queue pieces "
            f"with the {self.swap_depth} reserve pieces."
        )

    def _build_observation(self) -> Observation:
        return Observation(
            schema_version=self.SCHEMA_VERSION,
            tick=self.tick,
            queue=self.queue.to_list(),
            stack=self.stack.to_list(),
            queue_capacity=self.queue.capacity,
            stack_capacity=self.stack.capacity,
            next_id=self.generator.next_id,
            seed=self.seed,
        )
