"""Failure taxonomy shared by the containers and the engine."""

from enum import Enum
from typing import Optional


class FailureReason(str, Enum):
    """Why a command was rejected."""
    EMPTY_CONTAINER = "EMPTY_CONTAINER"
    FULL_CONTAINER = "FULL_CONTAINER"
    INSUFFICIENT_OCCUPANCY = "INSUFFICIENT_OCCUPANCY"


class PieceContainerError(Exception):
    """Base class for queue/stack errors."""

    reason: Optional[FailureReason] = None


class EmptyContainerError(PieceContainerError):
    """Raised when removing from an empty queue or stack."""

    reason = FailureReason.EMPTY_CONTAINER


class FullContainerError(PieceContainerError):
    """Raised when a container has no room left."""

    reason = FailureReason.FULL_CONTAINER


class InsufficientOccupancyError(PieceContainerError):
    """Raised when a container holds fewer pieces than an operation needs."""

    reason = FailureReason.INSUFFICIENT_OCCUPANCY
