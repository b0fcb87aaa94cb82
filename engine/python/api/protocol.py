"""Protocol data classes for WebSocket communication."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Literal
from enum import Enum

PROTOCOL_VERSION = "s1.0.0"


class MessageType(str, Enum):
    """WebSocket message types."""
    HELLO = "hello"
    RESET = "reset"
    COMMAND = "command"
    STATE = "state"
    OBS = "obs"
    ERROR = "error"


@dataclass
class HelloRequest:
    """Client hello message."""
    type: Literal["hello"] = "hello"
    version: str = PROTOCOL_VERSION


@dataclass
class HelloResponse:
    """Server hello response."""
    type: Literal["hello"] = "hello"
    version: str = PROTOCOL_VERSION
    server: str = "tetris-stack-py"


@dataclass
class ResetRequest:
    """Request to start a new session."""
    seed: Optional[int] = None
    kinds: Optional[List[str]] = None  # Fixed kind sequence, e.g. ["I", "O"]
    type: Literal["reset"] = "reset"


@dataclass
class CommandRequest:
    """Request to execute a player command."""
    command: str  # PLAY, RESERVE, USE_RESERVE, SWAP_ONE, SWAP_THREE
    type: Literal["command"] = "command"


@dataclass
class StateRequest:
    """Request for the current state without executing anything."""
    type: Literal["state"] = "state"


@dataclass
class ObservationResponse:
    """Session state observation response."""
    data: Dict[str, Any]  # Observation dict from env.to_dict()
    ok: bool
    info: Dict[str, Any]
    type: Literal["obs"] = "obs"


@dataclass
class ErrorResponse:
    """Error response."""
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None
    type: Literal["error"] = "error"


class ErrorCode:
    """Standard error codes."""
    INVALID_MESSAGE = "INVALID_MESSAGE"
    INVALID_COMMAND = "INVALID_COMMAND"
    GAME_NOT_INITIALIZED = "GAME_NOT_INITIALIZED"
    VERSION_MISMATCH = "VERSION_MISMATCH"


def parse_message(data: Dict[str, Any]) -> Any:
    """Parse incoming WebSocket message.

    Args:
        data: JSON message dict

    Returns:
        Parsed message object

    Raises:
        ValueError: If message type or fields are invalid
    """
    if not isinstance(data, dict):
        raise ValueError("Message must be a JSON object")
    msg_type = data.get("type")

    try:
        if msg_type == MessageType.HELLO:
            return HelloRequest(**data)
        elif msg_type == MessageType.RESET:
            return ResetRequest(**data)
        elif msg_type == MessageType.COMMAND:
            return CommandRequest(**data)
        elif msg_type == MessageType.STATE:
            return StateRequest(**data)
    except TypeError as e:
        raise ValueError(f"Invalid fields for {msg_type}: {e}") from e

    raise ValueError(f"Unknown message type: {msg_type}")


def to_dict(obj: Any) -> Dict[str, Any]:
    """Convert dataclass to dict for JSON serialization.

    Args:
        obj: Dataclass instance

    Returns:
        Dictionary representation
    """
    return asdict(obj)
