"""FastAPI WebSocket server for Tetris Stack."""

import json
import logging
import os
from typing import List, Optional

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

from tetris_stack.env import Command, StackEnv
from api.protocol import (
    PROTOCOL_VERSION,
    HelloRequest,
    HelloResponse,
    ResetRequest,
    CommandRequest,
    StateRequest,
    ObservationResponse,
    ErrorResponse,
    ErrorCode,
    parse_message,
    to_dict,
)

app = FastAPI(title="Tetris Stack API", version="0.1.0")

# Enable CORS for web frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],  # Vite default ports
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class GameSession:
    """Manages a single session; each connection gets its own engine."""

    def __init__(self):
        self.env: Optional[StackEnv] = None
        self.initialized = False

    def reset(self, seed: Optional[int] = None, kinds: Optional[List[str]] = None) -> ObservationResponse:
        """Start a new session.

        Args:
            seed: Random seed (wall clock if None)
            kinds: Fixed kind sequence for the generator

        Returns:
            Initial observation response

        Raises:
            ValueError: If kinds contains an unknown piece kind
        """
        if self.env is None:
            self.env = StackEnv()

        obs = self.env.reset(seed, kinds)
        self.initialized = True

        return ObservationResponse(
            type="obs",
            data=obs.to_dict(),
            ok=True,
            info={"event": "reset", "seed": obs.seed},
        )

    def command(self, name: str) -> ObservationResponse:
        """Execute a player command.

        Args:
            name: Command name

        Returns:
            Command outcome as observation response

        Raises:
            RuntimeError: If the session has not been reset
            KeyError: If the command name is unknown
        """
        if not self.initialized or self.env is None:
            raise RuntimeError("Game not initialized. Send reset first.")

        result = self.env.step(Command[name])

        return ObservationResponse(
            type="obs",
            data=result.obs.to_dict(),
            ok=result.ok,
            info=result.info,
        )

    def state(self) -> ObservationResponse:
        """Report the current state."""
        if not self.initialized or self.env is None:
            raise RuntimeError("Game not initialized. Send reset first.")

        return ObservationResponse(
            type="obs",
            data=self.env.observe().to_dict(),
            ok=True,
            info={"event": "state"},
        )


@app.get("/")
async def root():
    """Root endpoint."""
    return {"name": "Tetris Stack API", "version": PROTOCOL_VERSION}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


async def send_error(websocket: WebSocket, code: str, message: str) -> None:
    error = ErrorResponse(type="error", code=code, message=message)
    await websocket.send_text(json.dumps(to_dict(error)))


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    """WebSocket endpoint for session communication."""
    await websocket.accept()
    session = GameSession()
    logger.info("[WS] Client connected")

    try:
        while True:
            text = await websocket.receive_text()

            try:
                message = parse_message(json.loads(text))

                if isinstance(message, HelloRequest):
                    if message.version != PROTOCOL_VERSION:
                        await send_error(
                            websocket,
                            ErrorCode.VERSION_MISMATCH,
                            f"Unsupported version {message.version}, expected {PROTOCOL_VERSION}",
                        )
                        continue
                    await websocket.send_text(json.dumps(to_dict(HelloResponse())))

                elif isinstance(message, ResetRequest):
                    response = session.reset(message.seed, message.kinds)
                    logger.info(f"[WS] Session reset: seed={response.info['seed']}")
                    await websocket.send_text(json.dumps(to_dict(response)))

                elif isinstance(message, CommandRequest):
                    try:
                        response = session.command(message.command)
                    except RuntimeError as e:
                        await send_error(websocket, ErrorCode.GAME_NOT_INITIALIZED, str(e))
                        continue
                    except KeyError:
                        await send_error(
                            websocket,
                            ErrorCode.INVALID_COMMAND,
                            f"Invalid command: {message.command}",
                        )
                        continue
                    await websocket.send_text(json.dumps(to_dict(response)))

                elif isinstance(message, StateRequest):
                    try:
                        response = session.state()
                    except RuntimeError as e:
                        await send_error(websocket, ErrorCode.GAME_NOT_INITIALIZED, str(e))
                        continue
                    await websocket.send_text(json.dumps(to_dict(response)))

            except json.JSONDecodeError as e:
                await send_error(websocket, ErrorCode.INVALID_MESSAGE, f"Invalid JSON: {str(e)}")

            except ValueError as e:
                await send_error(websocket, ErrorCode.INVALID_MESSAGE, str(e))

            except Exception as e:
                logger.error(f"[WS] Failed to handle message: {e}", exc_info=True)
                await send_error(websocket, ErrorCode.INVALID_MESSAGE, f"Invalid message: {str(e)}")

    except WebSocketDisconnect:
        logger.info("[WS] Client disconnected")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=os.getenv("TETRIS_STACK_HOST", "0.0.0.0"),
        port=int(os.getenv("TETRIS_STACK_PORT", "8000")),
    )
