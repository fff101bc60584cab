"""
API Module - In-process interface for presentation layers.

A presentation layer:
1. Creates a game (optionally configured)
2. Sends select/tap/split/reset requests
3. Renders the returned snapshot

All state is session-scoped and in-memory.
"""

from .schemas import (
    # Requests
    ConfigureRequest,
    SelectHandRequest,
    TapRequest,
    SplitRequest,
    # Responses
    ActionResponse,
    ErrorResponse,
    ErrorCode,
    # Snapshots
    PlayerInfo,
    GameStateInfo,
)
from .service import GameService

__all__ = [
    # Requests
    "ConfigureRequest",
    "SelectHandRequest",
    "TapRequest",
    "SplitRequest",
    # Responses
    "ActionResponse",
    "ErrorResponse",
    "ErrorCode",
    # Snapshots
    "PlayerInfo",
    "GameStateInfo",
    # Service
    "GameService",
]
