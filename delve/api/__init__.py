"""
API Module - Remote play over HTTP.

Exposes the engine via a REST API. A client:
1. Creates a session (optionally with a seed)
2. Submits one input per request
3. Reads back the state and a rendered view
4. Deletes the session when done

All state is session-scoped and held in memory.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    InputRequest,
    # Responses
    SessionResponse,
    GameStateResponse,
    TurnResponse,
    ErrorResponse,
    # Shared
    InventoryEntry,
    ErrorCode,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "InputRequest",
    # Responses
    "SessionResponse",
    "GameStateResponse",
    "TurnResponse",
    "ErrorResponse",
    # Shared
    "InventoryEntry",
    "ErrorCode",
    # Service
    "APIService",
    "create_app",
]
