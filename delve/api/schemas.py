"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between HTTP clients and the engine.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or was deleted
- SESSION_ENDED: Session was quit and accepts no more input
- INVALID_INPUT: Input is malformed (e.g. a move without a direction)
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class InputKind(str, Enum):
    """Input types accepted by the input endpoint."""
    DIR = "dir"
    BUILD = "build"
    QUIT = "quit"
    OPEN_INVENTORY = "open_inventory"
    CLOSE_MENU = "close_menu"


class DirectionName(str, Enum):
    """Directions, as sent by clients."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    SESSION_ENDED = "SESSION_ENDED"
    INVALID_INPUT = "INVALID_INPUT"


# =============================================================================
# Shared Models
# =============================================================================

class InventoryEntry(BaseModel):
    """One inventory line."""
    item: str
    name: str
    count: int
    selected: bool = False


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to start a new game."""
    seed: Optional[int] = Field(None, description="World seed; server default if omitted")


class InputRequest(BaseModel):
    """One turn's input."""
    input_type: InputKind
    direction: Optional[DirectionName] = Field(None, description="Required for 'dir'")
    shifted: bool = Field(False, description="Move without turning first")


# =============================================================================
# Response Models
# =============================================================================

class SessionResponse(BaseModel):
    """Session status."""
    session_id: str
    active: bool
    seed: int
    turn_number: int
    created_at: float


class GameStateResponse(BaseModel):
    """Visible game state."""
    session_id: str
    active: bool
    turn_number: int
    player_pos: tuple[int, int]
    player_dir: DirectionName
    menu: str
    message: str
    facing: str = Field(description="Name of the tile in front of the player")
    inventory: list[InventoryEntry] = Field(default_factory=list)
    selected_item: Optional[str] = None
    view: list[str] = Field(default_factory=list, description="Rendered map lines")


class TurnResponse(BaseModel):
    """Result of submitting an input."""
    session_id: str
    game_over: bool
    state: GameStateResponse


class SessionListResponse(BaseModel):
    """Active session IDs."""
    sessions: list[str]
    count: int


class EndSessionResponse(BaseModel):
    """Result of deleting a session."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check."""
    status: str = "ok"
    version: str
    active_sessions: int


class ErrorResponse(BaseModel):
    """Error returned instead of a normal response."""
    error: str
    error_code: ErrorCode
