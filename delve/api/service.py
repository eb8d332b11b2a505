"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine inputs
2. Manages sessions
3. Formats world state for clients

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ..engine_core.action import Input, InputType
from ..engine_core.geometry import Direction
from ..platforms.render import render_view
from ..session import Session, SessionManager
from .schemas import (
    CreateSessionRequest,
    DirectionName,
    ErrorCode,
    ErrorResponse,
    GameStateResponse,
    InputRequest,
    InventoryEntry,
    SessionResponse,
    TurnResponse,
)

VIEW_WIDTH = 42
VIEW_HEIGHT = 15


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        session = service.create_session(CreateSessionRequest(seed=7))
        turn = service.submit_input(
            session.session_id,
            InputRequest(input_type="dir", direction="up"),
        )
    """
    session_manager: SessionManager = field(default_factory=SessionManager)
    default_seed: int | None = None
    view_width: int = VIEW_WIDTH
    view_height: int = VIEW_HEIGHT

    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        seed = request.seed if request.seed is not None else self.default_seed
        session = self.session_manager.create_session(seed=seed)
        return self._session_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if session is None:
            return self._not_found(session_id)
        return self._session_response(session)

    def end_session(self, session_id: str) -> bool:
        return self.session_manager.end_session(session_id)

    def list_sessions(self) -> list[str]:
        return self.session_manager.list_sessions()

    def get_game_state(self, session_id: str) -> GameStateResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if session is None:
            return self._not_found(session_id)
        return self._state_response(session)

    def submit_input(
        self, session_id: str, request: InputRequest
    ) -> TurnResponse | ErrorResponse:
        """Resolve one turn for a session."""
        session = self.session_manager.get_session(session_id)
        if session is None:
            return self._not_found(session_id)
        if not session.active:
            return ErrorResponse(
                error=f"Session {session_id} has ended",
                error_code=ErrorCode.SESSION_ENDED,
            )

        try:
            inp = self._to_input(request)
        except ValueError as e:
            return ErrorResponse(error=str(e), error_code=ErrorCode.INVALID_INPUT)

        still_running = session.submit(inp)
        return TurnResponse(
            session_id=session_id,
            game_over=not still_running,
            state=self._state_response(session),
        )

    def _to_input(self, request: InputRequest) -> Input:
        direction = Direction(request.direction.value) if request.direction else None
        return Input(
            input_type=InputType(request.input_type.value),
            direction=direction,
            shifted=request.shifted,
        )

    def _not_found(self, session_id: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Session {session_id} not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        )

    def _session_response(self, session: Session) -> SessionResponse:
        return SessionResponse(
            session_id=session.session_id,
            active=session.active,
            seed=session.state.seed,
            turn_number=session.turn_number,
            created_at=session.created_at,
        )

    def _state_response(self, session: Session) -> GameStateResponse:
        state = session.state
        selected = state.selected_item
        return GameStateResponse(
            session_id=session.session_id,
            active=session.active,
            turn_number=session.turn_number,
            player_pos=state.player_pos,
            player_dir=DirectionName(state.player_dir.value),
            menu=state.menu.value,
            message=state.message,
            facing=state.tile_in_front().name,
            inventory=[
                InventoryEntry(
                    item=item.value,
                    name=item.display_name,
                    count=count,
                    selected=item == selected,
                )
                for item, count in state.inventory.items()
            ],
            selected_item=selected.value if selected else None,
            view=render_view(state, self.view_width, self.view_height),
        )
