"""
FastAPI Application - REST API for remote play.

Endpoints:
    GET    /health                          Health check
    POST   /api/v1/sessions                 Create game session
    GET    /api/v1/sessions                 List sessions
    GET    /api/v1/sessions/{id}            Get session status
    DELETE /api/v1/sessions/{id}            End session
    GET    /api/v1/sessions/{id}/state      Get game state
    POST   /api/v1/sessions/{id}/input      Submit one turn's input

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Optional, Union
import os

# Environment configuration
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

_ERROR_STATUS = {
    "SESSION_NOT_FOUND": 404,
    "SESSION_ENDED": 409,
    "INVALID_INPUT": 422,
}


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    from .. import __version__
    from .service import APIService
    from .schemas import (
        CreateSessionRequest,
        InputRequest,
        SessionResponse,
        GameStateResponse,
        TurnResponse,
        SessionListResponse,
        EndSessionResponse,
        HealthResponse,
        ErrorResponse,
    )

    app = FastAPI(
        title="Delve API",
        description="Turn-based grid world: dig, collect and build, one input per request.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService()

    def error_response(error: ErrorResponse) -> JSONResponse:
        return JSONResponse(
            status_code=_ERROR_STATUS.get(error.error_code.value, 400),
            content=error.model_dump(mode="json"),
        )

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health() -> HealthResponse:
        return HealthResponse(
            version=__version__,
            active_sessions=len(api_service.list_sessions()),
        )

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        tags=["Sessions"],
        summary="Create a new game session",
    )
    async def create_session(
        request: Optional[CreateSessionRequest] = None,
    ) -> SessionResponse:
        """Start a fresh world. Omit the body to use the default seed."""
        return api_service.create_session(request or CreateSessionRequest())

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List sessions",
    )
    async def list_sessions() -> SessionListResponse:
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session status",
    )
    async def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        response = api_service.get_session(session_id)
        if isinstance(response, ErrorResponse):
            return error_response(response)
        return response

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(session_id: str) -> EndSessionResponse:
        success = api_service.end_session(session_id)
        return EndSessionResponse(success=success, session_id=session_id)

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/sessions/{session_id}/state",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Get the current game state",
    )
    async def get_state(session_id: str) -> Union[GameStateResponse, JSONResponse]:
        response = api_service.get_game_state(session_id)
        if isinstance(response, ErrorResponse):
            return error_response(response)
        return response

    @app.post(
        "/api/v1/sessions/{session_id}/input",
        response_model=TurnResponse,
        responses={
            404: {"model": ErrorResponse, "description": "Session not found"},
            409: {"model": ErrorResponse, "description": "Session has ended"},
            422: {"model": ErrorResponse, "description": "Malformed input"},
        },
        tags=["Game"],
        summary="Submit one turn's input",
    )
    async def submit_input(
        session_id: str, request: InputRequest
    ) -> Union[TurnResponse, JSONResponse]:
        """
        Resolve one turn.

        A `quit` input ends the session; its state stays readable until
        the session is deleted.
        """
        response = api_service.submit_input(session_id, request)
        if isinstance(response, ErrorResponse):
            return error_response(response)
        return response

    return app
