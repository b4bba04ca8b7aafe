"""
FastAPI Application - REST API for move suggestions.

Endpoints:
    GET    /api/v1/health                 Service status and stream nonce
    GET    /api/v1/games                  Registered games
    POST   /api/v1/games/{game}/suggest   Suggest a move for a state
    GET    /api/v1/events                 Published Suggested events

Handlers are async and never await, so the event loop runs one search
at a time and the shared stream nonce advances in request order.

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Union
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..engine_core.search import NoLegalMoves
from .schemas import (
    ErrorCode,
    ErrorResponse,
    EventListResponse,
    GameInfo,
    GameListResponse,
    HealthResponse,
    SuggestRequest,
    SuggestResponse,
)
from .service import SuggestedEvent, SuggestionService, UnknownGame


# Environment configuration
FLATMC_ENV = os.getenv("FLATMC_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")


def _to_response(event: SuggestedEvent) -> SuggestResponse:
    return SuggestResponse(
        game=event.game,
        action=event.action,
        state_hash=event.state_hash,
        difficulty=event.difficulty,
        iterations=event.iterations,
        nonce=event.nonce,
    )


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional SuggestionService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="flatmc Suggestion API",
        description="""
Deterministic flat Monte-Carlo move suggestions for two-player games.

Identical (state, difficulty) requests against the same stream nonce
always return the same action.

## Error Codes

| Code | Description |
|------|-------------|
| `NO_LEGAL_MOVES` | The state is terminal or has no legal action |
| `UNKNOWN_GAME` | No adapter registered under that name |
| `INVALID_STATE` | The state could not be decoded |
| `VALIDATION_ERROR` | The request body failed validation (400) |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or SuggestionService()
    app.state.service = api_service

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: dict | None = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Report malformed request bodies as VALIDATION_ERROR instead of the bare 422."""
        errors = [
            {"loc": [str(part) for part in e["loc"]], "msg": e["msg"], "type": e["type"]}
            for e in exc.errors()
        ]
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Request validation failed",
            details={"errors": errors},
        )

    # =========================================================================
    # Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["Service"],
        summary="Service status",
    )
    async def health() -> HealthResponse:
        return HealthResponse(
            version=__version__,
            environment=FLATMC_ENV,
            nonce=api_service.stream.nonce,
        )

    @app.get(
        "/api/v1/games",
        response_model=GameListResponse,
        tags=["Games"],
        summary="List registered games",
    )
    async def list_games() -> GameListResponse:
        games = [
            GameInfo(name=name, adapter=type(api_service.get_adapter(name)).__name__)
            for name in api_service.list_games()
        ]
        return GameListResponse(games=games, count=len(games))

    @app.post(
        "/api/v1/games/{game}/suggest",
        response_model=SuggestResponse,
        responses={
            400: {"model": ErrorResponse, "description": "State could not be decoded"},
            404: {"model": ErrorResponse, "description": "Unknown game"},
            422: {"model": ErrorResponse, "description": "No legal moves"},
        },
        tags=["Suggestions"],
        summary="Suggest a move",
    )
    async def suggest(game: str, request: SuggestRequest) -> Union[SuggestResponse, JSONResponse]:
        """
        Run the Monte-Carlo search for `state` and publish a Suggested event.

        Blocks the event loop for the whole search, which keeps draws ordered.
        """
        try:
            event = api_service.suggest_move(game, request.state, request.difficulty)
        except UnknownGame as e:
            return make_error_response(ErrorCode.UNKNOWN_GAME, str(e), status_code=404)
        except NoLegalMoves as e:
            return make_error_response(ErrorCode.NO_LEGAL_MOVES, str(e), status_code=422)
        except ValueError as e:
            return make_error_response(ErrorCode.INVALID_STATE, str(e))

        return _to_response(event)

    @app.get(
        "/api/v1/events",
        response_model=EventListResponse,
        tags=["Suggestions"],
        summary="List published suggestions",
    )
    async def list_events() -> EventListResponse:
        events = [_to_response(e) for e in api_service.events]
        return EventListResponse(events=events, count=len(events))

    return app


# For running directly: uvicorn flatmc.api.app:app
app = create_app()
