"""
Pydantic Schemas for API - Request/response models for OpenAPI.

Error Codes:
- NO_LEGAL_MOVES: The state is terminal or has no legal action
- UNKNOWN_GAME: No adapter is registered under the game name
- INVALID_STATE: The submitted state could not be decoded
- VALIDATION_ERROR: Request body failed validation
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    NO_LEGAL_MOVES = "NO_LEGAL_MOVES"
    UNKNOWN_GAME = "UNKNOWN_GAME"
    INVALID_STATE = "INVALID_STATE"
    VALIDATION_ERROR = "VALIDATION_ERROR"


# =============================================================================
# Requests
# =============================================================================

class SuggestRequest(BaseModel):
    """Ask for a move suggestion."""
    state: dict[str, Any] = Field(description="Encoded game state")
    difficulty: int = Field(50, ge=0, le=100, description="0 (weakest) to 100 (strongest)")


# =============================================================================
# Responses
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None
    api_version: str = Field("v1", description="API version")


class SuggestResponse(BaseModel):
    """A suggested move and its audit metadata."""
    game: str
    action: dict[str, Any] = Field(description="Encoded suggested action")
    state_hash: str = Field(description="BLAKE2b-256 hex digest of the canonical state")
    difficulty: int
    iterations: int = Field(description="Rollout budget for the difficulty")
    nonce: int = Field(description="Stream nonce after the search")
    api_version: str = Field("v1", description="API version")


class GameInfo(BaseModel):
    """A registered game."""
    name: str
    adapter: str


class GameListResponse(BaseModel):
    games: list[GameInfo] = Field(default_factory=list)
    count: int = 0


class EventListResponse(BaseModel):
    """Published Suggested events, oldest first."""
    events: list[SuggestResponse] = Field(default_factory=list)
    count: int = 0


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    environment: str
    nonce: int
