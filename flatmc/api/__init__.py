"""
API Module - Suggestion service and HTTP interface.

The service hashes submitted states, runs the search, and publishes a
Suggested event per answer. The FastAPI app exposes it over REST.
"""

from .service import SuggestedEvent, SuggestionService, UnknownGame, state_hash
from .schemas import (
    ErrorCode,
    ErrorResponse,
    SuggestRequest,
    SuggestResponse,
)

__all__ = [
    "SuggestedEvent",
    "SuggestionService",
    "UnknownGame",
    "state_hash",
    "ErrorCode",
    "ErrorResponse",
    "SuggestRequest",
    "SuggestResponse",
]
