"""
Enums for pipeline stages and error kinds.

Single source of truth for string constants used across services,
error handlers and redirect query flags.
"""

from enum import StrEnum


class PipelineStage(StrEnum):
    """Stages of the prompt-to-playlist pipeline."""
    START = "start"
    QUERY_PLANNING = "query_planning"
    CATALOG_SEARCH = "catalog_search"
    PLAYLIST_ASSEMBLY = "playlist_assembly"
    DONE = "done"
    ERROR = "error"


class ErrorKind(StrEnum):
    """Failure categories surfaced to the caller."""
    # Token exchange (sent to the frontend as ?error=<value>)
    STATE_MISMATCH = "state_mismatch"
    INVALID_TOKEN = "invalid_token"

    # Playlist generation
    MISSING_INPUT = "missing_input"
    AI_FORMAT_ERROR = "ai_format_error"
    TRANSPORT_FAILURE = "transport_failure"
    TOKEN_EXPIRED = "token_expired"
    NO_RESULTS = "no_results"
