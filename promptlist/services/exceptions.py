"""
Playlist generation exceptions.

Every failure of the prompt-to-playlist pipeline is raised as a
PlaylistGenerationError carrying its ErrorKind and, once the
orchestrator has seen it, the stage it happened in.
"""

from typing import Optional

from promptlist.enums import ErrorKind, PipelineStage


class PlaylistGenerationError(Exception):
    """Base exception for the prompt-to-playlist pipeline."""

    kind: ErrorKind = ErrorKind.TRANSPORT_FAILURE

    def __init__(self, message: str, stage: Optional[PipelineStage] = None):
        super().__init__(message)
        self.stage = stage


class MissingInputError(PlaylistGenerationError):
    """Raised when the prompt or access token is absent."""
    kind = ErrorKind.MISSING_INPUT


class AIFormatError(PlaylistGenerationError):
    """Raised when the AI reply is not a JSON array of strings."""
    kind = ErrorKind.AI_FORMAT_ERROR


class TransportFailureError(PlaylistGenerationError):
    """Raised when a downstream HTTP call fails for a reason other than auth."""
    kind = ErrorKind.TRANSPORT_FAILURE


class TokenExpiredError(PlaylistGenerationError):
    """Raised when Spotify rejects the caller's bearer token."""
    kind = ErrorKind.TOKEN_EXPIRED


class NoResultsError(PlaylistGenerationError):
    """Raised when every search succeeded but no track was found."""
    kind = ErrorKind.NO_RESULTS
