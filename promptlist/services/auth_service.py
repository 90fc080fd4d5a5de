"""
Authentication service for the Spotify OAuth flow.

Issues one-time state values, builds the authorization redirect, and
validates the callback before exchanging the code for a TokenPair.
"""

import logging
import secrets
from typing import Optional, Tuple

import redis

from promptlist.enums import ErrorKind
from promptlist.services.state_service import AuthStateStore
from promptlist.spotify import SpotifyAuthManager, SpotifyError, TokenPair

logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    """Raised when authentication fails."""

    kind: ErrorKind = ErrorKind.INVALID_TOKEN


class StateMismatchError(AuthenticationError):
    """Raised when the callback state is absent or does not match."""

    kind = ErrorKind.STATE_MISMATCH


class InvalidTokenError(AuthenticationError):
    """Raised when the code cannot be exchanged for a complete TokenPair."""

    kind = ErrorKind.INVALID_TOKEN


class AuthService:
    """Service for managing the Spotify authorization-code flow."""

    def __init__(
        self, auth_manager: SpotifyAuthManager, state_store: AuthStateStore
    ):
        self._auth_manager = auth_manager
        self._state_store = state_store

    def begin_login(self) -> Tuple[str, str]:
        """
        Start a login attempt.

        Returns:
            Tuple of (authorization URL, state value). The caller must
            hand the state to the browser as a cookie.

        Raises:
            AuthenticationError: If the state cannot be registered.
        """
        try:
            state = self._state_store.issue()
        except redis.RedisError as e:
            logger.error("Failed to register auth state: %s", e)
            raise AuthenticationError(f"Failed to start login: {e}")

        auth_url = self._auth_manager.get_auth_url(state, show_dialog=True)
        return auth_url, state

    def complete_login(
        self,
        code: Optional[str],
        state: Optional[str],
        stored_state: Optional[str],
        error: Optional[str] = None,
    ) -> TokenPair:
        """
        Validate a callback and exchange its code for tokens.

        Args:
            code: Authorization code from the callback query string.
            state: State value from the callback query string.
            stored_state: State value from the browser cookie.
            error: Error flag Spotify sets when the user declines.

        Returns:
            TokenPair with all three fields present.

        Raises:
            StateMismatchError: If the state is absent, differs from the
                cookie, or was never issued / already used. No token
                request is made.
            InvalidTokenError: If Spotify reported an error or the
                exchange failed.
        """
        # The cookie value is single-use whatever the outcome
        known = self._state_store.consume(stored_state)

        if not state or not stored_state or not secrets.compare_digest(
            state.encode("utf-8"), stored_state.encode("utf-8")
        ):
            logger.warning("Auth state mismatch on callback")
            raise StateMismatchError("State parameter does not match")
        if not known:
            raise StateMismatchError("State value expired or already used")

        if error:
            logger.warning("Spotify returned OAuth error: %s", error)
            raise InvalidTokenError(f"Authorization denied: {error}")
        if not code:
            raise InvalidTokenError("No authorization code provided")

        try:
            return self._auth_manager.exchange_code(code)
        except SpotifyError as e:
            logger.error("Token exchange failed: %s", e)
            raise InvalidTokenError(f"Failed to exchange code for token: {e}")
