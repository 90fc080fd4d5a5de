"""
Spotify authentication and token exchange.

Handles authorization URL generation and the authorization-code
exchange. Tokens are handed back to the caller and never stored here.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import requests

from .credentials import SpotifyCredentials
from .exceptions import SpotifyAuthError, SpotifyTokenError

logger = logging.getLogger(__name__)


# Read the private profile and email, modify public and private playlists
DEFAULT_SCOPES = [
    "user-read-private",
    "user-read-email",
    "playlist-modify-public",
    "playlist-modify-private",
]


@dataclass(frozen=True)
class TokenPair:
    """
    Access/refresh token pair returned by a successful code exchange.

    Owned by the caller; the backend only forwards it.
    """

    access_token: str
    refresh_token: str
    expires_in: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TokenPair":
        """
        Create a TokenPair from Spotify's token endpoint response.

        Raises:
            SpotifyTokenError: If any of the three fields is missing or empty.
        """
        if not isinstance(data, dict):
            raise SpotifyTokenError(
                f"Token data must be a dictionary, got {type(data)}"
            )

        required = ["access_token", "refresh_token", "expires_in"]
        missing = [k for k in required if not data.get(k)]
        if missing:
            raise SpotifyTokenError(f"Token missing required fields: {missing}")

        try:
            expires_in = int(data["expires_in"])
        except (TypeError, ValueError):
            raise SpotifyTokenError(
                f"Token expires_in is not an integer: {data['expires_in']!r}"
            )

        return cls(
            access_token=data["access_token"],
            refresh_token=data["refresh_token"],
            expires_in=expires_in,
        )

    def to_fragment(self) -> str:
        """Encode as URL-fragment key/value pairs for the frontend."""
        return urlencode({
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "expires_in": self.expires_in,
        })


class SpotifyAuthManager:
    """
    Manages the Spotify OAuth authorization-code flow.

    Stateless regarding tokens: it builds authorization URLs and performs
    code exchanges, returning the result to the caller.

    Example:
        credentials = SpotifyCredentials.from_flask_config(app.config)
        auth_manager = SpotifyAuthManager(credentials)

        auth_url = auth_manager.get_auth_url(state)
        token_pair = auth_manager.exchange_code(code)
    """

    # Spotify OAuth endpoints
    _AUTHORIZE_URL = "https://accounts.spotify.com/authorize"
    _TOKEN_URL = "https://accounts.spotify.com/api/token"

    def __init__(
        self,
        credentials: SpotifyCredentials,
        scopes: Optional[List[str]] = None,
        timeout: int = 30,
    ):
        """
        Initialize the auth manager.

        Args:
            credentials: SpotifyCredentials instance with OAuth credentials.
            scopes: Optional list of OAuth scopes. Defaults to DEFAULT_SCOPES.
            timeout: Token endpoint request timeout in seconds.
        """
        self._credentials = credentials
        self._scopes = scopes or DEFAULT_SCOPES
        self._scope_string = " ".join(self._scopes)
        self._timeout = timeout

    def get_auth_url(self, state: str, show_dialog: bool = True) -> str:
        """
        Generate the Spotify authorization URL.

        Args:
            state: One-time value for CSRF protection.
            show_dialog: Force Spotify to show the consent screen again.

        Returns:
            The authorization URL to redirect users to.

        Raises:
            SpotifyAuthError: If no state value is supplied.
        """
        if not state:
            raise SpotifyAuthError("A state value is required")

        params = {
            "response_type": "code",
            "client_id": self._credentials.client_id,
            "scope": self._scope_string,
            "redirect_uri": self._credentials.redirect_uri,
            "state": state,
        }
        if show_dialog:
            params["show_dialog"] = "true"

        url = f"{self._AUTHORIZE_URL}?{urlencode(params)}"
        logger.debug("Generated auth URL: %s...", url[:50])
        return url

    def exchange_code(self, code: str) -> TokenPair:
        """
        Exchange an authorization code for tokens.

        Sends a single request authenticated with HTTP Basic client
        credentials. Replayed codes are rejected by Spotify, not here.

        Args:
            code: The authorization code from the OAuth callback.

        Returns:
            TokenPair with access and refresh tokens.

        Raises:
            SpotifyAuthError: If code is missing.
            SpotifyTokenError: If the exchange fails for any reason.
        """
        if not code:
            raise SpotifyAuthError("Authorization code is required")

        try:
            response = requests.post(
                self._TOKEN_URL,
                data={
                    "code": code,
                    "redirect_uri": self._credentials.redirect_uri,
                    "grant_type": "authorization_code",
                },
                auth=(
                    self._credentials.client_id,
                    self._credentials.client_secret,
                ),
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.error("Token exchange request failed: %s", e)
            raise SpotifyTokenError(f"Token exchange failed: {e}")

        if response.status_code != 200:
            try:
                error_msg = response.json().get(
                    "error_description", response.text
                )
            except ValueError:
                error_msg = response.text
            logger.error(
                "Token exchange rejected (%d): %s",
                response.status_code, error_msg,
            )
            raise SpotifyTokenError(
                f"Token exchange failed: {error_msg}"
            )

        try:
            token_data = response.json()
        except ValueError:
            raise SpotifyTokenError("Token endpoint returned invalid JSON")

        token_pair = TokenPair.from_dict(token_data)
        logger.info("Successfully exchanged code for token")
        return token_pair
