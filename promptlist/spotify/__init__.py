"""
Spotify API integration module.

Architecture:
    - credentials.py: SpotifyCredentials for config/DI
    - auth.py: SpotifyAuthManager for the authorization-code flow
    - http_client.py: SpotifyHTTPClient, bearer-token requests.Session wrapper
    - api.py: SpotifyAPI for identity, search and playlist operations
    - exceptions.py: Exception hierarchy

Usage:
    from promptlist.spotify import (
        SpotifyCredentials,
        SpotifyAuthManager,
        SpotifyAPI,
    )

    credentials = SpotifyCredentials.from_flask_config(app.config)
    auth_manager = SpotifyAuthManager(credentials)
    auth_url = auth_manager.get_auth_url(state)

    # After callback, exchange code for token
    token_pair = auth_manager.exchange_code(code)

    with SpotifyAPI(token_pair.access_token) as api:
        user = api.get_current_user()
"""

# Credentials (for dependency injection)
from .credentials import SpotifyCredentials

# Auth (code exchange)
from .auth import (
    SpotifyAuthManager,
    TokenPair,
    DEFAULT_SCOPES,
)

# API (data operations)
from .api import SpotifyAPI, PlaylistResource

# Exceptions
from .exceptions import (
    SpotifyError,
    SpotifyAuthError,
    SpotifyTokenError,
    SpotifyTokenExpiredError,
    SpotifyAPIError,
)


__all__ = [
    # Credentials
    'SpotifyCredentials',

    # Auth
    'SpotifyAuthManager',
    'TokenPair',
    'DEFAULT_SCOPES',

    # API
    'SpotifyAPI',
    'PlaylistResource',

    # Exceptions
    'SpotifyError',
    'SpotifyAuthError',
    'SpotifyTokenError',
    'SpotifyTokenExpiredError',
    'SpotifyAPIError',
]
