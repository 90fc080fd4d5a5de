"""
Flask routes package for Promptlist.

This module handles HTTP requests and responses only.
All business logic is delegated to the services layer.

The single `main` Blueprint is split across feature modules. All
modules import `main` from this package and register routes on it.
"""

import logging

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from promptlist import get_auth_state_store
from promptlist.services import AuthService, AuthenticationError
from promptlist.spotify import SpotifyAuthManager, SpotifyCredentials

logger = logging.getLogger(__name__)
main = Blueprint("main", __name__)


# =============================================================================
# Helper Functions (shared across all route modules)
# =============================================================================


def json_error(message: str, status_code: int = 400) -> tuple:
    """Return a JSON error response."""
    return jsonify({"error": message}), status_code


def validate_json(schema_class, error_message: str):
    """
    Parse and validate the JSON request body against a Pydantic schema.

    Returns:
        (parsed_model, None) on success.
        (None, error_response_tuple) on failure.

    Usage::

        parsed, err = validate_json(MySchema, "Bad body.")
        if err:
            return err
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        logger.warning("Request body is not a JSON object")
        return None, json_error(error_message, 400)

    try:
        return schema_class.model_validate(data), None
    except ValidationError as e:
        fields = [
            ".".join(str(loc) for loc in err["loc"]) for err in e.errors()
        ]
        logger.warning("Validation error on fields: %s", fields)
        return None, json_error(error_message, 400)


def get_auth_service() -> AuthService:
    """
    Build an AuthService from the app config and state store.

    Raises:
        AuthenticationError: If Spotify credentials are not configured.
    """
    try:
        credentials = SpotifyCredentials.from_flask_config(current_app.config)
    except ValueError as e:
        logger.error("Spotify credentials not configured: %s", e)
        raise AuthenticationError(f"Spotify is not configured: {e}")

    auth_manager = SpotifyAuthManager(
        credentials, timeout=current_app.config.get("SPOTIFY_HTTP_TIMEOUT", 30)
    )
    return AuthService(auth_manager, get_auth_state_store())


def frontend_uri() -> str:
    """Frontend origin without a trailing slash."""
    return current_app.config["FRONTEND_URI"].rstrip("/")


# =============================================================================
# Import route modules to register their routes on the Blueprint.
# These must be at the bottom to avoid circular imports.
# =============================================================================

from promptlist.routes import (  # noqa: E402, F401
    core,
    auth,
    playlists,
)
