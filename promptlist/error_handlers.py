"""
Global Flask error handlers.

Converts pipeline exceptions and Pydantic validation errors into the
JSON error body the frontend consumes: {"error": "<message>"}.
Provider error bodies are logged, never returned.
"""

import logging
from flask import jsonify
from pydantic import ValidationError

from promptlist.services import (
    PlaylistGenerationError,
    MissingInputError,
    AIFormatError,
    TokenExpiredError,
    NoResultsError,
)

logger = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "Prompt and access token are required."
TOKEN_EXPIRED_MESSAGE = "Spotify token expired."
NO_RESULTS_MESSAGE = "No songs found for that prompt."
AI_FORMAT_MESSAGE = "AI did not return valid JSON."
INTERNAL_ERROR_MESSAGE = "An internal server error occurred."


def json_error_response(message: str, status_code: int):
    """Create a standardized JSON error response."""
    return jsonify({"error": message}), status_code


def register_error_handlers(app):
    """
    Register global error handlers with the Flask app.

    Args:
        app: The Flask application instance.
    """

    # =========================================================================
    # Bad Request Errors (400)
    # =========================================================================

    @app.errorhandler(ValidationError)
    def handle_validation_error(error: ValidationError):
        """Handle Pydantic validation errors on request bodies."""
        fields = ", ".join(
            ".".join(str(loc) for loc in err["loc"]) for err in error.errors()
        )
        logger.warning("Validation error on fields: %s", fields or "unknown")
        return json_error_response(MISSING_INPUT_MESSAGE, 400)

    @app.errorhandler(MissingInputError)
    def handle_missing_input(error: MissingInputError):
        """Handle an absent prompt or access token."""
        logger.warning("Missing input: %s", error)
        return json_error_response(MISSING_INPUT_MESSAGE, 400)

    # =========================================================================
    # Authentication Errors (401)
    # =========================================================================

    @app.errorhandler(TokenExpiredError)
    def handle_token_expired(error: TokenExpiredError):
        """Handle a bearer token Spotify no longer accepts."""
        logger.warning("Token expired at stage %s: %s", error.stage, error)
        return json_error_response(TOKEN_EXPIRED_MESSAGE, 401)

    # =========================================================================
    # Not Found Errors (404)
    # =========================================================================

    @app.errorhandler(NoResultsError)
    def handle_no_results(error: NoResultsError):
        """Handle a search batch that found no tracks."""
        logger.info("No results: %s", error)
        return json_error_response(NO_RESULTS_MESSAGE, 404)

    # =========================================================================
    # Server Errors (500)
    # =========================================================================

    @app.errorhandler(AIFormatError)
    def handle_ai_format_error(error: AIFormatError):
        """Handle an AI reply that is not a JSON array."""
        logger.error("AI format error: %s", error)
        return json_error_response(AI_FORMAT_MESSAGE, 500)

    @app.errorhandler(PlaylistGenerationError)
    def handle_generation_error(error: PlaylistGenerationError):
        """Handle transport failures and any other pipeline error."""
        logger.error(
            "Playlist generation failed at stage %s (%s): %s",
            error.stage, error.kind, error,
        )
        return json_error_response(INTERNAL_ERROR_MESSAGE, 500)

    # =========================================================================
    # HTTP Error Codes
    # =========================================================================

    @app.errorhandler(400)
    def handle_bad_request(error):
        """Handle 400 Bad Request."""
        return json_error_response("Bad request.", 400)

    @app.errorhandler(404)
    def handle_not_found(error):
        """Handle 404 Not Found."""
        return json_error_response("Resource not found.", 404)

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        """Handle 405 Method Not Allowed."""
        return json_error_response("Method not allowed.", 405)

    @app.errorhandler(500)
    def handle_internal_error(error):
        """Handle 500 Internal Server Error."""
        logger.error("Internal server error: %s", error, exc_info=True)
        return json_error_response(INTERNAL_ERROR_MESSAGE, 500)

    logger.info("Global error handlers registered")
