"""
Playlist routes: turn a prompt into a playlist on the user's account.

Pipeline errors raised here are converted to JSON responses by the
global error handlers.
"""

import logging

from flask import current_app, jsonify

from promptlist.error_handlers import MISSING_INPUT_MESSAGE
from promptlist.routes import main, validate_json
from promptlist.schemas import CreatePlaylistRequest
from promptlist.services import PlaylistGenerationService

logger = logging.getLogger(__name__)


@main.route("/create-playlist", methods=["POST"])
def create_playlist():
    """Create a playlist from {prompt, accessToken}."""
    parsed, err = validate_json(CreatePlaylistRequest, MISSING_INPUT_MESSAGE)
    if err:
        return err

    service = PlaylistGenerationService.from_flask_config(current_app.config)
    result = service.generate(parsed.prompt, parsed.access_token)

    return jsonify(result.to_dict())
