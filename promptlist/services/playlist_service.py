"""
Playlist assembler.

Resolves the current user, creates a private playlist named after the
prompt, and attaches the collected tracks to it. The three calls run
strictly in order; an expired token stops the sequence immediately.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List

from promptlist.services.exceptions import (
    TokenExpiredError,
    TransportFailureError,
)
from promptlist.spotify import (
    SpotifyAPI,
    SpotifyError,
    SpotifyTokenExpiredError,
)

logger = logging.getLogger(__name__)

PLAYLIST_NAME_PREFIX = "AI Playlist: "
PLAYLIST_DESCRIPTION_TEMPLATE = 'Generated by AI for the prompt: "{prompt}"'
SUCCESS_MESSAGE = "Playlist created successfully!"


def playlist_name_for(prompt: str) -> str:
    return f"{PLAYLIST_NAME_PREFIX}{prompt}"


def playlist_description_for(prompt: str) -> str:
    return PLAYLIST_DESCRIPTION_TEMPLATE.format(prompt=prompt)


@dataclass(frozen=True)
class PlaylistResult:
    """Outcome returned to the caller after a playlist is built."""

    message: str
    playlist_url: str

    def to_dict(self) -> Dict[str, str]:
        return {"message": self.message, "playlistUrl": self.playlist_url}


class PlaylistAssemblyService:
    """Creates a playlist on the user's account and fills it."""

    def __init__(self, api: SpotifyAPI):
        self._api = api

    def assemble(self, prompt: str, track_uris: List[str]) -> PlaylistResult:
        """
        Create and populate a playlist for a prompt.

        A playlist created before a failed track attachment is left on
        the user's account.

        Raises:
            TokenExpiredError: If any step is rejected with 401.
            TransportFailureError: If any step fails otherwise.
        """
        try:
            user = self._api.get_current_user()
            logger.info("Successfully got user ID: %s", user["id"])

            playlist = self._api.create_playlist(
                user["id"],
                name=playlist_name_for(prompt),
                description=playlist_description_for(prompt),
                public=False,
            )

            logger.info("Adding tracks to the playlist...")
            self._api.add_tracks_to_playlist(playlist.id, track_uris)
        except SpotifyTokenExpiredError as e:
            raise TokenExpiredError("Spotify token expired") from e
        except SpotifyError as e:
            raise TransportFailureError(f"Playlist assembly failed: {e}") from e

        return PlaylistResult(
            message=SUCCESS_MESSAGE, playlist_url=playlist.external_url
        )
