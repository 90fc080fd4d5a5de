"""
Spotify API data operations.

Handles the Web API calls used to build a playlist: user identity,
catalog search, playlist creation and track attachment. Every call
carries the caller's bearer token; nothing is cached between requests.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from .exceptions import SpotifyAPIError
from .http_client import SpotifyHTTPClient, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaylistResource:
    """A playlist created on the user's Spotify account."""

    id: str
    name: str
    description: str
    external_url: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlaylistResource":
        """
        Build from a Spotify playlist object.

        Raises:
            SpotifyAPIError: If the id or the external URL is missing.
        """
        playlist_id = data.get("id")
        external_url = (data.get("external_urls") or {}).get("spotify")
        if not playlist_id or not external_url:
            raise SpotifyAPIError(
                "Playlist response missing id or external URL"
            )
        return cls(
            id=playlist_id,
            name=data.get("name", ""),
            description=data.get("description") or "",
            external_url=external_url,
        )


class SpotifyAPI:
    """
    Spotify Web API client for data operations.

    Example:
        with SpotifyAPI(access_token) as api:
            user = api.get_current_user()
            tracks = api.search_tracks("chill piano", limit=5)
    """

    def __init__(self, access_token: str, timeout: int = DEFAULT_TIMEOUT):
        """
        Initialize the API client.

        Args:
            access_token: The caller's bearer token.
            timeout: Per-request timeout in seconds.
        """
        self._http = SpotifyHTTPClient(access_token, timeout=timeout)

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self._http.close()

    def __enter__(self) -> "SpotifyAPI":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # =========================================================================
    # User Operations
    # =========================================================================

    def get_current_user(self) -> Dict[str, Any]:
        """
        Get the current user's profile.

        Raises:
            SpotifyTokenExpiredError: If the token is rejected.
            SpotifyAPIError: If the request fails.
        """
        user = self._http.get("/me")
        if not user or not user.get("id"):
            raise SpotifyAPIError("User profile response missing id")
        logger.debug("Retrieved user: %s", user.get("display_name", "Unknown"))
        return user

    # =========================================================================
    # Search Operations
    # =========================================================================

    def search_tracks(self, query: str, limit: int = 5) -> List[Dict[str, Any]]:
        """
        Search Spotify's catalog for tracks.

        Args:
            query: Search query string.
            limit: Maximum number of results (1-50).

        Returns:
            Track objects in Spotify's relevance order. Null entries that
            Spotify occasionally returns are dropped.

        Raises:
            SpotifyTokenExpiredError: If the token is rejected.
            SpotifyAPIError: If the search fails.
        """
        data = self._http.get(
            "/search",
            params={"q": query, "type": "track", "limit": limit},
        )
        items = ((data or {}).get("tracks") or {}).get("items") or []
        tracks = [item for item in items if item]
        logger.debug("Search %r returned %d tracks", query, len(tracks))
        return tracks

    # =========================================================================
    # Playlist Operations
    # =========================================================================

    def create_playlist(
        self,
        user_id: str,
        name: str,
        description: str,
        public: bool = False,
    ) -> PlaylistResource:
        """
        Create a new, empty playlist owned by the given user.

        Raises:
            SpotifyTokenExpiredError: If the token is rejected.
            SpotifyAPIError: If creation fails.
        """
        data = self._http.post(
            f"/users/{user_id}/playlists",
            json={
                "name": name,
                "description": description,
                "public": public,
            },
        )
        playlist = PlaylistResource.from_dict(data or {})
        logger.info("Created playlist %s (%s)", playlist.name, playlist.id)
        return playlist

    def add_tracks_to_playlist(
        self, playlist_id: str, track_uris: List[str]
    ) -> Dict[str, Any]:
        """
        Attach tracks to a playlist in a single request.

        Returns:
            Spotify's response, containing the new snapshot_id.

        Raises:
            SpotifyTokenExpiredError: If the token is rejected.
            SpotifyAPIError: If the update fails.
        """
        result = self._http.post(
            f"/playlists/{playlist_id}/tracks",
            json={"uris": list(track_uris)},
        )
        logger.info(
            "Added %d tracks to playlist %s", len(track_uris), playlist_id
        )
        return result or {}
