"""
Lightweight HTTP client for the Spotify Web API.

Wraps requests.Session with the bearer token header and maps HTTP
failures onto the Spotify exception hierarchy. Requests are sent once;
failures are surfaced to the caller, never retried.
"""

import logging
import threading
from typing import Any, Dict, List, Optional

import requests
from requests.exceptions import RequestException

from .exceptions import SpotifyAPIError, SpotifyTokenExpiredError

logger = logging.getLogger(__name__)

BASE_URL = "https://api.spotify.com/v1"
DEFAULT_TIMEOUT = 30  # seconds


class SpotifyHTTPClient:
    """
    HTTP client for Spotify Web API requests.

    requests.Session is not guaranteed thread-safe, so every thread that
    uses the client (e.g. the search batch workers) gets its own session.
    All sessions are closed when the owning request finishes.
    """

    def __init__(self, access_token: str, timeout: int = DEFAULT_TIMEOUT):
        """
        Initialize the HTTP client.

        Args:
            access_token: Bearer token for API requests.
            timeout: Per-request timeout in seconds.
        """
        self._access_token = access_token
        self._timeout = timeout
        self._local = threading.local()
        self._sessions: List[requests.Session] = []
        self._lock = threading.Lock()
        # Session for the constructing thread
        self._get_session()

    @property
    def _session(self) -> requests.Session:
        return self._get_session()

    def _get_session(self) -> requests.Session:
        """Return the calling thread's session, creating it on first use."""
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            session.headers.update({
                "Authorization": f"Bearer {self._access_token}",
                "Content-Type": "application/json",
            })
            self._local.session = session
            with self._lock:
                self._sessions.append(session)
        return session

    def close(self) -> None:
        """Close every session opened by this client."""
        with self._lock:
            sessions, self._sessions = self._sessions, []
        for session in sessions:
            session.close()
        self._local = threading.local()

    def __enter__(self) -> "SpotifyHTTPClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -----------------------------------------------------------------
    # Public HTTP methods
    # -----------------------------------------------------------------

    def get(self, path: str, params: Optional[Dict] = None) -> Any:
        """Send a GET request."""
        return self._request("GET", path, params=params)

    def post(self, path: str, json: Any = None) -> Any:
        """Send a POST request."""
        return self._request("POST", path, json=json)

    # -----------------------------------------------------------------
    # Internal request handling
    # -----------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict] = None,
        json: Any = None,
    ) -> Any:
        """
        Execute a single HTTP request against a relative API path.

        Raises:
            SpotifyTokenExpiredError: On 401 responses.
            SpotifyAPIError: On any other non-2xx response or network error.
        """
        url = f"{BASE_URL}{path}"

        try:
            response = self._session.request(
                method, url, params=params, json=json, timeout=self._timeout,
            )
        except RequestException as e:
            logger.error("Network error calling %s %s: %s", method, path, e)
            raise SpotifyAPIError(f"Network error: {e}")

        # --- Success ---
        if response.status_code == 204:
            return None
        if response.ok:
            try:
                return response.json()
            except ValueError:
                raise SpotifyAPIError(
                    f"Invalid JSON from {method} {path}",
                    status_code=response.status_code,
                )

        # --- 401 Unauthorized ---
        if response.status_code == 401:
            logger.warning("401 received from %s %s", method, path)
            raise SpotifyTokenExpiredError("Token expired or invalid")

        # --- Everything else ---
        try:
            body = response.json()
            msg = body.get("error", {}).get("message", response.text)
        except Exception:
            msg = response.text
        logger.error(
            "Spotify API error %d from %s %s: %s",
            response.status_code, method, path, msg,
        )
        raise SpotifyAPIError(
            f"API error {response.status_code}: {msg}",
            status_code=response.status_code,
        )
