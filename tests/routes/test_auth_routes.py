"""
Tests for /login and /callback.

Spotify's token endpoint is patched at requests.post; the in-memory
state store of the test app is used as is.
"""

from unittest.mock import MagicMock, patch
from urllib.parse import parse_qs, urlparse

import pytest
import redis

COOKIE = "spotify_auth_state"
FRONTEND = "http://localhost:5173"


def _mock_token_response(status_code=200, json_data=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = json_data or {}
    resp.text = ""
    return resp


def _login(client):
    """Run /login and return the issued state value."""
    response = client.get("/login")
    params = parse_qs(urlparse(response.headers["Location"]).query)
    return params["state"][0]


class TestLogin:
    """Tests for GET /login."""

    def test_redirects_to_spotify(self, client):
        response = client.get("/login")

        assert response.status_code == 302
        location = urlparse(response.headers["Location"])
        assert location.netloc == "accounts.spotify.com"
        params = parse_qs(location.query)
        assert params["client_id"] == ["test_client_id"]
        assert params["redirect_uri"] == ["http://localhost:8000/callback"]
        assert params["show_dialog"] == ["true"]
        assert "playlist-modify-private" in params["scope"][0]

    def test_sets_state_cookie_matching_url(self, client):
        response = client.get("/login")

        state = parse_qs(urlparse(response.headers["Location"]).query)["state"][0]
        cookie_header = next(
            h for h in response.headers.getlist("Set-Cookie")
            if h.startswith(f"{COOKIE}=")
        )
        assert cookie_header.startswith(f"{COOKIE}={state};")
        assert "HttpOnly" in cookie_header

    def test_registers_state(self, client, state_store):
        state = _login(client)
        assert state_store.consume(state) is True

    def test_store_failure_returns_500(self, app, client):
        store = MagicMock()
        store.issue.side_effect = redis.ConnectionError("down")
        app.extensions["auth_state_store"] = store

        response = client.get("/login")

        assert response.status_code == 500
        assert "error" in response.get_json()

    def test_missing_credentials_returns_500(self, app, client):
        app.config["SPOTIFY_CLIENT_SECRET"] = None

        response = client.get("/login")

        assert response.status_code == 500


class TestCallback:
    """Tests for GET /callback."""

    @patch("promptlist.spotify.auth.requests.post")
    def test_success_redirects_with_fragment(
        self, mock_post, client, sample_token_response
    ):
        mock_post.return_value = _mock_token_response(200, sample_token_response)
        state = _login(client)

        response = client.get(f"/callback?code=abc&state={state}")

        assert response.status_code == 302
        location = response.headers["Location"]
        assert location.startswith(f"{FRONTEND}/#")
        fragment = parse_qs(urlparse(location).fragment)
        assert fragment == {
            "access_token": ["test_access_token_12345"],
            "refresh_token": ["test_refresh_token_67890"],
            "expires_in": ["3600"],
        }
        assert mock_post.call_args.kwargs["data"]["code"] == "abc"

    @patch("promptlist.spotify.auth.requests.post")
    def test_success_clears_cookie(self, mock_post, client, sample_token_response):
        mock_post.return_value = _mock_token_response(200, sample_token_response)
        state = _login(client)

        response = client.get(f"/callback?code=abc&state={state}")

        cleared = [
            h for h in response.headers.getlist("Set-Cookie")
            if h.startswith(f"{COOKIE}=;")
        ]
        assert cleared

    @patch("promptlist.spotify.auth.requests.post")
    def test_state_mismatch_makes_no_exchange(self, mock_post, client):
        _login(client)

        response = client.get("/callback?code=abc&state=forged")

        assert response.status_code == 302
        assert response.headers["Location"] == f"{FRONTEND}?error=state_mismatch"
        mock_post.assert_not_called()

    @patch("promptlist.spotify.auth.requests.post")
    def test_missing_cookie_is_mismatch(self, mock_post, app):
        fresh = app.test_client()

        response = fresh.get("/callback?code=abc&state=whatever")

        assert response.headers["Location"] == f"{FRONTEND}?error=state_mismatch"
        mock_post.assert_not_called()

    @patch("promptlist.spotify.auth.requests.post")
    def test_replayed_state_is_mismatch(
        self, mock_post, client, sample_token_response
    ):
        mock_post.return_value = _mock_token_response(200, sample_token_response)
        state = _login(client)
        client.get(f"/callback?code=abc&state={state}")

        client.set_cookie(COOKIE, state)
        response = client.get(f"/callback?code=abc&state={state}")

        assert response.headers["Location"] == f"{FRONTEND}?error=state_mismatch"
        assert mock_post.call_count == 1

    @patch("promptlist.spotify.auth.requests.post")
    def test_rejected_code_is_invalid_token(self, mock_post, client):
        mock_post.return_value = _mock_token_response(
            400, {"error": "invalid_grant", "error_description": "Invalid code"}
        )
        state = _login(client)

        response = client.get(f"/callback?code=bad&state={state}")

        assert response.headers["Location"] == f"{FRONTEND}?error=invalid_token"

    @patch("promptlist.spotify.auth.requests.post")
    def test_user_declined_is_invalid_token(self, mock_post, client):
        state = _login(client)

        response = client.get(f"/callback?error=access_denied&state={state}")

        assert response.headers["Location"] == f"{FRONTEND}?error=invalid_token"
        mock_post.assert_not_called()

    @pytest.mark.parametrize("token_response", [
        {"access_token": "a", "expires_in": 3600},
        {"refresh_token": "r", "expires_in": 3600},
        {"access_token": "a", "refresh_token": "r"},
    ])
    @patch("promptlist.spotify.auth.requests.post")
    def test_incomplete_token_response(self, mock_post, client, token_response):
        mock_post.return_value = _mock_token_response(200, token_response)
        state = _login(client)

        response = client.get(f"/callback?code=abc&state={state}")

        location = response.headers["Location"]
        assert location == f"{FRONTEND}?error=invalid_token"
        assert "access_token" not in location
