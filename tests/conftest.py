"""
Pytest configuration and shared fixtures for Promptlist tests.

This module provides common fixtures used across all test modules,
including sample Spotify payloads, mock service clients, and Flask
app contexts.
"""

import pytest
from unittest.mock import MagicMock


# =============================================================================
# Helpers
# =============================================================================

def _make_track(n, prefix="track"):
    """Build a minimal Spotify track object."""
    return {
        'id': f'{prefix}{n}',
        'name': f'Song {n}',
        'uri': f'spotify:track:{prefix}{n}',
        'artists': [{'name': f'Artist {n}'}],
    }


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def sample_token_response():
    """A successful Spotify token endpoint response."""
    return {
        'access_token': 'test_access_token_12345',
        'token_type': 'Bearer',
        'expires_in': 3600,
        'refresh_token': 'test_refresh_token_67890',
        'scope': 'user-read-private user-read-email',
    }


@pytest.fixture
def sample_user():
    """Sample Spotify user data."""
    return {
        'id': 'user123',
        'display_name': 'Test User',
        'email': 'test@example.com',
        'country': 'US',
        'product': 'premium',
        'uri': 'spotify:user:user123',
    }


@pytest.fixture
def sample_playlist_data():
    """Sample Spotify playlist object as returned by playlist creation."""
    return {
        'id': 'playlist123',
        'name': 'AI Playlist: rainy day jazz',
        'description': 'Generated by AI for the prompt: "rainy day jazz"',
        'public': False,
        'owner': {'id': 'user123'},
        'external_urls': {
            'spotify': 'https://open.spotify.com/playlist/playlist123'
        },
    }


@pytest.fixture
def sample_queries():
    """Five search queries as the planner would produce them."""
    return [
        'rainy day jazz piano',
        'mellow jazz ballads',
        'late night cafe jazz',
        'bill evans trio',
        'soft saxophone rain',
    ]


@pytest.fixture
def track_factory():
    """Factory for minimal Spotify track objects."""
    return _make_track


@pytest.fixture
def sample_search_response():
    """Builder for a Spotify search response with the given tracks."""
    def _build(tracks):
        return {'tracks': {'items': tracks, 'total': len(tracks)}}
    return _build


@pytest.fixture
def mock_ai_client():
    """A GeminiClient stand-in whose reply is set per test."""
    client = MagicMock()
    client.generate_text.return_value = '["q1", "q2", "q3", "q4", "q5"]'
    return client


@pytest.fixture
def mock_spotify_api(sample_user, sample_playlist_data):
    """A SpotifyAPI stand-in with happy-path defaults."""
    from promptlist.spotify import PlaylistResource

    api = MagicMock()
    api.__enter__.return_value = api
    api.__exit__.return_value = False
    api.get_current_user.return_value = sample_user
    api.search_tracks.side_effect = lambda query, limit=5: [
        _make_track(i, prefix=f"{query}-") for i in range(limit)
    ]
    api.create_playlist.return_value = PlaylistResource.from_dict(
        sample_playlist_data
    )
    api.add_tracks_to_playlist.return_value = {'snapshot_id': 'snap1'}
    return api


# =============================================================================
# Flask App Fixtures
# =============================================================================

@pytest.fixture
def app():
    """Create a Flask application for testing."""
    from promptlist import create_app

    app = create_app('testing')
    yield app


@pytest.fixture
def app_context(app):
    """Provide Flask application context."""
    with app.app_context():
        yield


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def state_store(app):
    """The in-memory auth state store registered on the test app."""
    return app.extensions['auth_state_store']
