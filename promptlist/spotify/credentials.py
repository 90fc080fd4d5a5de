"""
Spotify credentials management.

Immutable OAuth client credentials, built from the Flask config.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SpotifyCredentials:
    """
    Immutable container for Spotify OAuth credentials.

    Attributes:
        client_id: The Spotify application client ID.
        client_secret: The Spotify application client secret.
        redirect_uri: The OAuth callback URL registered with Spotify.

    Example:
        credentials = SpotifyCredentials.from_flask_config(current_app.config)
    """

    client_id: str
    client_secret: str
    redirect_uri: str

    def __post_init__(self):
        """Validate credentials on creation."""
        if not self.client_id:
            raise ValueError("client_id is required")
        if not self.client_secret:
            raise ValueError("client_secret is required")
        if not self.redirect_uri:
            raise ValueError("redirect_uri is required")

    @classmethod
    def from_flask_config(cls, config: dict) -> 'SpotifyCredentials':
        """
        Create credentials from Flask app config.

        Raises:
            ValueError: If required config keys are missing.
        """
        return cls(
            client_id=config.get('SPOTIFY_CLIENT_ID') or '',
            client_secret=config.get('SPOTIFY_CLIENT_SECRET') or '',
            redirect_uri=config.get('SPOTIFY_REDIRECT_URI') or ''
        )
