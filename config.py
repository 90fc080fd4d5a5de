import os
from dotenv import load_dotenv

load_dotenv()

REQUIRED_ENV_VARS = [
    'SPOTIFY_CLIENT_ID',
    'SPOTIFY_CLIENT_SECRET',
    'GEMINI_API_KEY',
]


def validate_required_env_vars():
    """
    Check that every required environment variable is set.

    Raises:
        ValueError: Listing every missing variable.
    """
    missing = [name for name in REQUIRED_ENV_VARS if not os.getenv(name)]
    if missing:
        raise ValueError(
            f"Missing required environment variables: {', '.join(missing)}"
        )


class Config:
    """Base configuration."""
    SECRET_KEY = os.getenv('SECRET_KEY', os.urandom(24))

    # Spotify OAuth
    SPOTIFY_CLIENT_ID = os.getenv('SPOTIFY_CLIENT_ID')
    SPOTIFY_CLIENT_SECRET = os.getenv('SPOTIFY_CLIENT_SECRET')
    SPOTIFY_REDIRECT_URI = os.getenv(
        'SPOTIFY_REDIRECT_URI', 'http://127.0.0.1:8000/callback'
    )
    FRONTEND_URI = os.getenv('FRONTEND_URI', 'http://127.0.0.1:5173')

    # Generative text service
    GEMINI_API_KEY = os.getenv('GEMINI_API_KEY')
    GEMINI_MODEL = os.getenv('GEMINI_MODEL', 'gemini-2.0-flash-001')

    # One-time OAuth state values
    AUTH_STATE_COOKIE = 'spotify_auth_state'
    AUTH_STATE_TTL = int(os.getenv('AUTH_STATE_TTL', 600))  # 10 minutes
    REDIS_URL = os.getenv('REDIS_URL')

    # Playlist generation
    SEARCH_RESULTS_PER_QUERY = int(os.getenv('SEARCH_RESULTS_PER_QUERY', 5))
    SEARCH_MAX_WORKERS = int(os.getenv('SEARCH_MAX_WORKERS', 8))
    SPOTIFY_HTTP_TIMEOUT = int(os.getenv('SPOTIFY_HTTP_TIMEOUT', 30))
    GEMINI_HTTP_TIMEOUT = int(os.getenv('GEMINI_HTTP_TIMEOUT', 30))

    # Application settings
    CONFIG_NAME = 'base'
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    DEBUG = False
    TESTING = False
    PORT = int(os.getenv('PORT', 8000))
    HOST = os.getenv('HOST', '0.0.0.0')
    AUTH_STATE_COOKIE_SECURE = False


class ProdConfig(Config):
    """Production configuration."""
    CONFIG_NAME = 'production'
    AUTH_STATE_COOKIE_SECURE = True


class DevConfig(Config):
    """Development configuration."""
    CONFIG_NAME = 'development'
    DEBUG = True
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')
    PORT = 8000
    HOST = '127.0.0.1'


class TestConfig(Config):
    """Testing configuration."""
    CONFIG_NAME = 'testing'
    TESTING = True
    DEBUG = True
    REDIS_URL = None
    SPOTIFY_CLIENT_ID = 'test_client_id'
    SPOTIFY_CLIENT_SECRET = 'test_client_secret'
    SPOTIFY_REDIRECT_URI = 'http://localhost:8000/callback'
    FRONTEND_URI = 'http://localhost:5173'
    GEMINI_API_KEY = 'test_gemini_key'


# Dictionary for easy config selection
config = {
    'development': DevConfig,
    'production': ProdConfig,
    'testing': TestConfig,
    'default': DevConfig
}
