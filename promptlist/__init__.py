import os
import logging
from flask import Flask
from flask_cors import CORS
from config import config, validate_required_env_vars

logger = logging.getLogger(__name__)


def _configure_logging(level_name: str) -> None:
    """Configure root logging once, at the level named in config."""
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger().setLevel(level)
    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_auth_state_store():
    """
    Get the auth state store of the current app.

    Returns:
        AuthStateStore instance registered by create_app.
    """
    from flask import current_app

    return current_app.extensions["auth_state_store"]


def create_app(config_name=None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.getenv("FLASK_ENV", "production")

    # Ensure config_name is a known string
    if not isinstance(config_name, str) or config_name not in config:
        config_name = "production"

    app = Flask(__name__)

    # Load config
    app.config.from_object(config[config_name])
    _configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    logger.info("Creating app with config: %s", config_name)

    # Validate required environment variables
    if not app.config.get("TESTING"):
        try:
            validate_required_env_vars()
            logger.info("Environment validation passed")
        except ValueError as e:
            logger.error("Environment validation failed: %s", str(e))
            if config_name == "production":
                raise  # Fail fast in production
            else:
                logger.warning(
                    "Continuing in development mode with missing environment variables"
                )

    # Log important config values
    logger.info("SPOTIFY_REDIRECT_URI: %s", app.config.get("SPOTIFY_REDIRECT_URI"))
    logger.info("FRONTEND_URI: %s", app.config.get("FRONTEND_URI"))
    logger.info("GEMINI_MODEL: %s", app.config.get("GEMINI_MODEL"))

    # Allow the frontend origin to call the JSON endpoint
    CORS(
        app,
        resources={r"/create-playlist": {"origins": [app.config["FRONTEND_URI"]]}},
    )

    # One-time OAuth state values (Redis when configured, else in-memory)
    from promptlist.services.state_service import create_state_store

    app.extensions["auth_state_store"] = create_state_store(
        app.config.get("REDIS_URL"), ttl=app.config["AUTH_STATE_TTL"]
    )

    # Register blueprints
    from promptlist.routes import main as main_blueprint

    app.register_blueprint(main_blueprint)

    # Register global error handlers
    from promptlist.error_handlers import register_error_handlers

    register_error_handlers(app)

    # Add a `no-cache` header to responses in development mode.
    if app.debug:

        @app.after_request
        def after_request(response):
            response.headers["Cache-Control"] = (
                "no-cache, no-store, must-revalidate, public, max-age=0"
            )
            response.headers["Expires"] = 0
            response.headers["Pragma"] = "no-cache"
            return response

    return app
