"""
Authentication routes: start the Spotify OAuth flow and handle its callback.

Tokens go back to the frontend in the URL fragment, which browsers never
send to a server. Failures go back as an ?error=<kind> query flag.
"""

import logging
from urllib.parse import urlencode

from flask import current_app, redirect, request

from promptlist.routes import main, get_auth_service, frontend_uri, json_error
from promptlist.services import AuthenticationError

logger = logging.getLogger(__name__)


@main.route("/login")
def login():
    """Initiate Spotify OAuth flow."""
    try:
        auth_url, state = get_auth_service().begin_login()
    except AuthenticationError as e:
        logger.error("Login error: %s", e)
        return json_error("Unable to start login.", 500)

    logger.debug("Redirecting to Spotify auth")
    response = redirect(auth_url)
    response.set_cookie(
        current_app.config["AUTH_STATE_COOKIE"],
        state,
        max_age=current_app.config["AUTH_STATE_TTL"],
        httponly=True,
        secure=current_app.config.get("AUTH_STATE_COOKIE_SECURE", False),
        samesite="Lax",
    )
    return response


@main.route("/callback")
def callback():
    """Handle OAuth callback from Spotify."""
    cookie_name = current_app.config["AUTH_STATE_COOKIE"]

    try:
        token_pair = get_auth_service().complete_login(
            code=request.args.get("code"),
            state=request.args.get("state"),
            stored_state=request.cookies.get(cookie_name),
            error=request.args.get("error"),
        )
    except AuthenticationError as e:
        logger.warning("Authentication failed (%s): %s", e.kind, e)
        response = redirect(
            f"{frontend_uri()}?{urlencode({'error': e.kind.value})}"
        )
    else:
        logger.info("User authenticated successfully")
        response = redirect(f"{frontend_uri()}/#{token_pair.to_fragment()}")

    response.delete_cookie(cookie_name)
    return response
