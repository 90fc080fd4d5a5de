"""
Core routes: health check.
"""

from datetime import datetime, timezone

from flask import jsonify

from promptlist.routes import main


@main.route("/health")
def health():
    """Health check endpoint for Docker and monitoring."""
    return (
        jsonify({
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }),
        200,
    )
