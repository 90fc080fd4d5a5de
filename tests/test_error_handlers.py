"""
Tests for global error handlers.

Each test registers a throwaway route that raises, then checks the JSON
body and status code the handler produced.
"""

import pytest
from pydantic import BaseModel

from promptlist.enums import PipelineStage
from promptlist.error_handlers import json_error_response
from promptlist.services import (
    AIFormatError,
    MissingInputError,
    NoResultsError,
    PlaylistGenerationError,
    TokenExpiredError,
    TransportFailureError,
)


class _Body(BaseModel):
    value: int


@pytest.fixture
def raising_client(app):
    """Client for an app with a /raise/<name> route."""
    errors = {
        "missing": MissingInputError("missing"),
        "expired": TokenExpiredError("expired", stage=PipelineStage.CATALOG_SEARCH),
        "no_results": NoResultsError("none"),
        "ai_format": AIFormatError("bad json"),
        "transport": TransportFailureError("upstream 502: secret details"),
        "generic": PlaylistGenerationError("generic"),
    }

    def raise_error(name):
        if name == "validation":
            _Body.model_validate({"value": "not a number"})
        raise errors[name]

    app.add_url_rule("/raise/<name>", "raise_error", raise_error)
    return app.test_client()


class TestJsonErrorResponse:
    """Tests for json_error_response."""

    def test_shape(self, app):
        with app.app_context():
            response, status = json_error_response("nope", 418)
        assert status == 418
        assert response.get_json() == {"error": "nope"}


class TestPipelineErrorHandlers:
    """Tests for pipeline exception handlers."""

    @pytest.mark.parametrize("name, status, message", [
        ("missing", 400, "Prompt and access token are required."),
        ("validation", 400, "Prompt and access token are required."),
        ("expired", 401, "Spotify token expired."),
        ("no_results", 404, "No songs found for that prompt."),
        ("ai_format", 500, "AI did not return valid JSON."),
        ("transport", 500, "An internal server error occurred."),
        ("generic", 500, "An internal server error occurred."),
    ])
    def test_mapping(self, raising_client, name, status, message):
        response = raising_client.get(f"/raise/{name}")

        assert response.status_code == status
        assert response.get_json() == {"error": message}

    def test_upstream_details_not_exposed(self, raising_client):
        response = raising_client.get("/raise/transport")
        assert "secret details" not in response.get_data(as_text=True)


class TestHTTPErrorHandlers:
    """Tests for HTTP status handlers."""

    def test_404(self, client):
        response = client.get("/does-not-exist")
        assert response.status_code == 404
        assert response.get_json() == {"error": "Resource not found."}

    def test_405(self, client):
        response = client.delete("/health")
        assert response.status_code == 405
        assert response.get_json() == {"error": "Method not allowed."}
