"""Tests for request validation schemas."""

import pytest

from promptlist.schemas import CreatePlaylistRequest, ValidationError


class TestCreatePlaylistRequest:
    """Tests for CreatePlaylistRequest."""

    def test_valid_body(self):
        req = CreatePlaylistRequest.model_validate(
            {"prompt": "rainy day jazz", "accessToken": "tok"}
        )
        assert req.prompt == "rainy day jazz"
        assert req.access_token == "tok"

    def test_populate_by_field_name(self):
        req = CreatePlaylistRequest(prompt="x", access_token="tok")
        assert req.access_token == "tok"

    def test_extra_fields_ignored(self):
        req = CreatePlaylistRequest.model_validate(
            {"prompt": "x", "accessToken": "tok", "refreshToken": "r"}
        )
        assert not hasattr(req, "refreshToken")

    @pytest.mark.parametrize("body", [
        {"accessToken": "tok"},
        {"prompt": "x"},
        {"prompt": "", "accessToken": "tok"},
        {"prompt": "   ", "accessToken": "tok"},
        {"prompt": "x", "accessToken": ""},
        {"prompt": None, "accessToken": "tok"},
        {},
    ])
    def test_missing_or_blank_rejected(self, body):
        with pytest.raises(ValidationError):
            CreatePlaylistRequest.model_validate(body)
