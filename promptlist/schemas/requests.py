"""
Request validation schemas using Pydantic.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreatePlaylistRequest(BaseModel):
    """Body of POST /create-playlist."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    prompt: str = Field(..., description="What the playlist should be about")
    access_token: str = Field(..., alias="accessToken")

    @field_validator("prompt", "access_token")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty and whitespace-only values."""
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v
