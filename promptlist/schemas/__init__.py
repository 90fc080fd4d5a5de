"""
Pydantic schemas for request validation.
"""

from pydantic import ValidationError

from .requests import CreatePlaylistRequest

__all__ = [
    # Exceptions
    "ValidationError",
    # Request schemas
    "CreatePlaylistRequest",
]
