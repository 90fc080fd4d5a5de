"""
Google Gemini client for single-turn text generation.

Wraps the google-genai SDK: one prompt in, the response text out.
"""

import logging

import httpx
from google import genai
from google.genai import errors, types

from .exceptions import AIServiceError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash-001"


class GeminiClient:
    """
    Minimal client for Gemini generate_content.

    Example:
        client = GeminiClient(api_key)
        text = client.generate_text("Suggest five search queries ...")
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout: int = 30,
    ):
        if not api_key:
            raise ValueError("api_key is required")
        self._model = model
        # HttpOptions.timeout is in milliseconds
        self._client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=timeout * 1000),
        )

    @classmethod
    def from_flask_config(cls, config: dict) -> "GeminiClient":
        """Create a client from Flask app config."""
        return cls(
            api_key=config.get("GEMINI_API_KEY") or "",
            model=config.get("GEMINI_MODEL") or DEFAULT_MODEL,
            timeout=config.get("GEMINI_HTTP_TIMEOUT", 30),
        )

    @property
    def model(self) -> str:
        return self._model

    def generate_text(self, prompt: str) -> str:
        """
        Send a single-turn prompt and return the generated text.

        Raises:
            AIServiceError: On network failure, an API error status, or a
                response without candidate text.
        """
        contents = [types.Content(
            role="user",
            parts=[types.Part.from_text(text=prompt)],
        )]

        try:
            response = self._client.models.generate_content(
                model=self._model,
                contents=contents,
            )
        except errors.APIError as e:
            logger.error("Gemini API error %s: %s", e.code, e.message)
            raise AIServiceError(
                f"Gemini API error: {e.code}", status_code=e.code
            )
        except httpx.HTTPError as e:
            logger.error("Gemini request failed: %s", e)
            raise AIServiceError(f"Network error calling Gemini: {e}")

        text = response.text
        if not text:
            logger.error("Gemini returned no candidate text (model %s)", self._model)
            raise AIServiceError("No candidate text in Gemini response")
        return text
