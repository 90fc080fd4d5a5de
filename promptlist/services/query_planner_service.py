"""
Query planner: turns a free-text prompt into Spotify search queries.

The generative model is asked for a bare JSON array. Replies are
cleaned of Markdown code fences before parsing; anything that is still
not a JSON array of strings stops the pipeline.
"""

import json
import logging
import re
from typing import List

from promptlist.ai import AIServiceError, GeminiClient
from promptlist.services.exceptions import (
    AIFormatError,
    MissingInputError,
    TransportFailureError,
)

logger = logging.getLogger(__name__)

QUERY_COUNT = 5

PLANNER_PROMPT_TEMPLATE = (
    'You are a Spotify playlist assistant. A user wants a playlist for '
    '"{prompt}". Based on this, generate a list of {count} specific Spotify '
    'search queries. Return your answer ONLY as a valid JSON array of '
    'strings. Do not include any other text, just the JSON array.'
)

_CODE_FENCE_RE = re.compile(r"```(?:json)?")


def build_planner_prompt(prompt: str, count: int = QUERY_COUNT) -> str:
    """Wrap the user's prompt in the fixed planner instructions."""
    return PLANNER_PROMPT_TEMPLATE.format(prompt=prompt, count=count)


def strip_code_fences(text: str) -> str:
    """Remove ```json and ``` markers and surrounding whitespace."""
    return _CODE_FENCE_RE.sub("", text).strip()


def parse_query_list(text: str) -> List[str]:
    """
    Parse an AI reply into a list of search queries.

    Raises:
        AIFormatError: If the cleaned reply is not a JSON array of strings.
    """
    cleaned = strip_code_fences(text)
    try:
        parsed = json.loads(cleaned)
    except ValueError:
        raise AIFormatError("AI reply is not valid JSON")

    if not isinstance(parsed, list):
        raise AIFormatError(
            f"AI reply is a JSON {type(parsed).__name__}, not an array"
        )
    if not all(isinstance(q, str) for q in parsed):
        raise AIFormatError("AI reply array contains non-string entries")
    return parsed


class QueryPlannerService:
    """Asks the generative service for search queries for a prompt."""

    def __init__(self, ai_client: GeminiClient, query_count: int = QUERY_COUNT):
        self._ai = ai_client
        self._query_count = query_count

    def plan(self, prompt: str) -> List[str]:
        """
        Produce search queries for a prompt.

        The list is returned as the model produced it, whatever its length.

        Raises:
            MissingInputError: If the prompt is empty.
            TransportFailureError: If the generative service call fails.
            AIFormatError: If the reply cannot be parsed.
        """
        if not prompt or not prompt.strip():
            raise MissingInputError("Prompt is required")

        logger.info("Asking AI for search queries...")
        try:
            reply = self._ai.generate_text(
                build_planner_prompt(prompt, self._query_count)
            )
        except AIServiceError as e:
            raise TransportFailureError(f"Generative service failed: {e}")

        try:
            queries = parse_query_list(reply)
        except AIFormatError:
            logger.error("Failed to parse AI response: %s", reply[:500])
            raise

        if len(queries) != self._query_count:
            logger.info(
                "AI returned %d queries (asked for %d)",
                len(queries), self._query_count,
            )
        logger.info("AI generated queries: %s", queries)
        return queries
