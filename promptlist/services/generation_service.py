"""
Prompt-to-playlist orchestration.

Runs the pipeline START -> QUERY_PLANNING -> CATALOG_SEARCH ->
PLAYLIST_ASSEMBLY -> DONE. The first failing stage ends the run; its
error is tagged with the stage and re-raised for the route layer to map
onto an HTTP response. Nothing is retried.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from promptlist.ai import GeminiClient
from promptlist.enums import PipelineStage
from promptlist.services.exceptions import (
    MissingInputError,
    PlaylistGenerationError,
)
from promptlist.services.playlist_service import (
    PlaylistAssemblyService,
    PlaylistResult,
)
from promptlist.services.query_planner_service import QueryPlannerService
from promptlist.services.search_service import (
    CatalogSearchService,
    MAX_WORKERS,
    RESULTS_PER_QUERY,
)
from promptlist.spotify import SpotifyAPI

logger = logging.getLogger(__name__)


class PlaylistGenerationService:
    """Ties the planner, search aggregator and assembler together."""

    def __init__(
        self,
        ai_client: GeminiClient,
        results_per_query: int = RESULTS_PER_QUERY,
        max_workers: int = MAX_WORKERS,
        spotify_timeout: int = 30,
        api_factory: Optional[Callable[..., SpotifyAPI]] = None,
    ):
        self._planner = QueryPlannerService(ai_client)
        self._results_per_query = results_per_query
        self._max_workers = max_workers
        self._spotify_timeout = spotify_timeout
        self._api_factory = api_factory or SpotifyAPI
        self.stage = PipelineStage.START

    @classmethod
    def from_flask_config(cls, config: dict) -> "PlaylistGenerationService":
        return cls(
            ai_client=GeminiClient.from_flask_config(config),
            results_per_query=config.get("SEARCH_RESULTS_PER_QUERY", RESULTS_PER_QUERY),
            max_workers=config.get("SEARCH_MAX_WORKERS", MAX_WORKERS),
            spotify_timeout=config.get("SPOTIFY_HTTP_TIMEOUT", 30),
        )

    def generate(self, prompt: str, access_token: str) -> PlaylistResult:
        """
        Build a playlist on the user's account from a free-text prompt.

        Raises:
            PlaylistGenerationError: Subclass naming the failure kind, with
                `stage` set to the stage that failed.
        """
        self.stage = PipelineStage.START

        with self._stage(PipelineStage.START):
            if not prompt or not prompt.strip() or not access_token:
                raise MissingInputError("Prompt and access token are required")
            logger.debug("Using access token: %s...", access_token[:10])

        with self._stage(PipelineStage.QUERY_PLANNING):
            queries = self._planner.plan(prompt)

        with self._api_factory(access_token, timeout=self._spotify_timeout) as api:
            with self._stage(PipelineStage.CATALOG_SEARCH):
                search = CatalogSearchService(
                    api,
                    results_per_query=self._results_per_query,
                    max_workers=self._max_workers,
                )
                track_uris = search.search_track_uris(queries)

            with self._stage(PipelineStage.PLAYLIST_ASSEMBLY):
                result = PlaylistAssemblyService(api).assemble(
                    prompt, track_uris
                )

        self.stage = PipelineStage.DONE
        logger.info("Playlist ready: %s", result.playlist_url)
        return result

    @contextmanager
    def _stage(self, stage: PipelineStage) -> Iterator[None]:
        """Enter a stage; record ERROR and re-raise anything raised in it."""
        self.stage = stage
        logger.debug("Pipeline stage: %s", stage)
        try:
            yield
        except PlaylistGenerationError as e:
            e.stage = stage
            self.stage = PipelineStage.ERROR
            logger.warning(
                "Pipeline stopped at %s (%s): %s", stage, e.kind, e
            )
            raise
        except Exception:
            self.stage = PipelineStage.ERROR
            logger.exception("Pipeline failed unexpectedly at %s", stage)
            raise
