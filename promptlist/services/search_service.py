"""
Catalog search aggregator.

Runs one Spotify track search per planned query in parallel and
flattens the results into an ordered list of track URIs.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from typing import List

from promptlist.services.exceptions import (
    NoResultsError,
    TokenExpiredError,
    TransportFailureError,
)
from promptlist.spotify import (
    SpotifyAPI,
    SpotifyTokenExpiredError,
)

logger = logging.getLogger(__name__)

RESULTS_PER_QUERY = 5
MAX_WORKERS = 8


class CatalogSearchService:
    """Fans search queries out to Spotify and collects track URIs."""

    def __init__(
        self,
        api: SpotifyAPI,
        results_per_query: int = RESULTS_PER_QUERY,
        max_workers: int = MAX_WORKERS,
    ):
        self._api = api
        self._limit = results_per_query
        self._max_workers = max_workers

    def search_track_uris(self, queries: List[str]) -> List[str]:
        """
        Search every query and return the concatenated track URIs.

        All searches run to completion even when one fails. Results keep
        query order (not completion order) and duplicates are kept.

        Raises:
            TokenExpiredError: If any search was rejected with 401.
            TransportFailureError: If any other search failed.
            NoResultsError: If every search succeeded but found nothing.
        """
        logger.info("Searching Spotify for %d queries...", len(queries))
        results = self._run_batch(queries)

        track_uris = [
            track["uri"]
            for tracks in results
            for track in tracks
            if track.get("uri")
        ]

        if not track_uris:
            raise NoResultsError("No songs found for that prompt")

        logger.info("Collected %d track URIs", len(track_uris))
        return track_uris

    def _run_batch(self, queries: List[str]) -> List[List[dict]]:
        if not queries:
            return []

        workers = max(1, min(len(queries), self._max_workers))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(self._api.search_tracks, query, self._limit)
                for query in queries
            ]
            wait(futures)

        failures = [f.exception() for f in futures if f.exception()]
        if failures:
            self._raise_batch_failure(failures)

        return [f.result() for f in futures]

    @staticmethod
    def _raise_batch_failure(failures: List[BaseException]) -> None:
        """Raise the batch error; an expired token outranks other failures."""
        logger.error(
            "%d search request(s) failed; discarding batch", len(failures)
        )
        for exc in failures:
            if isinstance(exc, SpotifyTokenExpiredError):
                raise TokenExpiredError("Spotify token expired") from exc

        first = failures[0]
        raise TransportFailureError(f"Search failed: {first!r}") from first
