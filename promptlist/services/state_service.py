"""
One-time OAuth state values.

A state value is issued when a login starts, travels to the browser in a
cookie and to Spotify in the authorize URL, and is consumed exactly once
when the callback arrives. The store only remembers which values are
outstanding; it never holds tokens.
"""

import logging
import secrets
import threading
import time
from typing import Dict, Optional

import redis

logger = logging.getLogger(__name__)

DEFAULT_STATE_TTL = 600  # seconds
STATE_BYTES = 16


def generate_state() -> str:
    """Return a new URL-safe random state value."""
    return secrets.token_urlsafe(STATE_BYTES)


class AuthStateStore:
    """
    Interface for single-use state storage.

    Subclasses implement `_put` and `_pop`; `issue` and `consume` are
    the public operations.
    """

    def __init__(self, ttl: int = DEFAULT_STATE_TTL):
        self._ttl = ttl

    @property
    def ttl(self) -> int:
        return self._ttl

    def issue(self) -> str:
        """Create, register and return a fresh state value."""
        state = generate_state()
        self._put(state)
        logger.debug("Issued auth state %s...", state[:6])
        return state

    def consume(self, state: Optional[str]) -> bool:
        """
        Invalidate a state value.

        Returns:
            True if the value was outstanding and unexpired. A second
            call with the same value always returns False.
        """
        if not state:
            return False
        found = self._pop(state)
        if not found:
            logger.info("Auth state %s... unknown, expired or reused", state[:6])
        return found

    def _put(self, state: str) -> None:
        raise NotImplementedError

    def _pop(self, state: str) -> bool:
        raise NotImplementedError


class InMemoryAuthStateStore(AuthStateStore):
    """Process-local expiring map. Suitable for a single worker process."""

    def __init__(self, ttl: int = DEFAULT_STATE_TTL, clock=time.monotonic):
        super().__init__(ttl)
        self._clock = clock
        self._expiry: Dict[str, float] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            self._purge_expired()
            return len(self._expiry)

    def _put(self, state: str) -> None:
        with self._lock:
            self._purge_expired()
            self._expiry[state] = self._clock() + self._ttl

    def _pop(self, state: str) -> bool:
        with self._lock:
            expires_at = self._expiry.pop(state, None)
        return expires_at is not None and expires_at > self._clock()

    def _purge_expired(self) -> None:
        now = self._clock()
        expired = [s for s, exp in self._expiry.items() if exp <= now]
        for s in expired:
            del self._expiry[s]


class RedisAuthStateStore(AuthStateStore):
    """
    Redis-backed store shared by every worker process.

    Keys expire on their own via SETEX; consumption is a DEL whose
    return value tells whether the key still existed.
    """

    def __init__(
        self,
        redis_client: redis.Redis,
        ttl: int = DEFAULT_STATE_TTL,
        key_prefix: str = "promptlist:auth_state:",
    ):
        super().__init__(ttl)
        self._redis = redis_client
        self._prefix = key_prefix

    def _make_key(self, state: str) -> str:
        return f"{self._prefix}{state}"

    def _put(self, state: str) -> None:
        self._redis.setex(self._make_key(state), self._ttl, b"1")

    def _pop(self, state: str) -> bool:
        try:
            return self._redis.delete(self._make_key(state)) == 1
        except redis.RedisError as e:
            logger.error("Redis error consuming auth state: %s", e)
            return False


def create_state_store(
    redis_url: Optional[str] = None, ttl: int = DEFAULT_STATE_TTL
) -> AuthStateStore:
    """
    Build the state store for the app.

    Uses Redis when a URL is configured and reachable, otherwise falls
    back to the in-memory store.
    """
    if redis_url:
        try:
            client = redis.from_url(redis_url, decode_responses=False)
            client.ping()
            logger.info(
                "Redis auth state store configured: %s",
                redis_url.split("@")[-1],
            )
            return RedisAuthStateStore(client, ttl=ttl)
        except redis.ConnectionError as e:
            logger.warning(
                "Redis connection failed: %s. "
                "Falling back to in-memory auth state store.",
                e,
            )
    else:
        logger.info("REDIS_URL not configured. Using in-memory auth state store.")
    return InMemoryAuthStateStore(ttl=ttl)
