"""
Promptlist Services Package

This package provides the service layer behind the HTTP routes.
All services can be imported directly from this package.

Example:
    from promptlist.services import AuthService, PlaylistGenerationService

    # OAuth
    auth_url, state = auth_service.begin_login()
    token_pair = auth_service.complete_login(code, state, cookie_state)

    # Prompt to playlist
    service = PlaylistGenerationService.from_flask_config(app.config)
    result = service.generate(prompt, token_pair.access_token)
"""

# Auth Service
from promptlist.services.auth_service import (
    AuthService,
    AuthenticationError,
    StateMismatchError,
    InvalidTokenError,
)

# Auth State Store
from promptlist.services.state_service import (
    AuthStateStore,
    InMemoryAuthStateStore,
    RedisAuthStateStore,
    create_state_store,
)

# Pipeline Exceptions
from promptlist.services.exceptions import (
    PlaylistGenerationError,
    MissingInputError,
    AIFormatError,
    TransportFailureError,
    TokenExpiredError,
    NoResultsError,
)

# Pipeline Stages
from promptlist.services.query_planner_service import QueryPlannerService
from promptlist.services.search_service import CatalogSearchService
from promptlist.services.playlist_service import (
    PlaylistAssemblyService,
    PlaylistResult,
)

# Orchestration
from promptlist.services.generation_service import PlaylistGenerationService

__all__ = [
    # Services
    "AuthService",
    "QueryPlannerService",
    "CatalogSearchService",
    "PlaylistAssemblyService",
    "PlaylistGenerationService",
    # Auth State
    "AuthStateStore",
    "InMemoryAuthStateStore",
    "RedisAuthStateStore",
    "create_state_store",
    # Auth Exceptions
    "AuthenticationError",
    "StateMismatchError",
    "InvalidTokenError",
    # Pipeline Exceptions
    "PlaylistGenerationError",
    "MissingInputError",
    "AIFormatError",
    "TransportFailureError",
    "TokenExpiredError",
    "NoResultsError",
    # Results
    "PlaylistResult",
]
