"""GitHub user bio search."""

from .client import search_users
from .exceptions import InvalidQueryError, RateLimitedError, SearchError, SearchFailedError
from .query import SearchQuery, build_search_query, encode_query
from .session import BioSearchSession, SearchState

__all__ = [
    "BioSearchSession",
    "InvalidQueryError",
    "RateLimitedError",
    "SearchError",
    "SearchFailedError",
    "SearchQuery",
    "SearchState",
    "build_search_query",
    "encode_query",
    "search_users",
]
