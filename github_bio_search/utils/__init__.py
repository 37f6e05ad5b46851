"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_GITHUB_API_URL,
    GITHUB_ACCEPT_HEADER,
    MAX_SEARCH_RESULTS,
    RECENT_REPOSITORIES_LIMIT,
    SEARCH_RESULTS_PER_PAGE,
)

__all__ = [
    "DEFAULT_GITHUB_API_URL",
    "GITHUB_ACCEPT_HEADER",
    "MAX_SEARCH_RESULTS",
    "RECENT_REPOSITORIES_LIMIT",
    "SEARCH_RESULTS_PER_PAGE",
]
