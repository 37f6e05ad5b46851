"""Contains exceptions raised when a user search cannot be completed."""

from github_bio_search.utils.constants import (
    INVALID_QUERY_MESSAGE,
    RATE_LIMITED_MESSAGE,
    SEARCH_FAILED_MESSAGE,
)


class SearchError(Exception):
    """Base class for search errors that are shown to the user."""

    message: str = SEARCH_FAILED_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        """Initializes the exception with a user-visible message."""
        if message is not None:
            self.message = message
        super().__init__(self.message)


class RateLimitedError(SearchError):
    """Raised when GitHub rejects the search because of its rate limit (HTTP 403)."""

    message = RATE_LIMITED_MESSAGE


class InvalidQueryError(SearchError):
    """Raised when GitHub rejects the search query as unprocessable (HTTP 422)."""

    message = INVALID_QUERY_MESSAGE


class SearchFailedError(SearchError):
    """Raised for any other failed search request."""

    message = SEARCH_FAILED_MESSAGE
