"""Runs paginated user searches and classifies failed search requests."""

import httpx
import structlog
from githubkit.exception import GitHubException

from github_bio_search.github.abc import GitHubClientBase
from github_bio_search.github.adapter import GitHubRequestError
from github_bio_search.schemas.users import SearchResultPage
from github_bio_search.search.exceptions import InvalidQueryError, RateLimitedError, SearchError, SearchFailedError
from github_bio_search.search.query import SearchQuery
from github_bio_search.utils.constants import MAX_SEARCH_RESULTS, SEARCH_RESULTS_PER_PAGE

logger = structlog.get_logger(__name__)


def classify_search_failure(status_code: int) -> SearchError:
    """Map the status code of a failed search request to the error shown to the user."""
    if status_code == 403:
        return RateLimitedError()
    if status_code == 422:
        return InvalidQueryError()
    return SearchFailedError()


async def search_users(client: GitHubClientBase, query: SearchQuery, page: int = 1) -> SearchResultPage:
    """Fetch one page of users whose bio matches the query.

    The returned ``total_count`` is clamped to the 1,000 results the Search
    API can actually serve. A page without items is returned as-is; it is up
    to the caller to present it as an empty result.

    Args:
        client: GitHub client used to send the request
        query: The bio search query
        page: 1-based page number

    Returns:
        The page of matching users

    Raises:
        RateLimitedError: If GitHub answers with HTTP 403
        InvalidQueryError: If GitHub answers with HTTP 422
        SearchFailedError: For any other failure
    """
    try:
        result: SearchResultPage = await client.search_users(query.encoded, page=page, per_page=SEARCH_RESULTS_PER_PAGE)
    except GitHubRequestError as e:
        error = classify_search_failure(e.status_code)
        logger.error(
            "Search API error",
            query=query.q,
            page=page,
            status_code=e.status_code,
            error_type=type(error).__name__,
            error=str(e),
        )
        raise error from e
    except (GitHubException, httpx.HTTPError, ValueError) as e:
        # ValueError covers a success response without a valid JSON body
        logger.error("Unexpected error during search", query=query.q, page=page, error=str(e))
        raise SearchFailedError() from e

    total_count = min(result.total_count, MAX_SEARCH_RESULTS)
    logger.info(
        "Search completed",
        query=query.q,
        page=page,
        total_count=result.total_count,
        surfaced_total_count=total_count,
        items=len(result.items),
    )
    return SearchResultPage(total_count=total_count, items=result.items)
