"""GitHub client adapter for the githubkit library."""

from types import TracebackType
from typing import Any, Self

import structlog
from githubkit.exception import RequestFailed

from github_bio_search.schemas.users import RepositorySummary, SearchResultPage
from github_bio_search.utils.constants import (
    DEFAULT_GITHUB_API_URL,
    GITHUB_ACCEPT_HEADER,
    RECENT_REPOSITORIES_LIMIT,
    SEARCH_RESULTS_PER_PAGE,
)

from .abc import GitHubClientBase
from .client import GitHubClient, get_github_client

logger = structlog.get_logger(__name__)


class GitHubRequestError(Exception):
    """Raised when the GitHub API answers with a non-success status code."""

    def __init__(self, status_code: int, url: str, message: str | None = None) -> None:
        """Initializes the exception with the status code and URL of the failed request."""
        super().__init__(f"GitHub request to {url} failed with status code {status_code}: {message or 'no message'}")
        self.status_code = status_code
        self.url = url
        self.message = message


class GitHubRestAdapter(GitHubClientBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client

    @classmethod
    def create(
        cls,
        github_api_url: str = DEFAULT_GITHUB_API_URL,
        github_pat_token: str | None = None,
        timeout: float = 10.0,
    ) -> Self:
        """Create a new GitHub client adapter.

        Args:
            github_api_url: GitHub API URL (defaults to https://api.github.com)
            github_pat_token: Optional personal access token, requests are unauthenticated without one
            timeout: Timeout in seconds applied to every request

        Returns:
            Configured GitHubRestAdapter instance
        """
        logger.info(
            "Creating client for GitHub instance",
            github_api_url=github_api_url,
            authenticated=bool(github_pat_token),
        )
        client = get_github_client(github_api_url=github_api_url, github_pat_token=github_pat_token, timeout=timeout)
        return cls(client)

    async def __aenter__(self) -> Self:
        # Shares one HTTP client between all requests made inside the block
        await self.client.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.client.__aexit__(exc_type, exc_val, exc_tb)

    async def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """Send a GET request and return the decoded JSON body.

        Raises:
            GitHubRequestError: If GitHub answers with a non-success status code
            ValueError: If a successful response does not carry a JSON body
            githubkit.exception.GitHubException: For network-related issues
        """
        logger.debug("Sending GitHub request", url=url, params=params)
        try:
            response = await self.client.arequest("GET", url, params=params, headers={"Accept": GITHUB_ACCEPT_HEADER})
        except RequestFailed as exc:
            try:
                body = exc.response.json()
            except ValueError:
                body = None
            message = body.get("message") if isinstance(body, dict) else None
            raise GitHubRequestError(exc.response.status_code, url, message) from exc
        return response.json()

    # Search
    async def search_users(
        self,
        encoded_query: str,
        page: int = 1,
        per_page: int = SEARCH_RESULTS_PER_PAGE,
    ) -> SearchResultPage:
        """Search users with an already URL-encoded query.

        The query string is written into the URL as-is instead of being passed
        as params, so it goes on the wire with exactly the encoding produced by
        the query builder.
        """
        data = await self._get_json(f"/search/users?q={encoded_query}&page={page}&per_page={per_page}")
        return SearchResultPage.model_validate(data)

    # Users
    async def get_user(self, login: str) -> dict[str, Any]:
        """Get the full profile of a user."""
        data: dict[str, Any] = await self._get_json(f"/users/{login}")
        return data

    async def list_user_repositories(
        self,
        login: str,
        sort: str = "pushed",
        per_page: int = RECENT_REPOSITORIES_LIMIT,
    ) -> list[RepositorySummary]:
        """List public repositories of a user, most recently pushed first by default."""
        data = await self._get_json(f"/users/{login}/repos", params={"sort": sort, "per_page": per_page})
        return [RepositorySummary.model_validate(repo) for repo in data]
