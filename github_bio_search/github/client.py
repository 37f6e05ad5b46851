"""Sets up the githubkit client used to talk to the GitHub REST API."""

from typing import TypeAlias

import httpx
from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy, UnauthAuthStrategy

from github_bio_search.utils.constants import DEFAULT_GITHUB_API_URL

GitHubClient: TypeAlias = GitHub[TokenAuthStrategy] | GitHub[UnauthAuthStrategy]


def get_github_client(
    github_api_url: str = DEFAULT_GITHUB_API_URL,
    github_pat_token: str | None = None,
    timeout: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> GitHubClient:
    """Returns a GitHub client for the REST API.

    Requests are unauthenticated unless a PAT is given. Supports a custom base
    URL for GitHub Enterprise Server (GHES). Rate limited requests are not
    retried automatically.
    """
    auth: TokenAuthStrategy | UnauthAuthStrategy = TokenAuthStrategy(github_pat_token) if github_pat_token else UnauthAuthStrategy()
    # Disable HTTP caching to always get fresh data
    return GitHub(
        auth=auth,
        base_url=github_api_url,
        timeout=timeout,
        http_cache=False,
        auto_retry=False,
        async_transport=transport,
    )
