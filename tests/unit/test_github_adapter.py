"""Unit tests for the GitHubRestAdapter class and related GitHub operations."""

from typing import Callable

import httpx
import pytest
from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy, UnauthAuthStrategy

from github_bio_search.github.adapter import GitHubRequestError, GitHubRestAdapter
from github_bio_search.github.client import get_github_client
from tests.unit.utils import make_profile_payload

Handler = Callable[[httpx.Request], httpx.Response]


def make_adapter(handler: Handler, github_pat_token: str | None = None, github_api_url: str = "https://api.github.com") -> GitHubRestAdapter:
    """Create an adapter whose requests are answered by the given handler."""
    client = get_github_client(
        github_api_url=github_api_url,
        github_pat_token=github_pat_token,
        transport=httpx.MockTransport(handler),
    )
    return GitHubRestAdapter(client)


@pytest.mark.asyncio
async def test_search_users_request() -> None:
    """Test that the search request carries the encoded query, paging and Accept header."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(
            200,
            json={
                "total_count": 2,
                "incomplete_results": False,
                "items": [
                    {"login": "alice", "avatar_url": "https://a/alice", "html_url": "https://github.com/alice", "score": 1.0},
                    {"login": "bob", "avatar_url": "https://a/bob", "html_url": "https://github.com/bob", "score": 1.0},
                ],
            },
        )

    async with make_adapter(handler) as adapter:
        page = await adapter.search_users("rust%20in%3Abio", page=2, per_page=10)

    assert page.total_count == 2
    assert [item.login for item in page.items] == ["alice", "bob"]
    request = requests[0]
    assert request.method == "GET"
    assert request.url.path == "/search/users"
    assert "q=rust%20in%3Abio" in str(request.url)
    assert request.url.params["q"] == "rust in:bio"
    assert request.url.params["page"] == "2"
    assert request.url.params["per_page"] == "10"
    assert request.headers["Accept"] == "application/vnd.github.v3+json"
    assert "Authorization" not in request.headers


@pytest.mark.asyncio
async def test_get_user_request() -> None:
    """Test that the profile of a user is fetched by login."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=make_profile_payload("octocat"))

    async with make_adapter(handler) as adapter:
        profile = await adapter.get_user("octocat")

    assert profile["login"] == "octocat"
    assert requests[0].url.path == "/users/octocat"
    assert requests[0].headers["Accept"] == "application/vnd.github.v3+json"


@pytest.mark.asyncio
async def test_list_user_repositories_request() -> None:
    """Test that repositories are listed by push recency and only the language is kept."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(
            200,
            json=[
                {"name": "one", "language": "Rust", "stargazers_count": 3},
                {"name": "two", "language": None},
            ],
        )

    async with make_adapter(handler) as adapter:
        repositories = await adapter.list_user_repositories("octocat")

    assert [repo.language for repo in repositories] == ["Rust", None]
    request = requests[0]
    assert request.url.path == "/users/octocat/repos"
    assert request.url.params["sort"] == "pushed"
    assert request.url.params["per_page"] == "10"


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [403, 404, 422, 500])
async def test_non_success_raises_request_error(status_code: int) -> None:
    """Test that non-success responses raise GitHubRequestError with the status code."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json={"message": "nope"})

    async with make_adapter(handler) as adapter:
        with pytest.raises(GitHubRequestError) as exc_info:
            await adapter.get_user("octocat")

    assert exc_info.value.status_code == status_code
    assert exc_info.value.message == "nope"


@pytest.mark.asyncio
async def test_non_json_error_body() -> None:
    """Test that an error response without a JSON body still raises GitHubRequestError."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="<html>Bad gateway</html>")

    async with make_adapter(handler) as adapter:
        with pytest.raises(GitHubRequestError) as exc_info:
            await adapter.search_users("rust%20in%3Abio")

    assert exc_info.value.status_code == 502
    assert exc_info.value.message is None


@pytest.mark.asyncio
async def test_pat_token_is_sent() -> None:
    """Test that an optional PAT is sent in the Authorization header."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=make_profile_payload("octocat"))

    async with make_adapter(handler, github_pat_token="ghp_secret") as adapter:
        await adapter.get_user("octocat")

    assert "ghp_secret" in requests[0].headers["Authorization"]


@pytest.mark.asyncio
async def test_enterprise_base_url() -> None:
    """Test that a GitHub Enterprise Server base path is kept."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=[])

    async with make_adapter(handler, github_api_url="https://ghes.example.com/api/v3/") as adapter:
        await adapter.list_user_repositories("octocat")

    assert requests[0].url.host == "ghes.example.com"
    assert requests[0].url.path == "/api/v3/users/octocat/repos"


@pytest.mark.asyncio
async def test_non_json_success_body() -> None:
    """Test that a success response without a JSON body raises ValueError."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>proxy</html>")

    async with make_adapter(handler) as adapter:
        with pytest.raises(ValueError):
            await adapter.search_users("rust%20in%3Abio")


def test_create_builds_unauthenticated_client() -> None:
    """Test that create builds an adapter around an unauthenticated githubkit client."""
    adapter = GitHubRestAdapter.create(timeout=5.0)
    assert isinstance(adapter.client, GitHub)
    assert isinstance(adapter.client.auth, UnauthAuthStrategy)


def test_create_with_pat_token() -> None:
    """Test that create authenticates with the PAT when one is given."""
    adapter = GitHubRestAdapter.create(github_pat_token="ghp_secret")
    assert isinstance(adapter.client.auth, TokenAuthStrategy)
