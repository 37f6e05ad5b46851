"""Enriches user search hits with their full profile and most used language."""

import asyncio
from typing import Any, Sequence

import structlog
from pydantic import ValidationError

from github_bio_search.enrichment.languages import most_used_language
from github_bio_search.github.abc import GitHubClientBase
from github_bio_search.schemas.users import UserProfile, UserStub
from github_bio_search.utils.constants import DEFAULT_MAX_CONCURRENT_ENRICHMENTS, RECENT_REPOSITORIES_LIMIT

logger = structlog.get_logger(__name__)


async def fetch_most_used_language(client: GitHubClientBase, login: str) -> str | None:
    """Return the dominant language of the user's most recently pushed repositories.

    Any failure is logged and results in None.
    """
    try:
        repositories = await client.list_user_repositories(login, sort="pushed", per_page=RECENT_REPOSITORIES_LIMIT)
    except Exception as e:
        logger.warning("Could not list repositories for user", login=login, error=str(e), error_type=type(e).__name__)
        return None
    return most_used_language(repositories)


async def fetch_user_profile(client: GitHubClientBase, login: str) -> dict[str, Any] | None:
    """Return the raw profile of a user, or None if it could not be fetched."""
    try:
        profile: dict[str, Any] = await client.get_user(login)
    except Exception as e:
        logger.warning("Could not fetch profile for user", login=login, error=str(e), error_type=type(e).__name__)
        return None
    return profile


async def enrich_user(client: GitHubClientBase, stub: UserStub) -> UserProfile:
    """Promote a search hit to a full profile.

    The profile and the repository list are fetched concurrently. If the
    profile cannot be fetched the result is a degraded record built from the
    search hit, without a language even when the repositories were listed.
    """
    profile_data, language = await asyncio.gather(
        fetch_user_profile(client, stub.login),
        fetch_most_used_language(client, stub.login),
    )
    if profile_data is None:
        logger.info("Falling back to degraded profile", login=stub.login)
        return UserProfile.degraded(stub)

    try:
        return UserProfile.from_profile(profile_data, most_used_language=language)
    except (KeyError, TypeError, ValidationError) as e:
        logger.warning("Malformed profile for user", login=stub.login, error=str(e))
        return UserProfile.degraded(stub)


async def enrich_users(
    client: GitHubClientBase,
    stubs: Sequence[UserStub],
    max_concurrency: int = DEFAULT_MAX_CONCURRENT_ENRICHMENTS,
) -> list[UserProfile]:
    """Enrich every search hit, at most ``max_concurrency`` users at a time.

    One user's failure never fails the whole batch. The returned profiles are
    in the same order as ``stubs`` regardless of completion order.
    """
    if max_concurrency < 1:
        raise ValueError("max_concurrency must be at least 1")

    semaphore = asyncio.Semaphore(max_concurrency)

    async def _bounded(stub: UserStub) -> UserProfile:
        async with semaphore:
            return await enrich_user(client, stub)

    logger.debug("Enriching users", count=len(stubs), max_concurrency=max_concurrency)
    profiles = await asyncio.gather(*(_bounded(stub) for stub in stubs))
    return list(profiles)
