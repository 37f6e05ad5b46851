"""Pydantic schemas for GitHub users returned by the search and users APIs."""

from typing import Any, Self

from pydantic import BaseModel


class UserStub(BaseModel):
    """Pydantic model for a user as returned by the user search endpoint."""

    login: str
    avatar_url: str = ""
    html_url: str = ""


class RepositorySummary(BaseModel):
    """Pydantic model for the part of a repository used by language aggregation."""

    language: str | None = None


class SearchResultPage(BaseModel):
    """Pydantic model for one page of user search results."""

    total_count: int = 0
    items: list[UserStub] = []


class UserProfile(BaseModel):
    """Pydantic model for an enriched GitHub user profile."""

    login: str
    name: str
    bio: str = ""
    location: str | None = None
    blog: str | None = None
    twitter_username: str | None = None
    followers: int = 0
    following: int = 0
    company: str | None = None
    html_url: str = ""
    avatar_url: str = ""
    most_used_language: str | None = None

    @classmethod
    def from_profile(cls, data: dict[str, Any], most_used_language: str | None = None) -> Self:
        """Build a profile from a ``GET /users/{login}`` payload.

        GitHub returns ``null`` for an unset name or bio, so the display name
        falls back to the login and the bio to an empty string.
        """
        login = data["login"]
        return cls.model_validate(
            {
                **data,
                "name": data.get("name") or login,
                "bio": data.get("bio") or "",
                "followers": data.get("followers") or 0,
                "following": data.get("following") or 0,
                "most_used_language": most_used_language,
            }
        )

    @classmethod
    def degraded(cls, stub: UserStub) -> Self:
        """Build a placeholder profile from a search hit whose details could not be fetched."""
        return cls(
            login=stub.login,
            name=stub.login,
            bio="",
            location=None,
            blog=None,
            twitter_username=None,
            followers=0,
            following=0,
            company=None,
            html_url=stub.html_url,
            avatar_url=stub.avatar_url,
            most_used_language=None,
        )
