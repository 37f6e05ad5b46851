"""Shared helpers for unit tests."""

import re

from github_bio_search.schemas.users import RepositorySummary, UserStub

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def make_stub(login: str) -> UserStub:
    """Create a search hit for the given login."""
    return UserStub(
        login=login,
        avatar_url=f"https://avatars.githubusercontent.com/{login}",
        html_url=f"https://github.com/{login}",
    )


def make_profile_payload(login: str, **overrides: object) -> dict[str, object]:
    """Create a ``GET /users/{login}`` payload."""
    payload: dict[str, object] = {
        "login": login,
        "name": f"{login.title()} Person",
        "bio": "Rust and Python developer",
        "location": "Berlin",
        "blog": f"https://{login}.dev",
        "twitter_username": login,
        "followers": 42,
        "following": 7,
        "company": "@acme",
        "html_url": f"https://github.com/{login}",
        "avatar_url": f"https://avatars.githubusercontent.com/{login}",
    }
    payload.update(overrides)
    return payload


def make_repositories(*languages: str | None) -> list[RepositorySummary]:
    """Create repositories with the given languages."""
    return [RepositorySummary(language=language) for language in languages]


def strip_styles(text: str) -> str:
    """Remove the ANSI colour codes added by typer.style."""
    return ANSI_ESCAPE.sub("", text)
