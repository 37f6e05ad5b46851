"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from typing import Any


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients."""

    # Search
    @abstractmethod
    async def search_users(self, encoded_query: str, page: int = 1, per_page: int = 10) -> Any:
        """Search users with an already URL-encoded query."""
        pass

    # Users
    @abstractmethod
    async def get_user(self, login: str) -> Any:
        """Get the full profile of a user."""
        pass

    @abstractmethod
    async def list_user_repositories(self, login: str, sort: str = "pushed", per_page: int = 10) -> list[Any]:
        """List public repositories of a user."""
        pass
