"""GitHub REST API access."""

from .abc import GitHubClientBase
from .adapter import GitHubRequestError, GitHubRestAdapter

__all__ = ["GitHubClientBase", "GitHubRequestError", "GitHubRestAdapter"]
