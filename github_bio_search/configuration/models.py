"""Configuration models for the GitHub Bio Search CLI."""

from dataclasses import dataclass

from github_bio_search.presentation.theme import Theme


@dataclass
class SearchConfig:
    """Configuration class for the search command."""

    debug: bool
    github_api_url: str
    github_pat_token: str | None
    request_timeout: float
    keyword: str
    location: str
    page: int
    theme: Theme
    max_concurrency: int
