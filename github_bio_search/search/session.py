"""Holds the state of an interactive bio search and drives searches and paging."""

import math
from dataclasses import dataclass, field

import structlog

from github_bio_search.enrichment.fanout import enrich_users
from github_bio_search.github.abc import GitHubClientBase
from github_bio_search.schemas.users import UserProfile
from github_bio_search.search.client import search_users
from github_bio_search.search.exceptions import SearchError
from github_bio_search.search.query import build_search_query
from github_bio_search.utils.constants import (
    DEFAULT_MAX_CONCURRENT_ENRICHMENTS,
    NO_RESULTS_MESSAGE,
    SEARCH_RESULTS_PER_PAGE,
)

logger = structlog.get_logger(__name__)


@dataclass
class SearchState:
    """What is currently shown to the user."""

    users: list[UserProfile] = field(default_factory=list)
    total_count: int = 0
    current_page: int = 1
    loading: bool = False
    error: str | None = None
    no_results: bool = False

    @property
    def total_pages(self) -> int:
        """Number of result pages for the total count."""
        return math.ceil(self.total_count / SEARCH_RESULTS_PER_PAGE)


class BioSearchSession:
    """Runs bio searches against GitHub and keeps the latest results.

    Every call to :meth:`search` takes a new generation number. When an
    older search finishes after a newer one has started, its results are
    discarded so they cannot overwrite fresher state.
    """

    def __init__(
        self,
        client: GitHubClientBase,
        keyword: str = "",
        location: str = "",
        max_concurrency: int = DEFAULT_MAX_CONCURRENT_ENRICHMENTS,
    ) -> None:
        self.client = client
        self.keyword = keyword
        self.location = location
        self.max_concurrency = max_concurrency
        self.state = SearchState()
        self._generation = 0

    def _is_stale(self, generation: int) -> bool:
        if generation != self._generation:
            logger.info("Discarding stale search response", generation=generation, latest_generation=self._generation)
            return True
        return False

    async def search(self, page: int = 1) -> SearchState:
        """Search for users on the given page and enrich the hits.

        Does nothing when the keyword is blank. Search errors are stored as
        the state's error message rather than raised.
        """
        query = build_search_query(self.keyword, self.location)
        if query is None:
            logger.debug("Ignoring search with blank keyword")
            return self.state

        self._generation += 1
        generation = self._generation
        self.state.loading = True
        self.state.error = None
        self.state.no_results = False

        try:
            result = await search_users(self.client, query, page=page)
            if not result.items:
                if not self._is_stale(generation):
                    self.state.users = []
                    self.state.total_count = 0
                    self.state.error = NO_RESULTS_MESSAGE
                    self.state.no_results = True
                return self.state

            users = await enrich_users(self.client, result.items, max_concurrency=self.max_concurrency)
            if not self._is_stale(generation):
                self.state.users = users
                self.state.total_count = result.total_count
                self.state.current_page = page
        except SearchError as e:
            if not self._is_stale(generation):
                self.state.error = e.message
                self.state.users = []
                self.state.total_count = 0
        finally:
            if generation == self._generation:
                self.state.loading = False

        return self.state

    async def change_page(self, page: int) -> SearchState:
        """Re-run the current search for another page."""
        return await self.search(page)

    async def next_page(self) -> SearchState:
        """Move to the next page, if there is one."""
        if self.state.current_page >= self.state.total_pages:
            return self.state
        return await self.change_page(self.state.current_page + 1)

    async def previous_page(self) -> SearchState:
        """Move to the previous page, if there is one."""
        if self.state.current_page <= 1:
            return self.state
        return await self.change_page(self.state.current_page - 1)
