"""Shared constants used across the application."""

# GitHub REST API Constants
# -------------------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default base URL of the GitHub REST API."""

GITHUB_ACCEPT_HEADER = "application/vnd.github.v3+json"
"""Media type sent in the Accept header of every request."""

# Search Constants
# ----------------

SEARCH_RESULTS_PER_PAGE = 10
"""Number of users requested per search results page."""

MAX_SEARCH_RESULTS = 1000
"""GitHub's Search API never returns more than 1,000 results for a query."""

RECENT_REPOSITORIES_LIMIT = 10
"""Number of most recently pushed repositories inspected per user."""

# Enrichment Constants
# --------------------

DEFAULT_MAX_CONCURRENT_ENRICHMENTS = 5
"""Default number of users enriched at the same time."""

MIN_CONCURRENT_ENRICHMENTS = 1
MAX_CONCURRENT_ENRICHMENTS = 10

# User-visible Messages
# ---------------------

RATE_LIMITED_MESSAGE = "API rate limit exceeded. Please try again later."
INVALID_QUERY_MESSAGE = "Invalid search query. Please try a different search term."
SEARCH_FAILED_MESSAGE = "Failed to fetch users. Please try again."
NO_RESULTS_MESSAGE = "No users found matching your search criteria."
