"""Reconciles configuration between CLI arguments and environment variables."""

from github_bio_search.configuration.env import Settings
from github_bio_search.configuration.exceptions import ConfigurationError
from github_bio_search.configuration.models import SearchConfig
from github_bio_search.presentation.theme import Theme
from github_bio_search.utils.constants import MAX_CONCURRENT_ENRICHMENTS, MIN_CONCURRENT_ENRICHMENTS


async def reconcile_theme(cli_theme: str | None, env_theme: str) -> Theme:
    """Resolve the theme, preferring the CLI value over the environment."""
    value = (cli_theme or env_theme).lower()
    try:
        return Theme(value)
    except ValueError as e:
        raise ConfigurationError(
            "theme",
            "theme",
            "THEME",
            f"expected one of {', '.join(t.value for t in Theme)}, got '{value}'",
        ) from e


async def reconcile_max_concurrency(cli_max_concurrency: int | None, env_max_concurrency: int) -> int:
    """Resolve the enrichment concurrency limit, preferring the CLI value over the environment."""
    value = cli_max_concurrency if cli_max_concurrency is not None else env_max_concurrency
    if not MIN_CONCURRENT_ENRICHMENTS <= value <= MAX_CONCURRENT_ENRICHMENTS:
        raise ConfigurationError(
            "maximum concurrent enrichments",
            "max_concurrency",
            "MAX_CONCURRENT_ENRICHMENTS",
            f"must be between {MIN_CONCURRENT_ENRICHMENTS} and {MAX_CONCURRENT_ENRICHMENTS}, got {value}",
        )
    return value


async def reconcile_search_configuration(
    cli_keyword: str,
    cli_location: str | None = None,
    cli_page: int = 1,
    cli_theme: str | None = None,
    cli_max_concurrency: int | None = None,
    cli_debug: bool = False,
    cli_github_api_url: str | None = None,
    cli_github_pat_token: str | None = None,
    settings: Settings | None = None,
) -> SearchConfig:
    """Reconciles the search configuration from CLI arguments and environment variables.

    Values passed on the command line take precedence over environment
    variables, which take precedence over defaults.

    Raises:
        ConfigurationError: If the keyword is blank, the page is below 1, or the theme or concurrency limit is invalid.

    Returns:
        SearchConfig: The reconciled configuration.
    """
    if settings is None:
        settings = Settings()

    if not cli_keyword.strip():
        raise ConfigurationError("keyword", "keyword", None, "must not be empty")
    if cli_page < 1:
        raise ConfigurationError("page", "page", None, f"must be at least 1, got {cli_page}")

    return SearchConfig(
        debug=cli_debug or settings.DEBUG,
        github_api_url=cli_github_api_url or settings.GITHUB_API_URL,
        github_pat_token=cli_github_pat_token or settings.GITHUB_PAT_TOKEN,
        request_timeout=settings.REQUEST_TIMEOUT,
        keyword=cli_keyword.strip(),
        location=(cli_location or "").strip(),
        page=cli_page,
        theme=await reconcile_theme(cli_theme, settings.THEME),
        max_concurrency=await reconcile_max_concurrency(cli_max_concurrency, settings.MAX_CONCURRENT_ENRICHMENTS),
    )
