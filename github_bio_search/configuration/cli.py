"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Awaitable, Callable

import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from github_bio_search.configuration.exceptions import ConfigurationError
from github_bio_search.configuration.models import SearchConfig
from github_bio_search.configuration.reconcile import reconcile_search_configuration
from github_bio_search.github.adapter import GitHubRestAdapter
from github_bio_search.presentation.render import LOADING_MESSAGE, render_state
from github_bio_search.presentation.theme import ThemeContext
from github_bio_search.search.session import BioSearchSession, SearchState
from github_bio_search.utils.logging import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Search GitHub users by keywords in their bio.")

INTERACTIVE_PROMPT = "[n]ext, [p]revious, [t]oggle theme, [q]uit"


def _echo_state(state: SearchState, theme: ThemeContext, keyword: str) -> None:
    rendered = render_state(state, theme, keyword)
    if rendered:
        typer.echo(rendered)


async def _run(
    action: Callable[[], Awaitable[SearchState]],
    theme: ThemeContext,
    keyword: str,
) -> SearchState:
    """Run a session action while showing the loading indicator, then render the result."""
    typer.echo(typer.style(LOADING_MESSAGE, fg=theme.palette.accent))
    state = await action()
    _echo_state(state, theme, keyword)
    return state


async def run_search(config: SearchConfig, interactive: bool = False) -> SearchState:
    """Run a bio search and, in interactive mode, let the user page through the results."""
    theme = ThemeContext(config.theme)
    adapter = GitHubRestAdapter.create(
        github_api_url=config.github_api_url,
        github_pat_token=config.github_pat_token,
        timeout=config.request_timeout,
    )
    async with adapter:
        session = BioSearchSession(
            adapter,
            keyword=config.keyword,
            location=config.location,
            max_concurrency=config.max_concurrency,
        )
        state = await _run(lambda: session.search(config.page), theme, config.keyword)

        while interactive:
            choice = typer.prompt(INTERACTIVE_PROMPT, default="q").strip().lower()
            if choice.startswith("n"):
                if state.current_page >= state.total_pages:
                    typer.echo("Already on the last page.")
                    continue
                state = await _run(session.next_page, theme, config.keyword)
            elif choice.startswith("p"):
                if state.current_page <= 1:
                    typer.echo("Already on the first page.")
                    continue
                state = await _run(session.previous_page, theme, config.keyword)
            elif choice.startswith("t"):
                new_theme = theme.toggle()
                typer.echo(f"Switched to {new_theme.value} theme.")
                _echo_state(state, theme, config.keyword)
            elif choice.startswith("q"):
                break
            else:
                typer.echo(f"Unknown choice '{choice}'.", err=True)
    return state


@typer_app.command(name="search")
def search_cli(
    keyword: Annotated[str, Argument(help="Keyword to look for in user bios.")],
    location: Annotated[str | None, Option("--location", "-l", help="Only match users in this location.")] = None,
    page: Annotated[int, Option("--page", "-p", help="Results page to show (10 users per page).")] = 1,
    theme: Annotated[str | None, Option(envvar="THEME", help="Output theme (light or dark).")] = None,
    max_concurrency: Annotated[
        int | None,
        Option(envvar="MAX_CONCURRENT_ENRICHMENTS", help="Maximum number of users enriched at the same time (1-10)."),
    ] = None,
    interactive: Annotated[bool, Option("--interactive", "-i", help="Page through results and toggle the theme interactively.")] = False,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    github_pat_token: Annotated[
        str | None, Option(envvar="GITHUB_PAT_TOKEN", help="Optional GitHub Personal Access Token for a higher rate limit.")
    ] = None,
) -> None:
    """Search GitHub users by a keyword in their bio."""
    try:
        config = asyncio.run(
            reconcile_search_configuration(
                cli_keyword=keyword,
                cli_location=location,
                cli_page=page,
                cli_theme=theme,
                cli_max_concurrency=max_concurrency,
                cli_debug=debug,
                cli_github_api_url=github_api_url,
                cli_github_pat_token=github_pat_token,
            )
        )
    except ConfigurationError as e:
        typer.echo(str(e), err=True)
        sys.exit(1)

    configure_logging(config.debug)
    state = asyncio.run(run_search(config, interactive=interactive))
    if state.error and not state.no_results:
        sys.exit(1)


@typer_app.command(name="version")
def version_cli() -> None:
    """Show the installed version."""
    try:
        typer.echo(version("github-bio-search"))
    except PackageNotFoundError:
        typer.echo("unknown")


if __name__ == "__main__":
    typer_app()
