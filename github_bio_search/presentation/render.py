"""Renders the search state as styled terminal text."""

import re

import typer

from github_bio_search.presentation.theme import Palette, ThemeContext
from github_bio_search.schemas.users import UserProfile
from github_bio_search.search.session import SearchState

LOADING_MESSAGE = "Searching..."


def highlight_keyword(text: str, keyword: str, palette: Palette) -> str:
    """Style every case-insensitive occurrence of the keyword in the text."""
    keyword = keyword.strip()
    if not keyword or not text:
        return text
    pattern = re.compile(re.escape(keyword), re.IGNORECASE)
    return pattern.sub(lambda match: typer.style(match.group(0), fg=palette.highlight, bold=True), text)


def render_user(user: UserProfile, palette: Palette, keyword: str = "") -> str:
    """Render the profile summary of one user."""
    lines = [
        typer.style(user.name, fg=palette.heading, bold=True) + " " + typer.style(f"@{user.login}", fg=palette.muted),
    ]
    if user.bio:
        lines.append("  " + highlight_keyword(user.bio, keyword, palette))

    details = []
    if user.location:
        details.append(f"Location: {user.location}")
    if user.company:
        details.append(f"Company: {user.company}")
    if user.blog:
        details.append(f"Blog: {user.blog}")
    if user.twitter_username:
        details.append(f"Twitter: @{user.twitter_username}")
    if details:
        lines.append("  " + typer.style(" | ".join(details), fg=palette.text))

    stats = f"{user.followers:,} followers · {user.following:,} following"
    if user.most_used_language:
        stats += f" · Most used language: {user.most_used_language}"
    lines.append("  " + typer.style(stats, fg=palette.muted))
    if user.html_url:
        lines.append("  " + typer.style(user.html_url, fg=palette.accent, underline=True))
    return "\n".join(lines)


def render_pagination(current_page: int, total_pages: int, palette: Palette) -> str:
    """Render the pagination line."""
    hints = []
    if current_page > 1:
        hints.append("[p]revious")
    if current_page < total_pages:
        hints.append("[n]ext")
    line = f"Page {current_page} of {total_pages}"
    if hints:
        line += "  " + "  ".join(hints)
    return typer.style(line, fg=palette.muted)


def render_state(state: SearchState, theme: ThemeContext, keyword: str = "") -> str:
    """Render loading, error, empty or result state.

    An empty state without an error renders as an empty string.
    """
    palette = theme.palette
    if state.loading:
        return typer.style(LOADING_MESSAGE, fg=palette.accent)
    if state.error:
        return typer.style(state.error, fg=palette.error)
    if not state.users:
        return ""

    blocks = [typer.style(f"Found {state.total_count:,} users matching your search", fg=palette.muted)]
    blocks.extend(render_user(user, palette, keyword) for user in state.users)
    blocks.append(render_pagination(state.current_page, state.total_pages, palette))
    return "\n\n".join(blocks)
