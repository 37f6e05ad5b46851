"""Derives a user's dominant language from their recently pushed repositories."""

from collections import Counter
from typing import Iterable

from github_bio_search.schemas.users import RepositorySummary


def most_used_language(repositories: Iterable[RepositorySummary]) -> str | None:
    """Return the most frequent language among the given repositories.

    Repositories without a language are ignored. When several languages share
    the highest count, the one seen first wins. Returns None if no repository
    has a language.
    """
    counts = Counter(repo.language for repo in repositories if repo.language)
    if not counts:
        return None
    # most_common() keeps first-seen order among equal counts.
    language, _ = counts.most_common(1)[0]
    return language
