"""Builds GitHub user search queries that match a keyword against user bios."""

from urllib.parse import quote

from pydantic import BaseModel

# Characters left untouched by JavaScript's encodeURIComponent besides
# ASCII letters and digits.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_query(q: str) -> str:
    """URL-encode a query string the same way encodeURIComponent does."""
    return quote(q, safe=_URI_COMPONENT_SAFE)


class SearchQuery(BaseModel):
    """A bio search for a keyword, optionally restricted to a location."""

    keyword: str
    location: str = ""

    @property
    def q(self) -> str:
        """The raw search query, e.g. ``rust in:bio location:Berlin``."""
        query = f"{self.keyword} in:bio"
        if self.location:
            query += f" location:{self.location}"
        return query

    @property
    def encoded(self) -> str:
        """The URL-encoded search query as sent on the wire."""
        return encode_query(self.q)


def build_search_query(keyword: str, location: str | None = "") -> SearchQuery | None:
    """Build a bio search query.

    Returns None when the keyword is empty or whitespace-only, in which case
    no search should be run.
    """
    keyword = keyword.strip()
    if not keyword:
        return None
    return SearchQuery(keyword=keyword, location=(location or "").strip())
