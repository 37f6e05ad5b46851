"""Profile enrichment of user search hits."""

from .fanout import enrich_user, enrich_users
from .languages import most_used_language

__all__ = ["enrich_user", "enrich_users", "most_used_language"]
