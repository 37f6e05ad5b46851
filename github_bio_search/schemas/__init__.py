"""Pydantic schemas shared across the application."""

from .users import RepositorySummary, SearchResultPage, UserProfile, UserStub

__all__ = ["RepositorySummary", "SearchResultPage", "UserProfile", "UserStub"]
