"""Exceptions raised while looking up a dictionary entry."""
from __future__ import annotations

from typing import Optional


class HanjaLookupError(Exception):
    """Base class for failures confined to a single query."""


class EntryNotFound(HanjaLookupError):
    """The search page had no headword starting with the query."""

    def __init__(self, query: str):
        super().__init__(f"No entry found for {query!r}")
        self.query = query


class FetchError(HanjaLookupError):
    """An outbound request failed, timed out or returned an error status."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Request to {url} failed: {reason}")
        self.url = url
        self.reason = reason


class UnexpectedStructure(HanjaLookupError):
    """A required element is missing from a fetched document."""

    def __init__(self, marker: str, url: Optional[str] = None):
        where = f" in {url}" if url else ""
        super().__init__(f"Expected element {marker!r} not found{where}")
        self.marker = marker
        self.url = url
