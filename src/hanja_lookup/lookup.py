"""End-to-end lookup pipeline: search, fetch, parse, format."""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from tqdm import tqdm

from .config import LookupConfig
from .description import parse_description
from .entry import extract_reading, fetch_entry
from .errors import EntryNotFound, HanjaLookupError
from .fetcher import HttpFetcher
from .formatting import format_entry
from .models import FAILED, FOUND, NOT_FOUND, LookupResult, ParsedEntry
from .search import resolve
from .markup import DEFAULT_SELECTORS, Selectors

LOGGER = logging.getLogger(__name__)

NO_RESULT = "No result"


class HanjaDictionary:
    """Look up hanja entries through a shared fetcher.

    Instances hold no per-query state, so one dictionary can serve many
    concurrent lookups.
    """

    def __init__(
        self,
        fetcher,
        config: Optional[LookupConfig] = None,
        selectors: Selectors = DEFAULT_SELECTORS,
    ):
        self.fetcher = fetcher
        self.config = config or LookupConfig()
        self.selectors = selectors

    async def find(self, query: str) -> ParsedEntry:
        """Return the parsed entry for ``query`` or raise a lookup error."""

        entry, _ = await self._find(query)
        return entry

    async def lookup(self, query: str) -> LookupResult:
        """Run the whole pipeline and report a terminal result.

        Lookup errors and empty queries never raise; they come back as a
        ``failed`` or ``not_found`` result.
        """

        if not query or not query.strip():
            return LookupResult(query=query, status=FAILED, error="Query must not be empty")
        try:
            entry, entry_id = await self._find(query)
        except EntryNotFound:
            LOGGER.info("No result for %r", query)
            return LookupResult(query=query, status=NOT_FOUND, text=NO_RESULT)
        except HanjaLookupError as exc:
            LOGGER.warning("Lookup for %r failed: %s", query, exc)
            return LookupResult(query=query, status=FAILED, error=str(exc))
        text = format_entry(query, entry, self.config)
        return LookupResult(query=query, status=FOUND, text=text, entry_id=entry_id, entry=entry)

    async def lookup_many(self, queries: Iterable[str], progress: bool = True) -> List[LookupResult]:
        queries = list(queries)
        results: List[LookupResult] = []
        disable = not progress or len(queries) < 2
        for query in tqdm(queries, desc="Lookup", unit="query", disable=disable):
            results.append(await self.lookup(query))
        return results

    async def _find(self, query: str):
        if not query or not query.strip():
            raise ValueError("Query must not be empty")
        match = await resolve(self.fetcher, query, self.config, self.selectors)
        if match is None:
            raise EntryNotFound(query)
        pages = await fetch_entry(self.fetcher, match.entry_id, self.config)
        reading = extract_reading(pages.entry_html, self.selectors, url=pages.entry_url)
        blocks = parse_description(pages.supplement_html, self.selectors)
        LOGGER.debug("Parsed %d description blocks for %r", len(blocks), query)
        return ParsedEntry(reading=reading, blocks=tuple(blocks)), match.entry_id


async def lookup_text(query: str, config: Optional[LookupConfig] = None) -> str:
    """Look up ``query`` with a fresh fetcher and return the display text."""

    config = config or LookupConfig.from_env()
    async with HttpFetcher(config) as fetcher:
        result = await HanjaDictionary(fetcher, config).lookup(query)
    if result.status == FAILED:
        return f"Lookup failed: {result.error}"
    return result.text or ""
