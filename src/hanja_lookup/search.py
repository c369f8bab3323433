"""Resolve a query to the dictionary's entry identifier."""
from __future__ import annotations

import logging
from typing import Optional

from bs4 import BeautifulSoup

from .config import LookupConfig
from .models import SearchMatch
from .markup import DEFAULT_SELECTORS, ENTRY_LINK_MARKER, Selectors

LOGGER = logging.getLogger(__name__)


def parse_search_results(
    html: str,
    query: str,
    selectors: Selectors = DEFAULT_SELECTORS,
) -> Optional[SearchMatch]:
    """Return the first result if its headword starts with ``query``.

    Only the first result link is considered. Later candidates are never
    tried, even when the first one does not match.
    """

    soup = BeautifulSoup(html, "lxml")
    link = soup.select_one(selectors.result_link)
    if link is None:
        return None
    href = link.get("href", "")
    _, _, entry_id = href.partition(ENTRY_LINK_MARKER)
    if not entry_id:
        return None
    # find_next walks the link's own descendants before later siblings
    headword = link.find_next(class_=selectors.headword)
    if headword is None:
        return None
    text = headword.get_text()
    if not text.startswith(query):
        LOGGER.debug("First headword %r does not start with %r", text, query)
        return None
    return SearchMatch(entry_id=entry_id)


async def resolve(
    fetcher,
    query: str,
    config: Optional[LookupConfig] = None,
    selectors: Selectors = DEFAULT_SELECTORS,
) -> Optional[SearchMatch]:
    """Fetch the search page for ``query`` and pick its entry."""

    config = config or LookupConfig()
    html = await fetcher.get_text(
        config.search_url(),
        params={"dic": config.dictionary, "q": query},
    )
    match = parse_search_results(html, query, selectors)
    LOGGER.debug("Search for %r resolved to %s", query, match.entry_id if match else None)
    return match
