"""Fetch an entry page and its supplementary examples."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup

from .config import LookupConfig
from .errors import UnexpectedStructure
from .markup import DEFAULT_SELECTORS, Selectors

LOGGER = logging.getLogger(__name__)


@dataclass
class EntryPages:
    entry_url: str
    entry_html: str
    supplement_html: str


async def fetch_entry(fetcher, entry_id: str, config: Optional[LookupConfig] = None) -> EntryPages:
    """Fetch the main entry page, then the supplement fragment.

    The supplement endpoint only answers when the entry page is sent as the
    referer, so the two requests always run in this order.
    """

    config = config or LookupConfig()
    entry_url = config.entry_url(entry_id)
    entry_html = await fetcher.get_text(entry_url)
    supplement_html = await fetcher.get_text(
        config.supplement_url(entry_id),
        headers={"Referer": entry_url},
    )
    LOGGER.debug(
        "Fetched entry %s (%d bytes) and supplement (%d bytes)",
        entry_id,
        len(entry_html),
        len(supplement_html),
    )
    return EntryPages(entry_url=entry_url, entry_html=entry_html, supplement_html=supplement_html)


def extract_reading(html: str, selectors: Selectors = DEFAULT_SELECTORS, url: Optional[str] = None) -> str:
    """Return all text under the first reading element, untrimmed."""

    soup = BeautifulSoup(html, "lxml")
    element = soup.select_one(selectors.reading)
    if element is None:
        raise UnexpectedStructure(selectors.reading, url)
    return element.get_text()
