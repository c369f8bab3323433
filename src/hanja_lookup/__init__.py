"""Hanja dictionary lookups with parsed readings and usage examples."""

from .config import LookupConfig
from .description import parse_description
from .entry import extract_reading, fetch_entry
from .errors import EntryNotFound, FetchError, HanjaLookupError, UnexpectedStructure
from .fetcher import HttpFetcher
from .formatting import format_entry, render_block
from .lookup import HanjaDictionary, lookup_text
from .models import CrossReference, LookupResult, ParsedEntry, PhraseExample, PlainExample, SearchMatch
from .search import parse_search_results, resolve

__all__ = [
    "HanjaDictionary",
    "HttpFetcher",
    "LookupConfig",
    "LookupResult",
    "ParsedEntry",
    "PlainExample",
    "PhraseExample",
    "CrossReference",
    "SearchMatch",
    "HanjaLookupError",
    "EntryNotFound",
    "FetchError",
    "UnexpectedStructure",
    "extract_reading",
    "fetch_entry",
    "format_entry",
    "lookup_text",
    "parse_description",
    "parse_search_results",
    "render_block",
    "resolve",
]
