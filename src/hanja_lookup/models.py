"""Dataclasses representing a parsed dictionary entry."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

FOUND = "found"
NOT_FOUND = "not_found"
FAILED = "failed"


@dataclass(frozen=True)
class SearchMatch:
    entry_id: str


@dataclass(frozen=True)
class PlainExample:
    text: str
    continuation: Optional[str] = None


@dataclass(frozen=True)
class PhraseExample:
    phrase: str
    reading: Optional[str] = None
    source: Optional[str] = None


@dataclass(frozen=True)
class CrossReference:
    items: Tuple[str, ...] = ()


DescriptionBlock = Union[PlainExample, PhraseExample, CrossReference]


@dataclass(frozen=True)
class ParsedEntry:
    reading: str
    blocks: Tuple[DescriptionBlock, ...] = ()


@dataclass
class LookupResult:
    """Terminal outcome of a single query."""

    query: str
    status: str
    text: Optional[str] = None
    entry_id: Optional[str] = None
    entry: Optional[ParsedEntry] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status == FOUND

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "query": self.query,
            "status": self.status,
            "entry_id": self.entry_id,
            "text": self.text,
            "error": self.error,
        }
        if self.entry is not None:
            data["reading"] = self.entry.reading.strip()
            data["blocks"] = [_block_to_dict(block) for block in self.entry.blocks]
        return data


def _block_to_dict(block: DescriptionBlock) -> Dict[str, Any]:
    if isinstance(block, PlainExample):
        return {"kind": "plain", "text": block.text, "continuation": block.continuation}
    if isinstance(block, PhraseExample):
        return {
            "kind": "phrase",
            "phrase": block.phrase,
            "reading": block.reading,
            "source": block.source,
        }
    return {"kind": "reference", "items": list(block.items)}
