"""Render a parsed entry as short chat-style text."""
from __future__ import annotations

from typing import Optional

from .config import LookupConfig
from .models import CrossReference, DescriptionBlock, ParsedEntry, PhraseExample, PlainExample

DEFAULT_CONFIG = LookupConfig()


def render_block(block: DescriptionBlock, config: Optional[LookupConfig] = None) -> str:
    """Render one block, terminated by a newline."""

    config = config or DEFAULT_CONFIG
    if isinstance(block, PlainExample):
        line = block.text
        if block.continuation is not None:
            line += " " + block.continuation
        return line + "\n"
    if isinstance(block, PhraseExample):
        line = config.bullet + block.phrase
        if block.reading is not None:
            line += f"({block.reading})"
        if block.source is not None:
            line += f" 《{block.source}》"
        return line + "\n"
    if isinstance(block, CrossReference):
        return f"{config.reference_marker} " + "".join(block.items) + "\n"
    raise TypeError(f"Unknown description block: {block!r}")


def format_entry(query: str, entry: ParsedEntry, config: Optional[LookupConfig] = None) -> str:
    description = "".join(render_block(block, config) for block in entry.blocks)
    return f"# {query}\n**{entry.reading.strip()}**\n{description}"
