"""CSS selectors and class markers for the dictionary's markup."""
from __future__ import annotations

from dataclasses import dataclass

ENTRY_LINK_MARKER = "/word/view.do?wordid="


@dataclass(frozen=True)
class Selectors:
    """Read-only structural matchers shared by every lookup."""

    reading: str = ".txt_read"
    ruby: str = ".desc_ruby"
    reading_example: str = ".desc_ex"
    active_reference: str = ".txt_refer.on"
    result_link: str = f'a[href*="{ENTRY_LINK_MARKER}"]'
    headword: str = "txt_emph1"
    plain_example: str = "wrap_ex"
    example_list: str = "item_example"
    cross_reference: str = "ex_refer"


DEFAULT_SELECTORS = Selectors()
