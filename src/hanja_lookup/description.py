"""Parse the supplementary examples fragment into description blocks.

The fragment is a list of wrapper elements whose children carry the content.
Each content element is classified by its ``class`` attribute:

``wrap_ex``
    A free-form example. The element that follows it, whichever wrapper it
    sits in, is its continuation and is consumed with it.
``item_example``
    A list of annotated phrases. Each child holding a ruby span yields one
    :class:`PhraseExample`; other children are skipped.
``ex_refer``
    A "see also" list made of the enabled reference spans.

Anything else is ignored.
"""
from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from .models import CrossReference, DescriptionBlock, PhraseExample, PlainExample
from .markup import DEFAULT_SELECTORS, Selectors

NBSP = "\u00a0"


def parse_description(html: str, selectors: Selectors = DEFAULT_SELECTORS) -> List[DescriptionBlock]:
    # keep class as the raw attribute string; markers compare it exactly
    soup = BeautifulSoup(html, "lxml", multi_valued_attributes=None)
    blocks: List[DescriptionBlock] = []
    elements = _content_elements(soup)
    for element in elements:
        marker = element.get("class")
        if marker == selectors.plain_example:
            following = next(elements, None)
            continuation = extract_text(following) if following is not None else None
            blocks.append(PlainExample(text=extract_text(element), continuation=continuation))
        elif marker == selectors.example_list:
            blocks.extend(_phrase_examples(element, selectors))
        elif marker == selectors.cross_reference:
            items = tuple(extract_text(span) for span in element.select(selectors.active_reference))
            blocks.append(CrossReference(items=items))
    return blocks


def extract_text(element: Tag) -> str:
    return element.get_text().strip()


def split_citation(strings: List[str]) -> Tuple[str, Optional[str]]:
    """Separate NBSP-delimited citation runs from the phrase text.

    A run counts as the citation only when it both starts and ends with a
    non-breaking space. The last such run wins. Every other run is joined,
    in document order, into the phrase.
    """

    source: Optional[str] = None
    phrase: List[str] = []
    for text in strings:
        if text.startswith(NBSP) and text.endswith(NBSP):
            source = text.strip()
        else:
            phrase.append(text)
    return "".join(phrase).strip(), source


def _phrase_examples(container: Tag, selectors: Selectors) -> Iterator[PhraseExample]:
    for item in container.find_all(True, recursive=False):
        ruby = item.select_one(selectors.ruby)
        if ruby is None:
            continue
        phrase, source = split_citation(list(ruby.strings))
        example = item.select_one(selectors.reading_example)
        reading = extract_text(example) if example is not None else None
        yield PhraseExample(phrase=phrase, reading=reading, source=source)


def _content_elements(soup: BeautifulSoup) -> Iterator[Tag]:
    # lxml places the fragment inside <html><body>
    root = soup.body or soup
    for wrapper in root.find_all(True, recursive=False):
        yield from wrapper.find_all(True, recursive=False)

