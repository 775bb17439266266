"""Assemble segmented pages from raw page texts or a single text blob."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from legalscan.config import env_positive_int
from legalscan.ids import sentence_id
from legalscan.models.document import Page, Sentence
from legalscan.text.sentences import split_into_sentences, split_into_words

DEFAULT_SENTENCES_PER_PAGE = env_positive_int("LEGALSCAN_SENTENCES_PER_PAGE", 20)


def _build_page(page_number: int, sentences: Iterable[str]) -> Page:
    content: List[Sentence] = []
    for index, text in enumerate(sentences, start=1):
        sid = sentence_id(page_number, index)
        content.append(
            Sentence(id=sid, text=text, words=tuple(split_into_words(text, sid)))
        )
    return Page(page_number=page_number, content=tuple(content))


def pages_from_texts(page_texts: Sequence[str]) -> List[Page]:
    """Segment one raw text per physical page.

    Every input page yields a ``Page``, even when its text holds no sentences,
    so page numbers keep matching the source document.
    """

    return [
        _build_page(number, split_into_sentences(text))
        for number, text in enumerate(page_texts, start=1)
    ]


def pages_from_flat_text(
    text: str, sentences_per_page: int = DEFAULT_SENTENCES_PER_PAGE
) -> List[Page]:
    """Chunk an unpaginated text into synthetic pages of ``sentences_per_page``.

    An empty text yields no pages.
    """

    if sentences_per_page < 1:
        raise ValueError("sentences_per_page must be a positive integer")
    sentences = split_into_sentences(text)
    return [
        _build_page(number, sentences[start : start + sentences_per_page])
        for number, start in enumerate(
            range(0, len(sentences), sentences_per_page), start=1
        )
    ]


__all__ = ["DEFAULT_SENTENCES_PER_PAGE", "pages_from_flat_text", "pages_from_texts"]
