"""Regex sentence and word segmentation for page text."""

from __future__ import annotations

import re
from typing import List

from legalscan.ids import word_id
from legalscan.models.document import Word

_WHITESPACE_RE = re.compile(r"\s+")
# Terminal punctuation, whitespace, then an uppercase letter.  Neither the
# punctuation nor the letter is consumed, so "Mr. smith" stays whole.
_SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+(?=[A-Z])")


def normalise_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim the ends."""

    return _WHITESPACE_RE.sub(" ", text or "").strip()


def split_into_sentences(text: str) -> List[str]:
    """Split ``text`` into sentence strings.

    Text without terminal punctuation is returned as a single sentence.
    Runs such as ``...`` or ``?!`` get no special handling.
    """

    clean = normalise_whitespace(text)
    if not clean:
        return []
    return [part for part in _SENTENCE_BOUNDARY_RE.split(clean) if part.strip()]


def split_into_words(text: str, sentence_id: str) -> List[Word]:
    """Split a sentence on whitespace and number the words from 1."""

    return [
        Word(id=word_id(sentence_id, index), text=token)
        for index, token in enumerate(text.split(), start=1)
    ]


__all__ = ["normalise_whitespace", "split_into_sentences", "split_into_words"]
