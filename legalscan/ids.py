"""Hierarchical identifiers for nodes of the page tree.

Every id is built with :func:`generate_id` so that id containment mirrors tree
containment: ``p_3_s_2_w_5`` is word 5 of sentence 2 on page 3, and its
sentence id ``p_3_s_2`` is a prefix of it.  Downstream consumers rely on this
to map an annotation reference back to its page without walking the tree.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

_REFERENCE_RE = re.compile(r"^p_(?P<page>\d+)(?:_s_(?P<sentence>\d+)(?:_w_(?P<word>\d+))?)?$")


def generate_id(prefix: str, *parts: Union[str, int]) -> str:
    """Return ``prefix`` joined with ``parts`` by underscores."""

    return "_".join([str(prefix), *(str(part) for part in parts)])


def sentence_id(page_number: int, index: int) -> str:
    return generate_id("p", page_number, "s", index)


def word_id(parent_sentence_id: str, index: int) -> str:
    return generate_id(parent_sentence_id, "w", index)


@dataclass(frozen=True)
class Reference:
    """Position encoded in a page, sentence or word id."""

    page_number: int
    sentence_index: Optional[int] = None
    word_index: Optional[int] = None

    @property
    def kind(self) -> str:
        if self.word_index is not None:
            return "word"
        if self.sentence_index is not None:
            return "sentence"
        return "page"

    @property
    def sentence_id(self) -> Optional[str]:
        if self.sentence_index is None:
            return None
        return sentence_id(self.page_number, self.sentence_index)


def parse_reference(reference: str) -> Reference:
    """Decode ``reference`` into its page, sentence and word positions.

    Raises ``ValueError`` when ``reference`` is not a page tree id.
    """

    match = _REFERENCE_RE.match(reference or "")
    if match is None:
        raise ValueError(f"Not a page tree reference: {reference!r}")
    sentence = match.group("sentence")
    word = match.group("word")
    return Reference(
        page_number=int(match.group("page")),
        sentence_index=int(sentence) if sentence is not None else None,
        word_index=int(word) if word is not None else None,
    )


def contains(ancestor_id: str, descendant_id: str) -> bool:
    """Return ``True`` when ``descendant_id`` is ``ancestor_id`` or lies below it."""

    return descendant_id == ancestor_id or descendant_id.startswith(ancestor_id + "_")


__all__ = [
    "Reference",
    "contains",
    "generate_id",
    "parse_reference",
    "sentence_id",
    "word_id",
]
