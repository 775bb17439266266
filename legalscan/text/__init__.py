"""Text segmentation helpers."""

from .pages import pages_from_flat_text, pages_from_texts
from .sentences import normalise_whitespace, split_into_sentences, split_into_words

__all__ = [
    "normalise_whitespace",
    "pages_from_flat_text",
    "pages_from_texts",
    "split_into_sentences",
    "split_into_words",
]
