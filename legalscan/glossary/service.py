"""Legal term dictionary: normalised term -> plain-language definition."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional, Tuple, Union

from legalscan.schema_utils import DATA_DIR, load_mapping, validate

logger = logging.getLogger(__name__)

DEFAULT_TERMS_FILE = DATA_DIR / "legal_terms.yaml"
_TERMS_SCHEMA = "legal_terms.schema.yaml"

# Lowercase first, then drop everything outside ASCII [A-Za-z0-9_].
_NON_WORD_RE = re.compile(r"[^\w]", re.ASCII)


def normalise_word(text: str) -> str:
    """Normalise a word as it appears in text for dictionary lookup."""

    return _NON_WORD_RE.sub("", text.lower())


def _normalise_key(term: str) -> str:
    return " ".join(term.lower().split())


def _checked_entry(term: str, definition: str) -> Tuple[str, str]:
    key = _normalise_key(term)
    if not key:
        raise ValueError("Legal terms must be non-empty")
    if not definition or not definition.strip():
        raise ValueError(f"Definition for {term!r} must be non-empty")
    return key, definition


class LegalTermDictionary:
    """Mutable term registry owned by a single matcher instance.

    ``add`` overwrites an existing definition.  ``update`` and ``remove`` leave
    the dictionary untouched when the term is unknown and report whether
    anything changed.  Empty terms and definitions are rejected, as in term
    files.
    """

    def __init__(self, terms: Optional[Mapping[str, str]] = None) -> None:
        self._terms: Dict[str, str] = {}
        for term, definition in (terms or {}).items():
            self.add(term, definition)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "LegalTermDictionary":
        """Load and validate a YAML or JSON term file."""

        path = Path(path)
        raw = load_mapping(path)
        validate(raw, _TERMS_SCHEMA)
        logger.debug("Loaded %d legal terms from %s", len(raw), path)
        return cls({str(term): str(definition).strip() for term, definition in raw.items()})

    @classmethod
    def default(cls) -> "LegalTermDictionary":
        """Return a fresh dictionary seeded with the shipped starter terms."""

        return cls.from_file(DEFAULT_TERMS_FILE)

    # ------------------------------------------------------------------
    def add(self, term: str, definition: str) -> None:
        key, definition = _checked_entry(term, definition)
        self._terms[key] = definition

    def update(self, term: str, definition: str) -> bool:
        key, definition = _checked_entry(term, definition)
        if key not in self._terms:
            return False
        self._terms[key] = definition
        return True

    def remove(self, term: str) -> bool:
        return self._terms.pop(_normalise_key(term), None) is not None

    def get(self, term: str) -> Optional[str]:
        return self._terms.get(_normalise_key(term))

    def all(self) -> Dict[str, str]:
        """Return a copy of every term and its definition."""

        return dict(self._terms)

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and _normalise_key(term) in self._terms

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._terms))

    def __len__(self) -> int:
        return len(self._terms)


__all__ = ["DEFAULT_TERMS_FILE", "LegalTermDictionary", "normalise_word"]
