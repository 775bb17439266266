"""Data model for processed documents.

The page tree (``Page`` -> ``Sentence`` -> ``Word``) is built once per
processing run and never mutated; annotations (``Threat`` and
``ComplexTerm``) point back into it through id references.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from legalscan.ids import contains, parse_reference


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ThreatCategory(str, Enum):
    LEGAL_RISK = "legal_risk"
    COMPLIANCE = "compliance"
    ADVISORY = "advisory"


@dataclass(frozen=True)
class Word:
    """A whitespace-delimited token of a sentence."""

    id: str
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "text": self.text}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Word":
        return cls(id=str(data["id"]), text=str(data.get("text", "")))


@dataclass(frozen=True)
class Sentence:
    """A sentence of a page with its words in reading order."""

    id: str
    text: str
    words: Tuple[Word, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "words": [word.to_dict() for word in self.words],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Sentence":
        return cls(
            id=str(data["id"]),
            text=str(data.get("text", "")),
            words=tuple(Word.from_dict(item) for item in data.get("words", [])),
        )


@dataclass(frozen=True)
class Page:
    """A physical PDF page or a synthetic chunk of sentences."""

    page_number: int
    content: Tuple[Sentence, ...] = ()

    @property
    def text(self) -> str:
        """Return the page's sentences joined by single spaces."""

        return " ".join(sentence.text for sentence in self.content)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "page_number": self.page_number,
            "content": [sentence.to_dict() for sentence in self.content],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Page":
        return cls(
            page_number=int(data["page_number"]),
            content=tuple(Sentence.from_dict(item) for item in data.get("content", [])),
        )


@dataclass(frozen=True)
class ComplexTerm:
    """A dictionary hit on a single word."""

    term_id: str
    term: str
    definition: str
    reference: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "term_id": self.term_id,
            "term": self.term,
            "definition": self.definition,
            "reference": self.reference,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComplexTerm":
        return cls(
            term_id=str(data["term_id"]),
            term=str(data["term"]),
            definition=str(data.get("definition", "")),
            reference=str(data["reference"]),
        )


@dataclass(frozen=True)
class Threat:
    """A keyword-derived risk flag on a sentence."""

    threat_id: str
    category: ThreatCategory
    severity: Severity
    description: str
    reference: str
    recommendation: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "threat_id": self.threat_id,
            "category": self.category.value,
            "severity": self.severity.value,
            "description": self.description,
            "reference": self.reference,
        }
        if self.recommendation is not None:
            data["recommendation"] = self.recommendation
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Threat":
        return cls(
            threat_id=str(data["threat_id"]),
            category=ThreatCategory(data["category"]),
            severity=Severity(data["severity"]),
            description=str(data.get("description", "")),
            reference=str(data["reference"]),
            recommendation=data.get("recommendation"),
        )


@dataclass(frozen=True)
class PageContext:
    """Text of a page and its immediate neighbours."""

    previous: str
    current: str
    following: str


Node = Union[Page, Sentence, Word]


@dataclass(frozen=True)
class AugmentedDocument:
    """Segmented document text plus its threat and complex-term annotations."""

    document_id: str
    pages: Tuple[Page, ...] = ()
    threats: Tuple[Threat, ...] = ()
    complex_terms: Tuple[ComplexTerm, ...] = ()

    # ------------------------------------------------------------------
    def iter_sentences(self) -> Iterator[Sentence]:
        for page in self.pages:
            yield from page.content

    def iter_words(self) -> Iterator[Word]:
        for sentence in self.iter_sentences():
            yield from sentence.words

    def page(self, page_number: int) -> Optional[Page]:
        """Return the page numbered ``page_number`` if present."""

        index = page_number - 1
        if 0 <= index < len(self.pages) and self.pages[index].page_number == page_number:
            return self.pages[index]
        for page in self.pages:
            if page.page_number == page_number:
                return page
        return None

    def resolve(self, reference: str) -> Optional[Node]:
        """Return the page, sentence or word addressed by ``reference``.

        The page is located from the id alone; only that page is searched.
        Malformed or dangling references resolve to ``None``.
        """

        try:
            position = parse_reference(reference)
        except ValueError:
            return None
        page = self.page(position.page_number)
        if page is None or position.sentence_index is None:
            return page
        sentence_index = position.sentence_index - 1
        if not 0 <= sentence_index < len(page.content):
            return None
        sentence = page.content[sentence_index]
        if position.word_index is None:
            return sentence
        word_index = position.word_index - 1
        if not 0 <= word_index < len(sentence.words):
            return None
        return sentence.words[word_index]

    def page_context(self, page_number: int) -> PageContext:
        """Return the text of ``page_number`` and the pages around it."""

        def _text(number: int) -> str:
            page = self.page(number)
            return page.text if page is not None else ""

        return PageContext(
            previous=_text(page_number - 1),
            current=_text(page_number),
            following=_text(page_number + 1),
        )

    def threats_for(self, reference: str) -> List[Threat]:
        """Threats attached to ``reference`` or to any node below it."""

        return [threat for threat in self.threats if contains(reference, threat.reference)]

    def terms_for(self, reference: str) -> List[ComplexTerm]:
        """Complex terms attached to ``reference`` or to any node below it."""

        return [term for term in self.complex_terms if contains(reference, term.reference)]

    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "document_id": self.document_id,
            "pages": [page.to_dict() for page in self.pages],
            "threats": [threat.to_dict() for threat in self.threats],
            "complex_terms": [term.to_dict() for term in self.complex_terms],
        }

    def to_json(self, *, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AugmentedDocument":
        return cls(
            document_id=str(data["document_id"]),
            pages=tuple(Page.from_dict(item) for item in data.get("pages", [])),
            threats=tuple(Threat.from_dict(item) for item in data.get("threats", [])),
            complex_terms=tuple(
                ComplexTerm.from_dict(item) for item in data.get("complex_terms", [])
            ),
        )


__all__ = [
    "AugmentedDocument",
    "ComplexTerm",
    "Node",
    "Page",
    "PageContext",
    "Sentence",
    "Severity",
    "Threat",
    "ThreatCategory",
    "Word",
]
