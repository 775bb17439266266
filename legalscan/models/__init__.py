"""Page tree and annotation models."""

from .document import (
    AugmentedDocument,
    ComplexTerm,
    Page,
    PageContext,
    Sentence,
    Severity,
    Threat,
    ThreatCategory,
    Word,
)

__all__ = [
    "AugmentedDocument",
    "ComplexTerm",
    "Page",
    "PageContext",
    "Sentence",
    "Severity",
    "Threat",
    "ThreatCategory",
    "Word",
]
