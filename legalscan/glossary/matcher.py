"""Complex-term annotation of a page tree."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from legalscan.glossary.service import LegalTermDictionary, normalise_word
from legalscan.ids import generate_id
from legalscan.models.document import ComplexTerm, Page


class ComplexTermsIdentifier:
    """Flag every word whose normalised form is a dictionary term."""

    def __init__(self, dictionary: Optional[LegalTermDictionary] = None) -> None:
        self.dictionary = dictionary if dictionary is not None else LegalTermDictionary.default()

    def identify_complex_terms(self, pages: Sequence[Page]) -> List[ComplexTerm]:
        """Return one annotation per matching word occurrence.

        Occurrences are not deduplicated; numbering restarts at ``term_1`` on
        every call.
        """

        terms: List[ComplexTerm] = []
        for page in pages:
            for sentence in page.content:
                for word in sentence.words:
                    clean = normalise_word(word.text)
                    if not clean:
                        continue
                    definition = self.dictionary.get(clean)
                    if definition is None:
                        continue
                    terms.append(
                        ComplexTerm(
                            term_id=generate_id("term", len(terms) + 1),
                            term=clean,
                            definition=definition,
                            reference=word.id,
                        )
                    )
        return terms

    def add_legal_term(self, term: str, definition: str) -> None:
        self.dictionary.add(term, definition)

    def update_legal_term(self, term: str, definition: str) -> bool:
        return self.dictionary.update(term, definition)

    def remove_legal_term(self, term: str) -> bool:
        return self.dictionary.remove(term)

    def get_all_legal_terms(self) -> Dict[str, str]:
        return self.dictionary.all()


__all__ = ["ComplexTermsIdentifier"]
