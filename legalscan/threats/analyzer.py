"""Keyword-driven threat classification of sentences.

Each sentence is checked against the high, medium and low tiers in that
order.  A tier contributes at most one threat per sentence: the first keyword
of the tier (in list order) found in the lowercased sentence text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from legalscan.ids import generate_id
from legalscan.models.document import Page, Sentence, Severity, Threat, ThreatCategory
from legalscan.threats.keywords import SEVERITY_ORDER, ThreatKeywordSet


@dataclass(frozen=True)
class TierRule:
    category: ThreatCategory
    description: str
    recommendation: Optional[str] = None


TIER_RULES: Dict[Severity, TierRule] = {
    Severity.HIGH: TierRule(
        category=ThreatCategory.LEGAL_RISK,
        description='Contains potentially risky clause with "{keyword}"',
        recommendation=(
            "Review this clause carefully as it may pose significant legal or financial risk."
        ),
    ),
    Severity.MEDIUM: TierRule(
        category=ThreatCategory.COMPLIANCE,
        description='Contains compliance requirement with "{keyword}"',
        recommendation="Ensure all compliance requirements can be met.",
    ),
    Severity.LOW: TierRule(
        category=ThreatCategory.ADVISORY,
        description='Contains advisory language with "{keyword}"',
    ),
}


def first_keyword(text: str, keywords: Iterable[str]) -> Optional[str]:
    """Return the first of ``keywords`` contained in ``text``, if any."""

    lowered = text.lower()
    for keyword in keywords:
        if keyword in lowered:
            return keyword
    return None


class ThreatAnalyzer:
    def __init__(self, keywords: Optional[ThreatKeywordSet] = None) -> None:
        self.keywords = keywords if keywords is not None else ThreatKeywordSet.default()

    def analyze_threats(self, pages: Sequence[Page]) -> List[Threat]:
        """Return threats in page, sentence, then severity order."""

        threats: List[Threat] = []
        for page in pages:
            for sentence in page.content:
                for severity, keyword in self._matches(sentence):
                    rule = TIER_RULES[severity]
                    threats.append(
                        Threat(
                            threat_id=generate_id("threat", len(threats) + 1),
                            category=rule.category,
                            severity=severity,
                            description=rule.description.format(keyword=keyword),
                            reference=sentence.id,
                            recommendation=rule.recommendation,
                        )
                    )
        return threats

    def _matches(self, sentence: Sentence) -> List[Tuple[Severity, str]]:
        hits: List[Tuple[Severity, str]] = []
        for severity in SEVERITY_ORDER:
            keyword = first_keyword(sentence.text, self.keywords.tier(severity))
            if keyword is not None:
                hits.append((severity, keyword))
        return hits

    def add_threat_keywords(self, severity: Union[Severity, str], keywords: Iterable[str]) -> None:
        self.keywords.add(severity, keywords)

    def get_threat_keywords(self) -> Dict[str, List[str]]:
        return self.keywords.as_dict()


__all__ = ["TIER_RULES", "ThreatAnalyzer", "TierRule", "first_keyword"]
