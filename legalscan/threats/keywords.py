"""Severity-tiered threat keyword lists."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Union

from legalscan.models.document import Severity
from legalscan.schema_utils import DATA_DIR, load_mapping, validate

logger = logging.getLogger(__name__)

DEFAULT_KEYWORDS_FILE = DATA_DIR / "threat_keywords.yaml"
_KEYWORDS_SCHEMA = "threat_keywords.schema.yaml"

SEVERITY_ORDER = (Severity.HIGH, Severity.MEDIUM, Severity.LOW)


class ThreatKeywordSet:
    """Ordered, duplicate-free keyword list per severity tier.

    Keywords are stored lowercased because matching is case-insensitive.
    Appending never reorders existing keywords.
    """

    def __init__(self, keywords: Optional[Mapping[Union[Severity, str], Iterable[str]]] = None) -> None:
        self._keywords: Dict[Severity, List[str]] = {severity: [] for severity in SEVERITY_ORDER}
        for severity, values in (keywords or {}).items():
            self.add(severity, values)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ThreatKeywordSet":
        """Load and validate a YAML or JSON keyword file."""

        path = Path(path)
        raw = load_mapping(path)
        validate(raw, _KEYWORDS_SCHEMA)
        logger.debug("Loaded threat keywords for %s from %s", sorted(raw), path)
        return cls(raw)

    @classmethod
    def default(cls) -> "ThreatKeywordSet":
        return cls.from_file(DEFAULT_KEYWORDS_FILE)

    def add(self, severity: Union[Severity, str], keywords: Iterable[str]) -> None:
        """Append ``keywords`` to the ``severity`` tier, skipping duplicates.

        The batch is checked as a whole: if any keyword is empty nothing is
        appended.
        """

        if isinstance(keywords, str):
            keywords = [keywords]
        tier = self._keywords[Severity(severity)]
        values = [keyword.strip().lower() for keyword in keywords]
        if not all(values):
            raise ValueError("Threat keywords must be non-empty")
        for value in values:
            if value not in tier:
                tier.append(value)

    def tier(self, severity: Union[Severity, str]) -> List[str]:
        return list(self._keywords[Severity(severity)])

    def as_dict(self) -> Dict[str, List[str]]:
        return {severity.value: list(values) for severity, values in self._keywords.items()}


__all__ = ["DEFAULT_KEYWORDS_FILE", "SEVERITY_ORDER", "ThreatKeywordSet"]
