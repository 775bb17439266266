from .analyzer import TIER_RULES, ThreatAnalyzer
from .keywords import DEFAULT_KEYWORDS_FILE, SEVERITY_ORDER, ThreatKeywordSet

__all__ = [
    "DEFAULT_KEYWORDS_FILE",
    "SEVERITY_ORDER",
    "TIER_RULES",
    "ThreatAnalyzer",
    "ThreatKeywordSet",
]
