from .matcher import ComplexTermsIdentifier
from .service import DEFAULT_TERMS_FILE, LegalTermDictionary, normalise_word

__all__ = [
    "ComplexTermsIdentifier",
    "DEFAULT_TERMS_FILE",
    "LegalTermDictionary",
    "normalise_word",
]
