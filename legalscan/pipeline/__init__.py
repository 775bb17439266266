from .processor import (
    DocumentProcessor,
    PdfSource,
    Source,
    SourceType,
    UrlSource,
    make_source,
)

__all__ = [
    "DocumentProcessor",
    "PdfSource",
    "Source",
    "SourceType",
    "UrlSource",
    "make_source",
]
