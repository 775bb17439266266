"""Command line entry point: ``legalscan process|terms|keywords``."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import jsonschema

from .errors import LegalScanError
from .glossary.matcher import ComplexTermsIdentifier
from .glossary.service import LegalTermDictionary
from .pipeline.processor import DocumentProcessor, SourceType
from .text.pages import DEFAULT_SENTENCES_PER_PAGE
from .threats.analyzer import ThreatAnalyzer
from .threats.keywords import ThreatKeywordSet


def _print_json(data: object) -> None:
    """Serialise ``data`` to JSON and print it to stdout."""

    print(json.dumps(data, ensure_ascii=False, indent=2))


def _infer_type(target: str) -> SourceType:
    return SourceType.PDF if Path(target).is_file() else SourceType.URL


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="legalscan")
    parser.add_argument(
        "--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)"
    )
    sub = parser.add_subparsers(dest="command")

    process_parser = sub.add_parser(
        "process", help="Segment and annotate a PDF file or URL"
    )
    process_parser.add_argument("target", help="Path to a PDF file or a URL")
    process_parser.add_argument(
        "--type",
        choices=[kind.value for kind in SourceType],
        help="Source type (inferred from the target when omitted)",
    )
    process_parser.add_argument("--id", dest="document_id", help="Document id")
    process_parser.add_argument("--output", type=Path, help="Write JSON to this file")
    process_parser.add_argument(
        "--sentences-per-page",
        type=int,
        default=DEFAULT_SENTENCES_PER_PAGE,
        help="Sentences per synthetic page for URL sources",
    )
    process_parser.add_argument("--terms", type=Path, help="Legal term dictionary file")
    process_parser.add_argument("--keywords", type=Path, help="Threat keyword file")

    terms_parser = sub.add_parser("terms", help="Print the legal term dictionary")
    terms_parser.add_argument("--file", type=Path, help="Dictionary file to load")

    keywords_parser = sub.add_parser("keywords", help="Print the threat keyword tiers")
    keywords_parser.add_argument("--file", type=Path, help="Keyword file to load")
    return parser


def _load_terms(path: Optional[Path]) -> LegalTermDictionary:
    return LegalTermDictionary.from_file(path) if path else LegalTermDictionary.default()


def _load_keywords(path: Optional[Path]) -> ThreatKeywordSet:
    return ThreatKeywordSet.from_file(path) if path else ThreatKeywordSet.default()


def _process(args: argparse.Namespace) -> None:
    source_type = SourceType(args.type) if args.type else _infer_type(args.target)
    if source_type is SourceType.PDF:
        value = Path(args.target).read_bytes()
    else:
        value = args.target
    with DocumentProcessor(
        threat_analyzer=ThreatAnalyzer(_load_keywords(args.keywords)),
        terms_identifier=ComplexTermsIdentifier(_load_terms(args.terms)),
        sentences_per_page=args.sentences_per_page,
    ) as processor:
        document = processor.process(value, source_type, args.document_id)
    if args.output:
        args.output.write_text(document.to_json(indent=2), encoding="utf-8")
        _print_json(
            {
                "document_id": document.document_id,
                "output": str(args.output),
                "pages": len(document.pages),
                "threats": len(document.threats),
                "complex_terms": len(document.complex_terms),
            }
        )
    else:
        _print_json(document.to_dict())


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "process":
            _process(args)
        elif args.command == "terms":
            _print_json(_load_terms(args.file).all())
        elif args.command == "keywords":
            _print_json(_load_keywords(args.file).as_dict())
        else:
            parser.print_help()
            return 1
    except (LegalScanError, jsonschema.ValidationError, OSError, ValueError, TypeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
