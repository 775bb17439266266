from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping

import jsonschema
import yaml

PACKAGE_DIR = Path(__file__).resolve().parent
SCHEMA_DIR = PACKAGE_DIR / "schemas"
DATA_DIR = PACKAGE_DIR / "data"


@lru_cache(maxsize=None)
def load_schema(name: str) -> Dict[str, Any]:
    """Load a YAML schema shipped with the package by filename."""

    path = SCHEMA_DIR / name
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def validate(data: Any, schema_name: str) -> None:
    """Validate ``data`` against the named schema.

    Raises :class:`jsonschema.ValidationError` on the first violation.
    """

    jsonschema.validate(data, load_schema(schema_name))


def load_mapping(path: Path) -> Dict[str, Any]:
    """Read a YAML or JSON mapping from ``path``.

    A missing or empty file reads as an empty mapping.
    """

    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        if path.suffix.lower() == ".json":
            data = json.load(handle)
        elif path.suffix.lower() in {".yaml", ".yml"}:
            data = yaml.safe_load(handle)
        else:
            raise ValueError(f"Unsupported data file format: {path.suffix}")
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"{path.name} must contain a mapping")
    return dict(data)


__all__ = ["DATA_DIR", "SCHEMA_DIR", "load_mapping", "load_schema", "validate"]
