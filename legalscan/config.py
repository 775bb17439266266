"""Environment overrides for runtime defaults.

Values are read once, when the consuming module is imported.  A value that
does not parse as a positive number is ignored with a warning and the
built-in default is used instead.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, TypeVar, Union

logger = logging.getLogger(__name__)

Number = TypeVar("Number", int, float)


def _env_positive(name: str, default: Number, cast: Callable[[str], Number]) -> Number:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError:
        value = None
    if value is None or not value > 0:
        logger.warning("Ignoring invalid %s=%r; using %s", name, raw, default)
        return default
    return value


def env_positive_int(name: str, default: int) -> int:
    return _env_positive(name, default, int)


def env_positive_float(name: str, default: Union[int, float]) -> float:
    return _env_positive(name, float(default), float)


__all__ = ["env_positive_float", "env_positive_int"]
