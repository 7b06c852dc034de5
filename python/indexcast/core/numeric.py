"""Numeric text parsing shared by the Integer and Float handlers.

Malformed numeric text never raises. The rule is the same for both types:

    - surrounding whitespace is ignored
    - a string Python itself accepts ("42", "-1_000", "1e3", "inf") is used as is
    - otherwise the longest leading numeric prefix is used ("12abc" → 12)
    - text with no numeric prefix at all yields zero ("abc" → 0, 0.0)

Integer parsing stops at the first non-digit, so "3.9" → 3 and "1e3" → 1.
"""

from __future__ import annotations

import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

_INTEGER_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_integer(text: str) -> int:
    """Parse text as an integer, falling back to its numeric prefix or 0."""
    stripped = text.strip()
    try:
        return int(stripped)
    except ValueError:
        pass
    match = _INTEGER_PREFIX.match(stripped)
    if match is None:
        logger.debug("No integer prefix in %r, using 0", text)
        return 0
    return int(match.group())


def parse_float(text: str) -> float:
    """Parse text as a float, falling back to its numeric prefix or 0.0."""
    stripped = text.strip()
    try:
        return float(stripped)
    except ValueError:
        pass
    match = _FLOAT_PREFIX.match(stripped)
    if match is None:
        logger.debug("No float prefix in %r, using 0.0", text)
        return 0.0
    return float(match.group())


def coerce_integer(value: Any) -> int | None:
    """Convert any value to an int, truncating toward zero.

    Returns None for values with no integer form (inf, nan).
    """
    if isinstance(value, str):
        return parse_integer(value)
    try:
        return int(value)
    except (OverflowError, ValueError):
        logger.debug("Non-finite value %r has no integer form", value)
        return None
    except TypeError:
        return parse_integer(str(value))


def coerce_float(value: Any) -> float | None:
    """Convert any value to a float.

    Returns None for integers too large to represent as a float.
    """
    if isinstance(value, str):
        return parse_float(value)
    try:
        return float(value)
    except OverflowError:
        logger.debug("Value %r is out of float range", value)
        return None
    except (TypeError, ValueError):
        return parse_float(str(value))


__all__ = ["parse_integer", "parse_float", "coerce_integer", "coerce_float"]
