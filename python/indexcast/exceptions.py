"""Exception hierarchy for indexcast.

All indexcast exceptions inherit from IndexcastError, allowing catch-all handling:

    try:
        registry.register(STRING, str)
    except IndexcastError as e:
        print(f"indexcast error: {e}")

Exception hierarchy:
    IndexcastError (base)
    ├── RegistrationError - Native kind already owned by another handler
    └── CastError         - Wire string cannot be decoded (also a ValueError)

Encoding never raises: values that cannot be encoded become None.
"""

from __future__ import annotations


class IndexcastError(Exception):
    """Base exception for all indexcast-related errors."""


class RegistrationError(IndexcastError):
    """Raised when a native kind is registered to two different handlers."""


class CastError(IndexcastError, ValueError):
    """Raised when an indexed string cannot be decoded to its native type."""


__all__ = [
    "IndexcastError",
    "RegistrationError",
    "CastError",
]
