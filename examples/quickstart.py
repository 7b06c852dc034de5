"""indexcast Quickstart Example.

Demonstrates the write and read paths of a dynamic-field index document:
- Building a registry at startup
- Resolving handlers from values and encoding a document
- Explicit fulltext fields with Annotated
- Decoding stored strings from declared field types

Usage:
    python examples/quickstart.py
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Annotated

from indexcast import (
    TEXT,
    build_default_registry,
    handler_for_annotation,
    parse_indexed_name,
)


# =============================================================================
# Field Declarations
# =============================================================================

FIELDS = {
    "title": Annotated[str, TEXT],
    "slug": str,
    "views": int,
    "rating": float | None,
    "published": bool,
    "published_on": date,
    "updated_at": datetime,
    "tags": list[str],
}


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    print("=" * 60)
    print("indexcast Quickstart")
    print("=" * 60)

    registry = build_default_registry()
    print(f"\n1. Registry: {registry!r}")

    post = {
        "title": "Type coercion for search indexes",
        "slug": "type-coercion",
        "views": 1250,
        "rating": None,
        "published": False,
        "published_on": date(2024, 3, 5),
        "updated_at": datetime(2024, 3, 5, 18, 45, tzinfo=timezone.utc),
        "tags": ["search", "python"],
    }

    # -------------------------------------------------------------------------
    # WRITE PATH
    # -------------------------------------------------------------------------
    print("\n2. Encoding document...")
    document: dict[str, str | list[str]] = {}
    for name, value in post.items():
        handler = handler_for_annotation(FIELDS[name], registry)
        if isinstance(value, list):
            document[handler.indexed_name(name)] = handler.to_indexed_many(value)
            continue
        encoded = handler.to_indexed(value)
        if encoded is not None:
            document[handler.indexed_name(name)] = encoded
    for key, encoded in document.items():
        print(f"   {key:<20} {encoded!r}")

    print("\n3. Value-based resolution...")
    for value in (42, 4.5, True, date.today(), b"raw"):
        print(f"   {value!r:<28} -> {registry.resolve(value)!r}")

    # -------------------------------------------------------------------------
    # READ PATH
    # -------------------------------------------------------------------------
    print("\n4. Decoding stored fields...")
    for key, encoded in document.items():
        parsed = parse_indexed_name(key)
        if parsed is None:
            continue
        name, handler = parsed
        if isinstance(encoded, list):
            decoded = [handler.cast(item) for item in encoded]
        else:
            decoded = handler.cast(encoded)
        print(f"   {name:<14} {decoded!r}")

    print("\n" + "=" * 60)
    print("Done!")
    print("=" * 60)


if __name__ == "__main__":
    main()
