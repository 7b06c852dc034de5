"""Type coercion between Python values and search index fields.

This package maps native values to the field-name suffixes and string wire
forms used by a dynamic-field index schema:

Handlers:
    TEXT, STRING, INTEGER, FLOAT, TIME, BOOLEAN: stateless singletons, each with
        - indexed_name(name): "price" → "price_f"
        - to_indexed(value): native value → wire string, None stays None
        - cast(string): wire string → native value

Registry:
    TypeRegistry: ordered native type → handler mapping for the write path.
    build_default_registry(): registry with the built-in registrations.
    parse_indexed_name(): "price_f" → ("price", FLOAT).

Declared Types:
    handler_for_annotation(): handler for a field's type hint (read path).

Example:
    from indexcast import FLOAT, build_default_registry

    registry = build_default_registry()
    handler = registry.resolve(4.5)    # FLOAT
    handler.indexed_name("rating")     # "rating_f"
    handler.to_indexed(4.5)            # "4.5"
    FLOAT.cast("4.5")                  # 4.5
"""

from .annotations import handler_for_annotation, is_multi_valued
from .core.handlers import (
    BOOLEAN,
    FLOAT,
    HANDLERS,
    INTEGER,
    STRING,
    TEXT,
    TIME,
    HandlerKind,
    TypeHandler,
    handler_for_kind,
)
from .core.temporal import CalendarDate, TimeText, Timestamp
from .exceptions import CastError, IndexcastError, RegistrationError
from .registry import (
    DEFAULT_REGISTRATIONS,
    TypeRegistry,
    build_default_registry,
    parse_indexed_name,
)

__all__ = [
    "HandlerKind",
    "TypeHandler",
    "TEXT",
    "STRING",
    "INTEGER",
    "FLOAT",
    "TIME",
    "BOOLEAN",
    "HANDLERS",
    "handler_for_kind",
    "Timestamp",
    "CalendarDate",
    "TimeText",
    "TypeRegistry",
    "DEFAULT_REGISTRATIONS",
    "build_default_registry",
    "parse_indexed_name",
    "handler_for_annotation",
    "is_multi_valued",
    "IndexcastError",
    "RegistrationError",
    "CastError",
]
