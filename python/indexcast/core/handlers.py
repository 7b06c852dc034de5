"""Type handlers for indexed values.

Every handler is a stateless singleton with the same three operations:

    indexed_name(name) -> str         "price" → "price_f"
    to_indexed(value)  -> str | None  native value → wire string
    cast(string)       -> value       wire string → native value

None is the only absent value: to_indexed(None) is None for every handler,
while False, 0 and "" are encoded like any other value.

The set of handlers is closed. HandlerKind enumerates it and HANDLERS maps
each kind to its singleton; a kind without a handler fails at import.

    Kind     Suffix  Wire form
    TEXT     _text   str(value), fulltext; never chosen from a value's type
    STRING   _s      str(value), the fallback for unknown types
    INTEGER  _i      decimal integer, truncated toward zero
    FLOAT    _f      repr(float)
    TIME     _d      XML schema UTC timestamp, 2024-01-15T10:30:00Z
    BOOLEAN  _b      "true" / "false"
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar

from indexcast.core.numeric import coerce_float, coerce_integer, parse_float, parse_integer
from indexcast.core.temporal import classify_time_input, format_xmlschema, parse_xmlschema, to_utc

logger = logging.getLogger(__name__)


class HandlerKind(str, Enum):
    TEXT = "text"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    TIME = "time"
    BOOLEAN = "boolean"


class TypeHandler:
    """Base class for the handler singletons."""

    __slots__ = ()

    kind: ClassVar[HandlerKind]
    suffix: ClassVar[str]

    def indexed_name(self, name: str) -> str:
        """Return the field name as stored in the index."""
        return f"{name}{self.suffix}"

    def to_indexed(self, value: Any) -> str | None:
        raise NotImplementedError

    def cast(self, string: str) -> Any:
        raise NotImplementedError

    def to_indexed_many(self, values: Any) -> list[str]:
        """Encode the values of a multi-valued field, skipping absent ones.

        A string or any other non-iterable value counts as a single value.
        """
        if values is None:
            return []
        if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            values = (values,)
        encoded = (self.to_indexed(value) for value in values)
        return [item for item in encoded if item is not None]

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.suffix}>"


class TextType(TypeHandler):
    """Fulltext data. Tokenized by the index and searched by keyword."""

    __slots__ = ()

    kind = HandlerKind.TEXT
    suffix = "_text"

    def to_indexed(self, value: Any) -> str | None:
        if value is None:
            return None
        return str(value)

    def cast(self, string: str) -> str:
        return string


class StringType(TypeHandler):
    """String data, stored verbatim."""

    __slots__ = ()

    kind = HandlerKind.STRING
    suffix = "_s"

    def to_indexed(self, value: Any) -> str | None:
        if value is None:
            return None
        return str(value)

    def cast(self, string: str) -> str:
        return string


class IntegerType(TypeHandler):
    __slots__ = ()

    kind = HandlerKind.INTEGER
    suffix = "_i"

    def to_indexed(self, value: Any) -> str | None:
        if value is None:
            return None
        number = coerce_integer(value)
        return None if number is None else str(number)

    def cast(self, string: str) -> int:
        return parse_integer(string)


class FloatType(TypeHandler):
    __slots__ = ()

    kind = HandlerKind.FLOAT
    suffix = "_f"

    def to_indexed(self, value: Any) -> str | None:
        if value is None:
            return None
        number = coerce_float(value)
        return None if number is None else repr(number)

    def cast(self, string: str) -> float:
        return parse_float(string)


class TimeType(TypeHandler):
    """Points in time. Always converted to UTC before indexing."""

    __slots__ = ()

    kind = HandlerKind.TIME
    suffix = "_d"

    def to_indexed(self, value: Any) -> str | None:
        if value is None:
            return None
        try:
            moment = to_utc(classify_time_input(value))
        except OverflowError:
            logger.warning("Timestamp %r is out of range in UTC", value)
            return None
        return None if moment is None else format_xmlschema(moment)

    def cast(self, string: str) -> datetime:
        return parse_xmlschema(string)


_BOOLEAN_LITERALS = {"true": True, "false": False}


class BooleanType(TypeHandler):
    """True/false values. None is not indexed at all; False is indexed as "false"."""

    __slots__ = ()

    kind = HandlerKind.BOOLEAN
    suffix = "_b"

    def to_indexed(self, value: Any) -> str | None:
        if value is None:
            return None
        return "true" if value else "false"

    def cast(self, string: str) -> bool | None:
        return _BOOLEAN_LITERALS.get(string)


TEXT = TextType()
STRING = StringType()
INTEGER = IntegerType()
FLOAT = FloatType()
TIME = TimeType()
BOOLEAN = BooleanType()

HANDLERS: dict[HandlerKind, TypeHandler] = {
    handler.kind: handler for handler in (TEXT, STRING, INTEGER, FLOAT, TIME, BOOLEAN)
}

_missing = [kind.name for kind in HandlerKind if kind not in HANDLERS]
if _missing:
    raise RuntimeError(f"No handler for kinds: {', '.join(_missing)}")


def handler_for_kind(kind: HandlerKind | str) -> TypeHandler:
    """Return the singleton handler for a kind or its name ("float")."""
    return HANDLERS[HandlerKind(kind)]


__all__ = [
    "HandlerKind",
    "TypeHandler",
    "TextType",
    "StringType",
    "IntegerType",
    "FloatType",
    "TimeType",
    "BooleanType",
    "TEXT",
    "STRING",
    "INTEGER",
    "FLOAT",
    "TIME",
    "BOOLEAN",
    "HANDLERS",
    "handler_for_kind",
]
