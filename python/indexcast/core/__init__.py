"""Handlers, numeric parsing and time conversion."""

from .handlers import (
    BOOLEAN,
    FLOAT,
    HANDLERS,
    INTEGER,
    STRING,
    TEXT,
    TIME,
    BooleanType,
    FloatType,
    HandlerKind,
    IntegerType,
    StringType,
    TextType,
    TimeType,
    TypeHandler,
    handler_for_kind,
)

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
