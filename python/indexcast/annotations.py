"""Handler lookup from declared field types.

On the read path the value is a wire string, so the handler has to come from
the field's declared type rather than from a value. Supported hints:

    int, float, bool, datetime, date   → registered handler
    T | None, Optional[T]              → handler for T
    list[T], tuple[T, ...], set[T]     → handler for T (multi-valued field)
    Annotated[T, TEXT]                 → TEXT (explicit selection)
    Annotated[T, HandlerKind.TEXT]     → TEXT
    anything else                      → registry default (STRING)

TEXT is never registered for a native type, so Annotated is the only way to
reach it from a hint.
"""

from __future__ import annotations

from collections.abc import Sequence
from types import NoneType, UnionType
from typing import Annotated, Any, Union, get_args, get_origin

from indexcast.core.handlers import HandlerKind, TypeHandler, handler_for_kind
from indexcast.registry import TypeRegistry

_COLLECTION_ORIGINS = (list, tuple, set, frozenset, Sequence)


def _unpack_annotated(hint: Any) -> tuple[Any, tuple[Any, ...]]:
    """Extract base type and metadata from Annotated type hint."""
    if get_origin(hint) is Annotated:
        args = get_args(hint)
        if args:
            return args[0], tuple(args[1:])
    return hint, ()


def _explicit_handler(metadata: tuple[Any, ...]) -> TypeHandler | None:
    for meta in metadata:
        if isinstance(meta, TypeHandler):
            return meta
        if isinstance(meta, HandlerKind):
            return handler_for_kind(meta)
    return None


def handler_for_annotation(hint: Any, registry: TypeRegistry) -> TypeHandler:
    """Return the handler that decodes values of a field declared as hint."""
    hint, metadata = _unpack_annotated(hint)
    explicit = _explicit_handler(metadata)
    if explicit is not None:
        return explicit

    origin = get_origin(hint)

    # Union types (including Optional[T]) -> first non-None member
    if origin in (Union, UnionType):
        for arg in get_args(hint):
            if arg is not NoneType:
                return handler_for_annotation(arg, registry)
        return registry.default

    # list[T], tuple[T, ...] -> element handler
    if origin in _COLLECTION_ORIGINS:
        args = get_args(hint)
        if args:
            return handler_for_annotation(args[0], registry)
        return registry.default

    return registry.handler_for_type(hint)


def is_multi_valued(hint: Any) -> bool:
    """Check whether a hint declares a multi-valued field (list, tuple, set)."""
    hint, _ = _unpack_annotated(hint)
    origin = get_origin(hint)
    if origin in (Union, UnionType):
        return any(is_multi_valued(arg) for arg in get_args(hint) if arg is not NoneType)
    return origin in _COLLECTION_ORIGINS or hint in (list, tuple, set, frozenset)


__all__ = ["handler_for_annotation", "is_multi_valued"]
