"""Registry of native Python types and the handlers that own them.

A TypeRegistry answers one question on the write path: which handler encodes
this value? Each handler registers the native types it owns, and resolve()
scans the registrations in order, returning the first type the value is an
instance of. Values of unregistered types fall back to the default handler
(STRING).

Registry Construction:
    build_default_registry() builds a registry from DEFAULT_REGISTRATIONS, an
    explicit ordered list. Build one at startup and pass it to whatever needs
    resolution; register() is not meant to be called once resolution starts.

    registry = build_default_registry()
    registry.resolve(42)        # INTEGER
    registry.resolve(True)      # BOOLEAN
    registry.resolve(b"bytes")  # STRING (fallback)

Ordering:
    bool subclasses int, so BOOLEAN is registered before INTEGER. A type that
    subclasses two registered types resolves to the one registered first.

Collisions:
    Registering a type that another handler already owns raises
    RegistrationError unless overwrite=True. Registering the same handler
    again is a no-op.

Indexed Names:
    parse_indexed_name("price_f") -> ("price", FLOAT) reverses indexed_name()
    for any built-in handler, matching the longest suffix.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from datetime import date, datetime
from itertools import chain
from typing import Any

from indexcast.core.handlers import BOOLEAN, FLOAT, HANDLERS, INTEGER, STRING, TIME, TypeHandler
from indexcast.exceptions import RegistrationError

logger = logging.getLogger(__name__)

Registration = tuple[TypeHandler, Sequence[type]]

DEFAULT_REGISTRATIONS: tuple[Registration, ...] = (
    (BOOLEAN, (bool,)),
    (INTEGER, (int,)),
    (FLOAT, (float,)),
    (TIME, (datetime, date)),
)


def _type_name(kind: type) -> str:
    return f"{kind.__module__}.{kind.__qualname__}"


class TypeRegistry:
    """Ordered mapping of native types to handlers."""

    def __init__(self, default: TypeHandler = STRING):
        self._default = default
        self._entries: dict[type, TypeHandler] = {}

    @property
    def default(self) -> TypeHandler:
        return self._default

    def register(self, handler: TypeHandler, *kinds: type, overwrite: bool = False) -> None:
        """Make handler the owner of each native type in kinds.

        Raises RegistrationError, without registering anything, if a type is
        owned by a different handler and overwrite is False. An overwritten
        type keeps its original position in the resolution order.
        """
        for kind in kinds:
            if not isinstance(kind, type):
                raise TypeError(f"Native kind must be a type, got {kind!r}")
            existing = self._entries.get(kind)
            if existing is not None and existing is not handler and not overwrite:
                raise RegistrationError(
                    f"Type '{_type_name(kind)}' is already registered to {existing!r}"
                )
        for kind in kinds:
            self._entries[kind] = handler
            logger.debug("Registered %s -> %r", _type_name(kind), handler)

    def unregister(self, kind: type) -> TypeHandler | None:
        """Remove a native type, returning the handler that owned it."""
        return self._entries.pop(kind, None)

    def resolve(self, value: Any) -> TypeHandler:
        """Return the handler for a value, or the default if its type is unregistered."""
        for kind, handler in self._entries.items():
            if isinstance(value, kind):
                return handler
        return self._default

    def handler_for_type(self, python_type: Any) -> TypeHandler:
        """Return the handler for a declared type, as resolve() would for its instances."""
        if isinstance(python_type, type):
            for kind, handler in self._entries.items():
                if issubclass(python_type, kind):
                    return handler
        return self._default

    def kinds(self) -> tuple[type, ...]:
        """Return registered types in resolution order."""
        return tuple(self._entries)

    def kinds_for(self, handler: TypeHandler) -> tuple[type, ...]:
        """Return the types a handler owns."""
        return tuple(kind for kind, owner in self._entries.items() if owner is handler)

    def copy(self) -> TypeRegistry:
        clone = TypeRegistry(self._default)
        clone._entries = dict(self._entries)
        return clone

    def __contains__(self, kind: object) -> bool:
        return kind in self._entries

    def __iter__(self) -> Iterator[type]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        kinds = ", ".join(kind.__qualname__ for kind in self._entries)
        return f"TypeRegistry([{kinds}], default={self._default!r})"


def build_default_registry(
    extra: Iterable[Registration] = (),
    *,
    overwrite: bool = False,
) -> TypeRegistry:
    """Build a registry from DEFAULT_REGISTRATIONS followed by extra registrations."""
    registry = TypeRegistry()
    for handler, kinds in chain(DEFAULT_REGISTRATIONS, extra):
        registry.register(handler, *kinds, overwrite=overwrite)
    return registry


_BY_SUFFIX_LENGTH = sorted(HANDLERS.values(), key=lambda h: len(h.suffix), reverse=True)


def parse_indexed_name(indexed_name: str) -> tuple[str, TypeHandler] | None:
    """Split an indexed field name into its base name and handler.

    Returns None when no handler suffix matches or the base name would be empty.
    """
    for handler in _BY_SUFFIX_LENGTH:
        suffix = handler.suffix
        if indexed_name.endswith(suffix) and len(indexed_name) > len(suffix):
            return indexed_name[: -len(suffix)], handler
    return None


__all__ = [
    "Registration",
    "DEFAULT_REGISTRATIONS",
    "TypeRegistry",
    "build_default_registry",
    "parse_indexed_name",
]
