"""Tests for handler lookup from declared field types."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime, timezone
from typing import Annotated, Optional

import pytest

from indexcast import (
    BOOLEAN,
    FLOAT,
    INTEGER,
    STRING,
    TEXT,
    TIME,
    HandlerKind,
    build_default_registry,
    handler_for_annotation,
    is_multi_valued,
)


@pytest.fixture
def registry():
    return build_default_registry()


class TestHandlerForAnnotation:
    """Test handler_for_annotation function."""

    @pytest.mark.parametrize(
        "hint,handler",
        [
            (int, INTEGER),
            (float, FLOAT),
            (bool, BOOLEAN),
            (datetime, TIME),
            (date, TIME),
            (str, STRING),
            (dict, STRING),
            (list, STRING),
        ],
    )
    def test_plain_types(self, registry, hint, handler):
        """Test plain classes use the registry."""
        assert handler_for_annotation(hint, registry) is handler

    @pytest.mark.parametrize(
        "hint,handler",
        [
            (int | None, INTEGER),
            (Optional[float], FLOAT),
            (list[datetime], TIME),
            (tuple[int, ...], INTEGER),
            (Sequence[bool], BOOLEAN),
            (list[int] | None, INTEGER),
        ],
    )
    def test_wrapped_types(self, registry, hint, handler):
        """Test Optional and collection hints unwrap to their element type."""
        assert handler_for_annotation(hint, registry) is handler

    @pytest.mark.parametrize(
        "hint",
        [
            Annotated[str, TEXT],
            Annotated[str, HandlerKind.TEXT],
            Optional[Annotated[str, TEXT]],
            Annotated[list[str], TEXT],
        ],
    )
    def test_explicit_text(self, registry, hint):
        """Test Annotated selects TEXT explicitly."""
        assert handler_for_annotation(hint, registry) is TEXT

    def test_registry_changes_apply(self, registry):
        """Test lookup follows the registry it is given."""
        registry.register(STRING, float, overwrite=True)
        assert handler_for_annotation(float, registry) is STRING


class TestIsMultiValued:
    """Test is_multi_valued function."""

    @pytest.mark.parametrize(
        "hint,expected",
        [
            (list[int], True),
            (list[int] | None, True),
            (set[str], True),
            (list, True),
            (Annotated[list[str], TEXT], True),
            (int, False),
            (int | None, False),
            (str, False),
        ],
    )
    def test_multi_valued(self, hint, expected):
        """Test collection hints are multi-valued."""
        assert is_multi_valued(hint) is expected


class TestReadWritePath:
    """Test encoding by value and decoding by declared type together."""

    def test_document_round_trip(self, registry):
        """Test fields written via resolve() read back via their hints."""
        document = {
            "views": 42,
            "rating": 4.5,
            "published": False,
            "created_at": datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
            "slug": "hello-world",
        }
        hints = {
            "views": int,
            "rating": float,
            "published": bool,
            "created_at": datetime,
            "slug": str,
        }

        indexed = {}
        for name, value in document.items():
            handler = registry.resolve(value)
            indexed[handler.indexed_name(name)] = handler.to_indexed(value)

        assert indexed == {
            "views_i": "42",
            "rating_f": "4.5",
            "published_b": "false",
            "created_at_d": "2024-01-15T10:30:00Z",
            "slug_s": "hello-world",
        }

        decoded = {}
        for name, hint in hints.items():
            handler = handler_for_annotation(hint, registry)
            decoded[name] = handler.cast(indexed[handler.indexed_name(name)])

        assert decoded == document
