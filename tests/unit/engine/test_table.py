"""Unit tests for the handler table."""
from __future__ import annotations

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from value_cleaner.domain import ABSENT, Category
from value_cleaner.domain.exceptions import (
    ConfigurationError,
    InvalidHandlerError,
    MissingHandlerError,
    UnknownCategoryError,
)
from value_cleaner.engine import build
from value_cleaner.engine.handlers import (
    clean_mapping,
    clean_sequence,
    clean_text,
    drop,
    identity,
)
from value_cleaner.engine.table import DEFAULT_HANDLERS, HandlerTable


def _upper(value, engine=None):
    return value.upper()


class TestDefaultHandlers:
    def test_one_handler_per_category(self):
        table = DEFAULT_HANDLERS.as_dict()
        assert set(table) == set(Category)
        assert all(callable(handler) for handler in table.values())

    def test_default_policy(self):
        assert DEFAULT_HANDLERS[Category.SEQUENCE] is clean_sequence
        assert DEFAULT_HANDLERS[Category.MAPPING] is clean_mapping
        assert DEFAULT_HANDLERS[Category.GENERIC_OBJECT] is clean_mapping
        assert DEFAULT_HANDLERS[Category.TEXTUAL] is clean_text
        assert DEFAULT_HANDLERS[Category.CALLABLE] is drop
        for category in (
            Category.ABSENT,
            Category.BOOLEAN,
            Category.NOTHING,
            Category.NUMERIC,
            Category.TEMPORAL,
            Category.FALLBACK,
        ):
            assert DEFAULT_HANDLERS[category] is identity

    def test_lookup_by_value_and_name(self):
        assert DEFAULT_HANDLERS["textual"] is clean_text
        assert DEFAULT_HANDLERS.handler_for("TEXTUAL") is clean_text

    def test_lookup_unknown_category(self):
        with pytest.raises(UnknownCategoryError):
            DEFAULT_HANDLERS["isString"]

    def test_is_immutable(self):
        with pytest.raises(ValidationError):
            DEFAULT_HANDLERS.textual = identity


class TestMerge:
    def test_override_replaces_only_target(self):
        table = DEFAULT_HANDLERS.merge({Category.TEXTUAL: _upper})
        assert table[Category.TEXTUAL] is _upper
        assert table[Category.SEQUENCE] is clean_sequence
        assert DEFAULT_HANDLERS[Category.TEXTUAL] is clean_text

    def test_empty_overrides_return_same_table(self):
        assert DEFAULT_HANDLERS.merge({}) is DEFAULT_HANDLERS

    def test_string_keys(self):
        table = DEFAULT_HANDLERS.merge({"nothing": drop, "BOOLEAN": drop})
        assert table.nothing is drop
        assert table.boolean is drop

    def test_unknown_category_rejected(self):
        with pytest.raises(UnknownCategoryError) as info:
            DEFAULT_HANDLERS.merge({"isString": identity})
        assert info.value.category == "isString"

    def test_non_callable_handler_rejected(self):
        with pytest.raises(InvalidHandlerError) as info:
            DEFAULT_HANDLERS.merge({Category.NUMERIC: 42})
        assert info.value.category == "numeric"

    def test_non_mapping_rejected(self):
        with pytest.raises(ConfigurationError):
            DEFAULT_HANDLERS.merge([("textual", identity)])

    def test_rejection_is_logged(self):
        with capture_logs() as logs:
            with pytest.raises(UnknownCategoryError):
                DEFAULT_HANDLERS.merge({"bogus": identity})
        assert any(
            entry["event"] == "handler_table_rejected" and entry["log_level"] == "warning"
            for entry in logs
        )

    def test_merge_is_logged(self):
        with capture_logs() as logs:
            DEFAULT_HANDLERS.merge({"textual": identity})
        assert {"event": "handler_table_merged", "log_level": "debug", "overridden": ["textual"]} in logs


class TestFromMapping:
    def test_missing_categories(self):
        with pytest.raises(MissingHandlerError) as info:
            HandlerTable.from_mapping({Category.TEXTUAL: clean_text})
        assert "sequence" in info.value.categories
        assert "textual" not in info.value.categories
        assert len(info.value.categories) == len(Category) - 1

    def test_complete_mapping(self):
        table = HandlerTable.from_mapping({category: identity for category in Category})
        assert all(handler is identity for handler in table.as_dict().values())

    def test_error_is_chained_from_validation(self):
        with pytest.raises(MissingHandlerError) as info:
            HandlerTable.from_mapping({})
        assert isinstance(info.value.__cause__, ValidationError)

    def test_direct_table_as_engine_config(self):
        table = HandlerTable.from_mapping({category: identity for category in Category})
        engine = build(table)
        assert engine({"a": ""}) == {"a": ""}


class TestDispatch:
    def test_routes_by_category(self):
        engine = build()
        assert DEFAULT_HANDLERS.dispatch("  x ", engine) == "x"
        assert DEFAULT_HANDLERS.dispatch(len, engine) is ABSENT
        assert DEFAULT_HANDLERS.dispatch(0, engine) == 0
