"""Handler table — the category to handler configuration of an engine.

The table is a frozen Pydantic v2 model with one required callable field per
:class:`~value_cleaner.domain.Category`. Validation guarantees the table is
total (no category unhandled) and closed (no unknown categories), and the
model is immutable once built; overriding produces a new table.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError

from ..domain.category import Category
from ..domain.exceptions import (
    ConfigurationError,
    InvalidHandlerError,
    MissingHandlerError,
    UnknownCategoryError,
)
from .classifier import classify
from .handlers import (
    Handler,
    clean_mapping,
    clean_sequence,
    clean_text,
    drop,
    identity,
)

if TYPE_CHECKING:
    from .processor import Engine

logger = structlog.get_logger(__name__)


class HandlerTable(BaseModel):
    """Immutable mapping from every category to its handler.

    Build tables with :meth:`from_mapping` or :meth:`merge`, which accept
    categories as enum members, values (``"textual"``) or names
    (``"TEXTUAL"``) and raise :class:`ConfigurationError` subclasses instead
    of raw validation errors.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    sequence: Handler
    generic_object: Handler
    mapping: Handler
    absent: Handler
    callable: Handler
    boolean: Handler
    nothing: Handler
    numeric: Handler
    textual: Handler
    temporal: Handler
    fallback: Handler

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_mapping(cls, handlers: Mapping[Any, Handler]) -> HandlerTable:
        """Validate *handlers* into a complete table.

        Raises:
            UnknownCategoryError: A key names no category.
            InvalidHandlerError: A handler is not callable.
            MissingHandlerError: Some categories have no handler.
        """
        payload = _normalize(handlers)
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            error = _translate(exc)
            logger.warning("handler_table_rejected", code=error.code, error=error.message)
            raise error from exc

    def merge(self, overrides: Mapping[Any, Handler]) -> HandlerTable:
        """Return a new table with *overrides* replacing matching entries."""
        updates = _normalize(overrides)
        if not updates:
            return self
        table = self.from_mapping({**self.as_dict(), **updates})
        logger.debug("handler_table_merged", overridden=sorted(updates))
        return table

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def handler_for(self, category: Category | str) -> Handler:
        try:
            resolved = Category.resolve(category)
        except ValueError as exc:
            raise UnknownCategoryError(category) from exc
        return getattr(self, resolved.value)

    def __getitem__(self, category: Category | str) -> Handler:
        return self.handler_for(category)

    def as_dict(self) -> dict[Category, Handler]:
        """Return a plain ``{Category: handler}`` copy of the table."""
        return {category: getattr(self, category.value) for category in Category}

    def dispatch(self, value: Any, engine: Engine) -> Any:
        """Classify *value* and hand it to the matching handler."""
        return getattr(self, classify(value).value)(value, engine)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _normalize(handlers: Mapping[Any, Handler]) -> dict[str, Handler]:
    if not isinstance(handlers, Mapping):
        raise ConfigurationError(
            f"Handler overrides must be a mapping, got {type(handlers).__name__}"
        )
    normalized: dict[str, Handler] = {}
    for key, handler in handlers.items():
        try:
            normalized[Category.resolve(key).value] = handler
        except ValueError as exc:
            logger.warning("handler_table_rejected", code="UNKNOWN_CATEGORY", category=repr(key))
            raise UnknownCategoryError(key) from exc
    return normalized


def _translate(exc: ValidationError) -> ConfigurationError:
    missing: list[str] = []
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else ""
        if error["type"] == "extra_forbidden":
            return UnknownCategoryError(field)
        if error["type"] == "callable_type":
            return InvalidHandlerError(field, error.get("input"))
        if error["type"] == "missing":
            missing.append(field)
    if missing:
        return MissingHandlerError(missing)
    return ConfigurationError(str(exc))


DEFAULT_HANDLERS = HandlerTable.from_mapping({
    Category.SEQUENCE: clean_sequence,
    Category.GENERIC_OBJECT: clean_mapping,
    Category.MAPPING: clean_mapping,
    Category.ABSENT: identity,
    Category.CALLABLE: drop,
    Category.BOOLEAN: identity,
    Category.NOTHING: identity,
    Category.NUMERIC: identity,
    Category.TEXTUAL: clean_text,
    Category.TEMPORAL: identity,
    Category.FALLBACK: identity,
})
"""The default cleaning policy."""


__all__ = ["HandlerTable", "DEFAULT_HANDLERS"]
