"""Recursion engine.

An :class:`Engine` wraps a single top-level handler and passes itself to it,
so container handlers recurse through ``engine.process(child)`` without
closing over anything. Engines are built once by :func:`build` and are
immutable afterwards; sharing one across threads needs no locking.

Usage::

    from value_cleaner import Category, build, identity

    keep_spaces = build({Category.TEXTUAL: identity})
    keep_spaces({"a": "  x  ", "b": []})   # {"a": "  x  "}
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Union

import structlog

from ..config import get_settings
from ..domain.category import ABSENT
from ..domain.exceptions import ConfigurationError, InvalidHandlerError
from .handlers import Handler
from .table import DEFAULT_HANDLERS, HandlerTable

logger = structlog.get_logger(__name__)

HandlerFactory = Callable[[HandlerTable], Handler]
Overrides = Union[Mapping[Any, Handler], HandlerTable, HandlerFactory, None]


class Engine:
    """Immutable handle exposing :meth:`process`."""

    __slots__ = ("_handler", "_trace")

    def __init__(self, handler: Handler, *, trace: bool = False) -> None:
        object.__setattr__(self, "_handler", handler)
        object.__setattr__(self, "_trace", trace)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def handler(self) -> Handler:
        return self._handler

    @property
    def trace(self) -> bool:
        return self._trace

    def process(self, value: Any) -> Any:
        """Clean *value*; returns ``ABSENT`` when nothing is left.

        Exceptions raised by handlers propagate unchanged.
        """
        result = self._handler(value, self)
        if self._trace:
            logger.debug(
                "value_processed",
                value_type=type(value).__name__,
                dropped=result is ABSENT,
            )
        return result

    def __call__(self, value: Any) -> Any:
        return self.process(value)

    def __repr__(self) -> str:
        name = getattr(self._handler, "__qualname__", type(self._handler).__name__)
        return f"Engine(handler={name}, trace={self._trace})"


def build(overrides: Overrides = None, *, trace: bool | None = None) -> Engine:
    """Build an engine from the default handler table.

    Args:
        overrides: One of

            * ``None`` or an empty mapping: default behaviour;
            * a mapping of category to handler, merged over the defaults
              (entries replace, unspecified categories keep their default);
            * a :class:`HandlerTable`, used as-is;
            * a factory receiving :data:`DEFAULT_HANDLERS` and returning a
              single top-level ``handler(value, engine)`` that replaces
              dispatch entirely.
        trace: Log every processed node at debug level. Defaults to the
            ``trace_dispatch`` setting.

    Raises:
        ConfigurationError: The overrides are not usable (unknown category,
            non-callable handler, factory returning a non-callable, or an
            unsupported overrides type).
    """
    if trace is None:
        trace = get_settings().trace_dispatch

    if overrides is None:
        handler: Handler = DEFAULT_HANDLERS.dispatch
        source = "default"
    elif isinstance(overrides, HandlerTable):
        handler = overrides.dispatch
        source = "table"
    elif isinstance(overrides, Mapping):
        handler = DEFAULT_HANDLERS.merge(overrides).dispatch
        source = "overrides" if overrides else "default"
    elif callable(overrides):
        handler = overrides(DEFAULT_HANDLERS)
        if isinstance(handler, HandlerTable):
            handler = handler.dispatch
        if not callable(handler):
            logger.warning("engine_rejected", reason="factory returned a non-callable")
            raise InvalidHandlerError("factory", handler)
        source = "factory"
    else:
        logger.warning("engine_rejected", reason="unsupported overrides", type=type(overrides).__name__)
        raise ConfigurationError(
            f"Unsupported overrides type: {type(overrides).__name__}. "
            "Expected a mapping, a HandlerTable or a factory callable."
        )

    logger.debug("engine_built", source=source, trace=trace)
    return Engine(handler, trace=trace)


_DEFAULT_ENGINE = Engine(DEFAULT_HANDLERS.dispatch)
_TRACING_ENGINE = Engine(DEFAULT_HANDLERS.dispatch, trace=True)


def _default_engine() -> Engine:
    return _TRACING_ENGINE if get_settings().trace_dispatch else _DEFAULT_ENGINE


def process(value: Any) -> Any:
    """Clean *value* with the default policy; ``ABSENT`` means "no value".

    Honours the ``trace_dispatch`` setting on every call.
    """
    return _default_engine().process(value)


def clean_value(value: Any) -> Any:
    """Clean *value* with the default policy, returning ``None`` for "no value".

    Note that ``None`` is also what a bare ``None`` input cleans to; use
    :func:`process` when the two must be told apart.
    """
    result = _default_engine().process(value)
    return None if result is ABSENT else result


__all__ = ["Engine", "build", "process", "clean_value", "HandlerFactory", "Overrides"]
