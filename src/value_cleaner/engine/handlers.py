"""Default handler policies and handler combinators.

A handler is called as ``handler(value, engine)`` and returns the cleaned
value or :data:`~value_cleaner.domain.ABSENT`. Container handlers recurse by
calling ``engine.process(child)``; leaf handlers ignore the engine.
"""
from __future__ import annotations

from collections.abc import Mapping, Sized
from typing import TYPE_CHECKING, Any, Callable

from ..domain.category import ABSENT

if TYPE_CHECKING:
    from .processor import Engine

Handler = Callable[..., Any]


# ---------------------------------------------------------------------------
# Leaf handlers
# ---------------------------------------------------------------------------


def identity(value: Any, engine: Engine | None = None) -> Any:
    """Keep the value as-is."""
    return value


def drop(value: Any, engine: Engine | None = None) -> Any:
    """Discard the value."""
    return ABSENT


def clean_text(value: Any, engine: Engine | None = None) -> Any:
    """Strip surrounding whitespace; blank text becomes ``ABSENT``."""
    trimmed = value.strip()
    return trimmed if len(trimmed) else ABSENT


# ---------------------------------------------------------------------------
# Container handlers
# ---------------------------------------------------------------------------


def clean_sequence(items: Any, engine: Engine) -> Any:
    """Clean every element in order and drop the ones that come back ``ABSENT``.

    An exact ``tuple`` is rebuilt as a tuple; any other sequence (list
    subclasses, ranges, deques...) comes back as a fresh ``list``. A sequence
    with no surviving element is ``ABSENT``.
    """
    cleaned = []
    for item in items:
        result = engine.process(item)
        if result is not ABSENT:
            cleaned.append(result)
    if not cleaned:
        return ABSENT
    return tuple(cleaned) if type(items) is tuple else cleaned


def clean_mapping(node: Any, engine: Engine) -> Any:
    """Clean the entries of a mapping or plain object.

    Mappings contribute their items, other objects their instance
    ``__dict__``; either way entries are visited in insertion order and keys
    are kept as they are (``{200: "OK"}`` stays keyed by ``200``). The result
    is always a fresh ``dict``, or ``ABSENT`` when no entry survives.
    """
    entries = node if isinstance(node, Mapping) else vars(node)
    result: dict[Any, Any] = {}
    for key, child in entries.items():
        cleaned = engine.process(child)
        if cleaned is not ABSENT:
            result[key] = cleaned
    return result if result else ABSENT


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


def _is_empty(value: Any) -> bool:
    return value is ABSENT or (isinstance(value, Sized) and len(value) == 0)


def rm_empty(transformer: Callable[[Any], Any]) -> Handler:
    """Build a handler that applies *transformer* and drops empty results.

    "Empty" means ``ABSENT`` or a sized value of length zero (``""``, ``[]``,
    ``{}``). ``None``, ``0`` and ``False`` are not empty.

    Example::

        build({Category.TEXTUAL: rm_empty(str.lower)})
    """

    def handler(value: Any, engine: Engine | None = None) -> Any:
        result = transformer(value)
        return ABSENT if _is_empty(result) else result

    handler.__name__ = f"rm_empty({getattr(transformer, '__name__', 'transformer')})"
    return handler


def rm_true(predicate: Callable[[Any], bool]) -> Handler:
    """Build a handler that drops values for which *predicate* is truthy."""

    def handler(value: Any, engine: Engine | None = None) -> Any:
        return ABSENT if predicate(value) else value

    handler.__name__ = f"rm_true({getattr(predicate, '__name__', 'predicate')})"
    return handler


__all__ = [
    "Handler",
    "identity",
    "drop",
    "clean_text",
    "clean_sequence",
    "clean_mapping",
    "rm_empty",
    "rm_true",
]
