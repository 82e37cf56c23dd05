"""Category classifier.

Maps any value to exactly one :class:`~value_cleaner.domain.Category` by
walking an ordered predicate list; the first predicate that accepts the value
decides. The order matters: a list subclass carrying instance attributes is
also object-like, and must still come out as a sequence.
"""
from __future__ import annotations

import asyncio
import concurrent.futures
import inspect
import numbers
import re
from collections import UserString
from collections.abc import Mapping, Sequence, Set, ValuesView
from datetime import date, time, timedelta
from enum import Enum
from types import ModuleType
from typing import Any, Callable

from ..domain.category import ABSENT, Category

# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

_TEXT_TYPES = (str, UserString)
_BINARY_TYPES = (bytes, bytearray, memoryview)
_TEMPORAL_TYPES = (date, time, timedelta)

# Objects that carry a ``__dict__`` but are opaque values, not records.
_OPAQUE_TYPES = (
    Mapping,
    bool,
    numbers.Number,
    *_TEXT_TYPES,
    *_BINARY_TYPES,
    *_TEMPORAL_TYPES,
    re.Pattern,
    Set,
    ValuesView,
    BaseException,
    asyncio.Future,
    concurrent.futures.Future,
    Enum,
    type,
    ModuleType,
)


def is_sequence(value: Any) -> bool:
    """Ordered, finite, array-like container (text and binary excluded)."""
    return isinstance(value, Sequence) and not isinstance(value, (*_TEXT_TYPES, *_BINARY_TYPES))


def is_object_like(value: Any) -> bool:
    """Instance of a record-like class whose attributes live in ``__dict__``."""
    return (
        value is not None
        and not callable(value)
        and hasattr(value, "__dict__")
        and not isinstance(value, _OPAQUE_TYPES)
        and not inspect.isawaitable(value)
    )


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_temporal(value: Any) -> bool:
    return isinstance(value, _TEMPORAL_TYPES)


_PREDICATES: tuple[tuple[Category, Callable[[Any], bool]], ...] = (
    (Category.SEQUENCE, is_sequence),
    (Category.GENERIC_OBJECT, is_object_like),
    (Category.MAPPING, is_mapping),
    (Category.ABSENT, lambda value: value is ABSENT),
    (Category.CALLABLE, callable),
    (Category.BOOLEAN, lambda value: isinstance(value, bool)),
    (Category.NOTHING, lambda value: value is None),
    (Category.NUMERIC, lambda value: isinstance(value, numbers.Number)),
    (Category.TEXTUAL, lambda value: isinstance(value, _TEXT_TYPES)),
    (Category.TEMPORAL, is_temporal),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def classify(value: Any) -> Category:
    """Return the category of *value*; :attr:`Category.FALLBACK` if none match."""
    for category, predicate in _PREDICATES:
        if predicate(value):
            return category
    return Category.FALLBACK


__all__ = ["classify", "is_sequence", "is_object_like", "is_mapping", "is_temporal"]
