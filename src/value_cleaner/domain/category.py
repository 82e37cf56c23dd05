"""Value categories and the ``ABSENT`` omission marker."""
from __future__ import annotations

from enum import Enum
from typing import Any


class Category(str, Enum):
    """Closed set of semantic categories a value can belong to.

    Member order is the classification order: the classifier tries each
    category top to bottom and the first match wins.
    """

    SEQUENCE = "sequence"
    GENERIC_OBJECT = "generic_object"
    MAPPING = "mapping"
    ABSENT = "absent"
    CALLABLE = "callable"
    BOOLEAN = "boolean"
    NOTHING = "nothing"
    NUMERIC = "numeric"
    TEXTUAL = "textual"
    TEMPORAL = "temporal"
    FALLBACK = "fallback"

    @classmethod
    def resolve(cls, key: Any) -> "Category":
        """Resolve a member, its value (``"textual"``) or its name (``"TEXTUAL"``).

        Raises:
            ValueError: If *key* names no category.
        """
        if isinstance(key, cls):
            return key
        if isinstance(key, str):
            try:
                return cls(key)
            except ValueError:
                member = cls.__members__.get(key.upper())
                if member is not None:
                    return member
        raise ValueError(
            f"Unknown category {key!r}. "
            f"Available: {', '.join(c.value for c in cls)}"
        )


class _AbsentType:
    """Type of the :data:`ABSENT` singleton."""

    __slots__ = ()
    _instance: _AbsentType | None = None

    def __new__(cls) -> _AbsentType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _AbsentType:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _AbsentType:
        return self

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = _AbsentType()
"""Marker for "this node contributed nothing"; containers omit it.

Distinct from ``None``, which is a real value and is kept by default.
"""


def is_absent(value: Any) -> bool:
    """Return ``True`` if *value* is the :data:`ABSENT` marker."""
    return value is ABSENT


__all__ = ["Category", "ABSENT", "is_absent"]
