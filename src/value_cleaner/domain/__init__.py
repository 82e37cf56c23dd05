"""Domain layer — categories, the omission marker and exceptions."""
from __future__ import annotations

from .category import ABSENT, Category, is_absent
from .exceptions import (
    CleanerException,
    ConfigurationError,
    InvalidHandlerError,
    MissingHandlerError,
    UnknownCategoryError,
)

__all__ = [
    "ABSENT",
    "Category",
    "is_absent",
    "CleanerException",
    "ConfigurationError",
    "InvalidHandlerError",
    "MissingHandlerError",
    "UnknownCategoryError",
]
