"""Cleaner exception hierarchy.

Only configuration problems are modelled here. Exceptions raised by handlers
are never wrapped: they leave :meth:`Engine.process` unchanged.
"""
from __future__ import annotations

from typing import Any, Iterable


class CleanerException(Exception):
    """Base cleaner exception."""

    def __init__(self, message: str, code: str = "CLEANER_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(message)


# --- Configuration Exceptions ---

class ConfigurationError(CleanerException):
    """A handler table or engine could not be built from the given overrides."""

    def __init__(self, message: str, code: str = "CONFIGURATION_ERROR") -> None:
        super().__init__(message=message, code=code)


class UnknownCategoryError(ConfigurationError):
    def __init__(self, category: Any) -> None:
        super().__init__(
            message=f"Override references unknown category {category!r}",
            code="UNKNOWN_CATEGORY",
        )
        self.category = category


class MissingHandlerError(ConfigurationError):
    def __init__(self, categories: Iterable[str]) -> None:
        self.categories = sorted(categories)
        super().__init__(
            message="No handler for categories: " + ", ".join(self.categories),
            code="MISSING_HANDLER",
        )


class InvalidHandlerError(ConfigurationError):
    def __init__(self, category: str, handler: Any) -> None:
        super().__init__(
            message=f"Handler for '{category}' is not callable: {type(handler).__name__}",
            code="INVALID_HANDLER",
        )
        self.category = category
        self.handler = handler


__all__ = [
    "CleanerException",
    "ConfigurationError",
    "UnknownCategoryError",
    "MissingHandlerError",
    "InvalidHandlerError",
]
