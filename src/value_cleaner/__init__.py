"""
value-cleaner

Recursively strips empty and meaningless entries from nested values.

Every node is classified into one of eleven categories, cleaned by that
category's handler, and containers that end up empty disappear from their
parent. Handlers can be overridden per category.

Usage:
    from value_cleaner import clean_value

    clean_value({"name": " Ada ", "tags": ["", " "], "age": 0})
    # {"name": "Ada", "age": 0}
"""
from __future__ import annotations

__version__ = "1.0.0"

from .config import CleanerSettings, configure_logging, get_settings
from .domain import (
    ABSENT,
    Category,
    CleanerException,
    ConfigurationError,
    InvalidHandlerError,
    MissingHandlerError,
    UnknownCategoryError,
    is_absent,
)
from .engine import (
    DEFAULT_HANDLERS,
    Engine,
    Handler,
    HandlerTable,
    build,
    classify,
    clean_mapping,
    clean_sequence,
    clean_text,
    clean_value,
    drop,
    identity,
    is_mapping,
    is_object_like,
    is_sequence,
    process,
    rm_empty,
    rm_true,
)
from .infrastructure.logging import get_logger, setup_logging, teardown_logging

__all__ = [
    "__version__",

    # Core API
    "process",
    "build",
    "clean_value",
    "Engine",
    "DEFAULT_HANDLERS",
    "HandlerTable",
    "Handler",

    # Classification
    "Category",
    "ABSENT",
    "is_absent",
    "classify",
    "is_sequence",
    "is_object_like",
    "is_mapping",

    # Handlers
    "identity",
    "drop",
    "clean_text",
    "clean_sequence",
    "clean_mapping",
    "rm_empty",
    "rm_true",

    # Exceptions
    "CleanerException",
    "ConfigurationError",
    "UnknownCategoryError",
    "MissingHandlerError",
    "InvalidHandlerError",

    # Config & logging
    "CleanerSettings",
    "get_settings",
    "configure_logging",
    "setup_logging",
    "teardown_logging",
    "get_logger",
]
