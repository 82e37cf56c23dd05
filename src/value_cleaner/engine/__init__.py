"""Recursion engine — classifier, handler policies, handler table and engine."""
from __future__ import annotations

from .classifier import classify, is_mapping, is_object_like, is_sequence, is_temporal
from .handlers import (
    Handler,
    clean_mapping,
    clean_sequence,
    clean_text,
    drop,
    identity,
    rm_empty,
    rm_true,
)
from .processor import Engine, build, clean_value, process
from .table import DEFAULT_HANDLERS, HandlerTable

__all__ = [
    "classify",
    "is_mapping",
    "is_object_like",
    "is_sequence",
    "is_temporal",
    "Handler",
    "clean_mapping",
    "clean_sequence",
    "clean_text",
    "drop",
    "identity",
    "rm_empty",
    "rm_true",
    "Engine",
    "build",
    "clean_value",
    "process",
    "DEFAULT_HANDLERS",
    "HandlerTable",
]
