"""Root conftest — shared fixtures for all test suites."""
from __future__ import annotations

import datetime as dt
import os
from types import SimpleNamespace
from typing import Any

import pytest
import structlog

from value_cleaner import ABSENT
from value_cleaner.config import get_settings
from value_cleaner.infrastructure.logging import teardown_logging

# Keep tests independent from any developer environment.
for _key in [k for k in os.environ if k.startswith("VALUE_CLEANER_")]:
    del os.environ[_key]


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_structlog():
    yield
    teardown_logging()
    structlog.reset_defaults()


@pytest.fixture
def scenario_input() -> dict[str, Any]:
    return {
        "one": " ",
        "two": ["", "", [""]],
        "three": " four ",
        "five": ["f ", " ", " do"],
        "six": {"thing": "one", "zap": None, "un": ABSENT},
        "height": 0,
        "finish": False,
    }


@pytest.fixture
def scenario_output() -> dict[str, Any]:
    return {
        "three": "four",
        "five": ["f", "do"],
        "six": {"thing": "one", "zap": None},
        "height": 0,
        "finish": False,
    }


@pytest.fixture
def mixed_record() -> dict[str, Any]:
    return {
        "str": " test ",
        "empty": "",
        "num": 42,
        "bool": False,
        "null": None,
        "undef": ABSENT,
        "func": lambda: "test",
        "date": dt.datetime(2023, 1, 1, tzinfo=dt.timezone.utc),
        "arr": [1, "", 3],
        "obj": {"nested": " value ", "empty": ""},
        "ns": SimpleNamespace(name=" ns ", blank="  "),
    }
