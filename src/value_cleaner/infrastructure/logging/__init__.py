"""Structured logging for the cleaner -- structlog on top of stdlib logging.

The cleaner is a library, so it only ever touches its own ``value_cleaner``
logger: :func:`setup_logging` attaches handlers there and leaves the root
logger and the host application's handlers alone. Events reach those host
handlers as well only when ``propagate=True``.

structlog itself is configured only when the host has not configured it yet;
an application with its own structlog pipeline keeps it, and the cleaner's
events flow through that pipeline instead.

Every event rendered by the cleaner's handlers carries a UTC ISO-8601
timestamp, the log level, the logger name and, for plain stdlib records, the
caller location.
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

PACKAGE_LOGGER = "value_cleaner"

# Marks handlers installed here so repeated setup replaces only those.
_OWNED = "_value_cleaner_owned"


def _add_caller_info(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor that adds caller file, function and line."""
    record = event_dict.get("_record")
    if record is not None:
        event_dict["caller"] = f"{record.pathname}:{record.lineno}"
        event_dict["function"] = record.funcName
    return event_dict


_PRE_CHAIN: list[Any] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    _add_caller_info,
]


def _formatter(renderer: Any) -> logging.Formatter:
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=_PRE_CHAIN,
    )


def _owned_handler(handler: logging.Handler, renderer: Any) -> logging.Handler:
    handler.setFormatter(_formatter(renderer))
    setattr(handler, _OWNED, True)
    return handler


def _ensure_structlog() -> None:
    if structlog.is_configured():
        return
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            *_PRE_CHAIN,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def setup_logging(
    level: str = "warning",
    json_output: bool = False,
    log_file: str | None = None,
    propagate: bool = False,
) -> logging.Logger:
    """Send the cleaner's log events to stderr (and optionally a file).

    Calling it again replaces the handlers installed by the previous call;
    handlers added by anyone else are never removed.

    Args:
        level: Level for the ``value_cleaner`` logger (``debug``, ``info``,
            ``warning``, ``error``, ``critical``).
        json_output: Render stderr output as JSON lines instead of the
            human-readable console format.
        log_file: Optional file that receives the same events as JSON lines.
        propagate: Also pass events up to the host's (root) handlers.

    Returns:
        The configured ``value_cleaner`` stdlib logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    teardown_logging()

    if json_output:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            pad_event_to=40,
        )
    package_logger.addHandler(_owned_handler(logging.StreamHandler(sys.stderr), renderer))
    if log_file:
        package_logger.addHandler(
            _owned_handler(
                logging.FileHandler(log_file, encoding="utf-8"),
                structlog.processors.JSONRenderer(),
            )
        )

    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    package_logger.propagate = propagate
    _ensure_structlog()

    get_logger(__name__).debug(
        "logging_configured",
        level=level,
        json_output=json_output,
        log_file=log_file or "none",
        propagate=propagate,
    )
    return package_logger


def teardown_logging() -> None:
    """Remove the handlers :func:`setup_logging` installed and restore defaults."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if getattr(handler, _OWNED, False):
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


def get_logger(name: str | None = None) -> Any:
    """Return a structlog bound logger.

    Thin convenience wrapper so that callers do not need to import structlog
    directly::

        from value_cleaner.infrastructure.logging import get_logger
        logger = get_logger(__name__)
    """
    return structlog.get_logger(name)


__all__ = ["PACKAGE_LOGGER", "setup_logging", "teardown_logging", "get_logger"]
