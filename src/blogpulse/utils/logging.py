"""Structured logging configuration for blogpulse."""

import logging
import sys
from typing import Any

import structlog

STEP_STATUSES = ("INFO", "PASS", "FAIL")


def setup_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """Configure structured logging for the application.

    Args:
        log_level: Standard logging level name.
        log_format: "json" for machine-readable lines, "console" for a
            human-friendly renderer when running the checks locally.
    """
    level = getattr(logging, log_level.upper())
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    renderer: Any
    if log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a structured logger instance.

    Note: Returns Any because structlog.get_logger() returns a dynamically
    configured logger type that varies based on setup_logging() configuration.
    """
    return structlog.get_logger(name)


_step_logger = get_logger("blogpulse.steps")


def log_step(step: str, status: str = "INFO", **fields: Any) -> None:
    """Record a workflow step with its status (INFO, PASS or FAIL).

    FAIL steps are logged at error level so they survive a WARNING filter.
    """
    status = status.upper()
    if status not in STEP_STATUSES:
        status = "INFO"
    if status == "FAIL":
        _step_logger.error(step, status=status, **fields)
    else:
        _step_logger.info(step, status=status, **fields)
