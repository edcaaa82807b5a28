"""Structured logging configuration using structlog.

Console output for interactive use, JSON lines for batch runs. Logs go to
stderr so that scripts can keep stdout for their JSON or table output.
All logging throughout the project should use get_logger() instead of print().
"""

import logging
import sys
from typing import TextIO

import structlog


def setup_logging(
    json_output: bool = False, log_level: str = "WARNING", stream: TextIO | None = None
) -> None:
    """Configure structlog processors, renderer and level.

    Args:
        json_output: If True, output JSON lines. If False, console format.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        stream: Destination stream, stderr when omitted.
    """
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)
    stream = stream or sys.stderr

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )

    # Route stdlib records (e.g. from pydantic-settings) to the same stream
    root = logging.getLogger()
    root.handlers = [logging.StreamHandler(stream)]
    root.setLevel(numeric_level)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance bound with the module name.

    Args:
        name: Logger name (typically __name__ from calling module).

    Returns:
        Configured structlog logger with module name context.
    """
    return structlog.get_logger(name)
