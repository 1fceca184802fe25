"""Structured logging configuration using structlog + rich."""

import logging
import sys

import structlog
from rich.traceback import install as install_rich_traceback

from result_extra.config import Settings, settings as default_settings


def setup_logging(*, json_logs: bool = False, log_level: str = "INFO") -> None:
    """Configure structlog with rich console output or JSON formatting.

    Args:
        json_logs: If True, output JSON logs (for production). Otherwise, rich console.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
    """
    level = getattr(logging, log_level.upper())

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        renderers: list[structlog.types.Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        install_rich_traceback(show_locals=True, width=120)
        renderers = [
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=[*shared_processors, *renderers],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Also configure standard library logging at the same level
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)


def configure_from_settings(settings: Settings | None = None) -> None:
    """Run setup_logging with values from Settings (defaults to the env-loaded one)."""
    settings = settings or default_settings
    setup_logging(json_logs=settings.json_logs, log_level=settings.log_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Optional logger name (typically "result_extra.<module>").

    Returns:
        A bound structlog logger.
    """
    return structlog.get_logger(name)
