"""Structlog configuration for fediview."""

import logging
import sys

import structlog

from fediview.config import InstanceConfig, LogFormat


def _renderer_chain(log_format: LogFormat) -> list:
    """Final processors for the chosen output format."""
    if log_format == LogFormat.JSON:
        # Tracebacks become a string field instead of a multi-line dump
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [
        structlog.dev.set_exc_info,
        structlog.dev.ConsoleRenderer(colors=True),
    ]


def configure_logging(config: InstanceConfig | None = None) -> None:
    """
    Configure structlog for conversion and CLI logging.

    Events go to stderr; stdout is reserved for rendered views.

    Args:
        config: InstanceConfig instance, uses defaults if None
    """
    if config is None:
        config = InstanceConfig()

    log_level = getattr(logging, config.log_level.upper(), logging.INFO)

    # Stdlib records (aiosqlite, typer) share the same stream and level
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        *_renderer_chain(config.log_format),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a logger, bound to a component name when one is given.

    Args:
        name: Component name, e.g. "converter"

    Returns:
        structlog BoundLogger
    """
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger_name=name)
    return logger
