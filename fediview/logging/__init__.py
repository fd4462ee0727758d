"""Logging helpers."""

from fediview.logging.setup import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
