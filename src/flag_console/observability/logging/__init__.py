"""Observability – structlog configuration and logger helper."""
from flag_console.observability.logging.factory import JsonLoggerFactory
from flag_console.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
