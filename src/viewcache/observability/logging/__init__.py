"""Observability – structlog configuration and logger helper."""
from viewcache.observability.logging.factory import JsonLoggerFactory
from viewcache.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
