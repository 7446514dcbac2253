"""Observability – structlog configuration and logger helpers."""
from mp_search.observability.logging.factory import JsonLoggerFactory
from mp_search.observability.logging.processors import get_logger, search_context

__all__ = ["JsonLoggerFactory", "get_logger", "search_context"]
