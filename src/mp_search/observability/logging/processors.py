"""Observability – logger lookup and per-search log context."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """structlog logger for *name*, with *initial_values* already bound."""
    logger = structlog.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger


@contextmanager
def search_context(**values: Any) -> Iterator[None]:
    """Bind *values* to every event logged inside the block.

    Uses structlog context variables, so concurrent searches on one event
    loop keep separate contexts.
    """
    with structlog.contextvars.bound_contextvars(**values):
        yield


__all__ = ["get_logger", "search_context"]
