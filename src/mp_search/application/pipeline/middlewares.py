"""Application pipeline – built-in middleware."""
from __future__ import annotations

import time
from typing import Any

from mp_search.application.pipeline.pipeline import Middleware, Next
from mp_search.observability.logging import get_logger, search_context


class LoggingMiddleware(Middleware):
    """Log each search with its timing and, for paginated results, its size.

    Events logged by the handler itself (ignored sorts, unparseable filters)
    carry the same ``request`` name through the structlog context.
    """

    def __init__(self, logger: Any = None) -> None:
        self._log = logger or get_logger(__name__)

    async def __call__(self, query: Any, next_: Next) -> Any:
        name = type(query).__name__
        start = time.perf_counter()
        with search_context(request=name):
            try:
                result = await next_(query)
            except Exception:
                self._log.error("search.failed", request=name, duration_ms=_elapsed_ms(start))
                raise
        fields: dict[str, Any] = {"request": name, "duration_ms": _elapsed_ms(start)}
        for attr in ("total", "page", "size"):
            if hasattr(result, attr):
                fields[attr] = getattr(result, attr)
        self._log.info("search.completed", **fields)
        return result


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


__all__ = ["LoggingMiddleware"]
