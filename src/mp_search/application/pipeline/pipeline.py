"""Application pipeline – middleware wrapped around every query dispatch.

A middleware sees the query on the way in and the result (or exception) on
the way out::

    class Timing(Middleware):
        async def __call__(self, query, next_):
            started = time.perf_counter()
            try:
                return await next_(query)
            finally:
                print(type(query).__name__, time.perf_counter() - started)

Middlewares run in the order they were added; the first one added is the
outermost.
"""
from __future__ import annotations

import abc
import functools
from typing import Any, Awaitable, Callable, Iterable

Handler = Callable[[Any], Awaitable[Any]]
Next = Handler


class Middleware(abc.ABC):
    @abc.abstractmethod
    async def __call__(self, query: Any, next_: Next) -> Any: ...


def _link(inner: Handler, middleware: Middleware) -> Handler:
    async def step(query: Any) -> Any:
        return await middleware(query, inner)

    return step


class Pipeline:
    """Ordered middleware chain ending in a query handler."""

    def __init__(self, middlewares: Iterable[Middleware] = ()) -> None:
        self._middlewares: list[Middleware] = list(middlewares)

    def __len__(self) -> int:
        return len(self._middlewares)

    def add(self, middleware: Middleware) -> Pipeline:
        self._middlewares.append(middleware)
        return self

    def wrap(self, handler: Handler) -> Handler:
        """Compose the chain around *handler* without running it."""
        return functools.reduce(_link, reversed(self._middlewares), handler)

    async def execute(self, query: Any, handler: Handler) -> Any:
        return await self.wrap(handler)(query)


__all__ = ["Handler", "Middleware", "Next", "Pipeline"]
