"""Application CQRS – MiddlewareAwareQueryBus.

Usage::

    bus = MiddlewareAwareQueryBus(Pipeline().add(LoggingMiddleware()))
    bus.register(PersonSearchRequest, PersonSearchHandler(settings))
    page = await bus.ask(PersonSearchRequest(PersonSearchParameters(query="ann")))
"""
from __future__ import annotations

from typing import Any

from mp_search.application.cqrs.queries import InProcessQueryBus, Query
from mp_search.application.pipeline.pipeline import Pipeline


class MiddlewareAwareQueryBus(InProcessQueryBus):
    """Runs each search through *pipeline*, with its handler at the centre.

    The handler is resolved before the pipeline runs, so an unknown request
    type fails without reaching any middleware.
    """

    def __init__(self, pipeline: Pipeline) -> None:
        super().__init__()
        self._pipeline = pipeline

    @property
    def pipeline(self) -> Pipeline:
        return self._pipeline

    async def ask(self, query: Query) -> Any:
        return await self._pipeline.execute(query, self.handler_for(query).handle)


__all__ = ["MiddlewareAwareQueryBus"]
