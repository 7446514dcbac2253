"""Application CQRS – the read side: queries, their handlers and the bus.

Every search is a :class:`Query` answered by exactly one
:class:`QueryHandler`.  The bus resolves handlers by the query's class, then
by its base classes, so a specialised request is served by the handler of
the request it extends unless it has one of its own.
"""
from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

from mp_search.kernel.errors import HandlerNotFoundError

Q = TypeVar("Q", bound="Query")
R = TypeVar("R")


class Query:
    """Base for read-only requests."""


class QueryHandler(abc.ABC, Generic[Q, R]):
    @abc.abstractmethod
    async def handle(self, query: Q) -> R: ...


class QueryBus(abc.ABC):
    @abc.abstractmethod
    def register(self, query_type: type[Query], handler: QueryHandler[Any, Any]) -> None: ...

    @abc.abstractmethod
    async def ask(self, query: Query) -> Any: ...


class InProcessQueryBus(QueryBus):
    """Dispatch queries to handlers living in this process."""

    def __init__(self) -> None:
        self._handlers: dict[type[Query], QueryHandler[Any, Any]] = {}

    def __contains__(self, query_type: object) -> bool:
        return query_type in self._handlers

    def register(self, query_type: type[Query], handler: QueryHandler[Any, Any]) -> None:
        self._handlers[query_type] = handler

    def handler_for(self, query: Query) -> QueryHandler[Any, Any]:
        """Most specific registered handler for *query*.

        Raises:
            HandlerNotFoundError: when neither the query's class nor any of
                its bases has a handler.
        """
        for klass in type(query).__mro__:
            handler = self._handlers.get(klass)
            if handler is not None:
                return handler
        raise HandlerNotFoundError(type(query))

    async def ask(self, query: Query) -> Any:
        return await self.handler_for(query).handle(query)


__all__ = ["InProcessQueryBus", "Query", "QueryBus", "QueryHandler"]
