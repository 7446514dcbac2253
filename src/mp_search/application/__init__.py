"""Application – use-case building blocks (framework-agnostic)."""

from mp_search.application.cqrs import (
    InProcessQueryBus,
    MiddlewareAwareQueryBus,
    Query,
    QueryBus,
    QueryHandler,
)
from mp_search.application.pagination import (
    PaginatedResult,
    PagingDirective,
    SortDirection,
    SortDirective,
    paginate,
)
from mp_search.application.pipeline import LoggingMiddleware, Middleware, Pipeline
from mp_search.application.search import SearchHandler, SearchParameters, SearchRequest

__all__ = [
    "InProcessQueryBus",
    "LoggingMiddleware",
    "Middleware",
    "MiddlewareAwareQueryBus",
    "PaginatedResult",
    "PagingDirective",
    "Pipeline",
    "Query",
    "QueryBus",
    "QueryHandler",
    "SearchHandler",
    "SearchParameters",
    "SearchRequest",
    "SortDirection",
    "SortDirective",
    "paginate",
]
