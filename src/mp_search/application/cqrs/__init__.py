"""Application CQRS – Queries and query buses."""
from mp_search.application.cqrs.queries import InProcessQueryBus, Query, QueryBus, QueryHandler
from mp_search.application.cqrs.pipeline_bus import MiddlewareAwareQueryBus
from mp_search.application.cqrs.decorators import (
    clear_registries,
    make_query_bus,
    query_handler,
    registered_query_types,
)

__all__ = [
    "InProcessQueryBus",
    "MiddlewareAwareQueryBus",
    "Query",
    "QueryBus",
    "QueryHandler",
    "clear_registries",
    "make_query_bus",
    "query_handler",
    "registered_query_types",
]
