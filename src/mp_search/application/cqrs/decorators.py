"""Application CQRS – @query_handler auto-registration decorator."""
from __future__ import annotations

from typing import Any, Callable

from mp_search.application.cqrs.pipeline_bus import MiddlewareAwareQueryBus
from mp_search.application.cqrs.queries import InProcessQueryBus, Query, QueryHandler
from mp_search.application.pipeline.pipeline import Pipeline

HandlerFactory = Callable[[type[QueryHandler[Any, Any]]], QueryHandler[Any, Any]]

# ---------------------------------------------------------------------------
# Global registry populated at import time by the decorator
# ---------------------------------------------------------------------------

_QUERY_REGISTRY: dict[type[Query], type[QueryHandler[Any, Any]]] = {}


def query_handler(query_type: type[Query]):
    """Class decorator that registers a :class:`QueryHandler` for the given
    query type in the global query registry.

    Usage::

        @query_handler(PersonSearchRequest)
        class PersonSearchHandler(SearchHandler[...]):
            ...
    """
    def decorator(handler_class: type[QueryHandler[Any, Any]]) -> type[QueryHandler[Any, Any]]:
        _QUERY_REGISTRY[query_type] = handler_class
        return handler_class

    return decorator


def registered_query_types() -> list[type[Query]]:
    return list(_QUERY_REGISTRY)


def make_query_bus(
    extra: dict[type[Query], QueryHandler[Any, Any]] | None = None,
    *,
    pipeline: Pipeline | None = None,
    factory: HandlerFactory | None = None,
) -> InProcessQueryBus:
    """Instantiate a query bus pre-populated from the global registry.

    *pipeline* selects a :class:`MiddlewareAwareQueryBus`; *factory* builds
    each registered handler class (default: no-arg constructor); *extra*
    injects or overrides handler instances without touching the registry.
    """
    bus = InProcessQueryBus() if pipeline is None else MiddlewareAwareQueryBus(pipeline)
    build = factory or (lambda handler_class: handler_class())
    for query_type, handler_class in _QUERY_REGISTRY.items():
        bus.register(query_type, build(handler_class))
    if extra:
        for query_type, handler_instance in extra.items():
            bus.register(query_type, handler_instance)
    return bus


def clear_registries() -> None:
    """Clear the global registry.  Use in tests to avoid inter-test leakage.

    .. warning::
        This mutates module-level state.  Only call in tests.
    """
    _QUERY_REGISTRY.clear()


__all__ = [
    "clear_registries",
    "make_query_bus",
    "query_handler",
    "registered_query_types",
]
