"""FastAPI adapter – application factory."""
from __future__ import annotations

from fastapi import FastAPI

import mp_search.samples  # noqa: F401  registers the sample handlers
from mp_search import __version__
from mp_search.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from mp_search.adapters.fastapi.routers import SearchRouter
from mp_search.application.cqrs import QueryBus, make_query_bus
from mp_search.application.pipeline import LoggingMiddleware, Pipeline
from mp_search.config import EnvSettingsLoader, SearchSettings
from mp_search.observability.logging import JsonLoggerFactory, get_logger

_log = get_logger(__name__)


def build_query_bus(settings: SearchSettings) -> QueryBus:
    """Query bus with every registered search, logged through the pipeline."""
    return make_query_bus(
        pipeline=Pipeline().add(LoggingMiddleware()),
        factory=lambda handler_class: handler_class(settings),
    )


def create_app(settings: SearchSettings | None = None, *, configure_logging: bool = True) -> FastAPI:
    """Build the search API.

    *settings* default to ``SEARCH_*`` environment variables.
    """
    settings = settings or EnvSettingsLoader().load(SearchSettings)
    if configure_logging:
        JsonLoggerFactory.configure(settings.log_level_number)

    app = FastAPI(title="mp-search", version=__version__)
    app.state.settings = settings
    app.state.query_bus = build_query_bus(settings)
    FastAPIExceptionMapper().register(app)
    app.include_router(SearchRouter(app.state.query_bus))
    _log.info("app.created", **settings.as_dict())
    return app


__all__ = ["build_query_bus", "create_app"]
