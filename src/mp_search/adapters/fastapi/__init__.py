"""FastAPI adapter – search router, parameter binding, exception mapper, app factory."""
from mp_search.adapters.fastapi.app import build_query_bus, create_app
from mp_search.adapters.fastapi.deps import location_parameters, person_parameters
from mp_search.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from mp_search.adapters.fastapi.routers import SearchRouter, page_payload

__all__ = [
    "FastAPIExceptionMapper",
    "SearchRouter",
    "build_query_bus",
    "create_app",
    "location_parameters",
    "page_payload",
    "person_parameters",
]
