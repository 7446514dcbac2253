"""FastAPI adapter – search router."""
import dataclasses
from typing import Any

from fastapi import APIRouter
from fastapi.encoders import jsonable_encoder

from mp_search.adapters.fastapi.deps import LocationParametersDep, PersonParametersDep
from mp_search.application.cqrs import QueryBus
from mp_search.application.pagination import PaginatedResult
from mp_search.samples import LocationSearchRequest, PersonSearchRequest


def page_payload(result: PaginatedResult[Any]) -> dict[str, Any]:
    """JSON-ready body: the items as plain dicts plus the paging metadata."""
    return jsonable_encoder(result.map(dataclasses.asdict).to_dict())


def SearchRouter(bus: QueryBus, tags: list[str] | None = None) -> APIRouter:
    """Return a router exposing ``GET /people`` and ``GET /locations``."""
    router = APIRouter(tags=tags or ["search"])

    @router.get("/people")
    async def search_people(parameters: PersonParametersDep) -> dict[str, Any]:
        return page_payload(await bus.ask(PersonSearchRequest(parameters)))

    @router.get("/locations")
    async def search_locations(parameters: LocationParametersDep) -> dict[str, Any]:
        return page_payload(await bus.ask(LocationSearchRequest(parameters)))

    return router


__all__ = ["SearchRouter", "page_payload"]
