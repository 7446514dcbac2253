"""FastAPI adapter – query-string binding to search parameters.

Binding is deliberately lenient: every parameter is optional and anything
the pipeline cannot use is normalised away downstream rather than rejected
here.
"""
from typing import Annotated

from fastapi import Depends, Query

from mp_search.application.pagination import PagingDirective, SortDirective
from mp_search.samples import LocationSearchParameters, PersonSearchParameters


def sort_directive(
    sort_by: Annotated[str | None, Query(description="Field to sort by")] = None,
    sort_dir: Annotated[str | None, Query(description="asc or desc")] = None,
) -> SortDirective | None:
    if sort_by is None and sort_dir is None:
        return None
    return SortDirective(name=sort_by, direction=sort_dir)


def _as_int(raw: str | None) -> int | None:
    try:
        return int(raw) if raw is not None else None
    except ValueError:
        return None


def paging_directive(
    page: Annotated[str | None, Query(description="1-based page number")] = None,
    size: Annotated[str | None, Query(description="Items per page")] = None,
) -> PagingDirective | None:
    page_number, page_size = _as_int(page), _as_int(size)
    if page_number is None and page_size is None:
        return None
    return PagingDirective(page=page_number if page_number is not None else 1, size=page_size)


SortDep = Annotated[SortDirective | None, Depends(sort_directive)]
PagingDep = Annotated[PagingDirective | None, Depends(paging_directive)]


def person_parameters(
    sort_by: SortDep,
    paging: PagingDep,
    q: Annotated[str | None, Query(description="Matches names and email")] = None,
    state: Annotated[str | None, Query()] = None,
    states: Annotated[list[str] | None, Query()] = None,
    is_archived: Annotated[str | None, Query(description="true or false")] = None,
) -> PersonSearchParameters:
    return PersonSearchParameters(
        query=q,
        sort_by=sort_by,
        paging=paging,
        state=state,
        states=tuple(states or ()),
        is_archived=is_archived,
    )


def location_parameters(
    sort_by: SortDep,
    paging: PagingDep,
    q: Annotated[str | None, Query(description="Matches the location name")] = None,
    population: Annotated[str | None, Query(description="Population bucket")] = None,
) -> LocationSearchParameters:
    return LocationSearchParameters(query=q, sort_by=sort_by, paging=paging, population=population)


PersonParametersDep = Annotated[PersonSearchParameters, Depends(person_parameters)]
LocationParametersDep = Annotated[LocationSearchParameters, Depends(location_parameters)]


__all__ = [
    "LocationParametersDep",
    "PagingDep",
    "PersonParametersDep",
    "SortDep",
    "location_parameters",
    "paging_directive",
    "person_parameters",
    "sort_directive",
]
