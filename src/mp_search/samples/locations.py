"""Samples – location search: free text over the name, population buckets."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Callable, Sequence

from mp_search.application.cqrs import query_handler
from mp_search.application.search import (
    SearchHandler,
    SearchParameters,
    SearchRequest,
    filter_where,
    parse_enum,
    sortable,
)
from mp_search.samples.data import location_catalogue


class PopulationBucket(Enum):
    LESS_THAN_100K = "LessThan100K"
    LESS_THAN_500K = "LessThan500K"
    MORE_THAN_500K = "MoreThan500K"
    MORE_THAN_1M = "MoreThan1M"

    @property
    def label(self) -> str:
        return _BUCKET_LABELS[self]

    def contains(self, population: int | None) -> bool:
        return population is not None and _BUCKET_TESTS[self](population)


_BUCKET_LABELS: dict[PopulationBucket, str] = {
    PopulationBucket.LESS_THAN_100K: "Up to 100K",
    PopulationBucket.LESS_THAN_500K: "Up to 500K",
    PopulationBucket.MORE_THAN_500K: "500K+",
    PopulationBucket.MORE_THAN_1M: "1m+",
}

_BUCKET_TESTS: dict[PopulationBucket, Callable[[int], bool]] = {
    PopulationBucket.LESS_THAN_100K: lambda n: n < 100_000,
    PopulationBucket.LESS_THAN_500K: lambda n: n < 500_000,
    PopulationBucket.MORE_THAN_500K: lambda n: n >= 500_000,
    PopulationBucket.MORE_THAN_1M: lambda n: n >= 1_000_000,
}


@dataclasses.dataclass(frozen=True)
class Location:
    name: str = sortable(default="")
    country: str = sortable(default="")
    population: int | None = sortable(default=None)


@dataclasses.dataclass(frozen=True)
class LocationSearchParameters(SearchParameters):
    population: str | None = None


@dataclasses.dataclass(frozen=True)
class LocationSearchRequest(SearchRequest[LocationSearchParameters]):
    pass


@query_handler(LocationSearchRequest)
class LocationSearchHandler(SearchHandler[LocationSearchRequest, LocationSearchParameters, Location]):
    record_type = Location
    text_fields = ("name",)

    async def acquire_source(self) -> Sequence[Location]:
        return location_catalogue(self.settings.location_count, self.settings.seed)

    def apply_filters(self, items: Sequence[Location], parameters: LocationSearchParameters) -> list[Location]:
        bucket = parse_enum(PopulationBucket, parameters.population)
        if bucket is None:
            return list(items)
        return filter_where(items, lambda loc: bucket.contains(loc.population))


__all__ = [
    "Location",
    "LocationSearchHandler",
    "LocationSearchParameters",
    "LocationSearchRequest",
    "PopulationBucket",
]
