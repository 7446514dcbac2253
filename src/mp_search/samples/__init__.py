"""Samples – concrete searches over synthetic in-memory catalogues.

Importing this package registers both handlers with the query registry.
"""
from mp_search.samples.locations import (
    Location,
    LocationSearchHandler,
    LocationSearchParameters,
    LocationSearchRequest,
    PopulationBucket,
)
from mp_search.samples.people import (
    Person,
    PersonSearchHandler,
    PersonSearchParameters,
    PersonSearchRequest,
    UserState,
)

__all__ = [
    "Location",
    "LocationSearchHandler",
    "LocationSearchParameters",
    "LocationSearchRequest",
    "Person",
    "PersonSearchHandler",
    "PersonSearchParameters",
    "PersonSearchRequest",
    "PopulationBucket",
    "UserState",
]
