"""Samples – people search: free text over names and email, state and archive filters."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Sequence

from mp_search.application.cqrs import query_handler
from mp_search.application.search import (
    SearchHandler,
    SearchParameters,
    SearchRequest,
    filter_where,
    parse_enum,
    parse_enum_set,
    parse_flag,
    sortable,
)
from mp_search.samples.data import people_catalogue


class UserState(str, Enum):
    ACTIVE = "Active"
    COMPLETE = "Complete"
    CANCELLED = "Cancelled"


@dataclasses.dataclass(frozen=True)
class Person:
    given_name: str = sortable(default="")
    family_name: str = sortable(default="")
    email_address: str = sortable(default="")
    is_archived: bool = sortable(default=False)
    state: UserState = sortable(default=UserState.ACTIVE)


@dataclasses.dataclass(frozen=True)
class PersonSearchParameters(SearchParameters):
    """``state``, ``states`` and ``is_archived`` may be raw strings; unparseable values are ignored."""

    state: str | None = None
    states: tuple[str, ...] = ()
    is_archived: bool | str | None = None


@dataclasses.dataclass(frozen=True)
class PersonSearchRequest(SearchRequest[PersonSearchParameters]):
    pass


@query_handler(PersonSearchRequest)
class PersonSearchHandler(SearchHandler[PersonSearchRequest, PersonSearchParameters, Person]):
    record_type = Person
    text_fields = ("given_name", "family_name", "email_address")

    async def acquire_source(self) -> Sequence[Person]:
        return people_catalogue(self.settings.people_count, self.settings.seed)

    def apply_filters(self, items: Sequence[Person], parameters: PersonSearchParameters) -> list[Person]:
        result = list(items)

        state = parse_enum(UserState, parameters.state)
        if state is not None:
            result = filter_where(result, lambda p: p.state is state)

        states = parse_enum_set(UserState, parameters.states)
        if states:
            result = filter_where(result, lambda p: p.state in states)

        archived = parse_flag(parameters.is_archived)
        if archived is not None:
            result = filter_where(result, lambda p: p.is_archived == archived)

        return result


__all__ = [
    "Person",
    "PersonSearchHandler",
    "PersonSearchParameters",
    "PersonSearchRequest",
    "UserState",
]
