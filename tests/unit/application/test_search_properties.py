"""Property-based tests for paging arithmetic, size fallback and sorting."""

from __future__ import annotations

import math

from hypothesis import given, settings
from hypothesis import strategies as st

from mp_search.application.pagination import PagingDirective, SortDirective, paginate
from mp_search.application.search import filter_text, is_sortable, order_by, sortable_fields
from mp_search.samples import Person
from mp_search.testing import (
    invalid_page_sizes,
    person_strategy,
    sort_directive_strategy,
    valid_page_sizes,
)

PERSON_FIELDS = sorted(sortable_fields(Person))


class TestPagingProperties:
    @given(size=valid_page_sizes(), total=st.integers(min_value=0, max_value=500))
    def test_total_pages_is_ceiling(self, size: int, total: int) -> None:
        result = paginate(list(range(total)), 1, size)
        assert result.total_pages == math.ceil(total / size)
        assert (result.total_pages == 0) == (total == 0)

    @given(size=invalid_page_sizes())
    def test_invalid_size_falls_back_to_default(self, size: int) -> None:
        assert PagingDirective(size=size).effective_size == 10
        assert paginate(list(range(5)), 1, size).size == 10

    @given(
        size=valid_page_sizes(),
        total=st.integers(min_value=0, max_value=200),
        page=st.integers(min_value=-5, max_value=50),
    )
    def test_slice_never_exceeds_size_and_never_errors(self, size: int, total: int, page: int) -> None:
        result = paginate(list(range(total)), page, size)
        assert len(result.items) <= size
        assert result.total_pages >= 0
        assert result.has_previous == (result.page > 1)
        assert result.has_next == (result.page < result.total_pages)

    @given(size=valid_page_sizes(), total=st.integers(min_value=0, max_value=120))
    def test_pages_partition_items(self, size: int, total: int) -> None:
        items = list(range(total))
        pages = paginate(items, 1, size).total_pages
        collected = [x for p in range(1, pages + 1) for x in paginate(items, p, size).items]
        assert collected == items


class TestSortProperties:
    @settings(max_examples=60)
    @given(people=st.lists(person_strategy(), max_size=20), directive=sort_directive_strategy(PERSON_FIELDS))
    def test_unregistered_or_incomplete_directive_keeps_order(
        self, people: list[Person], directive: SortDirective
    ) -> None:
        ordered = order_by(people, Person, directive)
        if not (directive.is_complete() and is_sortable(Person, directive.name)):
            assert ordered == people
        else:
            assert sorted(ordered, key=id) == sorted(people, key=id)

    @settings(max_examples=60)
    @given(
        people=st.lists(person_strategy(), max_size=20),
        field=st.sampled_from(PERSON_FIELDS),
        descending=st.booleans(),
    )
    def test_registered_field_sorts_stably(self, people: list[Person], field: str, descending: bool) -> None:
        directive = SortDirective(field, "desc" if descending else "asc")
        ordered = order_by(people, Person, directive)

        def key(p: Person) -> object:
            value = getattr(p, field)
            return list(type(value)).index(value) if field == "state" else value

        assert ordered == sorted(people, key=key, reverse=descending)
        # ties keep their input order
        for value in {key(p) for p in people}:
            assert [p for p in ordered if key(p) == value] == [p for p in people if key(p) == value]


class TestFreeTextProperties:
    @given(people=st.lists(person_strategy(), max_size=20), blank=st.sampled_from(["", " ", "\t"]))
    def test_blank_query_is_identity(self, people: list[Person], blank: str) -> None:
        assert filter_text(people, blank, ("given_name",)) == people

    @given(people=st.lists(person_strategy(), max_size=20), query=st.text(alphabet="abAB", min_size=1, max_size=2))
    def test_case_insensitive(self, people: list[Person], query: str) -> None:
        fields = ("given_name", "family_name")
        assert filter_text(people, query.upper(), fields) == filter_text(people, query.lower(), fields)
