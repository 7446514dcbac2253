"""Unit tests for free-text and structured filter helpers."""

from __future__ import annotations

import dataclasses
from enum import Enum

import pytest
from structlog.testing import capture_logs

from mp_search.application.search import (
    filter_text,
    filter_where,
    is_blank,
    parse_enum,
    parse_enum_set,
    parse_flag,
    text_matches,
)


class Colour(str, Enum):
    RED = "Red"
    GREEN = "Green"


class Priority(Enum):
    LOW = 1
    HIGH = 2


@dataclasses.dataclass(frozen=True)
class Contact:
    first: str
    last: str
    email: str | None = None


CONTACTS = [
    Contact("Ann", "Lee", "ann@example.com"),
    Contact("Ben", "Annan", None),
    Contact("Cid", "Moss", "cid@mail.test"),
]

FIELDS = ("first", "last", "email")


class TestIsBlank:
    @pytest.mark.parametrize("text", [None, "", "   ", "\t\n"])
    def test_blank(self, text: str | None) -> None:
        assert is_blank(text)

    def test_not_blank(self) -> None:
        assert not is_blank(" x ")


class TestFilterText:
    def test_case_insensitive_substring(self) -> None:
        assert [c.first for c in filter_text(CONTACTS, "ANN", FIELDS)] == ["Ann", "Ben"]

    def test_or_across_fields(self) -> None:
        assert [c.first for c in filter_text(CONTACTS, "mail.test", FIELDS)] == ["Cid"]

    @pytest.mark.parametrize("query", [None, "", "   "])
    def test_blank_query_keeps_everything(self, query: str | None) -> None:
        assert filter_text(CONTACTS, query, FIELDS) == CONTACTS

    def test_no_fields_keeps_everything(self) -> None:
        assert filter_text(CONTACTS, "zzz", ()) == CONTACTS

    def test_no_match(self) -> None:
        assert filter_text(CONTACTS, "zzz", FIELDS) == []

    def test_none_field_values_skipped(self) -> None:
        assert not text_matches(Contact("x", "y", None), "none", FIELDS)

    def test_unknown_field_names_skipped(self) -> None:
        assert filter_text(CONTACTS, "ann", ("nickname",)) == []


class TestParseEnum:
    def test_by_name_case_insensitive(self) -> None:
        assert parse_enum(Colour, "red") is Colour.RED
        assert parse_enum(Priority, "HIGH") is Priority.HIGH

    def test_by_value(self) -> None:
        assert parse_enum(Colour, "Green") is Colour.GREEN
        assert parse_enum(Priority, 1) is Priority.LOW

    def test_member_passthrough(self) -> None:
        assert parse_enum(Colour, Colour.RED) is Colour.RED

    @pytest.mark.parametrize("raw", [None, "", "  ", "Purple", 42, 3.5])
    def test_unparseable_is_none(self, raw: object) -> None:
        assert parse_enum(Priority, raw) is None

    def test_set_drops_unparseable(self) -> None:
        assert parse_enum_set(Colour, ["red", "blue", "GREEN"]) == frozenset({Colour.RED, Colour.GREEN})

    def test_set_of_none(self) -> None:
        assert parse_enum_set(Colour, None) == frozenset()


class TestParseFlag:
    @pytest.mark.parametrize("raw", ["true", "TRUE", "1", " yes ", "on", True])
    def test_true(self, raw: object) -> None:
        assert parse_flag(raw) is True

    @pytest.mark.parametrize("raw", ["false", "False", "0", "no", "off", False])
    def test_false(self, raw: object) -> None:
        assert parse_flag(raw) is False

    @pytest.mark.parametrize("raw", [None, "", "maybe", "2"])
    def test_unparseable_is_none(self, raw: object) -> None:
        assert parse_flag(raw) is None

    def test_unparseable_is_logged(self) -> None:
        with capture_logs() as logs:
            parse_flag("maybe")
        assert [e["event"] for e in logs] == ["search.filter_ignored"]


class TestFilterWhere:
    def test_predicate(self) -> None:
        assert filter_where(CONTACTS, lambda c: c.email is None) == [CONTACTS[1]]
