"""Application search – free-text and structured filter helpers."""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterable, Sequence, TypeVar

from mp_search.observability.logging import get_logger

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

_log = get_logger(__name__)


def is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def text_matches(record: Any, query: str, fields: Iterable[str]) -> bool:
    """Case-insensitive substring match of *query* against any of *fields*."""
    needle = query.casefold()
    for name in fields:
        value = getattr(record, name, None)
        if value is not None and needle in str(value).casefold():
            return True
    return False


def filter_text(items: Sequence[T], query: str | None, fields: Sequence[str]) -> list[T]:
    """Keep records matching *query* on any of *fields*; a blank query keeps all."""
    if query is None or is_blank(query) or not fields:
        return list(items)
    return [item for item in items if text_matches(item, query, fields)]


def parse_enum(enum_type: type[E], raw: object) -> E | None:
    """Resolve *raw* to a member of *enum_type* by name or value, else ``None``.

    Name matching is case-insensitive.
    """
    if isinstance(raw, enum_type):
        return raw
    if raw is None:
        return None
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        for member in enum_type:
            if member.name.casefold() == text.casefold():
                return member
    try:
        return enum_type(raw)
    except (ValueError, TypeError):
        _log.debug("search.filter_ignored", enum=enum_type.__name__, value=raw)
        return None


_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off"})


def parse_flag(raw: object) -> bool | None:
    """Resolve *raw* to a boolean, accepting ``true/false/1/0/yes/no/on/off``.

    Anything else is ``None``, so the filter it feeds is skipped.
    """
    if raw is None or isinstance(raw, bool):
        return raw
    text = str(raw).strip().casefold()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    if text:
        _log.debug("search.filter_ignored", expected="bool", value=raw)
    return None


def parse_enum_set(enum_type: type[E], raw: Iterable[object] | None) -> frozenset[E]:
    """Parse every value of *raw*, silently dropping the unparseable ones."""
    parsed: set[E] = set()
    for value in raw or ():
        member = parse_enum(enum_type, value)
        if member is not None:
            parsed.add(member)
    return frozenset(parsed)


def filter_where(items: Sequence[T], predicate: Callable[[T], bool]) -> list[T]:
    return [item for item in items if predicate(item)]


__all__ = [
    "filter_text",
    "filter_where",
    "is_blank",
    "parse_enum",
    "parse_enum_set",
    "parse_flag",
    "text_matches",
]
