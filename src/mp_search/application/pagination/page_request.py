"""Application pagination – SortDirection, SortDirective, PagingDirective.

Both directives are bound straight from request input, so they accept
anything and normalise instead of raising: a bad page becomes ``1``, a bad
size becomes the default, an incomplete sort directive means "no sort".
"""
from __future__ import annotations

import dataclasses
from enum import Enum

from mp_search.config.settings.search import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, raw: object) -> "SortDirection | None":
        """Return the direction named by *raw* (case-insensitive) or ``None``."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


def clamp_page(page: int | None) -> int:
    """1-based page index; anything below 1 (or missing) becomes 1."""
    if page is None or page < 1:
        return 1
    return page


def clamp_size(
    size: int | None,
    default: int = DEFAULT_PAGE_SIZE,
    maximum: int = MAX_PAGE_SIZE,
) -> int:
    """Page size within ``[1, maximum]``; anything else reverts to *default*."""
    if size is None or size < 1 or size > maximum:
        return default
    return size


@dataclasses.dataclass(frozen=True)
class SortDirective:
    """Requested sort column and direction.

    The name is stripped on construction; a blank name becomes ``None``.
    """

    name: str | None = None
    direction: str | SortDirection | None = None

    def __post_init__(self) -> None:
        name = self.name.strip() if isinstance(self.name, str) else None
        object.__setattr__(self, "name", name or None)

    @property
    def parsed_direction(self) -> SortDirection | None:
        return SortDirection.parse(self.direction)

    @property
    def descending(self) -> bool:
        return self.parsed_direction is SortDirection.DESC

    def is_complete(self) -> bool:
        """``True`` when both a non-blank name and a valid direction are present."""
        return self.name is not None and self.parsed_direction is not None


@dataclasses.dataclass(frozen=True)
class PagingDirective:
    """Requested page number and page size, normalised on construction.

    A size outside ``[1, MAX_PAGE_SIZE]`` is dropped to ``None`` so the
    configured default applies downstream.
    """

    page: int = 1
    size: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "page", clamp_page(self.page))
        if self.size is not None and not 1 <= self.size <= MAX_PAGE_SIZE:
            object.__setattr__(self, "size", None)

    @property
    def effective_size(self) -> int:
        """Requested size, or the default when none (or an invalid one) was given."""
        return clamp_size(self.size)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.effective_size


__all__ = [
    "PagingDirective",
    "SortDirection",
    "SortDirective",
    "clamp_page",
    "clamp_size",
]
