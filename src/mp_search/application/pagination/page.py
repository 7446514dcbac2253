"""Application pagination – PaginatedResult and the paginate calculator."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, Sequence, TypeVar

from mp_search.application.pagination.page_request import clamp_page, clamp_size
from mp_search.config.settings.search import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """Offset-based page of results with computed navigation properties."""

    items: list[T]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0 or self.total <= 0:
            return 0
        return math.ceil(self.total / self.size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):  # noqa: ANN204
        return iter(self.items)

    def map(self, fn: Callable[[T], Any]) -> "PaginatedResult[Any]":
        """Return a new :class:`PaginatedResult` with each item transformed by *fn*."""
        return PaginatedResult(
            items=[fn(item) for item in self.items],
            total=self.total,
            page=self.page,
            size=self.size,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise paging metadata alongside the items."""
        return {
            "items": list(self.items),
            "page": self.page,
            "size": self.size,
            "total": self.total,
            "total_pages": self.total_pages,
            "has_previous": self.has_previous,
            "has_next": self.has_next,
        }

    @classmethod
    def empty(cls, size: int = DEFAULT_PAGE_SIZE) -> "PaginatedResult[T]":
        """First page of nothing."""
        return cls(items=[], total=0, page=1, size=size)


def paginate(
    items: Sequence[T],
    page: int | None,
    page_size: int | None,
    *,
    default_size: int = DEFAULT_PAGE_SIZE,
    max_size: int = MAX_PAGE_SIZE,
) -> PaginatedResult[T]:
    """Slice *items* down to the requested page.

    *page* and *page_size* are re-clamped here whatever the caller did, so an
    out-of-range page yields an empty slice and never raises.
    """
    page = clamp_page(page)
    size = clamp_size(page_size, default=default_size, maximum=max_size)
    start = (page - 1) * size
    return PaginatedResult(
        items=list(items[start:start + size]),
        total=len(items),
        page=page,
        size=size,
    )


__all__ = ["PaginatedResult", "paginate"]
