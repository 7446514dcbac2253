"""Application search – SearchParameters base value object."""
from __future__ import annotations

import dataclasses

from mp_search.application.pagination import PagingDirective, SortDirective


@dataclasses.dataclass(frozen=True)
class SearchParameters:
    """Parameters shared by every search: free text, sort and paging.

    Concrete searches subclass this and add their structured filters.
    """

    query: str | None = None
    sort_by: SortDirective | None = None
    paging: PagingDirective | None = None


__all__ = ["SearchParameters"]
