"""Application search – SearchRequest, the query carrying search parameters."""
from __future__ import annotations

import dataclasses
from typing import Generic, TypeVar

from mp_search.application.cqrs import Query
from mp_search.application.search.parameters import SearchParameters

P = TypeVar("P", bound=SearchParameters)


@dataclasses.dataclass(frozen=True)
class SearchRequest(Query, Generic[P]):
    """A search query; its handler answers with a ``PaginatedResult``.

    ``parameters`` may be ``None`` when nothing was bound from the request,
    in which case the handler returns an empty first page.
    """

    parameters: P | None = None


__all__ = ["SearchRequest"]
