"""Application search – SearchHandler, the shared search pipeline.

Stages run in a fixed order::

    acquire_source -> apply_search_text -> apply_filters -> apply_sorting -> apply_paging

Concrete searches implement :meth:`SearchHandler.acquire_source` and
usually override :meth:`SearchHandler.apply_filters`; free text is driven by
``text_fields`` and sorting by the sortable fields of ``record_type``.  No
stage raises on bad input: it becomes a no-op for that stage.
"""
from __future__ import annotations

import abc
from typing import ClassVar, Generic, Sequence, TypeVar

from mp_search.application.cqrs import QueryHandler
from mp_search.application.pagination import PaginatedResult, PagingDirective, paginate
from mp_search.application.search.filters import filter_text
from mp_search.application.search.parameters import SearchParameters
from mp_search.application.search.registry import SortableFieldRegistry, default_registry
from mp_search.application.search.request import SearchRequest
from mp_search.application.search.sorting import order_by
from mp_search.config.settings import SearchSettings

R = TypeVar("R", bound=SearchRequest)
P = TypeVar("P", bound=SearchParameters)
T = TypeVar("T")


class SearchHandler(QueryHandler[R, PaginatedResult[T]], Generic[R, P, T]):
    """Answer a :class:`SearchRequest` with one page of matching records."""

    record_type: ClassVar[type | None] = None
    text_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        settings: SearchSettings | None = None,
        registry: SortableFieldRegistry = default_registry,
    ) -> None:
        self._settings = settings or SearchSettings()
        self._registry = registry

    @property
    def settings(self) -> SearchSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Extension points
    # ------------------------------------------------------------------

    @abc.abstractmethod
    async def acquire_source(self) -> Sequence[T]:
        """Return the complete, unfiltered candidate set."""

    def apply_search_text(self, items: Sequence[T], parameters: P) -> list[T]:
        return filter_text(items, parameters.query, self.text_fields)

    def apply_filters(self, items: Sequence[T], parameters: P) -> list[T]:
        return list(items)

    # ------------------------------------------------------------------
    # Shared stages
    # ------------------------------------------------------------------

    def apply_sorting(self, items: Sequence[T], parameters: P) -> list[T]:
        return order_by(items, self.record_type, parameters.sort_by, self._registry)

    def apply_paging(self, items: Sequence[T], parameters: P) -> PaginatedResult[T]:
        paging = parameters.paging or PagingDirective()
        return paginate(
            items,
            paging.page,
            paging.size,
            default_size=self._settings.default_page_size,
            max_size=self._settings.max_page_size,
        )

    async def handle(self, query: R) -> PaginatedResult[T]:
        parameters = query.parameters
        if parameters is None:
            return PaginatedResult.empty(self._settings.default_page_size)

        items: Sequence[T] = await self.acquire_source()
        items = self.apply_search_text(items, parameters)
        items = self.apply_filters(items, parameters)
        items = self.apply_sorting(items, parameters)
        return self.apply_paging(items, parameters)


__all__ = ["SearchHandler"]
