"""Application pagination – paging/sort directives and the paginated result."""
from mp_search.application.pagination.page_request import (
    PagingDirective,
    SortDirection,
    SortDirective,
    clamp_page,
    clamp_size,
)
from mp_search.application.pagination.page import PaginatedResult, paginate

__all__ = [
    "PaginatedResult",
    "PagingDirective",
    "SortDirection",
    "SortDirective",
    "clamp_page",
    "clamp_size",
    "paginate",
]
