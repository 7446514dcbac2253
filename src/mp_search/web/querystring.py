"""Web – query-string helpers for sort and paging links.

Every helper takes the current query string and returns a ``dict`` of the
parameters the link should carry; repeated keys are joined with commas.
"""
from __future__ import annotations

from urllib.parse import parse_qs, urlencode

from mp_search.application.pagination import SortDirection

PAGE_PARAM = "page"
PAGE_SIZE_PARAM = "size"
SORT_BY_PARAM = "sort_by"
SORT_DIR_PARAM = "sort_dir"


def parse_query(query_string: str | None) -> dict[str, str]:
    """Parse *query_string* (with or without a leading ``?``) into a flat dict."""
    if not query_string:
        return {}
    parsed = parse_qs(query_string.lstrip("?"), keep_blank_values=True)
    return {key: ",".join(values) for key, values in parsed.items()}


def sort_link_params(
    query_string: str | None,
    column: str,
    *,
    page_param: str = PAGE_PARAM,
    sort_by_param: str = SORT_BY_PARAM,
    sort_dir_param: str = SORT_DIR_PARAM,
) -> dict[str, str]:
    """Parameters for a column-header link that sorts by *column*.

    Re-clicking the column currently sorted ascending flips it to ``desc``;
    any other click sorts ``asc``.  The page parameter is dropped so a new
    sort starts from the first page.
    """
    params = parse_query(query_string)
    params.pop(page_param, None)
    already_ascending = (
        params.get(sort_by_param) == column
        and SortDirection.parse(params.get(sort_dir_param)) is SortDirection.ASC
    )
    params[sort_by_param] = column
    params[sort_dir_param] = "desc" if already_ascending else "asc"
    return params


def paging_link_params(
    query_string: str | None,
    page: int,
    size: int | None = None,
    *,
    page_param: str = PAGE_PARAM,
    page_size_param: str = PAGE_SIZE_PARAM,
) -> dict[str, str]:
    """Parameters for a pager link to *page* (and *size*, when given)."""
    params = parse_query(query_string)
    params[page_param] = str(page)
    if size is not None:
        params[page_size_param] = str(size)
    return params


def is_sorted_by(
    query_string: str | None,
    column: str,
    *,
    sort_by_param: str = SORT_BY_PARAM,
) -> bool:
    return parse_query(query_string).get(sort_by_param) == column


def to_query_string(params: dict[str, str]) -> str:
    return urlencode(params)


__all__ = [
    "PAGE_PARAM",
    "PAGE_SIZE_PARAM",
    "SORT_BY_PARAM",
    "SORT_DIR_PARAM",
    "is_sorted_by",
    "paging_link_params",
    "parse_query",
    "sort_link_params",
    "to_query_string",
]
