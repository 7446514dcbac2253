"""Web – helpers for presentation layers that render search results."""
from mp_search.web.options import SelectOption, display_name, option_value, options_list
from mp_search.web.querystring import (
    is_sorted_by,
    paging_link_params,
    parse_query,
    sort_link_params,
    to_query_string,
)

__all__ = [
    "SelectOption",
    "display_name",
    "is_sorted_by",
    "option_value",
    "options_list",
    "paging_link_params",
    "parse_query",
    "sort_link_params",
    "to_query_string",
]
