"""Application search – generic paginated search pipeline."""
from mp_search.application.search.filters import (
    filter_text,
    filter_where,
    is_blank,
    parse_enum,
    parse_enum_set,
    parse_flag,
    text_matches,
)
from mp_search.application.search.handler import SearchHandler
from mp_search.application.search.parameters import SearchParameters
from mp_search.application.search.registry import (
    SortableFieldRegistry,
    attribute_key,
    default_registry,
    is_sortable,
    register_sortable,
    sortable,
    sortable_fields,
)
from mp_search.application.search.request import SearchRequest
from mp_search.application.search.sorting import order_by

__all__ = [
    "SearchHandler",
    "SearchParameters",
    "SearchRequest",
    "SortableFieldRegistry",
    "attribute_key",
    "default_registry",
    "filter_text",
    "filter_where",
    "is_blank",
    "is_sortable",
    "order_by",
    "parse_enum",
    "parse_enum_set",
    "parse_flag",
    "register_sortable",
    "sortable",
    "sortable_fields",
    "text_matches",
]
