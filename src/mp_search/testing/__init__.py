"""Testing – property-based strategies for search and pagination."""
from mp_search.testing.strategies import (
    invalid_page_sizes,
    person_strategy,
    sort_directive_strategy,
    valid_page_sizes,
)

__all__ = [
    "invalid_page_sizes",
    "person_strategy",
    "sort_directive_strategy",
    "valid_page_sizes",
]
