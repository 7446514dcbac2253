"""
mp_search – Generic paginated search pipeline.

Import path convention::

    from mp_search.application.search import SearchHandler, SearchRequest
    from mp_search.application.pagination import PaginatedResult, paginate
    from mp_search.application.cqrs import make_query_bus
    from mp_search.adapters.fastapi import create_app
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
