"""Application search – name-driven ordering of a filtered sequence."""
from __future__ import annotations

from typing import Any, Sequence, TypeVar

from mp_search.application.pagination import SortDirective
from mp_search.application.search.registry import SortableFieldRegistry, default_registry
from mp_search.observability.logging import get_logger

T = TypeVar("T")

_log = get_logger(__name__)


def order_by(
    items: Sequence[T],
    record_type: type | None,
    directive: SortDirective | None,
    registry: SortableFieldRegistry = default_registry,
) -> list[T]:
    """Return *items* stably ordered per *directive*.

    Without a complete directive naming a field sortable for *record_type*
    the order is left unchanged; a ``None`` *record_type* has no such fields.
    """
    if directive is None or not directive.is_complete():
        return list(items)

    key = registry.sort_key(record_type, directive.name) if record_type is not None else None
    if key is None:
        _log.debug("search.sort_ignored", record_type=_type_name(record_type), field=directive.name)
        return list(items)

    try:
        return sorted(items, key=key, reverse=directive.descending)
    except TypeError as exc:
        # mixed, non-comparable values in one column
        _log.warning(
            "search.sort_failed",
            record_type=_type_name(record_type),
            field=directive.name,
            error=str(exc),
        )
        return list(items)


def _type_name(record_type: Any) -> str:
    return getattr(record_type, "__name__", repr(record_type))


__all__ = ["order_by"]
