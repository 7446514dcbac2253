"""Application search – sortable-field registry.

A record type declares its sortable columns once, either declaratively with
:func:`sortable` on a dataclass field or explicitly with
:meth:`SortableFieldRegistry.register`.  Lookups are pure: an unknown type
simply has no sortable fields.

Usage::

    @dataclasses.dataclass(frozen=True)
    class Location:
        name: str = sortable(default="")
        country: str = sortable(default="")
        notes: str = ""

    is_sortable(Location, "name")    # True
    is_sortable(Location, "notes")   # False
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Callable, Mapping

SORTABLE = "mp_search.sortable"
SORT_KEY = "mp_search.sort_key"

KeyFn = Callable[[Any], Any]


def sortable(*, key: KeyFn | None = None, metadata: Mapping[str, Any] | None = None, **kwargs: Any) -> Any:
    """Drop-in for :func:`dataclasses.field` that marks the field sortable.

    *key* optionally replaces the default attribute-based ordering key.
    """
    merged: dict[str, Any] = {**(metadata or {}), SORTABLE: True}
    if key is not None:
        merged[SORT_KEY] = key
    return dataclasses.field(metadata=merged, **kwargs)


def attribute_key(name: str) -> KeyFn:
    """Ordering key for attribute *name* that tolerates ``None`` and enums.

    ``None`` orders before any value; enum members order by declaration.
    """

    def _key(record: Any) -> tuple[Any, ...]:
        value = getattr(record, name, None)
        if value is None:
            return (0,)
        if isinstance(value, Enum):
            return (1, list(type(value)).index(value))
        return (1, value)

    return _key


class SortableFieldRegistry:
    """Per-record-type allowlist of sortable fields and their ordering keys."""

    def __init__(self) -> None:
        self._explicit: dict[type, dict[str, KeyFn]] = {}
        self._cache: dict[type, Mapping[str, KeyFn]] = {}

    def register(self, record_type: type, fields: Mapping[str, KeyFn | None]) -> None:
        """Add sortable *fields* for *record_type*; ``None`` keys read the attribute."""
        entry = self._explicit.setdefault(record_type, {})
        for name, key in fields.items():
            entry[name] = key or attribute_key(name)
        self._cache.clear()

    def keys_for(self, record_type: Any) -> Mapping[str, KeyFn]:
        cached = self._cache.get(record_type) if isinstance(record_type, type) else None
        if cached is not None:
            return cached
        if not isinstance(record_type, type):
            return {}
        keys = self._discover(record_type)
        self._cache[record_type] = keys
        return keys

    def sortable_fields(self, record_type: Any) -> frozenset[str]:
        return frozenset(self.keys_for(record_type))

    def is_sortable(self, record_type: Any, field_name: str | None) -> bool:
        return bool(field_name) and field_name in self.keys_for(record_type)

    def sort_key(self, record_type: Any, field_name: str | None) -> KeyFn | None:
        if not field_name:
            return None
        return self.keys_for(record_type).get(field_name)

    def _discover(self, record_type: type) -> dict[str, KeyFn]:
        keys: dict[str, KeyFn] = {}
        if dataclasses.is_dataclass(record_type):
            for f in dataclasses.fields(record_type):
                if f.metadata.get(SORTABLE):
                    keys[f.name] = f.metadata.get(SORT_KEY) or attribute_key(f.name)
        # base-class registrations first so subclasses can override them
        for klass in reversed(record_type.__mro__):
            keys.update(self._explicit.get(klass, {}))
        return keys


default_registry = SortableFieldRegistry()


def sortable_fields(record_type: Any) -> frozenset[str]:
    """Names of the sortable fields of *record_type* (empty when unknown)."""
    return default_registry.sortable_fields(record_type)


def is_sortable(record_type: Any, field_name: str | None) -> bool:
    return default_registry.is_sortable(record_type, field_name)


def register_sortable(record_type: type, fields: Mapping[str, KeyFn | None]) -> None:
    default_registry.register(record_type, fields)


__all__ = [
    "KeyFn",
    "SortableFieldRegistry",
    "attribute_key",
    "default_registry",
    "is_sortable",
    "register_sortable",
    "sortable",
    "sortable_fields",
]
