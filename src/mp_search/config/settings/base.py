"""Config settings – Settings, the base for environment-driven settings."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar


@dataclasses.dataclass
class Settings:
    """A dataclass of tunables, each read from ``{_prefix}_{FIELD}``.

    Subclasses override :meth:`_validate` for cross-field rules; it runs on
    every construction, so an invalid instance never exists.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable holding *field_name*, e.g. ``SEARCH_SEED``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def as_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


__all__ = ["Settings"]
