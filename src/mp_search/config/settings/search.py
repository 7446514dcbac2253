"""Config settings – SearchSettings for the search pipeline and sample data."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from mp_search.config.settings.base import Settings
from mp_search.config.validation import InvalidSettingValueError

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50


@dataclasses.dataclass
class SearchSettings(Settings):
    """Tunables read from ``SEARCH_*`` environment variables.

    ``default_page_size`` and ``max_page_size`` can only narrow the built-in
    paging bounds of ``1..MAX_PAGE_SIZE``;
    the counts and ``seed`` shape the synthetic sample catalogues.
    """

    _prefix: ClassVar[str] = "SEARCH"

    default_page_size: int = DEFAULT_PAGE_SIZE
    max_page_size: int = MAX_PAGE_SIZE
    people_count: int = 25
    location_count: int = 250
    seed: int = 8675309
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not 1 <= self.max_page_size <= MAX_PAGE_SIZE:
            raise InvalidSettingValueError(
                "max_page_size", self.max_page_size, f"must be between 1 and {MAX_PAGE_SIZE}"
            )
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise InvalidSettingValueError(
                "default_page_size",
                self.default_page_size,
                f"must be between 1 and {self.max_page_size}",
            )
        for name in ("people_count", "location_count"):
            if getattr(self, name) < 0:
                raise InvalidSettingValueError(name, getattr(self, name), "must be >= 0")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "is not a logging level")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE", "SearchSettings"]
