"""Config settings – 12-factor env-based configuration."""
from mp_search.config.settings.base import Settings
from mp_search.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from mp_search.config.settings.search import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, SearchSettings

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "EnvSettingsLoader",
    "MAX_PAGE_SIZE",
    "SearchSettings",
    "Settings",
    "SettingsLoader",
]
