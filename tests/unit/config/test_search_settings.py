"""Unit tests for SearchSettings and EnvSettingsLoader."""

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from mp_search.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SearchSettings,
    Settings,
)
from mp_search.config.settings.search import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


@dataclass
class DemoSettings(Settings):
    _prefix: ClassVar[str] = "DEMO"

    name: str
    ratio: float = 0.5
    enabled: bool = False
    tags: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# SearchSettings
# ---------------------------------------------------------------------------


class TestSearchSettings:
    def test_defaults(self) -> None:
        settings = SearchSettings()
        assert settings.default_page_size == DEFAULT_PAGE_SIZE == 10
        assert settings.max_page_size == MAX_PAGE_SIZE == 50
        assert settings.people_count == 25
        assert settings.location_count == 250
        assert settings.log_level_number == 20

    def test_narrowed_bounds_accepted(self) -> None:
        settings = SearchSettings(default_page_size=5, max_page_size=20)
        assert settings.max_page_size == 20

    @pytest.mark.parametrize("max_size", [0, MAX_PAGE_SIZE + 1])
    def test_max_page_size_out_of_range(self, max_size: int) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            SearchSettings(max_page_size=max_size)
        assert exc_info.value.setting_name == "max_page_size"

    def test_default_above_max_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            SearchSettings(default_page_size=30, max_page_size=20)
        assert exc_info.value.setting_name == "default_page_size"

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            SearchSettings(location_count=-1)

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            SearchSettings(log_level="chatty")

    def test_log_level_case_insensitive(self) -> None:
        assert SearchSettings(log_level="debug").log_level_number == 10


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_reads_prefixed_variables(self) -> None:
        settings = EnvSettingsLoader(
            environ={"SEARCH_DEFAULT_PAGE_SIZE": "25", "SEARCH_SEED": "7", "SEARCH_LOG_LEVEL": "WARNING"}
        ).load(SearchSettings)
        assert settings.default_page_size == 25
        assert settings.seed == 7
        assert settings.log_level == "WARNING"
        assert settings.people_count == 25

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCH_PEOPLE_COUNT", "3")
        assert EnvSettingsLoader().load(SearchSettings).people_count == 3

    def test_unparseable_int(self) -> None:
        with pytest.raises(ConfigError, match="SEARCH_SEED"):
            EnvSettingsLoader(environ={"SEARCH_SEED": "abc"}).load(SearchSettings)

    def test_validation_error_propagates(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader(environ={"SEARCH_MAX_PAGE_SIZE": "500"}).load(SearchSettings)

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader(environ={}).load(DemoSettings)
        assert exc_info.value.setting_name == "DEMO_NAME"

    def test_coercion(self) -> None:
        settings = EnvSettingsLoader(
            environ={
                "DEMO_NAME": "x",
                "DEMO_RATIO": "0.25",
                "DEMO_ENABLED": "yes",
                "DEMO_TAGS": "a, b,,c",
            }
        ).load(DemoSettings)
        assert settings.ratio == 0.25
        assert settings.enabled is True
        assert settings.tags == ["a", "b", "c"]


class TestSettingsBase:
    def test_env_key(self) -> None:
        assert SearchSettings.env_key("max_page_size") == "SEARCH_MAX_PAGE_SIZE"
        assert DemoSettings.env_key("tags") == "DEMO_TAGS"

    def test_env_key_without_prefix(self) -> None:
        assert Settings.env_key("seed") == "SEED"

    def test_as_dict(self) -> None:
        assert SearchSettings(seed=1).as_dict() == {
            "default_page_size": 10,
            "max_page_size": 50,
            "people_count": 25,
            "location_count": 250,
            "seed": 1,
            "log_level": "INFO",
        }
