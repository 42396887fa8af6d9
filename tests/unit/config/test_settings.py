"""Unit tests for slug settings and the environment loader."""

from __future__ import annotations

import dataclasses

import pytest

from mp_sluggable.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SluggableSettings,
)


# ---------------------------------------------------------------------------
# SluggableSettings
# ---------------------------------------------------------------------------


class TestSluggableSettings:
    def test_defaults(self) -> None:
        s = SluggableSettings(max_slug_length=50)
        assert s.slug_field == "slug"
        assert s.title_field == "title"
        assert s.separator == "-"
        assert s.update_existing is False

    def test_is_frozen(self) -> None:
        s = SluggableSettings(max_slug_length=50)
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.separator = "_"  # type: ignore[misc]

    @pytest.mark.parametrize("length", [0, 1, -5])
    def test_too_short_max_length_rejected(self, length: int) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            SluggableSettings(max_slug_length=length)
        assert exc_info.value.setting_name == "max_slug_length"

    def test_minimum_accounts_for_separator_length(self) -> None:
        assert SluggableSettings(max_slug_length=3, separator="__").max_slug_length == 3
        with pytest.raises(InvalidSettingValueError):
            SluggableSettings(max_slug_length=2, separator="__")

    @pytest.mark.parametrize("length", [True, "20", 12.5])
    def test_non_integer_max_length_rejected(self, length: object) -> None:
        with pytest.raises(InvalidSettingValueError):
            SluggableSettings(max_slug_length=length)  # type: ignore[arg-type]

    @pytest.mark.parametrize("field", ["slug_field", "title_field", "separator"])
    def test_empty_strings_rejected(self, field: str) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            SluggableSettings(max_slug_length=20, **{field: ""})
        assert exc_info.value.setting_name == field

    def test_errors_are_config_errors(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            SluggableSettings(max_slug_length=0)
        assert exc_info.value.code == "invalid_setting_value"


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_reads_prefixed_variables(self) -> None:
        loader = EnvSettingsLoader(
            "article",
            environ={
                "ARTICLE_SEPARATOR": "_",
                "ARTICLE_UPDATE_EXISTING": "yes",
                "ARTICLE_MAX_SLUG_LENGTH": "64",
                "OTHER_SEPARATOR": ".",
            },
        )
        assert loader.read(SluggableSettings) == {
            "separator": "_",
            "update_existing": True,
            "max_slug_length": 64,
        }

    def test_unset_variables_omitted(self) -> None:
        assert EnvSettingsLoader("article", environ={}).read(SluggableSettings) == {}

    @pytest.mark.parametrize("raw", ["0", "false", "no", "off", "whatever"])
    def test_falsy_booleans(self, raw: str) -> None:
        loader = EnvSettingsLoader("a", environ={"A_UPDATE_EXISTING": raw})
        assert loader.read(SluggableSettings) == {"update_existing": False}

    def test_invalid_integer(self) -> None:
        loader = EnvSettingsLoader("a", environ={"A_MAX_SLUG_LENGTH": "wide"})
        with pytest.raises(InvalidSettingValueError) as exc_info:
            loader.read(SluggableSettings)
        assert exc_info.value.setting_name == "A_MAX_SLUG_LENGTH"

    def test_without_prefix(self) -> None:
        loader = EnvSettingsLoader(environ={"SLUG_FIELD": "permalink"})
        assert loader.read(SluggableSettings) == {"slug_field": "permalink"}

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGE_TITLE_FIELD", "heading")
        assert EnvSettingsLoader("page").read(SluggableSettings) == {"title_field": "heading"}

    def test_load_overlays_environment_on_defaults(self) -> None:
        loader = EnvSettingsLoader("a", environ={"A_SEPARATOR": "_"})
        s = loader.load(SluggableSettings, max_slug_length=40, separator=".")
        assert s.separator == "_"
        assert s.max_slug_length == 40

    def test_load_without_max_length_fails(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            EnvSettingsLoader("a", environ={}).load(SluggableSettings)
        assert "SluggableSettings" in exc_info.value.message

    def test_load_propagates_validation_errors(self) -> None:
        loader = EnvSettingsLoader("a", environ={"A_MAX_SLUG_LENGTH": "1"})
        with pytest.raises(InvalidSettingValueError):
            loader.load(SluggableSettings)


class TestConfigErrors:
    def test_missing_required_setting(self) -> None:
        err = MissingRequiredSettingError("max_slug_length")
        assert err.setting_name == "max_slug_length"
        assert "max_slug_length" in err.message
        assert err.code == "missing_required_setting"
