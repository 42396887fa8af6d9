"""Config – per-record-type slug settings and their loaders."""

from mp_sluggable.config.settings import EnvSettingsLoader, Settings, SluggableSettings
from mp_sluggable.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SluggableSettings",
]
