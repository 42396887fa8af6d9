"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import dataclasses
import os
from typing import Any, Mapping, TypeVar

from mp_sluggable.config.settings.base import Settings
from mp_sluggable.config.validation import ConfigError, InvalidSettingValueError

T = TypeVar("T", bound=Settings)


class EnvSettingsLoader:
    """Read setting overrides from environment variables.

    Every dataclass field ``name`` of the target class maps to the variable
    ``<PREFIX>_<NAME>``; with ``prefix="article"`` the separator is read from
    ``ARTICLE_SEPARATOR``.  Unset variables are left out.
    """

    def __init__(self, prefix: str = "", environ: Mapping[str, str] | None = None) -> None:
        self._prefix = prefix
        self._environ = environ

    def read(self, settings_class: type[T]) -> dict[str, Any]:
        environ = os.environ if self._environ is None else self._environ
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{self._prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)
            if raw is None:
                continue
            values[field.name] = self._coerce(env_key, raw, field.type)
        return values

    def load(self, settings_class: type[T], **defaults: Any) -> T:
        """Build *settings_class* from *defaults* overlaid with the environment."""
        merged = {**defaults, **self.read(settings_class)}
        try:
            return settings_class(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc

    def _coerce(self, env_key: str, value: str, type_hint: Any) -> Any:
        if type_hint is bool or type_hint == "bool":
            return value.strip().lower() in ("1", "true", "yes", "on")
        if type_hint is int or type_hint == "int":
            try:
                return int(value)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, value, "not an integer") from exc
        return value


__all__ = ["EnvSettingsLoader"]
