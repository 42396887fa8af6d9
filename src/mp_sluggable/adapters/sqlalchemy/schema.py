"""SQLAlchemy adapter – slug settings from mapped model metadata."""
from __future__ import annotations

from typing import Any

from sqlalchemy import inspect as sa_inspect

from mp_sluggable.config.settings import EnvSettingsLoader, SluggableSettings
from mp_sluggable.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

_DISPLAY_FIELD_FALLBACKS = ("title", "name")


def _column(model: type[Any], field: str) -> Any:
    mapper = sa_inspect(model)
    if field not in mapper.column_attrs:
        raise InvalidSettingValueError(field, model.__name__, "not a mapped column")
    return mapper.column_attrs[field].columns[0]


def column_max_length(model: type[Any], field: str) -> int:
    """Return the declared ``String(length)`` of *field* on *model*."""
    length = getattr(_column(model, field).type, "length", None)
    if not length:
        raise MissingRequiredSettingError(f"{model.__name__}.{field} length")
    return int(length)


def display_field(model: type[Any]) -> str:
    """Return the field that names a *model* row for humans.

    ``__display_field__`` wins; otherwise the first of ``title`` and
    ``name`` that is mapped.
    """
    explicit = getattr(model, "__display_field__", None)
    if explicit:
        return str(explicit)
    mapper = sa_inspect(model)
    for candidate in _DISPLAY_FIELD_FALLBACKS:
        if candidate in mapper.column_attrs:
            return candidate
    raise MissingRequiredSettingError(f"{model.__name__}.__display_field__")


def settings_for_model(
    model: type[Any],
    *,
    loader: EnvSettingsLoader | None = None,
    **overrides: Any,
) -> SluggableSettings:
    """Build :class:`SluggableSettings` for *model*.

    Sources, lowest priority first: schema metadata, *loader* (environment),
    explicit *overrides*.  The schema is read once, here.
    """
    merged: dict[str, Any] = loader.read(SluggableSettings) if loader else {}
    merged.update(overrides)

    slug_field = merged.setdefault("slug_field", "slug")
    if "max_slug_length" not in merged:
        merged["max_slug_length"] = column_max_length(model, slug_field)
    if "title_field" not in merged:
        merged["title_field"] = display_field(model)
    _column(model, merged["title_field"])

    try:
        return SluggableSettings(**merged)
    except ConfigError:
        raise
    except TypeError as exc:
        raise ConfigError(f"Failed to build slug settings for {model.__name__}: {exc}", cause=exc) from exc


__all__ = ["column_max_length", "display_field", "settings_for_model"]
