"""Config settings – SluggableSettings."""
from __future__ import annotations

import dataclasses

from mp_sluggable.config.settings.base import Settings
from mp_sluggable.config.validation import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class SluggableSettings(Settings):
    """Slug settings for one record type.

    An instance is passed explicitly to every component that needs it; there
    is no process-wide registry keyed by record type.

    Attributes:
        max_slug_length: Storage length of the slug column.  Must leave room
            for at least ``separator`` plus a one-digit suffix.
        title_field: Name of the field the slug is derived from.
        slug_field: Name of the field holding the slug.
        separator: Joins normalised words and precedes numeric suffixes.
        update_existing: Regenerate the slug of an existing record when its
            title changes.
    """

    max_slug_length: int
    title_field: str = "title"
    slug_field: str = "slug"
    separator: str = "-"
    update_existing: bool = False

    def _validate(self) -> None:
        if not self.slug_field:
            raise InvalidSettingValueError("slug_field", self.slug_field, "must not be empty")
        if not self.title_field:
            raise InvalidSettingValueError("title_field", self.title_field, "must not be empty")
        if not self.separator:
            raise InvalidSettingValueError("separator", self.separator, "must not be empty")
        if isinstance(self.max_slug_length, bool) or not isinstance(self.max_slug_length, int):
            raise InvalidSettingValueError(
                "max_slug_length", self.max_slug_length, "must be an integer"
            )
        minimum = len(self.separator) + 1
        if self.max_slug_length < minimum:
            raise InvalidSettingValueError(
                "max_slug_length",
                self.max_slug_length,
                f"must be at least {minimum} to fit a separator and a one-digit suffix",
            )


__all__ = ["SluggableSettings"]
