"""SlugDecisionEngine – does this record need a generated slug?"""

from __future__ import annotations

from mp_sluggable.application.slugging.ports import RecordAccessor
from mp_sluggable.application.slugging.record import Record
from mp_sluggable.config.settings import SluggableSettings


class SlugDecisionEngine:
    """Read-only policy deciding whether a slug is (re)generated."""

    def __init__(self, settings: SluggableSettings, accessor: RecordAccessor) -> None:
        self._settings = settings
        self._accessor = accessor

    def override_in_place(self, record: Record) -> bool:
        """``True`` when the caller supplied a non-empty slug in this save."""
        return bool(record.data.get(self._settings.slug_field))

    def needs_slug(self, record: Record) -> bool:
        """``True`` when *record* must get a freshly generated slug.

        New records always do.  Existing records do when their persisted slug
        is empty, or when ``update_existing`` is set and the incoming title
        differs from the persisted one.
        """
        if record.is_new:
            return True

        persisted = self._accessor.fetch_by_identity(record.identity) or {}
        persisted_slug = persisted.get(self._settings.slug_field)
        if persisted_slug is None or persisted_slug == "":
            return True

        title_field = self._settings.title_field
        if self._settings.update_existing and title_field in record.data:
            return persisted.get(title_field) != record.data[title_field]
        return False


__all__ = ["SlugDecisionEngine"]
