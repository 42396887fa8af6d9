"""SlugGenerator – normalise, truncate, de-duplicate and assign."""

from __future__ import annotations

from typing import Any

from mp_sluggable.application.slugging.deduplicator import Deduplicator, GenerationState
from mp_sluggable.application.slugging.ports import Normalizer, RecordAccessor
from mp_sluggable.application.slugging.record import Record
from mp_sluggable.config.settings import SluggableSettings
from mp_sluggable.observability.logging import get_logger

_log = get_logger(__name__)


class SlugGenerator:
    """Compute a unique slug for *record* and write it into ``record.data``."""

    def __init__(
        self,
        settings: SluggableSettings,
        accessor: RecordAccessor,
        normalizer: Normalizer,
        deduplicator: Deduplicator | None = None,
    ) -> None:
        self._settings = settings
        self._accessor = accessor
        self._normalizer = normalizer
        self._deduplicator = deduplicator or Deduplicator(settings, accessor)

    def generate(self, record: Record) -> str | None:
        """Return the assigned slug, or ``None`` when there is nothing to derive it from."""
        source = self._source_text(record)
        if source is None:
            _log.debug("slug.no_source", identity=record.identity)
            return None

        candidate = self._normalizer.slugify(str(source), self._settings.separator)
        if not candidate:
            _log.debug("slug.no_source", identity=record.identity, title=source)
            return None
        candidate = candidate[: self._settings.max_slug_length]

        state = GenerationState()
        slug = self._deduplicator.resolve(candidate, record.identity, state)
        record.data[self._settings.slug_field] = slug
        _log.info(
            "slug.generated",
            identity=record.identity,
            slug=slug,
            collisions=state.suffix_counter,
        )
        return slug

    def _source_text(self, record: Record) -> Any:
        title_field = self._settings.title_field
        if record.data.get(title_field) is not None:
            return record.data[title_field]
        if record.is_new:
            return None
        persisted = self._accessor.fetch_by_identity(record.identity) or {}
        return persisted.get(title_field) or None


__all__ = ["SlugGenerator"]
