"""SluggableBehavior – the pre-save trigger hook."""

from __future__ import annotations

from mp_sluggable.application.slugging.decision import SlugDecisionEngine
from mp_sluggable.application.slugging.generator import SlugGenerator
from mp_sluggable.application.slugging.ports import Normalizer, RecordAccessor
from mp_sluggable.application.slugging.record import Record
from mp_sluggable.config.settings import SluggableSettings
from mp_sluggable.observability.logging import get_logger

_log = get_logger(__name__)


class SluggableBehavior:
    """Fill in a record's slug before it is validated and persisted.

    Example::

        behavior = SluggableBehavior(settings, accessor, SlugifyNormalizer())
        record = Record(data={"title": "Hello World"})
        behavior.before_validate(record)
        record.data["slug"]  # "hello-world"
    """

    def __init__(
        self,
        settings: SluggableSettings,
        accessor: RecordAccessor,
        normalizer: Normalizer,
    ) -> None:
        self._settings = settings
        self._decision = SlugDecisionEngine(settings, accessor)
        self._generator = SlugGenerator(settings, accessor, normalizer)

    @property
    def settings(self) -> SluggableSettings:
        return self._settings

    def before_validate(self, record: Record) -> bool:
        """Generate a slug when needed; always lets the save proceed.

        Errors raised by the accessor are not caught: a slug is never
        written without a completed uniqueness check.
        """
        if self._decision.override_in_place(record):
            _log.debug("slug.override_in_place", identity=record.identity)
        elif self._decision.needs_slug(record):
            self._generator.generate(record)
        else:
            _log.debug("slug.not_needed", identity=record.identity)
        return True


__all__ = ["SluggableBehavior"]
