"""SQLAlchemy adapter – generate slugs in a ``before_flush`` hook.

Usage::

    registration = make_sluggable(Article, Session, separator="_")
    ...
    registration.remove()

*target* is anything ``sqlalchemy.event`` accepts for session events: the
``Session`` class, a ``sessionmaker``, or a single session (for an
``AsyncSession`` pass its ``sync_session``).
"""
from __future__ import annotations

import dataclasses
from typing import Any

from sqlalchemy import event, inspect as sa_inspect
from sqlalchemy.orm import Session

from mp_sluggable.adapters.slugify import SlugifyNormalizer
from mp_sluggable.adapters.sqlalchemy.accessor import SqlAlchemyRecordAccessor
from mp_sluggable.adapters.sqlalchemy.schema import settings_for_model
from mp_sluggable.application.slugging import Normalizer, Record, SluggableBehavior
from mp_sluggable.config.settings import EnvSettingsLoader, SluggableSettings


@dataclasses.dataclass
class SluggableRegistration:
    """Handle returned by :func:`make_sluggable`."""

    model: type[Any]
    settings: SluggableSettings
    target: Any
    listener: Any

    def remove(self) -> None:
        event.remove(self.target, "before_flush", self.listener)


def _record_for(instance: Any) -> Record:
    state = sa_inspect(instance)
    data: dict[str, Any] = {}
    for attr in state.mapper.column_attrs:
        added = state.attrs[attr.key].history.added
        if added:
            data[attr.key] = added[0]
    identity = state.identity[0] if state.identity else None
    return Record(data=data, identity=identity)


def make_sluggable(
    model: type[Any],
    target: Any = Session,
    *,
    normalizer: Normalizer | None = None,
    loader: EnvSettingsLoader | None = None,
    **overrides: Any,
) -> SluggableRegistration:
    """Give every new or changed *model* instance a slug when *target* flushes."""
    settings = settings_for_model(model, loader=loader, **overrides)
    normalizer = normalizer or SlugifyNormalizer()
    slug_field = settings.slug_field

    def _before_flush(session: Session, flush_context: Any, instances: Any) -> None:  # noqa: ARG001
        pending = [obj for obj in (*session.new, *session.dirty) if isinstance(obj, model)]
        if not pending:
            return
        behavior = SluggableBehavior(settings, SqlAlchemyRecordAccessor(session, model), normalizer)
        with session.no_autoflush:
            for instance in pending:
                record = _record_for(instance)
                before = record.data.get(slug_field)
                behavior.before_validate(record)
                after = record.data.get(slug_field)
                if after != before:
                    setattr(instance, slug_field, after)

    event.listen(target, "before_flush", _before_flush)
    return SluggableRegistration(model=model, settings=settings, target=target, listener=_before_flush)


__all__ = ["SluggableRegistration", "make_sluggable"]
