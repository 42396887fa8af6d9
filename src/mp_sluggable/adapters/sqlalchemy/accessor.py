"""SQLAlchemy adapter – SqlAlchemyRecordAccessor."""
from __future__ import annotations

from typing import Any, Hashable, Mapping

from sqlalchemy import func, inspect as sa_inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mp_sluggable.application.slugging.ports import RecordAccessor
from mp_sluggable.config.validation import ConfigError
from mp_sluggable.kernel.errors import RecordAccessError
from mp_sluggable.observability.logging import get_logger

_log = get_logger(__name__)


class SqlAlchemyRecordAccessor(RecordAccessor):
    """Reads persisted rows of *model* through a synchronous session.

    Queries select columns rather than entities, so they return what the
    database holds even when the identity map carries pending edits.
    """

    def __init__(self, session: Session, model: type[Any]) -> None:
        mapper = sa_inspect(model)
        if len(mapper.primary_key) != 1:
            raise ConfigError(f"{model.__name__} must have a single-column primary key")
        self._session = session
        self._model = model
        self._pk = mapper.primary_key[0]
        self._columns = [getattr(model, attr.key).label(attr.key) for attr in mapper.column_attrs]

    def fetch_by_identity(self, identity: Hashable) -> Mapping[str, Any] | None:
        stmt = select(*self._columns).where(self._pk == identity)
        try:
            row = self._session.execute(stmt).first()
        except SQLAlchemyError as exc:
            _log.error("slug.access_failed", operation="fetch_by_identity", error=str(exc))
            raise RecordAccessError("fetch_by_identity", cause=exc) from exc
        return dict(row._mapping) if row is not None else None

    def count_conflicts(
        self,
        field_name: str,
        value: str,
        exclude_identity: Hashable | None,
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(self._model)
            .where(getattr(self._model, field_name) == value)
        )
        if exclude_identity is not None:
            stmt = stmt.where(self._pk != exclude_identity)
        try:
            return int(self._session.execute(stmt).scalar_one())
        except SQLAlchemyError as exc:
            _log.error("slug.access_failed", operation="count_conflicts", error=str(exc))
            raise RecordAccessError("count_conflicts", cause=exc) from exc


__all__ = ["SqlAlchemyRecordAccessor"]
