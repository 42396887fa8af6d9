"""Ports used by the slugging core.

Concrete implementations live in ``adapters/sqlalchemy`` and
``adapters/slugify``; an in-memory accessor lives in ``testing/fakes``.
"""

from __future__ import annotations

import abc
from typing import Any, Hashable, Mapping, Protocol


class RecordAccessor(abc.ABC):
    """Port: read access to the persisted records of one record type."""

    @abc.abstractmethod
    def fetch_by_identity(self, identity: Hashable) -> Mapping[str, Any] | None:
        """Return the persisted field values of *identity*, or ``None``."""

    @abc.abstractmethod
    def count_conflicts(
        self,
        field_name: str,
        value: str,
        exclude_identity: Hashable | None,
    ) -> int:
        """Count records other than *exclude_identity* whose *field_name* equals *value*."""


class Normalizer(Protocol):
    """Turns arbitrary text into lowercase alphanumeric runs joined by *separator*."""

    def slugify(self, text: str, separator: str) -> str: ...


__all__ = ["Normalizer", "RecordAccessor"]
