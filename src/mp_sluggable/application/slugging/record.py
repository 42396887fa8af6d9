"""Record – the in-flight data of one save."""

from __future__ import annotations

import dataclasses
from typing import Any, Hashable


@dataclasses.dataclass
class Record:
    """A record on its way to storage.

    ``identity`` is ``None`` until the record has been persisted.  ``data``
    holds the incoming field values of this save; only the slug field is
    ever written, and always by full reassignment.
    """

    data: dict[str, Any] = dataclasses.field(default_factory=dict)
    identity: Hashable | None = None

    @property
    def is_new(self) -> bool:
        return self.identity is None


__all__ = ["Record"]
