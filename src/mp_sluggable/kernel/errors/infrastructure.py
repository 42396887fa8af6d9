"""Infrastructure errors — storage failures while checking slugs."""

from __future__ import annotations

from typing import Any

from mp_sluggable.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure that is not a slug rule violation."""

    default_code = "infrastructure_error"


class RecordAccessError(InfrastructureError):
    """The record store could not answer a fetch or uniqueness query.

    A slug must never be written without a completed uniqueness check, so this
    error is always propagated to the caller.
    """

    default_code = "record_access_error"

    def __init__(
        self,
        operation: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Record store failed during '{operation}'", **kwargs)
        self.operation = operation


__all__ = ["InfrastructureError", "RecordAccessError"]
