"""Application-layer errors."""

from __future__ import annotations

from mp_sluggable.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Wiring or configuration problem at the use-case level."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
