"""Kernel – framework-agnostic building blocks."""

from mp_sluggable.kernel.errors import (
    ApplicationError,
    BaseError,
    InfrastructureError,
    RecordAccessError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "RecordAccessError",
]
