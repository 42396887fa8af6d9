"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (mp_sluggable.config.validation)
    └── InfrastructureError  (infrastructure.py)
        └── RecordAccessError
"""

from mp_sluggable.kernel.errors.application import ApplicationError
from mp_sluggable.kernel.errors.base import BaseError
from mp_sluggable.kernel.errors.infrastructure import (
    InfrastructureError,
    RecordAccessError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "RecordAccessError",
]
