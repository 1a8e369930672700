"""Error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── InvalidFlagError
    │   ├── NotFoundError
    │   └── DuplicateFlagError
    └── ApplicationError         (application.py)
        ├── CommandError
        │   ├── ArgumentError
        │   └── UnsupportedOperationError
        └── ConfigError          (flag_console.config.errors)
"""

from flag_console.errors.application import (
    ApplicationError,
    ArgumentError,
    CommandError,
    UnsupportedOperationError,
)
from flag_console.errors.base import BaseError
from flag_console.errors.domain import (
    DomainError,
    DuplicateFlagError,
    InvalidFlagError,
    NotFoundError,
)

__all__ = [
    "ApplicationError",
    "ArgumentError",
    "BaseError",
    "CommandError",
    "DomainError",
    "DuplicateFlagError",
    "InvalidFlagError",
    "NotFoundError",
    "UnsupportedOperationError",
]
