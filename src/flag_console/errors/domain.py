"""Domain errors — malformed descriptors and lookups against the registry."""

from __future__ import annotations

from typing import Any

from flag_console.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a flag descriptor or registry rule is violated."""

    default_code = "domain_error"


class InvalidFlagError(DomainError):
    """A flag descriptor is internally inconsistent."""

    default_code = "invalid_flag"


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
            kwargs.setdefault("detail", {"identifier": identifier})
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class DuplicateFlagError(DomainError):
    """Two descriptors share the same id."""

    default_code = "duplicate_flag"

    def __init__(self, flag_id: int, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"flag_id": flag_id})
        super().__init__(f"Flag id {flag_id} is registered more than once", **kwargs)
        self.flag_id = flag_id


__all__ = [
    "DomainError",
    "DuplicateFlagError",
    "InvalidFlagError",
    "NotFoundError",
]
