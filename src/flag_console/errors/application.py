"""Application-layer errors — command parsing and configuration."""

from __future__ import annotations

from typing import Any

from flag_console.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class CommandError(ApplicationError):
    """A shell command could not be carried out as typed."""

    default_code = "command_error"


class ArgumentError(CommandError):
    """A token is missing or malformed.

    ``token`` is the rejected text, or ``None`` when the token is absent.
    """

    default_code = "invalid_argument"

    def __init__(self, message: str, *, token: str | None = None, **kwargs: Any) -> None:
        if token is not None:
            kwargs.setdefault("detail", {"token": token})
        super().__init__(message, **kwargs)
        self.token = token


class UnsupportedOperationError(CommandError):
    """The sub-command does not apply to the flag's value kind."""

    default_code = "unsupported_operation"

    def __init__(self, kind: str, operation: str, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"kind": kind, "operation": operation})
        super().__init__(
            f"unsupported operation for flag kind {kind}: {operation!r}", **kwargs
        )
        self.kind = kind
        self.operation = operation


__all__ = [
    "ApplicationError",
    "ArgumentError",
    "CommandError",
    "UnsupportedOperationError",
]
