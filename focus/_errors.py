# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "FocusError",
    "NotFoundError",
    "UnsupportedShapeError",
    "ValidationError",
)


class FocusError(Exception):
    default_message: ClassVar[str] = "Focus error"
    reason: ClassVar[str] = "error"
    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "reason": self.reason,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__ if hasattr(self, "__cause__") else None


class NotFoundError(FocusError, LookupError):
    """Raised when a focused key, index or variant tag is absent."""

    default_message = "Bad path"
    reason = "bad_path"
    __slots__ = ()


class UnsupportedShapeError(FocusError, TypeError):
    """Raised when a structure's container kind cannot be accessed."""

    default_message = "Bad data structure"
    reason = "bad_data_structure"
    __slots__ = ()


class ValidationError(FocusError, ValueError):
    """Exception raised when an optic is built from invalid arguments."""

    default_message = "Validation failed"
    reason = "invalid_argument"
    __slots__ = ()

    @classmethod
    def from_value(
        cls,
        value: Any,
        *,
        expected: str | None = None,
        message: str | None = None,
        cause: Exception | None = None,
        **extra: Any,
    ):
        """Create a ValidationError from a value with optional expected type and message."""
        details = {
            "value": value,
            "type": type(value).__name__,
            **({"expected": expected} if expected else {}),
            **extra,
        }
        return cls(message=message, details=details, cause=cause)
