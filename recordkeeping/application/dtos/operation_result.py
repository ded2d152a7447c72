"""
Operation Result Data Transfer Objects (DTOs) module.

Application services return these instead of letting domain exceptions
escape, so callers branch on ``error_kind`` rather than on exception types.
"""

from typing import Any

from pydantic import BaseModel

from recordkeeping.domain.enums import ErrorKind
from recordkeeping.domain.exceptions import DomainException


class OperationResult(BaseModel):
    """DTO describing the outcome of a single service operation."""

    success: bool
    message: str
    error_kind: ErrorKind | None = None
    value: Any = None

    @classmethod
    def ok(cls, message: str, value: Any = None) -> "OperationResult":
        return cls(success=True, message=message, value=value)

    @classmethod
    def from_exception(cls, exc: Exception) -> "OperationResult":
        """Build a failed result tagged with the exception's error kind."""
        if isinstance(exc, DomainException):
            return cls(success=False, message=exc.message, error_kind=exc.error_kind)
        return cls(success=False, message=str(exc), error_kind=ErrorKind.UNEXPECTED)
