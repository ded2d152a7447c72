"""Kinds of failure reported by repositories and application services."""

from enum import Enum


class ErrorKind(str, Enum):
    """Tag carried by domain exceptions and failed operation results."""

    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INVALID_QUANTITY = "invalid_quantity"
    UNEXPECTED = "unexpected"
