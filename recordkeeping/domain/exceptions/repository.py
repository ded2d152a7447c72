"""
Repository exceptions module.

This module defines exceptions related to repository operations.
"""

from recordkeeping.domain.enums import ErrorKind
from recordkeeping.domain.exceptions.base import DomainException


class RepositoryException(DomainException):
    """Base exception for repository-related errors."""
    def __init__(self, message: str = "Repository operation failed"):
        super().__init__(message)


class EntityNotFoundException(RepositoryException):
    """Exception raised when an entity is not found."""
    error_kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "Entity not found"):
        super().__init__(message)


class DuplicateEntityException(RepositoryException):
    """Exception raised when attempting to add an entity whose id is taken."""
    error_kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, message: str = "Entity already exists"):
        super().__init__(message)


class InvalidQuantityException(RepositoryException):
    """Exception raised when a stock quantity would become negative."""
    error_kind = ErrorKind.INVALID_QUANTITY

    def __init__(self, message: str = "Quantity cannot be negative"):
        super().__init__(message)
