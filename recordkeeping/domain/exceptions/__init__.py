"""
Exception classes for the application domain.

This module exports common exceptions used throughout the application.
"""

from recordkeeping.domain.exceptions.base import DomainException
from recordkeeping.domain.exceptions.repository import (
    DuplicateEntityException,
    EntityNotFoundException,
    InvalidQuantityException,
    RepositoryException,
)

__all__ = [
    "DomainException",
    "DuplicateEntityException",
    "EntityNotFoundException",
    "InvalidQuantityException",
    "RepositoryException",
]
