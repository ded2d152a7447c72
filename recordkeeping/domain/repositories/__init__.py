"""
Domain Repository Interfaces.

This package contains repository interfaces defined at the domain layer.
They define the contract for accessing domain entities without specifying
the storage mechanism; infrastructure provides the in-memory implementations.
"""

from recordkeeping.domain.repositories.keyed_repository import KeyedRepository
from recordkeeping.domain.repositories.list_repository import ListRepository, Predicate

__all__ = ["KeyedRepository", "ListRepository", "Predicate"]
