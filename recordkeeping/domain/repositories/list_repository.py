"""
List Repository Interface

This module defines the interface for insertion-ordered repositories that
are searched with predicates. Absence is a normal outcome here: lookups
return ``None`` and removals return ``False`` instead of raising.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

Predicate = Callable[[T], bool]


class ListRepository(ABC, Generic[T]):
    """Interface for predicate-searched list repositories."""

    @abstractmethod
    def add(self, item: T) -> None:
        """Append an item. Never fails."""
        pass

    @abstractmethod
    def get_all(self) -> list[T]:
        """Return every stored item in insertion order."""
        pass

    @abstractmethod
    def find_first(self, predicate: Predicate[T]) -> T | None:
        """
        Find the first item matching a predicate.

        Args:
            predicate: Function returning True for the wanted item

        Returns:
            The first matching item, or None if nothing matches
        """
        pass

    @abstractmethod
    def remove_first(self, predicate: Predicate[T]) -> bool:
        """
        Remove the first item matching a predicate.

        Returns:
            True if an item was removed, False if nothing matched
        """
        pass
