"""
In-Memory List Repository Module.

This module provides a list-backed implementation of the list repository
interface used for patients and prescriptions. Lookups are linear scans.
"""

from recordkeeping.domain.repositories.list_repository import ListRepository, Predicate, T


class InMemoryListRepository(ListRepository[T]):
    """In-memory implementation of the list repository."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def add(self, item: T) -> None:
        self._items.append(item)

    def get_all(self) -> list[T]:
        return list(self._items)

    def find_first(self, predicate: Predicate[T]) -> T | None:
        return next((item for item in self._items if predicate(item)), None)

    def remove_first(self, predicate: Predicate[T]) -> bool:
        for index, item in enumerate(self._items):
            if predicate(item):
                del self._items[index]
                return True
        return False

    def __len__(self) -> int:
        return len(self._items)
