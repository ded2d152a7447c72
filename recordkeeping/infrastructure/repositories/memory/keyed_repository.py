"""
In-Memory Keyed Repository Module.

This module provides a dict-backed implementation of the keyed repository
interface used for warehouse stock.
"""

from recordkeeping.domain.exceptions import (
    DuplicateEntityException,
    EntityNotFoundException,
    InvalidQuantityException,
)
from recordkeeping.domain.repositories.keyed_repository import ItemT, KeyedRepository


class InMemoryKeyedRepository(KeyedRepository[ItemT]):
    """
    In-memory implementation of the keyed repository.

    Items are kept in a dict keyed by id; dict ordering gives insertion
    order for ``get_all``.
    """

    def __init__(self) -> None:
        """Initialize the repository with empty storage."""
        self._items: dict[int, ItemT] = {}

    def add(self, item: ItemT) -> None:
        if item.id in self._items:
            raise DuplicateEntityException(f"Item with ID {item.id} already exists")
        self._items[item.id] = item

    def get_by_id(self, item_id: int) -> ItemT:
        try:
            return self._items[item_id]
        except KeyError:
            raise EntityNotFoundException(f"Item with ID {item_id} not found") from None

    def remove(self, item_id: int) -> None:
        if item_id not in self._items:
            raise EntityNotFoundException(f"Item with ID {item_id} not found")
        del self._items[item_id]

    def get_all(self) -> list[ItemT]:
        return list(self._items.values())

    def update_quantity(self, item_id: int, new_quantity: int) -> None:
        if new_quantity < 0:
            raise InvalidQuantityException("Quantity cannot be negative")

        self.get_by_id(item_id).quantity = new_quantity

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items
