"""
Keyed Repository Interface

This module defines the interface for repositories that index stock records
by a unique integer id.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from recordkeeping.domain.entities.inventory_item import InventoryItem

ItemT = TypeVar("ItemT", bound=InventoryItem)


class KeyedRepository(ABC, Generic[ItemT]):
    """
    Interface for keyed repositories.

    Implementations enforce id uniqueness on insert and existence on
    lookup, update and delete.
    """

    @abstractmethod
    def add(self, item: ItemT) -> None:
        """
        Store a new item.

        Args:
            item: Item to store

        Raises:
            DuplicateEntityException: If an item with the same id exists
        """
        pass

    @abstractmethod
    def get_by_id(self, item_id: int) -> ItemT:
        """
        Get an item by id.

        The stored item itself is returned, so changes made through it are
        visible to later reads.

        Raises:
            EntityNotFoundException: If no item has this id
        """
        pass

    @abstractmethod
    def remove(self, item_id: int) -> None:
        """
        Delete an item by id.

        Raises:
            EntityNotFoundException: If no item has this id
        """
        pass

    @abstractmethod
    def get_all(self) -> list[ItemT]:
        """Return every stored item in insertion order."""
        pass

    @abstractmethod
    def update_quantity(self, item_id: int, new_quantity: int) -> None:
        """
        Replace the quantity of a stored item.

        The quantity is validated before the id is looked up.

        Raises:
            InvalidQuantityException: If ``new_quantity`` is negative
            EntityNotFoundException: If no item has this id
        """
        pass
