"""
Inventory Item Entities

This module defines the warehouse stock records: electronic items and
grocery items. Both expose an integer id, a name and a mutable,
non-negative quantity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Protocol, runtime_checkable

from recordkeeping.domain.exceptions import InvalidQuantityException
from recordkeeping.domain.utils.datetime_utils import format_date


@runtime_checkable
class InventoryItem(Protocol):
    """Structural type shared by every stock record held in a keyed repository."""

    id: int
    name: str
    quantity: int


def ensure_valid_quantity(quantity: int) -> int:
    """Return ``quantity`` unchanged, or raise if it is negative."""
    if quantity < 0:
        raise InvalidQuantityException("Quantity cannot be negative")
    return quantity


@dataclass
class ElectronicItem:
    """An electronic device held in stock."""

    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int = field(default=0)

    def __setattr__(self, name: str, value: object) -> None:
        # Runs for the dataclass __init__ as well as later assignments
        if name == "quantity":
            ensure_valid_quantity(value)
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return (
            f"Electronic: ID={self.id}, Name={self.name}, Quantity={self.quantity}, "
            f"Brand={self.brand}, Warranty={self.warranty_months} months"
        )


@dataclass
class GroceryItem:
    """A perishable grocery product held in stock."""

    id: int
    name: str
    quantity: int
    expiry_date: date

    def __setattr__(self, name: str, value: object) -> None:
        # Runs for the dataclass __init__ as well as later assignments
        if name == "quantity":
            ensure_valid_quantity(value)
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return (
            f"Grocery: ID={self.id}, Name={self.name}, Quantity={self.quantity}, "
            f"Expiry={format_date(self.expiry_date)}"
        )
