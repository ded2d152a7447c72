"""
Domain entities package for the record-keeping demos.

This package contains the records held by the repositories: warehouse stock
items, patients and prescriptions.
"""

from recordkeeping.domain.entities.inventory_item import (
    ElectronicItem,
    GroceryItem,
    InventoryItem,
)
from recordkeeping.domain.entities.patient import Patient
from recordkeeping.domain.entities.prescription import Prescription

__all__ = [
    "ElectronicItem",
    "GroceryItem",
    "InventoryItem",
    "Patient",
    "Prescription",
]
