"""
Fixed sample records used to seed the demos.

Dates are relative to ``reference`` (today's UTC date by default) so grocery
expiries always lie in the future and prescriptions in the past.
"""

from datetime import date

from recordkeeping.domain.entities import (
    ElectronicItem,
    GroceryItem,
    Patient,
    Prescription,
)
from recordkeeping.domain.utils.datetime_utils import days_from_today


def sample_electronics() -> list[ElectronicItem]:
    return [
        ElectronicItem(1, "Laptop", 10, "Dell", 24),
        ElectronicItem(2, "Smartphone", 25, "Samsung", 12),
        ElectronicItem(3, "Tablet", 12, "Apple", 12),
    ]


def sample_groceries(reference: date | None = None) -> list[GroceryItem]:
    return [
        GroceryItem(1, "Milk", 50, days_from_today(7, reference)),
        GroceryItem(2, "Bread", 30, days_from_today(3, reference)),
        GroceryItem(3, "Eggs", 100, days_from_today(14, reference)),
    ]


def sample_patients() -> list[Patient]:
    return [
        Patient(1, "John Doe", 35, "Male"),
        Patient(2, "Jane Smith", 28, "Female"),
        Patient(3, "Bob Johnson", 45, "Male"),
    ]


def sample_prescriptions(reference: date | None = None) -> list[Prescription]:
    return [
        Prescription(1, 1, "Aspirin", days_from_today(-10, reference)),
        Prescription(2, 1, "Ibuprofen", days_from_today(-5, reference)),
        Prescription(3, 2, "Paracetamol", days_from_today(-3, reference)),
        Prescription(4, 2, "Vitamin D", days_from_today(-1, reference)),
        Prescription(5, 3, "Blood Pressure Medication", days_from_today(-7, reference)),
    ]
