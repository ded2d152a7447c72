"""Domain entity representing a patient.

Patients are created once at seed time and never mutated, so the dataclass
is frozen.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Patient:
    """A registered patient."""

    id: int
    name: str
    age: int
    gender: str

    def __str__(self) -> str:
        return f"Patient ID: {self.id}, Name: {self.name}, Age: {self.age}, Gender: {self.gender}"
