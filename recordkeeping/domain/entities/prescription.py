"""
Prescription Entity

A medication issued to a patient. ``patient_id`` refers to a
:class:`~recordkeeping.domain.entities.patient.Patient` but the reference is
not enforced.
"""

from dataclasses import dataclass
from datetime import date

from recordkeeping.domain.utils.datetime_utils import format_date


@dataclass(frozen=True)
class Prescription:
    id: int
    patient_id: int
    medication_name: str
    date_issued: date

    def __str__(self) -> str:
        return (
            f"Prescription ID: {self.id}, Medication: {self.medication_name}, "
            f"Date: {format_date(self.date_issued)}"
        )
