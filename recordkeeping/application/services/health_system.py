"""
Health System Service

This module orchestrates the healthcare demo: seeding patients and
prescriptions, grouping prescriptions by patient and printing per-patient
reports.

The prescription-by-patient index is a read cache. It is rebuilt wholesale
from the prescription repository and is dropped whenever prescriptions
change; it is never updated incrementally.
"""

from datetime import date

from recordkeeping.application.dtos import OperationResult
from recordkeeping.application.services.sample_data import (
    sample_patients,
    sample_prescriptions,
)
from recordkeeping.domain.entities import Patient, Prescription
from recordkeeping.domain.repositories import ListRepository
from recordkeeping.infrastructure.logging import get_logger
from recordkeeping.infrastructure.repositories.memory import InMemoryListRepository
from recordkeeping.presentation.console.report import ConsoleReport

logger = get_logger(__name__)


class HealthSystemApp:
    """Service for managing patients and their prescriptions."""

    def __init__(
        self,
        patients: ListRepository[Patient] | None = None,
        prescriptions: ListRepository[Prescription] | None = None,
        report: ConsoleReport | None = None,
    ):
        self._patients = patients if patients is not None else InMemoryListRepository()
        self._prescriptions = (
            prescriptions if prescriptions is not None else InMemoryListRepository()
        )
        self._prescription_map: dict[int, list[Prescription]] | None = None
        self.report = report or ConsoleReport()

    @property
    def patients(self) -> ListRepository[Patient]:
        return self._patients

    @property
    def prescriptions(self) -> ListRepository[Prescription]:
        return self._prescriptions

    @property
    def index_is_stale(self) -> bool:
        return self._prescription_map is None

    def seed_data(self, reference: date | None = None) -> OperationResult:
        """
        Add the sample patients and prescriptions.

        A failure stops seeding but never propagates to the caller.

        Args:
            reference: Date prescription issue dates are computed from
        """
        try:
            for patient in sample_patients():
                self._patients.add(patient)
            for prescription in sample_prescriptions(reference):
                self._prescriptions.add(prescription)
        except Exception as exc:
            logger.exception("Unexpected error while seeding health data")
            self.report.line(f"Error seeding data: {exc}")
            return OperationResult.from_exception(exc)
        finally:
            self.invalidate_prescription_map()

        logger.info(
            f"Seeded {len(self._patients.get_all())} patients and "
            f"{len(self._prescriptions.get_all())} prescriptions"
        )
        return OperationResult.ok("Sample data added successfully.")

    def add_prescription(self, prescription: Prescription) -> None:
        self._prescriptions.add(prescription)
        self.invalidate_prescription_map()

    def remove_prescription(self, prescription_id: int) -> bool:
        """Remove a prescription by id; returns False if it did not exist."""
        removed = self._prescriptions.remove_first(lambda p: p.id == prescription_id)
        if removed:
            self.invalidate_prescription_map()
        else:
            logger.warning(f"Prescription with ID {prescription_id} not found")
        return removed

    def invalidate_prescription_map(self) -> None:
        self._prescription_map = None

    def build_prescription_map(self) -> dict[int, list[Prescription]]:
        """
        Group every prescription by patient id in a single pass.

        Rebuilding replaces the previous index, so calling this twice yields
        the same grouping.

        Returns:
            Mapping of patient id to prescriptions in insertion order
        """
        prescription_map: dict[int, list[Prescription]] = {}
        for prescription in self._prescriptions.get_all():
            prescription_map.setdefault(prescription.patient_id, []).append(prescription)

        self._prescription_map = prescription_map
        logger.debug(f"Built prescription index for {len(prescription_map)} patients")
        return prescription_map

    def get_prescriptions_by_patient_id(self, patient_id: int) -> list[Prescription]:
        """Return a patient's prescriptions, or an empty list. Never raises."""
        if self._prescription_map is None:
            self.build_prescription_map()
        return list(self._prescription_map.get(patient_id, []))

    def print_all_patients(self) -> None:
        self.report.section("All Patients")
        self.report.lines(self._patients.get_all())

    def print_prescriptions_for_patient(self, patient_id: int) -> None:
        patient = self._patients.find_first(lambda p: p.id == patient_id)
        if patient is None:
            logger.warning(f"Patient with ID {patient_id} not found")
            self.report.line(f"Patient with ID {patient_id} not found.")
            return

        self.report.section(f"Prescriptions for {patient.name} (ID: {patient_id})")
        prescriptions = self.get_prescriptions_by_patient_id(patient_id)
        if prescriptions:
            self.report.lines(prescriptions)
        else:
            self.report.line("No prescriptions found for this patient.")
