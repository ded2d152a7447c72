"""
Shared fixtures for the record-keeping test suite.

Repositories and services are built fresh for every test; reports are
written to an in-memory buffer so tests can assert on the console output.
"""

import io
import logging
from datetime import date

import pytest

from recordkeeping.application.services import HealthSystemApp, WarehouseManager
from recordkeeping.domain.entities import ElectronicItem, GroceryItem
from recordkeeping.infrastructure.repositories.memory import (
    InMemoryKeyedRepository,
    InMemoryListRepository,
)
from recordkeeping.presentation.console.report import ConsoleReport

REFERENCE_DATE = date(2026, 10, 17)


class RecordingHandler(logging.Handler):
    """Handler that keeps emitted records in memory."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def pytest_configure(config) -> None:
    """Register custom markers used in the test suite."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "standalone: Tests that have no external dependencies")


@pytest.fixture
def reference_date() -> date:
    """Fixed date the sample data is seeded from."""
    return REFERENCE_DATE


@pytest.fixture
def report_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def report(report_buffer: io.StringIO) -> ConsoleReport:
    return ConsoleReport(report_buffer)


@pytest.fixture
def keyed_repository() -> InMemoryKeyedRepository:
    return InMemoryKeyedRepository()


@pytest.fixture
def list_repository() -> InMemoryListRepository:
    return InMemoryListRepository()


@pytest.fixture
def laptop() -> ElectronicItem:
    return ElectronicItem(1, "Laptop", 10, "Dell", 24)


@pytest.fixture
def milk() -> GroceryItem:
    return GroceryItem(1, "Milk", 50, date(2026, 10, 24))


@pytest.fixture
def warehouse(report: ConsoleReport, reference_date: date) -> WarehouseManager:
    """Warehouse manager seeded with the sample stock."""
    manager = WarehouseManager(report=report)
    manager.seed_data(reference_date)
    return manager


@pytest.fixture
def health_system(report: ConsoleReport, reference_date: date) -> HealthSystemApp:
    """Health system seeded with the sample patients and prescriptions."""
    app = HealthSystemApp(report=report)
    app.seed_data(reference_date)
    app.build_prescription_map()
    return app


@pytest.fixture
def record_logs():
    """
    Attach a recording handler to a module logger.

    Module loggers do not propagate, so ``caplog`` cannot see them.
    """
    attached: list[tuple[logging.Logger, RecordingHandler]] = []

    def _attach(logger: logging.Logger) -> list[logging.LogRecord]:
        handler = RecordingHandler()
        logger.addHandler(handler)
        attached.append((logger, handler))
        return handler.records

    yield _attach

    for logger, handler in attached:
        logger.removeHandler(handler)
