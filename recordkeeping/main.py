"""
Record-keeping demos entry point.

Runs the warehouse inventory demo followed by the healthcare prescription
demo. Every failure is logged and reported; the process always exits 0
after a normal run.
"""

import sys

from recordkeeping.application.services import HealthSystemApp, WarehouseManager
from recordkeeping.core.config import get_settings
from recordkeeping.infrastructure.logging import get_logger
from recordkeeping.presentation.console.report import ConsoleReport

logger = get_logger(__name__)


def run_warehouse_demo(report: ConsoleReport) -> WarehouseManager:
    report.title("Warehouse Inventory Management System")

    warehouse = WarehouseManager(report=report)
    warehouse.seed_data()

    report.section("Grocery Items")
    warehouse.print_all_items(warehouse.groceries)

    report.section("Electronic Items")
    warehouse.print_all_items(warehouse.electronics)

    warehouse.run_error_cases()
    return warehouse


def run_health_demo(report: ConsoleReport) -> HealthSystemApp:
    report.title("Healthcare System")

    health_system = HealthSystemApp(report=report)
    health_system.seed_data()
    health_system.build_prescription_map()
    health_system.print_all_patients()

    health_system.print_prescriptions_for_patient(1)
    health_system.print_prescriptions_for_patient(2)
    return health_system


def main(report: ConsoleReport | None = None) -> int:
    """
    Run both demos.

    Returns:
        Process exit code (always 0)
    """
    settings = get_settings()
    report = report or ConsoleReport()
    logger.info(f"Starting {settings.PROJECT_NAME} ({settings.ENVIRONMENT})")

    for demo in (run_warehouse_demo, run_health_demo):
        try:
            demo(report)
        except Exception:
            logger.exception(f"Unexpected error in {demo.__name__}")
        report.line()

    return 0


if __name__ == "__main__":
    sys.exit(main())
