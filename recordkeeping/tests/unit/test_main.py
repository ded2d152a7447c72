"""Smoke test for the demo entry point."""

from unittest.mock import patch

import pytest

from recordkeeping.main import main


@pytest.mark.unit
def test_main_runs_both_demos(report, report_buffer) -> None:
    assert main(report) == 0

    output = report_buffer.getvalue()
    assert output.startswith("=== Warehouse Inventory Management System ===\n")
    assert "=== Grocery Items ===" in output
    assert "=== Electronic Items ===" in output
    assert "=== Running Error Tests ===" in output
    assert "=== Healthcare System ===" in output
    assert "=== Prescriptions for Jane Smith (ID: 2) ===" in output
    assert "Prescription ID: 4, Medication: Vitamin D" in output


@pytest.mark.unit
def test_main_survives_demo_failure(report, report_buffer) -> None:
    with patch(
        "recordkeeping.main.WarehouseManager.run_error_cases",
        side_effect=RuntimeError("boom"),
    ):
        assert main(report) == 0

    assert "=== Healthcare System ===" in report_buffer.getvalue()
