"""Unit tests for the console report writer."""

import pytest

from recordkeeping.presentation.console.report import ConsoleReport


@pytest.mark.unit
def test_lines_and_sections(report, report_buffer) -> None:
    report.title("Healthcare System")
    report.section("All Patients")
    report.lines(["a", 1])

    assert report_buffer.getvalue() == "=== Healthcare System ===\n\n=== All Patients ===\na\n1\n"


@pytest.mark.unit
def test_defaults_to_current_stdout(capsys) -> None:
    ConsoleReport().line("hello")

    assert capsys.readouterr().out == "hello\n"
