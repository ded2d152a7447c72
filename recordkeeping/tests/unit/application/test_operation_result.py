"""Unit tests for the operation result DTO."""

import pytest

from recordkeeping.application.dtos import OperationResult
from recordkeeping.domain.enums import ErrorKind
from recordkeeping.domain.exceptions import InvalidQuantityException


@pytest.mark.unit
def test_ok_result() -> None:
    result = OperationResult.ok("done", value=15)

    assert result.success is True
    assert result.error_kind is None
    assert result.value == 15


@pytest.mark.unit
def test_result_from_domain_exception() -> None:
    result = OperationResult.from_exception(InvalidQuantityException())

    assert result.success is False
    assert result.error_kind is ErrorKind.INVALID_QUANTITY
    assert result.message == "Quantity cannot be negative"


@pytest.mark.unit
def test_result_from_unexpected_exception() -> None:
    result = OperationResult.from_exception(KeyError("missing"))

    assert result.error_kind is ErrorKind.UNEXPECTED
    assert result.model_dump()["success"] is False
