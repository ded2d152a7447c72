"""Unit tests for the domain exception taxonomy."""

import pytest

from recordkeeping.domain.enums import ErrorKind
from recordkeeping.domain.exceptions import (
    DomainException,
    DuplicateEntityException,
    EntityNotFoundException,
    InvalidQuantityException,
    RepositoryException,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("exception_class", "kind", "default_message"),
    [
        (DuplicateEntityException, ErrorKind.DUPLICATE_KEY, "Entity already exists"),
        (EntityNotFoundException, ErrorKind.NOT_FOUND, "Entity not found"),
        (InvalidQuantityException, ErrorKind.INVALID_QUANTITY, "Quantity cannot be negative"),
    ],
)
def test_repository_exceptions(exception_class, kind, default_message) -> None:
    exc = exception_class()

    assert isinstance(exc, RepositoryException)
    assert isinstance(exc, DomainException)
    assert exc.error_kind is kind
    assert str(exc) == default_message


@pytest.mark.unit
def test_custom_message_is_kept() -> None:
    exc = EntityNotFoundException("Item with ID 999 not found")

    assert exc.message == "Item with ID 999 not found"
    assert str(exc) == "Item with ID 999 not found"


@pytest.mark.unit
def test_base_exception_is_unexpected_kind() -> None:
    assert DomainException().error_kind is ErrorKind.UNEXPECTED
