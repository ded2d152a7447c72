"""
Warehouse Manager Service

This module orchestrates the warehouse inventory demo: seeding electronics
and groceries, printing stock, increasing stock, removing items and
exercising the repository failure paths.

Domain failures are caught where the repository is called, logged, written
to the console report and returned as a failed :class:`OperationResult`.
"""

from datetime import date

from recordkeeping.application.dtos import OperationResult
from recordkeeping.application.services.sample_data import (
    sample_electronics,
    sample_groceries,
)
from recordkeeping.domain.entities import ElectronicItem, GroceryItem
from recordkeeping.domain.exceptions import (
    DomainException,
    DuplicateEntityException,
    EntityNotFoundException,
    InvalidQuantityException,
)
from recordkeeping.domain.repositories import KeyedRepository
from recordkeeping.infrastructure.logging import get_logger
from recordkeeping.infrastructure.repositories.memory import InMemoryKeyedRepository
from recordkeeping.presentation.console.report import ConsoleReport

logger = get_logger(__name__)


class WarehouseManager:
    """
    Service for managing warehouse stock.

    Electronics and groceries live in separate keyed repositories, so ids
    are only unique within one category.
    """

    def __init__(
        self,
        electronics: KeyedRepository[ElectronicItem] | None = None,
        groceries: KeyedRepository[GroceryItem] | None = None,
        report: ConsoleReport | None = None,
    ):
        """
        Initialize the warehouse manager.

        Args:
            electronics: Repository for electronic items (in-memory if omitted)
            groceries: Repository for grocery items (in-memory if omitted)
            report: Console writer for the human-readable output
        """
        self._electronics = electronics if electronics is not None else InMemoryKeyedRepository()
        self._groceries = groceries if groceries is not None else InMemoryKeyedRepository()
        self.report = report or ConsoleReport()

    @property
    def electronics(self) -> KeyedRepository[ElectronicItem]:
        return self._electronics

    @property
    def groceries(self) -> KeyedRepository[GroceryItem]:
        return self._groceries

    def seed_data(self, reference: date | None = None) -> OperationResult:
        """
        Populate both repositories with the fixed sample records.

        A failure stops seeding but never propagates to the caller.

        Args:
            reference: Date grocery expiries are computed from (today if omitted)
        """
        try:
            for electronic in sample_electronics():
                self._electronics.add(electronic)
            for grocery in sample_groceries(reference):
                self._groceries.add(grocery)
        except DomainException as exc:
            logger.error(f"Error seeding warehouse data: {exc}")
            self.report.line(f"Error seeding data: {exc}")
            return OperationResult.from_exception(exc)
        except Exception as exc:
            logger.exception("Unexpected error while seeding warehouse data")
            self.report.line(f"Error seeding data: {exc}")
            return OperationResult.from_exception(exc)

        logger.info(
            f"Seeded {len(self._electronics.get_all())} electronic and "
            f"{len(self._groceries.get_all())} grocery items"
        )
        self.report.line("Sample data added successfully.")
        return OperationResult.ok("Sample data added successfully.")

    def print_all_items(self, repo: KeyedRepository) -> OperationResult:
        """Write one report line per item held in ``repo``."""
        try:
            items = repo.get_all()
            self.report.lines(items)
        except Exception as exc:
            logger.exception("Unexpected error while printing items")
            self.report.line(f"Error printing items: {exc}")
            return OperationResult.from_exception(exc)
        return OperationResult.ok(f"Printed {len(items)} items", value=len(items))

    def increase_stock(self, repo: KeyedRepository, item_id: int, quantity: int) -> OperationResult:
        """
        Add ``quantity`` units to the stock of an item.

        Args:
            repo: Repository holding the item
            item_id: Id of the item
            quantity: Units to add; a negative value lowers stock

        Returns:
            Result whose ``value`` is the new quantity on success
        """
        try:
            item = repo.get_by_id(item_id)
            new_quantity = item.quantity + quantity
            repo.update_quantity(item_id, new_quantity)
        except (EntityNotFoundException, InvalidQuantityException) as exc:
            logger.warning(f"Could not increase stock for item {item_id}: {exc}")
            self.report.line(f"Error: {exc}")
            return OperationResult.from_exception(exc)
        except Exception as exc:
            logger.exception(f"Unexpected error while increasing stock for item {item_id}")
            self.report.line(f"Unexpected error: {exc}")
            return OperationResult.from_exception(exc)

        message = f"Stock increased for item {item_id}. New quantity: {new_quantity}"
        logger.info(message, extra={"extra": {"item_id": item_id, "quantity": new_quantity}})
        self.report.line(message)
        return OperationResult.ok(message, value=new_quantity)

    def remove_item_by_id(self, repo: KeyedRepository, item_id: int) -> OperationResult:
        """Remove an item, reporting success or the not-found failure."""
        try:
            repo.remove(item_id)
        except EntityNotFoundException as exc:
            logger.warning(f"Could not remove item {item_id}: {exc}")
            self.report.line(f"Error: {exc}")
            return OperationResult.from_exception(exc)
        except Exception as exc:
            logger.exception(f"Unexpected error while removing item {item_id}")
            self.report.line(f"Unexpected error: {exc}")
            return OperationResult.from_exception(exc)

        message = f"Item with ID {item_id} removed successfully."
        logger.info(message, extra={"extra": {"item_id": item_id}})
        self.report.line(message)
        return OperationResult.ok(message)

    def run_error_cases(self) -> list[OperationResult]:
        """
        Deliberately trigger each repository failure kind.

        Runs a duplicate add, a removal of a missing grocery and a negative
        quantity update, catching each at its call site.

        Returns:
            One result per case, in the order above
        """
        self.report.section("Running Error Tests")
        results: list[OperationResult] = []

        try:
            self._electronics.add(ElectronicItem(1, "Duplicate Laptop", 5, "HP", 12))
            results.append(OperationResult.ok("Duplicate item was accepted"))
        except DuplicateEntityException as exc:
            logger.info(f"Duplicate add rejected: {exc}")
            self.report.line(f"Caught expected exception: {exc}")
            results.append(OperationResult.from_exception(exc))

        results.append(self.remove_item_by_id(self._groceries, 999))

        try:
            self._electronics.update_quantity(1, -5)
            results.append(OperationResult.ok("Negative quantity was accepted"))
        except InvalidQuantityException as exc:
            logger.info(f"Negative quantity rejected: {exc}")
            self.report.line(f"Caught expected exception: {exc}")
            results.append(OperationResult.from_exception(exc))

        return results
