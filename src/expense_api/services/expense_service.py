"""Expense service for core business logic.

This service applies filtering and validation rules and delegates
storage to an ExpenseStore implementation.
"""

import logging
from collections.abc import Callable
from datetime import date, datetime, timezone

from expense_api.entities import ExpenseEntity, ExpenseSummaryEntity
from expense_api.exceptions import ExpenseNotFoundError, ValidationError
from expense_api.protocols import ExpenseStore
from expense_api.repositories import InMemoryExpenseRepository
from expense_api.utils import is_present, parse_float, parse_int, round_amount

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields: description, amount, category"
NON_POSITIVE_AMOUNT_MESSAGE = "Amount must be a positive number"
ID_REQUIRED_MESSAGE = "Expense ID is required"
NOT_FOUND_MESSAGE = "Expense not found"


def utc_today() -> date:
    """Return the current date on the UTC clock."""
    return datetime.now(timezone.utc).date()


class ExpenseService:
    """Core expense orchestration service.

    This service depends on the ExpenseStore PROTOCOL, not on a concrete
    implementation, so tests and alternative stores can be swapped in.

    Example:
        ```python
        from expense_api.services import ExpenseService

        service = ExpenseService.create()
        service.add_expense("Coffee", "4.5", "Food")
        summary = service.list_expenses(category="food")
        ```
    """

    def __init__(
        self,
        repository: ExpenseStore,
        clock: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the expense service.

        Args:
            repository: Expense storage backend (required).
            clock: Returns the creation date for new records. Defaults to UTC today.
        """
        self._repository = repository
        self._clock = clock or utc_today

    @classmethod
    def create(
        cls,
        repository: ExpenseStore | None = None,
        clock: Callable[[], date] | None = None,
    ) -> "ExpenseService":
        """Factory method to create ExpenseService with sensible defaults.

        Args:
            repository: Storage backend. If None, a seeded in-memory store is used.
            clock: Date source for new records. If None, uses UTC today.

        Returns:
            Configured ExpenseService instance
        """
        return cls(
            repository=repository or InMemoryExpenseRepository.create(),
            clock=clock,
        )

    def list_expenses(
        self,
        category: str | None = None,
        min_amount: str | float | None = None,
        max_amount: str | float | None = None,
    ) -> ExpenseSummaryEntity:
        """List expenses matching every given filter.

        Business logic:
        1. Start from a snapshot of the full collection
        2. Keep records whose category equals ``category`` ignoring case
        3. Keep records with amount >= ``min_amount`` if it parses
        4. Keep records with amount <= ``max_amount`` if it parses
        5. Sum the remaining amounts

        Empty or unparsable filters are skipped rather than rejected.

        Args:
            category: Category name to match
            min_amount: Inclusive lower bound on amount
            max_amount: Inclusive upper bound on amount

        Returns:
            ExpenseSummaryEntity with matching records and their total
        """
        expenses = self._repository.list_all()

        if category:
            wanted = category.lower()
            expenses = [e for e in expenses if e.category.lower() == wanted]

        if min_amount:
            low = parse_float(min_amount)
            if low is not None:
                expenses = [e for e in expenses if e.amount >= low]

        if max_amount:
            high = parse_float(max_amount)
            if high is not None:
                expenses = [e for e in expenses if e.amount <= high]

        total = round_amount(sum(e.amount for e in expenses))
        return ExpenseSummaryEntity(expenses=expenses, total=total)

    def add_expense(
        self,
        description: str | None,
        amount: str | float | bool | None,
        category: str | None,
    ) -> ExpenseEntity:
        """Validate and store a new expense.

        Args:
            description: Free text, trimmed before storage
            amount: Number or numeric text, must be positive
            category: Category name, trimmed before storage

        Returns:
            The stored ExpenseEntity

        Raises:
            ValidationError: If a field is missing or the amount is not positive
        """
        if not (is_present(description) and is_present(amount) and is_present(category)):
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        value = parse_float(amount)
        if value is None or value <= 0:
            raise ValidationError(NON_POSITIVE_AMOUNT_MESSAGE)

        expense = self._repository.add(
            description=description.strip(),
            amount=round_amount(value),
            category=category.strip(),
            date=self._clock().isoformat(),
        )
        logger.info(
            "Added expense %d: %s (%.2f, %s)",
            expense.id,
            expense.description,
            expense.amount,
            expense.category,
        )
        return expense

    def delete_expense(self, raw_id: str | int | None) -> None:
        """Delete every expense with the given identifier.

        Args:
            raw_id: Identifier as received. Unparsable text matches nothing.

        Raises:
            ValidationError: If no identifier was given
            ExpenseNotFoundError: If nothing was removed
        """
        if raw_id is None or raw_id == "":
            raise ValidationError(ID_REQUIRED_MESSAGE)

        removed = self._repository.delete_by_id(parse_int(raw_id))
        if removed == 0:
            raise ExpenseNotFoundError(NOT_FOUND_MESSAGE)

        logger.info("Deleted expense %s", raw_id)

    def count(self) -> int:
        """Get the number of stored expenses."""
        return self._repository.count_all()

    def is_healthy(self) -> bool:
        """Check if the underlying store is usable."""
        return self._repository.health_check()

    @property
    def repository(self) -> ExpenseStore:
        """Get the underlying repository (for testing)."""
        return self._repository
