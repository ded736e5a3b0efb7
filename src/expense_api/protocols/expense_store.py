"""Expense storage protocol.

Defines the interface for any backend that can hold the ordered
collection of expense records.

Implementations can include:
- In-memory list guarded by a lock (default)
- Any other store that keeps insertion order and unique ids
"""

from typing import Protocol, runtime_checkable

from expense_api.entities import ExpenseEntity


@runtime_checkable
class ExpenseStore(Protocol):
    """Protocol for expense storage backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        from expense_api.protocols import ExpenseStore

        repo: ExpenseStore = InMemoryExpenseRepository()
        ```
    """

    def list_all(self) -> list[ExpenseEntity]:
        """Return a snapshot of every record in stored order.

        Returns:
            List of expense entities (oldest first)
        """
        ...

    def add(
        self,
        description: str,
        amount: float,
        category: str,
        date: str,
    ) -> ExpenseEntity:
        """Assign an identifier and append a new record.

        Args:
            description: Already trimmed description
            amount: Already rounded amount
            category: Already trimmed category
            date: ISO date string (YYYY-MM-DD)

        Returns:
            The stored entity, including its new identifier
        """
        ...

    def delete_by_id(self, expense_id: int | None) -> int:
        """Remove every record with the given identifier.

        Args:
            expense_id: The identifier to remove. None matches nothing.

        Returns:
            Number of records removed
        """
        ...

    def count_all(self) -> int:
        """Count records currently stored.

        Returns:
            Total number of records
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is usable.

        Returns:
            True if healthy, False otherwise
        """
        ...
