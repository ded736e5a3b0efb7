"""Expense listing result entity."""

from dataclasses import dataclass, field

from .expense import ExpenseEntity


@dataclass(frozen=True)
class ExpenseSummaryEntity:
    """Result of a list/filter query.

    Attributes:
        expenses: Matching records, in stored order
        total: Sum of matching amounts rounded to 2 decimal digits
    """

    expenses: list[ExpenseEntity] = field(default_factory=list)
    total: float = 0.0

    @property
    def count(self) -> int:
        """Number of matching records."""
        return len(self.expenses)
