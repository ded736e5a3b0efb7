"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .expense import ExpenseEntity
from .expense_summary import ExpenseSummaryEntity

__all__ = ["ExpenseEntity", "ExpenseSummaryEntity"]
