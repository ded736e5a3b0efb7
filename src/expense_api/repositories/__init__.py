"""Repository layer for data access.

This layer hides storage behind the ExpenseStore protocol. The
repositories are protocol-based (structural typing), not inheritance-based.
"""

from expense_api.protocols import ExpenseStore

from .memory_repository import SAMPLE_EXPENSES, InMemoryExpenseRepository

__all__ = [
    "ExpenseStore",
    "InMemoryExpenseRepository",
    "SAMPLE_EXPENSES",
]
