"""Protocol interfaces for swappable implementations.

Protocols use structural typing, so the service layer only depends
on the shape of a store, never on a concrete class.
"""

from .expense_store import ExpenseStore

__all__ = [
    "ExpenseStore",
]
