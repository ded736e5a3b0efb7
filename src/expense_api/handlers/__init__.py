"""Handler layer for HTTP endpoints.

Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .expense_handler import ExpenseHandler, error_response

__all__ = [
    "ExpenseHandler",
    "error_response",
]
