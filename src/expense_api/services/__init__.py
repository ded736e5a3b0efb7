"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from expense_api.services import ExpenseService

    # Using factory method (recommended)
    service = ExpenseService.create()

    # Or manual creation
    service = ExpenseService(repository=repo)
    ```
"""

from .expense_service import ExpenseService

__all__ = [
    "ExpenseService",
]
