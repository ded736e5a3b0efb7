"""Expense API - in-memory expense tracking over HTTP.

This package provides a layered architecture for a single expense collection:

Layers:
    - protocols: Interface contracts (ExpenseStore)
    - repositories: Data access implementations (in-memory store)
    - services: Business logic (filtering, validation, id assignment)
    - handlers: HTTP endpoint handlers (envelopes and status codes)
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from expense_api.services import ExpenseService

    service = ExpenseService.create()
    service.add_expense("Coffee", "4.5", "Food")
    ```

For HTTP API:
    ```python
    from expense_api.api.app import app
    ```
"""

__version__ = "0.1.0"

from expense_api.config import get_settings, settings
from expense_api.dto import CreateExpenseRequest, ListExpensesQuery
from expense_api.entities import ExpenseEntity, ExpenseSummaryEntity
from expense_api.exceptions import (
    ExpenseError,
    ExpenseNotFoundError,
    MethodNotAllowedError,
    ValidationError,
)
from expense_api.handlers import ExpenseHandler
from expense_api.protocols import ExpenseStore
from expense_api.repositories import InMemoryExpenseRepository
from expense_api.services import ExpenseService

__all__ = [
    "__version__",
    # Configuration
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "ExpenseStore",
    # Services (business logic)
    "ExpenseService",
    # Handlers (HTTP)
    "ExpenseHandler",
    # Repositories (data access)
    "InMemoryExpenseRepository",
    # Entities (domain models)
    "ExpenseEntity",
    "ExpenseSummaryEntity",
    # Errors
    "ExpenseError",
    "ValidationError",
    "ExpenseNotFoundError",
    "MethodNotAllowedError",
    # DTOs (API contracts)
    "CreateExpenseRequest",
    "ListExpensesQuery",
]
