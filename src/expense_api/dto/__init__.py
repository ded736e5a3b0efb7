"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import CreateExpenseRequest, ListExpensesQuery
from .responses import (
    ErrorResponse,
    ExpenseCreateResponse,
    ExpenseItem,
    ExpenseListResponse,
    HealthCheckResponse,
    MessageResponse,
    MethodNotAllowedResponse,
)

__all__ = [
    "CreateExpenseRequest",
    "ListExpensesQuery",
    "ExpenseItem",
    "ExpenseListResponse",
    "ExpenseCreateResponse",
    "MessageResponse",
    "ErrorResponse",
    "MethodNotAllowedResponse",
    "HealthCheckResponse",
]
