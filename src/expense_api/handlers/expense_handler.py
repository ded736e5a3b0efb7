"""HTTP handlers for expense operations.

Handlers convert between DTOs (API contracts) and service calls.
They own HTTP concerns: status codes, the response envelope and the
collapse of unexpected faults into a generic per-operation message.
"""

import logging

from fastapi import status
from fastapi.responses import JSONResponse

from expense_api.dto import (
    CreateExpenseRequest,
    ErrorResponse,
    ExpenseCreateResponse,
    ExpenseItem,
    ExpenseListResponse,
    HealthCheckResponse,
    ListExpensesQuery,
    MessageResponse,
)
from expense_api.entities import ExpenseEntity
from expense_api.exceptions import ExpenseError
from expense_api.services import ExpenseService

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch expenses"
ADD_FAILED_MESSAGE = "Failed to add expense"
DELETE_FAILED_MESSAGE = "Failed to delete expense"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a failure envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def _to_item(expense: ExpenseEntity) -> ExpenseItem:
    return ExpenseItem(**expense.to_dict())


class ExpenseHandler:
    """HTTP handlers for expense operations.

    This handler delegates business logic to ExpenseService and handles:
    - Converting entities to DTOs
    - Setting appropriate status codes
    - Mapping domain errors to envelopes

    Example:
        ```python
        from expense_api.services import ExpenseService
        from expense_api.handlers import ExpenseHandler

        handler = ExpenseHandler(expense_service=ExpenseService.create())

        @app.post("/api/expenses")
        async def create_expense(request: CreateExpenseRequest):
            return await handler.create_expense(request)
        ```
    """

    def __init__(self, expense_service: ExpenseService) -> None:
        """Initialize the expense handler.

        Args:
            expense_service: The expense service for business logic (required).
        """
        self._expenses = expense_service

    async def list_expenses(self, query: ListExpensesQuery) -> JSONResponse:
        """Handle GET requests on the expense endpoint.

        Args:
            query: Optional category and amount bounds

        Returns:
            200 with matching records, their total and count
        """
        try:
            summary = self._expenses.list_expenses(
                category=query.category,
                min_amount=query.min_amount,
                max_amount=query.max_amount,
            )
            body = ExpenseListResponse(
                data=[_to_item(e) for e in summary.expenses],
                total=summary.total,
                count=summary.count,
            )
            return JSONResponse(status_code=status.HTTP_200_OK, content=body.model_dump())

        except Exception:
            logger.exception("Unexpected error listing expenses")
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, FETCH_FAILED_MESSAGE)

    async def create_expense(self, request: CreateExpenseRequest) -> JSONResponse:
        """Handle POST requests on the expense endpoint.

        Args:
            request: The create expense request DTO

        Returns:
            201 with the new record, or 400 when validation fails
        """
        try:
            expense = self._expenses.add_expense(
                description=request.description,
                amount=request.amount,
                category=request.category,
            )
            body = ExpenseCreateResponse(
                data=_to_item(expense),
                message="Expense added successfully",
            )
            return JSONResponse(status_code=status.HTTP_201_CREATED, content=body.model_dump())

        except ExpenseError as e:
            logger.warning("Rejected new expense: %s", e.message)
            return error_response(e.status_code, e.message)
        except Exception:
            logger.exception("Unexpected error adding expense")
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, ADD_FAILED_MESSAGE)

    async def delete_expense(self, raw_id: str | None) -> JSONResponse:
        """Handle DELETE requests on the expense endpoint.

        Args:
            raw_id: The ``id`` query parameter as received

        Returns:
            200 on success, 400 without an id, 404 when nothing matched
        """
        try:
            self._expenses.delete_expense(raw_id)
            body = MessageResponse(message="Expense deleted successfully")
            return JSONResponse(status_code=status.HTTP_200_OK, content=body.model_dump())

        except ExpenseError as e:
            logger.warning("Rejected delete of expense %r: %s", raw_id, e.message)
            return error_response(e.status_code, e.message)
        except Exception:
            logger.exception("Unexpected error deleting expense %r", raw_id)
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, DELETE_FAILED_MESSAGE)

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Returns:
            HealthCheckResponse with health status and record count
        """
        is_healthy = self._expenses.is_healthy()

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            expenses=self._expenses.count(),
        )
