from collections.abc import Callable
from datetime import date
from typing import Any

from fastapi import FastAPI, Query, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from expense_api import __version__
from expense_api.api.dependencies import HandlerDep, lifespan
from expense_api.api.middleware import CORSHeadersMiddleware
from expense_api.config import settings
from expense_api.dto import (
    CreateExpenseRequest,
    HealthCheckResponse,
    ListExpensesQuery,
    MethodNotAllowedResponse,
)
from expense_api.exceptions import MethodNotAllowedError
from expense_api.handlers import error_response
from expense_api.logging_config import configure_logging
from expense_api.protocols import ExpenseStore

INVALID_BODY_MESSAGE = "Invalid request body"


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """Render 405 with the expense envelope; other HTTP errors keep FastAPI's format."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        error = MethodNotAllowedError()
        return JSONResponse(
            status_code=error.status_code,
            content=MethodNotAllowedResponse(error=error.message).model_dump(),
        )
    return await http_exception_handler(request, exc)


async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report a malformed request body as a 400 failure envelope."""
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)


def create_app(
    repository: ExpenseStore | None = None,
    clock: Callable[[], date] | None = None,
) -> FastAPI:
    """Build the expense API application.

    Args:
        repository: Store to serve. If None, the lifespan creates one from settings.
        clock: Date source for new records. If None, uses UTC today.

    Returns:
        Configured FastAPI application
    """
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Expense API",
        description="In-memory expense tracking with category and amount filters",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.repository = repository
    app.state.clock = clock

    app.add_middleware(CORSHeadersMiddleware)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, invalid_body_handler)  # type: ignore[arg-type]

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Expense API",
            "version": __version__,
            "description": "In-memory expense tracking with category and amount filters",
            "endpoints": {
                "expenses": settings.expenses_path,
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return await handler.health_check()

    @app.get(settings.expenses_path)
    async def list_expenses(
        handler: HandlerDep,
        category: str | None = Query(None, description="Category to match, ignoring case"),
        min_amount: str | None = Query(None, alias="minAmount"),
        max_amount: str | None = Query(None, alias="maxAmount"),
    ) -> JSONResponse:
        """
        List expenses, optionally filtered by category and amount range.

        Unparsable amount bounds are ignored.
        """
        query = ListExpensesQuery(category=category, min_amount=min_amount, max_amount=max_amount)
        return await handler.list_expenses(query)

    @app.post(settings.expenses_path)
    async def create_expense(
        handler: HandlerDep,
        payload: CreateExpenseRequest | None = None,
    ) -> JSONResponse:
        """Create an expense from a JSON body with description, amount and category."""
        return await handler.create_expense(payload or CreateExpenseRequest())

    @app.delete(settings.expenses_path)
    async def delete_expense(
        handler: HandlerDep,
        expense_id: str | None = Query(None, alias="id"),
    ) -> JSONResponse:
        """Delete the expense with the given ``id`` query parameter."""
        return await handler.delete_expense(expense_id)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "expense_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
