"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from expense_api.handlers import ExpenseHandler
from expense_api.repositories import InMemoryExpenseRepository
from expense_api.services import ExpenseService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> ExpenseHandler:
    """Dependency injection for ExpenseHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The ExpenseHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "expense_handler", None)
    if handler is None:
        raise RuntimeError("ExpenseHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores them in app.state:
    1. Repository (in-memory store) - taken from app.state.repository if
       create_app() was given one, otherwise created with settings
    2. Service (business logic) - owned by the handler
    3. Handler (HTTP endpoints) - stored in app.state.expense_handler

    The collection lives exactly as long as the application.

    Args:
        app: The FastAPI application instance

    Yields:
        None
    """
    repository = getattr(app.state, "repository", None) or InMemoryExpenseRepository.create()
    clock = getattr(app.state, "clock", None)

    expense_service = ExpenseService.create(repository=repository, clock=clock)
    expense_handler = ExpenseHandler(expense_service=expense_service)

    app.state.repository = repository
    app.state.expense_handler = expense_handler

    logger.info(
        "Expense store ready: %d record(s), id strategy %s",
        expense_service.count(),
        getattr(repository, "id_strategy", "custom"),
    )

    yield

    # Cleanup - remove from app.state
    del app.state.expense_handler
    del app.state.repository
    logger.info("Expense store discarded")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[ExpenseHandler, Depends(get_handler)]
