"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt


class CreateExpenseRequest(BaseModel):
    """Request DTO for creating an expense.

    Every field is optional at the schema level so that a missing or empty
    field is reported with the service's own message instead of a schema error.
    Booleans are kept as booleans so the service can reject them as amounts.
    """

    description: str | None = Field(None, description="What the money was spent on")
    amount: StrictFloat | StrictInt | StrictBool | str | None = Field(
        None,
        description="Positive amount, as a number or numeric text",
    )
    category: str | None = Field(None, description="Category name, e.g. 'Food'")


class ListExpensesQuery(BaseModel):
    """Query DTO for listing expenses.

    Numeric bounds stay as raw text: an unparsable bound is ignored, not rejected.
    """

    category: str | None = Field(None, description="Category to match, ignoring case")
    min_amount: str | None = Field(None, description="Inclusive lower bound")
    max_amount: str | None = Field(None, description="Inclusive upper bound")
