"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class ExpenseItem(BaseModel):
    """Single expense record as exposed by the API."""

    id: int = Field(..., description="Unique identifier", ge=1)
    description: str = Field(..., description="Trimmed description")
    amount: float = Field(..., description="Amount rounded to 2 decimals", gt=0.0)
    category: str = Field(..., description="Trimmed category name")
    date: str = Field(..., description="Creation date (YYYY-MM-DD)")


class ExpenseListResponse(BaseModel):
    """Response DTO for the list/filter operation."""

    success: bool = Field(True, description="Whether the operation succeeded")
    data: list[ExpenseItem] = Field(default_factory=list, description="Matching records")
    total: float = Field(..., description="Sum of matching amounts, rounded to 2 decimals")
    count: int = Field(..., description="Number of matching records", ge=0)


class ExpenseCreateResponse(BaseModel):
    """Response DTO for the create operation."""

    success: bool = Field(True, description="Whether the operation succeeded")
    data: ExpenseItem = Field(..., description="The newly created record")
    message: str = Field(..., description="Human-readable status message")


class MessageResponse(BaseModel):
    """Response DTO for operations that only confirm success."""

    success: bool = Field(True, description="Whether the operation succeeded")
    message: str = Field(..., description="Human-readable status message")


class ErrorResponse(BaseModel):
    """Response DTO for a failed operation."""

    success: bool = Field(False, description="Always false for errors")
    error: str = Field(..., description="Human-readable error message")


class MethodNotAllowedResponse(BaseModel):
    """Response DTO for an unsupported HTTP method."""

    error: str = Field("Method not allowed", description="Human-readable error message")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    expenses: int = Field(..., description="Number of records currently stored", ge=0)
