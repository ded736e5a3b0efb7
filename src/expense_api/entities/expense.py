"""Expense domain entity."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ExpenseEntity:
    """Domain entity for a single expense record.

    This is an internal representation used by services and repositories.
    For API contracts, use the DTO classes from the dto package.

    Attributes:
        id: Positive identifier, unique within the live collection
        description: Trimmed, non-empty description
        amount: Positive amount rounded to 2 fractional digits
        category: Trimmed, non-empty category name
        date: Creation date in ISO format (YYYY-MM-DD)
    """

    id: int
    description: str
    amount: float
    category: str
    date: str

    def to_dict(self) -> dict[str, Any]:
        """Return the record as a plain dictionary."""
        return asdict(self)
