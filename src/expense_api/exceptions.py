"""Domain-specific exceptions for the expense service.

Services raise these; the handler layer turns them into response envelopes
using the attached ``status_code``.
"""


class ExpenseError(Exception):
    """Base class for expected, caller-facing failures."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ExpenseError, ValueError):
    """Raised when request data does not meet validation requirements."""

    status_code = 400


class ExpenseNotFoundError(ExpenseError, LookupError):
    """Raised when an expense record cannot be located."""

    status_code = 404


class MethodNotAllowedError(ExpenseError):
    """Raised when the expense endpoint is called with an unsupported method."""

    status_code = 405

    def __init__(self, message: str = "Method not allowed") -> None:
        super().__init__(message)
