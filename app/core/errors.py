"""SellScope — API Error Types.

Every error a handler returns is one of these kinds. The exception handlers
in ``app.api.handlers`` render them as
``{"success": false, "error": {"code", "message", "details?"}}``.
"""

from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Machine-readable error kinds exposed to API callers."""

    INVALID_REQUEST = "INVALID_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    INSUFFICIENT_DATA = "INSUFFICIENT_DATA"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class APIError(Exception):
    """Base class for errors surfaced to the caller."""

    status_code: int = 500
    code: ErrorCode = ErrorCode.INTERNAL_ERROR
    default_message: str = "An internal server error occurred."

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict:
        error: dict[str, Any] = {"code": self.code.value, "message": self.message}
        if self.details is not None:
            error["details"] = self.details
        return error


class InvalidRequestError(APIError):
    status_code = 400
    code = ErrorCode.INVALID_REQUEST
    default_message = "Invalid request."


class NotFoundError(APIError):
    status_code = 404
    code = ErrorCode.NOT_FOUND
    default_message = "Resource not found."


class InsufficientDataError(APIError):
    status_code = 400
    code = ErrorCode.INSUFFICIENT_DATA
    default_message = "Not enough sales history for analysis."


class InternalError(APIError):
    """Unexpected failure. Never carries internal detail."""


class AIAnalysisError(Exception):
    """Raised when the primary (LLM) analysis path fails.

    Never reaches the caller: the pipeline catches it and falls back to the
    deterministic heuristic.
    """

    def __init__(self, message: str, code: str = "ANALYSIS_FAILED", retryable: bool = False):
        self.code = code
        self.retryable = retryable
        super().__init__(message)
