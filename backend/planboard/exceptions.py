"""
Structured exceptions and error responses for Planboard.

Provides consistent error handling across the API with:
- Custom exception classes
- Structured error response format
- FastAPI exception handlers
"""

from typing import Any, Dict, Optional, List
from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from planboard.logging_config import get_logger

logger = get_logger("error")


# =============================================================================
# Error Response Schema
# =============================================================================

class ErrorDetail(BaseModel):
    """Detail of a single error."""
    loc: Optional[List[str]] = None  # Location of error (e.g., ["body", "working_days"])
    msg: str
    type: str


class ErrorResponse(BaseModel):
    """Structured error response format."""
    error: str  # Error code (e.g., "not_found", "invalid_schedule_request")
    message: str  # Human-readable message
    details: Optional[List[ErrorDetail]] = None


# =============================================================================
# Custom Exceptions
# =============================================================================

class PlanboardException(Exception):
    """Base exception for all Planboard errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "internal_error",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[List[Dict[str, Any]]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class NotFoundError(PlanboardException):
    """
    Resource not found.

    Also used when the resource exists but belongs to another user, so
    callers cannot probe for other users' ids.
    """

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            message=f"{resource} with ID {resource_id} not found",
            error_code="not_found",
            status_code=status.HTTP_404_NOT_FOUND,
        )
        self.resource = resource
        self.resource_id = resource_id


class InvalidScheduleError(PlanboardException):
    """Schedule request cannot be run (empty calendar, zero capacity...)."""

    def __init__(self, message: str, field: str):
        super().__init__(
            message=message,
            error_code="invalid_schedule_request",
            status_code=422,
            details=[{
                "loc": ["body", field],
                "msg": message,
                "type": "value_error",
            }],
        )
        self.field = field


class AccountConflictError(PlanboardException):
    """Email already registered to a different identity."""

    def __init__(self, email: str):
        super().__init__(
            message=f"An account for {email} is already linked to another sign-in",
            error_code="account_conflict",
            status_code=status.HTTP_409_CONFLICT,
        )
        self.email = email


# =============================================================================
# Exception Handlers
# =============================================================================

async def planboard_exception_handler(request: Request, exc: PlanboardException) -> JSONResponse:
    """Handle PlanboardException and return structured response."""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=exc.error_code,
            message=exc.message,
            details=exc.details,
        ).model_dump(),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error="internal_error",
            message="An unexpected error occurred",
        ).model_dump(),
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(PlanboardException, planboard_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
