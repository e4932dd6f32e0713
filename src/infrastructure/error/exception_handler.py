"""Exception to structured error response conversion."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from src.domain.core.exceptions import (
    ConfigurationError,
    DemoNotFoundError,
    DomainException,
    UnknownTypeError,
    ValidationError,
)
from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ErrorResponse(BaseModel):
    """Structured error description."""

    error_code: str
    message: str
    status_code: int = 500
    details: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the dictionary shape printed by the CLI."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ExceptionHandler:
    """Maps exceptions onto ErrorResponse objects with HTTP-like status codes."""

    STATUS_CODES: Dict[type, int] = {
        ValidationError: 400,
        UnknownTypeError: 400,
        DemoNotFoundError: 404,
        ConfigurationError: 500,
    }

    def __init__(self, include_internal_details: bool = False):
        self.include_internal_details = include_internal_details

    def handle(self, error: Exception) -> ErrorResponse:
        """Convert an exception into an ErrorResponse and log it."""
        if isinstance(error, DomainException):
            response = ErrorResponse(
                error_code=error.error_code,
                message=error.message,
                status_code=self._status_for(error),
                details=error.details,
            )
            logger.warning(f"{type(error).__name__}: {error.message}")
        else:
            response = ErrorResponse(
                error_code="INTERNAL_ERROR",
                message=str(error) if self.include_internal_details else "An internal error occurred",
                status_code=500,
                details={"type": type(error).__name__} if self.include_internal_details else None,
            )
            logger.error(f"Unhandled {type(error).__name__}: {error}", exc_info=error)
        return response

    def _status_for(self, error: DomainException) -> int:
        for error_type, status in self.STATUS_CODES.items():
            if isinstance(error, error_type):
                return status
        return 500


_exception_handler: Optional[ExceptionHandler] = None


def get_exception_handler() -> ExceptionHandler:
    """Get the shared exception handler."""
    global _exception_handler
    if _exception_handler is None:
        _exception_handler = ExceptionHandler(include_internal_details=True)
    return _exception_handler
