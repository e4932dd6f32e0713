"""Error handling infrastructure package."""

from src.infrastructure.error.error_middleware import with_error_handling
from src.infrastructure.error.exception_handler import (
    ErrorResponse,
    ExceptionHandler,
    get_exception_handler,
)

__all__: list[str] = [
    "ExceptionHandler",
    "ErrorResponse",
    "with_error_handling",
    "get_exception_handler",
]
