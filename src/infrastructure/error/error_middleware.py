"""Error handling decorator for entry points."""

import functools
from typing import Callable, Optional

from src.infrastructure.error.exception_handler import ExceptionHandler, get_exception_handler


def with_error_handling(error_handler: Optional[ExceptionHandler] = None):
    """
    Decorator turning raised exceptions into ErrorResponse objects.

    The wrapped function's normal return value passes through untouched;
    any exception is converted by the handler and returned instead.

    Args:
        error_handler: Optional error handler instance

    Returns:
        Decorator function
    """
    handler = error_handler or get_exception_handler()

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                return handler.handle(e)

        return wrapper

    return decorator
