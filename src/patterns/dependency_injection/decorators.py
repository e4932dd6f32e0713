"""
Injectable decorators for automatic dependency injection.

``@injectable`` lets a class be constructed with no arguments: typed
parameters the caller leaves out are resolved from the global container.
``@inject`` does the same for plain function calls.
"""

import inspect
from functools import wraps
from typing import Any, Callable, Dict, Optional, Type, TypeVar, get_type_hints

from src.infrastructure.logging.logger import get_logger
from src.patterns.dependency_injection.container import Container, get_container
from src.patterns.dependency_injection.exceptions import UnregisteredDependencyError

T = TypeVar("T")

logger = get_logger(__name__)


def injectable(cls: Type[T]) -> Type[T]:
    """
    Mark a class as injectable with automatic dependency resolution.

    Usage:
        @injectable
        class NotificationService:
            def __init__(self, sender: MessageSender):
                self.sender = sender

        service = NotificationService()  # sender comes from get_container()

    Explicitly passed arguments always win; positional arguments bypass
    resolution entirely.

    Args:
        cls: The class to make injectable

    Returns:
        The same class with enhanced constructor
    """
    original_init = cls.__init__

    @wraps(original_init)
    def enhanced_init(self, *args, **kwargs):
        """Enhanced constructor with automatic dependency resolution."""
        # If positional arguments are provided, use original constructor directly
        if args:
            return original_init(self, *args, **kwargs)
        resolved = _resolve_missing(original_init, kwargs, get_container(), cls.__name__)
        original_init(self, **resolved)

    cls.__init__ = enhanced_init
    cls._injectable = True
    cls._original_init = original_init

    logger.debug(f"Made {cls.__name__} injectable")
    return cls


def inject(func: Optional[Callable] = None, *, container: Optional[Container] = None):
    """
    Decorator filling a function's missing typed arguments from a container.

    Usable bare (``@inject``, global container) or as
    ``@inject(container=my_container)``.
    """

    def decorator(target: Callable) -> Callable:
        signature = inspect.signature(target)

        @wraps(target)
        def wrapper(*args, **kwargs):
            bound = signature.bind_partial(*args, **kwargs)
            resolved = _resolve_missing(
                target, bound.arguments, container or get_container(), target.__qualname__
            )
            bound.arguments.update(resolved)
            # Rebuild the call so *args and positional-only parameters stay positional
            return target(*bound.args, **bound.kwargs)

        return wrapper

    if func is not None:
        return decorator(func)
    return decorator


def _resolve_missing(
    func: Callable, provided: Dict[str, Any], container: Container, owner: str
) -> Dict[str, Any]:
    """Return provided arguments plus container-resolved values for missing typed parameters."""
    try:
        hints = get_type_hints(func)
    except Exception as e:
        logger.warning(f"Could not get type hints for {owner}: {e}")
        hints = {}

    resolved = dict(provided)
    for param_name, param in inspect.signature(func).parameters.items():
        if param_name == "self" or param_name in resolved:
            continue
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue
        annotation = hints.get(param_name)
        if annotation is None:
            continue
        try:
            resolved[param_name] = container.get(annotation)
        except UnregisteredDependencyError:
            if param.default is inspect.Parameter.empty:
                raise
            logger.debug(f"Using default for {owner}.{param_name}")
    return resolved


def is_injectable(cls: Type) -> bool:
    """Check if a class has been marked as injectable."""
    return cls.__dict__.get("_injectable", False)
