"""Decorator pattern: wrap a value at runtime to extend its behavior.

Three forms of wrapping:

- object wrappers: ``WithMilk(WithSugar(Coffee()))`` adds cost and
  description on top of the wrapped beverage, in any order and depth
- function wrappers: ``@log_calls`` logs and records every call
- method wrappers: ``decorate_method`` patches one instance's bound method
  without touching the class or other instances
"""

import functools
import types
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Beverage(ABC):
    """Component interface shared by beverages and their decorators."""

    @abstractmethod
    def cost(self) -> float:
        """Price of the beverage."""

    @abstractmethod
    def description(self) -> str:
        """Human readable description."""

    def __str__(self) -> str:
        return f"{self.description()} (${self.cost():.2f})"


class Coffee(Beverage):
    """Concrete component."""

    def __init__(self, base_cost: float = 2.0, name: str = "Coffee"):
        self._base_cost = base_cost
        self._name = name

    def cost(self) -> float:
        return self._base_cost

    def description(self) -> str:
        return self._name


class BeverageDecorator(Beverage):
    """Base decorator delegating to the wrapped beverage."""

    extra_cost: float = 0.0
    label: str = ""

    def __init__(self, beverage: Beverage):
        self._beverage = beverage

    @property
    def wrapped(self) -> Beverage:
        return self._beverage

    def cost(self) -> float:
        return self._beverage.cost() + self.extra_cost

    def description(self) -> str:
        return f"{self._beverage.description()}, {self.label}"


class WithMilk(BeverageDecorator):
    extra_cost = 0.5
    label = "milk"


class WithSugar(BeverageDecorator):
    extra_cost = 0.25
    label = "sugar"


class WithWhippedCream(BeverageDecorator):
    extra_cost = 0.75
    label = "whipped cream"


def log_calls(func: Optional[Callable] = None, *, level: str = "info", record: bool = True):
    """
    Decorator logging each call of the wrapped function.

    Works bare (``@log_calls``) or with options (``@log_calls(level="debug")``).
    When ``record`` is true, calls are kept on ``wrapper.calls`` as dicts with
    ``args``, ``kwargs`` and either ``result`` or ``error``. Exceptions are
    logged and re-raised unchanged.
    """

    def decorator(target: Callable) -> Callable:
        log = getattr(logger, level)
        calls: List[Dict[str, Any]] = []

        @functools.wraps(target)
        def wrapper(*args, **kwargs):
            log(f"Calling {target.__qualname__}", call_args=args, call_kwargs=kwargs)
            entry: Dict[str, Any] = {"args": args, "kwargs": kwargs}
            try:
                result = target(*args, **kwargs)
            except Exception as e:
                logger.error(f"{target.__qualname__} raised {type(e).__name__}: {e}")
                entry["error"] = e
                if record:
                    calls.append(entry)
                raise
            log(f"{target.__qualname__} returned", result=result)
            entry["result"] = result
            if record:
                calls.append(entry)
            return result

        wrapper.calls = calls
        return wrapper

    if func is not None:
        return decorator(func)
    return decorator


def decorate_method(instance: Any, method_name: str, wrapper: Callable[[Callable], Callable]) -> Callable:
    """
    Replace one instance's method with ``wrapper(original)`` at runtime.

    Only the given instance is affected; the class and its other instances
    keep the original behavior.

    Args:
        instance: Object whose method is wrapped
        method_name: Name of the method to wrap
        wrapper: Receives the original bound method, returns its replacement

    Returns:
        The original bound method, so callers can restore it

    Raises:
        AttributeError: If the instance has no such attribute
        TypeError: If the attribute is not callable
    """
    original = getattr(instance, method_name)
    if not callable(original):
        raise TypeError(f"{type(instance).__name__}.{method_name} is not callable")

    replacement = wrapper(original)
    if isinstance(replacement, types.FunctionType) and not hasattr(replacement, "__wrapped__"):
        functools.update_wrapper(replacement, original)
    setattr(instance, method_name, replacement)
    logger.debug(f"Decorated {type(instance).__name__}.{method_name} on one instance")
    return original


def restore_method(instance: Any, method_name: str) -> None:
    """Undo decorate_method by dropping the instance-level override."""
    if method_name in vars(instance):
        delattr(instance, method_name)
