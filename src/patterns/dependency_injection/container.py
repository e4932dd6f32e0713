"""
Dependency Injection Container implementation.

Consumers declare collaborators as typed constructor parameters; the
container supplies them. Registrations decide how a type is produced:

- instance: a pre-built object, returned as-is
- singleton: built once on first request, then reused
- factory: ``factory(container)`` called on every request
- type: interface mapped onto an implementation, built on every request

Unregistered concrete classes are auto-wired from their constructor type
hints.
"""

import inspect
import time
import types
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Type, TypeVar, Union, cast, get_args, get_origin, get_type_hints

from src.infrastructure.logging.logger import get_logger
from src.patterns.dependency_injection.exceptions import (
    CircularDependencyError,
    DependencyResolutionError,
    FactoryError,
    InstantiationError,
    UnregisteredDependencyError,
    UntypedParameterError,
)

T = TypeVar("T")
logger = get_logger(__name__)

_PRIMITIVE_TYPES = (str, int, float, bool, bytes, list, dict, tuple, set, type(None))


@contextmanager
def timed_operation(operation_name: str) -> Iterator[None]:
    """Context manager to time and log an operation."""
    start_time = time.time()
    try:
        yield
    finally:
        elapsed_time = time.time() - start_time
        logger.debug(f"{operation_name} completed in {elapsed_time:.4f}s")


class Lifetime(str, Enum):
    """How long a resolved dependency lives."""

    INSTANCE = "instance"
    SINGLETON = "singleton"
    TRANSIENT = "transient"


@dataclass
class Registration:
    """Registration information for one dependency type."""

    dependency_type: Any
    lifetime: Lifetime
    implementation: Optional[type] = None
    factory: Optional[Callable[["Container"], Any]] = None
    instance: Any = None
    built: bool = False


class Container:
    """Dependency injection container with constructor auto-wiring."""

    def __init__(self):
        self._registrations: Dict[Any, Registration] = {}
        self._resolving: List[Any] = []

    def register_instance(self, cls: Type[T], instance: T) -> None:
        """
        Register a specific instance for a type.

        Args:
            cls: Class type to register
            instance: Instance to use
        """
        self._registrations[cls] = Registration(cls, Lifetime.INSTANCE, instance=instance, built=True)
        logger.debug(f"Registered instance for {_name(cls)}")

    def register_singleton(self, cls: Type[T], implementation_or_factory: Any = None) -> None:
        """
        Register a singleton type, built lazily on first resolution.

        Args:
            cls: Class type to register
            implementation_or_factory: Optional implementation class or
                ``factory(container)``; defaults to cls itself
        """
        target = implementation_or_factory if implementation_or_factory is not None else cls
        if isinstance(target, type):
            registration = Registration(cls, Lifetime.SINGLETON, implementation=target)
        elif callable(target):
            registration = Registration(cls, Lifetime.SINGLETON, factory=target)
        else:
            raise TypeError(f"Singleton for {_name(cls)} must be a class or factory, got {type(target).__name__}")
        self._registrations[cls] = registration
        logger.debug(f"Registered singleton type {_name(cls)}")

    def register_factory(self, cls: Type[T], factory: Callable[["Container"], T]) -> None:
        """
        Register a factory function for a type; called on every resolution.

        Args:
            cls: Class type to register
            factory: Receives the container, returns a new instance
        """
        if not callable(factory):
            raise TypeError(f"Factory for {_name(cls)} must be callable")
        self._registrations[cls] = Registration(cls, Lifetime.TRANSIENT, factory=factory)
        logger.debug(f"Registered factory for {_name(cls)}")

    def register_type(self, interface_type: Type[T], implementation_type: Type[T]) -> None:
        """Register an interface to implementation mapping (transient)."""
        self._registrations[interface_type] = Registration(
            interface_type, Lifetime.TRANSIENT, implementation=implementation_type
        )
        logger.debug(f"Registered type mapping: {_name(interface_type)} -> {_name(implementation_type)}")

    def has(self, cls: Any) -> bool:
        """Check if a type is registered with the container."""
        return cls in self._registrations

    def unregister(self, cls: Any) -> bool:
        """Remove a registration; returns False if there was none."""
        return self._registrations.pop(cls, None) is not None

    def clear(self) -> None:
        """Clear all registrations."""
        self._registrations.clear()
        logger.debug("Cleared all registrations")

    def get_registrations(self) -> Dict[Any, Registration]:
        return dict(self._registrations)

    def get(self, cls: Type[T]) -> T:
        """
        Get an instance of the specified type.

        Raises:
            DependencyResolutionError: If the dependency cannot be resolved
        """
        return cast(T, self._resolve(cls))

    def get_optional(self, cls: Type[T]) -> Optional[T]:
        """Get an instance, or None when the type cannot be resolved."""
        try:
            return self.get(cls)
        except UnregisteredDependencyError:
            return None

    def _resolve(self, cls: Any) -> Any:
        # Factories re-enter through get(), so the chain lives on the container
        if cls in self._resolving:
            raise CircularDependencyError(self._resolving + [cls])
        self._resolving.append(cls)
        try:
            with timed_operation(f"Resolve {_name(cls)}"):
                registration = self._registrations.get(cls)
                if registration is None:
                    return self._auto_wire(cls)

                if registration.built:
                    return registration.instance

                if registration.lifetime == Lifetime.SINGLETON:
                    instance = self._build(registration)
                    registration.instance = instance
                    registration.built = True
                    logger.debug(f"Singleton instance created for {_name(cls)}")
                    return instance

                return self._build(registration)
        finally:
            self._resolving.pop()

    def _build(self, registration: Registration) -> Any:
        if registration.factory is not None:
            try:
                return registration.factory(self)
            except DependencyResolutionError:
                raise
            except Exception as e:
                logger.error(f"Factory failed to create instance of {_name(registration.dependency_type)}: {e}")
                raise FactoryError(registration.dependency_type, f"factory function failed: {e}", e) from e
        return self._create_instance(registration.implementation)

    def _auto_wire(self, cls: Any) -> Any:
        if not isinstance(cls, type) or cls in _PRIMITIVE_TYPES or inspect.isabstract(cls):
            raise UnregisteredDependencyError(cls)
        logger.debug(f"No registration found for {_name(cls)}, attempting auto-wiring")
        return self._create_instance(cls)

    def _create_instance(self, cls: type) -> Any:
        """Build cls, resolving each typed constructor parameter."""
        # An inherited marker describes the parent constructor, not cls
        init = cls.__dict__.get("_original_init", cls.__init__)
        try:
            signature = inspect.signature(init)
            hints = get_type_hints(init)
        except (ValueError, TypeError, NameError) as e:
            raise InstantiationError(cls, f"failed to inspect constructor: {e}", cause=e) from e

        kwargs: Dict[str, Any] = {}
        for param in list(signature.parameters.values())[1:]:
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue
            has_default = param.default is not inspect.Parameter.empty
            annotation = hints.get(param.name)

            if annotation is None:
                if has_default:
                    continue
                raise UntypedParameterError(cls, param.name)

            optional = _is_optional(annotation)
            target = _optional_inner(annotation) if optional else annotation

            if target in _PRIMITIVE_TYPES and not self.has(target):
                if has_default:
                    continue
                raise UnregisteredDependencyError(target, cls, param.name)

            try:
                kwargs[param.name] = self._resolve(target)
            except UnregisteredDependencyError as e:
                if has_default:
                    continue
                if optional:
                    kwargs[param.name] = None
                    continue
                raise UnregisteredDependencyError(target, cls, param.name) from e

        try:
            instance = cls(**kwargs)
        except Exception as e:
            logger.error(f"Failed to instantiate {_name(cls)} with resolved dependencies: {e}")
            raise InstantiationError(cls, f"constructor failed: {e}", cause=e) from e
        logger.debug(f"Successfully created instance of {_name(cls)}")
        return instance


def _name(obj: Any) -> str:
    return getattr(obj, "__name__", str(obj))


_UNION_ORIGINS = tuple(origin for origin in (Union, getattr(types, "UnionType", None)) if origin is not None)


def _is_optional(annotation: Any) -> bool:
    """Check if a type annotation represents Optional[T] or T | None."""
    if get_origin(annotation) in _UNION_ORIGINS:
        args = get_args(annotation)
        return len(args) == 2 and type(None) in args
    return False


def _optional_inner(annotation: Any) -> Any:
    """Extract T from Optional[T] or T | None."""
    return next(arg for arg in get_args(annotation) if arg is not type(None))


# Global container instance
_container: Optional[Container] = None


def get_container() -> Container:
    """
    Get the global container instance.

    Returns:
        Global container instance
    """
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container() -> None:
    """Reset the global container instance."""
    global _container
    if _container:
        _container.clear()
    _container = None
