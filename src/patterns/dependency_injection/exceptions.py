"""Exceptions raised while resolving dependencies."""

from typing import Any, List, Optional

from src.domain.core.exceptions import DomainException


def _name(obj: Any) -> str:
    return getattr(obj, "__name__", str(obj))


class DependencyResolutionError(DomainException):
    """Base class for every failure to build a dependency."""

    def __init__(
        self,
        dependency_type: Any,
        message: str,
        parent_type: Optional[type] = None,
        parameter_name: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        context = ""
        if parent_type is not None:
            context = f" (required by {_name(parent_type)}"
            context += f".{parameter_name})" if parameter_name else ")"
        super().__init__(
            f"Cannot resolve {_name(dependency_type)}{context}: {message}",
            "DEPENDENCY_RESOLUTION_ERROR",
            {"dependency": _name(dependency_type), "parameter": parameter_name},
        )
        self.dependency_type = dependency_type
        self.parent_type = parent_type
        self.parameter_name = parameter_name
        self.cause = cause


class UnregisteredDependencyError(DependencyResolutionError):
    """The type is neither registered nor constructible by auto-wiring."""

    def __init__(self, dependency_type: Any, parent_type: Optional[type] = None, parameter_name: Optional[str] = None):
        super().__init__(dependency_type, "no registration and cannot be auto-wired", parent_type, parameter_name)


class UntypedParameterError(DependencyResolutionError):
    """A constructor parameter has neither a type hint nor a default."""

    def __init__(self, dependency_type: type, parameter_name: str):
        super().__init__(
            dependency_type,
            f"parameter '{parameter_name}' has no type hint and no default",
            parameter_name=parameter_name,
        )


class CircularDependencyError(DependencyResolutionError):
    """The dependency graph contains a cycle."""

    def __init__(self, chain: List[Any]):
        self.chain = list(chain)
        super().__init__(chain[-1], "circular dependency " + " -> ".join(_name(item) for item in self.chain))


class InstantiationError(DependencyResolutionError):
    """The constructor itself failed."""

    def __init__(self, dependency_type: type, message: str, cause: Optional[Exception] = None):
        super().__init__(dependency_type, message, cause=cause)


class FactoryError(DependencyResolutionError):
    """A registered factory raised."""

    def __init__(self, dependency_type: Any, message: str, cause: Optional[Exception] = None):
        super().__init__(dependency_type, message, cause=cause)
