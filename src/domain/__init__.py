"""
Domain Layer - shared kernel for the pattern modules.

- core/: exception hierarchy used across every pattern
"""

from .core.exceptions import (
    ConfigurationError,
    DemoNotFoundError,
    DomainException,
    UnknownTypeError,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "ConfigurationError",
    "UnknownTypeError",
    "DemoNotFoundError",
]
