# src/domain/core/exceptions.py
from typing import Any, Dict, List, Optional


class DomainException(Exception):
    """Base exception for all handbook errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Any = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured output."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message, "VALIDATION_ERROR", details)


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message, "CONFIGURATION_ERROR", {"missing_fields": missing_fields or []})
        self.missing_fields = missing_fields or []


class UnknownTypeError(DomainException):
    """Raised when a factory is asked for a type tag it does not know."""

    def __init__(self, type_tag: str, supported: Optional[List[str]] = None):
        supported = supported or []
        message = f"Unknown type '{type_tag}'"
        if supported:
            message += f". Supported types: {', '.join(supported)}"
        super().__init__(message, "UNKNOWN_TYPE", {"type": type_tag, "supported": supported})
        self.type_tag = type_tag
        self.supported = supported


class DemoNotFoundError(DomainException):
    """Raised when a demonstration name is not registered."""

    def __init__(self, name: str, available: List[str]):
        super().__init__(
            f"Demonstration '{name}' not found. Available: {', '.join(available)}",
            "DEMO_NOT_FOUND",
            {"name": name, "available": available},
        )
        self.name = name
        self.available = available
