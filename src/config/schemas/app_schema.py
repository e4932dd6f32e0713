"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from src.domain.core.exceptions import ConfigurationError

from .demo_schema import DemoConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    environment: str = Field("development", description="Environment")
    debug: bool = Field(False, description="Debug mode")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    demo: DemoConfig = Field(default_factory=lambda: DemoConfig())

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """
        Validate environment.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If environment is invalid
        """
        valid_environments = ["development", "testing", "production"]
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of {valid_environments}")
        return v

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from a raw dictionary."""
        return validate_config(data)


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Validate a raw configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If configuration is invalid
    """
    try:
        return AppConfig(**config)
    except PydanticValidationError as e:
        fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
        raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e
