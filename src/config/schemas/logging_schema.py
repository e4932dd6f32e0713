"""Logging configuration schema."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Root logging level")
    destination: str = Field("console", description="Log destination: console, file or both")
    renderer: str = Field("console", description="Log renderer: console or json")
    file_path: Optional[str] = Field(None, description="Log file path when logging to a file")
    max_size_mb: int = Field(10, description="Maximum log file size in MB before rotation")
    backup_count: int = Field(3, description="Number of rotated log files to keep")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate and normalize the logging level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        level = v.upper()
        if level not in valid_levels:
            raise ValueError(f"Invalid log level '{v}'. Must be one of: {valid_levels}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        valid_destinations = ["console", "file", "both"]
        if v not in valid_destinations:
            raise ValueError(f"Invalid destination '{v}'. Must be one of: {valid_destinations}")
        return v

    @field_validator("renderer")
    @classmethod
    def validate_renderer(cls, v: str) -> str:
        """Validate log renderer."""
        if v not in ("console", "json"):
            raise ValueError(f"Invalid renderer '{v}'. Must be 'console' or 'json'")
        return v

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate rotation settings."""
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v
