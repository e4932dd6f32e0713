"""Demonstration configuration schema."""

from typing import Dict

from pydantic import BaseModel, Field, field_validator


class DemoConfig(BaseModel):
    """Settings used when running the pattern demonstrations."""

    output_format: str = Field("text", description="Default CLI output format: text or json")
    auth_tokens: Dict[str, str] = Field(
        default_factory=lambda: {"secret-token": "alice"},
        description="Token to user mapping accepted by the middleware demo",
    )
    coffee_base_cost: float = Field(2.0, description="Base price of the decorator demo coffee")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Validate output format."""
        if v not in ("text", "json"):
            raise ValueError(f"Invalid output format '{v}'. Must be 'text' or 'json'")
        return v

    @field_validator("coffee_base_cost")
    @classmethod
    def validate_cost(cls, v: float) -> float:
        """Validate coffee base cost."""
        if v < 0:
            raise ValueError("Cost must not be negative")
        return v
