"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from .common_schema import MementoConfig, OutputConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    memento: MementoConfig = Field(default_factory=lambda: MementoConfig())
    output: OutputConfig = Field(default_factory=lambda: OutputConfig())
    environment: str = Field("development", description="Environment")
    debug: bool = Field(False, description="Debug mode")

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
        """Create configuration from a plain dictionary."""
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a JSON-compatible dictionary."""
        return self.model_dump(mode="json")
