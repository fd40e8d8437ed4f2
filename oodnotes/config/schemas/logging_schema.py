"""Logging configuration schema."""

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Root log level")
    destination: str = Field("stdout", description="Where log records go: stdout, file or both")
    file_path: str = Field("logs/oodnotes.log", description="Log file path")
    max_size_mb: int = Field(10, ge=1, description="Maximum log file size before rotation")
    backup_count: int = Field(5, ge=0, description="Number of rotated log files to keep")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """
        Validate log level.

        Args:
            v: Value to validate

        Returns:
            Normalised upper-case level

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        level = v.upper()
        if level not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        valid_destinations = ["stdout", "file", "both"]
        if v not in valid_destinations:
            raise ValueError(f"Log destination must be one of {valid_destinations}")
        return v
