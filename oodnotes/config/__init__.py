"""Configuration package - schemas, defaults and management."""
from .manager import ConfigurationManager
from .schemas import (
    AppConfig,
    LoggingConfig,
    MementoConfig,
    OutputConfig,
    OutputFormat,
    UndoPolicyType,
)

__all__ = [
    "AppConfig",
    "ConfigurationManager",
    "LoggingConfig",
    "MementoConfig",
    "OutputConfig",
    "OutputFormat",
    "UndoPolicyType",
]
