"""Configuration schemas."""
from .app_schema import AppConfig
from .common_schema import MementoConfig, OutputConfig, OutputFormat, UndoPolicyType
from .logging_schema import LoggingConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "MementoConfig",
    "OutputConfig",
    "OutputFormat",
    "UndoPolicyType",
]
