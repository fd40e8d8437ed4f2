"""Data transfer objects."""
from .base import BaseDTO
from .demo import DemoContext, DemoResult

__all__ = ["BaseDTO", "DemoContext", "DemoResult"]
