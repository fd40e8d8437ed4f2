"""Registries for runnable examples."""
from .base_registry import BaseRegistration, BaseRegistry
from .example_registry import ExampleCategory, ExampleRegistration, ExampleRegistry

__all__ = [
    "BaseRegistration",
    "BaseRegistry",
    "ExampleCategory",
    "ExampleRegistration",
    "ExampleRegistry",
]
