"""Demo DTOs - what a demo receives and what it returns."""
from dataclasses import dataclass, field
from typing import List

from oodnotes.config.schemas import AppConfig
from oodnotes.domain.patterns.singleton import AuditLog
from oodnotes.infrastructure.registry.example_registry import ExampleCategory

from .base import BaseDTO


@dataclass(frozen=True)
class DemoContext:
    """Long-lived collaborators handed to every demo by the composition root."""
    config: AppConfig = field(default_factory=AppConfig)
    audit_log: AuditLog = field(default_factory=AuditLog)


class DemoResult(BaseDTO):
    """Console-style trace produced by running one example."""
    name: str
    category: ExampleCategory
    trace: List[str]
