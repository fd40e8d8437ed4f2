"""Example Registry - runnable demos keyed by name."""
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, List, Optional

from oodnotes.domain.core.exceptions import ConfigurationError, ExampleNotFoundError

from .base_registry import BaseRegistration, BaseRegistry

if TYPE_CHECKING:
    from oodnotes.application.dto.demo import DemoContext, DemoResult


class ExampleCategory(str, Enum):
    """Example category enumeration."""
    RELATIONSHIPS = "relationships"
    SOLID = "solid"
    PATTERNS = "patterns"


class ExampleRegistration(BaseRegistration):
    """Example registration container."""

    def __init__(
        self,
        name: str,
        demo_factory: Callable[["DemoContext"], "DemoResult"],
        category: ExampleCategory,
        summary: str,
    ):
        super().__init__(name, demo_factory)
        self.name = name
        self.category = category
        self.summary = summary

    def describe(self) -> dict:
        doc = (self.factory.__doc__ or "").strip()
        return {
            "name": self.name,
            "category": self.category.value,
            "summary": self.summary,
            "details": doc,
        }


class ExampleRegistry(BaseRegistry[ExampleRegistration]):
    """
    Registry for runnable examples.

    Each registration maps a unique example name to a demo function taking a
    DemoContext and returning a DemoResult.
    """

    def register(
        self,
        name: str,
        demo_factory: Callable[["DemoContext"], "DemoResult"],
        category: ExampleCategory,
        summary: str,
    ) -> ExampleRegistration:
        """Register an example demo."""
        try:
            return self.register_type(
                name, demo_factory, category=ExampleCategory(category), summary=summary
            )
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

    def get(self, name: str) -> ExampleRegistration:
        registration = self.get_registration(name)
        if registration is None:
            raise ExampleNotFoundError(name)
        return registration

    def list(self, category: Optional[ExampleCategory] = None) -> List[ExampleRegistration]:
        """Registered examples sorted by name, optionally restricted to one category."""
        wanted = ExampleCategory(category) if category is not None else None
        return [
            self._registrations[name]
            for name in self.get_registered_types()
            if wanted is None or self._registrations[name].category == wanted
        ]

    def names(self) -> List[str]:
        return self.get_registered_types()

    def run(self, name: str, context: "DemoContext") -> "DemoResult":
        registration = self.get(name)
        self._logger.debug(f"Running example {name}")
        return registration.factory(context)

    def _create_registration(
        self, type_name: str, factory: Callable[..., Any], **kwargs: Any
    ) -> ExampleRegistration:
        return ExampleRegistration(
            type_name, factory, category=kwargs["category"], summary=kwargs["summary"]
        )
