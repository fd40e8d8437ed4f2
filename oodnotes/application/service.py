"""Example application service - the use cases behind the CLI."""
from typing import Any, Dict, Optional

from oodnotes.application.dto.demo import DemoContext
from oodnotes.infrastructure.logging.logger import get_logger
from oodnotes.infrastructure.registry.example_registry import ExampleCategory, ExampleRegistry


class ExampleService:
    """Lists, describes and runs registered examples."""

    def __init__(self, registry: ExampleRegistry, context: DemoContext):
        self._registry = registry
        self._context = context
        self._logger = get_logger(__name__)

    @property
    def context(self) -> DemoContext:
        return self._context

    def list_examples(self, category: Optional[str] = None) -> Dict[str, Any]:
        """
        List registered examples.

        Args:
            category: Optional category name to filter by

        Returns:
            Dictionary with an "examples" list of name/category/summary entries
        """
        wanted = ExampleCategory(category) if category else None
        examples = [
            {
                "name": registration.name,
                "category": registration.category.value,
                "summary": registration.summary,
            }
            for registration in self._registry.list(wanted)
        ]
        return {"examples": examples, "count": len(examples)}

    def describe_example(self, name: str) -> Dict[str, Any]:
        return {"example": self._registry.get(name).describe()}

    def run_example(self, name: str) -> Dict[str, Any]:
        result = self._registry.run(name, self._context)
        self._logger.info("Example completed", example=name, trace_lines=len(result.trace))
        return {"result": result.to_dict()}
