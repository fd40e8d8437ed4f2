"""Runnable demos and their registration."""
from oodnotes.infrastructure.registry.example_registry import ExampleCategory, ExampleRegistry

from . import patterns, relationships, solid

DEFAULT_EXAMPLES = [
    ("association", relationships.association_demo, ExampleCategory.RELATIONSHIPS,
     "Independent objects that reference each other"),
    ("aggregation", relationships.aggregation_demo, ExampleCategory.RELATIONSHIPS,
     "A whole grouping parts that outlive it"),
    ("composition", relationships.composition_demo, ExampleCategory.RELATIONSHIPS,
     "A whole that creates and owns its parts"),
    ("inheritance", relationships.inheritance_demo, ExampleCategory.RELATIONSHIPS,
     "Subclasses reusing and overriding base behavior"),
    ("srp", solid.srp_demo, ExampleCategory.SOLID,
     "Single Responsibility Principle"),
    ("ocp", solid.ocp_demo, ExampleCategory.SOLID,
     "Open/Closed Principle"),
    ("lsp", solid.lsp_demo, ExampleCategory.SOLID,
     "Liskov Substitution Principle"),
    ("isp", solid.isp_demo, ExampleCategory.SOLID,
     "Interface Segregation Principle"),
    ("dip", solid.dip_demo, ExampleCategory.SOLID,
     "Dependency Inversion Principle"),
    ("strategy", patterns.strategy_demo, ExampleCategory.PATTERNS,
     "Swappable behaviors delegated to at runtime"),
    ("observer", patterns.observer_demo, ExampleCategory.PATTERNS,
     "Ordered synchronous notification of listeners"),
    ("decorator", patterns.decorator_demo, ExampleCategory.PATTERNS,
     "Wrappers that stack extra behavior"),
    ("factory-method", patterns.factory_method_demo, ExampleCategory.PATTERNS,
     "Subclasses decide which product to create"),
    ("abstract-factory", patterns.abstract_factory_demo, ExampleCategory.PATTERNS,
     "Families of related products"),
    ("singleton", patterns.singleton_demo, ExampleCategory.PATTERNS,
     "One explicitly owned instance passed to its users"),
    ("command", patterns.command_demo, ExampleCategory.PATTERNS,
     "Requests reified as objects"),
    ("adapter", patterns.adapter_demo, ExampleCategory.PATTERNS,
     "Converting one interface into another"),
    ("facade", patterns.facade_demo, ExampleCategory.PATTERNS,
     "A simple front for a set of subsystems"),
    ("template-method", patterns.template_method_demo, ExampleCategory.PATTERNS,
     "A fixed algorithm skeleton with overridable steps"),
    ("iterator", patterns.iterator_demo, ExampleCategory.PATTERNS,
     "Uniform traversal over different collections"),
    ("memento", patterns.memento_demo, ExampleCategory.PATTERNS,
     "Immutable snapshots restored by a caretaker"),
]


def register_default_examples(registry: ExampleRegistry) -> ExampleRegistry:
    """Register every built-in example on the given registry."""
    for name, demo, category, summary in DEFAULT_EXAMPLES:
        registry.register(name, demo, category, summary)
    return registry


__all__ = ["DEFAULT_EXAMPLES", "register_default_examples"]
