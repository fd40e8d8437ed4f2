import pytest

from oodnotes.application.dto.demo import DemoContext, DemoResult
from oodnotes.application.examples import DEFAULT_EXAMPLES, register_default_examples
from oodnotes.config.schemas import AppConfig
from oodnotes.infrastructure.registry.example_registry import ExampleCategory, ExampleRegistry

EXPECTED_NAMES = {
    "association", "aggregation", "composition", "inheritance",
    "srp", "ocp", "lsp", "isp", "dip",
    "strategy", "observer", "decorator", "factory-method", "abstract-factory",
    "singleton", "command", "adapter", "facade", "template-method", "iterator", "memento",
}


def test_every_example_registered(example_registry):
    assert set(example_registry.names()) == EXPECTED_NAMES
    assert len(DEFAULT_EXAMPLES) == len(EXPECTED_NAMES)


def test_categories(example_registry):
    assert len(example_registry.list(ExampleCategory.RELATIONSHIPS)) == 4
    assert len(example_registry.list(ExampleCategory.SOLID)) == 5
    assert len(example_registry.list(ExampleCategory.PATTERNS)) == 12


@pytest.mark.parametrize("name", sorted(EXPECTED_NAMES))
def test_every_example_runs(example_registry, demo_context, name):
    result = example_registry.run(name, demo_context)

    assert isinstance(result, DemoResult)
    assert result.name == name
    assert result.trace
    assert all(isinstance(line, str) for line in result.trace)


def test_registering_twice_on_one_registry_fails(example_registry):
    from oodnotes.domain.core.exceptions import ConfigurationError

    with pytest.raises(ConfigurationError):
        register_default_examples(example_registry)


def test_decorator_demo_reports_stacked_cost(example_registry, demo_context):
    trace = example_registry.run("decorator", demo_context).trace

    assert trace[0] == "Base, Extra shot, Oat milk = 160"


def test_strategy_demo_shows_rebinding(example_registry, demo_context):
    trace = example_registry.run("strategy", demo_context).trace

    assert trace[3:6] == ["I can't fly", "I'm flying with a rocket!", "Squeak!"]
    assert trace[-1].startswith("Unconfigured duck:")


def test_singleton_demo_writes_to_context_log(example_registry, demo_context, audit_log):
    example_registry.run("singleton", demo_context)

    assert audit_log.entries == [
        "[orders] placed order-1 for book",
        "[payments] charged 1999 for order-1",
    ]


def test_memento_demo_default_policy(example_registry, demo_context):
    trace = example_registry.run("memento", demo_context).trace

    assert trace == [
        "Undo policy: restore_latest",
        "Edited: 'Hello, world!!!'",
        "Undo -> 'Hello, world'",
        "Undo -> 'Hello'",
        "Stop: Nothing to undo",
    ]


def test_memento_demo_follows_configured_policy(example_registry, audit_log):
    config = AppConfig.from_dict({"memento": {"undo_policy": "step_back"}})
    context = DemoContext(config=config, audit_log=audit_log)

    trace = example_registry.run("memento", context).trace

    assert trace == [
        "Undo policy: step_back",
        "Edited: 'Hello, world!!!'",
        "Undo -> 'Hello'",
        "Stop: Nothing to step back to",
    ]


def test_demo_result_serializes_category(example_registry, demo_context):
    data = example_registry.run("lsp", demo_context).to_dict()

    assert data["category"] == "solid"
    assert data["name"] == "lsp"


def test_fresh_registry_is_empty():
    assert len(ExampleRegistry()) == 0
