import pytest

from oodnotes.application.service import ExampleService
from oodnotes.bootstrap import Application, create_application
from oodnotes.domain.core.exceptions import ConfigurationError, ExampleNotFoundError


@pytest.fixture
def service(example_registry, demo_context):
    return ExampleService(example_registry, demo_context)


def test_list_examples(service):
    data = service.list_examples()

    assert data["count"] == 21
    assert data["examples"][0] == {
        "name": "abstract-factory",
        "category": "patterns",
        "summary": "Families of related products",
    }


def test_list_examples_by_category(service):
    data = service.list_examples("relationships")

    assert [e["name"] for e in data["examples"]] == [
        "aggregation", "association", "composition", "inheritance",
    ]


def test_list_examples_unknown_category(service):
    with pytest.raises(ValueError):
        service.list_examples("astrology")


def test_describe_example(service):
    example = service.describe_example("memento")["example"]

    assert example["name"] == "memento"
    assert example["details"] == "Snapshots saved by a caretaker and restored on undo."


def test_run_example(service):
    result = service.run_example("template-method")["result"]

    assert result["category"] == "patterns"
    assert result["trace"][0] == "Making Tea"


def test_run_unknown_example(service):
    with pytest.raises(ExampleNotFoundError):
        service.run_example("visitor")


def test_create_application_wires_one_audit_log(config_manager):
    app = create_application(config_manager=config_manager())

    assert isinstance(app, Application)
    assert app.example_service.context.audit_log is app.audit_log

    app.example_service.run_example("singleton")
    app.example_service.run_example("singleton")

    assert len(app.audit_log) == 4


def test_create_application_uses_config(config_manager):
    app = create_application(config_manager=config_manager({"memento": {"undo_policy": "step_back"}}))

    trace = app.example_service.run_example("memento")["result"]["trace"]

    assert trace[0] == "Undo policy: step_back"


def test_create_application_rejects_unknown_log_level(config_manager):
    with pytest.raises(ConfigurationError):
        create_application(log_level="verbose", config_manager=config_manager())


def test_create_application_normalises_log_level(config_manager):
    app = create_application(log_level="debug", config_manager=config_manager())

    assert isinstance(app, Application)
