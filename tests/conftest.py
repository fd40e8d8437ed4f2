import json

import pytest

from oodnotes.application.dto.demo import DemoContext
from oodnotes.application.examples import register_default_examples
from oodnotes.config.manager import ConfigurationManager
from oodnotes.config.schemas import AppConfig
from oodnotes.domain.patterns.singleton import AuditLog
from oodnotes.infrastructure.registry.example_registry import ExampleRegistry


@pytest.fixture
def app_config():
    return AppConfig()


@pytest.fixture
def audit_log():
    return AuditLog()


@pytest.fixture
def demo_context(app_config, audit_log):
    return DemoContext(config=app_config, audit_log=audit_log)


@pytest.fixture
def example_registry():
    return register_default_examples(ExampleRegistry())


@pytest.fixture
def write_config(tmp_path):
    """Write a JSON configuration file and return its path."""
    def _write(data, name="config.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data) if not isinstance(data, str) else data)
        return str(path)
    return _write


@pytest.fixture
def config_manager(write_config):
    def _create(data=None, environ=None):
        config_file = write_config(data) if data is not None else None
        return ConfigurationManager(config_file, environ=environ or {})
    return _create
