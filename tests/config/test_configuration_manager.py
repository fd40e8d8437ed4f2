import pytest

from oodnotes.config.loader import ConfigurationLoader, deep_merge
from oodnotes.config.schemas import (
    AppConfig,
    LoggingConfig,
    MementoConfig,
    OutputFormat,
    UndoPolicyType,
)
from oodnotes.domain.core.exceptions import ConfigurationError


def test_defaults_without_file(config_manager):
    manager = config_manager()

    config = manager.app_config

    assert config.logging.level == "WARNING"
    assert config.memento.undo_policy == UndoPolicyType.RESTORE_LATEST
    assert config.output.format == OutputFormat.JSON


def test_file_values_merge_over_defaults(config_manager):
    manager = config_manager({"memento": {"undo_policy": "step_back"}})

    config = manager.app_config

    assert config.memento.undo_policy == UndoPolicyType.STEP_BACK
    assert config.memento.max_history == 0
    assert config.logging.destination == "stdout"


def test_environment_overrides_nested_and_top_level(config_manager):
    manager = config_manager(
        {"logging": {"level": "INFO"}},
        environ={
            "OODNOTES_LOGGING__LEVEL": "DEBUG",
            "OODNOTES_MEMENTO__MAX_HISTORY": "3",
            "OODNOTES_DEBUG": "true",
            "UNRELATED": "x",
        },
    )

    config = manager.app_config

    assert config.logging.level == "DEBUG"
    assert config.memento.max_history == 3
    assert config.debug is True


def test_missing_file_raises():
    from oodnotes.config.manager import ConfigurationManager

    with pytest.raises(ConfigurationError):
        ConfigurationManager("/nonexistent/config.json", environ={}).app_config


def test_invalid_json_raises(write_config):
    from oodnotes.config.manager import ConfigurationManager

    path = write_config("{not json")

    with pytest.raises(ConfigurationError):
        ConfigurationManager(path, environ={}).app_config


def test_schema_violation_raises(config_manager):
    manager = config_manager({"logging": {"level": "LOUD"}})

    with pytest.raises(ConfigurationError):
        manager.app_config


def test_non_object_file_raises(write_config):
    from oodnotes.config.manager import ConfigurationManager

    with pytest.raises(ConfigurationError):
        ConfigurationManager(write_config([1, 2, 3]), environ={}).app_config


def test_directory_as_config_file_raises(tmp_path):
    from oodnotes.config.manager import ConfigurationManager

    with pytest.raises(ConfigurationError) as exc_info:
        ConfigurationManager(str(tmp_path), environ={}).app_config

    assert "Cannot read configuration file" in str(exc_info.value)


def test_non_utf8_config_file_raises(tmp_path):
    from oodnotes.config.manager import ConfigurationManager

    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"debug": "\xff"}')

    with pytest.raises(ConfigurationError):
        ConfigurationManager(str(path), environ={}).app_config


def test_numeric_looking_override_kept_for_string_field(config_manager):
    manager = config_manager(environ={"OODNOTES_VERSION": "2", "OODNOTES_MEMENTO__MAX_HISTORY": "5"})

    config = manager.app_config

    assert config.version == "2"
    assert config.memento.max_history == 5


def test_get_typed_and_dotted_get(config_manager):
    manager = config_manager({"memento": {"max_history": 10}})

    assert isinstance(manager.get_typed(LoggingConfig), LoggingConfig)
    assert manager.get_typed(MementoConfig).max_history == 10
    assert manager.get_typed(AppConfig) is manager.app_config
    assert manager.get("memento.max_history") == 10
    assert manager.get("memento.unknown", "fallback") == "fallback"


def test_get_typed_unknown_type(config_manager):
    with pytest.raises(ConfigurationError):
        config_manager().get_typed(dict)


def test_reload_picks_up_changes(write_config):
    from oodnotes.config.manager import ConfigurationManager

    path = write_config({"debug": False})
    manager = ConfigurationManager(path, environ={})
    assert manager.app_config.debug is False

    write_config({"debug": True})
    manager.reload()

    assert manager.app_config.debug is True


def test_deep_merge_does_not_mutate_inputs():
    base = {"a": {"b": 1, "c": 2}}
    override = {"a": {"b": 5}}

    merged = deep_merge(base, override)

    assert merged == {"a": {"b": 5, "c": 2}}
    assert base == {"a": {"b": 1, "c": 2}}


def test_env_value_left_as_string_when_not_json():
    loader = ConfigurationLoader()

    result = loader.apply_environment_overrides({}, {"OODNOTES_ENVIRONMENT": "testing"})

    assert result == {"environment": "testing"}


def test_invalid_environment_name_rejected():
    with pytest.raises(ValueError):
        AppConfig(environment="moon")
