"""Configuration loading from defaults, JSON files and environment variables."""
import copy
import json
import logging
import os
from typing import Any, Dict, Mapping, Optional

from oodnotes._package import ENV_PREFIX
from oodnotes.config.defaults import DEFAULT_CONFIG
from oodnotes.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# OODNOTES_LOGGING__LEVEL=DEBUG -> {"logging": {"level": "DEBUG"}}
SECTION_SEPARATOR = "__"


def deep_merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge override into a copy of base, recursing into nested dictionaries."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


class ConfigurationLoader:
    """Loads raw configuration dictionaries from the supported sources."""

    def __init__(self, env_prefix: str = ENV_PREFIX):
        self.env_prefix = env_prefix

    def load_defaults(self) -> Dict[str, Any]:
        """Return a private copy of the built-in defaults."""
        return copy.deepcopy(DEFAULT_CONFIG)

    def load_from_file(self, config_file: str) -> Dict[str, Any]:
        """
        Load configuration from a JSON file merged over the defaults.

        Args:
            config_file: Path to a JSON configuration file

        Returns:
            Merged configuration dictionary

        Raises:
            ConfigurationError: If the file is missing, unreadable or not a JSON object
        """
        if not os.path.exists(config_file):
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                file_data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {config_file}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file {config_file}: {e}") from e

        if not isinstance(file_data, dict):
            raise ConfigurationError(f"Configuration file {config_file} must contain a JSON object")

        logger.debug(f"Loaded configuration file: {config_file}")
        return deep_merge(self.load_defaults(), file_data)

    def load_configuration(self, config_file: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from the file when given, otherwise from defaults."""
        if config_file:
            return self.load_from_file(config_file)
        return self.load_defaults()

    def apply_environment_overrides(
        self, config_data: Dict[str, Any], environ: Optional[Mapping[str, str]] = None
    ) -> Dict[str, Any]:
        """
        Apply OODNOTES_* environment variables over a configuration dictionary.

        A variable such as OODNOTES_MEMENTO__MAX_HISTORY addresses a nested key;
        one without a separator (OODNOTES_DEBUG) addresses a top-level key.
        Values stay strings; the AppConfig schema converts them to field types.
        """
        environ = os.environ if environ is None else environ
        prefix = f"{self.env_prefix}_"
        result = copy.deepcopy(config_data)

        for name in sorted(environ):
            if not name.startswith(prefix):
                continue
            path = [part.lower() for part in name[len(prefix):].split(SECTION_SEPARATOR) if part]
            if not path:
                continue

            target = result
            for part in path[:-1]:
                node = target.get(part)
                if not isinstance(node, dict):
                    node = {}
                    target[part] = node
                target = node
            target[path[-1]] = environ[name]
            logger.debug(f"Applied environment override {name}")

        return result
