"""Unified configuration management for the application."""
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, cast

from pydantic import ValidationError as PydanticValidationError

from oodnotes.config.loader import ConfigurationLoader
from oodnotes.config.schemas import AppConfig, LoggingConfig, MementoConfig, OutputConfig
from oodnotes.domain.core.exceptions import ConfigurationError

T = TypeVar("T")
logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Unified configuration manager that serves as the single source of truth.

    This class provides a unified interface for accessing configuration with:
    - Type safety through pydantic schemas
    - Environment variable overrides
    - Configuration validation
    - Lazy loading

    It uses ConfigurationLoader to load configuration from its sources.
    """

    def __init__(
        self,
        config_file: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._environ = environ
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader: Optional[ConfigurationLoader] = None
        self._config_cache: Dict[Type, Any] = {}

    @property
    def loader(self) -> ConfigurationLoader:
        """Lazy load configuration loader."""
        if self._loader is None:
            self._loader = ConfigurationLoader()
        return self._loader

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data = self.loader.load_configuration(self._config_file)

        # Apply environment variable overrides
        config_data = self.loader.apply_environment_overrides(config_data, self._environ)

        try:
            config = AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        logger.debug(f"Configuration loaded (environment={config.environment})")
        return config

    def get_typed(self, config_type: Type[T]) -> T:
        """Get typed configuration with caching."""
        if config_type not in self._config_cache:
            with self._lock:
                if config_type not in self._config_cache:
                    self._config_cache[config_type] = self._create_typed_config(config_type)
        return cast(T, self._config_cache[config_type])

    def _create_typed_config(self, config_type: Type[T]) -> T:
        """Create typed configuration instance."""
        # Map config types to app_config attributes
        type_mapping = {
            LoggingConfig: "logging",
            MementoConfig: "memento",
            OutputConfig: "output",
        }
        if config_type is AppConfig:
            return cast(T, self.app_config)
        if config_type not in type_mapping:
            raise ConfigurationError(f"Unknown configuration type: {config_type.__name__}")
        return cast(T, getattr(self.app_config, type_mapping[config_type]))

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dotted path.

        Args:
            key: Dotted path such as "logging.level"
            default: Value returned when the path does not exist

        Returns:
            The configuration value or default
        """
        node: Any = self.app_config.to_dict()
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> None:
        """Drop cached configuration so the next access reloads from sources."""
        with self._lock:
            self._app_config = None
            self._config_cache.clear()
