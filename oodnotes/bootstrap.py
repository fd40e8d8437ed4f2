"""Application bootstrap - the composition root.

Every long-lived collaborator is constructed here exactly once and passed
on explicitly: the configuration manager, the logging setup, the shared
AuditLog and the example registry.
"""
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from oodnotes.application.dto.demo import DemoContext
from oodnotes.application.examples import register_default_examples
from oodnotes.application.service import ExampleService
from oodnotes.config.manager import ConfigurationManager
from oodnotes.config.schemas import AppConfig, LoggingConfig
from oodnotes.domain.core.exceptions import ConfigurationError
from oodnotes.domain.patterns.singleton import AuditLog
from oodnotes.infrastructure.logging.logger import get_logger, setup_logging
from oodnotes.infrastructure.registry.example_registry import ExampleRegistry


class Application:
    """Wired application; owns every long-lived collaborator."""

    def __init__(
        self,
        config_manager: ConfigurationManager,
        registry: ExampleRegistry,
        audit_log: AuditLog,
    ):
        self.config_manager = config_manager
        self.registry = registry
        self.audit_log = audit_log
        self.example_service = ExampleService(
            registry, DemoContext(config=config_manager.app_config, audit_log=audit_log)
        )

    @property
    def config(self) -> AppConfig:
        return self.config_manager.app_config


def create_application(
    config_file: Optional[str] = None,
    log_level: Optional[str] = None,
    config_manager: Optional[ConfigurationManager] = None,
) -> Application:
    """
    Create and wire the application.

    Args:
        config_file: Optional JSON configuration file
        log_level: Optional log level overriding the configured one
        config_manager: Pre-built configuration manager, mainly for tests

    Returns:
        Wired Application instance

    Raises:
        ConfigurationError: If the configuration or the log level is invalid
    """
    config_manager = config_manager or ConfigurationManager(config_file)
    app_config = config_manager.app_config

    logging_config = app_config.logging
    if log_level:
        try:
            logging_config = LoggingConfig.model_validate({**logging_config.model_dump(), "level": log_level})
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid log level: {log_level}") from e
    setup_logging(logging_config)

    registry = register_default_examples(ExampleRegistry())
    application = Application(config_manager, registry, AuditLog())

    get_logger(__name__).debug(
        "Application created", examples=len(registry), environment=app_config.environment
    )
    return application
