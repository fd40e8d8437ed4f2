"""Structured logging for the application using structlog on top of stdlib logging."""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, List, Optional

import structlog

if TYPE_CHECKING:
    from oodnotes.config.schemas.logging_schema import LoggingConfig

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"

_HANDLER_MARKER = "_oodnotes_handler"


class DetailedFormatter(logging.Formatter):
    """Formatter that includes caller information."""

    def format(self, record: logging.LogRecord) -> str:
        # Add method name and line number to the record
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(
                key_order=["event"], drop_missing=True
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _build_handlers(config: "LoggingConfig") -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    formatter = DetailedFormatter(LOG_FORMAT)

    if config.destination in ("file", "both"):
        log_path = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if config.destination in ("stdout", "both"):
        # stderr keeps command output on stdout clean
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    return handlers


def setup_logging(
    config: Optional["LoggingConfig"] = None,
) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application.

    Args:
        config: Logging configuration. If None, the schema defaults are used.

    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from oodnotes.config.schemas.logging_schema import LoggingConfig

        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.upper()))

    # Replace only the handlers we installed on a previous call
    for handler in root_logger.handlers[:]:
        if getattr(handler, _HANDLER_MARKER, False):
            root_logger.removeHandler(handler)
            handler.close()

    for handler in _build_handlers(config):
        setattr(handler, _HANDLER_MARKER, True)
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = get_logger("oodnotes")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the given name."""
    return structlog.get_logger(name)


# Route structlog through stdlib even before setup_logging runs
_configure_structlog()
