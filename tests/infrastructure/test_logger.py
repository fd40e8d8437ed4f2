import logging

from oodnotes.config.schemas import LoggingConfig
from oodnotes.infrastructure.logging.logger import get_logger, setup_logging


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, "_oodnotes_handler", False)]


def test_setup_logging_to_file(tmp_path):
    log_file = tmp_path / "logs" / "app.log"
    config = LoggingConfig(level="DEBUG", destination="file", file_path=str(log_file))

    setup_logging(config)
    get_logger("tests.logger").info("Something happened", answer=42)
    for handler in _our_handlers():
        handler.flush()

    content = log_file.read_text()
    assert "Something happened" in content
    assert "answer=42" in content

    setup_logging(LoggingConfig())


def test_setup_logging_replaces_own_handlers():
    setup_logging(LoggingConfig(destination="stdout"))
    setup_logging(LoggingConfig(destination="stdout"))

    assert len(_our_handlers()) == 1


def test_level_applied_to_root_logger():
    setup_logging(LoggingConfig(level="error"))

    assert logging.getLogger().level == logging.ERROR

    setup_logging(LoggingConfig())
