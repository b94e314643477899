import logging
from logging.handlers import RotatingFileHandler

import pytest

from article_scraper.core import logger as logger_module


class MockConfigurationManager:
    def __init__(self, settings=None):
        self.settings = settings if settings is not None else {}

    def get(self, key, default=None):
        value = self.settings
        for k_part in key.split('.'):
            if not isinstance(value, dict) or k_part not in value:
                return default
            value = value[k_part]
        return value


@pytest.fixture
def isolated_root_logger():
    """Saves and restores the root logger so each test configures logging from scratch."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    original_initialized = logger_module._logging_initialized
    logger_module.reset_logging()

    yield root

    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in original_handlers:
        root.addHandler(handler)
    root.setLevel(original_level)
    logger_module._logging_initialized = original_initialized


def test_setup_logging_console_handler(isolated_root_logger):
    config = MockConfigurationManager({"logging": {
        "level": "warning",
        "handlers": {"console": {"enabled": True}, "file": {"enabled": False}},
    }})
    logger_module.setup_logging(config)

    assert isolated_root_logger.level == logging.WARNING
    assert any(type(h) is logging.StreamHandler for h in isolated_root_logger.handlers)
    assert not any(isinstance(h, RotatingFileHandler) for h in isolated_root_logger.handlers)


def test_setup_logging_file_handler(isolated_root_logger, tmp_path):
    log_path = tmp_path / "logs" / "scraper.log"
    config = MockConfigurationManager({"logging": {
        "level": "INFO",
        "handlers": {"file": {"enabled": True, "path": str(log_path), "max_bytes": 1024, "backup_count": 1}},
    }})
    logger_module.setup_logging(config)
    logger_module.get_logger("article_scraper.tests").info("hello file")

    file_handlers = [h for h in isolated_root_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    file_handlers[0].flush()
    assert "hello file" in log_path.read_text(encoding="utf-8")


def test_setup_logging_only_once(isolated_root_logger):
    config = MockConfigurationManager({"logging": {"level": "ERROR", "handlers": {"console": {"enabled": True}}}})
    logger_module.setup_logging(config)
    handlers_after_first = isolated_root_logger.handlers[:]

    logger_module.setup_logging(MockConfigurationManager({"logging": {"level": "DEBUG"}}))

    assert isolated_root_logger.handlers == handlers_after_first
    assert isolated_root_logger.level == logging.ERROR


def test_setup_logging_without_section_falls_back(isolated_root_logger):
    for handler in isolated_root_logger.handlers[:]:
        isolated_root_logger.removeHandler(handler)

    logger_module.setup_logging(MockConfigurationManager({}))

    assert logger_module._logging_initialized is True
    assert isolated_root_logger.handlers
