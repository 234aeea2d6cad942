import logging

import pytest

from config import DEFAULT_DATA_FILE, get_settings
import log_utils
from log_utils import initialize_logging


def test_defaults(monkeypatch):
    for name in ("FLASHCARDS_DATA_FILE", "FLASHCARDS_LOG_FILE", "FLASHCARDS_LOG_LEVEL", "FLASHCARDS_THEME"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.data_file == DEFAULT_DATA_FILE
    assert settings.log_level == "INFO"
    assert settings.theme == "minty"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("FLASHCARDS_DATA_FILE", str(tmp_path / "cards.json"))
    monkeypatch.setenv("FLASHCARDS_LOG_LEVEL", "debug")
    monkeypatch.setenv("FLASHCARDS_THEME", "darkly")
    settings = get_settings()
    assert settings.data_file == str(tmp_path / "cards.json")
    assert settings.log_level == "DEBUG"
    assert settings.theme == "darkly"


@pytest.fixture
def root_logger():
    logger = logging.getLogger()
    handlers = list(logger.handlers)
    level = logger.level
    log_utils._configured = False
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)
    log_utils._configured = False


def test_logging_attaches_handlers_once(root_logger, tmp_path):
    before = len(root_logger.handlers)
    initialize_logging(str(tmp_path / "app.log"), "WARNING")
    initialize_logging(str(tmp_path / "app.log"), logging.DEBUG)
    assert len(root_logger.handlers) == before + 2
    assert root_logger.level == logging.DEBUG
    assert log_utils._configured is True
    assert not hasattr(root_logger, "_flashcards_configured")


def test_logging_writes_to_file(root_logger, tmp_path):
    log_file = tmp_path / "app.log"
    initialize_logging(str(log_file), logging.INFO)
    logging.getLogger("fc_test").info("hello log")
    for handler in root_logger.handlers:
        handler.flush()
    assert "[INFO] hello log" in log_file.read_text(encoding="utf-8")
