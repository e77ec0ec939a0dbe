import logging

import pytest

from users_api.app.core.config import Settings
from users_api.app.core.logging_config import setup_logging


@pytest.fixture
def access_logger():
    logger = logging.getLogger("uvicorn.access")
    level = logger.level
    yield logger
    logger.setLevel(level)


def test_access_log_quiet_by_default(access_logger):
    setup_logging(Settings(access_log=False))
    assert access_logger.level == logging.WARNING


def test_access_log_enabled(access_logger):
    setup_logging(Settings(access_log=True))
    assert access_logger.level == logging.INFO


def test_handlers_attached_once(monkeypatch, tmp_path):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    log_file = tmp_path / "api.log"
    settings = Settings(log_level="debug", log_file=str(log_file))
    try:
        setup_logging(settings)
        setup_logging(settings)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        assert isinstance(root.handlers[1], logging.FileHandler)
        logging.getLogger("users_api.test").debug("hello")
        root.handlers[1].flush()
        assert "[DEBUG] users_api.test: hello" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            handler.close()
