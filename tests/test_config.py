import logging

from reactive_topology.core import configure_logging
from reactive_topology.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("TOPOLOGY_ALLOW_MULTIPLE_DEFS", "TOPOLOGY_LOG_LEVEL", "TOPOLOGY_LOG_FILE", "DEBUG"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.ALLOW_MULTIPLE_DEFS is False
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.LOG_FILE is None
    assert settings.effective_log_level == "WARNING"


def test_from_environment(monkeypatch):
    monkeypatch.setenv("TOPOLOGY_ALLOW_MULTIPLE_DEFS", "True")
    monkeypatch.setenv("TOPOLOGY_LOG_LEVEL", "info")
    monkeypatch.delenv("DEBUG", raising=False)

    settings = Settings()

    assert settings.ALLOW_MULTIPLE_DEFS is True
    assert settings.effective_log_level == "INFO"


def test_debug_forces_debug_logging(monkeypatch):
    monkeypatch.setenv("TOPOLOGY_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("DEBUG", "true")

    assert Settings().effective_log_level == "DEBUG"


def test_settings_only_cover_ordering_and_logging():
    assert not hasattr(Settings(), "APP_TITLE")


def test_package_logger_is_silent_by_default():
    logger = logging.getLogger("reactive_topology")

    assert logger.handlers
    assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_configure_logging_is_idempotent():
    logger = logging.getLogger("reactive_topology")
    before = list(logger.handlers)
    level = logger.level
    try:
        assert configure_logging("INFO") is logger
        handlers = list(logger.handlers)
        assert len(handlers) == len(before) + 1

        assert configure_logging("ERROR") is logger
        assert logger.handlers == handlers
        assert logger.level == logging.ERROR
    finally:
        for handler in logger.handlers[len(before):]:
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(level)
