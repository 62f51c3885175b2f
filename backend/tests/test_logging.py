import logging

from menucost.config import settings
from menucost.logging import LOG_FORMAT, configure_logging, get_logger


def test_configure_logging_uses_settings_level(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setattr(settings, "log_level", "debug")

    configure_logging()

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert root.handlers[0].formatter._fmt == LOG_FORMAT


def test_configure_logging_runs_once(monkeypatch):
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])

    configure_logging("ERROR")

    assert root.handlers == [existing]


def test_get_logger_default_name():
    assert get_logger().name == "menucost"
    assert get_logger("menucost.api").name == "menucost.api"
