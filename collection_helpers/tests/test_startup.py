import importlib
import logging

from collection_helpers.src import startup


def test_import_leaves_root_logger_alone(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])

    importlib.reload(startup)

    assert root.handlers == []
    package_logger = logging.getLogger("collection_helpers")
    assert sum(isinstance(h, logging.NullHandler) for h in package_logger.handlers) == 1


def test_configure_logging_only_when_unconfigured(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setenv("LOG_LEVEL", "debug")

    startup.configure_logging()
    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG

    startup.configure_logging("error")
    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG
