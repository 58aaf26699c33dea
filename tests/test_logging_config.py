"""
日志配置测试
"""
import logging
import os

from app.core.config import settings
from app.core.logging_config import LOG_FORMAT, setup_logging


def _swap_root_handlers(handlers):
    root = logging.getLogger()
    previous = root.handlers[:]
    root.handlers[:] = handlers
    return previous


def test_setup_logging_writes_console_and_file(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "LOG_DIR", str(tmp_path))
    root = logging.getLogger()
    level = root.level
    previous = _swap_root_handlers([])
    try:
        log_filename = setup_logging(log_to_file=True)
        installed = root.handlers[:]
        logging.getLogger("app.test").warning("hello")
        for handler in installed:
            handler.flush()
    finally:
        for handler in root.handlers[:]:
            handler.close()
        _swap_root_handlers(previous)
        root.setLevel(level)

    assert os.path.dirname(log_filename) == str(tmp_path)
    assert [type(h) for h in installed] == [logging.StreamHandler, logging.FileHandler]
    assert all(h.formatter._fmt == LOG_FORMAT for h in installed)
    with open(log_filename, encoding="utf-8") as f:
        assert "app.test - WARNING - hello" in f.read()


def test_setup_logging_keeps_existing_handlers():
    root = logging.getLogger()
    existing = logging.NullHandler()
    previous = _swap_root_handlers([existing])
    try:
        assert setup_logging(log_to_file=True) is None
        assert root.handlers == [existing]
    finally:
        _swap_root_handlers(previous)
