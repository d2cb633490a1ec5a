from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

import pytest

from infrastructure.config.settings import Settings
from infrastructure.logging_setup import setup_logging


@pytest.fixture()
def root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    configured = getattr(root, "_todo_logging_configured", False)
    root._todo_logging_configured = False
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    root._todo_logging_configured = configured


def test_setup_logging_writes_rotating_file(root_logger, tmp_path) -> None:
    setup_logging(Settings(log_dir=tmp_path / "logs"))

    assert root_logger.level == logging.INFO
    file_handlers = [h for h in root_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    logging.getLogger("application.todo.store").info("todo.add id=%s", 1)
    file_handlers[0].flush()
    assert "todo.add id=1" in (tmp_path / "logs" / "todos.log").read_text(encoding="utf-8")


def test_setup_logging_is_idempotent(root_logger, tmp_path) -> None:
    setup_logging(Settings(log_dir=tmp_path / "logs"))
    handler_count = len(root_logger.handlers)

    setup_logging(Settings(log_dir=tmp_path / "logs", debug=True))

    assert len(root_logger.handlers) == handler_count
    assert root_logger.level == logging.DEBUG
