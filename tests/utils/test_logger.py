import logging
import sys
from logging.handlers import RotatingFileHandler

import pytest
import structlog

from utils.config import Logging, LoggingFile
from utils.logger import get_logger, init_logger


def _find_handler(handlers, klass):
    return next((h for h in handlers if type(h) is klass), None)


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    structlog.reset_defaults()


def test_init_logger_uses_configured_level():
    init_logger(Logging(level="ERROR"))
    assert logging.getLogger().level == logging.ERROR


def test_verbose_forces_debug():
    init_logger(Logging(level="ERROR"), verbose=True)
    assert logging.getLogger().level == logging.DEBUG


def test_console_output_goes_to_stderr():
    init_logger(Logging(level="INFO"))
    stream_h = _find_handler(logging.getLogger().handlers, logging.StreamHandler)
    assert stream_h is not None
    assert stream_h.stream is sys.stderr


def test_console_renderer_without_colour(monkeypatch):
    monkeypatch.setattr("utils.logger._supports_colour", lambda: False)
    init_logger(Logging())
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


def test_library_levels_are_applied():
    init_logger(Logging(libraries={"LiteLLM": "ERROR", "httpx": "CRITICAL"}))
    assert logging.getLogger("LiteLLM").level == logging.ERROR
    assert logging.getLogger("httpx").level == logging.CRITICAL


def test_file_logging_with_rotation(tmp_path):
    path = tmp_path / "logs" / "agent.log"
    init_logger(Logging(level="WARNING", file=LoggingFile(enabled=True, path=str(path), level="DEBUG", max_bytes=1000, backup_count=2)))

    handler = _find_handler(logging.getLogger().handlers, RotatingFileHandler)
    assert handler is not None
    assert handler.maxBytes == 1000
    assert handler.backupCount == 2
    assert path.parent.is_dir()
    assert logging.getLogger().level == logging.DEBUG


def test_file_logging_without_rotation(tmp_path):
    path = tmp_path / "plain.log"
    init_logger(Logging(file=LoggingFile(enabled=True, path=str(path), rotation=False)))

    handlers = logging.getLogger().handlers
    assert _find_handler(handlers, logging.FileHandler) is not None
    assert _find_handler(handlers, RotatingFileHandler) is None


def test_get_logger_accepts_structured_kwargs():
    init_logger(Logging(level="DEBUG"))
    logger = get_logger("tests.logger")
    logger.info("event_name", key="value", count=3)


def test_file_level_does_not_leak_debug_to_console(tmp_path, capsys):
    path = tmp_path / "agent.log"
    init_logger(Logging(level="WARNING", file=LoggingFile(enabled=True, path=str(path), level="DEBUG")))

    get_logger("tests.logger").debug("file_only_event")
    get_logger("tests.logger").warning("everywhere_event")

    err = capsys.readouterr().err
    assert "file_only_event" not in err
    assert "everywhere_event" in err
    contents = path.read_text()
    assert "file_only_event" in contents
    assert "everywhere_event" in contents


def test_console_handler_carries_console_level():
    init_logger(Logging(level="ERROR"), verbose=True)
    assert logging.getLogger().handlers[0].level == logging.DEBUG
