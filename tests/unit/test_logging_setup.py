from __future__ import annotations

import logging

from rich.logging import RichHandler

from tagindex.logging_setup import PACKAGE_LOGGER, configure_logging, level_from_env, log_console


def _rich_handlers(logger: logging.Logger) -> list[RichHandler]:
    return [h for h in logger.handlers if isinstance(h, RichHandler)]


def test_repeated_configuration_keeps_one_handler():
    configure_logging()
    logger = configure_logging()

    assert logger.name == PACKAGE_LOGGER
    assert len(_rich_handlers(logger)) == 1
    assert _rich_handlers(logger)[0].console is log_console
    assert logger.propagate is False


def test_root_logger_is_left_alone():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level

    configure_logging(verbose=True)

    assert root.handlers == handlers
    assert root.level == level


def test_level_comes_from_environment(monkeypatch):
    monkeypatch.setenv("TAGINDEX_LOG_LEVEL", "warning")
    assert configure_logging().level == logging.WARNING


def test_flags_beat_environment(monkeypatch):
    monkeypatch.setenv("TAGINDEX_LOG_LEVEL", "ERROR")
    assert configure_logging(verbose=True).level == logging.DEBUG
    assert configure_logging(quiet=True).level == logging.WARNING


def test_unknown_or_missing_level_uses_default(monkeypatch):
    monkeypatch.setenv("TAGINDEX_LOG_LEVEL", "chatty")
    assert level_from_env() == logging.INFO
    monkeypatch.delenv("TAGINDEX_LOG_LEVEL")
    assert level_from_env(logging.ERROR) == logging.ERROR


def test_log_console_writes_to_stderr():
    assert log_console.stderr is True
