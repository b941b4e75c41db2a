from __future__ import annotations

import io
import logging

import pytest

from ledger_grammar import logging_setup


def test_configure_logging_attaches_one_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    logger = logging.getLogger("ledger_grammar")
    original_handlers = list(logger.handlers)
    original_level = logger.level
    stream = io.StringIO()
    try:
        logging_setup.configure_logging("debug", fmt="%(levelname)s %(message)s", stream=stream)
        logging_setup.configure_logging("error", stream=io.StringIO())
        logging_setup.get_logger("ledger_grammar.services.loader").debug("parsed %d records", 3)
        assert stream.getvalue() == "DEBUG parsed 3 records\n"
        stream_handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
        assert len(stream_handlers) == 1
        assert logger.propagate is False
    finally:
        logger.handlers = original_handlers
        logger.setLevel(original_level)
        logger.propagate = True


def test_get_logger_is_silent_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    logger = logging.getLogger("ledger_grammar")
    original_handlers = list(logger.handlers)
    logger.handlers = []
    try:
        logging_setup.get_logger("ledger_grammar.parsers")
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
    finally:
        logger.handlers = original_handlers


def test_parse_level_accepts_names_and_numbers() -> None:
    assert logging_setup._parse_level("warning") == logging.WARNING
    assert logging_setup._parse_level("10") == logging.DEBUG
    assert logging_setup._parse_level(logging.ERROR) == logging.ERROR
    assert logging_setup._parse_level("nonsense") == logging.INFO
