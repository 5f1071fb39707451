"""Tests for the leveled console logger."""

import logging
import os

import pytest

from psit.config import PSITConfig
from psit.logger import LogEntry, PSITLogger, log, setup_file_logging


def test_debug_is_silent_when_disabled(capsys) -> None:
    logger = PSITLogger(PSITConfig(debug_enabled=False))
    assert logger.debug("hidden message") is None
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_debug_prints_when_enabled(capsys) -> None:
    logger = PSITLogger(PSITConfig(debug_enabled=True))
    logger.debug("visible message")
    assert "[DEBUG] visible message" in capsys.readouterr().out


def test_debug_level_above_configured_level_is_silent(capsys) -> None:
    logger = PSITLogger(PSITConfig(debug_enabled=True, debug_level=1))
    logger.debug("too chatty", level=2)
    assert capsys.readouterr().out == ""


def test_info_prints_to_stdout(capsys, config) -> None:
    PSITLogger(config).info("all good")
    assert "[INFO] all good" in capsys.readouterr().out


def test_warning_and_error_print_to_stderr(capsys, config) -> None:
    logger = PSITLogger(config)
    logger.warning("careful")
    logger.error("broken")
    err = capsys.readouterr().err
    assert "[WARNING] careful" in err
    assert "[ERROR] broken" in err


def test_as_object_returns_entry_without_printing(capsys, config) -> None:
    entry = PSITLogger(config).error("disk full", as_object=True)
    assert isinstance(entry, LogEntry)
    assert entry.type == "error"
    assert entry.message == "disk full"
    assert entry.computer_name
    assert entry.user_name
    assert capsys.readouterr().err == ""


def test_log_entry_is_immutable() -> None:
    entry = LogEntry("info", "hello")
    with pytest.raises(AttributeError):
        entry.message = "changed"


def test_log_entry_to_dict_fields() -> None:
    entry = LogEntry("warning", "hello", computer_name="WS01", user_name="admin", user_domain="CORP")
    data = entry.to_dict()
    assert list(data) == ["Type", "Timestamp", "Message", "ComputerName", "UserName", "UserDomain"]
    assert data["ComputerName"] == "WS01"
    assert data["UserDomain"] == "CORP"


def test_unknown_log_type_is_rejected() -> None:
    with pytest.raises(ValueError):
        LogEntry("verbose", "hello")


def test_file_logging_receives_console_lines(tmp_path, config) -> None:
    path = setup_file_logging(str(tmp_path))
    handler = log.handlers[-1]
    try:
        PSITLogger(config).info("written to file")
        handler.flush()
        with open(path, encoding="utf-8") as log_file:
            content = log_file.read()
        assert "INFO - written to file" in content
        assert os.path.dirname(path) == str(tmp_path)
    finally:
        log.removeHandler(handler)
        handler.close()
    assert isinstance(handler, logging.FileHandler)


def test_file_logging_reuses_handler_for_same_directory(tmp_path) -> None:
    before = list(log.handlers)
    first = setup_file_logging(str(tmp_path))
    try:
        second = setup_file_logging(str(tmp_path))
        added = [h for h in log.handlers if h not in before]
        assert second == first
        assert len(added) == 1
    finally:
        for handler in log.handlers[:]:
            if handler not in before:
                log.removeHandler(handler)
                handler.close()
