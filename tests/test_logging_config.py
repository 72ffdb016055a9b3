"""Tests for logging configuration."""

from __future__ import annotations

import logging

import pytest

from lecturenotes.utils.logging_config import ExtraFormatter, configure_logging, get_logger


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord("lecturenotes.test", logging.INFO, __file__, 1, "Loaded notes", (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestExtraFormatter:
    """Tests for ExtraFormatter."""

    def test_appends_extra_fields(self) -> None:
        formatter = ExtraFormatter("%(levelname)s %(message)s")

        assert formatter.format(_record(path="a.md", files=2)) == "INFO Loaded notes [files=2 path='a.md']"

    def test_plain_record(self) -> None:
        formatter = ExtraFormatter("%(message)s")

        assert formatter.format(_record()) == "Loaded notes"


def test_configure_logging_replaces_handler() -> None:
    root = logging.getLogger()

    configure_logging("debug")
    configure_logging("info")

    installed = [handler for handler in root.handlers if getattr(handler, "_lecturenotes", False)]
    assert len(installed) == 1
    assert root.level == logging.INFO


def test_get_logger_name() -> None:
    assert get_logger("lecturenotes.parser").name == "lecturenotes.parser"


def test_parse_logs_debug(caplog: pytest.LogCaptureFixture) -> None:
    from lecturenotes.parser import parse

    with caplog.at_level(logging.DEBUG, logger="lecturenotes.parser"):
        parse("# T\n")

    assert any(record.message == "Parsed notes document" for record in caplog.records)
