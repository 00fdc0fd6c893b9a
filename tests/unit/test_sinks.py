"""Tests for the built-in sinks."""

import io
import logging

import pytest
from rich.console import Console

from checkmate import assertions, check
from checkmate.config import CheckmateConfig, set_config
from checkmate.errors import TestAborted
from checkmate.sinks import ConsoleSink, LoggingSink


class TestLoggingSink:
    def test_failed_check_is_logged(self, caplog):
        t = LoggingSink()

        with caplog.at_level(logging.WARNING, logger="checkmate.sink"):
            assert not check.equal(t, 1, 2)

        assert t.failed
        assert t.lines == ["expected 2 to equal 1"]
        assert [r.getMessage() for r in caplog.records] == ["expected 2 to equal 1"]
        assert caplog.records[0].levelno == logging.WARNING

    def test_passing_check_logs_nothing(self, caplog):
        t = LoggingSink()

        with caplog.at_level(logging.DEBUG, logger="checkmate.sink"):
            check.equal(t, 1, 1)

        assert not t.failed
        assert caplog.records == []

    def test_level_from_config(self):
        set_config(CheckmateConfig(log_level="ERROR"))
        assert LoggingSink().level == logging.ERROR

    def test_explicit_level_name(self):
        assert LoggingSink(level="debug").level == logging.DEBUG

    def test_fail_now_raises_with_lines(self):
        t = LoggingSink(logger=logging.getLogger("test.sinks"))

        with pytest.raises(TestAborted) as exc_info:
            assertions.len_equal(t, [1], 2)

        assert exc_info.value.lines == ["expected [1] to have len 2, got len 1"]
        assert t.failed


class TestConsoleSink:
    def _console(self):
        return Console(file=io.StringIO(), width=120)

    def test_prints_failure_lines(self):
        console = self._console()
        t = ConsoleSink(console)

        check.not_nil(t, None)

        assert "expected value to not be nil, got nil" in console.file.getvalue()
        assert t.failed

    def test_square_brackets_are_not_markup(self):
        console = self._console()
        t = ConsoleSink(console)

        check.len_equal(t, [1, 2], 3)

        assert "expected [1, 2] to have len 3, got len 2" in console.file.getvalue()

    def test_fail_now_aborts(self):
        console = self._console()
        t = ConsoleSink(console)

        with pytest.raises(TestAborted):
            assertions.false(t, True)

        output = console.file.getvalue()
        assert "expected condition to be false, got true" in output
        assert "test aborted" in output
