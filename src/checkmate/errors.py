"""Exceptions raised by checkmate."""

from __future__ import annotations


class TestAborted(BaseException):
    """Raised by a sink's ``fail_now`` to stop the current test.

    Derives from BaseException so ``except Exception`` blocks in test code
    do not swallow the abort.
    """

    __test__ = False

    def __init__(self, lines: list[str] | None = None):
        self.lines = list(lines or [])
        super().__init__("\n".join(self.lines) or "test aborted")


class ConfigError(ValueError):
    """Raised when the [tool.checkmate] table is invalid."""
