"""Ready-made reporting sinks for code that runs outside a test runner."""

from __future__ import annotations

import logging

from rich.console import Console

from checkmate.config import get_config
from checkmate.errors import TestAborted


class LoggingSink:
    """Sends reported lines to a ``logging`` logger.

    ``fail_now`` raises :class:`~checkmate.errors.TestAborted` carrying every
    line reported so far.
    """

    def __init__(self, logger: logging.Logger | None = None, level: int | str | None = None):
        self.logger = logger or logging.getLogger("checkmate.sink")
        if level is None:
            level = get_config().log_level
        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        self.lines: list[str] = []
        self.failed = False

    def log(self, line: str) -> None:
        self.lines.append(line)
        self.logger.log(self.level, line)

    def fail(self) -> None:
        self.failed = True

    def fail_now(self) -> None:
        self.failed = True
        raise TestAborted(self.lines)


class ConsoleSink:
    """Prints reported lines with rich, to stderr unless a console is given."""

    def __init__(self, console: Console | None = None, *, style: str = "red"):
        self.console = console or Console(stderr=True)
        self.style = style
        self.lines: list[str] = []
        self.failed = False

    def log(self, line: str) -> None:
        self.lines.append(line)
        self.console.print(line, style=self.style, markup=False, highlight=False)

    def fail(self) -> None:
        self.failed = True

    def fail_now(self) -> None:
        self.failed = True
        self.console.print("test aborted", style=f"bold {self.style}")
        raise TestAborted(self.lines)
