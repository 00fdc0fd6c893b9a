"""Test doubles for code that builds on checkmate."""

from __future__ import annotations

from dataclasses import dataclass, field

from checkmate.errors import TestAborted


@dataclass
class RecordingSink:
    """Sink that records everything reported to it.

    ``fail_now`` records the call and raises TestAborted, so callers can
    check both the abort and what was logged before it.
    """

    logs: list[str] = field(default_factory=list)
    fail_called: bool = False
    fail_now_called: bool = False

    def log(self, line: str) -> None:
        self.logs.append(line)

    def fail(self) -> None:
        self.fail_called = True

    def fail_now(self) -> None:
        self.fail_now_called = True
        raise TestAborted(self.logs)


@dataclass
class RecordingHelperSink(RecordingSink):
    """RecordingSink that also supports the helper capability."""

    helper_calls: int = 0

    @property
    def helper_called(self) -> bool:
        return self.helper_calls > 0

    def helper(self) -> None:
        self.helper_calls += 1
