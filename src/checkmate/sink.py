"""Reporting sink protocol for checkmate checks and assertions."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TestingT(Protocol):
    """The subset of a test runner's reporting surface used by checkmate.

    Sinks are owned by a single test for its duration; checkmate never
    keeps a reference to one past the call it was passed to.
    """

    def log(self, line: str) -> None:
        """Record one human-readable line for the current test."""
        ...

    def fail(self) -> None:
        """Mark the current test as failed and keep running it."""
        ...

    def fail_now(self) -> None:
        """Mark the current test as failed and stop it. Must not return."""
        ...


@runtime_checkable
class HelperT(Protocol):
    """Optional capability: exclude the calling frame from failure locations."""

    def helper(self) -> None:
        ...


def mark_helper(t: Any) -> None:
    """Call ``t.helper()`` when the sink supports it, otherwise do nothing."""
    __tracebackhide__ = True
    helper = getattr(t, "helper", None)
    if callable(helper):
        helper()
