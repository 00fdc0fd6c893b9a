"""Collecting the outcome of every evaluated operation within a scope."""

from __future__ import annotations

import inspect
import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from pydantic import BaseModel

logger = logging.getLogger(__name__)

OUTCOMES: ContextVar[list[CheckOutcome] | None] = ContextVar("checkmate_outcomes", default=None)


class CheckOutcome(BaseModel):
    """One evaluated check or assertion.

    Attributes:
    ----------
    check_name: str
        Name of the operation, e.g. "equal" or "check"
    passed: bool
        Whether the condition held
    message: str | None
        Last line logged for the failure, None on success
    fail_fast: bool
        Whether the operation aborts the test on failure
    caller: str | None
        ``module:function:line`` of the first frame outside checkmate
    """

    check_name: str
    passed: bool
    message: str | None = None
    fail_fast: bool = False
    caller: str | None = None

    def model_post_init(self, __context) -> None:
        """Auto-fill the caller field if not provided."""
        if self.caller is not None:
            return

        frame = inspect.currentframe()
        if frame is None:
            logger.warning("No frame found for check caller")
            return

        frame = frame.f_back
        while frame:
            module_name = frame.f_globals.get("__name__", "")
            if module_name.startswith(("checkmate.", "pydantic")) or module_name == "checkmate":
                frame = frame.f_back
                continue
            self.caller = f"{module_name}:{frame.f_code.co_name}:{frame.f_lineno}"
            break

    def __bool__(self) -> bool:
        return self.passed


def record_outcome(outcome: CheckOutcome) -> None:
    """Append to the active collector, if there is one."""
    collected = OUTCOMES.get()
    if collected is not None:
        collected.append(outcome)


def collecting() -> bool:
    return OUTCOMES.get() is not None


@contextmanager
def collect_outcomes() -> Iterator[list[CheckOutcome]]:
    """Collect a CheckOutcome for every check evaluated inside the block."""
    collected: list[CheckOutcome] = []
    token = OUTCOMES.set(collected)
    try:
        yield collected
    finally:
        OUTCOMES.reset(token)
