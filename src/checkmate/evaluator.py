"""The single evaluation routine behind every check and assertion."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from checkmate.context import CheckOutcome, collecting, record_outcome
from checkmate.errors import TestAborted
from checkmate.messages import DEFAULT_ASSERT_MESSAGE, DEFAULT_CHECK_MESSAGE, resolve_message
from checkmate.sink import TestingT, mark_helper

logger = logging.getLogger(__name__)


def evaluate(
    t: TestingT,
    condition: bool,
    msg_and_args: Sequence[Any] = (),
    default: str | Callable[[], str] = DEFAULT_CHECK_MESSAGE,
    *,
    name: str = "check",
    fail_fast: bool = False,
) -> bool:
    """Report a false condition to ``t`` and return the condition.

    On failure the resolved message (see :func:`checkmate.messages.resolve_message`)
    is logged and ``t.fail()`` is called. Nothing reaches the sink on success.
    ``default`` may be a callable so expensive messages are only built on failure.
    Callers mark the helper frame themselves; ``evaluate`` does not call ``t.helper()``.
    """
    __tracebackhide__ = True
    passed = bool(condition)
    message = None
    if not passed:
        lines = resolve_message(msg_and_args, default)
        for line in lines:
            t.log(line)
        t.fail()
        message = lines[-1]
        logger.debug("%s failed: %s", name, message)

    if collecting():
        record_outcome(
            CheckOutcome(check_name=name, passed=passed, message=message, fail_fast=fail_fast)
        )
    return passed


def abort(t: TestingT) -> None:
    """Stop the current test through ``t.fail_now()``.

    ``fail_now`` must not return; if a sink's does, TestAborted is raised so
    the caller still never continues past a failed assertion.
    """
    __tracebackhide__ = True
    t.fail_now()
    raise TestAborted(["checkmate: fail_now returned, aborting"])


def check_that(t: TestingT, condition: bool, *msg_and_args: Any) -> bool:
    """Report a false condition and keep the test running.

    Returns the condition so callers can guard dependent checks::

        if check_that(t, resp is not None, "no response"):
            check_that(t, resp.status == 200, "status %d", resp.status)
    """
    __tracebackhide__ = True
    mark_helper(t)
    return evaluate(t, condition, msg_and_args, DEFAULT_CHECK_MESSAGE)


def assert_that(t: TestingT, condition: bool, *msg_and_args: Any) -> None:
    """Report a false condition and stop the test."""
    __tracebackhide__ = True
    mark_helper(t)
    if not evaluate(t, condition, msg_and_args, DEFAULT_ASSERT_MESSAGE, name="assert_that", fail_fast=True):
        abort(t)
