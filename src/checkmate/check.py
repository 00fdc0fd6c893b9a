"""Checks that mark the test failed but let it keep running.

Every function takes the reporting sink first, then its operands, then an
optional message and format arguments used instead of the default message::

    check.equal(t, resp.status, 200)
    check.len_equal(t, rows, 3, "query returned %d rows", len(rows))

Each returns True when the condition held and False otherwise.
"""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

from checkmate import primitives
from checkmate.comparer import Comparer
from checkmate.evaluator import evaluate
from checkmate.primitives import Evaluation
from checkmate.sink import TestingT, mark_helper


def _report(t: TestingT, evaluation: Evaluation, msg_and_args: tuple[Any, ...]) -> bool:
    __tracebackhide__ = True
    return evaluate(
        t,
        evaluation.passed,
        msg_and_args,
        lambda: evaluation.default_message,
        name=evaluation.name,
    )


def nil(t: TestingT, value: Any, *msg_and_args: Any) -> bool:
    """Check that ``value`` is None or a reference whose referent is gone."""
    __tracebackhide__ = True
    mark_helper(t)
    return _report(t, primitives.nil(value), msg_and_args)


def not_nil(t: TestingT, value: Any, *msg_and_args: Any) -> bool:
    """Check that ``value`` is not nil."""
    __tracebackhide__ = True
    mark_helper(t)
    return _report(t, primitives.not_nil(value), msg_and_args)


def true(t: TestingT, condition: Any, *msg_and_args: Any) -> bool:
    """Check that ``condition`` is the boolean True.

    Truthy values such as ``1`` or ``[0]`` fail; pass ``bool(x)`` to test truthiness.
    """
    __tracebackhide__ = True
    mark_helper(t)
    return _report(t, primitives.true(condition), msg_and_args)


def false(t: TestingT, condition: Any, *msg_and_args: Any) -> bool:
    """Check that ``condition`` is the boolean False. ``None``, ``0`` and ``""`` fail."""
    __tracebackhide__ = True
    mark_helper(t)
    return _report(t, primitives.false(condition), msg_and_args)


def equal(t: TestingT, actual: Any, expected: Any, *msg_and_args: Any) -> bool:
    """Check that two scalar values are equal.

    Raises TypeError for unhashable operands; use :func:`deep_equal` for
    containers and other structures.
    """
    __tracebackhide__ = True
    mark_helper(t)
    return _report(t, primitives.equal(actual, expected), msg_and_args)


def not_equal(t: TestingT, actual: Any, expected: Any, *msg_and_args: Any) -> bool:
    __tracebackhide__ = True
    mark_helper(t)
    return _report(t, primitives.not_equal(actual, expected), msg_and_args)


def deep_equal(
    t: TestingT,
    actual: Any,
    expected: Any,
    *msg_and_args: Any,
    comparer: Comparer | None = None,
) -> bool:
    """Check that two values are structurally equal, logging a diff if not."""
    __tracebackhide__ = True
    mark_helper(t)
    return _report(t, primitives.deep_equal(actual, expected, comparer), msg_and_args)


def not_deep_equal(
    t: TestingT,
    actual: Any,
    expected: Any,
    *msg_and_args: Any,
    comparer: Comparer | None = None,
) -> bool:
    __tracebackhide__ = True
    mark_helper(t)
    return _report(t, primitives.not_deep_equal(actual, expected, comparer), msg_and_args)


def error_is(t: TestingT, err: BaseException | None, target: Any, *msg_and_args: Any) -> bool:
    """Check that ``target`` appears in the cause/context/group tree of ``err``.

    ``target`` may be an exception instance or an exception class.
    """
    __tracebackhide__ = True
    mark_helper(t)
    return _report(t, primitives.error_is(err, target), msg_and_args)


def not_error_is(t: TestingT, err: BaseException | None, target: Any, *msg_and_args: Any) -> bool:
    __tracebackhide__ = True
    mark_helper(t)
    return _report(t, primitives.not_error_is(err, target), msg_and_args)


def error_contains(t: TestingT, err: BaseException, text: str, *msg_and_args: Any) -> bool:
    """Check that ``str(err)`` contains ``text``. ``err`` must not be None."""
    __tracebackhide__ = True
    mark_helper(t)
    return _report(t, primitives.error_contains(err, text), msg_and_args)


def not_error_contains(t: TestingT, err: BaseException, text: str, *msg_and_args: Any) -> bool:
    __tracebackhide__ = True
    mark_helper(t)
    return _report(t, primitives.not_error_contains(err, text), msg_and_args)


def len_equal(t: TestingT, seq: Sized, expected_len: int, *msg_and_args: Any) -> bool:
    """Check that ``len(seq) == expected_len``."""
    __tracebackhide__ = True
    mark_helper(t)
    return _report(t, primitives.len_equal(seq, expected_len), msg_and_args)
