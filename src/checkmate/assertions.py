"""Assertions that stop the test on the first failure.

Same operations, operands and default messages as :mod:`checkmate.check`;
the only difference is that a failure calls ``t.fail_now()`` and nothing
after the failing call runs.
"""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

from checkmate import primitives
from checkmate.comparer import Comparer
from checkmate.evaluator import abort, evaluate
from checkmate.primitives import Evaluation
from checkmate.sink import TestingT, mark_helper


def _require(t: TestingT, evaluation: Evaluation, msg_and_args: tuple[Any, ...]) -> None:
    __tracebackhide__ = True
    passed = evaluate(
        t,
        evaluation.passed,
        msg_and_args,
        lambda: evaluation.default_message,
        name=evaluation.name,
        fail_fast=True,
    )
    if not passed:
        abort(t)


def nil(t: TestingT, value: Any, *msg_and_args: Any) -> None:
    """Assert that ``value`` is None or a reference whose referent is gone."""
    __tracebackhide__ = True
    mark_helper(t)
    _require(t, primitives.nil(value), msg_and_args)


def not_nil(t: TestingT, value: Any, *msg_and_args: Any) -> None:
    __tracebackhide__ = True
    mark_helper(t)
    _require(t, primitives.not_nil(value), msg_and_args)


def true(t: TestingT, condition: Any, *msg_and_args: Any) -> None:
    """Assert that ``condition`` is the boolean True, not merely truthy."""
    __tracebackhide__ = True
    mark_helper(t)
    _require(t, primitives.true(condition), msg_and_args)


def false(t: TestingT, condition: Any, *msg_and_args: Any) -> None:
    """Assert that ``condition`` is the boolean False, not merely falsy."""
    __tracebackhide__ = True
    mark_helper(t)
    _require(t, primitives.false(condition), msg_and_args)


def equal(t: TestingT, actual: Any, expected: Any, *msg_and_args: Any) -> None:
    """Assert that two scalar values are equal."""
    __tracebackhide__ = True
    mark_helper(t)
    _require(t, primitives.equal(actual, expected), msg_and_args)


def not_equal(t: TestingT, actual: Any, expected: Any, *msg_and_args: Any) -> None:
    __tracebackhide__ = True
    mark_helper(t)
    _require(t, primitives.not_equal(actual, expected), msg_and_args)


def deep_equal(
    t: TestingT,
    actual: Any,
    expected: Any,
    *msg_and_args: Any,
    comparer: Comparer | None = None,
) -> None:
    """Assert that two values are structurally equal, logging a diff if not."""
    __tracebackhide__ = True
    mark_helper(t)
    _require(t, primitives.deep_equal(actual, expected, comparer), msg_and_args)


def not_deep_equal(
    t: TestingT,
    actual: Any,
    expected: Any,
    *msg_and_args: Any,
    comparer: Comparer | None = None,
) -> None:
    __tracebackhide__ = True
    mark_helper(t)
    _require(t, primitives.not_deep_equal(actual, expected, comparer), msg_and_args)


def error_is(t: TestingT, err: BaseException | None, target: Any, *msg_and_args: Any) -> None:
    __tracebackhide__ = True
    mark_helper(t)
    _require(t, primitives.error_is(err, target), msg_and_args)


def not_error_is(t: TestingT, err: BaseException | None, target: Any, *msg_and_args: Any) -> None:
    __tracebackhide__ = True
    mark_helper(t)
    _require(t, primitives.not_error_is(err, target), msg_and_args)


def error_contains(t: TestingT, err: BaseException, text: str, *msg_and_args: Any) -> None:
    __tracebackhide__ = True
    mark_helper(t)
    _require(t, primitives.error_contains(err, text), msg_and_args)


def not_error_contains(t: TestingT, err: BaseException, text: str, *msg_and_args: Any) -> None:
    __tracebackhide__ = True
    mark_helper(t)
    _require(t, primitives.not_error_contains(err, text), msg_and_args)


def len_equal(t: TestingT, seq: Sized, expected_len: int, *msg_and_args: Any) -> None:
    """Assert that ``len(seq) == expected_len``."""
    __tracebackhide__ = True
    mark_helper(t)
    _require(t, primitives.len_equal(seq, expected_len), msg_and_args)
