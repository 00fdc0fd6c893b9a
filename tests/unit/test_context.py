"""Tests for outcome collection."""

import json

import pytest

from checkmate import assertions, check
from checkmate.context import CheckOutcome, OUTCOMES, collect_outcomes
from checkmate.errors import TestAborted


def test_collects_passes_and_failures(sink):
    with collect_outcomes() as outcomes:
        check.equal(sink, 1, 1)
        check.equal(sink, 1, 2)

    assert [o.check_name for o in outcomes] == ["equal", "equal"]
    assert [o.passed for o in outcomes] == [True, False]
    assert outcomes[0].message is None
    assert outcomes[1].message == "expected 2 to equal 1"


def test_outcome_truthiness(sink):
    with collect_outcomes() as outcomes:
        check.true(sink, True)
        check.true(sink, False)

    assert outcomes[0]
    assert not outcomes[1]


def test_fail_fast_flag(sink):
    with collect_outcomes() as outcomes:
        check.nil(sink, None)
        with pytest.raises(TestAborted):
            assertions.nil(sink, 1)

    assert [o.fail_fast for o in outcomes] == [False, True]


def test_caller_points_at_test_code(sink):
    with collect_outcomes() as outcomes:
        check.len_equal(sink, [], 0)

    caller = outcomes[0].caller
    assert caller is not None
    assert "test_caller_points_at_test_code" in caller
    assert not caller.startswith("checkmate")


def test_nested_scopes_shadow_outer(sink):
    with collect_outcomes() as outer:
        check.true(sink, True)
        with collect_outcomes() as inner:
            check.false(sink, False)
        check.true(sink, True)

    assert len(outer) == 2
    assert [o.check_name for o in inner] == ["false"]


def test_no_collection_outside_scope(sink):
    assert OUTCOMES.get() is None
    check.true(sink, False)
    assert OUTCOMES.get() is None


def test_explicit_caller_kept():
    outcome = CheckOutcome(check_name="check", passed=True, caller="mod:fn:1")
    assert outcome.caller == "mod:fn:1"


def test_outcome_serializes():
    outcome = CheckOutcome(check_name="equal", passed=False, message="nope", caller="m:f:1")
    data = json.loads(outcome.model_dump_json())
    assert data == {
        "check_name": "equal",
        "passed": False,
        "message": "nope",
        "fail_fast": False,
        "caller": "m:f:1",
    }
