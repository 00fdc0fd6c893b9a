"""pytest integration.

Enable with ``-p checkmate.pytest_plugin`` or ``pytest_plugins = ["checkmate.pytest_plugin"]``
in a root conftest, then request the ``checkmate_t`` fixture::

    from checkmate import check

    def test_user(checkmate_t):
        user = load_user()
        check.equal(checkmate_t, user.name, "alice")
        check.len_equal(checkmate_t, user.roles, 2)

Failed checks mark the test failed once it finishes; failed assertions stop it
immediately. Either way the report shows every logged line.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from checkmate.context import CheckOutcome, collect_outcomes

SINK_KEY = pytest.StashKey["PytestSink"]()


class PytestSink:
    """Reporting sink bound to a single pytest test item."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.failed = False
        self.outcomes: list[CheckOutcome] = []

    def log(self, line: str) -> None:
        self.lines.append(line)

    def fail(self) -> None:
        self.failed = True

    def fail_now(self) -> None:
        __tracebackhide__ = True
        self.failed = True
        pytest.fail(self.failure_text(), pytrace=False)

    def failure_text(self) -> str:
        return "\n".join(self.lines) or "checkmate: check failed"


@pytest.fixture
def checkmate_t(request: pytest.FixtureRequest) -> Iterator[PytestSink]:
    """Sink for the requesting test."""
    sink = PytestSink()
    request.node.stash[SINK_KEY] = sink
    with collect_outcomes() as outcomes:
        sink.outcomes = outcomes
        yield sink


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo[None]):
    outcome = yield
    report = outcome.get_result()
    if call.when != "call":
        return

    sink = item.stash.get(SINK_KEY, None)
    if sink is None:
        return

    failures = sum(1 for o in sink.outcomes if not o.passed)
    report.user_properties.append(("checkmate_checks", len(sink.outcomes)))
    report.user_properties.append(("checkmate_failures", failures))

    if sink.failed and report.passed:
        report.outcome = "failed"
        report.longrepr = sink.failure_text()
