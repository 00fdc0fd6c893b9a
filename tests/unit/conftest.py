"""Shared fixtures for unit tests."""

import pytest

from checkmate.comparer import set_default_comparer
from checkmate.config import reset_config
from checkmate.testing import RecordingHelperSink, RecordingSink


@pytest.fixture(autouse=True)
def clean_globals():
    """Reset the cached config and default comparer around each test."""
    reset_config()
    set_default_comparer(None)
    yield
    reset_config()
    set_default_comparer(None)


@pytest.fixture
def sink() -> RecordingSink:
    """Provide a sink that records logs and failure calls."""
    return RecordingSink()


@pytest.fixture
def helper_sink() -> RecordingHelperSink:
    """Provide a recording sink that also supports helper()."""
    return RecordingHelperSink()
