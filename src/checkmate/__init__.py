"""Checkmate - checks and assertions for tests.

``checkmate.check`` functions mark the test failed and keep going;
``checkmate.assertions`` functions stop the test on the first failure.
Both take a reporting sink first and accept an optional trailing message
and format arguments.
"""

from . import assertions, check
from .comparer import Comparer, PrettyDiffComparer, get_default_comparer, set_default_comparer
from .config import CheckmateConfig, get_config, load_config
from .context import CheckOutcome, collect_outcomes
from .errors import ConfigError, TestAborted
from .evaluator import assert_that, check_that, evaluate
from .primitives import is_nil
from .sink import HelperT, TestingT
from .sinks import ConsoleSink, LoggingSink
from .version import __version__


__all__ = [
    # Layers
    "assertions",
    "check",
    "assert_that",
    "check_that",
    "evaluate",
    # Sinks
    "TestingT",
    "HelperT",
    "LoggingSink",
    "ConsoleSink",
    "TestAborted",
    # Comparison
    "Comparer",
    "PrettyDiffComparer",
    "get_default_comparer",
    "set_default_comparer",
    "is_nil",
    # Outcomes
    "CheckOutcome",
    "collect_outcomes",
    # Config
    "CheckmateConfig",
    "ConfigError",
    "get_config",
    "load_config",
    "__version__",
]
