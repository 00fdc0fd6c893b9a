"""Default failure messages and the message-and-args formatting policy."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from types import MappingProxyType
from typing import Any

logger = logging.getLogger(__name__)

NON_STRING_MESSAGE_WARNING = "checkmate: called with a non-string message, using default message"

DEFAULT_CHECK_MESSAGE = "check failed"
DEFAULT_ASSERT_MESSAGE = "assertion failed"

# Templates take their arguments with ``%``; the argument order for each
# primitive lives next to its condition in checkmate.primitives.
DEFAULT_MESSAGES: MappingProxyType[str, str] = MappingProxyType(
    {
        "nil": "expected value to be nil, got %s",
        "not_nil": "expected value to not be nil, got nil",
        "true": "expected condition to be true, got false",
        "false": "expected condition to be false, got true",
        "equal": "expected %s to equal %s",
        "not_equal": "expected %s to not equal %s",
        "deep_equal": "mismatch (-expected +actual):\n%s",
        "not_deep_equal": "expected %s to not equal %s, got that they're equal",
        "error_is": "expected error %s to have error %s in its tree",
        "not_error_is": "expected error %s to not have error %s in its tree",
        "error_contains": "expected err to contain %s, got %s",
        "not_error_contains": "expected err to contain not %s, got that it does",
        "len_equal": "expected %s to have len %d, got len %d",
    }
)


_VALUE_VERB = re.compile(r"%([%v])")


def render(template: str, args: Sequence[Any]) -> str:
    """Apply ``%`` formatting, leaving argument-free templates untouched.

    ``%v`` is accepted as a synonym for ``%s``. A template that does not fit
    its arguments never raises; the template is logged as written followed
    by the arguments' repr.
    """
    if not args:
        return template
    fmt = _VALUE_VERB.sub(lambda m: "%%" if m.group(1) == "%" else "%s", template)
    try:
        return fmt % tuple(args)
    except (TypeError, ValueError):
        logger.debug("message template %r does not fit %d argument(s)", template, len(args))
        return f"{template} {tuple(args)!r}"


def resolve_message(msg_and_args: Sequence[Any], default: str | Callable[[], str]) -> list[str]:
    """Return the lines to log for a failure.

    An empty ``msg_and_args`` gives the default message. A leading string is
    a template for the remaining arguments. Anything else is reported with
    a warning followed by the default message.
    """
    if not msg_and_args:
        return [_default_text(default)]

    template, *args = msg_and_args
    if isinstance(template, str):
        return [render(template, args)]
    return [NON_STRING_MESSAGE_WARNING, _default_text(default)]


def _default_text(default: str | Callable[[], str]) -> str:
    return default() if callable(default) else default
