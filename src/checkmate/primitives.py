"""Comparison primitives shared by the check and assertion layers.

Each primitive returns an :class:`Evaluation`: the boolean outcome plus the
default failure message for the operands it was given. Primitives never
talk to a sink.
"""

from __future__ import annotations

import ctypes
import weakref
from collections.abc import Hashable, Iterator, Sized
from dataclasses import dataclass
from typing import Any

from checkmate.comparer import Comparer, get_default_comparer
from checkmate.messages import DEFAULT_MESSAGES, render


@dataclass(frozen=True, slots=True)
class Evaluation:
    """Outcome of one primitive together with its default message."""

    name: str
    passed: bool
    args: tuple[Any, ...] = ()

    @property
    def template(self) -> str:
        return DEFAULT_MESSAGES[self.name]

    @property
    def default_message(self) -> str:
        return render(self.template, self.args)


def is_nil(value: Any) -> bool:
    """Return True for None and for reference kinds whose referent is gone.

    A dead weakref, a dead weakref proxy and a NULL ctypes pointer all count
    as nil. Falsy plain values such as ``0`` or ``""`` do not.
    """
    if value is None:
        return True
    # isinstance() on a dead proxy raises ReferenceError, so match proxies by exact type first
    if type(value) in (weakref.ProxyType, weakref.CallableProxyType):
        try:
            value.__class__
        except ReferenceError:
            return True
        return False
    if isinstance(value, weakref.ReferenceType):
        return value() is None
    if isinstance(value, ctypes._Pointer):
        return not value
    if isinstance(value, (ctypes.c_void_p, ctypes.c_char_p, ctypes.c_wchar_p)):
        return value.value is None
    return False


def nil(value: Any) -> Evaluation:
    return Evaluation("nil", is_nil(value), (value,))


def not_nil(value: Any) -> Evaluation:
    return Evaluation("not_nil", not is_nil(value))


def true(condition: Any) -> Evaluation:
    return Evaluation("true", condition is True)


def false(condition: Any) -> Evaluation:
    return Evaluation("false", condition is False)


def _require_hashable(op: str, *operands: Any) -> None:
    for operand in operands:
        if not isinstance(operand, Hashable):
            raise TypeError(
                f"{op} needs comparable scalar operands, got {type(operand).__name__}; "
                "use deep_equal for structural comparison"
            )


def equal(actual: Any, expected: Any) -> Evaluation:
    _require_hashable("equal", actual, expected)
    return Evaluation("equal", actual == expected, (expected, actual))


def not_equal(actual: Any, expected: Any) -> Evaluation:
    _require_hashable("not_equal", actual, expected)
    return Evaluation("not_equal", actual != expected, (expected, actual))


def deep_equal(actual: Any, expected: Any, comparer: Comparer | None = None) -> Evaluation:
    diff = (comparer or get_default_comparer()).diff(expected, actual)
    return Evaluation("deep_equal", diff == "", (diff,))


def not_deep_equal(actual: Any, expected: Any, comparer: Comparer | None = None) -> Evaluation:
    diff = (comparer or get_default_comparer()).diff(expected, actual)
    return Evaluation("not_deep_equal", diff != "", (expected, actual))


def iter_error_tree(err: BaseException) -> Iterator[BaseException]:
    """Yield ``err`` and every exception it wraps, depth first.

    Follows ``__cause__``, ``__context__`` (unless suppressed) and the
    members of exception groups. Each exception is yielded once.
    """
    seen: set[int] = set()
    stack = [err]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current

        children: list[BaseException] = []
        if isinstance(current, BaseExceptionGroup):
            children.extend(current.exceptions)
        if current.__cause__ is not None:
            children.append(current.__cause__)
        if current.__context__ is not None and not current.__suppress_context__:
            children.append(current.__context__)
        stack.extend(reversed(children))


def _matches(node: BaseException, target: Any) -> bool:
    if node is target:
        return True
    if isinstance(target, type) and issubclass(target, BaseException):
        return isinstance(node, target)
    return node == target


def has_error(err: BaseException | None, target: Any) -> bool:
    """Return True if ``target`` occurs anywhere in the tree of ``err``.

    ``target`` may be an exception instance (matched by identity or
    equality) or an exception class (matched with isinstance).
    """
    if err is None:
        return target is None
    if target is None:
        return False
    return any(_matches(node, target) for node in iter_error_tree(err))


def error_is(err: BaseException | None, target: Any) -> Evaluation:
    return Evaluation("error_is", has_error(err, target), (err, _describe_target(target)))


def not_error_is(err: BaseException | None, target: Any) -> Evaluation:
    return Evaluation("not_error_is", not has_error(err, target), (err, _describe_target(target)))


def _describe_target(target: Any) -> Any:
    if isinstance(target, type):
        return target.__qualname__
    return target


def _error_text(op: str, err: BaseException | None) -> str:
    if err is None:
        raise TypeError(f"{op} needs an exception, got None")
    return str(err)


def error_contains(err: BaseException, text: str) -> Evaluation:
    rendered = _error_text("error_contains", err)
    return Evaluation("error_contains", text in rendered, (text, rendered))


def not_error_contains(err: BaseException, text: str) -> Evaluation:
    rendered = _error_text("not_error_contains", err)
    return Evaluation("not_error_contains", text not in rendered, (text,))


def len_equal(seq: Sized, expected_len: int) -> Evaluation:
    actual_len = len(seq)
    return Evaluation("len_equal", actual_len == expected_len, (seq, expected_len, actual_len))
