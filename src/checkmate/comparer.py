"""Structural diffing used by deep_equal and not_deep_equal."""

from __future__ import annotations

import difflib
import functools
import pprint
import types
from typing import Any, Protocol

from checkmate.config import CheckmateConfig, get_config


class Comparer(Protocol):
    """Computes a human-readable diff between two values.

    An empty string means the values are equal. Any other result is shown
    to the user verbatim under a ``(-expected +actual)`` header.
    """

    def diff(self, expected: Any, actual: Any) -> str: ...


class PrettyDiffComparer:
    """Line diff of the ``pprint`` renderings of two values.

    Lines only in ``expected`` start with ``-``, lines only in ``actual``
    with ``+`` and shared lines with two spaces.
    """

    def __init__(self, width: int = 80, sort_dicts: bool = True, show_types: bool = False):
        self.width = width
        self.sort_dicts = sort_dicts
        self.show_types = show_types

    @classmethod
    def from_config(cls, config: CheckmateConfig) -> PrettyDiffComparer:
        return cls(
            width=config.diff_width,
            sort_dicts=config.sort_dicts,
            show_types=config.show_diff_types,
        )

    def diff(self, expected: Any, actual: Any) -> str:
        if type(expected) is type(actual) and _equal(expected, actual, set()):
            return ""

        expected_lines = self._render(expected, self.show_types)
        actual_lines = self._render(actual, self.show_types)
        if expected_lines == actual_lines:
            # Same rendering, so only the types (or NaN-like values) differ
            expected_lines = self._render(expected, True)
            actual_lines = self._render(actual, True)

        return "\n".join(
            line.rstrip()
            for line in difflib.ndiff(expected_lines, actual_lines)
            if not line.startswith("? ")
        )

    def _render(self, value: Any, with_type: bool) -> list[str]:
        text = pprint.pformat(_fields_view(value, set()), width=self.width, sort_dicts=self.sort_dicts)
        lines = text.splitlines() or [""]
        if with_type:
            lines = [f"{type(value).__qualname__}: {lines[0]}", *lines[1:]]
        return lines


def _is_plain_object(value: Any) -> bool:
    """True for instances of Python classes that keep their state in ``__dict__``.

    Only classes that inherit identity equality qualify, and every class in
    the MRO apart from ``object`` must be user-defined, so exceptions and
    other builtins holding state outside ``__dict__`` are left alone.
    """
    cls = type(value)
    return (
        cls.__eq__ is object.__eq__
        and hasattr(value, "__dict__")
        and all(klass.__module__ != "builtins" for klass in cls.__mro__[:-1])
    )


def _equal(expected: Any, actual: Any, seen: set[tuple[int, int]]) -> bool:
    """``==``, except that plain objects are compared by type and fields.

    Lists, tuples and dicts are walked so plain objects nested in them are
    compared the same way. ``seen`` holds the pairs already being compared,
    which ends the walk on reference cycles.
    """
    if expected is actual:
        return True

    plain = _is_plain_object(expected) or _is_plain_object(actual)
    walk = type(expected) in (list, tuple, dict) and type(expected) is type(actual)
    if not (plain or walk):
        return expected == actual
    if type(expected) is not type(actual):
        return False

    key = (id(expected), id(actual))
    if key in seen:
        return True
    seen.add(key)

    if plain:
        return _equal(vars(expected), vars(actual), seen)
    if type(expected) is dict:
        return expected.keys() == actual.keys() and all(
            _equal(expected[k], actual[k], seen) for k in expected
        )
    return len(expected) == len(actual) and all(
        _equal(e, a, seen) for e, a in zip(expected, actual)
    )


@functools.cache
def _namespace_type(cls: type) -> type:
    # pprint lays out SimpleNamespace subclasses field by field under their own name
    return type(cls.__name__, (types.SimpleNamespace,), {})


def _fields_view(value: Any, active: set[int]) -> Any:
    """Replace plain objects with namespaces so ``pprint`` shows their fields.

    Values already on the path from the root are returned unchanged and
    ``pprint`` marks them as recursive.
    """
    shows_fields = _is_plain_object(value) and type(value).__repr__ is object.__repr__
    if id(value) in active or not (shows_fields or type(value) in (list, tuple, dict)):
        return value

    active.add(id(value))
    try:
        if shows_fields:
            fields = {name: _fields_view(v, active) for name, v in vars(value).items()}
            return _namespace_type(type(value))(**fields)
        if type(value) is dict:
            return {k: _fields_view(v, active) for k, v in value.items()}
        return type(value)(_fields_view(v, active) for v in value)
    finally:
        active.discard(id(value))


_default_comparer: Comparer | None = None


def get_default_comparer() -> Comparer:
    """Return the comparer used when none is passed explicitly."""
    global _default_comparer
    if _default_comparer is None:
        _default_comparer = PrettyDiffComparer.from_config(get_config())
    return _default_comparer


def set_default_comparer(comparer: Comparer | None) -> None:
    """Replace the default comparer. ``None`` rebuilds it from config on next use."""
    global _default_comparer
    _default_comparer = comparer
