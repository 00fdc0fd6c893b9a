"""Tests for checkmate.comparer."""

from dataclasses import dataclass

from checkmate import check
from checkmate.comparer import PrettyDiffComparer, get_default_comparer, set_default_comparer
from checkmate.config import CheckmateConfig, set_config


@dataclass
class Person:
    name: str
    age: int


class Left:
    def __repr__(self):
        return "X"


class Right:
    def __repr__(self):
        return "X"


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class TestPrettyDiffComparer:
    def test_equal_values_give_empty_diff(self):
        comparer = PrettyDiffComparer()
        assert comparer.diff({"a": [1, 2]}, {"a": [1, 2]}) == ""
        assert comparer.diff(Person("Alice", 30), Person("Alice", 30)) == ""

    def test_type_mismatch_is_a_difference(self):
        assert PrettyDiffComparer().diff(1, 1.0) == "- 1\n+ 1.0"

    def test_identical_rendering_labels_types(self):
        diff = PrettyDiffComparer().diff(Left(), Right())
        assert diff.splitlines() == ["- Left: X", "+ Right: X"]

    def test_nan_is_never_equal(self):
        assert PrettyDiffComparer().diff(float("nan"), float("nan")) != ""

    def test_multiline_diff_keeps_shared_lines(self):
        expected = ["alphaalphaalphaalphaalpha", "betabetabetabetabeta"]
        actual = ["alphaalphaalphaalphaalpha", "gammagammagammagamma"]

        diff = PrettyDiffComparer(width=20).diff(expected, actual)

        assert diff.splitlines() == [
            "  ['alphaalphaalphaalphaalpha',",
            "-  'betabetabetabetabeta']",
            "+  'gammagammagammagamma']",
        ]

    def test_struct_field_difference(self):
        diff = PrettyDiffComparer().diff(Person("Bob", 30), Person("Alice", 30))

        assert diff.startswith("- ")
        assert "Bob" in diff
        assert "Alice" in diff

    def test_plain_objects_compare_by_fields(self):
        comparer = PrettyDiffComparer()

        assert comparer.diff(Point(1, 2), Point(1, 2)) == ""
        assert comparer.diff([Point(1, 2)], [Point(1, 2)]) == ""
        assert comparer.diff(Point(1, 2), Point(1, 3)) == "- Point(x=1, y=2)\n+ Point(x=1, y=3)"

    def test_plain_object_diff_names_fields(self):
        diff = PrettyDiffComparer(width=20).diff(
            Point("aaaaaaaaaa", "bbbbbbbbbb"), Point("aaaaaaaaaa", "cccccccccc")
        )

        assert diff.splitlines() == [
            "  Point(x='aaaaaaaaaa',",
            "-       y='bbbbbbbbbb')",
            "+       y='cccccccccc')",
        ]
        assert " at 0x" not in diff

    def test_plain_objects_of_different_classes_differ(self):
        class Other:
            def __init__(self, x, y):
                self.x = x
                self.y = y

        assert PrettyDiffComparer().diff(Point(1, 2), Other(1, 2)) != ""

    def test_exceptions_are_not_compared_by_fields(self):
        assert PrettyDiffComparer().diff(ValueError("a"), ValueError("b")) != ""

    def test_self_referencing_lists(self):
        first, second = [], []
        first.append(first)
        second.append(second)

        assert PrettyDiffComparer().diff(first, second) == ""

    def test_show_types(self):
        diff = PrettyDiffComparer(show_types=True).diff(1, 2)
        assert diff == "- int: 1\n+ int: 2"


class TestDefaultComparer:
    def test_built_from_config(self):
        set_config(CheckmateConfig(diff_width=40, sort_dicts=False, show_diff_types=True))

        comparer = get_default_comparer()

        assert isinstance(comparer, PrettyDiffComparer)
        assert comparer.width == 40
        assert comparer.sort_dicts is False
        assert comparer.show_types is True

    def test_replaced_comparer_used_by_checks(self, sink):
        class Never:
            def diff(self, expected, actual):
                return ""

        set_default_comparer(Never())

        assert check.deep_equal(sink, 1, 2)
        assert sink.logs == []
