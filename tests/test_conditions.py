"""
Tests for conditions.py - condition flag construction and matching.
"""

import pytest

from modoshi.conditions import build_condition_flags, conditions_match, lookup_mask, resolve_mask
from modoshi.errors import SubConditionCycle, TooManyConditions, UnknownCondition
from modoshi.rules import Condition


class TestBuildConditionFlags:
    """Tests for assigning bit flags to conditions."""

    def test_leaves_and_composite(self):
        flags, next_index = build_condition_flags([
            ("a", Condition("A")),
            ("b", Condition("B")),
            ("c", Condition("C", sub_conditions=("a", "b"))),
        ])
        assert flags == {"a": 1, "b": 2, "c": 3}
        assert next_index == 2

    def test_composite_declared_before_children(self):
        """Composites are resolved on a later pass, leaves keep declaration order."""
        flags, next_index = build_condition_flags([
            ("v", Condition("V", sub_conditions=("v1", "v5"))),
            ("v1", Condition("V1")),
            ("v5", Condition("V5", sub_conditions=("v5d",))),
            ("v5d", Condition("V5d")),
        ])
        assert flags == {"v1": 1, "v5d": 2, "v5": 2, "v": 3}
        assert next_index == 2

    def test_starting_index(self):
        flags, next_index = build_condition_flags([("x", Condition("X"))], starting_index=5)
        assert flags == {"x": 32}
        assert next_index == 6

    def test_cycle(self):
        with pytest.raises(SubConditionCycle) as exc_info:
            build_condition_flags([
                ("x", Condition("X", sub_conditions=("y",))),
                ("y", Condition("Y", sub_conditions=("x",))),
            ])
        assert set(exc_info.value.identifiers) == {"x", "y"}

    def test_undeclared_sub_condition_never_resolves(self):
        with pytest.raises(SubConditionCycle):
            build_condition_flags([("x", Condition("X", sub_conditions=("missing",)))])

    def test_too_many_conditions(self):
        entries = [(f"c{i}", Condition(f"C{i}")) for i in range(5)]
        with pytest.raises(TooManyConditions) as exc_info:
            build_condition_flags(entries, limit=4)
        assert exc_info.value.limit == 4

    def test_exactly_at_limit(self):
        entries = [(f"c{i}", Condition(f"C{i}")) for i in range(4)]
        flags, next_index = build_condition_flags(entries, limit=4)
        assert next_index == 4
        assert flags["c3"] == 8


class TestMasks:
    """Tests for resolve_mask and lookup_mask."""

    FLAGS = {"a": 1, "b": 2, "c": 3}

    def test_resolve(self):
        assert resolve_mask(self.FLAGS, ["a", "b"]) == 3

    def test_resolve_empty_is_unrestricted(self):
        assert resolve_mask(self.FLAGS, []) == 0

    def test_resolve_unknown(self):
        with pytest.raises(UnknownCondition) as exc_info:
            resolve_mask(self.FLAGS, ["a", "nope"])
        assert exc_info.value.name == "nope"
        assert exc_info.value.index == 1

    def test_lookup_ignores_unknown(self):
        assert lookup_mask(self.FLAGS, ["b", "nope"]) == 2


class TestConditionsMatch:
    """Tests for conditions_match."""

    @pytest.mark.parametrize("mask", [0, 1, 0b1010, 0xFFFFFFFF])
    def test_empty_current_matches_anything(self, mask):
        assert conditions_match(0, mask)

    def test_shared_bit(self):
        assert conditions_match(0b0110, 0b0100)

    def test_disjoint(self):
        assert not conditions_match(0b0001, 0b0110)

    @pytest.mark.parametrize("x,y", [(1, 3), (4, 2), (12, 8), (5, 10)])
    def test_symmetric_for_nonzero(self, x, y):
        assert conditions_match(x, y) == conditions_match(y, x)
