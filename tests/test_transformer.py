"""
Tests for transformer.py - the breadth-first deinflection engine.
"""

import logging
import re

import pytest

from modoshi.errors import InvalidPattern, SubConditionCycle, TooManyConditions, UnknownCondition
from modoshi.rules import (
    Condition,
    DeinflectKind,
    LanguageTransformDescriptor,
    Rule,
    RuleType,
    Transform,
    deinflect,
    suffix_inflection,
)
from modoshi.transformer import InflectionRule, LanguageTransformer, TransformedText


def _descriptor(transforms, conditions=None, language="xx"):
    if conditions is None:
        conditions = {"x": Condition("X", is_dictionary_form=True), "y": Condition("Y")}
    return LanguageTransformDescriptor(language, conditions, transforms)


# =============================================================================
# Install
# =============================================================================


class TestInstall:
    """Tests for installing descriptors."""

    def test_english_flags(self, en_transformer):
        assert en_transformer.condition_flags == {
            "v_phr": 1, "np": 2, "ns": 4, "adj": 8, "adv": 16, "v": 1, "n": 6,
        }
        assert en_transformer.next_flag_index == 5

    def test_japanese_flags(self, ja_transformer):
        flags = ja_transformer.condition_flags
        assert flags["v1"] == 3
        assert flags["v5"] == 28
        assert flags["vk"] == 32
        assert flags["vs"] == 64
        assert flags["adj-i"] == 256
        assert flags["-ます"] == 512
        assert flags["v"] == 255
        assert ja_transformer.next_flag_index == 18

    def test_part_of_speech_flags_only_dictionary_forms(self, ja_transformer):
        pos = ja_transformer.part_of_speech_flags
        assert "v1" in pos
        assert "-ます" not in pos
        assert "v1d" not in pos

    def test_second_install_continues_flags(self):
        lt = LanguageTransformer()
        lt.install(_descriptor({}))
        lt.install(_descriptor({}, {"z": Condition("Z")}, language="yy"))
        assert lt.condition_flags == {"x": 1, "y": 2, "z": 4}
        assert lt.languages == ["xx", "yy"]

    def test_install_logs(self, caplog):
        lt = LanguageTransformer()
        with caplog.at_level(logging.INFO, logger="modoshi.transformer"):
            lt.install(_descriptor({"t": Transform("t", [suffix_inflection("a", "b", [], ["x"])])}))
        assert "Installed 'xx': 1 transforms" in caplog.text

    def test_add_descriptor_alias(self):
        lt = LanguageTransformer()
        lt.add_descriptor(_descriptor({}))
        assert lt.languages == ["xx"]

    def test_clear(self):
        lt = LanguageTransformer()
        lt.install(_descriptor({"t": Transform("t", [suffix_inflection("a", "b", [], ["x"])])}))
        lt.clear()
        assert lt.transform_ids == []
        assert lt.next_flag_index == 0


class TestInstallErrors:
    """Install failures leave the transformer untouched."""

    @pytest.fixture
    def installed(self):
        lt = LanguageTransformer()
        lt.install(_descriptor({"ok": Transform("ok", [suffix_inflection("a", "b", [], ["x"])])}))
        return lt

    def _assert_unchanged(self, lt):
        assert lt.transform_ids == ["ok"]
        assert lt.next_flag_index == 2
        assert lt.condition_flags == {"x": 1, "y": 2}

    def test_unknown_condition(self, installed):
        bad = _descriptor({"bad": Transform("bad", [
            suffix_inflection("a", "b", [], ["x"]),
            suffix_inflection("c", "d", ["x", "nope"], ["x"]),
        ])}, language="zz")
        with pytest.raises(UnknownCondition) as exc_info:
            installed.install(bad)
        err = exc_info.value
        assert (err.name, err.index, err.transform_id, err.rule_index) == ("nope", 1, "bad", 1)
        self._assert_unchanged(installed)

    def test_invalid_pattern(self, installed):
        rule = Rule(RuleType.OTHER, "(", DeinflectKind.GENERIC_SUFFIX)
        with pytest.raises(InvalidPattern) as exc_info:
            installed.install(_descriptor({"bad": Transform("bad", [rule])}, language="zz"))
        assert exc_info.value.transform_id == "bad"
        assert isinstance(exc_info.value.cause, re.error)
        self._assert_unchanged(installed)

    def test_cycle(self, installed):
        conditions = {
            "p": Condition("P", sub_conditions=("q",)),
            "q": Condition("Q", sub_conditions=("p",)),
        }
        with pytest.raises(SubConditionCycle):
            installed.install(_descriptor({}, conditions, language="zz"))
        self._assert_unchanged(installed)

    def test_undeclared_sub_condition_is_a_cycle(self, installed):
        """A composite naming an undeclared condition never resolves."""
        conditions = {"p": Condition("P", sub_conditions=("missing",))}
        with pytest.raises(SubConditionCycle):
            installed.install(_descriptor({}, conditions, language="zz"))
        self._assert_unchanged(installed)

    def test_too_many(self, installed):
        conditions = {f"c{i}": Condition(f"C{i}") for i in range(31)}
        with pytest.raises(TooManyConditions):
            installed.install(_descriptor({}, conditions, language="zz"))
        self._assert_unchanged(installed)


# =============================================================================
# Transform
# =============================================================================


class TestTransform:
    """Tests for the breadth-first search."""

    def test_first_node_is_input(self, ja_transformer):
        results = ja_transformer.transform("食べた")
        assert results[0] == TransformedText("食べた", 0, ())

    def test_no_rules_fire(self, en_transformer):
        assert en_transformer.transform("xyz") == [TransformedText("xyz")]

    def test_empty_string(self, ja_transformer):
        assert ja_transformer.transform("")[0].text == ""

    def test_japanese_past(self, ja_transformer):
        v1 = ja_transformer.get_condition_flags_from_single_condition_type("v1")
        node = next(
            r for r in ja_transformer.transform("食べた")
            if r.text == "食べる" and r.conditions == v1
        )
        assert len(node.trace) == 1
        frame = node.trace[0]
        assert frame.transform_id == "-た"
        assert frame.text == "食べた"
        rule = ja_transformer.get_transform("-た").rules[frame.rule_index]
        assert (rule.inflected, rule.deinflected) == ("た", "る")

    def test_causative_negative_trace(self, ja_transformer, term_reasons):
        """Newest-first trace: causative was applied last."""
        assert ["causative", "negative"] in term_reasons(ja_transformer, "食べさせない", "食べる", "v1")

    def test_breadth_first_prefix(self, ja_transformer):
        results = ja_transformer.transform("愛しくありません")
        summary = [
            (r.text, r.conditions, [(f.transform_id, f.rule_index) for f in r.trace])
            for r in results[:4]
        ]
        assert summary == [
            ("愛しくありません", 0, []),
            ("愛しくありませる", 3, [("-ん", 0)]),
            ("愛しくありまする", 64, [("-ん", 11)]),
            ("愛しくあります", 512, [("negative", 17)]),
        ]

    def test_oldest_frame_is_input(self, ja_transformer):
        for result in ja_transformer.transform("食べさせられなかった")[1:]:
            assert result.trace[-1].text == "食べさせられなかった"

    def test_rules_without_input_conditions_only_fire_on_input(self):
        lt = LanguageTransformer()
        lt.install(_descriptor({
            "t": Transform("t", [suffix_inflection("b", "a", [], ["x"])]),
            "u": Transform("u", [suffix_inflection("c", "b", [], ["x"])]),
        }))
        assert [r.text for r in lt.transform("c")] == ["c", "b"]

    def test_consecutive_frames_are_linked(self, en_transformer):
        """Applying the older frame's rule yields the newer frame's text."""
        for result in en_transformer.transform("unhappily"):
            frames = list(reversed(result.trace))
            steps = [f.text for f in frames] + [result.text]
            for frame, produced in zip(frames, steps[1:]):
                rule = en_transformer.get_transform(frame.transform_id).rules[frame.rule_index]
                match = re.search(rule.pattern, frame.text)
                rewrite = re.compile(rule.rewrite) if rule.rewrite else None
                assert deinflect(rule, match, rewrite, frame.text) == produced

    def test_no_duplicate_nodes(self, ja_transformer):
        results = ja_transformer.transform("行ってきました")
        keys = [(r.text, r.conditions, r.trace) for r in results]
        assert len(keys) == len(set(keys))

    def test_heuristic_matches_iff_a_rule_matches(self, en_transformer):
        for compiled in en_transformer._transforms:
            for text in ("walked", "looked up", "happily", "cats", "going to eat", "plain"):
                expected = any(r.regex.search(text) for r in compiled.rules)
                assert bool(compiled.heuristic.search(text)) == expected


class TestCycleGuard:
    """The same rule never fires twice on the same text within one trace."""

    def test_self_loop(self, caplog):
        lt = LanguageTransformer()
        lt.install(_descriptor({"loop": Transform("loop", [suffix_inflection("a", "a", ["x"], ["x"])])}))
        with caplog.at_level(logging.DEBUG, logger="modoshi.transformer"):
            results = lt.transform("a")
        assert [r.text for r in results] == ["a", "a"]
        assert "Cycle guard" in caplog.text

    def test_ping_pong(self):
        lt = LanguageTransformer()
        lt.install(_descriptor({"swap": Transform("swap", [
            suffix_inflection("b", "c", ["x"], ["x"]),
            suffix_inflection("c", "b", ["x"], ["x"]),
        ])}))
        assert [r.text for r in lt.transform("xb")] == ["xb", "xc", "xb"]


class TestMaxResults:
    """Tests for the result cap."""

    def test_constructor_cap(self, caplog):
        from modoshi.transforms import ENGLISH_TRANSFORMS_DESCRIPTOR

        lt = LanguageTransformer(max_results=2)
        lt.install(ENGLISH_TRANSFORMS_DESCRIPTOR)
        with caplog.at_level(logging.WARNING, logger="modoshi.transformer"):
            results = lt.transform("walked")
        assert [r.text for r in results] == ["walked", "walk"]
        assert "Result cap 2 reached" in caplog.text

    def test_per_call_cap(self, ja_transformer):
        assert len(ja_transformer.transform("食べさせられなかった", max_results=5)) == 5

    def test_zero_means_unbounded(self, ja_transformer):
        assert len(ja_transformer.transform("食べさせられなかった", max_results=0)) > 5

    def test_cap_of_one_returns_only_the_input(self, en_transformer):
        assert en_transformer.transform("walked", max_results=1) == [TransformedText("walked")]

    def test_constructor_cap_of_one(self):
        from modoshi.transforms import ENGLISH_TRANSFORMS_DESCRIPTOR

        lt = LanguageTransformer(max_results=1)
        lt.install(ENGLISH_TRANSFORMS_DESCRIPTOR)
        assert len(lt.transform("walked")) == 1

    def test_cap_is_never_exceeded(self, ja_transformer):
        for cap in range(1, 8):
            assert len(ja_transformer.transform("食べさせられなかった", max_results=cap)) == cap

    def test_negative_cap_per_call(self, en_transformer):
        with pytest.raises(ValueError):
            en_transformer.transform("walked", max_results=-1)

    def test_negative_cap_in_constructor(self):
        with pytest.raises(ValueError):
            LanguageTransformer(max_results=-1)


class TestLookups:
    """Tests for flag lookups and display records."""

    def test_unknown_names_contribute_nothing(self, en_transformer):
        assert en_transformer.get_condition_flags_from_condition_types(["adj", "nope"]) == 8
        assert en_transformer.get_condition_flags_from_single_condition_type("nope") == 0

    def test_parts_of_speech(self, ja_transformer):
        assert ja_transformer.get_condition_flags_from_parts_of_speech(["v1", "v5"]) == 31
        assert ja_transformer.get_condition_flags_from_parts_of_speech(["-ます"]) == 0

    def test_user_facing_rules(self, en_transformer):
        rules = en_transformer.get_user_facing_inflection_rules(["past", "mystery"])
        assert rules == [
            InflectionRule("past", "Simple past tense of a verb"),
            InflectionRule("mystery"),
        ]

    def test_to_dict(self, en_transformer):
        walk = en_transformer.transform("walked")[1]
        data = walk.to_dict()
        assert data["text"] == "walk"
        assert data["reasons"] == ["past"]
        assert data["trace"] == [{"transform": "past", "ruleIndex": 0, "text": "walked"}]
