"""
Language transformer for Modoshi.

A LanguageTransformer learns one or more language descriptors and then
enumerates every way an inflected surface form can be rewritten back toward
its dictionary form. The search is breadth-first: each produced candidate
is itself searched, so chains like 食べさせない -> 食べさせる -> 食べる are
found in one call.

Traces are stored newest-first: trace[0] is the rule applied last.
"""

import logging
import re
from dataclasses import dataclass
from re import Pattern
from typing import Dict, List, Optional, Sequence, Tuple

from modoshi import settings
from modoshi.conditions import (
    build_condition_flags,
    conditions_match,
    lookup_mask,
    resolve_mask,
)
from modoshi.errors import InvalidPattern, UnknownCondition
from modoshi.rules import LanguageTransformDescriptor, Rule, Transform, deinflect

logger = logging.getLogger(__name__)


# ============================================================================
# Result Types
# ============================================================================

@dataclass(frozen=True)
class TraceFrame:
    """One applied rule: which transform, which of its rules, and the text it fired on."""
    transform_id: str
    rule_index: int
    text: str


@dataclass(frozen=True)
class TransformedText:
    """
    A candidate produced by the search.

    Attributes:
        text: The candidate string.
        conditions: Condition mask the candidate is in (0 for the input).
        trace: Applied rules, newest first.
    """
    text: str
    conditions: int = 0
    trace: Tuple[TraceFrame, ...] = ()

    @property
    def reasons(self) -> List[str]:
        """Transform ids in word order (innermost inflection first)."""
        return [frame.transform_id for frame in self.trace]

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "conditions": self.conditions,
            "reasons": self.reasons,
            "trace": [
                {"transform": f.transform_id, "ruleIndex": f.rule_index, "text": f.text}
                for f in self.trace
            ],
        }


@dataclass(frozen=True)
class InflectionRule:
    """Display record for a transform."""
    name: str
    description: Optional[str] = None


# ============================================================================
# Compiled Tables
# ============================================================================

@dataclass(frozen=True)
class _CompiledRule:
    rule: Rule
    regex: Pattern
    rewrite: Optional[Pattern]
    conditions_in: int
    conditions_out: int


@dataclass(frozen=True)
class _CompiledTransform:
    id: str
    transform: Transform
    heuristic: Pattern
    rules: Tuple[_CompiledRule, ...]


def _compile(pattern: str, transform_id: str, rule_index: int) -> Pattern:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPattern(transform_id, rule_index, e) from e


def _compile_transform(
    transform_id: str,
    transform: Transform,
    flags_map: Dict[str, int],
) -> _CompiledTransform:
    compiled_rules = []
    for rule_index, rule in enumerate(transform.rules):
        regex = _compile(rule.pattern, transform_id, rule_index)
        rewrite = None
        if rule.rewrite is not None:
            rewrite = _compile(rule.rewrite, transform_id, rule_index)
        try:
            conditions_in = resolve_mask(flags_map, rule.conditions_in)
            conditions_out = resolve_mask(flags_map, rule.conditions_out)
        except UnknownCondition as e:
            raise UnknownCondition(e.name, e.index, transform_id, rule_index) from None
        compiled_rules.append(
            _CompiledRule(rule, regex, rewrite, conditions_in, conditions_out)
        )

    heuristic = _compile(
        "|".join(rule.pattern for rule in transform.rules) or "(?!)",
        transform_id, 0,
    )
    return _CompiledTransform(transform_id, transform, heuristic, tuple(compiled_rules))


# ============================================================================
# Language Transformer
# ============================================================================

def _check_max_results(max_results: int) -> int:
    if max_results < 0:
        raise ValueError(f"max_results must be 0 (unbounded) or positive, got {max_results}")
    return max_results


class LanguageTransformer:
    """
    Breadth-first deinflection engine over installed rule tables.

    Example:
        >>> from modoshi.transforms.en import ENGLISH_TRANSFORMS_DESCRIPTOR
        >>> lt = LanguageTransformer()
        >>> lt.install(ENGLISH_TRANSFORMS_DESCRIPTOR)
        >>> [r.text for r in lt.transform("walked")][:2]
        ['walked', 'walk']
    """

    def __init__(self, max_results: Optional[int] = None):
        self.max_results = _check_max_results(
            settings.MAX_RESULTS if max_results is None else max_results
        )
        self.languages: List[str] = []
        self._next_flag_index = 0
        self._transforms: List[_CompiledTransform] = []
        self._condition_type_to_flags: Dict[str, int] = {}
        self._part_of_speech_to_flags: Dict[str, int] = {}

    def clear(self) -> None:
        """Forget every installed descriptor."""
        self.languages = []
        self._next_flag_index = 0
        self._transforms = []
        self._condition_type_to_flags = {}
        self._part_of_speech_to_flags = {}

    def install(self, descriptor: LanguageTransformDescriptor) -> None:
        """
        Learn a language descriptor.

        Condition flags continue from where the previous install stopped.
        Nothing is committed unless the whole descriptor compiles.

        Raises:
            UnknownCondition: A rule or sub-condition names an undeclared condition.
            SubConditionCycle: Sub-conditions reference each other in a loop.
            TooManyConditions: The leaf flag budget is exhausted.
            InvalidPattern: A rule pattern does not compile.
        """
        flags_map, next_flag_index = build_condition_flags(
            descriptor.condition_entries(),
            self._next_flag_index,
            settings.MAX_CONDITION_FLAGS,
        )

        compiled = [
            _compile_transform(transform_id, transform, flags_map)
            for transform_id, transform in descriptor.transforms.items()
        ]

        self._next_flag_index = next_flag_index
        self._transforms.extend(compiled)
        self._condition_type_to_flags.update(flags_map)
        for condition_type, condition in descriptor.conditions.items():
            if condition.is_dictionary_form:
                self._part_of_speech_to_flags[condition_type] = flags_map[condition_type]
        self.languages.append(descriptor.language)

        logger.info(
            f"Installed '{descriptor.language}': {len(compiled)} transforms, "
            f"{len(flags_map)} conditions"
        )

    # alias
    add_descriptor = install

    @property
    def next_flag_index(self) -> int:
        return self._next_flag_index

    @property
    def transform_ids(self) -> List[str]:
        return [t.id for t in self._transforms]

    @property
    def condition_flags(self) -> Dict[str, int]:
        return dict(self._condition_type_to_flags)

    @property
    def part_of_speech_flags(self) -> Dict[str, int]:
        return dict(self._part_of_speech_to_flags)

    def get_transform(self, transform_id: str) -> Optional[Transform]:
        for compiled in self._transforms:
            if compiled.id == transform_id:
                return compiled.transform
        return None

    def get_condition_flags_from_parts_of_speech(self, parts_of_speech: Sequence[str]) -> int:
        return lookup_mask(self._part_of_speech_to_flags, parts_of_speech)

    def get_condition_flags_from_condition_types(self, condition_types: Sequence[str]) -> int:
        return lookup_mask(self._condition_type_to_flags, condition_types)

    def get_condition_flags_from_single_condition_type(self, condition_type: str) -> int:
        return lookup_mask(self._condition_type_to_flags, [condition_type])

    conditions_match = staticmethod(conditions_match)

    def transform(self, source_text: str, max_results: Optional[int] = None) -> List[TransformedText]:
        """
        Enumerate the deinflections of a text.

        Args:
            source_text: Surface form to deinflect.
            max_results: Cap on the number of results; None uses the
                transformer's default and 0 means unbounded.

        Raises:
            ValueError: max_results is negative.

        Returns:
            Candidates in breadth-first order. The first is always the
            input itself with no conditions and an empty trace.
        """
        cap = self.max_results if max_results is None else _check_max_results(max_results)
        results = [TransformedText(source_text)]
        i = 0
        while i < len(results):
            node = results[i]
            i += 1
            for compiled in self._transforms:
                if not compiled.heuristic.search(node.text):
                    continue
                for j, crule in enumerate(compiled.rules):
                    if not conditions_match(node.conditions, crule.conditions_in):
                        continue
                    match = crule.regex.search(node.text)
                    if match is None:
                        continue
                    if any(
                        frame.transform_id == compiled.id
                        and frame.rule_index == j
                        and frame.text == node.text
                        for frame in node.trace
                    ):
                        logger.debug(
                            f"Cycle guard: {compiled.id}[{j}] already applied to '{node.text}'"
                        )
                        continue

                    if cap and len(results) >= cap:
                        logger.warning(
                            f"Result cap {cap} reached while deinflecting '{source_text}'"
                        )
                        return results

                    new_text = deinflect(crule.rule, match, crule.rewrite, node.text)
                    frame = TraceFrame(compiled.id, j, node.text)
                    results.append(
                        TransformedText(new_text, crule.conditions_out, (frame,) + node.trace)
                    )
        return results

    def get_user_facing_inflection_rules(self, inflection_rules: Sequence[str]) -> List[InflectionRule]:
        """Map transform ids to display records; unknown ids map to themselves."""
        out = []
        for rule_id in inflection_rules:
            transform = self.get_transform(rule_id)
            if transform is None:
                out.append(InflectionRule(rule_id))
            else:
                out.append(InflectionRule(transform.name, transform.description))
        return out
