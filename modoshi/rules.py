"""
Rule and transform model for Modoshi.

Rule tables are plain, immutable data: a Rule names its deinflection
strategy with a DeinflectKind instead of carrying a function, so the tables
can be compared, hashed and printed. The strategies themselves live in
DEINFLECTORS and are looked up when a rule fires.
"""

from dataclasses import dataclass, field
from enum import Enum
from re import Match, Pattern
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple


# ============================================================================
# Enumerations
# ============================================================================

class RuleType(Enum):
    """How a rule's pattern is anchored."""
    SUFFIX = "suffix"
    PREFIX = "prefix"
    WHOLE_WORD = "wholeWord"
    OTHER = "other"


class DeinflectKind(Enum):
    """The closed set of deinflection strategies."""
    GENERIC_SUFFIX = "genericSuffix"
    GENERIC_PREFIX = "genericPrefix"
    GENERIC_WHOLE_WORD = "genericWholeWord"
    EN_PHRASAL_VERB_INFLECTION = "enPhrasalVerbInflection"
    EN_PHRASAL_VERB_INTERPOSED_OBJECT = "enPhrasalVerbInterposedObject"
    ES_PRONOMINAL = "esPronominal"
    GENERIC_STEM_CHANGE = "genericStemChange"
    SPECIAL_CASED_STEM_CHANGE = "specialCasedStemChange"


# ============================================================================
# Descriptor Data
# ============================================================================

@dataclass(frozen=True)
class ConditionI18n:
    """Localized name of a condition."""
    language: str
    name: str


@dataclass(frozen=True)
class Condition:
    """A grammatical category a word form can be in."""
    name: str
    is_dictionary_form: bool = False
    sub_conditions: Tuple[str, ...] = ()
    i18n: Tuple[ConditionI18n, ...] = ()


@dataclass(frozen=True)
class TransformI18n:
    """Localized name and description of a transform."""
    language: str
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class StemChange:
    """
    Stem rewrite applied before the ending of a stem-changing verb.

    When `prefix` is set and the text starts with it, the special pair
    (prefix_stem_from, prefix_stem_to) is used instead of the default one.
    """
    stem_from: str
    stem_to: str
    prefix: Optional[str] = None
    prefix_stem_from: Optional[str] = None
    prefix_stem_to: Optional[str] = None

    def select(self, text: str) -> Tuple[str, str]:
        if self.prefix is not None and text.startswith(self.prefix):
            return self.prefix_stem_from, self.prefix_stem_to
        return self.stem_from, self.stem_to


@dataclass(frozen=True)
class Rule:
    """
    One rewrite from an inflected form to a less inflected one.

    Attributes:
        rule_type: Anchoring of `pattern`.
        pattern: Regular expression a text must match for the rule to fire.
        deinflect_kind: Strategy used to compute the deinflected text.
        conditions_in: Condition identifiers the rule accepts.
        conditions_out: Condition identifiers of the produced candidate.
        inflected: Literal inflected affix, word or verb tail.
        deinflected: Text that replaces the inflected span.
        rewrite: Regular expression whose first match is replaced by
            `deinflected`, for strategies that rewrite inside the text.
        stem_change: Stem rewrite for stem-changing verbs.
    """
    rule_type: RuleType
    pattern: str
    deinflect_kind: DeinflectKind
    conditions_in: Tuple[str, ...] = ()
    conditions_out: Tuple[str, ...] = ()
    inflected: str = ""
    deinflected: str = ""
    rewrite: Optional[str] = None
    stem_change: Optional[StemChange] = None


@dataclass(frozen=True)
class Transform:
    """A named, ordered group of rules sharing one grammatical reading."""
    name: str
    rules: Tuple[Rule, ...] = ()
    description: Optional[str] = None
    i18n: Tuple[TransformI18n, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "rules", tuple(self.rules))
        object.__setattr__(self, "i18n", tuple(self.i18n))


@dataclass(frozen=True)
class LanguageTransformDescriptor:
    """Everything a LanguageTransformer needs to learn one language."""
    language: str
    conditions: Dict[str, Condition] = field(default_factory=dict)
    transforms: Dict[str, Transform] = field(default_factory=dict)

    def condition_entries(self) -> List[Tuple[str, Condition]]:
        return list(self.conditions.items())


# ============================================================================
# Rule Builders
# ============================================================================

def _conditions(values: Iterable[str]) -> Tuple[str, ...]:
    return tuple(values)


def inflection(
    inflected: str,
    deinflected: str,
    conditions_in: Sequence[str],
    conditions_out: Sequence[str],
    rule_type: RuleType,
) -> Rule:
    """
    Build a suffix, prefix or whole-word rule.

    Example:
        >>> rule = inflection("ければ", "い", ["-ば"], ["adj-i"], RuleType.SUFFIX)
        >>> rule.pattern
        'ければ$'
    """
    if rule_type is RuleType.SUFFIX:
        pattern, kind = f"{inflected}$", DeinflectKind.GENERIC_SUFFIX
    elif rule_type is RuleType.PREFIX:
        pattern, kind = f"^{inflected}", DeinflectKind.GENERIC_PREFIX
    elif rule_type is RuleType.WHOLE_WORD:
        pattern, kind = f"^{inflected}$", DeinflectKind.GENERIC_WHOLE_WORD
    else:
        raise ValueError(f"{rule_type} rules need a dedicated builder")
    return Rule(
        rule_type=rule_type,
        pattern=pattern,
        deinflect_kind=kind,
        conditions_in=_conditions(conditions_in),
        conditions_out=_conditions(conditions_out),
        inflected=inflected,
        deinflected=deinflected,
    )


def suffix_inflection(inflected, deinflected, conditions_in, conditions_out) -> Rule:
    return inflection(inflected, deinflected, conditions_in, conditions_out, RuleType.SUFFIX)


def prefix_inflection(inflected, deinflected, conditions_in, conditions_out) -> Rule:
    return inflection(inflected, deinflected, conditions_in, conditions_out, RuleType.PREFIX)


def whole_word_inflection(inflected, deinflected, conditions_in, conditions_out) -> Rule:
    return inflection(inflected, deinflected, conditions_in, conditions_out, RuleType.WHOLE_WORD)


def generic_stem_change_rule(
    stem_from: str,
    stem_to: str,
    ending: str,
    ending_to: str,
    conditions_in: Sequence[str],
    conditions_out: Sequence[str],
) -> Rule:
    """
    Build a rule for a stem-changing verb, e.g. piensa -> pensar.

    `ending` is a regular expression for the inflected endings; it is
    anchored at the end of the word.
    """
    return Rule(
        rule_type=RuleType.OTHER,
        pattern=rf"{stem_from}\w*{ending}$",
        deinflect_kind=DeinflectKind.GENERIC_STEM_CHANGE,
        conditions_in=_conditions(conditions_in),
        conditions_out=_conditions(conditions_out),
        inflected=ending,
        deinflected=ending_to,
        rewrite=f"{ending}$",
        stem_change=StemChange(stem_from, stem_to),
    )


def special_cased_stem_change_rule(
    inflected_stem: str,
    prefix: str,
    prefix_stem_from: str,
    prefix_stem_to: str,
    stem_from: str,
    stem_to: str,
    ending: str,
    ending_to: str,
    conditions_in: Sequence[str],
    conditions_out: Sequence[str],
) -> Rule:
    """
    Build a stem-change rule with one exceptional verb.

    Texts starting with `prefix` (jue-, hue-) use the prefix stem pair;
    everything else uses the default pair.
    """
    return Rule(
        rule_type=RuleType.OTHER,
        pattern=rf"{inflected_stem}\w*{ending}$",
        deinflect_kind=DeinflectKind.SPECIAL_CASED_STEM_CHANGE,
        conditions_in=_conditions(conditions_in),
        conditions_out=_conditions(conditions_out),
        inflected=ending,
        deinflected=ending_to,
        rewrite=f"{ending}$",
        stem_change=StemChange(stem_from, stem_to, prefix, prefix_stem_from, prefix_stem_to),
    )


# ============================================================================
# Deinflection Strategies
# ============================================================================

def _replace_first(regex: Pattern, text: str, replacement: str) -> str:
    match = regex.search(text)
    if match is None:
        return text
    return text[:match.start()] + replacement + text[match.end():]


def _generic_suffix(rule: Rule, match: Match, rewrite: Optional[Pattern], text: str) -> str:
    return text[:match.start()] + rule.deinflected + text[match.end():]


def _generic_prefix(rule: Rule, match: Match, rewrite: Optional[Pattern], text: str) -> str:
    if text.startswith(rule.inflected):
        return rule.deinflected + text[len(rule.inflected):]
    return text


def _generic_whole_word(rule: Rule, match: Match, rewrite: Optional[Pattern], text: str) -> str:
    return rule.deinflected


def _rewrite(rule: Rule, match: Match, rewrite: Optional[Pattern], text: str) -> str:
    return _replace_first(rewrite, text, rule.deinflected)


def _pronominal(rule: Rule, match: Match, rewrite: Optional[Pattern], text: str) -> str:
    infinitive = match.group(2) + match.group(3) + "se"
    return text[:match.start()] + infinitive + text[match.end():]


def _stem_change(rule: Rule, match: Match, rewrite: Optional[Pattern], text: str) -> str:
    stem_from, stem_to = rule.stem_change.select(text)
    text = text.replace(stem_from, stem_to, 1)
    return _replace_first(rewrite, text, rule.deinflected)


Deinflector = Callable[[Rule, Match, Optional[Pattern], str], str]

DEINFLECTORS: Dict[DeinflectKind, Deinflector] = {
    DeinflectKind.GENERIC_SUFFIX: _generic_suffix,
    DeinflectKind.GENERIC_PREFIX: _generic_prefix,
    DeinflectKind.GENERIC_WHOLE_WORD: _generic_whole_word,
    DeinflectKind.EN_PHRASAL_VERB_INFLECTION: _rewrite,
    DeinflectKind.EN_PHRASAL_VERB_INTERPOSED_OBJECT: _rewrite,
    DeinflectKind.ES_PRONOMINAL: _pronominal,
    DeinflectKind.GENERIC_STEM_CHANGE: _stem_change,
    DeinflectKind.SPECIAL_CASED_STEM_CHANGE: _stem_change,
}


def deinflect(rule: Rule, match: Match, rewrite: Optional[Pattern], text: str) -> str:
    """
    Apply a rule to a text its pattern matched.

    Args:
        rule: The rule that fired.
        match: Result of searching `text` with the rule's compiled pattern.
        rewrite: The rule's compiled `rewrite` expression, if it has one.
        text: The text being deinflected.

    Returns:
        The deinflected text.
    """
    return DEINFLECTORS[rule.deinflect_kind](rule, match, rewrite, text)
