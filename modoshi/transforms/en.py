"""
English deinflection rules.

Besides plain suffix rules, English carries phrasal-verb handling: every
verb suffix rule also exists in a phrasal variant that deinflects the verb
while keeping its particle ("looked up" -> "look up"), and a dedicated rule
removes an object placed between verb and particle ("look it up").
"""

from typing import Dict, List, Sequence

from modoshi.rules import (
    Condition,
    DeinflectKind,
    LanguageTransformDescriptor,
    Rule,
    RuleType,
    Transform,
    prefix_inflection,
    suffix_inflection,
)


# ============================================================================
# Phrasal Verb Lexicon
# ============================================================================

PHRASAL_VERB_PARTICLES = [
    "aboard", "about", "above", "across", "ahead", "alongside", "apart",
    "around", "aside", "astray", "away", "back", "before", "behind", "below",
    "beneath", "besides", "between", "beyond", "by", "close", "down", "east",
    "west", "north", "south", "eastward", "westward", "northward", "southward",
    "forward", "backward", "backwards", "forwards", "home", "in", "inside",
    "instead", "near", "off", "on", "opposite", "out", "outside", "over",
    "overhead", "past", "round", "since", "through", "throughout", "together",
    "under", "underneath", "up", "within", "without",
]

PHRASAL_VERB_PREPOSITIONS = [
    "aback", "about", "above", "across", "after", "against", "ahead", "along",
    "among", "apart", "around", "as", "aside", "at", "away", "back", "before",
    "behind", "below", "between", "beyond", "by", "down", "even", "for",
    "forth", "forward", "from", "in", "into", "of", "off", "on", "onto",
    "open", "out", "over", "past", "round", "through", "to", "together",
    "toward", "towards", "under", "up", "upon", "way", "with", "without",
]

PARTICLES_DISJUNCTION = "|".join(PHRASAL_VERB_PARTICLES)

# union of both lists, first occurrence wins
PHRASAL_VERB_WORD_DISJUNCTION = "|".join(
    dict.fromkeys(PHRASAL_VERB_PARTICLES + PHRASAL_VERB_PREPOSITIONS)
)


# ============================================================================
# Rule Builders
# ============================================================================

def doubled_consonant_inflection(
    consonants: str,
    suffix: str,
    conditions_in: Sequence[str],
    conditions_out: Sequence[str],
) -> List[Rule]:
    """Rules like "stopped" -> "stop", one per consonant."""
    return [
        suffix_inflection(f"{c}{c}{suffix}", c, conditions_in, conditions_out)
        for c in consonants
    ]


def phrasal_verb_inflection(inflected: str, deinflected: str) -> Rule:
    """Deinflect the verb of a phrasal verb, keeping the particle."""
    return Rule(
        rule_type=RuleType.OTHER,
        pattern=rf"^\w*{inflected} (?:{PHRASAL_VERB_WORD_DISJUNCTION})",
        deinflect_kind=DeinflectKind.EN_PHRASAL_VERB_INFLECTION,
        conditions_in=("v",),
        conditions_out=("v_phr",),
        inflected=inflected,
        deinflected=deinflected,
        rewrite=rf"{inflected}(?= (?:{PHRASAL_VERB_WORD_DISJUNCTION}))",
    )


def phrasal_verb_inflections_from_suffix_inflections(rules: Sequence[Rule]) -> List[Rule]:
    return [phrasal_verb_inflection(rule.inflected, rule.deinflected) for rule in rules]


def phrasal_verb_interposed_object_rule() -> Rule:
    """Collapse "<verb> <object> <particle>" to "<verb> <particle>"."""
    not_a_phrasal_word = rf"(?:(?!\b({PHRASAL_VERB_WORD_DISJUNCTION})\b).)+"
    return Rule(
        rule_type=RuleType.OTHER,
        pattern=rf"^\w* {not_a_phrasal_word} (?:{PARTICLES_DISJUNCTION})",
        deinflect_kind=DeinflectKind.EN_PHRASAL_VERB_INTERPOSED_OBJECT,
        conditions_in=(),
        conditions_out=("v_phr",),
        deinflected=" ",
        rewrite=rf"(?<=\w) {not_a_phrasal_word} (?=(?:{PARTICLES_DISJUNCTION}))",
    )


def past_suffix_inflections() -> List[Rule]:
    return [
        suffix_inflection("ed", "", ["v"], ["v"]),  # walked
        suffix_inflection("ed", "e", ["v"], ["v"]),  # hoped
        suffix_inflection("ied", "y", ["v"], ["v"]),  # tried
        suffix_inflection("cked", "c", ["v"], ["v"]),  # frolicked
        suffix_inflection("laid", "lay", ["v"], ["v"]),
        suffix_inflection("paid", "pay", ["v"], ["v"]),
        suffix_inflection("said", "say", ["v"], ["v"]),
        *doubled_consonant_inflection("bdgklmnprstz", "ed", ["v"], ["v"]),
    ]


def ing_suffix_inflections() -> List[Rule]:
    return [
        suffix_inflection("ing", "", ["v"], ["v"]),  # walking
        suffix_inflection("ing", "e", ["v"], ["v"]),  # driving
        suffix_inflection("ying", "ie", ["v"], ["v"]),  # lying
        suffix_inflection("cking", "c", ["v"], ["v"]),  # panicking
        *doubled_consonant_inflection("bdgklmnprstz", "ing", ["v"], ["v"]),
    ]


def third_person_sg_present_suffix_inflections() -> List[Rule]:
    return [
        suffix_inflection("s", "", ["v"], ["v"]),  # walks
        suffix_inflection("es", "", ["v"], ["v"]),  # teaches
        suffix_inflection("ies", "y", ["v"], ["v"]),  # tries
    ]


def _with_phrasal(rules: List[Rule]) -> List[Rule]:
    return rules + phrasal_verb_inflections_from_suffix_inflections(rules)


# ============================================================================
# Conditions
# ============================================================================

EN_CONDITIONS: Dict[str, Condition] = {
    "v": Condition(name="Verb", is_dictionary_form=True, sub_conditions=("v_phr",)),
    "v_phr": Condition(name="Phrasal verb", is_dictionary_form=True),
    "n": Condition(name="Noun", is_dictionary_form=True, sub_conditions=("np", "ns")),
    "np": Condition(name="Noun plural", is_dictionary_form=True),
    "ns": Condition(name="Noun singular", is_dictionary_form=True),
    "adj": Condition(name="Adjective", is_dictionary_form=True),
    "adv": Condition(name="Adverb", is_dictionary_form=True),
}


# ============================================================================
# Transforms
# ============================================================================

EN_TRANSFORMS: Dict[str, Transform] = {
    "plural": Transform(
        name="plural",
        description="Plural form of a noun",
        rules=[suffix_inflection("s", "", ["np"], ["ns"])],
    ),
    "possessive": Transform(
        name="possessive",
        description="Possessive form of a noun",
        rules=[
            suffix_inflection("'s", "", ["n"], ["n"]),
            suffix_inflection("s'", "s", ["n"], ["n"]),
        ],
    ),
    "past": Transform(
        name="past",
        description="Simple past tense of a verb",
        rules=_with_phrasal(past_suffix_inflections()),
    ),
    "ing": Transform(
        name="ing",
        description="Present participle of a verb",
        rules=_with_phrasal(ing_suffix_inflections()),
    ),
    "3rd pers. sing. pres": Transform(
        name="3rd pers. sing. pres",
        description="Third person singular present tense of a verb",
        rules=_with_phrasal(third_person_sg_present_suffix_inflections()),
    ),
    "interposed object": Transform(
        name="interposed object",
        description="Phrasal verb with interposed object",
        rules=[phrasal_verb_interposed_object_rule()],
    ),
    "archaic": Transform(
        name="archaic",
        description="Archaic form of a word",
        rules=[suffix_inflection("'d", "ed", ["v"], ["v"])],
    ),
    "adverb": Transform(
        name="adverb",
        description="Adverb form of an adjective",
        rules=[
            suffix_inflection("ly", "", ["adv"], ["adj"]),  # quickly
            suffix_inflection("ily", "y", ["adv"], ["adj"]),  # happily
            suffix_inflection("ly", "le", ["adv"], ["adj"]),  # humbly
        ],
    ),
    "comparative": Transform(
        name="comparative",
        description="Comparative form of an adjective",
        rules=[
            suffix_inflection("er", "", ["adj"], ["adj"]),  # faster
            suffix_inflection("er", "e", ["adj"], ["adj"]),  # nicer
            suffix_inflection("ier", "y", ["adj"], ["adj"]),  # happier
            *doubled_consonant_inflection("bdgmnt", "er", ["adj"], ["adj"]),
        ],
    ),
    "superlative": Transform(
        name="superlative",
        description="Superlative form of an adjective",
        rules=[
            suffix_inflection("est", "", ["adj"], ["adj"]),  # fastest
            suffix_inflection("est", "e", ["adj"], ["adj"]),  # nicest
            suffix_inflection("iest", "y", ["adj"], ["adj"]),  # happiest
            *doubled_consonant_inflection("bdgmnt", "est", ["adj"], ["adj"]),
        ],
    ),
    "dropped g": Transform(
        name="dropped g",
        description="Dropped g in -ing form of a verb",
        rules=[suffix_inflection("in'", "ing", ["v"], ["v"])],
    ),
    "-y": Transform(
        name="-y",
        description="Adjective formed from a verb or noun",
        rules=[
            suffix_inflection("y", "", ["adj"], ["n", "v"]),  # dirty, pushy
            suffix_inflection("y", "e", ["adj"], ["n", "v"]),  # hazy
            *doubled_consonant_inflection("glmnprst", "y", [], ["n", "v"]),
        ],
    ),
    "un-": Transform(
        name="un-",
        description="Negative form of an adjective, adverb, or verb",
        rules=[prefix_inflection("un", "", ["adj", "adv", "v"], ["adj", "adv", "v"])],
    ),
    "going-to future": Transform(
        name="going-to future",
        description="Going-to future tense of a verb",
        rules=[prefix_inflection("going to ", "", ["v"], ["v"])],
    ),
    "will future": Transform(
        name="will future",
        description="Will-future tense of a verb",
        rules=[prefix_inflection("will ", "", ["v"], ["v"])],
    ),
    "imperative negative": Transform(
        name="imperative negative",
        description="Negative imperative form of a verb",
        rules=[
            prefix_inflection("don't ", "", ["v"], ["v"]),
            prefix_inflection("do not ", "", ["v"], ["v"]),
        ],
    ),
    "-able": Transform(
        name="-able",
        description="Adjective formed from a verb",
        rules=[
            # adj in, v out (readable -> read); keep this direction
            suffix_inflection("able", "", ["adj"], ["v"]),
            suffix_inflection("able", "e", ["adj"], ["v"]),
            suffix_inflection("iable", "y", ["adj"], ["v"]),
            *doubled_consonant_inflection("bdgklmnprstz", "able", ["adj"], ["v"]),
        ],
    ),
}


ENGLISH_TRANSFORMS_DESCRIPTOR = LanguageTransformDescriptor(
    language="en",
    conditions=EN_CONDITIONS,
    transforms=EN_TRANSFORMS,
)
