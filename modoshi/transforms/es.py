"""
Spanish deinflection rules.

Verb rules lead to the infinitive; stem-changing verbs (piensa -> pensar,
juega -> jugar) are handled by stem-change rules that rewrite the stem and
the ending together. Pronominal forms ("me lavo") are rewritten to the
pronominal infinitive ("lavarse") by a dedicated rule.
"""

from typing import Dict

from modoshi.rules import (
    Condition,
    DeinflectKind,
    LanguageTransformDescriptor,
    Rule,
    RuleType,
    Transform,
    generic_stem_change_rule,
    special_cased_stem_change_rule,
    suffix_inflection,
    whole_word_inflection,
)

REFLEXIVE_PATTERN = r"\b(me|te|se|nos|os)\s+(\w+)(ar|er|ir)\b"

ACCENTS = {
    "a": "á",
    "e": "é",
    "i": "í",
    "o": "ó",
    "u": "ú",
}


def add_accent(char: str) -> str:
    return ACCENTS.get(char, char)


def pronominal_rule() -> Rule:
    """Rewrite "me lavo" style phrases to "lavarse"."""
    return Rule(
        rule_type=RuleType.OTHER,
        pattern=REFLEXIVE_PATTERN,
        deinflect_kind=DeinflectKind.ES_PRONOMINAL,
        conditions_in=("v",),
        conditions_out=("v",),
    )


# ============================================================================
# Conditions
# ============================================================================

ES_CONDITIONS: Dict[str, Condition] = {
    "n": Condition(name="Noun", is_dictionary_form=True, sub_conditions=("ns", "np")),
    "np": Condition(name="Noun plural"),
    "ns": Condition(name="Noun singular"),
    "v": Condition(name="Verb", is_dictionary_form=True, sub_conditions=("v_ar", "v_er", "v_ir")),
    "v_ar": Condition(name="-ar verb"),
    "v_er": Condition(name="-er verb"),
    "v_ir": Condition(name="-ir verb"),
    "adj": Condition(name="Adjective", is_dictionary_form=True),
}


# ============================================================================
# Transforms
# ============================================================================

ES_TRANSFORMS: Dict[str, Transform] = {
    "plural": Transform(
        name="plural",
        description="Plural form of a noun",
        rules=[
            suffix_inflection("s", "", ["np"], ["ns"]),
            suffix_inflection("es", "", ["np"], ["ns"]),
            suffix_inflection("ces", "z", ["np"], ["ns"]),
            *[suffix_inflection(f"{v}ses", f"{add_accent(v)}s", ["np"], ["ns"]) for v in "aeiou"],
            *[suffix_inflection(f"{v}nes", f"{add_accent(v)}n", ["np"], ["ns"]) for v in "aeiou"],
        ],
    ),
    "feminine adjective": Transform(
        name="feminine adjective",
        description="feminine form of an adjective",
        rules=[
            suffix_inflection("a", "o", ["adj"], ["adj"]),
            # española -> español
            suffix_inflection("a", "", ["adj"], ["adj"]),
            # dormilona -> dormilón
            *[suffix_inflection(f"{v}na", f"{add_accent(v)}n", ["adj"], ["adj"]) for v in "aeio"],
            # francesa -> francés
            *[suffix_inflection(f"{v}sa", f"{add_accent(v)}s", ["adj"], ["adj"]) for v in "aeio"],
        ],
    ),
    "present indicative": Transform(
        name="present indicative",
        description="Present indicative form of a verb",
        rules=[
            # e->ie for -ar verbs
            generic_stem_change_rule("ie", "e", "(o|as|a|an)", "ar", ["v_ar"], ["v_ar"]),
            # e->ie for -er verbs
            generic_stem_change_rule("ie", "e", "(o|es|e|en)", "er", ["v_er"], ["v_er"]),
            # e->ie for -ir verbs
            generic_stem_change_rule("ie", "e", "(o|es|e|en)", "ir", ["v_ir"], ["v_ir"]),
            # o->ue, jugar
            special_cased_stem_change_rule("ue", "jue", "ue", "u", "ue", "o", "(o|as|a|an)", "ar", ["v_ar"], ["v_ar"]),
            # o->ue, oler
            special_cased_stem_change_rule("ue", "hue", "hue", "o", "ue", "o", "(o|es|e|en)", "er", ["v_er"], ["v_er"]),
            # o->ue
            generic_stem_change_rule("ue", "o", "(o|es|e|en)", "ir", ["v_ir"], ["v_ir"]),
            # e->i
            generic_stem_change_rule("i", "e", "(o|es|e|en)", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("o", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("as", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("a", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("amos", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("áis", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("an", "ar", ["v_ar"], ["v_ar"]),
            # -er verbs
            suffix_inflection("o", "er", ["v_er"], ["v_er"]),
            suffix_inflection("es", "er", ["v_er"], ["v_er"]),
            suffix_inflection("e", "er", ["v_er"], ["v_er"]),
            suffix_inflection("emos", "er", ["v_er"], ["v_er"]),
            suffix_inflection("éis", "er", ["v_er"], ["v_er"]),
            suffix_inflection("en", "er", ["v_er"], ["v_er"]),
            # -ir verbs
            suffix_inflection("o", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("es", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("e", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("imos", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("ís", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("en", "ir", ["v_ir"], ["v_ir"]),
            # -uir verbs: incluye -> incluir
            suffix_inflection("uyo", "uir", ["v_ir"], ["v_ir"]),
            suffix_inflection("uyes", "uir", ["v_ir"], ["v_ir"]),
            suffix_inflection("uye", "uir", ["v_ir"], ["v_ir"]),
            suffix_inflection("uyen", "uir", ["v_ir"], ["v_ir"]),
            # -tener verbs
            suffix_inflection("tengo", "tener", ["v"], ["v"]),
            suffix_inflection("tienes", "tener", ["v"], ["v"]),
            suffix_inflection("tiene", "tener", ["v"], ["v"]),
            suffix_inflection("tenemos", "tener", ["v"], ["v"]),
            suffix_inflection("tenéis", "tener", ["v"], ["v"]),
            suffix_inflection("tienen", "tener", ["v"], ["v"]),
            # -oír verbs
            suffix_inflection("oigo", "oír", ["v"], ["v"]),
            suffix_inflection("oyes", "oír", ["v"], ["v"]),
            suffix_inflection("oye", "oír", ["v"], ["v"]),
            suffix_inflection("oímos", "oír", ["v"], ["v"]),
            suffix_inflection("oís", "oír", ["v"], ["v"]),
            suffix_inflection("oyen", "oír", ["v"], ["v"]),
            # -venir verbs
            suffix_inflection("vengo", "venir", ["v"], ["v"]),
            suffix_inflection("vienes", "venir", ["v"], ["v"]),
            suffix_inflection("viene", "venir", ["v"], ["v"]),
            suffix_inflection("venimos", "venir", ["v"], ["v"]),
            suffix_inflection("venís", "venir", ["v"], ["v"]),
            suffix_inflection("vienen", "venir", ["v"], ["v"]),
            # irregular yo forms
            suffix_inflection("go", "guir", ["v"], ["v"]),
            suffix_inflection("jo", "ger", ["v"], ["v"]),
            suffix_inflection("jo", "gir", ["v"], ["v"]),
            suffix_inflection("aigo", "aer", ["v"], ["v"]),
            suffix_inflection("zco", "cer", ["v"], ["v"]),
            suffix_inflection("zco", "cir", ["v"], ["v"]),
            suffix_inflection("hago", "hacer", ["v"], ["v"]),
            suffix_inflection("pongo", "poner", ["v"], ["v"]),
            suffix_inflection("lgo", "lir", ["v"], ["v"]),
            suffix_inflection("lgo", "ler", ["v"], ["v"]),
            whole_word_inflection("doy", "dar", ["v"], ["v"]),
            whole_word_inflection("sé", "saber", ["v"], ["v"]),
            whole_word_inflection("veo", "ver", ["v"], ["v"]),
            # Ser, estar, ir, haber
            # ser
            whole_word_inflection("soy", "ser", ["v"], ["v"]),
            whole_word_inflection("eres", "ser", ["v"], ["v"]),
            whole_word_inflection("es", "ser", ["v"], ["v"]),
            whole_word_inflection("somos", "ser", ["v"], ["v"]),
            whole_word_inflection("sois", "ser", ["v"], ["v"]),
            whole_word_inflection("son", "ser", ["v"], ["v"]),
            # estar
            whole_word_inflection("estoy", "estar", ["v"], ["v"]),
            whole_word_inflection("estás", "estar", ["v"], ["v"]),
            whole_word_inflection("está", "estar", ["v"], ["v"]),
            whole_word_inflection("estamos", "estar", ["v"], ["v"]),
            whole_word_inflection("estáis", "estar", ["v"], ["v"]),
            whole_word_inflection("están", "estar", ["v"], ["v"]),
            # ir
            whole_word_inflection("voy", "ir", ["v"], ["v"]),
            whole_word_inflection("vas", "ir", ["v"], ["v"]),
            whole_word_inflection("va", "ir", ["v"], ["v"]),
            whole_word_inflection("vamos", "ir", ["v"], ["v"]),
            whole_word_inflection("vais", "ir", ["v"], ["v"]),
            whole_word_inflection("van", "ir", ["v"], ["v"]),
            # haber
            whole_word_inflection("he", "haber", ["v"], ["v"]),
            whole_word_inflection("has", "haber", ["v"], ["v"]),
            whole_word_inflection("ha", "haber", ["v"], ["v"]),
            whole_word_inflection("hemos", "haber", ["v"], ["v"]),
            whole_word_inflection("habéis", "haber", ["v"], ["v"]),
            whole_word_inflection("han", "haber", ["v"], ["v"]),
        ],
    ),
    "preterite": Transform(
        name="preterite",
        description="Preterite (past) form of a verb",
        rules=[
            # e->i, 3rd person
            generic_stem_change_rule("i", "e", "(ió|ieron)", "ir", ["v_ir"], ["v_ir"]),
            # o->u for -ir
            generic_stem_change_rule("u", "o", "(ió|ieron)", "ir", ["v_ir"], ["v_ir"]),
            # -ar verbs
            suffix_inflection("é", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("aste", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("ó", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("amos", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("asteis", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("aron", "ar", ["v_ar"], ["v_ar"]),
            # -er verbs
            suffix_inflection("í", "er", ["v_er"], ["v_er"]),
            suffix_inflection("iste", "er", ["v_er"], ["v_er"]),
            suffix_inflection("ió", "er", ["v_er"], ["v_er"]),
            suffix_inflection("imos", "er", ["v_er"], ["v_er"]),
            suffix_inflection("isteis", "er", ["v_er"], ["v_er"]),
            suffix_inflection("ieron", "er", ["v_er"], ["v_er"]),
            # -ir verbs
            suffix_inflection("í", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("iste", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("ió", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("imos", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("isteis", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("ieron", "ir", ["v_ir"], ["v_ir"]),
            # -car, -gar, -zar verbs
            suffix_inflection("qué", "car", ["v"], ["v"]),
            suffix_inflection("gué", "gar", ["v"], ["v"]),
            suffix_inflection("cé", "zar", ["v"], ["v"]),
            # -uir verbs
            suffix_inflection("í", "uir", ["v"], ["v"]),
            # irregular
            # ser
            whole_word_inflection("fui", "ser", ["v"], ["v"]),
            whole_word_inflection("fuiste", "ser", ["v"], ["v"]),
            whole_word_inflection("fue", "ser", ["v"], ["v"]),
            whole_word_inflection("fuimos", "ser", ["v"], ["v"]),
            whole_word_inflection("fuisteis", "ser", ["v"], ["v"]),
            whole_word_inflection("fueron", "ser", ["v"], ["v"]),
            # ir
            whole_word_inflection("fui", "ir", ["v"], ["v"]),
            whole_word_inflection("fuiste", "ir", ["v"], ["v"]),
            whole_word_inflection("fue", "ir", ["v"], ["v"]),
            whole_word_inflection("fuimos", "ir", ["v"], ["v"]),
            whole_word_inflection("fuisteis", "ir", ["v"], ["v"]),
            whole_word_inflection("fueron", "ir", ["v"], ["v"]),
            # dar
            whole_word_inflection("di", "dar", ["v"], ["v"]),
            whole_word_inflection("diste", "dar", ["v"], ["v"]),
            whole_word_inflection("dio", "dar", ["v"], ["v"]),
            whole_word_inflection("dimos", "dar", ["v"], ["v"]),
            whole_word_inflection("disteis", "dar", ["v"], ["v"]),
            whole_word_inflection("dieron", "dar", ["v"], ["v"]),
            # hacer
            suffix_inflection("hice", "hacer", ["v"], ["v"]),
            suffix_inflection("hiciste", "hacer", ["v"], ["v"]),
            suffix_inflection("hizo", "hacer", ["v"], ["v"]),
            suffix_inflection("hicimos", "hacer", ["v"], ["v"]),
            suffix_inflection("hicisteis", "hacer", ["v"], ["v"]),
            suffix_inflection("hicieron", "hacer", ["v"], ["v"]),
            # poner
            suffix_inflection("puse", "poner", ["v"], ["v"]),
            suffix_inflection("pusiste", "poner", ["v"], ["v"]),
            suffix_inflection("puso", "poner", ["v"], ["v"]),
            suffix_inflection("pusimos", "poner", ["v"], ["v"]),
            suffix_inflection("pusisteis", "poner", ["v"], ["v"]),
            suffix_inflection("pusieron", "poner", ["v"], ["v"]),
            # decir
            suffix_inflection("dije", "decir", ["v"], ["v"]),
            suffix_inflection("dijiste", "decir", ["v"], ["v"]),
            suffix_inflection("dijo", "decir", ["v"], ["v"]),
            suffix_inflection("dijimos", "decir", ["v"], ["v"]),
            suffix_inflection("dijisteis", "decir", ["v"], ["v"]),
            suffix_inflection("dijeron", "decir", ["v"], ["v"]),
            # venir
            suffix_inflection("vine", "venir", ["v"], ["v"]),
            suffix_inflection("viniste", "venir", ["v"], ["v"]),
            suffix_inflection("vino", "venir", ["v"], ["v"]),
            suffix_inflection("vinimos", "venir", ["v"], ["v"]),
            suffix_inflection("vinisteis", "venir", ["v"], ["v"]),
            suffix_inflection("vinieron", "venir", ["v"], ["v"]),
            # querer
            whole_word_inflection("quise", "querer", ["v"], ["v"]),
            whole_word_inflection("quisiste", "querer", ["v"], ["v"]),
            whole_word_inflection("quiso", "querer", ["v"], ["v"]),
            whole_word_inflection("quisimos", "querer", ["v"], ["v"]),
            whole_word_inflection("quisisteis", "querer", ["v"], ["v"]),
            whole_word_inflection("quisieron", "querer", ["v"], ["v"]),
            # tener
            suffix_inflection("tuve", "tener", ["v"], ["v"]),
            suffix_inflection("tuviste", "tener", ["v"], ["v"]),
            suffix_inflection("tuvo", "tener", ["v"], ["v"]),
            suffix_inflection("tuvimos", "tener", ["v"], ["v"]),
            suffix_inflection("tuvisteis", "tener", ["v"], ["v"]),
            suffix_inflection("tuvieron", "tener", ["v"], ["v"]),
            # poder
            whole_word_inflection("pude", "poder", ["v"], ["v"]),
            whole_word_inflection("pudiste", "poder", ["v"], ["v"]),
            whole_word_inflection("pudo", "poder", ["v"], ["v"]),
            whole_word_inflection("pudimos", "poder", ["v"], ["v"]),
            whole_word_inflection("pudisteis", "poder", ["v"], ["v"]),
            whole_word_inflection("pudieron", "poder", ["v"], ["v"]),
            # saber
            whole_word_inflection("supe", "saber", ["v"], ["v"]),
            whole_word_inflection("supiste", "saber", ["v"], ["v"]),
            whole_word_inflection("supo", "saber", ["v"], ["v"]),
            whole_word_inflection("supimos", "saber", ["v"], ["v"]),
            whole_word_inflection("supisteis", "saber", ["v"], ["v"]),
            whole_word_inflection("supieron", "saber", ["v"], ["v"]),
            # estar
            whole_word_inflection("estuve", "estar", ["v"], ["v"]),
            whole_word_inflection("estuviste", "estar", ["v"], ["v"]),
            whole_word_inflection("estuvo", "estar", ["v"], ["v"]),
            whole_word_inflection("estuvimos", "estar", ["v"], ["v"]),
            whole_word_inflection("estuvisteis", "estar", ["v"], ["v"]),
            whole_word_inflection("estuvieron", "estar", ["v"], ["v"]),
            # andar
            whole_word_inflection("anduve", "andar", ["v"], ["v"]),
            whole_word_inflection("anduviste", "andar", ["v"], ["v"]),
            whole_word_inflection("anduvo", "andar", ["v"], ["v"]),
            whole_word_inflection("anduvimos", "andar", ["v"], ["v"]),
            whole_word_inflection("anduvisteis", "andar", ["v"], ["v"]),
            whole_word_inflection("anduvieron", "andar", ["v"], ["v"]),
        ],
    ),
    "imperfect": Transform(
        name="imperfect",
        description="Imperfect form of a verb",
        rules=[
            # -ar verbs
            suffix_inflection("aba", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("abas", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("aba", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("ábamos", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("abais", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("aban", "ar", ["v_ar"], ["v_ar"]),
            # -er verbs
            suffix_inflection("ía", "er", ["v_er"], ["v_er"]),
            suffix_inflection("ías", "er", ["v_er"], ["v_er"]),
            suffix_inflection("ía", "er", ["v_er"], ["v_er"]),
            suffix_inflection("íamos", "er", ["v_er"], ["v_er"]),
            suffix_inflection("íais", "er", ["v_er"], ["v_er"]),
            suffix_inflection("ían", "er", ["v_er"], ["v_er"]),
            # -ir verbs
            suffix_inflection("ía", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("ías", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("ía", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("íamos", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("íais", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("ían", "ir", ["v_ir"], ["v_ir"]),
            # reía -> reír
            suffix_inflection("eía", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("eías", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("eía", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("eíamos", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("eíais", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("eían", "ir", ["v_ir"], ["v_ir"]),
            # ir, ser, ver
            # ser
            whole_word_inflection("era", "ser", ["v"], ["v"]),
            whole_word_inflection("eras", "ser", ["v"], ["v"]),
            whole_word_inflection("era", "ser", ["v"], ["v"]),
            whole_word_inflection("éramos", "ser", ["v"], ["v"]),
            whole_word_inflection("erais", "ser", ["v"], ["v"]),
            whole_word_inflection("eran", "ser", ["v"], ["v"]),
            # ir
            whole_word_inflection("iba", "ir", ["v"], ["v"]),
            whole_word_inflection("ibas", "ir", ["v"], ["v"]),
            whole_word_inflection("iba", "ir", ["v"], ["v"]),
            whole_word_inflection("íbamos", "ir", ["v"], ["v"]),
            whole_word_inflection("ibais", "ir", ["v"], ["v"]),
            whole_word_inflection("iban", "ir", ["v"], ["v"]),
            # ver
            whole_word_inflection("veía", "ver", ["v"], ["v"]),
            whole_word_inflection("veías", "ver", ["v"], ["v"]),
            whole_word_inflection("veía", "ver", ["v"], ["v"]),
            whole_word_inflection("veíamos", "ver", ["v"], ["v"]),
            whole_word_inflection("veíais", "ver", ["v"], ["v"]),
            whole_word_inflection("veían", "ver", ["v"], ["v"]),
        ],
    ),
    "progressive": Transform(
        name="progressive",
        description="Progressive form of a verb",
        rules=[
            # e->i for -ir
            generic_stem_change_rule("i", "e", "(iendo)", "ir", ["v_ir"], ["v_ir"]),
            # o->u for -er
            generic_stem_change_rule("u", "o", "(iendo)", "er", ["v_er"], ["v_er"]),
            # o->u for -ir
            generic_stem_change_rule("u", "o", "(iendo)", "ir", ["v_ir"], ["v_ir"]),
            # regular
            suffix_inflection("ando", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("iendo", "er", ["v_er"], ["v_er"]),
            suffix_inflection("iendo", "ir", ["v_ir"], ["v_ir"]),
            # -yendo
            suffix_inflection("ayendo", "aer", ["v_er"], ["v_er"]),
            suffix_inflection("eyendo", "eer", ["v_er"], ["v_er"]),
            suffix_inflection("uyendo", "uir", ["v_ir"], ["v_ir"]),
            # irregular
            whole_word_inflection("oyendo", "oír", ["v"], ["v"]),
            whole_word_inflection("yendo", "ir", ["v"], ["v"]),
        ],
    ),
    "imperative": Transform(
        name="imperative",
        description="Imperative form of a verb",
        rules=[
            # Stem-changing verbs
            generic_stem_change_rule("ie", "e", "(a|e|en)", "ar", ["v_ar"], ["v_ar"]),
            generic_stem_change_rule("ie", "e", "(e|a|an)", "er", ["v_er"], ["v_er"]),
            generic_stem_change_rule("ie", "e", "(e|a|an)", "ir", ["v_ir"], ["v_ir"]),
            # jugar
            special_cased_stem_change_rule("ue", "jue", "ue", "u", "ue", "o", "(a|ue|uen)", "ar", ["v_ar"], ["v_ar"]),
            # oler
            special_cased_stem_change_rule("ue", "hue", "hue", "o", "ue", "o", "(e|a|an)", "er", ["v_er"], ["v_er"]),
            # Other stem changes
            generic_stem_change_rule("ue", "o", "(e|a|an)", "ir", ["v_ir"], ["v_ir"]),
            generic_stem_change_rule("i", "e", "(e|a|an)", "ir", ["v_ir"], ["v_ir"]),
            # affirmative
            # -ar verbs
            suffix_inflection("a", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("emos", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("ad", "ar", ["v_ar"], ["v_ar"]),
            # -er verbs
            suffix_inflection("e", "er", ["v_er"], ["v_er"]),
            suffix_inflection("amos", "ar", ["v_er"], ["v_er"]),
            suffix_inflection("ed", "er", ["v_er"], ["v_er"]),
            # -ir verbs
            suffix_inflection("e", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("amos", "ar", ["v_ir"], ["v_ir"]),
            suffix_inflection("id", "ir", ["v_ir"], ["v_ir"]),
            # irregular affirmative
            whole_word_inflection("diga", "decir", ["v"], ["v"]),
            whole_word_inflection("sé", "ser", ["v"], ["v"]),
            whole_word_inflection("ve", "ir", ["v"], ["v"]),
            whole_word_inflection("ten", "tener", ["v"], ["v"]),
            whole_word_inflection("ven", "venir", ["v"], ["v"]),
            whole_word_inflection("haz", "hacer", ["v"], ["v"]),
            whole_word_inflection("di", "decir", ["v"], ["v"]),
            whole_word_inflection("pon", "poner", ["v"], ["v"]),
            whole_word_inflection("sal", "salir", ["v"], ["v"]),
            # negative
            # -ar verbs
            suffix_inflection("es", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("emos", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("éis", "ar", ["v_ar"], ["v_ar"]),
            # -er verbs
            suffix_inflection("as", "er", ["v_er"], ["v_er"]),
            suffix_inflection("amos", "er", ["v_er"], ["v_er"]),
            suffix_inflection("áis", "er", ["v_er"], ["v_er"]),
            # -ir verbs
            suffix_inflection("as", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("amos", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("áis", "ir", ["v_ir"], ["v_ir"]),
        ],
    ),
    "conditional": Transform(
        name="conditional",
        description="Conditional form of a verb",
        rules=[
            # regular
            suffix_inflection("ía", "", ["v"], ["v"]),
            suffix_inflection("ías", "", ["v"], ["v"]),
            # the -ía ending is listed twice
            suffix_inflection("ía", "", ["v"], ["v"]),
            suffix_inflection("íamos", "", ["v"], ["v"]),
            suffix_inflection("íais", "", ["v"], ["v"]),
            suffix_inflection("ían", "", ["v"], ["v"]),
            # Irregular verbs
            # decir
            whole_word_inflection("diría", "decir", ["v"], ["v"]),
            whole_word_inflection("dirías", "decir", ["v"], ["v"]),
            whole_word_inflection("diría", "decir", ["v"], ["v"]),
            whole_word_inflection("diríamos", "decir", ["v"], ["v"]),
            whole_word_inflection("diríais", "decir", ["v"], ["v"]),
            whole_word_inflection("dirían", "decir", ["v"], ["v"]),
            # hacer
            whole_word_inflection("haría", "hacer", ["v"], ["v"]),
            whole_word_inflection("harías", "hacer", ["v"], ["v"]),
            whole_word_inflection("haría", "hacer", ["v"], ["v"]),
            whole_word_inflection("haríamos", "hacer", ["v"], ["v"]),
            whole_word_inflection("haríais", "hacer", ["v"], ["v"]),
            whole_word_inflection("harían", "hacer", ["v"], ["v"]),
            # poner
            whole_word_inflection("pondría", "poner", ["v"], ["v"]),
            whole_word_inflection("pondrías", "poner", ["v"], ["v"]),
            whole_word_inflection("pondría", "poner", ["v"], ["v"]),
            whole_word_inflection("pondríamos", "poner", ["v"], ["v"]),
            whole_word_inflection("pondríais", "poner", ["v"], ["v"]),
            whole_word_inflection("pondrían", "poner", ["v"], ["v"]),
            # salir
            whole_word_inflection("saldría", "salir", ["v"], ["v"]),
            whole_word_inflection("saldrías", "salir", ["v"], ["v"]),
            whole_word_inflection("saldría", "salir", ["v"], ["v"]),
            whole_word_inflection("saldríamos", "salir", ["v"], ["v"]),
            whole_word_inflection("saldríais", "salir", ["v"], ["v"]),
            whole_word_inflection("saldrían", "salir", ["v"], ["v"]),
            # tener
            whole_word_inflection("tendría", "tener", ["v"], ["v"]),
            whole_word_inflection("tendrías", "tener", ["v"], ["v"]),
            whole_word_inflection("tendría", "tener", ["v"], ["v"]),
            whole_word_inflection("tendríamos", "tener", ["v"], ["v"]),
            whole_word_inflection("tendríais", "tener", ["v"], ["v"]),
            whole_word_inflection("tendrían", "tener", ["v"], ["v"]),
            # venir
            whole_word_inflection("vendría", "venir", ["v"], ["v"]),
            whole_word_inflection("vendrías", "venir", ["v"], ["v"]),
            whole_word_inflection("vendría", "venir", ["v"], ["v"]),
            whole_word_inflection("vendríamos", "venir", ["v"], ["v"]),
            whole_word_inflection("vendríais", "venir", ["v"], ["v"]),
            whole_word_inflection("vendrían", "venir", ["v"], ["v"]),
            # querer
            whole_word_inflection("querría", "querer", ["v"], ["v"]),
            whole_word_inflection("querrías", "querer", ["v"], ["v"]),
            whole_word_inflection("querría", "querer", ["v"], ["v"]),
            whole_word_inflection("querríamos", "querer", ["v"], ["v"]),
            whole_word_inflection("querríais", "querer", ["v"], ["v"]),
            whole_word_inflection("querrían", "querer", ["v"], ["v"]),
            # poder
            whole_word_inflection("podría", "poder", ["v"], ["v"]),
            whole_word_inflection("podrías", "poder", ["v"], ["v"]),
            whole_word_inflection("podría", "poder", ["v"], ["v"]),
            whole_word_inflection("podríamos", "poder", ["v"], ["v"]),
            whole_word_inflection("podríais", "poder", ["v"], ["v"]),
            whole_word_inflection("podrían", "poder", ["v"], ["v"]),
            # saber
            whole_word_inflection("sabría", "saber", ["v"], ["v"]),
            whole_word_inflection("sabrías", "saber", ["v"], ["v"]),
            whole_word_inflection("sabría", "saber", ["v"], ["v"]),
            whole_word_inflection("sabríamos", "saber", ["v"], ["v"]),
            whole_word_inflection("sabríais", "saber", ["v"], ["v"]),
            whole_word_inflection("sabrían", "saber", ["v"], ["v"]),
        ],
    ),
    "future": Transform(
        name="future",
        description="Future form of a verb",
        rules=[
            # Regular future endings
            suffix_inflection("é", "", ["v"], ["v"]),
            suffix_inflection("ás", "", ["v"], ["v"]),
            suffix_inflection("á", "", ["v"], ["v"]),
            suffix_inflection("emos", "", ["v"], ["v"]),
            suffix_inflection("éis", "", ["v"], ["v"]),
            suffix_inflection("án", "", ["v"], ["v"]),
            # Irregular verbs
            # decir
            suffix_inflection("diré", "decir", ["v"], ["v"]),
            suffix_inflection("dirás", "decir", ["v"], ["v"]),
            suffix_inflection("dirá", "decir", ["v"], ["v"]),
            suffix_inflection("diremos", "decir", ["v"], ["v"]),
            suffix_inflection("diréis", "decir", ["v"], ["v"]),
            suffix_inflection("dirán", "decir", ["v"], ["v"]),
            # hacer
            whole_word_inflection("haré", "hacer", ["v"], ["v"]),
            whole_word_inflection("harás", "hacer", ["v"], ["v"]),
            whole_word_inflection("hará", "hacer", ["v"], ["v"]),
            whole_word_inflection("haremos", "hacer", ["v"], ["v"]),
            whole_word_inflection("haréis", "hacer", ["v"], ["v"]),
            whole_word_inflection("harán", "hacer", ["v"], ["v"]),
            # poner
            suffix_inflection("pondré", "poner", ["v"], ["v"]),
            suffix_inflection("pondrás", "poner", ["v"], ["v"]),
            suffix_inflection("pondrá", "poner", ["v"], ["v"]),
            suffix_inflection("pondremos", "poner", ["v"], ["v"]),
            suffix_inflection("pondréis", "poner", ["v"], ["v"]),
            suffix_inflection("pondrán", "poner", ["v"], ["v"]),
            # salir
            whole_word_inflection("saldré", "salir", ["v"], ["v"]),
            whole_word_inflection("saldrás", "salir", ["v"], ["v"]),
            whole_word_inflection("saldrá", "salir", ["v"], ["v"]),
            whole_word_inflection("saldremos", "salir", ["v"], ["v"]),
            whole_word_inflection("saldréis", "salir", ["v"], ["v"]),
            whole_word_inflection("saldrán", "salir", ["v"], ["v"]),
            # tener
            suffix_inflection("tendré", "tener", ["v"], ["v"]),
            suffix_inflection("tendrás", "tener", ["v"], ["v"]),
            suffix_inflection("tendrá", "tener", ["v"], ["v"]),
            suffix_inflection("tendremos", "tener", ["v"], ["v"]),
            suffix_inflection("tendréis", "tener", ["v"], ["v"]),
            suffix_inflection("tendrán", "tener", ["v"], ["v"]),
            # venir
            suffix_inflection("vendré", "venir", ["v"], ["v"]),
            suffix_inflection("vendrás", "venir", ["v"], ["v"]),
            suffix_inflection("vendrá", "venir", ["v"], ["v"]),
            suffix_inflection("vendremos", "venir", ["v"], ["v"]),
            suffix_inflection("vendréis", "venir", ["v"], ["v"]),
            suffix_inflection("vendrán", "venir", ["v"], ["v"]),
        ],
    ),
    "present subjunctive": Transform(
        name="present subjunctive",
        description="Present subjunctive form of a verb",
        rules=[
            # e->ie for -ar
            generic_stem_change_rule("ie", "e", "(e|es|e|en)", "ar", ["v_ar"], ["v_ar"]),
            # e->ie for -er
            generic_stem_change_rule("ie", "e", "(a|as|a|an)", "er", ["v_er"], ["v_er"]),
            # e->ie for -ir
            generic_stem_change_rule("ie", "e", "(a|as|a|an)", "ir", ["v_ir"], ["v_ir"]),
            # jugar
            special_cased_stem_change_rule("ue", "jue", "ue", "u", "ue", "o", "(ue|ues|ue|uen)", "ar", ["v_ar"], ["v_ar"]),
            # oler
            special_cased_stem_change_rule("ue", "hue", "hue", "o", "ue", "o", "(a|as|a|an)", "er", ["v_er"], ["v_er"]),
            # o->ue for -ir
            generic_stem_change_rule("ue", "o", "(a|as|a|an)", "ir", ["v_ir"], ["v_ir"]),
            # e->i for -ir
            generic_stem_change_rule("i", "e", "(a|as|a|an)", "ir", ["v_ir"], ["v_ir"]),
            # regular
            # -ar verbs
            suffix_inflection("e", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("es", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("e", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("emos", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("éis", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("en", "ar", ["v_ar"], ["v_ar"]),
            # -er verbs
            suffix_inflection("a", "er", ["v_er"], ["v_er"]),
            suffix_inflection("as", "er", ["v_er"], ["v_er"]),
            suffix_inflection("a", "er", ["v_er"], ["v_er"]),
            suffix_inflection("amos", "er", ["v_er"], ["v_er"]),
            suffix_inflection("áis", "er", ["v_er"], ["v_er"]),
            suffix_inflection("an", "er", ["v_er"], ["v_er"]),
            # -ir verbs
            suffix_inflection("a", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("as", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("a", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("amos", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("áis", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("an", "ir", ["v_ir"], ["v_ir"]),
            # Irregular verbs
            # dar
            whole_word_inflection("dé", "dar", ["v"], ["v"]),
            whole_word_inflection("des", "dar", ["v"], ["v"]),
            whole_word_inflection("dé", "dar", ["v"], ["v"]),
            whole_word_inflection("demos", "dar", ["v"], ["v"]),
            whole_word_inflection("deis", "dar", ["v"], ["v"]),
            whole_word_inflection("den", "dar", ["v"], ["v"]),
            # estar
            whole_word_inflection("esté", "estar", ["v"], ["v"]),
            whole_word_inflection("estés", "estar", ["v"], ["v"]),
            whole_word_inflection("esté", "estar", ["v"], ["v"]),
            whole_word_inflection("estemos", "estar", ["v"], ["v"]),
            whole_word_inflection("estéis", "estar", ["v"], ["v"]),
            whole_word_inflection("estén", "estar", ["v"], ["v"]),
            # ser
            whole_word_inflection("sea", "ser", ["v"], ["v"]),
            whole_word_inflection("seas", "ser", ["v"], ["v"]),
            whole_word_inflection("sea", "ser", ["v"], ["v"]),
            whole_word_inflection("seamos", "ser", ["v"], ["v"]),
            whole_word_inflection("seáis", "ser", ["v"], ["v"]),
            whole_word_inflection("sean", "ser", ["v"], ["v"]),
            # ir
            whole_word_inflection("vaya", "ir", ["v"], ["v"]),
            whole_word_inflection("vayas", "ir", ["v"], ["v"]),
            whole_word_inflection("vaya", "ir", ["v"], ["v"]),
            whole_word_inflection("vayamos", "ir", ["v"], ["v"]),
            whole_word_inflection("vayáis", "ir", ["v"], ["v"]),
            whole_word_inflection("vayan", "ir", ["v"], ["v"]),
            # haber
            whole_word_inflection("haya", "haber", ["v"], ["v"]),
            whole_word_inflection("hayas", "haber", ["v"], ["v"]),
            whole_word_inflection("haya", "haber", ["v"], ["v"]),
            whole_word_inflection("hayamos", "haber", ["v"], ["v"]),
            whole_word_inflection("hayáis", "haber", ["v"], ["v"]),
            whole_word_inflection("hayan", "haber", ["v"], ["v"]),
            # saber
            whole_word_inflection("sepa", "saber", ["v"], ["v"]),
            whole_word_inflection("sepas", "saber", ["v"], ["v"]),
            whole_word_inflection("sepa", "saber", ["v"], ["v"]),
            whole_word_inflection("sepamos", "saber", ["v"], ["v"]),
            whole_word_inflection("sepáis", "saber", ["v"], ["v"]),
            whole_word_inflection("sepan", "saber", ["v"], ["v"]),
        ],
    ),
    "imperfect subjunctive": Transform(
        name="imperfect subjunctive",
        description="Imperfect subjunctive form of a verb",
        rules=[
            # -ar verbs
            suffix_inflection("ara", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("ase", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("aras", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("ases", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("ara", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("ase", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("áramos", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("ásemos", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("arais", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("aseis", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("aran", "ar", ["v_ar"], ["v_ar"]),
            suffix_inflection("asen", "ar", ["v_ar"], ["v_ar"]),
            # -er verbs
            suffix_inflection("iera", "er", ["v_er"], ["v_er"]),
            suffix_inflection("iese", "er", ["v_er"], ["v_er"]),
            suffix_inflection("ieras", "er", ["v_er"], ["v_er"]),
            suffix_inflection("ieses", "er", ["v_er"], ["v_er"]),
            suffix_inflection("iera", "er", ["v_er"], ["v_er"]),
            suffix_inflection("iese", "er", ["v_er"], ["v_er"]),
            suffix_inflection("iéramos", "er", ["v_er"], ["v_er"]),
            suffix_inflection("iésemos", "er", ["v_er"], ["v_er"]),
            suffix_inflection("ierais", "er", ["v_er"], ["v_er"]),
            suffix_inflection("ieseis", "er", ["v_er"], ["v_er"]),
            suffix_inflection("ieran", "er", ["v_er"], ["v_er"]),
            suffix_inflection("iesen", "er", ["v_er"], ["v_er"]),
            # -ir verbs
            suffix_inflection("iera", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("iese", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("ieras", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("ieses", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("iera", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("iese", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("iéramos", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("iésemos", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("ierais", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("ieseis", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("ieran", "ir", ["v_ir"], ["v_ir"]),
            suffix_inflection("iesen", "ir", ["v_ir"], ["v_ir"]),
            # irregular verbs
            # ser
            whole_word_inflection("fuera", "ser", ["v"], ["v"]),
            whole_word_inflection("fuese", "ser", ["v"], ["v"]),
            whole_word_inflection("fueras", "ser", ["v"], ["v"]),
            whole_word_inflection("fueses", "ser", ["v"], ["v"]),
            whole_word_inflection("fuera", "ser", ["v"], ["v"]),
            whole_word_inflection("fuese", "ser", ["v"], ["v"]),
            whole_word_inflection("fuéramos", "ser", ["v"], ["v"]),
            whole_word_inflection("fuésemos", "ser", ["v"], ["v"]),
            whole_word_inflection("fuerais", "ser", ["v"], ["v"]),
            whole_word_inflection("fueseis", "ser", ["v"], ["v"]),
            whole_word_inflection("fueran", "ser", ["v"], ["v"]),
            whole_word_inflection("fuesen", "ser", ["v"], ["v"]),
            # ir
            whole_word_inflection("fuera", "ir", ["v"], ["v"]),
            whole_word_inflection("fuese", "ir", ["v"], ["v"]),
            whole_word_inflection("fueras", "ir", ["v"], ["v"]),
            whole_word_inflection("fueses", "ir", ["v"], ["v"]),
            whole_word_inflection("fuera", "ir", ["v"], ["v"]),
            whole_word_inflection("fuese", "ir", ["v"], ["v"]),
            whole_word_inflection("fuéramos", "ir", ["v"], ["v"]),
            whole_word_inflection("fuésemos", "ir", ["v"], ["v"]),
            whole_word_inflection("fuerais", "ir", ["v"], ["v"]),
            whole_word_inflection("fueseis", "ir", ["v"], ["v"]),
            whole_word_inflection("fueran", "ir", ["v"], ["v"]),
            whole_word_inflection("fuesen", "ir", ["v"], ["v"]),
        ],
    ),
    "participle": Transform(
        name="participle",
        description="Participle form of a verb",
        rules=[
            suffix_inflection("ado", "ar", ["adj"], ["v_ar"]),
            suffix_inflection("ido", "er", ["adj"], ["v_er"]),
            suffix_inflection("ido", "ir", ["adj"], ["v_ir"]),
            # irregular
            suffix_inflection("oído", "oír", ["adj"], ["v"]),
            whole_word_inflection("dicho", "decir", ["adj"], ["v"]),
            whole_word_inflection("escrito", "escribir", ["adj"], ["v"]),
            whole_word_inflection("hecho", "hacer", ["adj"], ["v"]),
            whole_word_inflection("muerto", "morir", ["adj"], ["v"]),
            whole_word_inflection("puesto", "poner", ["adj"], ["v"]),
            whole_word_inflection("roto", "romper", ["adj"], ["v"]),
            whole_word_inflection("visto", "ver", ["adj"], ["v"]),
            whole_word_inflection("vuelto", "volver", ["adj"], ["v"]),
        ],
    ),
    "reflexive": Transform(
        name="reflexive",
        description="Reflexive form of a verb",
        rules=[
            # lavar -> lavarse
            suffix_inflection("arse", "ar", ["v_ar"], ["v_ar"]),
            # poner -> ponerse
            suffix_inflection("erse", "er", ["v_er"], ["v_er"]),
            # vestir -> vestirse
            suffix_inflection("irse", "ir", ["v_ir"], ["v_ir"]),
        ],
    ),
    "pronoun substitution": Transform(
        name="pronoun substitution",
        description="Substituted pronoun of a reflexive verb",
        rules=[
            # lavarme -> lavarse
            suffix_inflection("arme", "arse", ["v_ar"], ["v_ar"]),
            suffix_inflection("arte", "arse", ["v_ar"], ["v_ar"]),
            suffix_inflection("arnos", "arse", ["v_ar"], ["v_ar"]),
            # ponerme -> ponerse
            suffix_inflection("erme", "erse", ["v_er"], ["v_er"]),
            suffix_inflection("erte", "erse", ["v_er"], ["v_er"]),
            suffix_inflection("ernos", "erse", ["v_er"], ["v_er"]),
            # vestirme -> vestirse
            suffix_inflection("irme", "irse", ["v_ir"], ["v_ir"]),
            suffix_inflection("irte", "irse", ["v_ir"], ["v_ir"]),
            suffix_inflection("irnos", "irse", ["v_ir"], ["v_ir"]),
        ],
    ),
    "pronominal": Transform(
        name="pronominal",
        description="Pronominal form of a verb",
        rules=[pronominal_rule()],
    ),
}


SPANISH_TRANSFORMS_DESCRIPTOR = LanguageTransformDescriptor(
    language="es",
    conditions=ES_CONDITIONS,
    transforms=ES_TRANSFORMS,
)
