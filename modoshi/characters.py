"""
Character handling and kana conversion for Modoshi.

Provides code-point classification, hiragana/katakana conversion, width
normalization, combining-mark composition, emphatic-sequence collapsing and
romaji to hiragana conversion. These are the building blocks of the
Japanese text processors and of furigana distribution.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from modoshi.cjk import CJK_IDEOGRAPH_RANGES, CodepointRange, is_code_point_in_range, is_code_point_in_ranges

# ============================================================================
# Code Points and Ranges
# ============================================================================

HIRAGANA_SMALL_TSU_CODE_POINT = 0x3063
KATAKANA_SMALL_TSU_CODE_POINT = 0x30C3
KATAKANA_SMALL_KA_CODE_POINT = 0x30F5
KATAKANA_SMALL_KE_CODE_POINT = 0x30F6
KANA_PROLONGED_SOUND_MARK_CODE_POINT = 0x30FC

HIRAGANA_CONVERSION_RANGE: CodepointRange = (0x3041, 0x3096)
KATAKANA_CONVERSION_RANGE: CodepointRange = (0x30A1, 0x30F6)

HIRAGANA_RANGE: CodepointRange = (0x3040, 0x309F)
KATAKANA_RANGE: CodepointRange = (0x30A0, 0x30FF)

KANA_RANGES = [HIRAGANA_RANGE, KATAKANA_RANGE]

JAPANESE_RANGES = [
    HIRAGANA_RANGE,
    KATAKANA_RANGE,
    *CJK_IDEOGRAPH_RANGES[:10],
    (0xFF66, 0xFF9F),  # Halfwidth katakana
    (0x30FB, 0x30FC),  # Katakana punctuation
    (0xFF61, 0xFF65),  # Kana punctuation
    (0x3000, 0x303F),  # CJK punctuation
    (0xFF10, 0xFF19),  # Fullwidth numbers
    (0xFF21, 0xFF3A),  # Fullwidth upper case Latin letters
    (0xFF41, 0xFF5A),  # Fullwidth lower case Latin letters
    (0xFF01, 0xFF0F),  # Fullwidth punctuation 1
    (0xFF1A, 0xFF1F),  # Fullwidth punctuation 2
    (0xFF3B, 0xFF3F),  # Fullwidth punctuation 3
    (0xFF5B, 0xFF60),  # Fullwidth punctuation 4
    (0xFFE0, 0xFFEE),  # Currency markers
    *CJK_IDEOGRAPH_RANGES[10:],
]

COMBINING_DAKUTEN = "゙"
COMBINING_HANDAKUTEN = "゚"
HALFWIDTH_DAKUTEN = "ﾞ"
HALFWIDTH_HANDAKUTEN = "ﾟ"


# ============================================================================
# Kana Tables
# ============================================================================

SMALL_KANA_SET = frozenset("ぁぃぅぇぉゃゅょゎァィゥェォャュョヮ")

# Half-width katakana -> (plain, voiced, semi-voiced); '-' marks a missing form
HALFWIDTH_KATAKANA_MAP: Dict[str, str] = {
    "･": "・--", "ｦ": "ヲヺ-", "ｧ": "ァ--", "ｨ": "ィ--", "ｩ": "ゥ--",
    "ｪ": "ェ--", "ｫ": "ォ--", "ｬ": "ャ--", "ｭ": "ュ--", "ｮ": "ョ--",
    "ｯ": "ッ--", "ｰ": "ー--", "ｱ": "ア--", "ｲ": "イ--", "ｳ": "ウヴ-",
    "ｴ": "エ--", "ｵ": "オ--", "ｶ": "カガ-", "ｷ": "キギ-", "ｸ": "クグ-",
    "ｹ": "ケゲ-", "ｺ": "コゴ-", "ｻ": "サザ-", "ｼ": "シジ-", "ｽ": "スズ-",
    "ｾ": "セゼ-", "ｿ": "ソゾ-", "ﾀ": "タダ-", "ﾁ": "チヂ-", "ﾂ": "ツヅ-",
    "ﾃ": "テデ-", "ﾄ": "トド-", "ﾅ": "ナ--", "ﾆ": "ニ--", "ﾇ": "ヌ--",
    "ﾈ": "ネ--", "ﾉ": "ノ--", "ﾊ": "ハバパ", "ﾋ": "ヒビピ", "ﾌ": "フブプ",
    "ﾍ": "ヘベペ", "ﾎ": "ホボポ", "ﾏ": "マ--", "ﾐ": "ミ--", "ﾑ": "ム--",
    "ﾒ": "メ--", "ﾓ": "モ--", "ﾔ": "ヤ--", "ﾕ": "ユ--", "ﾖ": "ヨ--",
    "ﾗ": "ラ--", "ﾘ": "リ--", "ﾙ": "ル--", "ﾚ": "レ--", "ﾛ": "ロ--",
    "ﾜ": "ワ--", "ﾝ": "ン--",
}

VOWEL_TO_KANA_MAPPING = {
    "a": "ぁあかがさざただなはばぱまゃやらゎわヵァアカガサザタダナハバパマャヤラヮワヵヷ",
    "i": "ぃいきぎしじちぢにひびぴみりゐィイキギシジチヂニヒビピミリヰヸ",
    "u": "ぅうくぐすずっつづぬふぶぷむゅゆるゥウクグスズッツヅヌフブプムュユルヴ",
    "e": "ぇえけげせぜてでねへべぺめれゑヶェエケゲセゼテデネヘベペメレヱヶヹ",
    "o": "ぉおこごそぞとどのほぼぽもょよろをォオコゴソゾトドノホボポモョヨロヲヺ",
    "_": "のノ",
}

KANA_TO_VOWEL_MAPPING: Dict[str, str] = {
    char: vowel
    for vowel, chars in VOWEL_TO_KANA_MAPPING.items()
    for char in chars
}

# ー after a kana lengthens its vowel; o-row kana lengthen with う
PROLONGED_HIRAGANA = {"a": "あ", "i": "い", "u": "う", "e": "え", "o": "う"}


class DiacriticType(Enum):
    DAKUTEN = "dakuten"
    HANDAKUTEN = "handakuten"


@dataclass(frozen=True)
class DiacriticInfo:
    """Base kana and mark of a voiced or semi-voiced kana."""
    character: str
    type: DiacriticType


def _build_diacritic_mapping() -> Dict[str, DiacriticInfo]:
    # triples of (base, dakuten form, handakuten form)
    kana = (
        "うゔ-かが-きぎ-くぐ-けげ-こご-さざ-しじ-すず-せぜ-そぞ-ただ-ちぢ-つづ-てで-とど-"
        "はばぱひびぴふぶぷへべぺほぼぽワヷ-ヰヸ-ウヴ-ヱヹ-ヲヺ-カガ-キギ-クグ-ケゲ-コゴ-"
        "サザ-シジ-スズ-セゼ-ソゾ-タダ-チヂ-ツヅ-テデ-トド-ハバパヒビピフブプヘベペホボポ"
    )
    mapping = {}
    for i in range(0, len(kana), 3):
        character, dakuten, handakuten = kana[i:i + 3]
        mapping[dakuten] = DiacriticInfo(character, DiacriticType.DAKUTEN)
        if handakuten != "-":
            mapping[handakuten] = DiacriticInfo(character, DiacriticType.HANDAKUTEN)
    return mapping


DIACRITIC_MAPPING = _build_diacritic_mapping()


def get_kana_diacritic_info(character: str) -> Optional[DiacriticInfo]:
    """
    Look up the base kana of a voiced or semi-voiced kana.

    Example:
        >>> get_kana_diacritic_info("ぱ")
        DiacriticInfo(character='は', type=<DiacriticType.HANDAKUTEN: 'handakuten'>)
    """
    return DIACRITIC_MAPPING.get(character)


# ============================================================================
# Character Testing Functions
# ============================================================================

def is_code_point_kanji(code_point: int) -> bool:
    return is_code_point_in_ranges(code_point, CJK_IDEOGRAPH_RANGES)


def is_code_point_kana(code_point: int) -> bool:
    return is_code_point_in_ranges(code_point, KANA_RANGES)


def is_code_point_japanese(code_point: int) -> bool:
    return is_code_point_in_ranges(code_point, JAPANESE_RANGES)


def is_string_entirely_kana(text: str) -> bool:
    """Check if text is non-empty and consists entirely of kana."""
    return bool(text) and all(is_code_point_kana(ord(c)) for c in text)


def is_string_partially_japanese(text: str) -> bool:
    """Check if text contains at least one Japanese character."""
    return bool(text) and any(is_code_point_japanese(ord(c)) for c in text)


def is_emphatic_code_point(code_point: int) -> bool:
    return code_point in (
        HIRAGANA_SMALL_TSU_CODE_POINT,
        KATAKANA_SMALL_TSU_CODE_POINT,
        KANA_PROLONGED_SOUND_MARK_CODE_POINT,
    )


def get_stem_length(text1: str, text2: str) -> int:
    """Length, in characters, of the common prefix of two strings."""
    length = 0
    for c1, c2 in zip(text1, text2):
        if c1 != c2:
            break
        length += 1
    return length


# ============================================================================
# Morae and Pitch
# ============================================================================

class PitchCategory(Enum):
    HEIBAN = "heiban"
    KIFUKU = "kifuku"
    ATAMADAKA = "atamadaka"
    ODAKA = "odaka"
    NAKADAKA = "nakadaka"


def get_kana_morae(text: str) -> List[str]:
    """
    Split kana text into morae; small kana attach to the preceding mora.

    Example:
        >>> get_kana_morae("きょうと")
        ['きょ', 'う', 'と']
    """
    morae: List[str] = []
    for char in text:
        if char in SMALL_KANA_SET and morae:
            morae[-1] += char
        else:
            morae.append(char)
    return morae


def get_kana_mora_count(text: str) -> int:
    count = 0
    for char in text:
        if not (char in SMALL_KANA_SET and count > 0):
            count += 1
    return count


def is_mora_pitch_high(mora_index: int, downstep_position: int) -> bool:
    if downstep_position == 0:
        return mora_index > 0
    if downstep_position == 1:
        return mora_index < 1
    return 0 < mora_index < downstep_position


def get_pitch_category(
    text: str,
    downstep_position: int,
    is_verb_or_adjective: bool,
) -> Optional[PitchCategory]:
    """Classify a pitch accent pattern given the downstep mora position."""
    if downstep_position == 0:
        return PitchCategory.HEIBAN
    if is_verb_or_adjective:
        return PitchCategory.KIFUKU if downstep_position > 0 else None
    if downstep_position == 1:
        return PitchCategory.ATAMADAKA
    if downstep_position > 1:
        if downstep_position >= get_kana_mora_count(text):
            return PitchCategory.ODAKA
        return PitchCategory.NAKADAKA
    return None


# ============================================================================
# Kana Conversion
# ============================================================================

def convert_katakana_to_hiragana(text: str, keep_prolonged_sound_marks: bool = False) -> str:
    """
    Convert katakana to hiragana.

    ヵ and ヶ are left alone. Unless keep_prolonged_sound_marks is set, ー
    becomes the vowel of the preceding kana.

    Args:
        text: Text to convert.
        keep_prolonged_sound_marks: Leave ー untouched.

    Returns:
        Text with katakana converted to hiragana.

    Example:
        >>> convert_katakana_to_hiragana("ラーメン")
        'らあめん'
    """
    offset = HIRAGANA_CONVERSION_RANGE[0] - KATAKANA_CONVERSION_RANGE[0]
    result: List[str] = []
    for char in text:
        code_point = ord(char)
        if code_point in (KATAKANA_SMALL_KA_CODE_POINT, KATAKANA_SMALL_KE_CODE_POINT):
            pass
        elif code_point == KANA_PROLONGED_SOUND_MARK_CODE_POINT:
            if not keep_prolonged_sound_marks and result:
                vowel = KANA_TO_VOWEL_MAPPING.get(result[-1])
                if vowel in PROLONGED_HIRAGANA:
                    char = PROLONGED_HIRAGANA[vowel]
        elif is_code_point_in_range(code_point, KATAKANA_CONVERSION_RANGE):
            char = chr(code_point + offset)
        result.append(char)
    return "".join(result)


def convert_hiragana_to_katakana(text: str) -> str:
    """Convert hiragana to katakana."""
    offset = KATAKANA_CONVERSION_RANGE[0] - HIRAGANA_CONVERSION_RANGE[0]
    return "".join(
        chr(ord(c) + offset) if is_code_point_in_range(ord(c), HIRAGANA_CONVERSION_RANGE) else c
        for c in text
    )


# ============================================================================
# Width Conversion
# ============================================================================

def convert_alphanumeric_to_fullwidth(text: str) -> str:
    """ASCII digits and letters -> full-width forms."""
    result = []
    for c in text:
        cp = ord(c)
        if 0x30 <= cp <= 0x39:
            c = chr(cp + 0xFF10 - 0x30)
        elif 0x41 <= cp <= 0x5A:
            c = chr(cp + 0xFF21 - 0x41)
        elif 0x61 <= cp <= 0x7A:
            c = chr(cp + 0xFF41 - 0x61)
        result.append(c)
    return "".join(result)


def convert_fullwidth_alphanumeric_to_normal(text: str) -> str:
    """Full-width digits and letters -> ASCII."""
    result = []
    for c in text:
        cp = ord(c)
        if 0xFF10 <= cp <= 0xFF19:
            c = chr(cp - (0xFF10 - 0x30))
        elif 0xFF21 <= cp <= 0xFF3A:
            c = chr(cp - (0xFF21 - 0x41))
        elif 0xFF41 <= cp <= 0xFF5A:
            c = chr(cp - (0xFF41 - 0x61))
        result.append(c)
    return "".join(result)


def convert_halfwidth_kana_to_fullwidth(text: str) -> str:
    """
    Convert half-width katakana to full-width.

    A following half-width ﾞ or ﾟ is merged into the kana when the voiced
    form exists, and left in place otherwise.

    Example:
        >>> convert_halfwidth_kana_to_fullwidth("ﾖﾐﾁｬﾝ")
        'ヨミチャン'
    """
    result = []
    i = 0
    while i < len(text):
        c = text[i]
        mapping = HALFWIDTH_KATAKANA_MAP.get(c)
        if mapping is None:
            result.append(c)
            i += 1
            continue

        index = 0
        if i + 1 < len(text):
            if text[i + 1] == HALFWIDTH_DAKUTEN:
                index = 1
            elif text[i + 1] == HALFWIDTH_HANDAKUTEN:
                index = 2

        mapped = mapping[index]
        if index > 0 and mapped != "-":
            i += 1
        else:
            mapped = mapping[0]
        result.append(mapped)
        i += 1
    return "".join(result)


# ============================================================================
# Combining Characters
# ============================================================================

def dakuten_allowed(code_point: int) -> bool:
    return (
        0x304B <= code_point <= 0x3068
        or 0x306F <= code_point <= 0x307B
        or 0x30AB <= code_point <= 0x30C8
        or 0x30CF <= code_point <= 0x30DB
    )


def handakuten_allowed(code_point: int) -> bool:
    return 0x306F <= code_point <= 0x307B or 0x30CF <= code_point <= 0x30DB


def normalize_combining_characters(text: str) -> str:
    """
    Compose a kana followed by a combining (han)dakuten into one character.

    Example:
        >>> normalize_combining_characters("\\u30c8\\u3099") == "\\u30c9"
        True
    """
    result = []
    i = 0
    while i < len(text):
        c = text[i]
        cp = ord(c)
        following = text[i + 1] if i + 1 < len(text) else ""
        if following == COMBINING_DAKUTEN and dakuten_allowed(cp):
            result.append(chr(cp + 1))
            i += 2
        elif following == COMBINING_HANDAKUTEN and handakuten_allowed(cp):
            result.append(chr(cp + 2))
            i += 2
        else:
            result.append(c)
            i += 1
    return "".join(result)


# ============================================================================
# Emphatic Sequences
# ============================================================================

def collapse_emphatic_sequences(text: str, full_collapse: bool) -> str:
    """
    Collapse runs of っ, ッ and ー used for emphasis.

    Leading and trailing emphatic characters are kept as they are. Inside
    the word, each run keeps its first character, or is dropped entirely
    when full_collapse is set.

    Example:
        >>> collapse_emphatic_sequences("すっっごーーい", False)
        'すっごーい'
        >>> collapse_emphatic_sequences("すっっごーーい", True)
        'すごい'
    """
    left = 0
    while left < len(text) and is_emphatic_code_point(ord(text[left])):
        left += 1
    right = len(text)
    while right > left and is_emphatic_code_point(ord(text[right - 1])):
        right -= 1
    if left >= right:
        return text

    middle = []
    current: Optional[int] = None
    for char in text[left:right]:
        code_point = ord(char)
        if is_emphatic_code_point(code_point):
            if current != code_point:
                current = code_point
                if not full_collapse:
                    middle.append(char)
        else:
            current = None
            middle.append(char)

    return text[:left] + "".join(middle) + text[right:]


# ============================================================================
# Romaji to Kana
# ============================================================================

ROMAJI_TO_HIRAGANA: Dict[str, str] = {
    # Vowels
    "a": "あ", "i": "い", "u": "う", "e": "え", "o": "お",

    # K-row
    "ka": "か", "ki": "き", "ku": "く", "ke": "け", "ko": "こ",
    "kya": "きゃ", "kyu": "きゅ", "kyo": "きょ",
    "ga": "が", "gi": "ぎ", "gu": "ぐ", "ge": "げ", "go": "ご",
    "gya": "ぎゃ", "gyu": "ぎゅ", "gyo": "ぎょ",

    # S-row
    "sa": "さ", "si": "し", "su": "す", "se": "せ", "so": "そ",
    "sha": "しゃ", "shi": "し", "shu": "しゅ", "she": "しぇ", "sho": "しょ",
    "sya": "しゃ", "syu": "しゅ", "syo": "しょ",
    "za": "ざ", "zi": "じ", "zu": "ず", "ze": "ぜ", "zo": "ぞ",
    "ja": "じゃ", "ji": "じ", "ju": "じゅ", "je": "じぇ", "jo": "じょ",
    "zya": "じゃ", "zyu": "じゅ", "zyo": "じょ",

    # T-row
    "ta": "た", "ti": "ち", "tu": "つ", "te": "て", "to": "と",
    "chi": "ち", "tsu": "つ",
    "cha": "ちゃ", "chu": "ちゅ", "che": "ちぇ", "cho": "ちょ",
    "tya": "ちゃ", "tyu": "ちゅ", "tyo": "ちょ",
    "da": "だ", "di": "ぢ", "du": "づ", "de": "で", "do": "ど",
    "dya": "ぢゃ", "dyu": "ぢゅ", "dyo": "ぢょ",

    # N-row
    "na": "な", "ni": "に", "nu": "ぬ", "ne": "ね", "no": "の",
    "nya": "にゃ", "nyu": "にゅ", "nyo": "にょ",

    # H-row
    "ha": "は", "hi": "ひ", "hu": "ふ", "he": "へ", "ho": "ほ",
    "fu": "ふ",
    "hya": "ひゃ", "hyu": "ひゅ", "hyo": "ひょ",
    "ba": "ば", "bi": "び", "bu": "ぶ", "be": "べ", "bo": "ぼ",
    "bya": "びゃ", "byu": "びゅ", "byo": "びょ",
    "pa": "ぱ", "pi": "ぴ", "pu": "ぷ", "pe": "ぺ", "po": "ぽ",
    "pya": "ぴゃ", "pyu": "ぴゅ", "pyo": "ぴょ",

    # M-row
    "ma": "ま", "mi": "み", "mu": "む", "me": "め", "mo": "も",
    "mya": "みゃ", "myu": "みゅ", "myo": "みょ",

    # Y-row
    "ya": "や", "yu": "ゆ", "yo": "よ",

    # R-row
    "ra": "ら", "ri": "り", "ru": "る", "re": "れ", "ro": "ろ",
    "rya": "りゃ", "ryu": "りゅ", "ryo": "りょ",

    # W-row
    "wa": "わ", "wi": "うぃ", "we": "うぇ", "wo": "を",

    # N
    "n": "ん", "n'": "ん",

    # Small kana
    "xa": "ぁ", "xi": "ぃ", "xu": "ぅ", "xe": "ぇ", "xo": "ぉ",
    "la": "ぁ", "li": "ぃ", "lu": "ぅ", "le": "ぇ", "lo": "ぉ",
    "xtu": "っ", "ltu": "っ", "xtsu": "っ", "ltsu": "っ",
    "xya": "ゃ", "xyu": "ゅ", "xyo": "ょ",
    "lya": "ゃ", "lyu": "ゅ", "lyo": "ょ",

    # Long vowel
    "-": "ー",

    # Foreign sounds
    "fa": "ふぁ", "fi": "ふぃ", "fe": "ふぇ", "fo": "ふぉ",
    "va": "ゔぁ", "vi": "ゔぃ", "vu": "ゔ", "ve": "ゔぇ", "vo": "ゔぉ",
    "tsa": "つぁ", "tsi": "つぃ", "tse": "つぇ", "tso": "つぉ",
}

_ROMAJI_MAX_LENGTH = max(len(k) for k in ROMAJI_TO_HIRAGANA)
_LATIN_LETTER = re.compile(r"[a-z]")


def convert_alphabetic_to_kana(text: str) -> str:
    """
    Convert romanized text to hiragana.

    A doubled consonant becomes っ and the longest known romaji chunk wins.
    Characters that are not part of any chunk are kept.

    Example:
        >>> convert_alphabetic_to_kana("yomichan")
        'よみちゃん'
        >>> convert_alphabetic_to_kana("kitte")
        'きって'
    """
    result = []
    lower = text.lower()
    i = 0
    while i < len(lower):
        c = lower[i]
        if (
            i + 1 < len(lower)
            and lower[i + 1] == c
            and _LATIN_LETTER.match(c)
            and c not in "aeioun"
        ):
            result.append("っ")
            i += 1
            continue

        for length in range(_ROMAJI_MAX_LENGTH, 0, -1):
            chunk = lower[i:i + length]
            if len(chunk) == length and chunk in ROMAJI_TO_HIRAGANA:
                result.append(ROMAJI_TO_HIRAGANA[chunk])
                i += length
                break
        else:
            result.append(text[i])
            i += 1
    return "".join(result)
