"""
CJK code-point ranges and normalization helpers.

Shared by the Japanese character module and the text processors: range
membership tests, NFKD folding of compatibility ideographs and Kangxi
radicals, and old-form to new-form kanji standardization.
"""

import unicodedata
from typing import Sequence, Tuple

CodepointRange = Tuple[int, int]

# ============================================================================
# Ranges
# ============================================================================

CJK_UNIFIED_IDEOGRAPHS_RANGE: CodepointRange = (0x4E00, 0x9FFF)
CJK_UNIFIED_IDEOGRAPHS_EXTENSION_A_RANGE: CodepointRange = (0x3400, 0x4DBF)
CJK_UNIFIED_IDEOGRAPHS_EXTENSION_B_RANGE: CodepointRange = (0x20000, 0x2A6DF)
CJK_UNIFIED_IDEOGRAPHS_EXTENSION_C_RANGE: CodepointRange = (0x2A700, 0x2B73F)
CJK_UNIFIED_IDEOGRAPHS_EXTENSION_D_RANGE: CodepointRange = (0x2B740, 0x2B81F)
CJK_UNIFIED_IDEOGRAPHS_EXTENSION_E_RANGE: CodepointRange = (0x2B820, 0x2CEAF)
CJK_UNIFIED_IDEOGRAPHS_EXTENSION_F_RANGE: CodepointRange = (0x2CEB0, 0x2EBEF)
CJK_UNIFIED_IDEOGRAPHS_EXTENSION_G_RANGE: CodepointRange = (0x30000, 0x3134F)
CJK_UNIFIED_IDEOGRAPHS_EXTENSION_H_RANGE: CodepointRange = (0x31350, 0x323AF)
CJK_UNIFIED_IDEOGRAPHS_EXTENSION_I_RANGE: CodepointRange = (0x2EBF0, 0x2EE5F)
CJK_COMPATIBILITY_IDEOGRAPHS_RANGE: CodepointRange = (0xF900, 0xFAFF)
CJK_COMPATIBILITY_IDEOGRAPHS_SUPPLEMENT_RANGE: CodepointRange = (0x2F800, 0x2FA1F)

CJK_IDEOGRAPH_RANGES = [
    CJK_UNIFIED_IDEOGRAPHS_RANGE,
    CJK_UNIFIED_IDEOGRAPHS_EXTENSION_A_RANGE,
    CJK_UNIFIED_IDEOGRAPHS_EXTENSION_B_RANGE,
    CJK_UNIFIED_IDEOGRAPHS_EXTENSION_C_RANGE,
    CJK_UNIFIED_IDEOGRAPHS_EXTENSION_D_RANGE,
    CJK_UNIFIED_IDEOGRAPHS_EXTENSION_E_RANGE,
    CJK_UNIFIED_IDEOGRAPHS_EXTENSION_F_RANGE,
    CJK_UNIFIED_IDEOGRAPHS_EXTENSION_G_RANGE,
    CJK_UNIFIED_IDEOGRAPHS_EXTENSION_H_RANGE,
    CJK_UNIFIED_IDEOGRAPHS_EXTENSION_I_RANGE,
    CJK_COMPATIBILITY_IDEOGRAPHS_RANGE,
    CJK_COMPATIBILITY_IDEOGRAPHS_SUPPLEMENT_RANGE,
]

# Fullwidth digits, letters and punctuation
FULLWIDTH_CHARACTER_RANGES = [
    (0xFF10, 0xFF19),
    (0xFF21, 0xFF3A),
    (0xFF41, 0xFF5A),
    (0xFF01, 0xFF0F),
    (0xFF1A, 0xFF1F),
    (0xFF3B, 0xFF3F),
    (0xFF5B, 0xFF60),
    (0xFFE0, 0xFFEE),
]

CJK_PUNCTUATION_RANGE: CodepointRange = (0x3000, 0x303F)

CJK_COMPATIBILITY_RANGE: CodepointRange = (0x3300, 0x33FF)

KANGXI_RADICALS_RANGE: CodepointRange = (0x2F00, 0x2FDF)
CJK_RADICALS_SUPPLEMENT_RANGE: CodepointRange = (0x2E80, 0x2EFF)
CJK_STROKES_RANGE: CodepointRange = (0x31C0, 0x31EF)

RADICAL_RANGES = [
    KANGXI_RADICALS_RANGE,
    CJK_RADICALS_SUPPLEMENT_RANGE,
    CJK_STROKES_RANGE,
]


def is_code_point_in_range(code_point: int, range_: CodepointRange) -> bool:
    return range_[0] <= code_point <= range_[1]


def is_code_point_in_ranges(code_point: int, ranges: Sequence[CodepointRange]) -> bool:
    return any(start <= code_point <= end for start, end in ranges)


# ============================================================================
# Normalization
# ============================================================================

def _nfkd_in_ranges(text: str, ranges: Sequence[CodepointRange]) -> str:
    return "".join(
        unicodedata.normalize("NFKD", c) if is_code_point_in_ranges(ord(c), ranges) else c
        for c in text
    )


def normalize_cjk_compatibility_characters(text: str) -> str:
    """
    Decompose CJK compatibility ideographs and squared words.

    Example:
        >>> normalize_cjk_compatibility_characters("㌀")
        'アパート'
    """
    return _nfkd_in_ranges(
        text, [CJK_COMPATIBILITY_IDEOGRAPHS_RANGE, CJK_COMPATIBILITY_RANGE]
    )


def normalize_radicals(text: str) -> str:
    """
    Replace Kangxi and supplementary radicals with their unified ideographs.

    Example:
        >>> normalize_radicals("⼀")
        '一'
    """
    return _nfkd_in_ranges(text, RADICAL_RANGES)


# Traditional (kyūjitai) and variant forms -> standard Japanese forms
KANJI_VARIANTS = {
    "亞": "亜", "惡": "悪", "壓": "圧", "圍": "囲", "爲": "為", "醫": "医",
    "壹": "壱", "隱": "隠", "營": "営", "榮": "栄", "衞": "衛", "驛": "駅",
    "圓": "円", "櫻": "桜", "應": "応", "歐": "欧", "假": "仮", "價": "価",
    "畫": "画", "會": "会", "壞": "壊", "懷": "懐", "擴": "拡", "覺": "覚",
    "學": "学", "樂": "楽", "氣": "気", "歸": "帰", "舊": "旧", "據": "拠",
    "擧": "挙", "區": "区", "驅": "駆", "勳": "勲", "徑": "径", "輕": "軽",
    "經": "経", "繼": "継", "縣": "県", "劍": "剣", "檢": "検", "權": "権",
    "顯": "顕", "驗": "験", "廣": "広", "恆": "恒", "國": "国", "黑": "黒",
    "濟": "済", "齋": "斎", "雜": "雑", "參": "参", "慘": "惨", "殘": "残",
    "絲": "糸", "齒": "歯", "兒": "児", "辭": "辞", "濕": "湿", "實": "実",
    "寫": "写", "釋": "釈", "壽": "寿", "收": "収", "從": "従", "澁": "渋",
    "獸": "獣", "縱": "縦", "處": "処", "敍": "叙", "將": "将", "燒": "焼",
    "證": "証", "乘": "乗", "淨": "浄", "剩": "剰", "疊": "畳", "條": "条",
    "狀": "状", "讓": "譲", "釀": "醸", "觸": "触", "眞": "真", "愼": "慎",
    "盡": "尽", "圖": "図", "粹": "粋", "髓": "髄", "數": "数", "聲": "声",
    "靜": "静", "攝": "摂", "竊": "窃", "專": "専", "淺": "浅", "錢": "銭",
    "踐": "践", "戰": "戦", "纖": "繊", "禪": "禅", "雙": "双", "壯": "壮",
    "爭": "争", "莊": "荘", "搜": "捜", "插": "挿", "巢": "巣", "裝": "装",
    "藏": "蔵", "臟": "臓", "卽": "即", "屬": "属", "續": "続",
    "墮": "堕", "體": "体", "對": "対", "帶": "帯", "滯": "滞", "臺": "台",
    "瀧": "滝", "擇": "択", "澤": "沢", "單": "単", "擔": "担", "膽": "胆",
    "團": "団", "彈": "弾", "斷": "断", "癡": "痴", "遲": "遅", "晝": "昼",
    "蟲": "虫", "鑄": "鋳", "廳": "庁", "聽": "聴", "敕": "勅", "鎭": "鎮",
    "遞": "逓", "鐵": "鉄", "轉": "転", "點": "点", "傳": "伝", "黨": "党",
    "盜": "盗", "當": "当", "燈": "灯", "鬭": "闘", "獨": "独", "讀": "読",
    "屆": "届", "貳": "弐", "惱": "悩", "腦": "脳", "霸": "覇", "廢": "廃",
    "拜": "拝", "賣": "売", "麥": "麦", "發": "発", "髮": "髪", "拔": "抜",
    "蠻": "蛮", "祕": "秘", "濱": "浜", "甁": "瓶", "拂": "払", "佛": "仏",
    "竝": "並", "變": "変", "邊": "辺", "辨": "弁", "瓣": "弁", "辯": "弁",
    "步": "歩", "寶": "宝", "豐": "豊", "沒": "没", "飜": "翻", "每": "毎",
    "萬": "万", "滿": "満", "默": "黙", "彌": "弥", "譯": "訳", "藥": "薬",
    "與": "与", "豫": "予", "餘": "余", "搖": "揺", "樣": "様", "謠": "謡",
    "來": "来", "亂": "乱", "覽": "覧", "龍": "竜", "兩": "両", "獵": "猟",
    "綠": "緑", "壘": "塁", "淚": "涙", "勵": "励", "禮": "礼", "靈": "霊",
    "齡": "齢", "戀": "恋", "爐": "炉", "勞": "労", "樓": "楼", "錄": "録",
    "灣": "湾",
}


def standardize_kanji(text: str) -> str:
    """
    Replace old-form and variant kanji with their standard forms.

    Compatibility ideographs are decomposed first, so their code points
    reach the variant table in their unified form.

    Example:
        >>> standardize_kanji("舊字體")
        '旧字体'
    """
    text = _nfkd_in_ranges(
        text, [CJK_COMPATIBILITY_IDEOGRAPHS_RANGE, CJK_COMPATIBILITY_IDEOGRAPHS_SUPPLEMENT_RANGE]
    )
    return "".join(KANJI_VARIANTS.get(c, c) for c in text)
