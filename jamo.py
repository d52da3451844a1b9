"""Jamo classification and combination tables.

All tables are keyed on Hangul Compatibility Jamo (U+3131..U+3163), which is
what both the virtual keyboard and the 2-beolsik key map produce.
"""

CHOSEONG = "ㄱㄲㄴㄷㄸㄹㅁㅂㅃㅅㅆㅇㅈㅉㅊㅋㅌㅍㅎ"
JUNGSEONG = "ㅏㅐㅑㅒㅓㅔㅕㅖㅗㅘㅙㅚㅛㅜㅝㅞㅟㅠㅡㅢㅣ"
# Index 0 is the empty final.
JONGSEONG = ("", "ㄱ", "ㄲ", "ㄳ", "ㄴ", "ㄵ", "ㄶ", "ㄷ", "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ",
             "ㄿ", "ㅀ", "ㅁ", "ㅂ", "ㅄ", "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ")

_CHO_INDEX = {c: i for i, c in enumerate(CHOSEONG)}
_JUNG_INDEX = {c: i for i, c in enumerate(JUNGSEONG)}
_JONG_INDEX = {c: i for i, c in enumerate(JONGSEONG) if c}

MEDIAL_PAIRS = {
    ("ㅗ", "ㅏ"): "ㅘ", ("ㅗ", "ㅐ"): "ㅙ", ("ㅗ", "ㅣ"): "ㅚ",
    ("ㅜ", "ㅓ"): "ㅝ", ("ㅜ", "ㅔ"): "ㅞ", ("ㅜ", "ㅣ"): "ㅟ",
    ("ㅡ", "ㅣ"): "ㅢ",
}
MEDIAL_SPLITS = {v: k for k, v in MEDIAL_PAIRS.items()}

FINAL_PAIRS = {
    ("ㄱ", "ㅅ"): "ㄳ",
    ("ㄴ", "ㅈ"): "ㄵ", ("ㄴ", "ㅎ"): "ㄶ",
    ("ㄹ", "ㄱ"): "ㄺ", ("ㄹ", "ㅁ"): "ㄻ", ("ㄹ", "ㅂ"): "ㄼ", ("ㄹ", "ㅅ"): "ㄽ",
    ("ㄹ", "ㅌ"): "ㄾ", ("ㄹ", "ㅍ"): "ㄿ", ("ㄹ", "ㅎ"): "ㅀ",
    ("ㅂ", "ㅅ"): "ㅄ",
}
FINAL_SPLITS = {v: k for k, v in FINAL_PAIRS.items()}


def compatibility_jamo(c):
    # Conjoining jamo (U+1100 block) share the compatibility ordering.
    if not c or len(c) != 1:
        return c
    u = ord(c)
    if 0x1100 <= u <= 0x1112: return CHOSEONG[u - 0x1100]
    if 0x1161 <= u <= 0x1175: return JUNGSEONG[u - 0x1161]
    if 0x11A8 <= u <= 0x11C2: return JONGSEONG[u - 0x11A8 + 1]
    return c


def is_initial(c): return c in _CHO_INDEX
def is_medial(c): return c in _JUNG_INDEX
def is_final(c): return c in _JONG_INDEX


def is_consonant(c):
    return is_initial(c) or is_final(c)


def is_vowel(c):
    return is_medial(c)


def is_jamo(c):
    return is_consonant(c) or is_vowel(c)


def initial_index(c):
    return _CHO_INDEX.get(c, -1)


def medial_index(c):
    return _JUNG_INDEX.get(c, -1)


def final_index(c):
    if not c:
        return 0
    return _JONG_INDEX.get(c, -1)


def combine_medial(a, b):
    return MEDIAL_PAIRS.get((a, b))


def split_medial(c):
    return MEDIAL_SPLITS.get(c, (c, None))


def combine_final(a, b):
    return FINAL_PAIRS.get((a, b))


def split_final(c):
    return FINAL_SPLITS.get(c, (c, None))
