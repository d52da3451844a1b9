"""Key value to jamo translation for the supported Korean layouts."""

from jamo import compatibility_jamo, is_jamo

JAMO = "JAMO"
DUBEOLSIK = "DUBEOLSIK"
LATIN = "LATIN"

LAYOUTS = (JAMO, DUBEOLSIK, LATIN)

# Shift on the jamo keyboard produces tense consonants and ㅒ/ㅖ
SHIFT_MAP = {
    "ㅂ": "ㅃ", "ㅈ": "ㅉ", "ㄷ": "ㄸ", "ㄱ": "ㄲ", "ㅅ": "ㅆ",
    "ㅐ": "ㅒ", "ㅔ": "ㅖ",
}

DUBEOLSIK_MAP = {
    "q": "ㅂ", "Q": "ㅃ",
    "w": "ㅈ", "W": "ㅉ",
    "e": "ㄷ", "E": "ㄸ",
    "r": "ㄱ", "R": "ㄲ",
    "t": "ㅅ", "T": "ㅆ",
    "y": "ㅛ", "Y": "ㅛ",
    "u": "ㅕ", "U": "ㅕ",
    "i": "ㅑ", "I": "ㅑ",
    "o": "ㅐ", "O": "ㅒ",
    "p": "ㅔ", "P": "ㅖ",

    "a": "ㅁ", "A": "ㅁ",
    "s": "ㄴ", "S": "ㄴ",
    "d": "ㅇ", "D": "ㅇ",
    "f": "ㄹ", "F": "ㄹ",
    "g": "ㅎ", "G": "ㅎ",
    "h": "ㅗ", "H": "ㅗ",
    "j": "ㅓ", "J": "ㅓ",
    "k": "ㅏ", "K": "ㅏ",
    "l": "ㅣ", "L": "ㅣ",

    "z": "ㅋ", "Z": "ㅋ",
    "x": "ㅌ", "X": "ㅌ",
    "c": "ㅊ", "C": "ㅊ",
    "v": "ㅍ", "V": "ㅍ",
    "b": "ㅠ", "B": "ㅠ",
    "n": "ㅜ", "N": "ㅜ",
    "m": "ㅡ", "M": "ㅡ",
}


def shifted(key):
    return SHIFT_MAP.get(key, key)


def map_key(value, layout=JAMO):
    """Return the jamo a key value stands for in `layout`, or None."""
    if layout == DUBEOLSIK:
        return DUBEOLSIK_MAP.get(value)
    if layout == JAMO:
        jamo = compatibility_jamo(value)
        if is_jamo(jamo):
            return jamo
    return None
