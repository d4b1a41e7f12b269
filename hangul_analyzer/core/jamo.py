"""Static jamo inventories used to decode Hangul syllable blocks."""

from __future__ import annotations

from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

# ---------------------------------------------------------------------------
# Syllable block range
# ---------------------------------------------------------------------------

SYLLABLE_BASE: int = 0xAC00  # 가
SYLLABLE_END: int = 0xD7A3  # 힣

# ---------------------------------------------------------------------------
# Jamo tables (index order matches the Unicode syllable arithmetic)
# ---------------------------------------------------------------------------

# 초성
CHOSEONG: Tuple[str, ...] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# 중성
JUNGSEONG: Tuple[str, ...] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ", "ㅗ", "ㅘ",
    "ㅙ", "ㅚ", "ㅛ", "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ", "ㅡ", "ㅢ", "ㅣ",
)

# 종성, index 0 is "no final consonant"
JONGSEONG: Tuple[str, ...] = (
    "", "ㄱ", "ㄲ", "ㄳ", "ㄴ", "ㄵ", "ㄶ", "ㄷ", "ㄹ", "ㄺ",
    "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ", "ㅁ", "ㅂ", "ㅄ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

CHOSEONG_INDEX: Mapping[str, int] = MappingProxyType(
    {symbol: idx for idx, symbol in enumerate(CHOSEONG)}
)
JUNGSEONG_INDEX: Mapping[str, int] = MappingProxyType(
    {symbol: idx for idx, symbol in enumerate(JUNGSEONG)}
)
JONGSEONG_INDEX: Mapping[str, int] = MappingProxyType(
    {symbol: idx for idx, symbol in enumerate(JONGSEONG) if symbol}
)

CONSONANT_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "ㄱ": "기역", "ㄲ": "쌍기역", "ㄴ": "니은", "ㄷ": "디귿", "ㄸ": "쌍디귿",
        "ㄹ": "리을", "ㅁ": "미음", "ㅂ": "비읍", "ㅃ": "쌍비읍", "ㅅ": "시옷",
        "ㅆ": "쌍시옷", "ㅇ": "이응", "ㅈ": "지읒", "ㅉ": "쌍지읒", "ㅊ": "치읓",
        "ㅋ": "키읔", "ㅌ": "티읕", "ㅍ": "피읖", "ㅎ": "히읗",
    }
)

# ---------------------------------------------------------------------------
# Vowel harmony (모음조화)
# ---------------------------------------------------------------------------

BRIGHT = "bright"
DARK = "dark"
NEUTRAL = "neutral"

VOWEL_TYPES: Mapping[str, FrozenSet[str]] = MappingProxyType(
    {
        BRIGHT: frozenset({"ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ"}),  # 양성모음
        DARK: frozenset({"ㅓ", "ㅔ", "ㅕ", "ㅖ", "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ"}),  # 음성모음
        NEUTRAL: frozenset({"ㅡ", "ㅢ", "ㅣ"}),  # 중성모음
    }
)

HARMONY_SYMBOLS: Mapping[str, str] = MappingProxyType(
    {BRIGHT: "+", DARK: "-", NEUTRAL: "·"}
)


def vowel_class(jung: str) -> str:
    """Return ``"bright"``, ``"dark"`` or ``"neutral"`` for a medial vowel.

    Anything outside the bright and dark sets counts as neutral.
    """

    if jung in VOWEL_TYPES[BRIGHT]:
        return BRIGHT
    if jung in VOWEL_TYPES[DARK]:
        return DARK
    return NEUTRAL


__all__ = [
    "SYLLABLE_BASE",
    "SYLLABLE_END",
    "CHOSEONG",
    "JUNGSEONG",
    "JONGSEONG",
    "CHOSEONG_INDEX",
    "JUNGSEONG_INDEX",
    "JONGSEONG_INDEX",
    "CONSONANT_NAMES",
    "BRIGHT",
    "DARK",
    "NEUTRAL",
    "VOWEL_TYPES",
    "HARMONY_SYMBOLS",
    "vowel_class",
]
