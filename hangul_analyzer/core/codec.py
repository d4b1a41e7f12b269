"""Conversion between Hangul syllable blocks and their jamo triples.

A syllable block encodes its jamo directly in the code point::

    code_point = 0xAC00 + (cho_idx * 21 + jung_idx) * 28 + jong_idx

so decomposition is plain integer arithmetic and is a bijection over the
11,172 code points of the block.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .jamo import (
    CHOSEONG,
    CHOSEONG_INDEX,
    JONGSEONG,
    JONGSEONG_INDEX,
    JUNGSEONG,
    JUNGSEONG_INDEX,
    SYLLABLE_BASE,
    SYLLABLE_END,
)

_JUNG_COUNT = len(JUNGSEONG)
_JONG_COUNT = len(JONGSEONG)


@dataclass(frozen=True)
class DecomposedSyllable:
    """One syllable block split into initial, medial and final jamo."""

    syllable: str
    cho: str
    jung: str
    jong: Optional[str]
    cho_idx: int
    jung_idx: int
    jong_idx: int

    @property
    def has_jong(self) -> bool:
        return self.jong_idx != 0

    @property
    def ending(self) -> str:
        """Medial plus final, the key used for rhyme grouping."""

        return self.jung + (self.jong or "")

    def as_dict(self) -> Dict[str, Any]:
        return {
            "syllable": self.syllable,
            "cho": self.cho,
            "jung": self.jung,
            "jong": self.jong,
            "cho_idx": self.cho_idx,
            "jung_idx": self.jung_idx,
            "jong_idx": self.jong_idx,
            "has_jong": self.has_jong,
        }


def is_syllable(ch: str) -> bool:
    """Return ``True`` when ``ch`` is a single precomposed Hangul syllable."""

    if not isinstance(ch, str) or len(ch) != 1:
        return False
    return SYLLABLE_BASE <= ord(ch) <= SYLLABLE_END


def decompose(ch: str) -> Optional[DecomposedSyllable]:
    """Split ``ch`` into jamo, or return ``None`` for non-syllables."""

    if not is_syllable(ch):
        return None

    code = ord(ch) - SYLLABLE_BASE
    jong_idx = code % _JONG_COUNT
    jung_idx = (code // _JONG_COUNT) % _JUNG_COUNT
    cho_idx = code // _JONG_COUNT // _JUNG_COUNT

    return DecomposedSyllable(
        syllable=ch,
        cho=CHOSEONG[cho_idx],
        jung=JUNGSEONG[jung_idx],
        jong=JONGSEONG[jong_idx] or None,
        cho_idx=cho_idx,
        jung_idx=jung_idx,
        jong_idx=jong_idx,
    )


def compose(cho: str, jung: str, jong: Optional[str] = "") -> Optional[str]:
    """Build the syllable block for the given jamo.

    Returns ``None`` when ``cho`` or ``jung`` is not a known initial or
    medial. A missing, blank or unknown ``jong`` produces an open syllable.
    """

    cho_idx = CHOSEONG_INDEX.get(cho)
    jung_idx = JUNGSEONG_INDEX.get(jung)
    if cho_idx is None or jung_idx is None:
        return None

    jong_idx = 0
    if jong and jong.strip():
        jong_idx = JONGSEONG_INDEX.get(jong.strip(), 0)

    return chr(SYLLABLE_BASE + (cho_idx * _JUNG_COUNT + jung_idx) * _JONG_COUNT + jong_idx)


__all__ = ["DecomposedSyllable", "is_syllable", "decompose", "compose"]
