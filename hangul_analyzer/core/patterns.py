"""Per-word vowel-harmony patterns and per-syllable CV/CVC shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from .codec import decompose
from .jamo import HARMONY_SYMBOLS, vowel_class

OPEN_SHAPE = "CV"
CLOSED_SHAPE = "CVC"


@dataclass(frozen=True)
class WordHarmony:
    """A whitespace-delimited word and its harmony symbol string."""

    word: str
    pattern: str

    def as_dict(self) -> Dict[str, str]:
        return {"word": self.word, "pattern": self.pattern}


def harmony_pattern(word: str) -> str:
    """Map each syllable of ``word`` to ``+`` (bright), ``-`` (dark) or ``·``.

    Non-syllable characters are dropped without a placeholder.
    """

    symbols: List[str] = []
    for ch in word:
        decomposed = decompose(ch)
        if decomposed is None:
            continue
        symbols.append(HARMONY_SYMBOLS[vowel_class(decomposed.jung)])
    return "".join(symbols)


def vowel_harmony_analysis(text: str) -> List[WordHarmony]:
    """Return the harmony pattern of every word that holds a syllable."""

    patterns: List[WordHarmony] = []
    for word in (text or "").split():
        pattern = harmony_pattern(word)
        if pattern:
            patterns.append(WordHarmony(word=word, pattern=pattern))
    return patterns


def describe_pattern(pattern: str) -> str:
    """Summarise a harmony pattern in Korean."""

    bright = pattern.count(HARMONY_SYMBOLS["bright"])
    dark = pattern.count(HARMONY_SYMBOLS["dark"])
    if bright and not dark:
        return "양성"
    if dark and not bright:
        return "음성"
    if bright > dark:
        return "양성 우세"
    if dark > bright:
        return "음성 우세"
    return "혼합"


def structural_pattern(text: str) -> str:
    """Render ``text`` as space-separated ``CV``/``CVC`` tokens.

    Visible non-syllable characters pass through unchanged; whitespace is
    dropped.
    """

    tokens: List[str] = []
    for ch in text or "":
        decomposed = decompose(ch)
        if decomposed is None:
            if ch.strip():
                tokens.append(ch)
            continue
        tokens.append(CLOSED_SHAPE if decomposed.has_jong else OPEN_SHAPE)
    return " ".join(tokens)


__all__ = [
    "OPEN_SHAPE",
    "CLOSED_SHAPE",
    "WordHarmony",
    "harmony_pattern",
    "vowel_harmony_analysis",
    "describe_pattern",
    "structural_pattern",
]
