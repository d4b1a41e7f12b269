"""Structural and phonetic analysis of Korean (Hangul) text."""

from hangul_analyzer.core import (
    AnalysisResult,
    DecomposedSyllable,
    Fingerprint,
    WordHarmony,
    analyze,
    compare,
    compose,
    decompose,
    find_rhymes,
    fingerprint,
    is_syllable,
    structural_pattern,
    vowel_harmony_analysis,
)

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "DecomposedSyllable",
    "Fingerprint",
    "WordHarmony",
    "analyze",
    "compare",
    "compose",
    "decompose",
    "find_rhymes",
    "fingerprint",
    "is_syllable",
    "structural_pattern",
    "vowel_harmony_analysis",
]
