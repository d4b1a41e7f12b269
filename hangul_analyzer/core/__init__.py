"""Core Hangul decomposition and phonetic analysis engine."""

from .analyzer import AnalysisResult, VowelHarmony, analyze
from .codec import DecomposedSyllable, compose, decompose, is_syllable
from .comparator import compare, compare_fingerprints, cosine_similarity
from .fingerprint import Fingerprint, fingerprint, line_syllable_counts
from .jamo import (
    CHOSEONG,
    CONSONANT_NAMES,
    JONGSEONG,
    JUNGSEONG,
    VOWEL_TYPES,
    vowel_class,
)
from .patterns import (
    WordHarmony,
    describe_pattern,
    structural_pattern,
    vowel_harmony_analysis,
)
from .rhymes import find_rhymes

__all__ = [
    "CHOSEONG",
    "JUNGSEONG",
    "JONGSEONG",
    "CONSONANT_NAMES",
    "VOWEL_TYPES",
    "vowel_class",
    "DecomposedSyllable",
    "is_syllable",
    "decompose",
    "compose",
    "AnalysisResult",
    "VowelHarmony",
    "analyze",
    "find_rhymes",
    "WordHarmony",
    "vowel_harmony_analysis",
    "describe_pattern",
    "structural_pattern",
    "Fingerprint",
    "fingerprint",
    "line_syllable_counts",
    "compare",
    "compare_fingerprints",
    "cosine_similarity",
]
