"""Length-independent phonetic fingerprints of Korean text."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from hangul_analyzer.utils.observability import (
    add_span_attributes,
    create_counter,
    get_logger,
    start_span,
)

from .analyzer import AnalysisResult, analyze
from .codec import is_syllable
from .jamo import CHOSEONG, JUNGSEONG

# Python's round() is used throughout (half-to-even on the binary value).
RATIO_PRECISION = 3
LINE_LENGTH_PRECISION = 1
TOP_SOUNDS = 3

_logger = get_logger(__name__).bind(component="fingerprint")

_FINGERPRINTS = create_counter(
    "hangul_analyzer_fingerprints_total",
    "Fingerprint requests by outcome.",
    label_names=("outcome",),
)


@dataclass(frozen=True)
class Fingerprint:
    """Normalised sound profile of a text.

    ``cho_profile`` and ``jung_profile`` hold every table entry (zero when a
    jamo never occurs) so fingerprints of different texts line up as
    equal-length vectors. Both are read-only views; ``as_dict`` copies
    them into plain dicts.
    """

    total_syllables: int
    brightness: float
    weight: float
    rhythm_regularity: float
    avg_line_length: float
    consonant_diversity: float
    vowel_diversity: float
    cho_profile: Mapping[str, float] = field(hash=False)
    jung_profile: Mapping[str, float] = field(hash=False)
    top_cho: Tuple[str, ...]
    top_jung: Tuple[str, ...]

    def feature_vector(self) -> List[float]:
        """Profiles in table order followed by brightness, weight and rhythm."""

        vector = [self.cho_profile.get(symbol, 0.0) for symbol in CHOSEONG]
        vector.extend(self.jung_profile.get(symbol, 0.0) for symbol in JUNGSEONG)
        vector.extend((self.brightness, self.weight, self.rhythm_regularity))
        return vector

    def as_dict(self) -> Dict[str, Any]:
        return {
            "total_syllables": self.total_syllables,
            "brightness": self.brightness,
            "weight": self.weight,
            "rhythm_regularity": self.rhythm_regularity,
            "avg_line_length": self.avg_line_length,
            "consonant_diversity": self.consonant_diversity,
            "vowel_diversity": self.vowel_diversity,
            "cho_profile": dict(self.cho_profile),
            "jung_profile": dict(self.jung_profile),
            "top_cho": list(self.top_cho),
            "top_jung": list(self.top_jung),
        }


def line_syllable_counts(text: str) -> List[int]:
    """Syllable count of every non-blank line that contains a syllable."""

    counts: List[int] = []
    for line in (text or "").split("\n"):
        if not line.strip():
            continue
        count = sum(1 for ch in line if is_syllable(ch))
        if count:
            counts.append(count)
    return counts


def rhythm_statistics(line_lengths: Iterable[int]) -> Tuple[float, float]:
    """Return ``(mean, regularity)`` for per-line syllable counts.

    Regularity is one minus the coefficient of variation (population
    standard deviation over mean), kept within [0, 1].
    """

    lengths = list(line_lengths)
    if not lengths:
        return 0.0, 0.0
    mean = sum(lengths) / len(lengths)
    if mean <= 0:
        return mean, 0.0
    variance = sum((n - mean) ** 2 for n in lengths) / len(lengths)
    regularity = 1.0 - min(1.0, math.sqrt(variance) / mean)
    return mean, max(0.0, regularity)


def shannon_entropy(probabilities: Iterable[float]) -> float:
    """Base-2 entropy over the strictly positive ``probabilities``."""

    return max(0.0, -sum(p * math.log2(p) for p in probabilities if p > 0))


def normalized_entropy(profile: Mapping[str, float], table_size: int) -> float:
    max_entropy = math.log2(table_size) if table_size > 1 else 0.0
    if max_entropy <= 0:
        return 0.0
    return shannon_entropy(profile.values()) / max_entropy


def normalized_profile(
    freq: Mapping[str, int], table: Iterable[str], total: int
) -> Dict[str, float]:
    return {symbol: freq.get(symbol, 0) / total for symbol in table}


def fingerprint_from_analysis(result: AnalysisResult, text: str) -> Optional[Fingerprint]:
    """Build a fingerprint from an existing analysis of ``text``."""

    total = result.total_syllables
    if total == 0:
        return None

    cho_profile = normalized_profile(result.cho_freq, CHOSEONG, total)
    jung_profile = normalized_profile(result.jung_freq, JUNGSEONG, total)

    harmony = result.vowel_harmony
    brightness = (harmony.bright - harmony.dark) / max(harmony.bright + harmony.dark, 1)

    avg_line_length, rhythm_regularity = rhythm_statistics(line_syllable_counts(text))

    return Fingerprint(
        total_syllables=total,
        brightness=round(brightness, RATIO_PRECISION),
        weight=round(result.jong_ratio, RATIO_PRECISION),
        rhythm_regularity=round(rhythm_regularity, RATIO_PRECISION),
        avg_line_length=round(avg_line_length, LINE_LENGTH_PRECISION),
        consonant_diversity=round(
            normalized_entropy(cho_profile, len(CHOSEONG)), RATIO_PRECISION
        ),
        vowel_diversity=round(
            normalized_entropy(jung_profile, len(JUNGSEONG)), RATIO_PRECISION
        ),
        cho_profile=MappingProxyType(cho_profile),
        jung_profile=MappingProxyType(jung_profile),
        top_cho=tuple(list(result.cho_freq)[:TOP_SOUNDS]),
        top_jung=tuple(list(result.jung_freq)[:TOP_SOUNDS]),
    )


def fingerprint(text: str) -> Optional[Fingerprint]:
    """Compute the fingerprint of ``text``, or ``None`` if it has no syllables."""

    with start_span("hangul_analyzer.fingerprint", {"text.length": len(text or "")}) as span:
        result = fingerprint_from_analysis(analyze(text), text)
        outcome = "empty" if result is None else "computed"
        add_span_attributes(
            span,
            {
                "fingerprint.outcome": outcome,
                "fingerprint.syllables": result.total_syllables if result else 0,
            },
        )

    _FINGERPRINTS.labels(outcome=outcome).inc()
    if result is None:
        _logger.debug("No Hangul syllables to fingerprint")
    else:
        _logger.debug(
            "Fingerprint computed",
            context={
                "syllables": result.total_syllables,
                "brightness": result.brightness,
                "weight": result.weight,
            },
        )
    return result


__all__ = [
    "RATIO_PRECISION",
    "LINE_LENGTH_PRECISION",
    "TOP_SOUNDS",
    "Fingerprint",
    "line_syllable_counts",
    "rhythm_statistics",
    "shannon_entropy",
    "normalized_entropy",
    "fingerprint_from_analysis",
    "fingerprint",
]
