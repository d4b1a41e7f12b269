"""Frequency and vowel-harmony statistics over a Korean text."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from hangul_analyzer.utils.observability import (
    create_counter,
    create_histogram,
    get_logger,
)

from .codec import DecomposedSyllable, decompose
from .jamo import (
    BRIGHT,
    CHOSEONG_INDEX,
    DARK,
    JONGSEONG_INDEX,
    JUNGSEONG_INDEX,
    NEUTRAL,
    vowel_class,
)

BALANCED = "balanced"

_logger = get_logger(__name__).bind(component="analyzer")

_TEXTS_ANALYZED = create_counter(
    "hangul_analyzer_texts_analyzed_total",
    "Number of texts passed through analyze().",
)
_SYLLABLES_DECODED = create_counter(
    "hangul_analyzer_syllables_decoded_total",
    "Number of Hangul syllables decomposed during analysis.",
)
_ANALYSIS_SECONDS = create_histogram(
    "hangul_analyzer_analysis_seconds",
    "Time spent in analyze().",
)


@dataclass(frozen=True)
class VowelHarmony:
    """Bright/dark/neutral vowel tally with its overall tendency."""

    bright: int = 0
    dark: int = 0
    neutral: int = 0

    @property
    def tendency(self) -> str:
        if self.bright > self.dark:
            return BRIGHT
        if self.dark > self.bright:
            return DARK
        return BALANCED

    @property
    def total(self) -> int:
        return self.bright + self.dark + self.neutral

    def as_dict(self) -> Dict[str, Any]:
        return {
            "bright": self.bright,
            "dark": self.dark,
            "neutral": self.neutral,
            "tendency": self.tendency,
        }


def _empty_mapping() -> Mapping[str, int]:
    return MappingProxyType({})


@dataclass(frozen=True)
class AnalysisResult:
    """Aggregate jamo statistics for one text.

    The frequency tables are read-only views so results stay hashable and
    cannot be edited after the fact; ``as_dict`` returns plain copies.
    """

    syllables: Tuple[DecomposedSyllable, ...] = ()
    total_syllables: int = 0
    with_jong: int = 0
    cho_freq: Mapping[str, int] = field(default_factory=_empty_mapping, hash=False)
    jung_freq: Mapping[str, int] = field(default_factory=_empty_mapping, hash=False)
    jong_freq: Mapping[str, int] = field(default_factory=_empty_mapping, hash=False)
    vowel_harmony: VowelHarmony = field(default_factory=VowelHarmony)

    @property
    def without_jong(self) -> int:
        return self.total_syllables - self.with_jong

    @property
    def jong_ratio(self) -> float:
        if not self.total_syllables:
            return 0.0
        return self.with_jong / self.total_syllables

    def as_dict(self) -> Dict[str, Any]:
        return {
            "syllables": [syllable.as_dict() for syllable in self.syllables],
            "total_syllables": self.total_syllables,
            "with_jong": self.with_jong,
            "without_jong": self.without_jong,
            "jong_ratio": self.jong_ratio,
            "cho_freq": dict(self.cho_freq),
            "jung_freq": dict(self.jung_freq),
            "jong_freq": dict(self.jong_freq),
            "vowel_harmony": self.vowel_harmony.as_dict(),
        }


def sort_by_frequency(counts: Mapping[str, int], order: Mapping[str, int]) -> Dict[str, int]:
    """Order ``counts`` by descending count, ties by position in ``order``."""

    ranked: List[Tuple[str, int]] = sorted(
        counts.items(),
        key=lambda item: (-item[1], order.get(item[0], len(order))),
    )
    return dict(ranked)


def decompose_text(text: str) -> Iterable[DecomposedSyllable]:
    """Yield every decomposable syllable of ``text`` in order."""

    for ch in text or "":
        decomposed = decompose(ch)
        if decomposed is not None:
            yield decomposed


def analyze(text: str) -> AnalysisResult:
    """Decompose ``text`` and tally jamo frequencies and vowel harmony.

    Characters outside the syllable block are skipped entirely, so empty or
    non-Korean input produces an all-zero result rather than an error.
    """

    with _ANALYSIS_SECONDS.time():
        syllables = tuple(decompose_text(text))

        cho_counts: Counter[str] = Counter()
        jung_counts: Counter[str] = Counter()
        jong_counts: Counter[str] = Counter()
        harmony: Counter[str] = Counter()
        with_jong = 0

        for syllable in syllables:
            cho_counts[syllable.cho] += 1
            jung_counts[syllable.jung] += 1
            if syllable.jong:
                jong_counts[syllable.jong] += 1
                with_jong += 1
            harmony[vowel_class(syllable.jung)] += 1

        result = AnalysisResult(
            syllables=syllables,
            total_syllables=len(syllables),
            with_jong=with_jong,
            cho_freq=MappingProxyType(sort_by_frequency(cho_counts, CHOSEONG_INDEX)),
            jung_freq=MappingProxyType(sort_by_frequency(jung_counts, JUNGSEONG_INDEX)),
            jong_freq=MappingProxyType(sort_by_frequency(jong_counts, JONGSEONG_INDEX)),
            vowel_harmony=VowelHarmony(
                bright=harmony[BRIGHT],
                dark=harmony[DARK],
                neutral=harmony[NEUTRAL],
            ),
        )

    _TEXTS_ANALYZED.inc()
    _SYLLABLES_DECODED.inc(result.total_syllables)
    _logger.debug(
        "Text analysed",
        context={
            "characters": len(text or ""),
            "syllables": result.total_syllables,
            "with_jong": result.with_jong,
            "tendency": result.vowel_harmony.tendency,
        },
    )
    return result


__all__ = [
    "BALANCED",
    "VowelHarmony",
    "AnalysisResult",
    "sort_by_frequency",
    "decompose_text",
    "analyze",
]
