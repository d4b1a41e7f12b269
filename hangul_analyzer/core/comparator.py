"""Cosine similarity between phonetic fingerprints."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from hangul_analyzer.utils.observability import (
    add_span_attributes,
    create_counter,
    get_logger,
    start_span,
)

from .fingerprint import Fingerprint, fingerprint

SIMILARITY_PRECISION = 4

_logger = get_logger(__name__).bind(component="comparator")

_COMPARISONS = create_counter(
    "hangul_analyzer_comparisons_total",
    "Text comparisons by outcome.",
    label_names=("outcome",),
)


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Return ``dot(a, b) / (|a| * |b|)``; a zero-magnitude vector scores 0."""

    if len(a) != len(b):
        raise ValueError(f"Vector lengths differ: {len(a)} != {len(b)}")

    dot = sum(x * y for x, y in zip(a, b))
    magnitude_a = math.sqrt(sum(x * x for x in a))
    magnitude_b = math.sqrt(sum(y * y for y in b))
    denominator = magnitude_a * magnitude_b
    if denominator == 0:
        return 0.0
    return dot / denominator


def compare_fingerprints(fp_a: Fingerprint, fp_b: Fingerprint) -> float:
    """Similarity of two fingerprints, rounded to four decimals."""

    similarity = cosine_similarity(fp_a.feature_vector(), fp_b.feature_vector())
    return round(similarity, SIMILARITY_PRECISION)


def compare(text_a: str, text_b: str) -> Optional[float]:
    """Compare two texts by fingerprint.

    Returns ``None`` when either text has no Hangul syllables.
    """

    with start_span("hangul_analyzer.compare") as span:
        fp_a = fingerprint(text_a)
        fp_b = fingerprint(text_b)
        if fp_a is None or fp_b is None:
            _COMPARISONS.labels(outcome="skipped").inc()
            add_span_attributes(span, {"compare.outcome": "skipped"})
            _logger.debug(
                "Comparison skipped",
                context={"a_empty": fp_a is None, "b_empty": fp_b is None},
            )
            return None

        similarity = compare_fingerprints(fp_a, fp_b)
        _COMPARISONS.labels(outcome="scored").inc()
        add_span_attributes(
            span, {"compare.outcome": "scored", "compare.similarity": similarity}
        )

    _logger.debug("Texts compared", context={"similarity": similarity})
    return similarity


__all__ = [
    "SIMILARITY_PRECISION",
    "cosine_similarity",
    "compare_fingerprints",
    "compare",
]
