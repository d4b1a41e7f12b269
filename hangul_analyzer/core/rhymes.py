"""Group syllables that share a medial vowel and final consonant."""

from __future__ import annotations

from typing import Dict, List

from .analyzer import analyze

MIN_RHYME_GROUP = 2


def find_rhymes(text: str) -> Dict[str, List[str]]:
    """Return syllables of ``text`` grouped by their 중성+종성 ending.

    Every occurrence is kept in order of appearance, groups with a single
    member are dropped and the result is ordered by descending group size.
    Equal-sized groups keep the order in which their ending first appeared.
    """

    endings: Dict[str, List[str]] = {}
    for syllable in analyze(text).syllables:
        endings.setdefault(syllable.ending, []).append(syllable.syllable)

    groups = [
        (ending, members)
        for ending, members in endings.items()
        if len(members) >= MIN_RHYME_GROUP
    ]
    groups.sort(key=lambda item: len(item[1]), reverse=True)
    return dict(groups)


__all__ = ["MIN_RHYME_GROUP", "find_rhymes"]
