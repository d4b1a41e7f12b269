#!/usr/bin/env python3
"""Walk three classic Korean poems through every analysis in the package."""

from __future__ import annotations

import itertools
import sys
from pathlib import Path
from typing import List, Tuple

if __package__ in {None, ""}:
    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))

from hangul_analyzer.app.report import HangulReportFormatter
from hangul_analyzer.core import (
    analyze,
    compare,
    find_rhymes,
    fingerprint,
    vowel_harmony_analysis,
)
from hangul_analyzer.utils.logging_config import configure_logging

# 윤동주, 서시
SEOSI = """죽는 날까지 하늘을 우러러
한 점 부끄럼이 없기를
잎새에 이는 바람에도
나는 괴로워했다
별을 노래하는 마음으로
모든 죽어가는 것을 사랑해야지
그리고 나한테 주어진 길을
걸어가야겠다"""

# 김소월, 진달래꽃
AZALEAS = """나 보기가 역겨워
가실 때에는
말없이 고이 보내 드리오리다
영변에 약산
진달래꽃
아름 따다 가실 길에 뿌리오리다"""

# 김춘수, 꽃
FLOWER = """내가 그의 이름을 불러 주기 전에는
그는 다만
하나의 몸짓에 지나지 않았다
내가 그의 이름을 불러 주었을 때
그는 나에게로 와서
꽃이 되었다"""

POEMS: List[Tuple[str, str, str]] = [
    ("서시", "윤동주, 서시 (序詩)", SEOSI),
    ("진달래꽃", "김소월, 진달래꽃", AZALEAS),
    ("꽃", "김춘수, 꽃", FLOWER),
]

_RULE = "═" * 50


def _heading(title: str) -> str:
    return f"\n{_RULE}\n  {title}\n{_RULE}\n"


def render_poem(formatter: HangulReportFormatter, title: str, text: str) -> str:
    sections = [
        _heading(title),
        formatter.format_analysis(analyze(text)),
    ]
    rhymes = formatter.format_rhymes(find_rhymes(text), limit=5)
    if rhymes:
        sections.append(rhymes)
    sections.append(formatter.format_harmony(vowel_harmony_analysis(text)))
    sections.append(formatter.format_structure(text))
    return "\n\n".join(sections)


def main() -> int:
    configure_logging("WARNING")
    formatter = HangulReportFormatter()

    for _, title, text in POEMS:
        print(render_poem(formatter, title, text))

    print(_heading("Phonetic Fingerprints"))
    for name, _, text in POEMS:
        fp = fingerprint(text)
        if fp is not None:
            print(formatter.format_fingerprint_detail(name, fp))
            print()

    pairs = [
        (name_a, name_b, compare(text_a, text_b))
        for (name_a, _, text_a), (name_b, _, text_b) in itertools.combinations(POEMS, 2)
    ]
    print(formatter.format_comparison(pairs))
    return 0


if __name__ == "__main__":
    sys.exit(main())
