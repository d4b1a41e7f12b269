"""Plain-text report rendering for analysis results."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from hangul_analyzer.core import (
    AnalysisResult,
    Fingerprint,
    WordHarmony,
    analyze,
    describe_pattern,
    find_rhymes,
    fingerprint,
    is_syllable,
    structural_pattern,
)

NO_SYLLABLES_MESSAGE = "No Korean syllables found."

TENDENCY_LABELS: Dict[str, str] = {
    "bright": "양성 (bright)",
    "dark": "음성 (dark)",
    "balanced": "균형 (balanced)",
}


def _number(value: float) -> str:
    """Render whole floats without the trailing `.0` (`1.0` -> `1`)."""

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _signed(value: float) -> str:
    return f"+{_number(value)}" if value > 0 else _number(value)


def _brightness_label(value: float) -> str:
    if value > 0:
        return "양성"
    if value < 0:
        return "음성"
    return "균형"


def _weight_label(value: float) -> str:
    if value > 0.5:
        return "무거움"
    if value > 0.3:
        return "중간"
    return "가벼움"


def _rhythm_label(value: float) -> str:
    if value > 0.7:
        return "규칙적"
    if value > 0.4:
        return "보통"
    return "불규칙"


def _bar(fraction: float, width: int) -> str:
    return "█" * int(round(max(0.0, fraction) * width))


def _unique(items: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(items))


class HangulReportFormatter:
    """Render fingerprints, statistics, rhymes and structure as text."""

    def format_fingerprint(self, fp: Optional[Fingerprint]) -> str:
        if fp is None:
            return NO_SYLLABLES_MESSAGE

        lines = [
            f"음절: {fp.total_syllables}",
            f"밝기: {_signed(fp.brightness)} ({_brightness_label(fp.brightness)})",
            f"무게: {_number(fp.weight)} ({_weight_label(fp.weight)})",
            f"리듬: {_number(fp.rhythm_regularity)} ({_rhythm_label(fp.rhythm_regularity)})",
            f"자음 다양성: {_number(fp.consonant_diversity)}",
            f"모음 다양성: {_number(fp.vowel_diversity)}",
            f"대표음: {''.join(fp.top_cho)} / {''.join(fp.top_jung)}",
        ]
        return "\n".join(lines)

    def format_fingerprint_detail(self, name: str, fp: Fingerprint) -> str:
        """Longer fingerprint block with bars, used by the poem demo."""

        bright_bar = _bar(abs(fp.brightness), 10)
        direction = f"양성 {bright_bar}" if fp.brightness > 0 else f"{bright_bar} 음성"
        lines = [
            f"[{name}]",
            f"  밝기: {_signed(fp.brightness)} {direction}",
            f"  무게: {_number(fp.weight)} {_bar(fp.weight, 10)}",
            f"  리듬 규칙성: {_number(fp.rhythm_regularity)}",
            f"  평균 행 길이: {_number(fp.avg_line_length)}음절",
            f"  자음 다양성: {_number(fp.consonant_diversity)}",
            f"  모음 다양성: {_number(fp.vowel_diversity)}",
            f"  대표 초성: {' '.join(fp.top_cho)}",
            f"  대표 중성: {' '.join(fp.top_jung)}",
        ]
        return "\n".join(lines)

    def format_analysis(self, result: AnalysisResult, top: int = 5) -> str:
        harmony = result.vowel_harmony
        lines = [
            f"받침: {result.with_jong}/{result.total_syllables} ({result.jong_ratio * 100:.1f}%)",
            f"모음: 양성 {harmony.bright}, 음성 {harmony.dark}, 중성 {harmony.neutral}",
            f"성향: {TENDENCY_LABELS.get(harmony.tendency, harmony.tendency)}",
            "",
            "초성: " + " ".join(f"{k}({v})" for k, v in list(result.cho_freq.items())[:top]),
            "중성: " + " ".join(f"{k}({v})" for k, v in list(result.jung_freq.items())[:top]),
        ]
        return "\n".join(lines)

    def format_rhymes(self, rhymes: Dict[str, List[str]], limit: int = 8) -> str:
        if not rhymes:
            return ""
        lines = ["운율:"]
        for ending, chars in list(rhymes.items())[:limit]:
            lines.append(f"  [{ending}] {' '.join(_unique(chars))} ({len(chars)})")
        return "\n".join(lines)

    def format_harmony(self, patterns: Sequence[WordHarmony], limit: int = 8) -> str:
        lines = ["모음조화:"]
        for entry in patterns[:limit]:
            lines.append(
                f"  {entry.word.ljust(8)} {entry.pattern}  ({describe_pattern(entry.pattern)})"
            )
        return "\n".join(lines)

    def format_structure(self, text: str) -> str:
        lines = ["구조:"]
        for line in (text or "").split("\n"):
            if not line.strip():
                continue
            compact = "".join(line.split())
            count = sum(1 for ch in compact if is_syllable(ch))
            lines.append(f"  [{count:>2}] {line}")
            lines.append(f"       {structural_pattern(compact)}")
        return "\n".join(lines)

    def format_comparison(
        self, pairs: Iterable[Tuple[str, str, Optional[float]]]
    ) -> str:
        lines = ["유사도:"]
        for name_a, name_b, similarity in pairs:
            if similarity is None:
                lines.append(f"  {name_a} ↔ {name_b}: -")
                continue
            lines.append(f"  {name_a} ↔ {name_b}: {_number(similarity)} {_bar(similarity, 20)}")
        return "\n".join(lines)

    def format_full_report(
        self,
        text: str,
        *,
        show_fingerprint: bool = True,
        show_analysis: bool = True,
        show_rhymes: bool = True,
        show_structure: bool = True,
    ) -> str:
        """Join the requested sections with blank lines.

        A text without syllables yields only :data:`NO_SYLLABLES_MESSAGE`
        when the fingerprint section is requested.
        """

        sections: List[str] = []

        if show_fingerprint:
            fp = fingerprint(text)
            if fp is None:
                return NO_SYLLABLES_MESSAGE
            sections.append(self.format_fingerprint(fp))

        if show_analysis:
            sections.append(self.format_analysis(analyze(text)))

        if show_rhymes:
            rendered = self.format_rhymes(find_rhymes(text))
            if rendered:
                sections.append(rendered)

        if show_structure:
            sections.append(self.format_structure(text))

        return "\n\n".join(sections)


__all__ = ["HangulReportFormatter", "NO_SYLLABLES_MESSAGE", "TENDENCY_LABELS"]
