#!/usr/bin/env python3
"""Command-line entry point for structural analysis of Korean text."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from hangul_analyzer.utils.logging_config import configure_logging
from hangul_analyzer.utils.observability import get_logger

from .report import HangulReportFormatter

MISSING_TEXT_MESSAGE = 'No text provided. Use -t "text" or provide a file path.'


class InputError(Exception):
    """Raised when no analysable text can be resolved from the arguments."""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hangul-analyzer",
        description="Structural analysis of Korean text.",
    )
    parser.add_argument("file", nargs="?", help="UTF-8 text file to analyse.")
    parser.add_argument("-t", "--text", help="Analyse the given text instead of a file.")

    modes = parser.add_mutually_exclusive_group()
    modes.add_argument(
        "-f",
        "--fingerprint",
        action="store_true",
        help="Show the phonetic fingerprint only.",
    )
    modes.add_argument(
        "-r", "--rhymes", action="store_true", help="Show rhyme analysis only."
    )
    modes.add_argument(
        "-s",
        "--structure",
        action="store_true",
        help="Show syllable structure only.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to HANGUL_ANALYZER_LOG_LEVEL or INFO).",
    )
    return parser


def resolve_text(namespace: argparse.Namespace) -> str:
    """Return the text to analyse, preferring ``--text`` over a file path."""

    if namespace.text is not None:
        text = namespace.text
    elif namespace.file:
        path = Path(namespace.file)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InputError(f"Could not read {path}: {exc}") from exc
    else:
        text = ""

    if not text:
        raise InputError(MISSING_TEXT_MESSAGE)
    return text


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    namespace = parser.parse_args(argv)

    configure_logging(namespace.log_level)
    logger = get_logger(__name__).bind(component="cli")

    try:
        text = resolve_text(namespace)
    except InputError as exc:
        logger.error("No analysable input", context={"error": str(exc)})
        print(str(exc), file=sys.stderr)
        return 1

    mode = "all"
    for candidate in ("fingerprint", "rhymes", "structure"):
        if getattr(namespace, candidate):
            mode = candidate
    show_all = mode == "all"
    logger.info("Rendering report", context={"characters": len(text), "mode": mode})

    formatter = HangulReportFormatter()
    report = formatter.format_full_report(
        text,
        show_fingerprint=show_all or namespace.fingerprint,
        show_analysis=show_all,
        show_rhymes=show_all or namespace.rhymes,
        show_structure=show_all or namespace.structure,
    )
    if report:
        print(report)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual execution
    sys.exit(main())
