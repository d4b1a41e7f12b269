"""Presentation layer: report rendering and the command-line interface."""

from .cli import InputError, main
from .report import HangulReportFormatter

__all__ = ["HangulReportFormatter", "InputError", "main"]
