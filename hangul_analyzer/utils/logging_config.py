"""Logging for the ``hangul-analyzer`` CLI and the poem demo.

Reports are printed to stdout, so log records always go to stderr. The
analysis modules log per-text jamo counts at ``DEBUG``, which the default
``INFO`` level keeps out of a normal run.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "HANGUL_ANALYZER_LOG_LEVEL"
PACKAGE_LOGGER = "hangul_analyzer"

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False


def resolve_level(level: str | int | None) -> int:
    """Map ``--log-level`` or ``HANGUL_ANALYZER_LOG_LEVEL`` to a level number.

    Unknown names fall back to ``INFO`` rather than failing the CLI run.
    """

    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        normalized = str(level).strip().upper()
        candidate = getattr(logging, normalized, None)
        return candidate if isinstance(candidate, int) else logging.INFO


def configure_logging(level: Optional[str | int] = None, *, force: bool = False) -> None:
    """Send ``hangul_analyzer`` records to stderr at the requested level.

    The ``--log-level`` value wins over ``HANGUL_ANALYZER_LOG_LEVEL``. Only
    the first call installs the handler; ``force`` replaces it, which the
    tests use to switch levels between runs.
    """

    global _CONFIGURED

    if _CONFIGURED and not force:
        return

    env_level = os.environ.get(LOG_LEVEL_ENV)
    resolved_level = resolve_level(level if level is not None else env_level)

    logging.basicConfig(
        level=resolved_level, format=_DEFAULT_FORMAT, stream=sys.stderr, force=force
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(resolved_level)
    _CONFIGURED = True


__all__ = ["LOG_LEVEL_ENV", "PACKAGE_LOGGER", "configure_logging", "resolve_level"]
