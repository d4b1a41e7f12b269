import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


SEOSI_OPENING = "죽는 날까지 하늘을 우러러 한 점 부끄럼이 없기를"

SEOSI = """죽는 날까지 하늘을 우러러
한 점 부끄럼이 없기를
잎새에 이는 바람에도
나는 괴로워했다"""


@pytest.fixture
def seosi_opening():
    """First line of 서시 as a single line of text."""

    return SEOSI_OPENING


@pytest.fixture
def seosi():
    """Opening stanza of 서시 with one verse per line."""

    return SEOSI
