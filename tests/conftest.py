import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

DATA_DIR = PROJECT_ROOT / "tests" / "data"

HEADER = """0 HEAD
1 SOUR MyApp
1 GEDC
2 VERS 5.5.1
1 CHAR UTF-8"""


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def make_gedcom():
    """Wrap record lines in a minimal HEAD ... TRLR envelope."""

    def _make(body: str) -> str:
        return f"{HEADER}\n{body.strip()}\n0 TRLR\n"

    return _make


@pytest.fixture
def parsed(data_dir):
    """Parse a file from tests/data by name."""
    from vamsa_gedcom.parser_core import parse_gedcom_file

    def _parsed(name: str):
        return parse_gedcom_file(data_dir / name)

    return _parsed
