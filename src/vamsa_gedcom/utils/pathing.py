# src/vamsa_gedcom/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union


# This file lives at:
#   <project_root>/src/vamsa_gedcom/utils/pathing.py
#
#   [0] .../src/vamsa_gedcom/utils
#   [1] .../src/vamsa_gedcom
#   [2] .../src
#   [3] .../ (project root)
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the absolute path to the project root directory.

    The project root is the directory that contains src/, tests/ and config/.
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Examples:
        resolve_project_path("config/vamsa_gedcom.yml")
        resolve_project_path(Path("tests") / "data" / "with_sources.ged")
    """
    return project_root() / Path(relative)


def tests_data_path(*parts: Union[str, Path]) -> Path:
    """
    Return the absolute path to a file under tests/data/.

    Examples:
        tests_data_path("with_sources.ged")
        tests_data_path("with_multimedia.ged")
    """
    return resolve_project_path(Path("tests") / "data" / Path(*parts))
