# src/scribble/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union

# <project_root>/src/scribble/utils/pathing.py
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the absolute path to the project root directory
    (the one holding src/, tests/, config/ and mock_files/).
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Examples:
        resolve_project_path("mock_files/body_sample.yml")
        resolve_project_path(Path("tests") / "data" / "scribble_test.yml")
    """
    return project_root() / Path(relative)


def mock_file_path(filename: Union[str, Path]) -> Path:
    """Return the absolute path to a file under mock_files/."""
    return resolve_project_path(Path("mock_files") / filename)


def tests_data_path(*parts: Union[str, Path]) -> Path:
    """Return the absolute path to a file under tests/data/."""
    return resolve_project_path(Path("tests") / "data" / Path(*parts))
