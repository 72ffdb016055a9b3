"""Test setup for lecturenotes."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


LECTURE_NOTES = """# Traits and Generics

Lecture notes for the unit on traits.

## Traits

A trait describes shared behaviour.

- Clone
- Debug
- PartialEq

### Quiz

1. What fails to compile?
2. What does assert_eq need?

## Generics

Functions can be generic over types.
They are monomorphized at compile time.
"""


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop handlers installed by configure_logging so they never outlive captured streams."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if getattr(handler, "_lecturenotes", False):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def lecture_text() -> str:
    """A well-formed notes file with no validation issues."""
    return LECTURE_NOTES


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    """Directory holding two independent notes files and one malformed file."""
    (tmp_path / "lecture1.md").write_text(LECTURE_NOTES, encoding="utf-8")
    nested = tmp_path / "week2"
    nested.mkdir()
    (nested / "lecture2.md").write_text("# Lecture 2\n\n## Empty\n", encoding="utf-8")
    (tmp_path / "broken.md").write_text("# Title\n### Deep\n", encoding="utf-8")
    (tmp_path / "ignored.txt").write_text("not notes", encoding="utf-8")
    return tmp_path
