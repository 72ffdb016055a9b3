"""Read notes files from disk and parse them independently."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from lecturenotes.config import (
    LECTURENOTES_ENCODING,
    LECTURENOTES_GLOB,
    LECTURENOTES_MAX_FILE_BYTES,
)
from lecturenotes.exceptions import LectureNotesError, LoadError
from lecturenotes.parser import parse
from lecturenotes.schemas import NotesDocument

logger = logging.getLogger(__name__)


@dataclass
class LoadedNotes:
    """Outcome of loading one notes file.

    Exactly one of ``document`` and ``error`` is set.
    """

    path: Path
    document: NotesDocument | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.document is not None


def read_notes(
    path: Path,
    *,
    encoding: str = LECTURENOTES_ENCODING,
    max_bytes: int = LECTURENOTES_MAX_FILE_BYTES,
) -> str:
    """Read a notes file as text.

    Raises:
        LoadError: If the file is missing, too large, or cannot be decoded.
    """
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise LoadError(f"Cannot read {path}: {exc.strerror or exc}") from exc
    if max_bytes > 0 and size > max_bytes:
        raise LoadError(f"{path} is {size} bytes, limit is {max_bytes}")
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise LoadError(f"{path} is not valid {encoding}: {exc.reason}") from exc
    except OSError as exc:
        raise LoadError(f"Cannot read {path}: {exc.strerror or exc}") from exc


def load_document(path: Path) -> NotesDocument:
    """Read and parse a single notes file."""
    return parse(read_notes(path))


def iter_note_paths(paths: Iterable[Path], pattern: str = LECTURENOTES_GLOB) -> Iterator[Path]:
    """Yield files, expanding directories to their matching files in sorted order."""
    for path in paths:
        if path.is_dir():
            yield from sorted(candidate for candidate in path.rglob(pattern) if candidate.is_file())
        else:
            yield path


def load_corpus(paths: Iterable[Path], pattern: str = LECTURENOTES_GLOB) -> list[LoadedNotes]:
    """Load every notes file independently.

    A file that fails to load or parse is reported on its own entry and does
    not stop the remaining files.
    """
    results: list[LoadedNotes] = []
    for path in iter_note_paths(paths, pattern):
        try:
            document = load_document(path)
        except LectureNotesError as exc:
            logger.warning("Failed to load notes", extra={"path": str(path), "error": str(exc)})
            results.append(LoadedNotes(path=path, error=str(exc)))
            continue
        results.append(LoadedNotes(path=path, document=document))
    logger.info(
        "Loaded notes corpus",
        extra={"files": len(results), "failed": sum(1 for item in results if not item.ok)},
    )
    return results
