"""Custom exceptions for lecturenotes."""

from __future__ import annotations


class LectureNotesError(Exception):
    """Base exception for lecturenotes operations."""


class MalformedDocument(LectureNotesError):
    """Notes text violates a structural rule and cannot be parsed.

    Attributes:
        reason: Human readable description of the violation.
        line: 1-based line number where the violation was found, if known.
    """

    def __init__(self, reason: str, *, line: int | None = None) -> None:
        self.reason = reason
        self.line = line
        message = f"line {line}: {reason}" if line is not None else reason
        super().__init__(message)


class LoadError(LectureNotesError):
    """Notes file could not be read."""
