"""Validation issue model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class IssueKind(str, Enum):
    """Kinds of non-fatal findings produced by validation."""

    EMPTY_HEADING = "empty heading"
    DUPLICATE_HEADING = "duplicate heading"
    TRAILING_WHITESPACE = "trailing whitespace"
    EMPTY_SECTION = "empty section"


class ValidationIssue(BaseModel):
    """A structural finding about a notes document.

    Attributes:
        kind: What was found.
        section_index: 0-based index of the section the issue belongs to.
        heading: Heading of that section.
        block_index: 0-based block index when the issue is about a block,
            None when it is about the heading or the section as a whole.
        message: Human readable description.
    """

    model_config = ConfigDict(frozen=True)

    kind: IssueKind
    section_index: int
    heading: str
    block_index: int | None = None
    message: str
