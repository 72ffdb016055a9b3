"""Pydantic models for the notes API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from lecturenotes.schemas import IssueKind, NotesDocument, ValidationIssue
from server.server_config import MAX_NOTES_SIZE


class NotesRequest(BaseModel):
    """Request model for the notes endpoints.

    Attributes
    ----------
    text : str
        The full notes text.
    select : list[IssueKind]
        Issue kinds to report from ``/api/validate``; empty means all.

    """

    text: str = Field(..., max_length=MAX_NOTES_SIZE, description="Notes text")
    select: list[IssueKind] = Field(default_factory=list, description="Issue kinds to report")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Validate that ``text`` is not blank."""
        if not v.strip():
            err = "text cannot be empty"
            raise ValueError(err)
        return v


class ParseResponse(BaseModel):
    """Success response model for ``/api/parse``."""

    title: str = Field(..., description="Heading of the first section")
    section_count: int = Field(..., description="Number of sections")
    document: NotesDocument = Field(..., description="Parsed document")


class ValidateResponse(BaseModel):
    """Success response model for ``/api/validate``."""

    issue_count: int = Field(..., description="Number of issues reported")
    issues: list[ValidationIssue] = Field(default_factory=list, description="Issues in document order")


class RenderResponse(BaseModel):
    """Success response model for ``/api/render``."""

    text: str = Field(..., description="Normalized notes text")
    changed: bool = Field(..., description="Whether normalization changed the input")


class ErrorResponse(BaseModel):
    """Error response for notes that could not be parsed.

    Attributes
    ----------
    error : str
        Description of the structural problem.
    line : int | None
        1-based line number of the problem, when known.

    """

    error: str = Field(..., description="Error message")
    line: int | None = Field(default=None, description="Line of the problem")
