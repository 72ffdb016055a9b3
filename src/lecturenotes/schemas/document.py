"""Immutable notes document model."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from lecturenotes.config import MAX_HEADING_LEVEL, TITLE_LEVEL
from lecturenotes.markers import check_marker_text, check_paragraph_text


class Paragraph(BaseModel):
    """Free text; lines of a multi-line paragraph are joined by newlines."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["paragraph"] = "paragraph"
    text: str

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Every line must be non-blank and must not read as a heading or list item."""
        return check_paragraph_text(v)


class ListItem(BaseModel):
    """A single list entry.

    Attributes:
        text: Item text without its marker. Blank text is kept verbatim
            (``"   "`` for a ``"-   "`` line).
        bullet: True for unordered markers (``-``, ``*``, ``+``), False for
            ordered markers (``1.``, ``2)``).
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["list_item"] = "list_item"
    text: str
    bullet: bool = True

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Single line, no leading blanks unless the text is all blanks."""
        return check_marker_text(v)


Block = Annotated[Union[Paragraph, ListItem], Field(discriminator="kind")]


class Section(BaseModel):
    """A heading and the blocks that follow it up to the next heading."""

    model_config = ConfigDict(frozen=True)

    heading: str
    level: int = Field(..., ge=1, le=MAX_HEADING_LEVEL)
    blocks: tuple[Block, ...] = ()

    @field_validator("heading")
    @classmethod
    def validate_heading(cls, v: str) -> str:
        """Same single-line rule as list item text."""
        return check_marker_text(v)


class NotesDocument(BaseModel):
    """One lecture-notes file as an ordered, non-empty sequence of sections."""

    model_config = ConfigDict(frozen=True)

    sections: tuple[Section, ...]

    @model_validator(mode="after")
    def check_heading_levels(self) -> "NotesDocument":
        """Reject empty documents and heading-level skips."""
        if not self.sections:
            raise ValueError("a notes document needs at least one section")
        if self.sections[0].level != TITLE_LEVEL:
            raise ValueError(
                f"first section must be at title level {TITLE_LEVEL}, "
                f"got {self.sections[0].level}"
            )
        for previous, current in zip(self.sections, self.sections[1:]):
            if current.level > previous.level + 1:
                raise ValueError(
                    f"heading level skips from {previous.level} to {current.level} "
                    f"at {current.heading!r}"
                )
        return self

    @property
    def title(self) -> str:
        return self.sections[0].heading
