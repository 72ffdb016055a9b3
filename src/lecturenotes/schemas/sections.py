"""Section tree models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SectionNode(BaseModel):
    """A hierarchical section node."""

    heading: str
    level: int = Field(..., ge=1, le=6)
    block_count: int = 0
    children: list["SectionNode"] = Field(default_factory=list)
