"""Digest output model."""

from __future__ import annotations

from pydantic import BaseModel


class NotesDigest(BaseModel):
    """Summary, section tree and normalized content of one notes document."""

    summary: str
    sections_tree: str
    content: str
