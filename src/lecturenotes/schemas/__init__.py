"""Shared schemas for lecturenotes."""

from lecturenotes.schemas.digest import NotesDigest
from lecturenotes.schemas.document import Block, ListItem, NotesDocument, Paragraph, Section
from lecturenotes.schemas.issues import IssueKind, ValidationIssue
from lecturenotes.schemas.sections import SectionNode

__all__ = [
    "Block",
    "IssueKind",
    "ListItem",
    "NotesDigest",
    "NotesDocument",
    "Paragraph",
    "Section",
    "SectionNode",
    "ValidationIssue",
]
