"""lecturenotes: parse, validate and render lecture notes."""

from lecturenotes.exceptions import LectureNotesError, LoadError, MalformedDocument
from lecturenotes.formatter import format_notes
from lecturenotes.loader import LoadedNotes, load_corpus, load_document
from lecturenotes.parser import parse
from lecturenotes.renderer import render
from lecturenotes.schemas import (
    IssueKind,
    ListItem,
    NotesDigest,
    NotesDocument,
    Paragraph,
    Section,
    ValidationIssue,
)
from lecturenotes.sections import build_section_tree, filter_sections
from lecturenotes.validator import ValidationIssues, validate

__all__ = [
    "IssueKind",
    "LectureNotesError",
    "ListItem",
    "LoadError",
    "LoadedNotes",
    "MalformedDocument",
    "NotesDigest",
    "NotesDocument",
    "Paragraph",
    "Section",
    "ValidationIssue",
    "ValidationIssues",
    "build_section_tree",
    "filter_sections",
    "format_notes",
    "load_corpus",
    "load_document",
    "parse",
    "render",
    "validate",
]
