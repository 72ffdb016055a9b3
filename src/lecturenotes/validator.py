"""Structural validation of notes documents."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from lecturenotes.schemas import IssueKind, ListItem, NotesDocument, Section, ValidationIssue

logger = logging.getLogger(__name__)

_TRAILING_BLANKS = (" ", "\t")


def normalize_heading(heading: str) -> str:
    """Collapse whitespace and case-fold a heading for duplicate detection."""
    return " ".join(heading.split()).casefold()


class ValidationIssues:
    """Lazy, restartable sequence of issues for one document.

    Nothing is computed until iteration starts, and every iteration walks the
    (immutable) document again, so iterating twice yields the same issues.
    """

    def __init__(self, doc: NotesDocument, kinds: Iterable[IssueKind] | None = None) -> None:
        self._doc = doc
        self._kinds = frozenset(IssueKind(kind) for kind in kinds) if kinds is not None else None

    def __iter__(self) -> Iterator[ValidationIssue]:
        for issue in _iter_issues(self._doc):
            if self._kinds is None or issue.kind in self._kinds:
                yield issue

    def __repr__(self) -> str:
        return f"ValidationIssues(title={self._doc.title!r})"


def validate(doc: NotesDocument, *, kinds: Iterable[IssueKind | str] | None = None) -> ValidationIssues:
    """Return the structural issues of ``doc`` as a lazy iterable.

    Headings count as duplicates when they sit at the same level and match
    case-insensitively after whitespace is collapsed, so ``Intro`` and
    ``INTRO`` collide. Whitespace-only lines are block separators and are not
    part of the document, so they are never reported.

    Args:
        doc: Document to inspect. It is never modified.
        kinds: Optional subset of issue kinds to report.
    """
    return ValidationIssues(doc, kinds)


def _iter_issues(doc: NotesDocument) -> Iterator[ValidationIssue]:
    seen: set[tuple[int, str]] = set()
    sections = doc.sections
    for index, section in enumerate(sections):
        if not section.heading.strip():
            yield _issue(IssueKind.EMPTY_HEADING, index, section, "heading has no text")

        key = (section.level, normalize_heading(section.heading))
        if key[1]:
            if key in seen:
                yield _issue(
                    IssueKind.DUPLICATE_HEADING,
                    index,
                    section,
                    f"heading {section.heading.strip()!r} repeats an earlier level-{section.level} heading",
                )
            seen.add(key)

        yield from _trailing_whitespace(index, section)

        following = sections[index + 1] if index + 1 < len(sections) else None
        has_subsections = following is not None and following.level > section.level
        if not section.blocks and not has_subsections:
            yield _issue(IssueKind.EMPTY_SECTION, index, section, "section has no content")

    logger.debug("Validated notes document", extra={"section_count": len(sections)})


def _trailing_whitespace(index: int, section: Section) -> Iterator[ValidationIssue]:
    if section.heading.endswith(_TRAILING_BLANKS):
        yield _issue(IssueKind.TRAILING_WHITESPACE, index, section, "heading ends with whitespace")
    for block_index, block in enumerate(section.blocks):
        lines = [block.text] if isinstance(block, ListItem) else block.text.split("\n")
        if any(line.endswith(_TRAILING_BLANKS) for line in lines):
            label = "list item" if isinstance(block, ListItem) else "paragraph"
            yield _issue(
                IssueKind.TRAILING_WHITESPACE,
                index,
                section,
                f"{label} ends a line with whitespace",
                block_index=block_index,
            )


def _issue(
    kind: IssueKind,
    index: int,
    section: Section,
    message: str,
    *,
    block_index: int | None = None,
) -> ValidationIssue:
    return ValidationIssue(
        kind=kind,
        section_index=index,
        heading=section.heading,
        block_index=block_index,
        message=message,
    )
