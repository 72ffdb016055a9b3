"""Parse markdown-like lecture notes into a NotesDocument."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from lecturenotes.config import TITLE_LEVEL
from lecturenotes.exceptions import MalformedDocument
from lecturenotes.markers import BULLET_RE, HEADING_RE, ORDERED_RE, marker_text
from lecturenotes.schemas import Block, ListItem, NotesDocument, Paragraph, Section

logger = logging.getLogger(__name__)


@dataclass
class _OpenSection:
    heading: str
    level: int
    blocks: list[Block] = field(default_factory=list)
    paragraph: list[str] = field(default_factory=list)

    def flush_paragraph(self) -> None:
        if self.paragraph:
            self.blocks.append(Paragraph(text="\n".join(self.paragraph)))
            self.paragraph = []

    def close(self) -> Section:
        self.flush_paragraph()
        return Section(heading=self.heading, level=self.level, blocks=tuple(self.blocks))


def classify_list_item(line: str) -> ListItem | None:
    """Return the list item a line denotes, or None for non-list lines."""
    match = BULLET_RE.match(line)
    if match:
        return ListItem(text=marker_text(match.group(1)), bullet=True)
    match = ORDERED_RE.match(line)
    if match:
        return ListItem(text=marker_text(match.group(1)), bullet=False)
    return None


def parse(text: str) -> NotesDocument:
    """Parse notes text in a single pass.

    Lines are grouped into sections by ``#`` heading markers. Inside a section,
    lines starting with a list marker become ListItem blocks and runs of other
    non-blank lines become Paragraph blocks.

    Raises:
        MalformedDocument: If content precedes the first heading, the first
            heading is not at title level, a heading level is skipped, or the
            text contains no heading at all.
    """
    sections: list[Section] = []
    current: _OpenSection | None = None
    previous_level = TITLE_LEVEL - 1

    lines = text.splitlines()
    for line_number, line in enumerate(lines, start=1):
        heading = HEADING_RE.match(line)
        if heading:
            level = len(heading.group(1))
            if level > previous_level + 1:
                if current is None:
                    reason = f"first heading must be level {TITLE_LEVEL}, got level {level}"
                else:
                    reason = f"heading level skips from {previous_level} to {level}"
                raise MalformedDocument(reason, line=line_number)
            if current is not None:
                sections.append(current.close())
            current = _OpenSection(heading=marker_text(heading.group(2)), level=level)
            previous_level = level
            continue

        if not line.strip():
            if current is not None:
                current.flush_paragraph()
            continue

        if current is None:
            raise MalformedDocument("content found before the first heading", line=line_number)

        item = classify_list_item(line)
        if item is not None:
            current.flush_paragraph()
            current.blocks.append(item)
        else:
            current.paragraph.append(line)

    if current is None:
        raise MalformedDocument("no heading found")
    sections.append(current.close())

    logger.debug(
        "Parsed notes document",
        extra={"line_count": len(lines), "section_count": len(sections)},
    )
    return NotesDocument(sections=tuple(sections))
