"""Serialize a NotesDocument back to notes text."""

from __future__ import annotations

from typing import Sequence

from lecturenotes.markers import with_marker
from lecturenotes.schemas import Block, ListItem, NotesDocument, Section


def render(doc: NotesDocument) -> str:
    """Render ``doc`` in the form accepted by ``parse``.

    Sections are separated by a blank line, a section's first block follows its
    heading directly, consecutive list items share a line break and every other
    pair of blocks is separated by a blank line. The result ends with exactly
    one newline.
    """
    return "\n\n".join(render_section(section) for section in doc.sections) + "\n"


def render_heading(section: Section) -> str:
    return with_marker("#" * section.level, section.heading)


def render_section(section: Section) -> str:
    parts = [render_heading(section)]
    body = _render_blocks(section.blocks)
    if body:
        parts.append(body)
    return "\n".join(parts)


def _render_blocks(blocks: Sequence[Block]) -> str:
    chunks: list[str] = []
    ordinal = 0
    previous: Block | None = None
    for block in blocks:
        if isinstance(block, ListItem):
            ordinal = ordinal + 1 if _continues_ordered_run(previous) else 1
            line = _render_list_item(block, ordinal)
            if isinstance(previous, ListItem):
                chunks[-1] = chunks[-1] + "\n" + line
            else:
                chunks.append(line)
        else:
            chunks.append(block.text)
        previous = block
    return "\n\n".join(chunks)


def _continues_ordered_run(previous: Block | None) -> bool:
    return isinstance(previous, ListItem) and not previous.bullet


def _render_list_item(item: ListItem, ordinal: int) -> str:
    return with_marker("-" if item.bullet else f"{ordinal}.", item.text)
