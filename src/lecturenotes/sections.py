"""Section filtering and utilities."""

from __future__ import annotations

import re
from typing import Iterable, Literal

from lecturenotes.schemas import NotesDocument, SectionNode


def normalize_section_title(title: str) -> str:
    """Normalize section titles for comparison."""
    title = title.strip().lower()
    title = re.sub(r"^(?:\d+[.\d]*|[a-z]\.)\s+", "", title)
    return re.sub(r"\s+", " ", title)


def filter_sections(
    doc: NotesDocument,
    *,
    mode: Literal["include", "exclude"] = "exclude",
    selected: Iterable[str] | None = None,
) -> NotesDocument:
    """Filter sections by heading using include or exclude mode.

    A section carries its subsections with it. In include mode the ancestors
    of every selected section are kept as well so heading levels never skip.
    The title section is always kept.
    """
    selected_titles = {normalize_section_title(title) for title in (selected or []) if title.strip()}
    if not selected_titles:
        return doc

    sections = doc.sections
    is_selected = [normalize_section_title(section.heading) in selected_titles for section in sections]

    keep: set[int] = {0}
    if mode == "include":
        stack: list[int] = []
        for index, section in enumerate(sections):
            while stack and sections[stack[-1]].level >= section.level:
                stack.pop()
            if is_selected[index] or any(is_selected[i] for i in stack):
                keep.add(index)
                keep.update(stack)
            stack.append(index)
    else:
        dropped_level: int | None = None
        for index, section in enumerate(sections[1:], start=1):
            if dropped_level is not None and section.level > dropped_level:
                continue
            dropped_level = None
            if is_selected[index]:
                dropped_level = section.level
                continue
            keep.add(index)

    return NotesDocument(sections=tuple(section for index, section in enumerate(sections) if index in keep))


def build_section_tree(doc: NotesDocument) -> list[SectionNode]:
    """Nest the flat section sequence into a tree by heading level."""
    roots: list[SectionNode] = []
    stack: list[SectionNode] = []
    for section in doc.sections:
        node = SectionNode(heading=section.heading, level=section.level, block_count=len(section.blocks))
        while stack and stack[-1].level >= node.level:
            stack.pop()
        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)
        stack.append(node)
    return roots
