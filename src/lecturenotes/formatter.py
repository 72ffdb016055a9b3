"""Format notes documents into summary, tree, and content outputs."""

from __future__ import annotations

from typing import Iterable, Iterator

from lecturenotes.renderer import render
from lecturenotes.schemas import NotesDigest, NotesDocument, SectionNode
from lecturenotes.sections import build_section_tree
from lecturenotes.validator import validate


def format_notes(
    doc: NotesDocument,
    *,
    source: str | None = None,
    include_toc: bool = True,
) -> NotesDigest:
    """Create summary, section tree, and content."""
    outline = list(walk_sections(build_section_tree(doc)))
    tree = "\n".join(["Sections:"] + [" " * (4 * depth) + node.heading.strip() for depth, node in outline])

    content_blocks: list[str] = []
    if include_toc:
        toc = ["  " * depth + "- " + node.heading.strip() for depth, node in outline]
        content_blocks.append("\n".join(["## Contents"] + toc))
    content_blocks.append(render(doc).rstrip("\n"))

    summary_lines = [f"Title: {doc.title}"]
    if source:
        summary_lines.append(f"Source: {source}")
    summary_lines += [
        f"Sections: {len(outline)}",
        f"Blocks: {sum(node.block_count for _, node in outline)}",
        f"Issues: {sum(1 for _ in validate(doc))}",
    ]

    return NotesDigest(summary="\n".join(summary_lines), sections_tree=tree, content="\n\n".join(content_blocks))


def walk_sections(nodes: Iterable[SectionNode], depth: int = 0) -> Iterator[tuple[int, SectionNode]]:
    """Yield ``(depth, node)`` pairs in document order."""
    for node in nodes:
        yield depth, node
        yield from walk_sections(node.children, depth + 1)


def count_sections(nodes: Iterable[SectionNode]) -> int:
    """Count total sections in the tree."""
    return sum(1 for _ in walk_sections(nodes))
