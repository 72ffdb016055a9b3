"""Line-level syntax shared by the parser, the renderer and the model checks."""

from __future__ import annotations

import re

HEADING_RE = re.compile(r"^(#{1,6})([ \t].*)?$")
BULLET_RE = re.compile(r"^\s*[-*+]([ \t].*)?$")
ORDERED_RE = re.compile(r"^\s*\d{1,9}[.)]([ \t].*)?$")

_BLANKS = " \t"


def marker_text(rest: str | None) -> str:
    """Text that follows a heading or list marker.

    ``rest`` starts with the separating blank. Blank remainders are kept
    verbatim so trailing whitespace stays visible to validation.
    """
    if not rest:
        return ""
    if not rest.strip(_BLANKS):
        return rest
    return rest.lstrip(_BLANKS)


def with_marker(marker: str, text: str) -> str:
    """Inverse of ``marker_text``."""
    if not text or not text.strip(_BLANKS):
        return marker + text
    return f"{marker} {text}"


def is_structural_line(line: str) -> bool:
    """True for lines the parser reads as a heading or list item."""
    return bool(HEADING_RE.match(line) or BULLET_RE.match(line) or ORDERED_RE.match(line))


def check_marker_text(text: str) -> str:
    """Reject text that would not survive ``with_marker`` followed by ``marker_text``."""
    if text.splitlines() not in ([], [text]):
        raise ValueError("text must be a single line")
    if text and not text.strip(_BLANKS):
        return text
    if text[:1] in (" ", "\t"):
        raise ValueError("text must not start with a space or tab")
    return text


def check_paragraph_text(text: str) -> str:
    """Reject paragraph text that would parse back as something else."""
    lines = text.split("\n")
    if text.splitlines() != lines:
        raise ValueError("paragraph lines must be separated by '\\n' only")
    for line in lines:
        if not line.strip():
            raise ValueError("paragraph lines must not be blank")
        if is_structural_line(line):
            raise ValueError(f"paragraph line {line!r} reads as a heading or list item")
    return text
