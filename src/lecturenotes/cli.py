"""Command line interface for checking and normalizing lecture notes."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from pathlib import Path

from lecturenotes.exceptions import LectureNotesError
from lecturenotes.formatter import format_notes
from lecturenotes.loader import load_corpus, load_document, read_notes
from lecturenotes.parser import parse
from lecturenotes.renderer import render
from lecturenotes.schemas import IssueKind, ListItem, NotesDocument
from lecturenotes.sections import filter_sections
from lecturenotes.utils.logging_config import configure_logging, get_logger
from lecturenotes.validator import validate

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lecturenotes", description="Check and normalize lecture notes.")
    parser.add_argument("--log-level", default=None, help="Logging level (default from LECTURENOTES_LOG_LEVEL)")
    commands = parser.add_subparsers(dest="command", required=True)

    check = commands.add_parser("check", help="Parse and validate notes files or directories")
    check.add_argument("paths", nargs="+", type=Path)
    check.add_argument(
        "--select",
        action="append",
        choices=[kind.value for kind in IssueKind],
        help="Only report this issue kind (repeatable)",
    )

    render_cmd = commands.add_parser("render", help="Normalize one notes file")
    render_cmd.add_argument("path", type=Path)
    render_cmd.add_argument("-o", "--output", type=Path, help="Write here instead of stdout")

    outline = commands.add_parser("outline", help="Print the section tree")
    outline.add_argument("path", type=Path)

    summary = commands.add_parser("summary", help="Print summary, tree and content")
    summary.add_argument("path", type=Path)
    summary.add_argument("--no-toc", action="store_true", help="Leave out the table of contents")
    summary.add_argument("--include", action="append", default=[], help="Keep only these sections")
    summary.add_argument("--exclude", action="append", default=[], help="Drop these sections")

    stats = commands.add_parser("stats", help="Count headings and blocks across notes")
    stats.add_argument("paths", nargs="+", type=Path)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    handlers = {
        "check": _cmd_check,
        "render": _cmd_render,
        "outline": _cmd_outline,
        "summary": _cmd_summary,
        "stats": _cmd_stats,
    }
    try:
        return handlers[args.command](args)
    except LectureNotesError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR


def _cmd_check(args: argparse.Namespace) -> int:
    status = EXIT_OK
    for loaded in load_corpus(args.paths):
        if loaded.document is None:
            print(f"{loaded.path}: error: {loaded.error}")
            status = EXIT_ERROR
            continue
        for issue in validate(loaded.document, kinds=args.select):
            print(f"{loaded.path}: {issue.kind.value}: {issue.message} (section {issue.heading.strip()!r})")
            status = max(status, EXIT_ISSUES)
    return status


def _cmd_render(args: argparse.Namespace) -> int:
    text = render(parse(read_notes(args.path)))
    if args.output:
        args.output.write_text(text, encoding="utf-8")
        logger.info("Wrote normalized notes", extra={"path": str(args.output)})
    else:
        sys.stdout.write(text)
    return EXIT_OK


def _cmd_outline(args: argparse.Namespace) -> int:
    print(format_notes(load_document(args.path)).sections_tree)
    return EXIT_OK


def _cmd_summary(args: argparse.Namespace) -> int:
    doc = load_document(args.path)
    if args.include:
        doc = filter_sections(doc, mode="include", selected=args.include)
    if args.exclude:
        doc = filter_sections(doc, mode="exclude", selected=args.exclude)
    digest = format_notes(doc, source=str(args.path), include_toc=not args.no_toc)
    print(digest.summary)
    print()
    print(digest.sections_tree)
    print()
    print(digest.content)
    return EXIT_OK


def collect_stats(documents: list[NotesDocument]) -> tuple[Counter, Counter, Counter]:
    levels: Counter = Counter()
    blocks: Counter = Counter()
    issues: Counter = Counter()
    for doc in documents:
        for section in doc.sections:
            levels[f"h{section.level}"] += 1
            for block in section.blocks:
                if isinstance(block, ListItem):
                    blocks["bullet item" if block.bullet else "ordered item"] += 1
                else:
                    blocks["paragraph"] += 1
        for issue in validate(doc):
            issues[issue.kind.value] += 1
    return levels, blocks, issues


def _cmd_stats(args: argparse.Namespace) -> int:
    loaded = load_corpus(args.paths)
    documents = [item.document for item in loaded if item.document is not None]
    levels, blocks, issues = collect_stats(documents)

    print(f"Files: {len(loaded)} ({len(loaded) - len(documents)} failed)")
    for title, counter in (("Headings", levels), ("Blocks", blocks), ("Issues", issues)):
        print(f"\n{title}:")
        for name, count in sorted(counter.items()):
            print(f"{name}: {count}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
