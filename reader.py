#!/usr/bin/env python
"""
reader.py – command-line front end for biblestore

Commands:

  python reader.py versions
      List catalog versions grouped by language

  python reader.py books [--testament old|new]
      List the canonical books

  python reader.py read kjv gen 1
      Print the verses of one chapter

  python reader.py passage "John 3:16-18" kjv
      Print a passage by reference

  python reader.py context "John 3:16" kjv --before 2 --after 2
      Print a window of verses around a reference

  python reader.py compare "John 3:16" kjv asv web
      Print a reference side by side across versions

  python reader.py detect path/to/bible.json
      Report which source schema a JSON file uses

  python reader.py check kjv
      Load a version and report missing books or chapters

Use --source-base URL_OR_DIR to read sources from somewhere other than the
configured default (BIBLESTORE_SOURCE_BASE, else data/bibles/ in a checkout,
which is created on first use).
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from biblestore import config, paths
from biblestore.canon import BOOKS, Testament
from biblestore.context import get_verse_window
from biblestore.errors import BibleStoreError
from biblestore.fetch import SourceFetcher
from biblestore.formats import detect
from biblestore.parallel import get_parallel_verses, print_parallel
from biblestore.parsers import parse_document
from biblestore.search import get_passage, print_passage
from biblestore.status import check_document, print_report
from biblestore.store import BibleStore
from biblestore.util import info, warn
from biblestore.versions import DEFAULT_CATALOG, DEFAULT_VERSION_ID


def _store(args: argparse.Namespace) -> BibleStore:
    base = args.source_base or config.SOURCE_BASE
    if base == str(paths.BIBLES_DIR):
        try:
            paths.ensure_basic_dirs()
        except OSError as e:
            warn(f"Could not create {paths.BIBLES_DIR} ({e}); set BIBLESTORE_SOURCE_BASE.")
    return BibleStore(fetcher=SourceFetcher(base=base))


# ---------- Command handlers ----------


def cmd_versions(args: argparse.Namespace) -> None:
    """
    List available versions, grouped by language.
    """
    for group in DEFAULT_CATALOG.languages():
        info(f"{group.display_name} ({group.code}):")
        for v in group.versions:
            marker = " (default)" if v.id == DEFAULT_VERSION_ID else ""
            year = f", {v.year}" if v.year else ""
            print(f"  - {v.id:<5} {v.abbreviation:<5} {v.display_name}{year}{marker}")


def cmd_books(args: argparse.Namespace) -> None:
    """
    List canonical books, optionally for one testament.
    """
    for book in BOOKS:
        if args.testament and book.testament is not Testament(args.testament):
            continue
        print(f"  {book.id:<4} {book.display_name:<18} {book.chapter_count:>3} chapter(s)")


def cmd_read(args: argparse.Namespace) -> None:
    """
    Print one chapter.
    """
    verses = _store(args).get_verses(args.version, args.book.lower(), args.chapter)
    for number, text in enumerate(verses, start=1):
        print(f"{number:>3}  {text}")


def cmd_passage(args: argparse.Namespace) -> None:
    """
    Extract a passage by reference.
    """
    rows = asyncio.run(get_passage(_store(args), args.ref, args.version))
    print_passage(rows)


def cmd_context(args: argparse.Namespace) -> None:
    """
    Fetch a window of verses around a central reference.
    """
    rows = asyncio.run(
        get_verse_window(_store(args), args.ref, args.version, before=args.before, after=args.after)
    )
    print_passage(rows)


def cmd_compare(args: argparse.Namespace) -> None:
    """
    Console-side parallel comparison of versions for a reference.
    """
    rows = asyncio.run(get_parallel_verses(_store(args), args.ref, args.versions))
    print_parallel(args.versions, rows)


def cmd_detect(args: argparse.Namespace) -> None:
    """
    Detect the schema of a local JSON file and report what it parses to.
    """
    path = Path(args.file)
    if not path.exists():
        warn(f"File not found: {path}")
        return
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as e:
        warn(f"{path} is not valid JSON: {e}")
        return
    fmt = detect(raw)
    info(f"{path.name}: {fmt.value}")
    doc = parse_document(raw, path.stem, fmt)
    print_report(check_document(doc))


def cmd_check(args: argparse.Namespace) -> None:
    """
    Load a catalog version and print its completeness report.
    """
    doc = asyncio.run(_store(args).load_document(args.version))
    print_report(check_document(doc))


# ---------- Parser setup ----------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reader",
        description=f"{config.APP_NAME} CLI (v{config.__version__})",
    )
    parser.add_argument(
        "--source-base",
        type=str,
        default=None,
        help=f"URL or directory holding the version JSON files (default: {config.SOURCE_BASE})",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_versions = sub.add_parser("versions", help="List available Bible versions")
    p_versions.set_defaults(func=cmd_versions)

    p_books = sub.add_parser("books", help="List the canonical books")
    p_books.add_argument(
        "--testament",
        choices=[t.value for t in Testament],
        default=None,
        help="Only list books of one testament",
    )
    p_books.set_defaults(func=cmd_books)

    p_read = sub.add_parser("read", help="Print the verses of one chapter")
    p_read.add_argument("version", type=str, help="Version id (e.g., kjv, asv, bg)")
    p_read.add_argument("book", type=str, help="Canonical book id (e.g., gen, jhn)")
    p_read.add_argument("chapter", type=int, help="Chapter number")
    p_read.set_defaults(func=cmd_read)

    p_passage = sub.add_parser("passage", help="Fetch a passage by reference (e.g. 'John 3:16-18')")
    p_passage.add_argument("ref", type=str, help="Reference string, e.g. 'John 3:16-18', 'Gen 1:1'")
    p_passage.add_argument("version", type=str, help="Version id (e.g., kjv)")
    p_passage.set_defaults(func=cmd_passage)

    p_context = sub.add_parser("context", help="Fetch a window of verses around a reference")
    p_context.add_argument("ref", type=str, help="Central reference, e.g. 'John 3:16'")
    p_context.add_argument("version", type=str, help="Version id (e.g., kjv)")
    p_context.add_argument(
        "--before",
        type=int,
        default=2,
        help="How many verses before the center to include (default: 2)",
    )
    p_context.add_argument(
        "--after",
        type=int,
        default=2,
        help="How many verses after the center to include (default: 2)",
    )
    p_context.set_defaults(func=cmd_context)

    p_compare = sub.add_parser("compare", help="Compare a reference across versions")
    p_compare.add_argument("ref", type=str, help="Reference string, e.g. 'John 3:16'")
    p_compare.add_argument("versions", nargs="+", help="Version ids, e.g. kjv asv web")
    p_compare.set_defaults(func=cmd_compare)

    p_detect = sub.add_parser("detect", help="Detect the schema of a local JSON source file")
    p_detect.add_argument("file", type=str, help="Path to the JSON file")
    p_detect.set_defaults(func=cmd_detect)

    p_check = sub.add_parser("check", help="Report missing books/chapters for a version")
    p_check.add_argument("version", type=str, help="Version id (e.g., kjv)")
    p_check.set_defaults(func=cmd_check)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except BibleStoreError as e:
        warn(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
