"""
Structural completeness report for parsed documents.

Parsing is forgiving: unknown books are dropped and missing chapters only
surface as placeholders at read time. check_document() makes those gaps
visible so incomplete sources or synonym-table holes can be spotted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .canon import BOOKS
from .model import BibleDocument
from .util import info, ok, warn


@dataclass(frozen=True)
class DocumentReport:
    version_id: str
    book_count: int
    verse_count: int
    missing_books: Tuple[str, ...]
    chapter_mismatches: Tuple[Tuple[str, int, int], ...]   # (book_id, expected, found)
    empty_chapters: Tuple[Tuple[str, int], ...]            # (book_id, chapter)
    skipped_books: Tuple[str, ...]

    @property
    def is_complete(self) -> bool:
        return not (
            self.missing_books
            or self.chapter_mismatches
            or self.empty_chapters
            or self.skipped_books
        )


def check_document(doc: BibleDocument) -> DocumentReport:
    """
    Compare a parsed document with the canonical registry.
    """
    present = {b.id: b for b in doc.books}
    missing: List[str] = []
    mismatches: List[Tuple[str, int, int]] = []
    empty: List[Tuple[str, int]] = []

    for canonical in BOOKS:
        book = present.get(canonical.id)
        if book is None:
            missing.append(canonical.id)
            continue
        if len(book.chapters) != canonical.chapter_count:
            mismatches.append((canonical.id, canonical.chapter_count, len(book.chapters)))
        for chapter in book.chapters:
            if not chapter.verses:
                empty.append((canonical.id, chapter.chapter_number))

    return DocumentReport(
        version_id=doc.version_id,
        book_count=len(doc.books),
        verse_count=doc.verse_count,
        missing_books=tuple(missing),
        chapter_mismatches=tuple(mismatches),
        empty_chapters=tuple(empty),
        skipped_books=doc.skipped_books,
    )


def print_report(report: DocumentReport) -> None:
    """
    Print a human-readable completeness report.
    """
    info(f"Version: {report.version_id}")
    info(f"Books: {report.book_count}, verses: {report.verse_count}")

    if report.missing_books:
        warn(f"Missing {len(report.missing_books)} book(s): {', '.join(report.missing_books)}")
    for book_id, expected, found in report.chapter_mismatches:
        warn(f"{book_id}: expected {expected} chapter(s), found {found}")
    for book_id, chapter in report.empty_chapters:
        warn(f"{book_id} {chapter}: chapter has no verses")
    if report.skipped_books:
        warn(f"Skipped book names: {', '.join(repr(s) for s in report.skipped_books)}")

    if report.is_complete:
        ok("Document is structurally complete.")
