"""
Data model definitions for biblestore.

Every parsed structure is immutable; parsers always build fresh objects.

- VerseRecord   : one verse (number + cleaned text)
- ChapterRecord : ordered verses of one chapter
- BookRecord    : ordered chapters of one canonical book
- BibleDocument : ordered books of one version
- VerseRef      : a normalized reference (book_id, chapter, verse)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class VerseRecord:
    verse_number: int
    text: str


@dataclass(frozen=True)
class ChapterRecord:
    chapter_number: int
    verses: Tuple[VerseRecord, ...]

    def texts(self) -> List[str]:
        """Verse texts in verse-number order."""
        return [v.text for v in self.verses]


@dataclass(frozen=True)
class BookRecord:
    """
    One book of a parsed document.

    id always matches a CanonicalBook.id; books that do not resolve are
    dropped by the parsers before a BookRecord is ever built.
    """
    id: str
    display_name: str
    chapters: Tuple[ChapterRecord, ...]

    def find_chapter(self, chapter_number: int) -> Optional[ChapterRecord]:
        for chapter in self.chapters:
            if chapter.chapter_number == chapter_number:
                return chapter
        return None


@dataclass(frozen=True)
class BibleDocument:
    """
    A fully parsed Bible version.

    skipped_books lists the raw book names the parser could not resolve to a
    canonical book, in source order. It is diagnostic only.
    """
    version_id: str
    books: Tuple[BookRecord, ...]
    skipped_books: Tuple[str, ...] = ()

    def find_book(self, book_id: str) -> Optional[BookRecord]:
        for book in self.books:
            if book.id == book_id:
                return book
        return None

    @property
    def verse_count(self) -> int:
        return sum(len(c.verses) for b in self.books for c in b.chapters)


@dataclass(frozen=True)
class VerseRef:
    """
    A normalized reference to a single verse.

    book_id: canonical book id (e.g. 'gen')
    chapter: 1..N
    verse  : 1..N
    """
    book_id: str
    chapter: int
    verse: int

    def to_normalized(self) -> str:
        """
        Compute the normalized reference string (e.g. 'GEN.1.1').
        """
        return f"{self.book_id.upper()}.{self.chapter}.{self.verse}"
