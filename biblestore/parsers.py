"""
Schema parsers: turn each raw source shape into a BibleDocument.

All three parsers share the same rules:
- book names go through booknames.resolve(); unknown books, and later
  names that resolve to a book already seen, are dropped and their raw
  names recorded on BibleDocument.skipped_books
- chapter and verse numbers below 1 are dropped with a warning; a repeated
  number keeps its first occurrence
- verse text goes through sanitize.clean()
- chapters and verses come out sorted by number, whatever the source order
- book display names come from the canonical registry
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Set, Tuple

from .booknames import resolve
from .canon import CanonicalBook
from .errors import MalformedSource
from .formats import SourceFormat, detect
from .model import BibleDocument, BookRecord, ChapterRecord, VerseRecord
from .sanitize import clean
from .util import warn


def _as_int(value: Any, what: str) -> int:
    if isinstance(value, bool):
        raise MalformedSource(f"Expected an integer {what}, got {value!r}")
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise MalformedSource(f"Expected an integer {what}, got {value!r}") from None


def _expect(value: Any, kind: type, what: str) -> Any:
    if not isinstance(value, kind):
        raise MalformedSource(
            f"Expected {what} to be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _make_chapter(
    chapter_number: int, verses: Iterable[Tuple[int, Any]], where: str = ""
) -> ChapterRecord:
    """
    Build a chapter from (verse_number, raw_text) pairs.

    Pairs may arrive in any order; the first occurrence of a verse number wins.
    Verse numbers below 1 are dropped.
    """
    by_number: Dict[int, str] = {}
    for number, raw_text in verses:
        if number < 1:
            warn(f"{where} {chapter_number}: dropped verse number {number}".strip())
            continue
        if number not in by_number:
            by_number[number] = clean(raw_text)
    return ChapterRecord(
        chapter_number=chapter_number,
        verses=tuple(VerseRecord(n, by_number[n]) for n in sorted(by_number)),
    )


def _make_book(canonical: CanonicalBook, chapters: Iterable[ChapterRecord]) -> BookRecord:
    by_number: Dict[int, ChapterRecord] = {}
    for chapter in chapters:
        if chapter.chapter_number < 1:
            warn(f"{canonical.display_name}: dropped chapter number {chapter.chapter_number}")
            continue
        if chapter.chapter_number in by_number:
            warn(f"{canonical.display_name}: ignored repeated chapter {chapter.chapter_number}")
            continue
        by_number[chapter.chapter_number] = chapter
    return BookRecord(
        id=canonical.id,
        display_name=canonical.display_name,
        chapters=tuple(by_number[n] for n in sorted(by_number)),
    )


def _claim(name: Any, seen: Set[str], skipped: List[str]) -> Optional[CanonicalBook]:
    """
    Resolve a source book name, or record it as skipped when it is unknown
    or names a book this document already has.
    """
    canonical = resolve(name)
    if canonical is None or canonical.id in seen:
        skipped.append(str(name))
        return None
    seen.add(canonical.id)
    return canonical


def _finish(version_id: str, books: List[BookRecord], skipped: List[str]) -> BibleDocument:
    if skipped:
        warn(
            f"{version_id}: skipped {len(skipped)} unrecognised or repeated book(s): "
            + ", ".join(repr(s) for s in skipped)
        )
    return BibleDocument(version_id=version_id, books=tuple(books), skipped_books=tuple(skipped))


def parse_array_of_books(raw: List[Any], version_id: str) -> BibleDocument:
    """
    Parse [{abbrev, chapters: [[verse, ...], ...]}, ...].

    Chapter and verse numbers are the 1-based array positions.
    """
    books: List[BookRecord] = []
    skipped: List[str] = []
    seen: Set[str] = set()

    for entry in _expect(raw, list, "the document"):
        _expect(entry, dict, "a book entry")
        name = entry.get("abbrev")
        canonical = _claim(name, seen, skipped)
        if canonical is None:
            continue

        chapters = []
        raw_chapters = _expect(entry.get("chapters"), list, f"chapters of {name!r}")
        for chapter_index, raw_verses in enumerate(raw_chapters, start=1):
            _expect(raw_verses, list, f"{name} chapter {chapter_index}")
            chapters.append(_make_chapter(chapter_index, enumerate(raw_verses, start=1)))

        books.append(_make_book(canonical, chapters))

    return _finish(version_id, books, skipped)


def parse_books_with_chapter_objects(raw: Mapping[str, Any], version_id: str) -> BibleDocument:
    """
    Parse {books: [{name, chapters: [{chapter, verses: [{verse, text}]}]}]}.

    Explicit chapter and verse numbers are kept as given; gaps are allowed.
    """
    books: List[BookRecord] = []
    skipped: List[str] = []
    seen: Set[str] = set()

    for entry in _expect(raw.get("books"), list, "'books'"):
        _expect(entry, dict, "a book entry")
        name = entry.get("name")
        canonical = _claim(name, seen, skipped)
        if canonical is None:
            continue

        chapters = []
        for raw_chapter in _expect(entry.get("chapters"), list, f"chapters of {name!r}"):
            _expect(raw_chapter, dict, f"a chapter of {name!r}")
            chapter_number = _as_int(raw_chapter.get("chapter"), f"chapter number in {name!r}")
            raw_verses = _expect(
                raw_chapter.get("verses"), list, f"{name} chapter {chapter_number} verses"
            )
            pairs = []
            for raw_verse in raw_verses:
                _expect(raw_verse, dict, f"a verse of {name} {chapter_number}")
                number = _as_int(raw_verse.get("verse"), f"verse number in {name} {chapter_number}")
                pairs.append((number, raw_verse.get("text")))
            chapters.append(_make_chapter(chapter_number, pairs, str(name)))

        books.append(_make_book(canonical, chapters))

    return _finish(version_id, books, skipped)


def parse_name_keyed_map(raw: Mapping[str, Any], version_id: str) -> BibleDocument:
    """
    Parse {BookName: {"1": {"1": text, ...}, ...}, ...}.

    Keys carry no reliable enumeration order, so chapters and verses are
    sorted numerically.
    """
    books: List[BookRecord] = []
    skipped: List[str] = []
    seen: Set[str] = set()

    for name, raw_chapters in _expect(raw, dict, "the document").items():
        canonical = _claim(name, seen, skipped)
        if canonical is None:
            continue

        chapters = []
        for chapter_key, raw_verses in _expect(raw_chapters, dict, f"chapters of {name!r}").items():
            chapter_number = _as_int(chapter_key, f"chapter key in {name!r}")
            verses = _expect(raw_verses, dict, f"{name} chapter {chapter_key}")
            pairs = [
                (_as_int(verse_key, f"verse key in {name} {chapter_key}"), text)
                for verse_key, text in verses.items()
            ]
            chapters.append(_make_chapter(chapter_number, pairs, str(name)))

        books.append(_make_book(canonical, chapters))

    return _finish(version_id, books, skipped)


Parser = Callable[[Any, str], BibleDocument]

PARSERS: Dict[SourceFormat, Parser] = {
    SourceFormat.ARRAY_OF_BOOKS: parse_array_of_books,
    SourceFormat.BOOKS_WITH_CHAPTER_OBJECTS: parse_books_with_chapter_objects,
    SourceFormat.NAME_KEYED_MAP: parse_name_keyed_map,
}


def parse_document(raw: Any, version_id: str, fmt: Optional[SourceFormat] = None) -> BibleDocument:
    """
    Detect the source shape (unless fmt is given) and parse it.
    """
    if fmt is None:
        fmt = detect(raw)
    return PARSERS[fmt](raw, version_id)
