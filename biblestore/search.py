"""
References, passages and search-hit validation.

This module provides:

- parse_reference(ref)
    Parse "John 3:16-18", "Gen 1:1" or "I Samuel 3:4" into canonical parts

- get_passage(store, ref, version_id)
    Extract the verses of a reference from a BibleStore

- parse_model_reply(content) / validate_hits(raw_hits)
    Decode the verse candidates returned by the language-model search and
    keep only the ones that resolve against the canonical registry

- print_passage(rows)
    Pretty-print passage rows to the console
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Set, Tuple

from .booknames import resolve
from .canon import lookup_by_id
from .errors import SearchReplyError
from .model import VerseRef
from .util import info, warn

MAX_HITS = 5


@dataclass(frozen=True)
class PassageVerse:
    version_id: str
    book_id: str
    book_name: str
    chapter: int
    verse: int
    text: str

    @property
    def ref(self) -> VerseRef:
        return VerseRef(self.book_id, self.chapter, self.verse)


@dataclass(frozen=True)
class SearchHit:
    book_id: str
    book_name: str
    chapter: int
    verse: int
    confidence: int

    @property
    def ref(self) -> VerseRef:
        return VerseRef(self.book_id, self.chapter, self.verse)


def parse_reference(ref: str) -> Optional[Tuple[str, int, int, int]]:
    """
    Parse a reference string like 'John 3:16-18' or 'Gen 1:1'.

    A bare chapter ('Psalm 23') selects the whole chapter, returned with
    verse_end = 0.

    Returns
    -------
    (book_id, chapter, verse_start, verse_end) or None on failure.
    """
    s = ref.strip()
    if not s:
        warn("Empty reference string.")
        return None

    try:
        space_idx = s.rindex(" ")
    except ValueError:
        warn(f"Could not split book and chapter/verse from reference: {ref!r}")
        return None

    book_str = s[:space_idx].strip()
    cv_str = s[space_idx + 1 :].strip()

    book = resolve(book_str)
    if book is None:
        warn(f"Could not resolve book name {book_str!r}.")
        return None

    chap_str, _, verse_part = cv_str.partition(":")
    try:
        chapter = int(chap_str)
    except ValueError:
        warn(f"Non-integer chapter in reference: {ref!r}")
        return None

    verse_part = verse_part.strip()
    if not verse_part:
        return book.id, chapter, 1, 0

    start_str, _, end_str = verse_part.partition("-")
    try:
        v_start = int(start_str.strip())
        v_end = int(end_str.strip()) if end_str else v_start
    except ValueError:
        warn(f"Invalid verse range in reference: {ref!r}")
        return None

    if v_start < 1 or v_end < v_start:
        warn(f"Invalid verse range in reference: {ref!r}")
        return None

    return book.id, chapter, v_start, v_end


async def get_passage(store, ref: str, version_id: str) -> List[PassageVerse]:
    """
    Fetch a passage like 'John 3:16-18' from a BibleStore.

    Verses are addressed by their number in the source, so gaps in a
    version's numbering simply leave the passage shorter.
    """
    info(f"=== PASSAGE === ref={ref!r}, version={version_id!r}")

    parsed = parse_reference(ref)
    if parsed is None:
        return []
    book_id, chapter, v_start, v_end = parsed

    document = await store.load_document(version_id)
    book = document.find_book(book_id)
    if book is None:
        warn(f"Book {book_id!r} is not present in {version_id}.")
        return []
    record = book.find_chapter(chapter)
    if record is None:
        warn(f"Chapter {chapter} not found in {book.display_name} ({version_id}).")
        return []

    rows = [
        PassageVerse(version_id, book.id, book.display_name, chapter, v.verse_number, v.text)
        for v in record.verses
        if v.verse_number >= v_start and (v_end == 0 or v.verse_number <= v_end)
    ]
    info(f"Passage returned {len(rows)} verse(s).")
    return rows


def print_passage(rows: List[PassageVerse]) -> None:
    """
    Pretty-print passage rows to the console.
    """
    if not rows:
        info("No results.")
        return

    for row in rows:
        print(f"[{row.version_id.upper()}] {row.book_name} {row.chapter}:{row.verse}")
        print(f"    {row.text}")
        print()


def parse_model_reply(content: str) -> List[Any]:
    """
    Decode the JSON array a language model answered with.

    Models sometimes wrap the array in a Markdown code fence; the fence is
    stripped before decoding.
    """
    text = (content or "").strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.rstrip().endswith("```"):
            text = text.rstrip()[:-3]
        text = text.strip()
        if text.lower().startswith("json"):
            text = text[4:].strip()

    try:
        data = json.loads(text)
    except ValueError as e:
        raise SearchReplyError(f"Failed to parse search results: {e}") from e

    if not isinstance(data, list):
        raise SearchReplyError(
            f"Expected a JSON array of search results, got {type(data).__name__}"
        )
    return data


def _int_or_none(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def validate_hits(raw_hits: Iterable[Any], limit: int = MAX_HITS) -> List[SearchHit]:
    """
    Keep the candidates that point at a real verse slot.

    A hit survives when its bookId is a canonical id, its chapter lies within
    the book's chapter count and its verse is positive. Confidence is clamped
    to 0-100; results are ordered by confidence, highest first. A verse named
    more than once keeps its highest-confidence hit.
    """
    hits: List[SearchHit] = []
    for raw in raw_hits:
        if not isinstance(raw, dict):
            continue
        book = lookup_by_id(str(raw.get("bookId", "")))
        chapter = _int_or_none(raw.get("chapter"))
        verse = _int_or_none(raw.get("verse"))
        if book is None or chapter is None or verse is None:
            continue
        if not (0 < chapter <= book.chapter_count) or verse <= 0:
            continue
        confidence = _int_or_none(raw.get("confidence")) or 0
        hits.append(
            SearchHit(
                book_id=book.id,
                book_name=book.display_name,
                chapter=chapter,
                verse=verse,
                confidence=max(0, min(100, confidence)),
            )
        )

    hits.sort(key=lambda h: h.confidence, reverse=True)
    seen: Set[VerseRef] = set()
    unique: List[SearchHit] = []
    for hit in hits:
        if hit.ref not in seen:
            seen.add(hit.ref)
            unique.append(hit)
    unique = unique[:limit]
    if unique:
        info("Search hits: " + ", ".join(h.ref.to_normalized() for h in unique))
    return unique
