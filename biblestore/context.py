"""
Context windows around a single verse.

Public API:

- get_verse_window(store, ref, version_id, before=2, after=2) -> List[PassageVerse]
"""

from __future__ import annotations

from typing import List

from .search import PassageVerse, parse_reference
from .util import info, warn


async def get_verse_window(
    store,
    ref: str,
    version_id: str,
    before: int = 2,
    after: int = 2,
) -> List[PassageVerse]:
    """
    Fetch a window of verses around a reference.

    Example:
        await get_verse_window(store, "John 3:16", "kjv", before=2, after=2)

    The window is positional: it counts verses present in the chapter, so a
    version that omits a verse still returns before + 1 + after rows where
    the chapter is long enough.
    """
    info(
        f"=== CONTEXT WINDOW === ref={ref!r}, version={version_id!r}, "
        f"before={before}, after={after}"
    )

    parsed = parse_reference(ref)
    if parsed is None:
        return []
    book_id, chapter, center_verse, _ = parsed

    document = await store.load_document(version_id)
    book = document.find_book(book_id)
    record = book.find_chapter(chapter) if book is not None else None
    if record is None:
        warn(f"{ref!r} is not present in {version_id}.")
        return []

    numbers = [v.verse_number for v in record.verses]
    if center_verse not in numbers:
        warn(f"Verse {center_verse} not found in {book.display_name} {chapter} ({version_id}).")
        return []

    idx = numbers.index(center_verse)
    window = record.verses[max(0, idx - before) : idx + after + 1]

    info(f"Context window returned {len(window)} verse(s).")
    return [
        PassageVerse(version_id, book.id, book.display_name, chapter, v.verse_number, v.text)
        for v in window
    ]
