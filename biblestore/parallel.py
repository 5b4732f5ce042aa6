"""
Parallel translation view.

Given a reference like "John 3:16" (or "John 3:16-18"), return the same
verse(s) across several versions in one structure. The versions load
concurrently through the store, so a cold comparison costs one fetch per
version rather than one after another.

Public API:

- get_parallel_verses(store, ref, version_ids) -> List[ParallelRow]
- print_parallel(version_ids, rows)
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Dict, List

from .canon import lookup_by_id
from .model import VerseRef
from .search import get_passage, parse_reference
from .util import info, warn


@dataclass
class ParallelRow:
    book_id: str
    chapter: int
    verse: int
    texts: Dict[str, str] = field(default_factory=dict)  # version_id -> text


async def get_parallel_verses(store, ref: str, version_ids: List[str]) -> List[ParallelRow]:
    """
    Fetch verses for a reference across multiple versions.

    Returns one ParallelRow per verse number found in any version, ordered
    by verse. Versions lacking a verse simply have no entry in texts.
    """
    version_ids = [v.lower() for v in version_ids]
    info(f"=== PARALLEL === ref={ref!r}, versions={version_ids!r}")

    if not version_ids:
        warn("No version ids provided; nothing to do.")
        return []

    if parse_reference(ref) is None:
        return []

    passages = await asyncio.gather(*(get_passage(store, ref, v) for v in version_ids))

    verse_map: Dict[VerseRef, ParallelRow] = {}
    for version_id, rows in zip(version_ids, passages):
        for row in rows:
            entry = verse_map.setdefault(row.ref, ParallelRow(row.book_id, row.chapter, row.verse))
            entry.texts[version_id] = row.text

    if not verse_map:
        warn("No verses found for the requested reference in the given versions.")
        return []

    return [verse_map[r] for r in sorted(verse_map, key=lambda r: r.verse)]


def print_parallel(version_ids: List[str], rows: List[ParallelRow]) -> None:
    """
    Pretty-print parallel rows to the console.

    Output format:

        John 3:16
          [KJV] For God so loved...
          [ASV] For God so loved...

    One block per verse.
    """
    if not rows:
        warn("No parallel rows to display.")
        return

    book = lookup_by_id(rows[0].book_id)
    book_name = book.display_name if book else rows[0].book_id

    for row in rows:
        print(f"{book_name} {row.chapter}:{row.verse}")
        for version_id in version_ids:
            text = row.texts.get(version_id.lower(), "(missing in this version)")
            print(f"  [{version_id.upper()}] {text}")
        print()
