"""
Canonical book registry: the 66 books of the Protestant canon.

The table is bundled as data/canon.json and loaded once at import. Lookups
never raise; an unknown id simply yields None and callers treat the book as
ignorable.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from .paths import CANON_PATH


class Testament(str, Enum):
    OLD = "old"
    NEW = "new"


@dataclass(frozen=True)
class CanonicalBook:
    id: str
    display_name: str
    abbreviation: str
    chapter_count: int
    testament: Testament


def load_canon(path: Path = CANON_PATH) -> Tuple[CanonicalBook, ...]:
    """
    Load the 66-book canon definition from canon.json.

    Returns
    -------
    tuple:
        CanonicalBook entries ordered by book_num.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    entries = sorted(data, key=lambda e: int(e["book_num"]))
    return tuple(
        CanonicalBook(
            id=entry["id"],
            display_name=entry["name"],
            abbreviation=entry["abbrev"],
            chapter_count=int(entry["chapters"]),
            testament=Testament(entry["testament"]),
        )
        for entry in entries
    )


BOOKS: Tuple[CanonicalBook, ...] = load_canon()

BY_ID: Mapping[str, CanonicalBook] = MappingProxyType({b.id: b for b in BOOKS})


def lookup_by_id(book_id: str) -> Optional[CanonicalBook]:
    return BY_ID.get(book_id)


def book_ids() -> List[str]:
    return [b.id for b in BOOKS]


def old_testament_books() -> List[CanonicalBook]:
    return [b for b in BOOKS if b.testament is Testament.OLD]


def new_testament_books() -> List[CanonicalBook]:
    return [b for b in BOOKS if b.testament is Testament.NEW]
