"""
Source schema detection.

Bible text is distributed in three incompatible JSON shapes:

- ARRAY_OF_BOOKS
    [{"abbrev": "gn", "chapters": [["verse", ...], ...]}, ...]
    Chapter and verse numbers are implied by array position (1-based).

- BOOKS_WITH_CHAPTER_OBJECTS
    {"translation": "...", "books": [{"name": "Genesis", "chapters": [
        {"chapter": 1, "verses": [{"verse": 1, "text": "..."}]}]}]}

- NAME_KEYED_MAP
    {"Genesis": {"1": {"1": "verse", "2": "verse"}, "2": {...}}, ...}

detect() is the only place that looks at the raw shape; everything
downstream dispatches on the returned SourceFormat.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .errors import MalformedSource


class SourceFormat(str, Enum):
    ARRAY_OF_BOOKS = "array-of-books"
    BOOKS_WITH_CHAPTER_OBJECTS = "books-with-chapter-objects"
    NAME_KEYED_MAP = "name-keyed-map"


def detect(raw: Any) -> SourceFormat:
    """
    Classify a decoded JSON document.

    Rules, checked in order:
    1. a list whose first element carries an "abbrev" field
    2. an object whose "books" field is a list
    3. any other object is taken to be the flat name-keyed map

    Raises MalformedSource when the input cannot be the flat map either
    (not an object at all).
    """
    if isinstance(raw, list):
        if raw and isinstance(raw[0], dict) and "abbrev" in raw[0]:
            return SourceFormat.ARRAY_OF_BOOKS
        raise MalformedSource(
            "Top-level JSON array without an 'abbrev' field on its first "
            "element; expected a list of {abbrev, chapters} book objects."
        )

    if isinstance(raw, dict):
        if isinstance(raw.get("books"), list):
            return SourceFormat.BOOKS_WITH_CHAPTER_OBJECTS
        return SourceFormat.NAME_KEYED_MAP

    raise MalformedSource(
        f"Unsupported top-level JSON value of type {type(raw).__name__}; "
        "expected an array of books or an object."
    )
