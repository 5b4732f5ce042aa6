"""
Book-name normalization.

Every supported source spells book names its own way: full English names
("Genesis"), Arabic-numbered books ("1 Samuel"), Roman-numbered books
("I Samuel", used by the book/chapter object format) and two-or-three letter
abbreviations ("gn", "mt", used by the array format).

normalize() maps any of these to a canonical book id. Unknown spellings come
back lower-cased and trimmed; they then fail the registry lookup and the
parser drops the book.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .canon import BOOKS, CanonicalBook, lookup_by_id


# canonical id -> source spellings beyond the id and the display name,
# which are registered automatically from the canon.
VARIANTS: Dict[str, List[str]] = {
    "gen": ["gn"],
    "exo": ["ex"],
    "lev": ["lv"],
    "num": ["nm"],
    "deu": ["dt"],
    "jos": ["js"],
    "jdg": ["jg"],
    "rut": ["rt"],
    "1sa": ["i samuel", "1sm"],
    "2sa": ["ii samuel", "2sm"],
    "1ki": ["i kings", "1kgs"],
    "2ki": ["ii kings", "2kgs"],
    "1ch": ["i chronicles"],
    "2ch": ["ii chronicles"],
    "ezr": ["esr"],
    "neh": ["ne"],
    "est": ["et"],
    "job": ["jb"],
    "psa": ["psalm", "ps"],
    "pro": ["prv"],
    "ecc": ["ec"],
    "sng": ["song of songs", "so"],
    "isa": ["is"],
    "jer": ["jr"],
    "lam": ["lm"],
    "ezk": ["ez"],
    "dan": ["dn"],
    "hos": ["ho"],
    "jol": ["jl"],
    "amo": ["am"],
    "oba": ["ob"],
    "jon": ["jn"],
    "mic": ["mc", "mi"],
    "nam": ["na"],
    "hab": ["hk"],
    "zep": ["zp"],
    "hag": ["hg"],
    "zec": ["zc"],
    "mal": ["ml"],
    "mat": ["mt"],
    "mrk": ["mk"],
    "luk": ["lk"],
    "jhn": ["jo"],
    "act": ["at"],
    "rom": ["rm"],
    "1co": ["i corinthians"],
    "2co": ["ii corinthians"],
    "gal": ["gl"],
    "eph": ["ef"],
    "php": ["ph"],
    "col": ["cl"],
    "1th": ["i thessalonians", "1ts"],
    "2th": ["ii thessalonians", "2ts"],
    "1ti": ["i timothy", "1tm"],
    "2ti": ["ii timothy", "2tm"],
    "tit": ["tt"],
    "phm": ["fm"],
    "heb": ["hb"],
    "jas": ["jm"],
    "1pe": ["i peter"],
    "2pe": ["ii peter"],
    "1jn": ["i john", "1jo"],
    "2jn": ["ii john", "2jo"],
    "3jn": ["iii john", "3jo"],
    "jud": ["jd"],
    "rev": ["re", "rv", "revelation of john"],
}


def _build_synonyms() -> Mapping[str, str]:
    """
    Build the lower-case spelling -> canonical id table.

    Keys include:
    - canonical id (gen)
    - display name (genesis)
    - every entry of VARIANTS
    """
    table: Dict[str, str] = {}
    for book in BOOKS:
        table[book.id] = book.id
        table[book.display_name.lower()] = book.id
        for variant in VARIANTS.get(book.id, []):
            if variant in table and table[variant] != book.id:
                raise ValueError(
                    f"Book spelling {variant!r} claimed by both "
                    f"{table[variant]!r} and {book.id!r}"
                )
            table[variant] = book.id
    return MappingProxyType(table)


SYNONYMS: Mapping[str, str] = _build_synonyms()


def normalize(raw_name: str) -> str:
    """
    Map a source-specific book name to a candidate canonical id.

    The result is only a candidate: spellings missing from the table are
    returned lower-cased and trimmed, and will not resolve in the registry.
    """
    key = raw_name.strip().lower()
    return SYNONYMS.get(key, key)


def resolve(raw_name: str) -> Optional[CanonicalBook]:
    """Normalize a raw name and look it up in the canonical registry."""
    if not isinstance(raw_name, str):
        return None
    return lookup_by_id(normalize(raw_name))
