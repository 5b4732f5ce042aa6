"""
Bible version catalog.

Each entry describes one translation and names the JSON source file the store
fetches for it. To add a version, append a BibleVersion to BIBLE_VERSIONS with
a unique id and the source file name relative to the configured source base.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import UnknownVersion


@dataclass(frozen=True)
class BibleVersion:
    id: str                      # unique, lowercase, no spaces
    abbreviation: str            # e.g. KJV, BG
    display_name: str
    language_code: str           # ISO 639-1
    language_display_name: str
    description: str
    is_public_domain: bool
    source: str                  # JSON file name under the source base
    year: Optional[int] = None
    copyright_notice: Optional[str] = None


@dataclass(frozen=True)
class LanguageGroup:
    code: str
    display_name: str
    versions: Tuple[BibleVersion, ...]


BIBLE_VERSIONS: Tuple[BibleVersion, ...] = (
    # English
    BibleVersion(
        id="kjv",
        abbreviation="KJV",
        display_name="King James Version",
        language_code="en",
        language_display_name="English",
        description="The authorized King James Version from 1611, a classic English "
        "translation known for its literary beauty.",
        is_public_domain=True,
        source="kjv.json",
        year=1611,
    ),
    BibleVersion(
        id="asv",
        abbreviation="ASV",
        display_name="American Standard Version",
        language_code="en",
        language_display_name="English",
        description="A revision of the KJV completed in 1901, known for its literal accuracy.",
        is_public_domain=True,
        source="asv.json",
        year=1901,
    ),
    BibleVersion(
        id="web",
        abbreviation="WEB",
        display_name="World English Bible",
        language_code="en",
        language_display_name="English",
        description="A modern English translation in the public domain, based on the ASV.",
        is_public_domain=True,
        source="web.json",
        year=2000,
    ),
    # Polish
    BibleVersion(
        id="bg",
        abbreviation="BG",
        display_name="Biblia Gdańska",
        language_code="pl",
        language_display_name="Polski",
        description="Protestanckie tłumaczenie Biblii z 1632 roku, zaktualizowane w 1881. "
        "Klasyczny polski przekład.",
        is_public_domain=True,
        source="bg.json",
        year=1632,
    ),
    BibleVersion(
        id="ubg",
        abbreviation="UBG",
        display_name="Uwspółcześniona Biblia Gdańska",
        language_code="pl",
        language_display_name="Polski",
        description="Uwspółcześniona wersja Biblii Gdańskiej z zachowaniem wierności oryginałowi.",
        is_public_domain=True,
        source="ubg.json",
        year=2017,
    ),
)

DEFAULT_VERSION_ID = "kjv"


class VersionCatalog:
    """
    Lookup over a fixed sequence of versions.

    The module-level helpers below use the default catalog; stores accept any
    catalog so tests and embedders can supply their own entries.
    """

    def __init__(self, versions: Iterable[BibleVersion] = BIBLE_VERSIONS) -> None:
        self._versions: Tuple[BibleVersion, ...] = tuple(versions)
        self._by_id: Dict[str, BibleVersion] = {}
        for version in self._versions:
            if version.id in self._by_id:
                raise ValueError(f"Duplicate Bible version id: {version.id!r}")
            self._by_id[version.id] = version

    def __iter__(self):
        return iter(self._versions)

    def __len__(self) -> int:
        return len(self._versions)

    def __contains__(self, version_id: object) -> bool:
        return version_id in self._by_id

    def get(self, version_id: str) -> Optional[BibleVersion]:
        return self._by_id.get(version_id)

    def resolve(self, version_id: str) -> BibleVersion:
        """Return the version or raise UnknownVersion."""
        version = self._by_id.get(version_id)
        if version is None:
            raise UnknownVersion(version_id)
        return version

    def by_language(self, language_code: str) -> List[BibleVersion]:
        return [v for v in self._versions if v.language_code == language_code]

    def languages(self) -> List[LanguageGroup]:
        """
        Group versions by language, in order of first appearance.
        """
        groups: Dict[str, List[BibleVersion]] = {}
        names: Dict[str, str] = {}
        for version in self._versions:
            groups.setdefault(version.language_code, []).append(version)
            names.setdefault(version.language_code, version.language_display_name)
        return [
            LanguageGroup(code=code, display_name=names[code], versions=tuple(versions))
            for code, versions in groups.items()
        ]


DEFAULT_CATALOG = VersionCatalog()


def get_version(version_id: str) -> Optional[BibleVersion]:
    return DEFAULT_CATALOG.get(version_id)


def is_valid_version_id(version_id: str) -> bool:
    return version_id in DEFAULT_CATALOG


def versions_by_language(language_code: str) -> List[BibleVersion]:
    return DEFAULT_CATALOG.by_language(language_code)


def available_languages() -> List[LanguageGroup]:
    return DEFAULT_CATALOG.languages()
