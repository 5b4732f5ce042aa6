"""
Exceptions raised by biblestore.

A missing book or chapter inside a loaded document is not an error: the store
answers with placeholder text instead (see BibleStore.load_chapter_verses).
"""


class BibleStoreError(Exception):
    """Base class for every error raised by this package."""


class UnknownVersion(BibleStoreError, KeyError):
    """The requested version id is not in the version catalog."""

    def __init__(self, version_id: str) -> None:
        super().__init__(version_id)
        self.version_id = version_id

    def __str__(self) -> str:
        return f"Unknown Bible version: {self.version_id!r}"


class SourceFetchFailure(BibleStoreError):
    """The raw source could not be retrieved or decoded. Callers may retry."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Failed to load Bible data from {source}: {reason}")
        self.source = source
        self.reason = reason


class MalformedSource(BibleStoreError, ValueError):
    """The source decoded as JSON but matches none of the supported shapes."""


class SearchReplyError(BibleStoreError, ValueError):
    """A search reply from the language model could not be decoded."""


VersionNotFound = UnknownVersion
SourceUnavailable = SourceFetchFailure
