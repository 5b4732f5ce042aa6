"""
biblestore - Bible data ingestion and verse lookup

This package contains:
- config: Project configuration and versioning
- paths: Path management and directory setup
- util: Console output helpers
- canon: Canonical 66-book registry
- booknames: Book-name normalization
- formats / parsers / sanitize: Source detection, parsing and text cleanup
- versions: Bible version catalog
- fetch: Source retrieval (HTTP or local files)
- store: Cached async verse lookup
- search / context / parallel: Reference-based reading helpers
- status: Structural completeness reports
"""

from . import config
from .paths import PROJECT_ROOT, BIBLES_DIR, ensure_basic_dirs
from .util import info, warn, ok
from .errors import (
    BibleStoreError,
    UnknownVersion,
    VersionNotFound,
    SourceFetchFailure,
    SourceUnavailable,
    MalformedSource,
    SearchReplyError,
)
from .canon import CanonicalBook, Testament, lookup_by_id
from .booknames import normalize
from .formats import SourceFormat, detect
from .model import BibleDocument, BookRecord, ChapterRecord, VerseRecord, VerseRef
from .parsers import parse_document
from .sanitize import clean
from .versions import BibleVersion, VersionCatalog, DEFAULT_VERSION_ID
from .fetch import SourceFetcher
from .store import BibleStore

__version__ = config.__version__
__all__ = [
    "config",
    "PROJECT_ROOT",
    "BIBLES_DIR",
    "ensure_basic_dirs",
    "info",
    "warn",
    "ok",
    "BibleStoreError",
    "UnknownVersion",
    "VersionNotFound",
    "SourceFetchFailure",
    "SourceUnavailable",
    "MalformedSource",
    "SearchReplyError",
    "CanonicalBook",
    "Testament",
    "lookup_by_id",
    "normalize",
    "SourceFormat",
    "detect",
    "BibleDocument",
    "BookRecord",
    "ChapterRecord",
    "VerseRecord",
    "VerseRef",
    "parse_document",
    "clean",
    "BibleVersion",
    "VersionCatalog",
    "DEFAULT_VERSION_ID",
    "SourceFetcher",
    "BibleStore",
]
