"""
Bible store: cached, async verse lookup over every catalog version.

The store owns two caches, both pure derived data that can be rebuilt by
re-parsing at any time:

- document cache : version_id -> BibleDocument
- chapter cache  : (version_id, book_id, chapter) -> verse texts

A version moves absent -> loading -> cached. While it is loading, every
caller awaits the same in-flight task, so concurrent navigation never fetches
or parses a source twice. Fetching runs in a worker thread and is the only
suspend point; parsing is synchronous.
"""

from __future__ import annotations

import asyncio
import functools
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .fetch import SourceFetcher
from .model import BibleDocument
from .parsers import parse_document
from .util import info
from .versions import DEFAULT_CATALOG, BibleVersion, VersionCatalog


ChapterKey = Tuple[str, str, int]


@dataclass(frozen=True)
class CacheStats:
    documents: int
    chapters: int
    inflight: int


class BibleStore:
    """
    Verse lookup with per-version document caching.

    Parameters
    ----------
    catalog:
        Version catalog used to resolve ids to source files
        (default: versions.DEFAULT_CATALOG).
    fetcher:
        Object with a fetch(source) -> decoded JSON method
        (default: SourceFetcher with configured base and timeout).
    """

    def __init__(
        self,
        catalog: Optional[VersionCatalog] = None,
        fetcher: Optional[SourceFetcher] = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG
        self.fetcher = fetcher if fetcher is not None else SourceFetcher()
        self._documents: Dict[str, BibleDocument] = {}
        self._chapters: Dict[ChapterKey, Tuple[str, ...]] = {}
        self._inflight: Dict[str, asyncio.Task] = {}
        self._generation = 0

    # ---------- documents ----------

    async def load_document(self, version_id: str) -> BibleDocument:
        """
        Return the parsed document for a version, loading it on first use.

        Raises UnknownVersion for ids missing from the catalog and
        SourceFetchFailure when the source cannot be retrieved. Failed loads
        are not cached, so calling again retries.
        """
        cached = self._documents.get(version_id)
        if cached is not None:
            return cached

        version = self.catalog.resolve(version_id)

        task = self._inflight.get(version_id)
        if task is None:
            task = asyncio.ensure_future(self._fetch_and_parse(version, self._generation))
            self._inflight[version_id] = task
            task.add_done_callback(functools.partial(self._forget, version_id))

        # Shielded: a caller that gives up must not cancel the shared load.
        return await asyncio.shield(task)

    async def _fetch_and_parse(self, version: BibleVersion, generation: int) -> BibleDocument:
        raw = await asyncio.to_thread(self.fetcher.fetch, version.source)
        document = parse_document(raw, version.id)
        # A load that straddles clear_cache() serves its own waiters only.
        if generation == self._generation:
            self._documents[version.id] = document
        info(
            f"Loaded {version.id}: {len(document.books)} book(s), "
            f"{document.verse_count} verse(s)."
        )
        return document

    def _forget(self, version_id: str, task: asyncio.Task) -> None:
        if self._inflight.get(version_id) is task:
            del self._inflight[version_id]
        if not task.cancelled():
            # Marks the exception as retrieved when every waiter went away.
            task.exception()

    async def preload(self, version_id: str) -> None:
        """Warm the document cache ahead of navigation."""
        await self.load_document(version_id)

    # ---------- chapters ----------

    async def load_chapter_verses(self, version_id: str, book_id: str, chapter: int) -> List[str]:
        """
        Return the verse texts of one chapter, in verse-number order.

        A book or chapter missing from the document yields a one-line
        placeholder message instead of an exception. Placeholders are not
        cached.
        """
        key = (version_id, book_id, chapter)
        cached = self._chapters.get(key)
        if cached is not None:
            return list(cached)

        generation = self._generation
        document = await self.load_document(version_id)

        book = document.find_book(book_id)
        if book is None:
            return [f'Book "{book_id}" not found in {version_id}']

        record = book.find_chapter(chapter)
        if record is None:
            return [f"Chapter {chapter} not found in {book.display_name}"]

        verses = tuple(record.texts())
        if generation == self._generation:
            self._chapters[key] = verses
        return list(verses)

    def get_verses(self, version_id: str, book_id: str, chapter: int) -> List[str]:
        """
        Blocking variant of load_chapter_verses for callers without a
        running event loop (scripts, the CLI).
        """
        return asyncio.run(self.load_chapter_verses(version_id, book_id, chapter))

    # ---------- cache management ----------

    def is_cached(self, version_id: str) -> bool:
        return version_id in self._documents

    def clear_cache(self) -> None:
        """
        Drop both caches and detach loads still in flight.

        A detached load still completes for the callers already awaiting it,
        but it does not repopulate the cache; the next load_document() starts
        a fresh fetch. Data already handed out is unaffected.
        """
        self._generation += 1
        self._documents.clear()
        self._chapters.clear()
        self._inflight.clear()

    def stats(self) -> CacheStats:
        return CacheStats(
            documents=len(self._documents),
            chapters=len(self._chapters),
            inflight=len(self._inflight),
        )
