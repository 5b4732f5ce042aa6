"""
Retrieve raw Bible source documents.

A source is a single JSON file named by the version catalog. The base it is
resolved against is either an http(s) URL, fetched with requests, or a local
directory. Every failure surfaces as SourceFetchFailure; nothing is retried.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional
from urllib.parse import urljoin

import requests

from . import config
from .errors import SourceFetchFailure
from .util import info


def _is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


class SourceFetcher:
    """
    Fetch and decode source JSON documents.

    Parameters
    ----------
    base:
        URL or directory the catalog's file names are relative to.
        Defaults to config.SOURCE_BASE.
    timeout:
        Seconds to wait for a remote response. Defaults to config.FETCH_TIMEOUT.
    session:
        Optional requests.Session to reuse (created lazily otherwise).
    """

    def __init__(
        self,
        base: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base = str(base) if base is not None else config.SOURCE_BASE
        self.timeout = timeout if timeout is not None else config.FETCH_TIMEOUT
        self._session = session

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
            self._session.headers["User-Agent"] = config.USER_AGENT
        return self._session

    def locate(self, source: str) -> str:
        """Resolve a catalog file name to a URL or filesystem path."""
        if _is_url(source):
            return source
        if _is_url(self.base):
            return urljoin(self.base.rstrip("/") + "/", source)
        return str(Path(self.base) / source)

    def fetch(self, source: str) -> Any:
        """
        Return the decoded JSON document for *source*.

        Raises SourceFetchFailure on any network, filesystem or decode error.
        """
        location = self.locate(source)
        info(f"Fetching Bible source: {location}")
        if _is_url(location):
            return self._fetch_url(location)
        return self._read_file(Path(location))

    def _fetch_url(self, url: str) -> Any:
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except requests.RequestException as e:
            raise SourceFetchFailure(url, str(e)) from e
        except ValueError as e:
            raise SourceFetchFailure(url, f"invalid JSON ({e})") from e

    def _read_file(self, path: Path) -> Any:
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise SourceFetchFailure(str(path), str(e)) from e
        except ValueError as e:
            raise SourceFetchFailure(str(path), f"invalid JSON ({e})") from e
