"""
Project configuration and versioning.

Settings can be overridden from the environment:

- BIBLESTORE_SOURCE_BASE   : URL or directory holding the per-version JSON files.
                             The default, paths.BIBLES_DIR, is <checkout>/data/bibles
                             and only exists in a source checkout or editable
                             install; set this variable anywhere else.
- BIBLESTORE_FETCH_TIMEOUT : seconds to wait for a remote source (default 30)
"""

from __future__ import annotations

import os

from .paths import BIBLES_DIR

APP_NAME = "Bible Store"
__version__ = "0.3.0"

USER_AGENT = f"biblestore/{__version__}"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


SOURCE_BASE = os.getenv("BIBLESTORE_SOURCE_BASE", "") or str(BIBLES_DIR)
FETCH_TIMEOUT = _env_float("BIBLESTORE_FETCH_TIMEOUT", 30.0)
