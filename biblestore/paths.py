"""
Path configuration for biblestore.
"""

from pathlib import Path

# Package directory holds bundled data; the project root is one level up.
# BIBLES_DIR is only meaningful in a source checkout or editable install. A
# regular install puts it under site-packages, so set BIBLESTORE_SOURCE_BASE.
PACKAGE_DIR = Path(__file__).parent
PROJECT_ROOT = PACKAGE_DIR.parent
CANON_PATH = PACKAGE_DIR / "data" / "canon.json"
BIBLES_DIR = PROJECT_ROOT / "data" / "bibles"


def ensure_basic_dirs() -> None:
    """
    Ensure the local source directory exists:
    - data/bibles/
    """
    BIBLES_DIR.mkdir(parents=True, exist_ok=True)
