import copy
import threading
import time

import pytest

from biblestore.errors import SourceFetchFailure
from biblestore.store import BibleStore
from biblestore.versions import BibleVersion, VersionCatalog


ARRAY_SOURCE = [
    {"abbrev": "gn", "chapters": [["A", "B", "C"]]},
]

OBJECT_SOURCE = {
    "translation": "Test Object Format",
    "books": [
        {
            "name": "Genesis",
            "chapters": [
                {
                    "chapter": 1,
                    "verses": [
                        {"verse": 1, "text": "A"},
                        {"verse": 2, "text": "B"},
                        {"verse": 3, "text": "C"},
                    ],
                }
            ],
        }
    ],
}

FLAT_SOURCE = {
    "Genesis": {"1": {"1": "A", "2": "B", "3": "C"}},
}

KJV_SOURCE = [
    {
        "abbrev": "gn",
        "chapters": [
            ["In the beginning God created the heaven and the earth.",
             "And the earth was without form, and void; and darkness {was} upon the face of the deep.",
             "And God said, Let there be light: and there was light."],
            ["Thus the heavens and the earth were finished, and all the host of them."],
        ],
    },
    {
        "abbrev": "jo",
        "chapters": [
            ["In the beginning was the Word."],
            ["And the third day there was a marriage in Cana of Galilee."],
            [
                "There was a man of the Pharisees, named Nicodemus.",
                "The same came to Jesus by night.",
            ]
            + [f"John 3:{n}" for n in range(3, 19)],
        ],
    },
]


def make_version(version_id, source, language="en", language_name="English"):
    return BibleVersion(
        id=version_id,
        abbreviation=version_id.upper(),
        display_name=f"Test {version_id.upper()}",
        language_code=language,
        language_display_name=language_name,
        description="Test fixture version.",
        is_public_domain=True,
        source=source,
    )


class CountingFetcher:
    """Fetcher double that serves in-memory documents and records calls."""

    def __init__(self, documents, delay=0.0):
        self.documents = documents
        self.delay = delay
        self.calls = []
        self._lock = threading.Lock()

    def fetch(self, source):
        with self._lock:
            self.calls.append(source)
        if self.delay:
            time.sleep(self.delay)
        if source not in self.documents:
            raise SourceFetchFailure(source, "404 Not Found")
        return copy.deepcopy(self.documents[source])

    def count(self, source):
        return self.calls.count(source)


@pytest.fixture
def catalog():
    return VersionCatalog(
        [
            make_version("kjv", "kjv.json"),
            make_version("arr", "arr.json"),
            make_version("obj", "obj.json"),
            make_version("flat", "flat.json"),
            make_version("gone", "missing.json"),
            make_version("bg", "bg.json", language="pl", language_name="Polski"),
        ]
    )


@pytest.fixture
def documents():
    return {
        "kjv.json": KJV_SOURCE,
        "arr.json": ARRAY_SOURCE,
        "obj.json": OBJECT_SOURCE,
        "flat.json": FLAT_SOURCE,
        "bg.json": FLAT_SOURCE,
    }


@pytest.fixture
def fetcher(documents):
    return CountingFetcher(documents)


@pytest.fixture
def store(catalog, fetcher):
    return BibleStore(catalog=catalog, fetcher=fetcher)
