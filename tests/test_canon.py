from biblestore.canon import (
    BOOKS,
    BY_ID,
    Testament,
    book_ids,
    lookup_by_id,
    new_testament_books,
    old_testament_books,
)


def test_registry_has_66_books_in_canonical_order():
    assert len(BOOKS) == 66
    assert BOOKS[0].id == "gen"
    assert BOOKS[38].id == "mal"
    assert BOOKS[39].id == "mat"
    assert BOOKS[-1].id == "rev"


def test_ids_are_unique():
    ids = book_ids()
    assert len(ids) == len(set(ids)) == 66


def test_lookup_by_id():
    book = lookup_by_id("psa")
    assert book.display_name == "Psalms"
    assert book.abbreviation == "Psa"
    assert book.chapter_count == 150
    assert book.testament is Testament.OLD


def test_lookup_unknown_id_is_none():
    assert lookup_by_id("xyz") is None
    assert lookup_by_id("Genesis") is None


def test_testament_split():
    assert len(old_testament_books()) == 39
    assert len(new_testament_books()) == 27
    assert all(b.testament is Testament.NEW for b in new_testament_books())


def test_every_book_has_positive_chapter_count():
    assert all(b.chapter_count > 0 for b in BOOKS)
    assert sum(b.chapter_count for b in BOOKS) == 1189


def test_by_id_matches_books():
    assert list(BY_ID) == book_ids()
