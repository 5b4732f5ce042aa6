import asyncio

import pytest

from biblestore.errors import SearchReplyError
from biblestore.search import (
    SearchHit,
    get_passage,
    parse_model_reply,
    parse_reference,
    print_passage,
    validate_hits,
)


@pytest.mark.parametrize(
    "ref,expected",
    [
        ("John 3:16", ("jhn", 3, 16, 16)),
        ("John 3:16-18", ("jhn", 3, 16, 18)),
        ("Gen 1:1", ("gen", 1, 1, 1)),
        ("I Samuel 3:4", ("1sa", 3, 4, 4)),
        ("1 Samuel 3:4", ("1sa", 3, 4, 4)),
        ("Song of Solomon 2:1", ("sng", 2, 1, 1)),
        ("Psalm 23", ("psa", 23, 1, 0)),
        ("mt 5:3-5", ("mat", 5, 3, 5)),
    ],
)
def test_parse_reference(ref, expected):
    assert parse_reference(ref) == expected


@pytest.mark.parametrize("ref", ["", "John", "Nowhere 1:1", "John x:1", "John 3:a", "John 3:5-2", "John 3:0"])
def test_parse_reference_failures_return_none(ref, capsys):
    assert parse_reference(ref) is None
    assert "[warn]" in capsys.readouterr().out


def test_get_passage_range(store):
    rows = asyncio.run(get_passage(store, "John 3:16-18", "kjv"))
    assert [r.verse for r in rows] == [16, 17, 18]
    assert rows[0].text == "John 3:16"
    assert rows[0].book_name == "John"


def test_get_passage_whole_chapter(store):
    rows = asyncio.run(get_passage(store, "Genesis 1", "kjv"))
    assert [r.verse for r in rows] == [1, 2, 3]


def test_get_passage_missing_chapter_is_empty(store):
    assert asyncio.run(get_passage(store, "Genesis 40:1", "kjv")) == []
    assert asyncio.run(get_passage(store, "Revelation 1:1", "kjv")) == []


def test_print_passage(store, capsys):
    print_passage(asyncio.run(get_passage(store, "Gen 1:1", "kjv")))
    out = capsys.readouterr().out
    assert "[KJV] Genesis 1:1" in out
    assert "In the beginning" in out


def test_parse_model_reply_plain_array():
    assert parse_model_reply('[{"bookId": "jhn", "chapter": 3, "verse": 16, "confidence": 95}]') == [
        {"bookId": "jhn", "chapter": 3, "verse": 16, "confidence": 95}
    ]


def test_parse_model_reply_strips_code_fence():
    content = '```json\n[{"bookId": "gen", "chapter": 1, "verse": 1, "confidence": 80}]\n```'
    assert parse_model_reply(content)[0]["bookId"] == "gen"


def test_parse_model_reply_empty_array():
    assert parse_model_reply("[]") == []


@pytest.mark.parametrize("content", ["", "I think it is John 3:16", '{"bookId": "jhn"}'])
def test_parse_model_reply_rejects_non_arrays(content):
    with pytest.raises(SearchReplyError):
        parse_model_reply(content)


def test_validate_hits_filters_and_orders():
    raw = [
        {"bookId": "gen", "chapter": 1, "verse": 1, "confidence": 40},
        {"bookId": "jhn", "chapter": 3, "verse": 16, "confidence": 95},
        {"bookId": "xyz", "chapter": 1, "verse": 1, "confidence": 99},
        {"bookId": "jud", "chapter": 2, "verse": 1, "confidence": 90},
        {"bookId": "rom", "chapter": 8, "verse": 0, "confidence": 90},
        {"bookId": "psa", "chapter": "23", "verse": "1", "confidence": 150},
        "garbage",
    ]
    hits = validate_hits(raw)
    assert hits == [
        SearchHit("psa", "Psalms", 23, 1, 100),
        SearchHit("jhn", "John", 3, 16, 95),
        SearchHit("gen", "Genesis", 1, 1, 40),
    ]


def test_validate_hits_limits_to_five():
    raw = [{"bookId": "gen", "chapter": 1, "verse": n, "confidence": n} for n in range(1, 9)]
    hits = validate_hits(raw)
    assert len(hits) == 5
    assert [h.verse for h in hits] == [8, 7, 6, 5, 4]


def test_validate_hits_keeps_best_hit_per_verse(capsys):
    raw = [
        {"bookId": "jhn", "chapter": 3, "verse": 16, "confidence": 60},
        {"bookId": "jhn", "chapter": "3", "verse": 16, "confidence": 95},
        {"bookId": "gen", "chapter": 1, "verse": 1, "confidence": 80},
    ]
    hits = validate_hits(raw)
    assert [(h.ref.to_normalized(), h.confidence) for h in hits] == [
        ("JHN.3.16", 95),
        ("GEN.1.1", 80),
    ]
    assert "Search hits: JHN.3.16, GEN.1.1" in capsys.readouterr().out
