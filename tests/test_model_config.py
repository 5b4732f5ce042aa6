from biblestore import config
from biblestore.model import VerseRef


def test_verse_ref_normalized():
    assert VerseRef("gen", 1, 1).to_normalized() == "GEN.1.1"
    assert VerseRef("1sa", 3, 4).to_normalized() == "1SA.3.4"


def test_env_float_override(monkeypatch):
    monkeypatch.setenv("BIBLESTORE_FETCH_TIMEOUT", "7.5")
    assert config._env_float("BIBLESTORE_FETCH_TIMEOUT", 30.0) == 7.5


def test_env_float_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv("BIBLESTORE_FETCH_TIMEOUT", "soon")
    assert config._env_float("BIBLESTORE_FETCH_TIMEOUT", 30.0) == 30.0
    monkeypatch.delenv("BIBLESTORE_FETCH_TIMEOUT")
    assert config._env_float("BIBLESTORE_FETCH_TIMEOUT", 30.0) == 30.0

