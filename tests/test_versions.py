import pytest

from biblestore.errors import UnknownVersion, VersionNotFound
from biblestore.versions import (
    BIBLE_VERSIONS,
    DEFAULT_VERSION_ID,
    VersionCatalog,
    available_languages,
    get_version,
    is_valid_version_id,
    versions_by_language,
)

from conftest import make_version


def test_default_catalog_contents():
    assert [v.id for v in BIBLE_VERSIONS] == ["kjv", "asv", "web", "bg", "ubg"]
    assert is_valid_version_id(DEFAULT_VERSION_ID)


def test_get_version():
    kjv = get_version("kjv")
    assert kjv.abbreviation == "KJV"
    assert kjv.year == 1611
    assert kjv.is_public_domain
    assert kjv.copyright_notice is None
    assert get_version("niv") is None


def test_validate_version_id():
    assert is_valid_version_id("ubg")
    assert not is_valid_version_id("UBG")
    assert not is_valid_version_id("")


def test_versions_grouped_by_language():
    groups = available_languages()
    assert [(g.code, g.display_name) for g in groups] == [("en", "English"), ("pl", "Polski")]
    assert [v.id for v in groups[1].versions] == ["bg", "ubg"]
    assert [v.id for v in versions_by_language("en")] == ["kjv", "asv", "web"]
    assert versions_by_language("de") == []


def test_resolve_unknown_version_raises():
    catalog = VersionCatalog([make_version("kjv", "kjv.json")])
    with pytest.raises(UnknownVersion) as excinfo:
        catalog.resolve("niv")
    assert excinfo.value.version_id == "niv"
    assert "niv" in str(excinfo.value)
    assert VersionNotFound is UnknownVersion


def test_duplicate_ids_are_rejected():
    with pytest.raises(ValueError):
        VersionCatalog([make_version("kjv", "a.json"), make_version("kjv", "b.json")])


def test_catalog_container_protocol():
    catalog = VersionCatalog([make_version("kjv", "kjv.json"), make_version("asv", "asv.json")])
    assert len(catalog) == 2
    assert "asv" in catalog
    assert [v.id for v in catalog] == ["kjv", "asv"]
