# File: tests/test_catalog.py
import pytest

from seo_robots.catalog import (
    ADVANCED_DIRECTIVES,
    ADVANCED_RULES,
    BASIC_DIRECTIVES,
    CONFLICT_PAIRS,
    LEGACY_CODE_MAP,
    LegacyCode,
    MAX_IMAGE_PREVIEW_VALUES,
)
from seo_robots.legacy import code_to_directives, coerce_legacy_code
from seo_robots.presentation import (
    DIRECTIVE_CATEGORIES,
    category_of,
    conflicts_for,
    describe,
    get_directive_catalog,
)


def test_directive_tables():
    assert set(BASIC_DIRECTIVES) == {
        "index", "noindex", "follow", "nofollow", "noarchive",
        "nosnippet", "notranslate", "noimageindex", "none", "all",
    }
    assert set(ADVANCED_DIRECTIVES) == {
        "max-snippet", "max-image-preview", "max-video-preview", "unavailable_after",
    }
    assert MAX_IMAGE_PREVIEW_VALUES == ("none", "standard", "large")
    assert len(CONFLICT_PAIRS) == 7


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        ADVANCED_RULES["max-foo"] = ADVANCED_RULES["max-snippet"]  # type: ignore[index]
    with pytest.raises(TypeError):
        LEGACY_CODE_MAP[9] = ("noindex",)  # type: ignore[index]


@pytest.mark.parametrize(
    "code,expected",
    [
        (1, ["noindex", "nofollow"]),
        (2, ["noindex", "follow"]),
        (3, ["index", "nofollow"]),
        (4, ["index", "follow"]),
        (5, ["noindex", "nofollow", "noarchive"]),
        (6, ["noindex", "follow", "noarchive"]),
        (7, ["index", "nofollow", "noarchive"]),
        (8, ["index", "follow", "noarchive"]),
        (0, ["index", "follow"]),
        (99, ["index", "follow"]),
        (-3, ["index", "follow"]),
    ],
)
def test_legacy_code_table(code, expected):
    assert code_to_directives(code) == expected


def test_legacy_codes_enum_matches_table():
    assert LegacyCode.NOINDEX_NOFOLLOW_NOARCHIVE == 5
    assert code_to_directives(LegacyCode.INDEX_FOLLOW_NOARCHIVE) == ["index", "follow", "noarchive"]


def test_code_to_directives_returns_fresh_list():
    directives = code_to_directives(1)
    directives.append("noarchive")
    assert code_to_directives(1) == ["noindex", "nofollow"]


@pytest.mark.parametrize(
    "value,expected",
    [(4, 4), ("4", 4), (" 7 ", 7), ("4.0", 4), (2.0, 2), (True, None), ("abc", None), ("", None), (None, None), (["1"], None)],
)
def test_coerce_legacy_code(value, expected):
    assert coerce_legacy_code(value) == expected


def test_presentation_covers_every_directive_once():
    names = [item["name"] for items in DIRECTIVE_CATEGORIES.values() for item in items]
    assert sorted(names) == sorted(BASIC_DIRECTIVES + ADVANCED_DIRECTIVES)
    assert set(DIRECTIVE_CATEGORIES) == {"indexing", "snippets", "images", "translations", "crawling"}


def test_presentation_modification_metadata():
    image = describe("max-image-preview")
    assert image["modification"]["type"] == "select"
    assert image["modification"]["options"] == ["none", "standard", "large"]
    assert describe("max-snippet")["modification"]["format"] == "colon_number"
    assert describe("unavailable_after")["modification"]["type"] == "datetime"
    assert "modification" not in describe("noindex")


def test_presentation_conflicts_follow_conflict_pairs():
    assert conflicts_for("noindex") == ["index", "all"]
    assert describe("NOINDEX")["conflicts"] == ["index", "all"]
    assert "conflicts" not in describe("noarchive")


def test_describe_unknown_directive():
    assert describe("max-foo") is None
    assert category_of("max-foo") is None
    assert category_of("notranslate") == "translations"


def test_catalog_copy_is_private():
    data = get_directive_catalog()
    data["images"].clear()
    assert DIRECTIVE_CATEGORIES["images"]
