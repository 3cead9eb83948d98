# File: tests/test_directive.py
import dataclasses

import pytest

from seo_robots.builder import build_x_robots
from seo_robots.collection import convert_legacy_flat_to_structured, is_flat, to_structured
from seo_robots.directive import Directive
from seo_robots.validator import validate_structured


@pytest.mark.parametrize(
    "text,expected",
    [
        ("noindex", Directive(value="noindex")),
        ("max-snippet:50", Directive(value="max-snippet", modification="50")),
        ("MAX-SNIPPET:50", Directive(value="MAX-SNIPPET", modification="50")),
        ("googlebot:noindex", Directive(value="noindex", bot="googlebot")),
        ("googlebot:max-snippet:50", Directive(value="max-snippet", bot="googlebot", modification="50")),
        (
            "bingbot:unavailable_after:2025-12-31T23:59:59",
            Directive(value="unavailable_after", bot="bingbot", modification="2025-12-31T23:59:59"),
        ),
        (" Googlebot : noindex ", Directive(value="noindex", bot="Googlebot")),
        ("", Directive()),
        ("   ", Directive()),
    ],
)
def test_parse_forms(text, expected):
    assert Directive.parse(text) == expected


def test_parse_uses_given_advanced_names_as_tiebreaker():
    assert Directive.parse("max-snippet:50", known_advanced=()) == Directive(bot="max-snippet", value="50")
    assert Directive.parse("custom:1", known_advanced=("custom",)) == Directive(value="custom", modification="1")


@pytest.mark.parametrize(
    "directive,text",
    [
        (Directive(value="noindex"), "noindex"),
        (Directive(value="noindex", bot="googlebot"), "googlebot:noindex"),
        (Directive(value="max-snippet", modification="50"), "max-snippet:50"),
        (Directive(value="max-snippet", bot="googlebot", modification="50"), "googlebot:max-snippet:50"),
        (Directive(), ""),
    ],
)
def test_serialize_skips_empty_fields(directive, text):
    assert directive.serialize() == text
    assert str(directive) == text


@pytest.mark.parametrize(
    "directive",
    [
        Directive(value="max-snippet", bot="googlebot", modification="50"),
        Directive(value="max-image-preview", bot="bingbot", modification="large"),
        Directive(value="unavailable_after", bot="googlebot", modification="2025-12-31T23:59:59+00:00"),
    ],
)
def test_parse_restores_fully_scoped_directive(directive):
    assert Directive.parse(directive.serialize()) == directive


def test_bot_named_like_advanced_directive_is_ambiguous():
    original = Directive(value="noindex", bot="max-snippet")
    reparsed = Directive.parse(original.serialize())
    assert reparsed == Directive(value="max-snippet", modification="noindex")
    assert reparsed != original


def test_fields_are_trimmed_and_empty_value_is_empty():
    directive = Directive(value="  ", bot=" googlebot ")
    assert directive.bot == "googlebot"
    assert directive.is_empty
    assert not directive.is_global


def test_directive_is_immutable():
    directive = Directive(value="noindex")
    with pytest.raises(dataclasses.FrozenInstanceError):
        directive.value = "index"  # type: ignore[misc]


def test_record_conversion():
    directive = Directive(value="max-snippet", bot="googlebot", modification="50")
    record = directive.to_record()
    assert record == {"value": "max-snippet", "bot": "googlebot", "modification": "50"}
    assert Directive.from_record(record) == directive


def test_from_record_defaults_missing_fields():
    assert Directive.from_record({"value": " noindex "}) == Directive(value="noindex")
    assert Directive.from_record({"value": None, "bot": None}) == Directive()
    assert Directive.from_record({"value": "max-snippet", "modification": 50}).modification == "50"


def test_convert_legacy_flat_skips_blank_tokens():
    assert convert_legacy_flat_to_structured(["noindex", "  ", "max-snippet:50", "googlebot:nofollow", ""]) == [
        Directive(value="noindex"),
        Directive(value="max-snippet", modification="50"),
        Directive(value="nofollow", bot="googlebot"),
    ]


def test_to_structured_accepts_mixed_shapes():
    items = ["noindex", {"value": "nofollow", "bot": "googlebot"}, Directive(value="noarchive"), " "]
    assert to_structured(items) == [
        Directive(value="noindex"),
        Directive(value="nofollow", bot="googlebot"),
        Directive(value="noarchive"),
    ]


def test_to_structured_skips_unsupported_items():
    assert to_structured([42, "noindex", None]) == [Directive(value="noindex")]


def test_validation_and_rendering_skip_unsupported_items():
    assert validate_structured([42, {"value": "noindex"}]).valid
    assert build_x_robots([42, {"value": "noindex"}]) == "NOINDEX"


def test_is_flat():
    assert is_flat(["noindex", "nofollow"])
    assert is_flat([])
    assert not is_flat(["noindex", {"value": "nofollow"}])
    assert not is_flat([Directive(value="noindex")])
