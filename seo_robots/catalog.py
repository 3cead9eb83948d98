# File: seo_robots/catalog.py
"""
Static rule tables for robots directives.

Every table here is read-only and shared by the whole process:

* basic directives (no parameter),
* advanced directives, each with its own value rule (:class:`AdvancedRule`),
* pairs of basic directives that contradict each other within one scope,
* the legacy integer codes used by configuration written before
  directive lists existed.

Adding a new advanced directive is a single entry in :data:`ADVANCED_RULES`;
the validator, parser and builders all read their advanced names from it.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Callable, Final, Mapping, Tuple

from seo_robots.utils import parse_datetime, parse_integer

# --------------------------------------------------------------------------- #
# Directive names                                                             #
# --------------------------------------------------------------------------- #

INDEX: Final[str] = "index"
NOINDEX: Final[str] = "noindex"
FOLLOW: Final[str] = "follow"
NOFOLLOW: Final[str] = "nofollow"
NOARCHIVE: Final[str] = "noarchive"
NOSNIPPET: Final[str] = "nosnippet"
NOTRANSLATE: Final[str] = "notranslate"
NOIMAGEINDEX: Final[str] = "noimageindex"
NONE: Final[str] = "none"
ALL: Final[str] = "all"

MAX_SNIPPET: Final[str] = "max-snippet"
MAX_IMAGE_PREVIEW: Final[str] = "max-image-preview"
MAX_VIDEO_PREVIEW: Final[str] = "max-video-preview"
UNAVAILABLE_AFTER: Final[str] = "unavailable_after"

BASIC_DIRECTIVES: Final[Tuple[str, ...]] = (
    INDEX,
    NOINDEX,
    FOLLOW,
    NOFOLLOW,
    NOARCHIVE,
    NOSNIPPET,
    NOTRANSLATE,
    NOIMAGEINDEX,
    NONE,
    ALL,
)

MAX_IMAGE_PREVIEW_VALUES: Final[Tuple[str, ...]] = ("none", "standard", "large")


# --------------------------------------------------------------------------- #
# Advanced directive value rules                                              #
# --------------------------------------------------------------------------- #


def _is_length_limit(value: str) -> bool:
    number = parse_integer(value)
    return number is not None and number >= -1


def _is_image_preview_size(value: str) -> bool:
    return value in MAX_IMAGE_PREVIEW_VALUES


def _is_datetime(value: str) -> bool:
    return parse_datetime(value) is not None


@dataclass(frozen=True, slots=True)
class AdvancedRule:
    """One advanced directive kind and the rule its modification must satisfy."""

    name: str
    check: Callable[[str], bool]
    expectation: str

    def accepts(self, value: str) -> bool:
        return self.check(value)


ADVANCED_RULES: Final[Mapping[str, AdvancedRule]] = MappingProxyType(
    {
        rule.name: rule
        for rule in (
            AdvancedRule(MAX_SNIPPET, _is_length_limit, "an integer greater than or equal to -1"),
            AdvancedRule(
                MAX_IMAGE_PREVIEW,
                _is_image_preview_size,
                "one of: " + ", ".join(MAX_IMAGE_PREVIEW_VALUES),
            ),
            AdvancedRule(
                MAX_VIDEO_PREVIEW, _is_length_limit, "an integer greater than or equal to -1"
            ),
            AdvancedRule(UNAVAILABLE_AFTER, _is_datetime, "a valid date/time"),
        )
    }
)

ADVANCED_DIRECTIVES: Final[Tuple[str, ...]] = tuple(ADVANCED_RULES)

# --------------------------------------------------------------------------- #
# Conflicts                                                                   #
# --------------------------------------------------------------------------- #

CONFLICT_PAIRS: Final[Tuple[Tuple[str, str], ...]] = (
    (INDEX, NOINDEX),
    (FOLLOW, NOFOLLOW),
    (ALL, NONE),
    (ALL, NOINDEX),
    (ALL, NOFOLLOW),
    (NONE, INDEX),
    (NONE, FOLLOW),
)

# --------------------------------------------------------------------------- #
# Legacy integer codes                                                        #
# --------------------------------------------------------------------------- #


class LegacyCode(IntEnum):
    """Integer meta-robots codes stored by configuration before directive lists."""

    NOINDEX_NOFOLLOW = 1
    NOINDEX_FOLLOW = 2
    INDEX_NOFOLLOW = 3
    INDEX_FOLLOW = 4
    NOINDEX_NOFOLLOW_NOARCHIVE = 5
    NOINDEX_FOLLOW_NOARCHIVE = 6
    INDEX_NOFOLLOW_NOARCHIVE = 7
    INDEX_FOLLOW_NOARCHIVE = 8


LEGACY_CODE_MAP: Final[Mapping[int, Tuple[str, ...]]] = MappingProxyType(
    {
        LegacyCode.NOINDEX_NOFOLLOW: (NOINDEX, NOFOLLOW),
        LegacyCode.NOINDEX_FOLLOW: (NOINDEX, FOLLOW),
        LegacyCode.INDEX_NOFOLLOW: (INDEX, NOFOLLOW),
        LegacyCode.INDEX_FOLLOW: (INDEX, FOLLOW),
        LegacyCode.NOINDEX_NOFOLLOW_NOARCHIVE: (NOINDEX, NOFOLLOW, NOARCHIVE),
        LegacyCode.NOINDEX_FOLLOW_NOARCHIVE: (NOINDEX, FOLLOW, NOARCHIVE),
        LegacyCode.INDEX_NOFOLLOW_NOARCHIVE: (INDEX, NOFOLLOW, NOARCHIVE),
        LegacyCode.INDEX_FOLLOW_NOARCHIVE: (INDEX, FOLLOW, NOARCHIVE),
    }
)

DEFAULT_LEGACY_DIRECTIVES: Final[Tuple[str, ...]] = (INDEX, FOLLOW)


def is_basic(name: str) -> bool:
    return name in BASIC_DIRECTIVES


def is_advanced(name: str) -> bool:
    return name in ADVANCED_RULES


def advanced_rule(name: str) -> AdvancedRule | None:
    """Return the rule for advanced directive *name*, or ``None``."""
    return ADVANCED_RULES.get(name)


__all__ = [
    "ADVANCED_DIRECTIVES",
    "ADVANCED_RULES",
    "AdvancedRule",
    "BASIC_DIRECTIVES",
    "CONFLICT_PAIRS",
    "DEFAULT_LEGACY_DIRECTIVES",
    "LEGACY_CODE_MAP",
    "LegacyCode",
    "MAX_IMAGE_PREVIEW_VALUES",
    "advanced_rule",
    "is_advanced",
    "is_basic",
]
