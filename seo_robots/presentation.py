# File: seo_robots/presentation.py
"""seo_robots.presentation: descriptive directive catalog consumed by admin UIs.

The ``format`` hint of a modification tells a client how to join the value
to the name (``colon_number`` → ``max-snippet:50``, ``colon_literal`` →
``max-image-preview:large``). The engine itself never reads these hints.
"""
from __future__ import annotations

import copy
from typing import Dict, List, Optional, TypedDict

from seo_robots import catalog
from seo_robots.catalog import CONFLICT_PAIRS, MAX_IMAGE_PREVIEW_VALUES


class ModificationInfo(TypedDict, total=False):
    """Описание параметра расширенной директивы."""

    type: str
    options: List[str]
    min: int
    placeholder: str
    format: str


class DirectiveDescriptor(TypedDict, total=False):
    """Описание одной директивы для интерфейса администратора."""

    name: str
    label: str
    description: str
    modification: ModificationInfo
    conflicts: List[str]


def conflicts_for(name: str) -> List[str]:
    """Names that may not be combined with *name* in the same scope."""
    found: List[str] = []
    for first, second in CONFLICT_PAIRS:
        if name == first:
            found.append(second)
        elif name == second:
            found.append(first)
    return found


def _basic(name: str, label: str, description: str) -> DirectiveDescriptor:
    descriptor: DirectiveDescriptor = {"name": name, "label": label, "description": description}
    conflicts = conflicts_for(name)
    if conflicts:
        descriptor["conflicts"] = conflicts
    return descriptor


def _advanced(
    name: str, label: str, description: str, modification: ModificationInfo
) -> DirectiveDescriptor:
    return {"name": name, "label": label, "description": description, "modification": modification}


_LENGTH_LIMIT: ModificationInfo = {
    "type": "number",
    "min": -1,
    "placeholder": "-1",
    "format": "colon_number",
}

DIRECTIVE_CATEGORIES: Dict[str, List[DirectiveDescriptor]] = {
    "indexing": [
        _basic(catalog.INDEX, "Index", "Allow search engines to index this page."),
        _basic(catalog.NOINDEX, "No Index", "Do not show this page in search results."),
        _basic(catalog.ALL, "All", "No restrictions on indexing or serving. Same as index, follow."),
        _basic(catalog.NONE, "None", "Equivalent to noindex, nofollow."),
        _advanced(
            catalog.UNAVAILABLE_AFTER,
            "Unavailable After",
            "Do not show this page in search results after the given date and time.",
            {"type": "datetime", "placeholder": "2025-12-31T23:59:59+00:00", "format": "colon_literal"},
        ),
    ],
    "snippets": [
        _basic(catalog.NOSNIPPET, "No Snippet", "Do not show a text snippet or video preview."),
        _basic(catalog.NOARCHIVE, "No Archive", "Do not show a cached link in search results."),
        _advanced(
            catalog.MAX_SNIPPET,
            "Max Snippet",
            "Maximum text length of a snippet in characters; 0 disables, -1 means no limit.",
            _LENGTH_LIMIT,
        ),
        _advanced(
            catalog.MAX_VIDEO_PREVIEW,
            "Max Video Preview",
            "Maximum duration of a video preview in seconds; 0 shows a still image, -1 means no limit.",
            _LENGTH_LIMIT,
        ),
    ],
    "images": [
        _basic(catalog.NOIMAGEINDEX, "No Image Index", "Do not index images on this page."),
        _advanced(
            catalog.MAX_IMAGE_PREVIEW,
            "Max Image Preview",
            "Maximum size of an image preview shown in search results.",
            {"type": "select", "options": list(MAX_IMAGE_PREVIEW_VALUES), "format": "colon_literal"},
        ),
    ],
    "translations": [
        _basic(catalog.NOTRANSLATE, "No Translate", "Do not offer a translation of this page in search results."),
    ],
    "crawling": [
        _basic(catalog.FOLLOW, "Follow", "Follow the links on this page."),
        _basic(catalog.NOFOLLOW, "No Follow", "Do not follow the links on this page."),
    ],
}


def get_directive_catalog() -> Dict[str, List[DirectiveDescriptor]]:
    """Return a private copy of the catalog, safe for callers to modify."""
    return copy.deepcopy(DIRECTIVE_CATEGORIES)


def describe(name: str) -> Optional[DirectiveDescriptor]:
    """Descriptor for directive *name* (case-insensitive), or ``None``."""
    wanted = name.strip().lower()
    for descriptors in DIRECTIVE_CATEGORIES.values():
        for descriptor in descriptors:
            if descriptor["name"] == wanted:
                return copy.deepcopy(descriptor)
    return None


def category_of(name: str) -> Optional[str]:
    wanted = name.strip().lower()
    for category, descriptors in DIRECTIVE_CATEGORIES.items():
        if any(descriptor["name"] == wanted for descriptor in descriptors):
            return category
    return None


__all__ = [
    "DIRECTIVE_CATEGORIES",
    "DirectiveDescriptor",
    "ModificationInfo",
    "category_of",
    "conflicts_for",
    "describe",
    "get_directive_catalog",
]
