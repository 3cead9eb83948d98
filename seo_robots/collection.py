# File: seo_robots/collection.py
"""
Directive collections.

A collection arrives in one of two shapes:

* **flat** – a sequence of plain tokens (``"noindex"``, ``"max-snippet:50"``,
  ``"googlebot:noindex"``) as stored by older configuration;
* **structured** – a sequence of :class:`~seo_robots.directive.Directive`
  objects or ``{value, bot, modification}`` mappings.

Both are the same ordered collection; :func:`to_structured` converts either
shape into directives so validation and rendering share one code path.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from seo_robots.catalog import ADVANCED_DIRECTIVES
from seo_robots.directive import Directive
from seo_robots.logger import logger

GLOBAL_BOT = "*"

FlatCollection = Sequence[str]
StructuredItem = Union[Directive, Mapping[str, Any]]
StructuredCollection = Sequence[StructuredItem]
DirectiveCollection = Union[FlatCollection, StructuredCollection]


def is_flat(items: Iterable[Any]) -> bool:
    """True when every item is a plain string token (an empty collection counts as flat)."""
    return all(isinstance(item, str) for item in items)


def convert_legacy_flat_to_structured(flat: Iterable[str]) -> List[Directive]:
    """Parse each non-blank token into a :class:`Directive`."""
    return [Directive.parse(token, ADVANCED_DIRECTIVES) for token in flat if token and token.strip()]


def _to_directive(item: Any) -> Optional[Directive]:
    if isinstance(item, Directive):
        return item
    if isinstance(item, Mapping):
        return Directive.from_record(item)
    if isinstance(item, str):
        return Directive.parse(item, ADVANCED_DIRECTIVES)
    logger.warning("Skipping unsupported directive item of type %s", type(item).__name__)
    return None


def to_structured(items: Iterable[Any]) -> List[Directive]:
    """Return *items* as directives, whatever mix of shapes they come in.

    Blank string tokens are dropped, and so are items that are neither
    strings, mappings nor directives (with a warning). Records with an
    empty value are kept; renderers skip them.
    """
    directives: List[Directive] = []
    for item in items:
        if isinstance(item, str) and not item.strip():
            continue
        directive = _to_directive(item)
        if directive is not None:
            directives.append(directive)
    return directives


__all__ = [
    "GLOBAL_BOT",
    "DirectiveCollection",
    "FlatCollection",
    "StructuredCollection",
    "StructuredItem",
    "convert_legacy_flat_to_structured",
    "is_flat",
    "to_structured",
]
