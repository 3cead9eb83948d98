# File: seo_robots/builder.py
"""
Rendering of directive collections into header and meta tag values.

* meta robots (:func:`build_from_structured`) – one flat list, bots ignored:
  ``NOINDEX, NOFOLLOW, MAX-SNIPPET:50``;
* X-Robots-Tag (:func:`build_x_robots_from_structured`) – grouped per bot,
  global group first: ``NOINDEX, FOLLOW, googlebot: NOINDEX``;
* legacy flat meta (:func:`build_from_flat`) – plain token lists, grouped by
  bot prefix: ``NOINDEX, GOOGLEBOT: NOFOLLOW``.

Builders render whatever they are given, valid or not; run
:mod:`seo_robots.validator` first when that matters.
"""
from __future__ import annotations

from collections import OrderedDict
from typing import Any, Iterable, List, Sequence

from seo_robots.catalog import ADVANCED_DIRECTIVES
from seo_robots.collection import (
    GLOBAL_BOT,
    convert_legacy_flat_to_structured,
    is_flat,
    to_structured,
)
from seo_robots.directive import SEPARATOR, Directive
from seo_robots.logger import logger
from seo_robots.utils import remove_duplicates

JOINER = ", "


def _with_modification(name: str, directive: Directive) -> str:
    if directive.modification:
        return f"{name}{SEPARATOR}{directive.modification}"
    return name


def build_from_structured(directives: Iterable[Any]) -> str:
    """Render the meta robots value; modifications keep their case."""
    rendered = [
        _with_modification(directive.value.upper(), directive)
        for directive in to_structured(directives)
        if not directive.is_empty
    ]
    return JOINER.join(remove_duplicates(rendered))


def _split_bot_prefix(token: str) -> tuple[str, str]:
    """Split ``bot:directive`` tokens; a leading advanced name is never a bot."""
    parts = token.split(SEPARATOR)
    if len(parts) >= 2 and parts[0].strip().lower() not in ADVANCED_DIRECTIVES:
        return parts[0].strip(), SEPARATOR.join(parts[1:]).strip()
    return "", token


def build_from_flat(directives: Sequence[str]) -> str:
    """Render a legacy flat token list as a meta robots value.

    Global tokens come first without a prefix, then one ``BOT: A, B`` group
    per bot in first-seen order. Groups are uppercased as a whole.
    """
    groups: "OrderedDict[str, List[str]]" = OrderedDict([("", [])])
    labels = {"": ""}
    for raw in directives:
        token = raw.strip()
        if not token:
            continue
        bot, directive = _split_bot_prefix(token)
        if not directive:
            continue
        key = bot.lower()
        labels.setdefault(key, bot)
        groups.setdefault(key, []).append(directive.upper())

    segments: List[str] = []
    for key, items in groups.items():
        if not items:
            continue
        joined = JOINER.join(remove_duplicates(items))
        segments.append(joined if not key else f"{labels[key]}: {joined}".upper())
    return JOINER.join(segments)


def build_x_robots_from_structured(directives: Iterable[Any]) -> str:
    """Render the X-Robots-Tag value, one group per lowercase bot, global group first."""
    groups: "OrderedDict[str, List[str]]" = OrderedDict()
    for directive in to_structured(directives):
        if directive.is_empty:
            continue
        bot = directive.bot.lower() or GLOBAL_BOT
        groups.setdefault(bot, []).append(_with_modification(directive.value.lower(), directive))

    segments: List[str] = []
    if GLOBAL_BOT in groups:
        segments.append(JOINER.join(remove_duplicates(groups.pop(GLOBAL_BOT))).upper())
    for bot, items in groups.items():
        segments.append(f"{bot}: " + JOINER.join(remove_duplicates(items)).upper())

    logger.debug("Rendered X-Robots-Tag with %d group(s)", len(segments))
    return JOINER.join(segments)


def build_meta_robots(directives: Sequence[Any]) -> str:
    """Meta robots value for either collection shape; flat lists keep the legacy renderer."""
    if is_flat(directives):
        return build_from_flat(directives)
    return build_from_structured(directives)


def build_x_robots(directives: Sequence[Any]) -> str:
    """X-Robots-Tag value for either collection shape."""
    return build_x_robots_from_structured(to_structured(directives))


__all__ = [
    "build_from_flat",
    "build_from_structured",
    "build_meta_robots",
    "build_x_robots",
    "build_x_robots_from_structured",
    "convert_legacy_flat_to_structured",
]
