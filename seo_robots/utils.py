# File: seo_robots/utils.py
"""seo_robots.utils: small helpers shared by the catalog, validator and builder."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Collection, List, Optional, Sequence

from seo_robots.logger import logger

__all__: Sequence[str] = (
    "remove_duplicates",
    "parse_datetime",
    "parse_integer",
)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


def remove_duplicates(items: Collection[str]) -> List[str]:
    """Удаляет дубликаты из списка строк, сохраняя порядок первого появления."""
    unique = list(dict.fromkeys(items))
    removed = len(items) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate directives", removed)
    return unique


def parse_integer(value: str) -> Optional[int]:
    """Return *value* as an ``int``; only an optional sign and ASCII digits are accepted."""
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)


def parse_datetime(value: str | None) -> Optional[datetime]:
    """Parse an ``unavailable_after`` timestamp into a UTC datetime.

    ISO 8601 values (``2025-12-31``, ``2025-12-31T23:59:59Z``) are tried
    first, then RFC 822 / RFC 850 / RFC 1123 HTTP dates
    (``Wed, 31 Dec 2025 23:59:59 GMT``). Neither parser depends on the
    process locale. Returns ``None`` when nothing matches.
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None

    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        try:
            parsed = parsedate_to_datetime(text)
        except (TypeError, ValueError, IndexError, OverflowError):
            return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError:
        # 0001-01-01T00:00:00+01:00 has no UTC counterpart
        logger.debug("Date %r is out of range in UTC", text)
        return None
