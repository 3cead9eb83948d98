# File: seo_robots/legacy.py
"""seo_robots.legacy: mapping of historical integer meta-robots codes to directive lists.

Stored configuration from older releases encodes its meaning only through
these integers, so the table in :data:`seo_robots.catalog.LEGACY_CODE_MAP`
must never change. Unknown codes fall back to ``index, follow`` so that
unmigrated sites keep working.
"""
from __future__ import annotations

import math
from typing import Any, List, Optional

from seo_robots.catalog import DEFAULT_LEGACY_DIRECTIVES, LEGACY_CODE_MAP


def code_to_directives(code: int) -> List[str]:
    """Return a fresh directive list for a legacy *code*."""
    return list(LEGACY_CODE_MAP.get(code, DEFAULT_LEGACY_DIRECTIVES))


def coerce_legacy_code(value: Any) -> Optional[int]:
    """Return *value* as an integer code when it is numeric (``4``, ``"4"``, ``"4.0"``), else ``None``."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return int(float(text))
        except (ValueError, OverflowError):
            return None
    return None


__all__ = ["code_to_directives", "coerce_legacy_code"]
