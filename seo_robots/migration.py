# File: seo_robots/migration.py
"""
One-time migration of stored robots configuration from integer codes to
directive lists.

The host reads its stored configuration, passes it to :func:`migrate_config`
and persists :attr:`MigrationResult.data` when :attr:`MigrationResult.changed`
is set. Sections that cannot be read are logged and left as they are so that
an upgrade never fails halfway.
"""
from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from seo_robots.catalog import DEFAULT_LEGACY_DIRECTIVES
from seo_robots.legacy import code_to_directives, coerce_legacy_code
from seo_robots.logger import logger

META_ROBOTS_KEY = "meta_robots"
CODE_KEYS: Tuple[str, ...] = ("https_meta_robots", "paginated_robots_type")

LEGACY_OPTION_KEY = "option"
DIRECTIVES_KEY = "meta_directives"


@dataclass(slots=True)
class MigrationResult:
    """Migrated configuration mapping and the keys that were rewritten."""

    data: Dict[str, Any]
    migrated: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.migrated)


def _migrate_rule(rule: Any) -> Tuple[Any, bool]:
    if not isinstance(rule, Mapping):
        return rule, False

    code = coerce_legacy_code(rule.get(LEGACY_OPTION_KEY))
    if code is not None:
        return (
            {
                "priority": rule.get("priority", 0),
                "pattern": rule.get("pattern", ""),
                DIRECTIVES_KEY: code_to_directives(code),
            },
            True,
        )
    if DIRECTIVES_KEY in rule:
        return dict(rule), False
    return {**rule, DIRECTIVES_KEY: list(DEFAULT_LEGACY_DIRECTIVES)}, False


def migrate_rules(rules: Any) -> Tuple[Any, bool]:
    """Convert code-based meta robots rules to directive lists.

    *rules* may be a list, a mapping keyed by row id, or the JSON encoding of
    either. Returns the migrated rules (same container kind, keys kept) and
    whether any ``option`` code was converted.

    Raises ``ValueError`` for undecodable JSON and ``TypeError`` for other
    shapes; :func:`migrate_config` turns those into log entries.
    """
    if isinstance(rules, str):
        rules = json.loads(rules)

    if isinstance(rules, Mapping):
        migrated: Dict[Any, Any] = {}
        changed = False
        for key, rule in rules.items():
            migrated[key], converted = _migrate_rule(rule)
            changed = changed or converted
        return migrated, changed

    if isinstance(rules, list):
        pairs = [_migrate_rule(rule) for rule in rules]
        return [rule for rule, _ in pairs], any(converted for _, converted in pairs)

    raise TypeError(f"meta_robots rules must be a list or mapping, got {type(rules).__name__}")


def migrate_code_value(value: Any) -> Optional[List[str]]:
    """Directive list for a stored numeric code, or ``None`` when *value* is not a code."""
    if value in (None, "", 0, "0"):
        return None
    code = coerce_legacy_code(value)
    if code is None:
        return None
    return code_to_directives(code)


def migrate_config(data: Mapping[str, Any]) -> MigrationResult:
    """Migrate every legacy section of *data*; the input mapping is not modified."""
    result = MigrationResult(data=copy.deepcopy(dict(data)))

    rules = result.data.get(META_ROBOTS_KEY)
    if rules:
        try:
            migrated, changed = migrate_rules(rules)
        except (ValueError, TypeError) as exc:
            logger.warning("Skipping %s migration: %s", META_ROBOTS_KEY, exc)
        else:
            if changed:
                result.data[META_ROBOTS_KEY] = migrated
                result.migrated.append(META_ROBOTS_KEY)

    for key in CODE_KEYS:
        directives = migrate_code_value(result.data.get(key))
        if directives is not None:
            result.data[key] = directives
            result.migrated.append(key)

    if result.changed:
        logger.info("Migrated legacy robots configuration: %s", ", ".join(result.migrated))
    else:
        logger.debug("No legacy robots configuration found")
    return result


__all__ = ["MigrationResult", "migrate_code_value", "migrate_config", "migrate_rules"]
