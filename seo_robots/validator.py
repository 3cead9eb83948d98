# File: seo_robots/validator.py
"""
Validation of robots directives against the catalog.

Two modes exist side by side:

* flat mode (:func:`validate_flat`, :func:`find_conflicts`) treats every
  token as global, since flat lists predate bot scoping;
* structured mode (:func:`validate_structured`) checks conflicts per bot.

Nothing here raises: every entry point reports problems through a
:class:`ValidationResult` and leaves the decision to the caller.
"""
from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from seo_robots.catalog import ADVANCED_RULES, BASIC_DIRECTIVES, CONFLICT_PAIRS
from seo_robots.collection import GLOBAL_BOT, is_flat, to_structured
from seo_robots.directive import SEPARATOR
from seo_robots.logger import logger

ConflictPair = Tuple[str, str]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a validation run."""

    valid: bool
    errors: Tuple[str, ...] = ()

    @classmethod
    def from_errors(cls, errors: Sequence[str]) -> "ValidationResult":
        return cls(valid=not errors, errors=tuple(errors))

    def to_dict(self) -> Dict[str, Any]:
        return {"valid": self.valid, "errors": list(self.errors)}

    def __bool__(self) -> bool:
        return self.valid


def is_valid_value(name: str, value: str) -> bool:
    """Check *value* against the rule of advanced directive *name*; unknown names fail."""
    rule = ADVANCED_RULES.get(name)
    return rule is not None and rule.accepts(value)


def is_valid_directive_token(token: str) -> bool:
    """True for a bare basic directive or a valid ``name:value`` advanced directive."""
    if not token:
        return False
    if token in BASIC_DIRECTIVES:
        return True
    if SEPARATOR in token:
        name, value = token.split(SEPARATOR, 1)
        if name in ADVANCED_RULES:
            return is_valid_value(name, value)
    return False


def _conflicts_among(names: Iterable[str]) -> List[ConflictPair]:
    present = set(names)
    return [(first, second) for first, second in CONFLICT_PAIRS if first in present and second in present]


def find_conflicts(directives: Iterable[str]) -> List[ConflictPair]:
    """Return every catalog conflict pair present in a flat directive list."""
    return _conflicts_among(token.strip().split(SEPARATOR, 1)[0] for token in directives)


def _value_error(name: str, value: str, bot_label: str = "") -> str:
    scope = f' for bot "{bot_label}"' if bot_label else ""
    return (
        f'Invalid value "{value}" for directive "{name}"{scope}: '
        f"expected {ADVANCED_RULES[name].expectation}."
    )


def _conflict_error(pair: ConflictPair, bot_label: str = "") -> str:
    first, second = pair
    scope = f' for bot "{bot_label}"' if bot_label else ""
    return f'Conflicting directives "{first}" and "{second}"{scope} cannot be used together.'


def validate_flat(directives: Sequence[str]) -> ValidationResult:
    """Validate a flat (legacy) directive list: advanced values, then global conflicts."""
    errors: List[str] = []
    for token in directives:
        token = token.strip()
        if SEPARATOR not in token:
            continue
        name, value = token.split(SEPARATOR, 1)
        # bot:name:value
        if name not in ADVANCED_RULES and SEPARATOR in value:
            name, value = value.split(SEPARATOR, 1)
        if name in ADVANCED_RULES and not is_valid_value(name, value):
            errors.append(_value_error(name, value))

    errors.extend(_conflict_error(pair) for pair in find_conflicts(directives))

    if errors:
        logger.debug("Flat validation failed with %d error(s)", len(errors))
    return ValidationResult.from_errors(errors)


def validate_structured(directives: Iterable[Any]) -> ValidationResult:
    """Validate structured directives, scoping conflict checks to each bot group."""
    errors: List[str] = []
    groups: "OrderedDict[str, List[str]]" = OrderedDict()

    for directive in to_structured(directives):
        if directive.is_empty:
            continue
        bot = directive.bot.lower() or GLOBAL_BOT
        value = directive.value.lower()
        groups.setdefault(bot, []).append(value)

        if value in ADVANCED_RULES and not is_valid_value(value, directive.modification):
            errors.append(_value_error(value, directive.modification, _bot_label(bot)))

    for bot, values in groups.items():
        errors.extend(_conflict_error(pair, _bot_label(bot)) for pair in _conflicts_among(values))

    if errors:
        logger.debug("Structured validation failed with %d error(s)", len(errors))
    return ValidationResult.from_errors(errors)


def validate(directives: Sequence[Any]) -> ValidationResult:
    """Validate either collection shape with the matching mode."""
    if is_flat(directives):
        return validate_flat(directives)
    return validate_structured(directives)


def _bot_label(bot: str) -> str:
    return "" if bot == GLOBAL_BOT else bot


__all__ = [
    "GLOBAL_BOT",
    "ValidationResult",
    "find_conflicts",
    "is_valid_directive_token",
    "is_valid_value",
    "validate",
    "validate_flat",
    "validate_structured",
]
