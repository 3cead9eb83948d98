# File: seo_robots/directive.py
"""
Structured robots directive.

A directive is a name (``noindex``, ``max-snippet``), an optional bot scope
(``googlebot``; empty means every bot) and an optional modification used by
advanced directives (``50``, ``large``, a timestamp). The textual form joins
the non-empty parts as ``bot:value:modification``.

The two-part form is ambiguous: ``max-snippet:50`` and ``googlebot:noindex``
look alike. :meth:`Directive.parse` resolves it with a single rule: when the
first part is a known advanced directive name the token reads as
``value:modification``, otherwise as ``bot:value``. A bot literally named
like an advanced directive therefore cannot be written in two-part form.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Collection, Dict, Final, Mapping

from seo_robots.catalog import ADVANCED_DIRECTIVES

KEY_VALUE: Final[str] = "value"
KEY_BOT: Final[str] = "bot"
KEY_MODIFICATION: Final[str] = "modification"

SEPARATOR: Final[str] = ":"


def _clean(raw: Any) -> str:
    return "" if raw is None else str(raw).strip()


@dataclass(frozen=True, slots=True)
class Directive:
    """One robots directive; all fields are trimmed strings, empty when unset."""

    value: str = ""
    bot: str = ""
    modification: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _clean(self.value))
        object.__setattr__(self, "bot", _clean(self.bot))
        object.__setattr__(self, "modification", _clean(self.modification))

    @property
    def is_empty(self) -> bool:
        return not self.value

    @property
    def is_global(self) -> bool:
        return not self.bot

    # ------------------------------------------------------------------ #
    # Text form                                                          #
    # ------------------------------------------------------------------ #

    @classmethod
    def parse(
        cls, text: str, known_advanced: Collection[str] = ADVANCED_DIRECTIVES
    ) -> "Directive":
        """Parse ``value``, ``value:modification``, ``bot:value`` or ``bot:value:modification``.

        Never raises; blank input gives an empty directive.
        """
        text = _clean(text)
        if not text:
            return cls()

        parts = text.split(SEPARATOR)
        if len(parts) == 1:
            return cls(value=parts[0])
        if len(parts) == 2:
            first, second = parts
            if first.strip().lower() in known_advanced:
                return cls(value=first, modification=second)
            return cls(bot=first, value=second)
        return cls(bot=parts[0], value=parts[1], modification=SEPARATOR.join(parts[2:]))

    def serialize(self) -> str:
        return SEPARATOR.join(part for part in (self.bot, self.value, self.modification) if part)

    def __str__(self) -> str:
        return self.serialize()

    # ------------------------------------------------------------------ #
    # Record form                                                        #
    # ------------------------------------------------------------------ #

    def to_record(self) -> Dict[str, str]:
        return {
            KEY_VALUE: self.value,
            KEY_BOT: self.bot,
            KEY_MODIFICATION: self.modification,
        }

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> "Directive":
        """Build a directive from a ``{value, bot, modification}`` mapping; missing keys are empty."""
        return cls(
            value=data.get(KEY_VALUE),
            bot=data.get(KEY_BOT),
            modification=data.get(KEY_MODIFICATION),
        )


__all__ = ["Directive", "KEY_BOT", "KEY_MODIFICATION", "KEY_VALUE", "SEPARATOR"]
