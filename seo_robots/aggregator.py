# File: seo_robots/aggregator.py
"""seo_robots.aggregator: сводный отчёт по набору директив."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Sequence, TypedDict

from seo_robots.builder import build_meta_robots, build_x_robots
from seo_robots.collection import is_flat, to_structured
from seo_robots.presentation import category_of, describe
from seo_robots.validator import is_valid_directive_token, validate


class DirectiveInfo(TypedDict, total=False):
    """Информация об одной директиве из входного набора."""

    token: str
    value: str
    bot: str
    modification: str
    label: str
    category: str
    valid: bool


@dataclass(slots=True)
class DirectiveReport:
    """Результат разбора набора директив: записи, итоговые строки и ошибки проверки."""

    mode: str = "structured"
    directives: List[DirectiveInfo] = field(default_factory=list)
    meta_robots: str = ""
    x_robots_tag: str = ""
    valid: bool = True
    errors: List[str] = field(default_factory=list)

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта."""
        return json.dumps(asdict(self), ensure_ascii=False, indent=2 if pretty else None)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _describe_directives(items: Sequence[Any]) -> List[DirectiveInfo]:
    infos: List[DirectiveInfo] = []
    for directive in to_structured(items):
        if directive.is_empty:
            continue
        descriptor = describe(directive.value)
        token = directive.value.lower()
        if directive.modification:
            token = f"{token}:{directive.modification}"
        infos.append(
            {
                "token": directive.serialize(),
                "value": directive.value,
                "bot": directive.bot,
                "modification": directive.modification,
                "label": descriptor["label"] if descriptor else "",
                "category": category_of(directive.value) or "",
                "valid": is_valid_directive_token(token),
            }
        )
    return infos


def aggregate_report(items: Sequence[Any]) -> DirectiveReport:
    """Собирает все части отчёта в DirectiveReport."""
    result = validate(items)
    return DirectiveReport(
        mode="flat" if is_flat(items) else "structured",
        directives=_describe_directives(items),
        meta_robots=build_meta_robots(items),
        x_robots_tag=build_x_robots(items),
        valid=result.valid,
        errors=list(result.errors),
    )
