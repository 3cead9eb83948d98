# File: seo_robots/config.py
"""
Модуль для загрузки и валидации конфигурации robots-директив.
Используется Pydantic для описания схемы и проверки данных.

Конфигурация, записанная старыми версиями (целочисленные коды вместо
списков директив), читается прозрачно через :mod:`seo_robots.legacy`.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from seo_robots.builder import build_meta_robots, build_x_robots
from seo_robots.catalog import DEFAULT_LEGACY_DIRECTIVES
from seo_robots.collection import to_structured
from seo_robots.directive import Directive
from seo_robots.legacy import code_to_directives, coerce_legacy_code
from seo_robots.validator import ValidationResult, validate

DirectiveEntry = Union[str, Dict[str, Any]]


def _decode_directive_list(value: Any) -> Any:
    """Legacy code or JSON-encoded list → list of directive entries."""
    code = coerce_legacy_code(value)
    if code is not None:
        return code_to_directives(code)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return []
        if text.startswith("["):
            try:
                return json.loads(text)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Неправильный JSON списка директив: {exc}") from exc
        return [part.strip() for part in text.split(",") if part.strip()]
    return value


class MetaRobotsRule(BaseModel):
    """Правило meta robots для URL, совпадающих с шаблоном."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    priority: int = Field(0, description="Приоритет правила (чем больше, тем важнее).")
    pattern: str = Field("", description="Шаблон URL, к которому применяется правило.")
    meta_directives: List[DirectiveEntry] = Field(
        default_factory=lambda: list(DEFAULT_LEGACY_DIRECTIVES),
        description="Директивы: строки или записи {value, bot, modification}.",
    )

    @model_validator(mode="before")
    @classmethod
    def _read_legacy_option(cls, data: Any) -> Any:
        if isinstance(data, dict) and "meta_directives" not in data:
            code = coerce_legacy_code(data.get("option"))
            if code is not None:
                return {**data, "meta_directives": code_to_directives(code)}
        return data

    @field_validator("meta_directives", mode="before")
    def _decode_directives(cls, v: Any) -> Any:
        return _decode_directive_list(v)

    def directives(self) -> List[Directive]:
        return to_structured(self.meta_directives)

    def meta_robots(self) -> str:
        return build_meta_robots(self.meta_directives)

    def x_robots(self) -> str:
        return build_x_robots(self.meta_directives)

    def validate_directives(self) -> ValidationResult:
        return validate(self.meta_directives)


class RobotsConfig(BaseModel):
    """Конфигурация robots-директив одного сайта/магазина."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    enabled: bool = Field(True, description="Включена ли генерация robots-директив.")
    meta_robots: List[MetaRobotsRule] = Field(
        default_factory=list, description="Правила meta robots по шаблонам URL."
    )
    https_meta_robots: List[DirectiveEntry] = Field(
        default_factory=list, description="Директивы для HTTPS-страниц."
    )
    paginated_robots_type: List[DirectiveEntry] = Field(
        default_factory=list, description="Директивы для страниц пагинации."
    )
    noindex_nofollow_for_no_route: bool = Field(
        False, description="NOINDEX, NOFOLLOW для страниц 404."
    )

    @field_validator("meta_robots", mode="before")
    def _decode_rules(cls, v: Any) -> Any:
        if isinstance(v, str):
            try:
                v = json.loads(v) if v.strip() else []
            except json.JSONDecodeError as exc:
                raise ValueError(f"Неправильный JSON правил meta_robots: {exc}") from exc
        if isinstance(v, dict):
            return list(v.values())
        return v

    @field_validator("https_meta_robots", "paginated_robots_type", mode="before")
    def _decode_directive_fields(cls, v: Any) -> Any:
        return _decode_directive_list(v)

    def sorted_rules(self) -> List[MetaRobotsRule]:
        """Правила по убыванию приоритета; при равенстве сохраняется исходный порядок."""
        return sorted(self.meta_robots, key=lambda rule: -rule.priority)

    def summary(self) -> Dict[str, Any]:
        """Конфигурация вместе с вычисленными значениями meta/X-Robots для CLI."""
        data = self.model_dump()
        data["rendered"] = {
            "meta_robots": [
                {"pattern": rule.pattern, "meta": rule.meta_robots(), "x_robots": rule.x_robots()}
                for rule in self.sorted_rules()
            ],
            "https_meta_robots": build_meta_robots(self.https_meta_robots),
            "paginated_robots_type": build_meta_robots(self.paginated_robots_type),
        }
        return data


_DEFAULT_CFG = Path("configs/robots.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def _resolve(path: Union[str, Path, None]) -> Path:
    if path is None:
        if not _DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(_DEFAULT_CFG))
        return _DEFAULT_CFG
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))
    return path_obj


def read_config_file(path: Union[str, Path, None]) -> dict[str, Any]:
    """Читает YAML или JSON и возвращает «сырой» mapping без проверки схемы."""
    path_obj = _resolve(path)
    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def write_config_file(data: dict[str, Any], path: Union[str, Path], *, pretty: bool = True) -> Path:
    """Сохраняет mapping в YAML или JSON в зависимости от расширения файла."""
    path_obj = Path(path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)
    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        text = yaml.safe_dump(data, allow_unicode=True, sort_keys=False)
    elif suffix == ".json":
        text = json.dumps(data, ensure_ascii=False, indent=2 if pretty else None)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")
    path_obj.write_text(text, encoding="utf-8")
    return path_obj


def load_config(path: Union[str, Path, None]) -> RobotsConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект RobotsConfig.
    При отсутствии файла конфига бросает FileNotFoundError.
    """
    return RobotsConfig(**read_config_file(path))
