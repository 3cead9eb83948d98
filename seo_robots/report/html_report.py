# File: seo_robots/report/html_report.py
"""seo_robots.report.html_report: Генерация HTML-отчёта с помощью Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from jinja2 import BaseLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from seo_robots.aggregator import DirectiveReport
from seo_robots.presentation import get_directive_catalog

TEMPLATE_NAME = "report.html.j2"


def _loader(template_dir: Optional[Union[Path, str]]) -> BaseLoader:
    if template_dir is None:
        return PackageLoader("seo_robots", "templates")
    return FileSystemLoader(str(template_dir))


def render_html(
    report: DirectiveReport,
    template_dir: Optional[Union[Path, str]],
    output_path: Union[Path, str],
) -> Path:
    """Рендерит HTML-отчёт из шаблона и сохраняет его по указанному пути.

    Args:
        report: объект DirectiveReport.
        template_dir: директория с Jinja2-шаблонами; при ``None`` используется встроенный шаблон пакета.
        output_path: путь к итоговому HTML-файлу.

    Returns:
        Path до сохранённого HTML-файла.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=_loader(template_dir),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template(TEMPLATE_NAME)

    context: dict[str, Any] = {
        "mode": report.mode,
        "directives": report.directives,
        "meta_robots": report.meta_robots,
        "x_robots_tag": report.x_robots_tag,
        "valid": report.valid,
        "errors": report.errors,
        "catalog": get_directive_catalog(),
    }

    html_content = template.render(**context)
    output_path.write_text(html_content, encoding="utf-8")

    return output_path
