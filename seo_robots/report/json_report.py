# seo_robots/report/json_report.py

"""
Генерация JSON-отчёта для проекта seo_robots.

Сериализация объекта DirectiveReport в файл.
"""
import json
from pathlib import Path

from seo_robots.aggregator import DirectiveReport


def render_json(report: DirectiveReport, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: объект DirectiveReport
    :param output_path: путь к JSON-файлу
    :param pretty: форматировать с отступом 2
    :return: Path сохранённого файла

    Пример:
    ```python
    from seo_robots.aggregator import aggregate_report
    from seo_robots.report.json_report import render_json
    report_path = render_json(aggregate_report(["noindex", "nofollow"]), 'reports/robots.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report.to_dict(), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
