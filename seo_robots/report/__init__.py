# File: seo_robots/report/__init__.py
"""seo_robots.report: генерация отчётов (JSON и HTML) по набору директив."""

from .html_report import render_html
from .json_report import render_json

__all__ = ["render_json", "render_html"]
