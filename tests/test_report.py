# File: tests/test_report.py
import json

from seo_robots.aggregator import DirectiveReport, aggregate_report
from seo_robots.report import render_html, render_json


def test_aggregate_flat_report():
    report = aggregate_report(["noindex", "googlebot:nofollow", "max-image-preview:huge"])

    assert report.mode == "flat"
    assert report.meta_robots == "NOINDEX, MAX-IMAGE-PREVIEW:HUGE, GOOGLEBOT: NOFOLLOW"
    assert report.x_robots_tag == "NOINDEX, MAX-IMAGE-PREVIEW:HUGE, googlebot: NOFOLLOW"
    assert not report.valid
    assert len(report.errors) == 1
    assert "none, standard, large" in report.errors[0]

    nofollow = report.directives[1]
    assert nofollow["bot"] == "googlebot"
    assert nofollow["label"] == "No Follow"
    assert nofollow["category"] == "crawling"
    assert nofollow["valid"] is True
    assert report.directives[2]["valid"] is False


def test_aggregate_structured_report(structured_directives):
    report = aggregate_report(structured_directives)
    assert report.mode == "structured"
    assert report.valid
    assert report.meta_robots == "NOINDEX, MAX-SNIPPET:50, NOFOLLOW, MAX-IMAGE-PREVIEW:large"
    assert [d["token"] for d in report.directives] == [
        "noindex",
        "max-snippet:50",
        "googlebot:nofollow",
        "googlebot:max-image-preview:large",
    ]


def test_report_json():
    report = DirectiveReport(meta_robots="NOINDEX")
    data = json.loads(report.json(pretty=True))
    assert data["meta_robots"] == "NOINDEX"
    assert data["valid"] is True


def test_render_json_file(tmp_path):
    report = aggregate_report(["noindex", "nofollow"])
    path = render_json(report, tmp_path / "reports" / "robots.json")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["meta_robots"] == "NOINDEX, NOFOLLOW"
    assert data["errors"] == []


def test_render_html_with_builtin_template(tmp_path):
    report = aggregate_report(["index", "noindex"])
    path = render_html(report, None, tmp_path / "robots.html")
    html = path.read_text(encoding="utf-8")
    assert "INDEX, NOINDEX" in html
    assert "Conflicting directives" in html
    assert "Max Image Preview" in html


def test_render_html_with_custom_template(tmp_path):
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "report.html.j2").write_text("<p>{{ meta_robots }}</p>", encoding="utf-8")
    path = render_html(aggregate_report(["noindex"]), templates, tmp_path / "out.html")
    assert path.read_text(encoding="utf-8") == "<p>NOINDEX</p>"
