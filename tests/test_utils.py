# File: tests/test_utils.py
import logging
from datetime import datetime, timezone

import pytest

from seo_robots.logger import configure, init_logging
from seo_robots.utils import parse_datetime, parse_integer, remove_duplicates


def test_remove_duplicates_keeps_first_occurrence():
    assert remove_duplicates(["NOINDEX", "FOLLOW", "NOINDEX", "MAX-SNIPPET:50"]) == [
        "NOINDEX",
        "FOLLOW",
        "MAX-SNIPPET:50",
    ]


@pytest.mark.parametrize(
    "value,expected",
    [
        ("50", 50),
        (" -1 ", -1),
        ("+7", 7),
        ("0", 0),
        ("1.5", None),
        ("1_000", None),
        ("\u0665\u0660", None),
        ("abc", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_integer(value, expected):
    assert parse_integer(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2025-12-31", datetime(2025, 12, 31, tzinfo=timezone.utc)),
        ("2025-12-31T23:59:59Z", datetime(2025, 12, 31, 23, 59, 59, tzinfo=timezone.utc)),
        ("2025-12-31T23:59:59+02:00", datetime(2025, 12, 31, 21, 59, 59, tzinfo=timezone.utc)),
        ("Wed, 31 Dec 2025 23:59:59 GMT", datetime(2025, 12, 31, 23, 59, 59, tzinfo=timezone.utc)),
    ],
)
def test_parse_datetime_formats(value, expected):
    assert parse_datetime(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        "",
        "   ",
        None,
        "tomorrow",
        "2025-13-45",
        "31/12/2025",
        "0001-01-01T00:00:00+01:00",
        "9999-12-31T23:59:59-01:00",
    ],
)
def test_parse_datetime_rejects(value):
    assert parse_datetime(value) is None


def test_configure_adds_rotating_file_handler(tmp_path):
    log_file = tmp_path / "robots.log"
    lg = configure(level="DEBUG", log_file=log_file)

    assert lg.level == logging.DEBUG
    assert len(lg.handlers) == 2
    assert not lg.propagate

    lg.debug("Rendered %d directives", 3)
    for handler in lg.handlers:
        handler.flush()
    assert "Rendered 3 directives" in log_file.read_text(encoding="utf-8")


def test_init_logging_replaces_handlers():
    configure(level="INFO", replace_handlers=False)
    lg = init_logging()
    assert len(lg.handlers) == 1
    assert lg.level == logging.WARNING
