# File: tests/conftest.py
from pathlib import Path
from typing import Any, Dict, List

import pytest

from seo_robots.directive import Directive
from seo_robots.logger import init_logging


@pytest.fixture(autouse=True)
def reset_logger():
    """
    Restore the project logger after each test; CLI invocations bind its
    handler to the runner's temporary streams.
    """
    yield
    init_logging()


@pytest.fixture()
def structured_directives() -> List[Directive]:
    """
    Global directives plus a googlebot-scoped group.
    """
    return [
        Directive(value="noindex"),
        Directive(value="max-snippet", modification="50"),
        Directive(value="nofollow", bot="googlebot"),
        Directive(value="max-image-preview", bot="googlebot", modification="large"),
    ]


@pytest.fixture()
def legacy_config() -> Dict[str, Any]:
    """
    Stored configuration as written by releases that used integer codes.
    """
    return {
        "enabled": True,
        "meta_robots": {
            "_1600000000001": {"priority": 10, "pattern": "*/checkout/*", "option": "1"},
            "_1600000000002": {"priority": 5, "pattern": "*/search/*", "option": 6},
        },
        "https_meta_robots": "2",
        "paginated_robots_type": 99,
    }


@pytest.fixture()
def write_config(tmp_path):
    """
    Write *content* into a config file with the given suffix and return its path.
    """

    def _write(content: str, suffix: str = ".yaml") -> Path:
        path = tmp_path / f"config{suffix}"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
