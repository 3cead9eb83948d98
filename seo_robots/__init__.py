# seo_robots/__init__.py
"""
seo_robots package initializer.
Robots directive rule engine: parsing, validation and rendering of
meta robots / X-Robots-Tag values. Defines package version and exposes CLI.
"""
__version__ = "2.0.0"

from seo_robots.builder import (
    build_from_flat,
    build_from_structured,
    build_meta_robots,
    build_x_robots,
    build_x_robots_from_structured,
    convert_legacy_flat_to_structured,
)
from seo_robots.directive import Directive
from seo_robots.legacy import code_to_directives
from seo_robots.validator import (
    ValidationResult,
    find_conflicts,
    is_valid_directive_token,
    validate,
    validate_flat,
    validate_structured,
)

# Expose CLI entry point
from seo_robots.cli import cli  # noqa: E402

__all__ = [
    "Directive",
    "ValidationResult",
    "__version__",
    "build_from_flat",
    "build_from_structured",
    "build_meta_robots",
    "build_x_robots",
    "build_x_robots_from_structured",
    "cli",
    "code_to_directives",
    "convert_legacy_flat_to_structured",
    "find_conflicts",
    "is_valid_directive_token",
    "validate",
    "validate_flat",
    "validate_structured",
]
