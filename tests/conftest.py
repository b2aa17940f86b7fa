"""
Pytest configuration and shared fixtures for Stand Finder tests.

This module provides:
- Small hand-made catalogs for matcher tests
- Catalog file factory
- CI environment detection (Kivy tests need a display)
"""

import json
import os

import pytest

from tests.helpers import make_entry


# ---------------------------------------------------------------------------
# CI Environment Detection
# ---------------------------------------------------------------------------

def is_ci_environment() -> bool:
    """
    Detect whether running in a CI environment.

    Avoids false positives from CI=false or empty values.
    """
    truthy_values = ("true", "1", "yes")
    for var in ("CI", "GITHUB_ACTIONS", "GITLAB_CI"):
        if os.environ.get(var, "").lower() in truthy_values:
            return True
    return False


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def small_catalog():
    """Three distinct stands, no ties for the queries used in tests."""
    return (
        make_entry("Low", 0, 0, 0, 0, 0, 0),
        make_entry("Mid", 2, 2, 2, 2, 2, 2),
        make_entry("High", 5, 5, 5, 5, 5, 5),
    )


@pytest.fixture
def catalog_file(tmp_path):
    """Factory writing a catalog JSON file and returning its path."""

    def _write(records, name="stands.json"):
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write
