"""
Pytest configuration and fixtures for itemscan tests.
"""

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def sample_catalog():
    """Return the two-item catalog used across matching tests."""
    from itemscan import Catalog

    return Catalog.from_entries(
        [
            "Kinh Bạch Ngọc Bội - Thổ (cấp 2)",
            "Thúy Lựu Thạch Giới Chỉ (cấp 5)",
        ]
    )


@pytest.fixture(scope="session")
def catalog_path(fixtures_dir) -> Path:
    """Return path to the sample catalog file."""
    return fixtures_dir / "vatpham.txt"
