"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest

from seasonplan.domain.types import DateRange, WeekdaySelection


def pytest_configure(config):
    """Configure pytest."""
    # Add custom markers
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )


@pytest.fixture
def mon_wed_fri():
    """Cooking on Monday, Wednesday and Friday."""
    return WeekdaySelection.from_mask("1010100")


@pytest.fixture
def january_2025():
    """Season of four full Mon-Fri weeks, 2025-01-06 (Monday) to 2025-01-31 (Friday)."""
    return DateRange(date(2025, 1, 6), date(2025, 1, 31))
