"""
Shared test fixtures for kbd-fixtures tests.
"""

from __future__ import annotations

import pytest

from kbd_fixtures.customizer import LayoutCustomizer, get_customizer
from kbd_fixtures.layout import Layout
from kbd_fixtures.layouts.swiss import swiss


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs the config-to-files workflow)",
    )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def swiss_layout() -> Layout:
    """Swiss layout with the neutral customizer (placeholders unresolved)."""
    return swiss()


@pytest.fixture
def de_ch() -> LayoutCustomizer:
    return get_customizer("de_CH")


@pytest.fixture
def fr_ch() -> LayoutCustomizer:
    return get_customizer("fr_CH")
