"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and resets library-wide state between tests.

================================================================================
"""

from pathlib import Path

import pytest

from webui_kit.common.config_loader import ConfigLoader
from webui_kit.common.global_config import reset_settings
from webui_kit.framework.session_registry import clear_default_session


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - core waiting and resolution rules"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "unit: Tests running against the in-memory fake session"
    )
    config.addinivalue_line(
        "markers", "ui: Tests driving a real browser through Playwright"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-mark tests by directory."""
    for item in items:
        parts = Path(str(item.fspath)).parts
        if "unit" in parts:
            item.add_marker(pytest.mark.unit)

        if "ui_testing" in parts:
            item.add_marker(pytest.mark.ui)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "webui_kit Test Suite",
        "=" * 60,
        "",
    ]


@pytest.fixture(autouse=True)
def _isolated_library_state():
    """Every test starts without a default session or cached settings."""
    clear_default_session()
    reset_settings()
    ConfigLoader.reset()
    yield
    clear_default_session()
    reset_settings()
    ConfigLoader.reset()
