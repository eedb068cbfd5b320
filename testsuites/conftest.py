"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers, wires up logging and tags tests by directory.

================================================================================
"""

import pytest

from autotest_tools.common import init_logger, shutdown_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers and logging."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests against the live application"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI tests that need a browser"
    )
    config.addinivalue_line(
        "markers", "unit: Framework unit tests, no browser needed"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )
    config.addinivalue_line(
        "markers", "inventory: Tests related to the inventory page"
    )

    init_logger()


def pytest_unconfigure(config):
    """Flush log files at the end of the run."""
    shutdown_logger()


def pytest_collection_modifyitems(config, items):
    """Auto-add `ui` / `unit` markers by directory."""
    for item in items:
        if "ui_testing" in str(item.fspath):
            item.add_marker(pytest.mark.ui)

        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Swag Labs UI Automation Suite",
        "=" * 60,
        "",
    ]
