"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and initialises logging.

================================================================================
"""

import pytest

from testsuites.ui_testing.framework.log_setup import init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

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

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "positive: Expected-success scenarios"
    )
    config.addinivalue_line(
        "markers", "negative: Expected-rejection scenarios"
    )
    config.addinivalue_line(
        "markers", "bug_validation: Documents a known application defect without enforcing it"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )
    config.addinivalue_line(
        "markers", "unit: Offline unit tests for the framework"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "login: Tests related to login/logout"
    )

    init_logger()


def pytest_collection_modifyitems(config, items):
    """Add domain markers based on where the test lives."""
    for item in items:
        if "ui_testing" in str(item.fspath):
            item.add_marker(pytest.mark.ui)

        if "unit" in item.nodeid.split("/"):
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Login Flow UI Test Suite",
        "=" * 60,
        "",
    ]
