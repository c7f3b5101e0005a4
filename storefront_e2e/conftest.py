"""
================================================================================
Suite Pytest Configuration
================================================================================

Registers the project markers, tags collected items by directory and keeps
live browser scenarios out of a run unless they are asked for.

================================================================================
"""

import os

import pytest


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
        "markers", "e2e: End-to-end tests simulating user flows"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Live browser scenarios against the storefront"
    )
    config.addinivalue_line(
        "markers", "unit: Page layer tests against an in-memory page"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )
    config.addinivalue_line(
        "markers", "catalog: Tests related to the product catalog"
    )
    config.addinivalue_line(
        "markers", "cart: Tests related to the shopping cart"
    )
    config.addinivalue_line(
        "markers", "checkout: Tests related to the checkout flow"
    )


def _ui_enabled(config) -> bool:
    return config.getoption("--run-ui") or os.getenv("RUN_UI_TESTS", "").lower() in (
        "1",
        "true",
        "yes",
    )


def pytest_collection_modifyitems(config, items):
    """
    Tag items by directory.

    Live scenarios need a browser and network access, so they are skipped
    unless --run-ui or RUN_UI_TESTS=1 is given.
    """
    skip_ui = pytest.mark.skip(reason="live UI scenario: pass --run-ui or set RUN_UI_TESTS=1")
    run_ui = _ui_enabled(config)

    for item in items:
        path = str(item.path)

        # Auto-add 'ui' marker to tests in ui_testing directory
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
            if not run_ui:
                item.add_marker(skip_ui)

        # Auto-add 'unit' marker to tests in unit directory
        if f"{os.sep}unit{os.sep}" in path:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Storefront E2E Page Layer",
        f"Live UI scenarios: {'enabled' if _ui_enabled(config) else 'skipped'}",
        "=" * 60,
        "",
    ]
