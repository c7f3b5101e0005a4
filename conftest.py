"""
Repository-level pytest configuration.

Provides:
  - The --run-ui switch that enables live browser scenarios
  - Environment defaults for local runs (CI may override any of them)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--run-ui",
        action="store_true",
        default=False,
        help="Run live UI scenarios against the storefront (needs browsers installed)",
    )


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _local_env_defaults() -> Generator[None, None, None]:
    """Set environment defaults if not already provided by the user/CI."""
    defaults = {
        "UI_BASE_URL": "https://www.saucedemo.com",
        "UI_HEADLESS": "true",
        "UI_BROWSER": "chromium",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
