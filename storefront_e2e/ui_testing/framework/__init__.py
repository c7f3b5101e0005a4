"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based primitive layer for the storefront page objects.

Components:
    - page_base: wait-then-act primitives and assertions
    - errors: structured failure types
    - wait_helpers: bounded polling
    - config_loader: YAML/env configuration and session settings
    - browser_manager: browser lifecycle management
    - logger: Loguru setup

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager
from .config_loader import ConfigLoader, ConfigurationError, SessionSettings, load_settings
from .errors import (
    ActionFailure,
    AssertionFailure,
    ElementNotVisible,
    InvalidOption,
    NavigationFailure,
    PageInteractionError,
    UrlAssertionFailure,
)
from .page_base import BasePage

__all__ = [
    "BasePage",
    "BrowserManager",
    "ConfigLoader",
    "ConfigurationError",
    "SessionSettings",
    "load_settings",
    "PageInteractionError",
    "ElementNotVisible",
    "ActionFailure",
    "AssertionFailure",
    "UrlAssertionFailure",
    "NavigationFailure",
    "InvalidOption",
]
