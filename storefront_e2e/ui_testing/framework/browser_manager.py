"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI scenarios.

Features:
    - One Playwright instance and browser per manager
    - Fresh, isolated context for every page (no state carried across tests)
    - Settings-driven launch (headless, browser type, default timeouts)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    Playwright,
    async_playwright,
)

from .config_loader import SessionSettings, load_settings


class BrowserManager:
    """
    Manages the browser used by one test session.

    Usage:
        async with BrowserManager(settings) as manager:
            page = await manager.new_page()
            await page.goto(settings.base_url)
    """

    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "args": ["--ignore-certificate-errors"],
    }

    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(self, settings: Optional[SessionSettings] = None):
        """
        Initialize browser manager.

        Args:
            settings: Session settings; read from config/env when omitted
        """
        self.settings = settings or load_settings()

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def start(self) -> None:
        """Start Playwright and launch the configured browser."""
        self._playwright = await async_playwright().start()

        launcher = getattr(self._playwright, self.settings.browser, None)
        if launcher is None:
            await self._playwright.stop()
            self._playwright = None
            raise ValueError(f"Unknown browser type: {self.settings.browser}")

        self._browser = await launcher.launch(
            **self.DEFAULT_LAUNCH_OPTIONS,
            headless=self.settings.headless,
        )
        logger.debug(
            f"Browser started: {self.settings.browser} "
            f"(headless={self.settings.headless})"
        )

    async def close(self) -> None:
        """Close all contexts, the browser and Playwright."""
        for context in self._contexts:
            try:
                await context.close()
            except PlaywrightError as e:
                logger.warning(f"Failed to close browser context: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create a new isolated browser context.

        Args:
            **options: Overrides for DEFAULT_CONTEXT_OPTIONS

        Returns:
            New BrowserContext with the configured default timeouts
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context = await self._browser.new_context(
            **{**self.DEFAULT_CONTEXT_OPTIONS, **options}
        )
        context.set_default_timeout(self.settings.default_timeout_ms)
        context.set_default_navigation_timeout(self.settings.navigation_timeout_ms)
        self._contexts.append(context)
        return context

    async def new_page(self, **context_options: Any) -> Page:
        """Create a page in a fresh context."""
        context = await self.new_context(**context_options)
        return await context.new_page()

    @property
    def browser(self) -> Optional[Browser]:
        return self._browser


__all__ = [
    "BrowserManager",
]
