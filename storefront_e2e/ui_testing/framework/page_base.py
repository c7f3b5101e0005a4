"""
================================================================================
Base Page
================================================================================

Primitive layer shared by every page object.

Provides:
    - Navigation relative to the configured origin
    - Explicit wait-then-act primitives (click, fill, select, press)
    - Text, field value, URL, visibility and count assertions
    - Uniform error wrapping (see errors.py)

Every single-element primitive first polls until the FIRST element matching
the selector is visible, then acts on it. Locators are resolved on every call
and never cached, because nodes are replaced on navigation and re-render.
No primitive retries an action: the bounded wait is the only patience.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from typing import List, Optional

import allure
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page

from .config_loader import SessionSettings, load_settings
from .errors import (
    ActionFailure,
    AssertionFailure,
    ElementNotVisible,
    NavigationFailure,
    UrlAssertionFailure,
)
from .formatting import normalize_text
from .logger import mask_secret
from .wait_helpers import WaitTimeoutError, poll_until


_ABSOLUTE_URL = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


class BasePage:
    """
    Primitive operations over a single browser session.

    Page objects hold a reference to one instance instead of inheriting from
    it; the only state kept here is the session handle and the settings.

    Usage:
        base = BasePage(page, settings)
        await base.navigate("/")
        await base.fill("#user-name", "standard_user")
        await base.click("#login-button")
        await base.assert_url_contains("inventory")
    """

    def __init__(
        self,
        page: Page,
        settings: Optional[SessionSettings] = None,
    ):
        """
        Initialize the primitive layer.

        Args:
            page: Playwright Page owned by the current test
            settings: Session settings; read from config/env when omitted
        """
        self.page = page
        self.settings = settings or load_settings()

    @property
    def base_url(self) -> str:
        return self.settings.base_url

    @property
    def current_url(self) -> str:
        return self.page.url

    def _timeout(self, timeout_ms: Optional[int]) -> int:
        return self.settings.default_timeout_ms if timeout_ms is None else timeout_ms

    def resolve_url(self, target: str) -> str:
        """Join a relative target to the base origin; absolute URLs pass through."""
        if _ABSOLUTE_URL.match(target):
            return target
        return f"{self.base_url.rstrip('/')}/{target.lstrip('/')}"

    # =========================================================================
    # Navigation and Lookup
    # =========================================================================

    async def navigate(self, target: str = "/") -> None:
        """
        Navigate the browser to `target`.

        Args:
            target: Absolute URL or path relative to the base origin

        Raises:
            NavigationFailure: When the driver reports an error or times out
        """
        url = self.resolve_url(target)
        with allure.step(f"Navigate to {url}"):
            try:
                await self.page.goto(url, timeout=self.settings.navigation_timeout_ms)
            except PlaywrightError as e:
                logger.error(f"Navigation to {url} failed: {e}")
                raise NavigationFailure(target, url, cause=e) from e
            logger.debug(f"Navigated to: {url}")

    def locate(self, selector: str) -> Locator:
        """Return a lazy locator; nothing is resolved until it is acted on."""
        return self.page.locator(selector)

    async def wait_for(
        self,
        selector: str,
        timeout_ms: Optional[int] = None,
    ) -> Locator:
        """
        Poll until the first element matching `selector` is visible.

        Args:
            selector: Element selector
            timeout_ms: Wait budget, configured default when None

        Returns:
            Locator for the first matching element

        Raises:
            ElementNotVisible: When the element is not visible in time
        """
        timeout_ms = self._timeout(timeout_ms)
        locator = self.locate(selector).first

        async def _visible():
            return await locator.is_visible(), None

        try:
            await poll_until(
                _visible,
                timeout_ms=timeout_ms,
                interval_ms=self.settings.poll_interval_ms,
                description=f"'{selector}' to be visible",
            )
        except WaitTimeoutError as e:
            logger.error(f"Element '{selector}' not visible within {timeout_ms}ms")
            raise ElementNotVisible(selector, timeout_ms, cause=e.last_error or e) from e
        return locator

    # =========================================================================
    # Actions
    # =========================================================================

    async def click(self, selector: str, timeout_ms: Optional[int] = None) -> None:
        """Wait for `selector`, then click it."""
        with allure.step(f"Click: {selector}"):
            try:
                locator = await self.wait_for(selector, timeout_ms)
                await locator.click(timeout=self._timeout(timeout_ms))
            except (ElementNotVisible, PlaywrightError) as e:
                logger.error(f"Error clicking element '{selector}': {e}")
                raise ActionFailure("click", selector, cause=e) from e
            logger.debug(f"Clicked: {selector}")

    async def fill(
        self,
        selector: str,
        value: str,
        timeout_ms: Optional[int] = None,
    ) -> None:
        """Wait for `selector`, then replace its content with `value`."""
        shown = mask_secret(selector, value)
        with allure.step(f"Fill {selector}: {shown}"):
            try:
                locator = await self.wait_for(selector, timeout_ms)
                await locator.fill(value, timeout=self._timeout(timeout_ms))
            except (ElementNotVisible, PlaywrightError) as e:
                logger.error(f"Error filling field '{selector}' with '{shown}': {e}")
                raise ActionFailure("fill", selector, cause=e) from e
            logger.debug(f"Filled {selector} with '{shown}'")

    async def select_option(
        self,
        selector: str,
        value: str,
        timeout_ms: Optional[int] = None,
    ) -> None:
        """Wait for a <select>, then choose the option whose value is `value`."""
        with allure.step(f"Select '{value}' in {selector}"):
            try:
                locator = await self.wait_for(selector, timeout_ms)
                await locator.select_option(value=value, timeout=self._timeout(timeout_ms))
            except (ElementNotVisible, PlaywrightError) as e:
                logger.error(f"Error selecting '{value}' in '{selector}': {e}")
                raise ActionFailure("select", selector, cause=e) from e

    async def press(
        self,
        selector: str,
        key: str,
        timeout_ms: Optional[int] = None,
    ) -> None:
        """Wait for `selector`, then send a key press to it."""
        with allure.step(f"Press {key} in {selector}"):
            try:
                locator = await self.wait_for(selector, timeout_ms)
                await locator.press(key, timeout=self._timeout(timeout_ms))
            except (ElementNotVisible, PlaywrightError) as e:
                logger.error(f"Error pressing {key} in '{selector}': {e}")
                raise ActionFailure("press", selector, cause=e) from e

    # =========================================================================
    # Reads
    # =========================================================================

    async def read_text(self, selector: str, timeout_ms: Optional[int] = None) -> str:
        """Wait for `selector` and return its normalized text."""
        locator = await self.wait_for(selector, timeout_ms)
        try:
            return normalize_text(await locator.text_content())
        except PlaywrightError as e:
            raise ActionFailure("read", selector, cause=e) from e

    async def read_all(self, selector: str) -> List[str]:
        """
        Read the text of every element currently matching `selector`.

        Does not wait. An empty list is a valid answer, not an error.
        """
        try:
            texts = await self.locate(selector).all_text_contents()
        except PlaywrightError as e:
            logger.error(f"Error getting text contents from '{selector}': {e}")
            raise ActionFailure("read", selector, cause=e) from e
        return [normalize_text(text) for text in texts]

    # =========================================================================
    # Assertions
    # =========================================================================

    async def assert_text(
        self,
        selector: str,
        expected: str,
        timeout_ms: Optional[int] = None,
    ) -> None:
        """
        Assert the first match of `selector` shows exactly `expected`.

        Text is re-read until it matches or the budget runs out, so widgets
        that update after render (badges, messages) are handled.

        Raises:
            AssertionFailure: With the last text seen, or no actual value
                when the element never became visible
        """
        timeout_ms = self._timeout(timeout_ms)
        expected = normalize_text(expected)
        with allure.step(f"Assert text of {selector} == '{expected}'"):
            try:
                locator = await self.wait_for(selector, timeout_ms)
            except ElementNotVisible as e:
                raise AssertionFailure(
                    selector, expected, timeout_ms=timeout_ms, cause=e
                ) from e

            async def _matches():
                text = normalize_text(await locator.text_content())
                return text == expected, text

            try:
                await poll_until(
                    _matches,
                    timeout_ms=timeout_ms,
                    interval_ms=self.settings.poll_interval_ms,
                    description=f"'{selector}' to have text '{expected}'",
                )
            except WaitTimeoutError as e:
                logger.error(
                    f"Element '{selector}' expected '{expected}', got '{e.last_result}'"
                )
                raise AssertionFailure(
                    selector,
                    expected,
                    actual=e.last_result,
                    timeout_ms=timeout_ms,
                    cause=e.last_error or e,
                ) from e

    async def assert_value(
        self,
        selector: str,
        expected: str,
        timeout_ms: Optional[int] = None,
    ) -> None:
        """Assert the first match of `selector` is a field holding exactly `expected`."""
        timeout_ms = self._timeout(timeout_ms)
        with allure.step(f"Assert value of {selector} == '{expected}'"):
            try:
                locator = await self.wait_for(selector, timeout_ms)
            except ElementNotVisible as e:
                raise AssertionFailure(
                    selector, expected, timeout_ms=timeout_ms, cause=e
                ) from e

            async def _matches():
                value = await locator.input_value()
                return value == expected, value

            try:
                await poll_until(
                    _matches,
                    timeout_ms=timeout_ms,
                    interval_ms=self.settings.poll_interval_ms,
                    description=f"'{selector}' to hold '{expected}'",
                )
            except WaitTimeoutError as e:
                logger.error(
                    f"Field '{selector}' expected '{expected}', got '{e.last_result}'"
                )
                raise AssertionFailure(
                    selector,
                    expected,
                    actual=e.last_result,
                    timeout_ms=timeout_ms,
                    cause=e.last_error or e,
                ) from e

    async def assert_url_contains(
        self,
        substring: str,
        timeout_ms: Optional[int] = None,
    ) -> None:
        """
        Poll the current URL until it contains `substring` literally.

        Raises:
            UrlAssertionFailure: With the last URL seen
        """
        timeout_ms = self._timeout(timeout_ms)
        pattern = re.compile(re.escape(substring))

        async def _matches():
            url = self.page.url
            return pattern.search(url) is not None, url

        with allure.step(f"Assert URL contains '{substring}'"):
            try:
                await poll_until(
                    _matches,
                    timeout_ms=timeout_ms,
                    interval_ms=self.settings.poll_interval_ms,
                    description=f"URL to contain '{substring}'",
                )
            except WaitTimeoutError as e:
                actual_url = self.page.url
                logger.error(f"URL does not contain '{substring}'. Current URL: {actual_url}")
                raise UrlAssertionFailure(
                    substring, actual_url, timeout_ms=timeout_ms, cause=e
                ) from e

    async def assert_hidden(
        self,
        selector: str,
        timeout_ms: Optional[int] = None,
    ) -> None:
        """
        Assert no element matching `selector` is visible.

        Returns as soon as nothing matches; only a still-visible element
        makes this wait, up to the budget.
        """
        timeout_ms = self._timeout(timeout_ms)
        locator = self.locate(selector)

        async def _hidden():
            visible = 0
            for index in range(await locator.count()):
                if await locator.nth(index).is_visible():
                    visible += 1
            return visible == 0, visible

        with allure.step(f"Assert {selector} is hidden"):
            try:
                await poll_until(
                    _hidden,
                    timeout_ms=timeout_ms,
                    interval_ms=self.settings.poll_interval_ms,
                    description=f"'{selector}' to be hidden",
                )
            except WaitTimeoutError as e:
                raise AssertionFailure(
                    selector,
                    "<hidden>",
                    actual=f"<{e.last_result} visible>",
                    timeout_ms=timeout_ms,
                    cause=e.last_error or e,
                ) from e

    async def assert_count(
        self,
        selector: str,
        expected: int,
        timeout_ms: Optional[int] = None,
    ) -> None:
        """Poll until exactly `expected` elements match `selector`."""
        timeout_ms = self._timeout(timeout_ms)
        locator = self.locate(selector)

        async def _count():
            count = await locator.count()
            return count == expected, count

        with allure.step(f"Assert {selector} count == {expected}"):
            try:
                await poll_until(
                    _count,
                    timeout_ms=timeout_ms,
                    interval_ms=self.settings.poll_interval_ms,
                    description=f"'{selector}' count to be {expected}",
                )
            except WaitTimeoutError as e:
                raise AssertionFailure(
                    selector,
                    expected,
                    actual=e.last_result,
                    timeout_ms=timeout_ms,
                    cause=e.last_error or e,
                ) from e


__all__ = [
    "BasePage",
]
