"""
================================================================================
Login Page Object
================================================================================

Root screen of the storefront.

States:
    Unauthenticated --login(valid)--> Authenticated (catalog URL)
    Unauthenticated --login(invalid)--> Unauthenticated, error shown

`login()` only performs the action; outcome checks are separate calls.

================================================================================
"""

from __future__ import annotations

import allure

from storefront_e2e.ui_testing.framework.page_base import BasePage


class LoginPage:
    """Login screen page object."""

    BRANDING_TEXT = "Swag Labs"
    CATALOG_URL_SEGMENT = "inventory"

    _SELECTORS = {
        "logo": ".login_logo",
        "username": "#user-name",
        "password": "#password",
        "submit": "#login-button",
        "error": '[data-test="error"]',
    }

    def __init__(self, base: BasePage):
        self._base = base

    @allure.step("Open login page")
    async def navigate(self) -> None:
        await self._base.navigate("/")

    @allure.step("Verify login screen is displayed")
    async def assert_on_login_screen(self) -> None:
        await self._base.assert_text(self._SELECTORS["logo"], self.BRANDING_TEXT)

    @allure.step("Login (username={username})")
    async def login(self, username: str, password: str) -> None:
        """Fill both credential fields and submit."""
        await self._base.fill(self._SELECTORS["username"], username)
        await self._base.fill(self._SELECTORS["password"], password)
        await self._base.click(self._SELECTORS["submit"])

    @allure.step("Verify login succeeded")
    async def assert_login_succeeded(self) -> None:
        # performance_glitch_user redirects after several seconds
        await self._base.assert_url_contains(
            self.CATALOG_URL_SEGMENT, self._base.settings.extended_timeout_ms
        )

    @allure.step("Verify login error: {expected_message}")
    async def assert_login_failed(self, expected_message: str) -> None:
        await self._base.assert_text(self._SELECTORS["error"], expected_message)
