"""
================================================================================
Login Feature UI Tests
================================================================================

Covers the login screen: branding, every valid account, and the exact error
message for each invalid or incomplete credential pair.

================================================================================
"""

import allure
import pytest

from storefront_e2e.ui_testing.datasets import INVALID_USERS, USERS, VALID_USERS
from storefront_e2e.ui_testing.pages import LoginPage


@allure.epic("UI Testing")
@allure.feature("Authentication")
@pytest.mark.auth
class TestLogin:
    """Login UI test suite."""

    @allure.story("Display")
    @allure.title("Login screen shows the storefront branding")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P1
    @pytest.mark.smoke
    @pytest.mark.asyncio
    async def test_login_screen_displayed(self, login_page: LoginPage):
        await login_page.navigate()
        await login_page.assert_on_login_screen()

    @allure.story("Happy Path")
    @allure.title("Login succeeds for every valid account")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    @pytest.mark.smoke
    @pytest.mark.asyncio
    @pytest.mark.parametrize("user", VALID_USERS, ids=lambda user: user.username)
    async def test_login_success(self, login_page: LoginPage, user):
        await login_page.navigate()
        await login_page.login(user.username, user.password)
        await login_page.assert_login_succeeded()

    @allure.story("Negative Path")
    @allure.title("Login shows the expected error for invalid credentials")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.regression
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "user",
        INVALID_USERS,
        ids=lambda user: f"{user.username or 'no-username'}:{'pw' if user.password else 'no-password'}",
    )
    async def test_login_failure(self, login_page: LoginPage, user):
        await login_page.navigate()
        await login_page.login(user.username, user.password)
        await login_page.assert_login_failed(user.expected_error)

    @allure.story("Form Validation")
    @allure.title("Missing username wins over a valid password")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.asyncio
    async def test_login_missing_username(self, login_page: LoginPage):
        user = USERS["without_username"]

        await login_page.navigate()
        await login_page.login(user.username, user.password)
        await login_page.assert_login_failed("Epic sadface: Username is required")
