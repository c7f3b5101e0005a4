"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for live storefront scenarios.

Key Features:
- One browser session per test (fresh context, fresh navigation)
- Page Object fixtures sharing a single BasePage per test
- Screenshot and URL attached to Allure on failure
- Logged-in and checkout-ready preconditions

================================================================================
"""

from typing import AsyncGenerator

import allure
import pytest
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from storefront_e2e.ui_testing.datasets import PRODUCTS, USERS
from storefront_e2e.ui_testing.framework.browser_manager import BrowserManager
from storefront_e2e.ui_testing.framework.config_loader import SessionSettings, load_settings
from storefront_e2e.ui_testing.framework.logger import init_logger
from storefront_e2e.ui_testing.framework.page_base import BasePage
from storefront_e2e.ui_testing.pages import CartPage, CheckoutPage, InventoryPage, LoginPage


# ================================================================================
# Session Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def settings() -> SessionSettings:
    """Settings read once for the whole run."""
    init_logger()
    return load_settings()


@pytest.fixture
async def browser_manager(settings: SessionSettings) -> AsyncGenerator[BrowserManager, None]:
    """
    Function-scoped browser manager.

    Each test owns its browser session exclusively; nothing is shared
    between tests.
    """
    async with BrowserManager(settings) as manager:
        yield manager


@pytest.fixture
async def page(request, browser_manager: BrowserManager) -> AsyncGenerator[Page, None]:
    """Fresh page in a fresh context; attaches diagnostics when the test fails."""
    page = await browser_manager.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            allure.attach(
                await page.screenshot(full_page=True),
                name="failure_screenshot",
                attachment_type=allure.attachment_type.PNG,
            )
            allure.attach(
                page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )
        except PlaywrightError as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def base_page(page: Page, settings: SessionSettings) -> BasePage:
    return BasePage(page, settings)


@pytest.fixture
def login_page(base_page: BasePage) -> LoginPage:
    return LoginPage(base_page)


@pytest.fixture
def inventory_page(base_page: BasePage) -> InventoryPage:
    return InventoryPage(base_page)


@pytest.fixture
def cart_page(base_page: BasePage) -> CartPage:
    return CartPage(base_page)


@pytest.fixture
def checkout_page(base_page: BasePage) -> CheckoutPage:
    return CheckoutPage(base_page)


# ================================================================================
# Precondition Fixtures
# ================================================================================

@pytest.fixture
async def logged_in(login_page: LoginPage, inventory_page: InventoryPage) -> InventoryPage:
    """Standard user logged in and looking at the catalog."""
    user = USERS["standard"]
    await login_page.navigate()
    await login_page.login(user.username, user.password)
    await inventory_page.assert_on_catalog()
    return inventory_page


@pytest.fixture
async def checkout_ready(
    logged_in: InventoryPage,
    cart_page: CartPage,
    checkout_page: CheckoutPage,
) -> CheckoutPage:
    """Backpack in the cart and the checkout information form open."""
    await cart_page.add_item(PRODUCTS["backpack"].name)
    await cart_page.go_to_cart()
    await cart_page.proceed_to_checkout()
    return checkout_page


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item for fixture teardown."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
