"""
================================================================================
Checkout Page Object
================================================================================

States:
    InfoForm --fill_info(valid)--> Overview --finish--> Confirmation
    InfoForm --fill_info(missing field)--> InfoForm, error shown

Validation runs first name -> last name -> postal code; the first missing
field decides the message, however many are missing.

================================================================================
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Union

import allure

from storefront_e2e.ui_testing.framework.formatting import format_price
from storefront_e2e.ui_testing.framework.page_base import BasePage


class CheckoutPage:
    """Checkout flow page object (information, overview, confirmation)."""

    INFO_TITLE = "Checkout: Your Information"
    OVERVIEW_TITLE = "Checkout: Overview"
    CONFIRMATION_HEADER = "Thank you for your order!"
    CONFIRMATION_BODY = (
        "Your order has been dispatched, and will arrive just as fast as the pony can get there!"
    )

    FIRST_NAME_REQUIRED = "Error: First Name is required"
    LAST_NAME_REQUIRED = "Error: Last Name is required"
    POSTAL_CODE_REQUIRED = "Error: Postal Code is required"

    _SELECTORS = {
        "title": ".title",
        "first_name": "#first-name",
        "last_name": "#last-name",
        "postal_code": "#postal-code",
        "continue": "#continue",
        "finish": "#finish",
        "complete_header": ".complete-header",
        "complete_text": ".complete-text",
        "error": ".error-message-container",
        "item_name": ".inventory_item_name",
        "item_price": ".inventory_item_price",
        "item_quantity": ".cart_quantity",
    }

    _URL_SEGMENTS = {
        "info": "checkout-step-one",
        "overview": "checkout-step-two",
        "complete": "checkout-complete",
    }

    def __init__(self, base: BasePage):
        self._base = base

    @classmethod
    def expected_validation_error(
        cls,
        first_name: str,
        last_name: str,
        postal_code: str,
    ) -> Optional[str]:
        """Message the form shows for these inputs, or None when all are present."""
        for value, message in (
            (first_name, cls.FIRST_NAME_REQUIRED),
            (last_name, cls.LAST_NAME_REQUIRED),
            (postal_code, cls.POSTAL_CODE_REQUIRED),
        ):
            if not value:
                return message
        return None

    @allure.step("Verify checkout information form")
    async def assert_on_info_form(self) -> None:
        await self._base.assert_url_contains(self._URL_SEGMENTS["info"])
        await self._base.assert_text(self._SELECTORS["title"], self.INFO_TITLE)

    @allure.step("Verify checkout overview")
    async def assert_on_overview(self) -> None:
        await self._base.assert_url_contains(self._URL_SEGMENTS["overview"])
        await self._base.assert_text(self._SELECTORS["title"], self.OVERVIEW_TITLE)

    @allure.step("Fill checkout info ({first_name}, {last_name}, {postal_code})")
    async def fill_info(self, first_name: str, last_name: str, postal_code: str) -> None:
        """Fill all three fields (empty string means omitted) and continue."""
        await self._base.fill(self._SELECTORS["first_name"], first_name)
        await self._base.fill(self._SELECTORS["last_name"], last_name)
        await self._base.fill(self._SELECTORS["postal_code"], postal_code)
        await self._base.click(self._SELECTORS["continue"])

    @allure.step("Verify validation error: {expected_message}")
    async def assert_validation_error(self, expected_message: str) -> None:
        await self._base.assert_text(self._SELECTORS["error"], expected_message)

    @allure.step("Verify order summary: {item_name}")
    async def assert_order_summary(
        self,
        item_name: str,
        unit_price: Union[Decimal, float, str],
        quantity: Union[int, str],
    ) -> None:
        await self._base.assert_text(self._SELECTORS["item_name"], item_name)
        await self._base.assert_text(self._SELECTORS["item_price"], format_price(unit_price))
        await self._base.assert_text(self._SELECTORS["item_quantity"], str(quantity))

    @allure.step("Finish checkout")
    async def finish(self) -> None:
        await self._base.click(self._SELECTORS["finish"])

    @allure.step("Verify order confirmation")
    async def assert_confirmation(self) -> None:
        await self._base.assert_url_contains(self._URL_SEGMENTS["complete"])
        await self._base.assert_text(self._SELECTORS["complete_header"], self.CONFIRMATION_HEADER)
        await self._base.assert_text(self._SELECTORS["complete_text"], self.CONFIRMATION_BODY)
