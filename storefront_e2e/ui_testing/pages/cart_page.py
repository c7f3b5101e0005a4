"""
================================================================================
Cart Page Object
================================================================================

Adds items from the catalog, checks the cart badge and the cart screen,
removes items and proceeds to checkout.

================================================================================
"""

from __future__ import annotations

import re

import allure

from storefront_e2e.ui_testing.framework.errors import AssertionFailure
from storefront_e2e.ui_testing.framework.formatting import quote_text
from storefront_e2e.ui_testing.framework.page_base import BasePage


class CartPage:
    """Cart page object (badge, cart screen, removal)."""

    TITLE = "Your Cart"

    _SELECTORS = {
        "title": ".title",
        "badge": ".shopping_cart_badge",
        "cart_link": ".shopping_cart_link",
        "cart_item": ".cart_item",
        "item_name": ".inventory_item_name",
        "catalog_row": ".inventory_item",
        "checkout": "#checkout",
    }

    def __init__(self, base: BasePage):
        self._base = base

    def _catalog_row(self, name: str) -> str:
        return f"{self._SELECTORS['catalog_row']}:has-text({quote_text(name)})"

    def _cart_item_name(self, name: str) -> str:
        return f"{self._SELECTORS['item_name']}:text-is({quote_text(name)})"

    @staticmethod
    def _remove_button(name: str) -> str:
        slug = re.sub(r"\s+", "-", name.lower())
        return f'[data-test="remove-{slug}"]'

    @allure.step("Add to cart: {name}")
    async def add_item(self, name: str) -> None:
        """Click the add action of the catalog row holding `name`."""
        row = self._catalog_row(name)
        await self._base.wait_for(row)
        await self._base.click(f'{row} button:has-text("Add to cart")')

    @allure.step("Open cart")
    async def go_to_cart(self) -> None:
        await self._base.click(self._SELECTORS["cart_link"])

    @allure.step("Verify cart is displayed")
    async def assert_on_cart(self) -> None:
        await self._base.assert_text(self._SELECTORS["title"], self.TITLE)

    @allure.step("Verify cart badge shows {expected}")
    async def assert_item_count(self, expected: int) -> None:
        """
        Check the cart badge. The badge updates after the add action, so the
        extended timeout applies; an empty cart has no badge at all.
        """
        timeout_ms = self._base.settings.extended_timeout_ms
        if expected == 0:
            await self._base.assert_hidden(self._SELECTORS["badge"], timeout_ms)
        else:
            await self._base.assert_text(self._SELECTORS["badge"], str(expected), timeout_ms)

    @allure.step("Verify item in cart: {name}")
    async def assert_item_present(self, name: str) -> None:
        await self._base.assert_text(
            self._cart_item_name(name),
            name,
            self._base.settings.extended_timeout_ms,
        )

    @allure.step("Remove from cart: {name}")
    async def remove_item(self, name: str) -> None:
        """Remove `name`; its remove control must vanish and one row must go."""
        button = self._remove_button(name)
        # Cart rows are rendered by the time the remove control is visible
        await self._base.wait_for(button)
        rows_before = len(await self._base.read_all(self._SELECTORS["cart_item"]))
        if rows_before == 0:
            raise AssertionFailure(
                self._SELECTORS["cart_item"], "<at least 1 row>", actual="<0 rows>"
            )
        await self._base.click(button)
        await self._base.assert_hidden(button)
        await self._base.assert_count(self._SELECTORS["cart_item"], rows_before - 1)

    @allure.step("Verify item not in cart: {name}")
    async def assert_item_absent(self, name: str) -> None:
        await self._base.assert_hidden(self._cart_item_name(name))
        await self._base.assert_count(self._cart_item_name(name), 0)

    @allure.step("Verify cart is empty")
    async def assert_cart_empty(self) -> None:
        await self._base.assert_count(self._SELECTORS["cart_item"], 0)

    @allure.step("Proceed to checkout")
    async def proceed_to_checkout(self) -> None:
        await self._base.click(self._SELECTORS["checkout"])
