"""
================================================================================
Inventory Page Object
================================================================================

Product catalog: title, free-text search, sorting, item detail round trip
and full-list verification of names, descriptions and prices.

Ordering checks read the first element in DOM order; full-list checks compare
the whole on-screen sequence element by element, so a length mismatch or any
differing element fails the assertion.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, List, Sequence, Union

import allure

from storefront_e2e.ui_testing.framework.errors import AssertionFailure, InvalidOption
from storefront_e2e.ui_testing.framework.formatting import (
    format_price,
    parse_price,
    quote_text,
    to_amount,
)
from storefront_e2e.ui_testing.framework.page_base import BasePage


class SortOption(Enum):
    """Sort orders offered by the catalog dropdown (option value, label)."""

    NAME_ASC = ("az", "Name (A to Z)")
    NAME_DESC = ("za", "Name (Z to A)")
    PRICE_ASC = ("lohi", "Price (low to high)")
    PRICE_DESC = ("hilo", "Price (high to low)")

    def __init__(self, option_value: str, label: str):
        self.option_value = option_value
        self.label = label

    @classmethod
    def parse(cls, option: Union["SortOption", str]) -> "SortOption":
        """
        Resolve a member, a visible label or an option value.

        Raises:
            InvalidOption: For anything outside the fixed set
        """
        if isinstance(option, cls):
            return option
        for member in cls:
            if option in (member.label, member.option_value):
                return member
        raise InvalidOption(option, [member.label for member in cls])


@dataclass(frozen=True)
class ItemDetail:
    """Content of the item detail view."""

    name: str
    description: str
    price: Decimal


def _field(item: Any, name: str) -> Any:
    # Expected items may be mappings or objects with attributes.
    if isinstance(item, dict):
        return item[name]
    return getattr(item, name)


class InventoryPage:
    """Product catalog page object."""

    TITLE = "Products"

    _SELECTORS = {
        "title": ".title",
        "item_name": ".inventory_item_name",
        "item_description": ".inventory_item_desc",
        "item_price": ".inventory_item_price",
        "search_input": "#search_container",
        "sort_dropdown": ".product_sort_container",
        "active_sort": ".active_option",
        "back_to_products": "#back-to-products",
        "detail_name": ".inventory_details_name",
        "detail_description": ".inventory_details_desc",
        "detail_price": ".inventory_details_price",
    }

    def __init__(self, base: BasePage):
        self._base = base

    def _item_name(self, name: str) -> str:
        return f"{self._SELECTORS['item_name']}:text-is({quote_text(name)})"

    @allure.step("Verify catalog is displayed")
    async def assert_on_catalog(self) -> None:
        await self._base.assert_text(self._SELECTORS["title"], self.TITLE)

    # =========================================================================
    # Search
    # =========================================================================

    @allure.step("Verify item is listed: {name}")
    async def assert_item_visible(self, name: str) -> None:
        await self._base.wait_for(self._item_name(name))

    @allure.step("Search: {text}")
    async def search(self, text: str) -> None:
        await self._base.fill(self._SELECTORS["search_input"], text)
        await self._base.press(self._SELECTORS["search_input"], "Enter")

    @allure.step("Verify item in results: {name}")
    async def assert_item_in_results(self, name: str) -> None:
        await self._base.wait_for(self._item_name(name))

    @allure.step("Verify item absent from results: {name}")
    async def assert_item_absent_from_results(self, name: str) -> None:
        await self._base.assert_hidden(self._item_name(name))

    # =========================================================================
    # Sorting
    # =========================================================================

    @allure.step("Sort by: {option}")
    async def select_sort_option(self, option: Union[SortOption, str]) -> None:
        sort = SortOption.parse(option)
        await self._base.select_option(self._SELECTORS["sort_dropdown"], sort.option_value)

    @allure.step("Verify first item name: {name}")
    async def assert_first_item_name(self, name: str) -> None:
        await self._base.assert_text(self._SELECTORS["item_name"], name)

    @allure.step("Verify first item price: {amount}")
    async def assert_first_item_price(self, amount: Union[Decimal, float, str]) -> None:
        await self._base.assert_text(self._SELECTORS["item_price"], format_price(amount))

    # =========================================================================
    # Detail view
    # =========================================================================

    @allure.step("Open item: {name}")
    async def open_item(self, name: str) -> None:
        await self._base.click(self._item_name(name))

    async def get_item_detail(self) -> ItemDetail:
        """Read the detail view currently on screen."""
        return ItemDetail(
            name=await self._base.read_text(self._SELECTORS["detail_name"]),
            description=await self._base.read_text(self._SELECTORS["detail_description"]),
            price=parse_price(await self._base.read_text(self._SELECTORS["detail_price"])),
        )

    @allure.step("Verify item detail: {name}")
    async def assert_item_detail(
        self,
        name: str,
        description: str,
        price: Union[Decimal, float, str],
    ) -> None:
        await self._base.assert_text(self._SELECTORS["detail_name"], name)
        await self._base.assert_text(self._SELECTORS["detail_description"], description)
        await self._base.assert_text(self._SELECTORS["detail_price"], format_price(price))

    @allure.step("Back to products")
    async def back(self) -> None:
        """Leave the detail view and check the catalog is back to its default view."""
        await self._base.click(self._SELECTORS["back_to_products"])
        await self.assert_on_catalog()
        await self._base.assert_text(self._SELECTORS["active_sort"], SortOption.NAME_ASC.label)
        search_input = self._SELECTORS["search_input"]
        if await self._base.locate(search_input).count():
            await self._base.assert_value(search_input, "")

    # =========================================================================
    # Full-list checks
    # =========================================================================

    async def read_item_names(self) -> List[str]:
        return await self._base.read_all(self._SELECTORS["item_name"])

    async def read_prices(self) -> List[Decimal]:
        return [parse_price(text) for text in await self._base.read_all(self._SELECTORS["item_price"])]

    @staticmethod
    def _assert_sequence(selector: str, expected: List[Any], actual: List[Any]) -> None:
        if actual != expected:
            raise AssertionFailure(selector, expected, actual=actual)

    @allure.step("Verify all item descriptions")
    async def assert_all_descriptions(self, expected: Sequence[Any]) -> None:
        """
        Compare on-screen names and descriptions with `expected`, in order.

        Args:
            expected: Items with `name` and `description` (attributes or keys); an empty list
                asserts an empty catalog
        """
        if expected:
            await self._base.wait_for(self._SELECTORS["item_name"])
        self._assert_sequence(
            self._SELECTORS["item_name"],
            [_field(item, "name") for item in expected],
            await self.read_item_names(),
        )
        self._assert_sequence(
            self._SELECTORS["item_description"],
            [_field(item, "description") for item in expected],
            await self._base.read_all(self._SELECTORS["item_description"]),
        )

    @allure.step("Verify all item prices")
    async def assert_all_prices(self, expected: Sequence[Any]) -> None:
        """
        Compare on-screen names and numeric prices with `expected`, in order.

        Args:
            expected: Items with `name` and `price` (attributes or keys); an empty list
                asserts an empty catalog
        """
        if expected:
            await self._base.wait_for(self._SELECTORS["item_name"])
        self._assert_sequence(
            self._SELECTORS["item_name"],
            [_field(item, "name") for item in expected],
            await self.read_item_names(),
        )
        self._assert_sequence(
            self._SELECTORS["item_price"],
            [to_amount(_field(item, "price")) for item in expected],
            await self.read_prices(),
        )
