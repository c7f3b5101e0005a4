"""
================================================================================
Checkout Feature UI Tests
================================================================================

Information form validation (first missing field wins), order summary and
the complete purchase round trip.

================================================================================
"""

import allure
import pytest

from storefront_e2e.ui_testing.datasets import PERSONAS, PRODUCTS
from storefront_e2e.ui_testing.pages import CheckoutPage


@allure.epic("UI Testing")
@allure.feature("Checkout")
@pytest.mark.checkout
class TestCheckout:
    """Checkout UI test suite."""

    @allure.title("Checkout opens on the information form")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P1
    @pytest.mark.smoke
    @pytest.mark.asyncio
    async def test_info_form_displayed(self, checkout_ready: CheckoutPage):
        await checkout_ready.assert_on_info_form()

    @allure.title("Valid information leads to the overview")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.asyncio
    async def test_fill_info(self, checkout_ready: CheckoutPage):
        persona = PERSONAS["valid"]

        await checkout_ready.fill_info(persona.first_name, persona.last_name, persona.postal_code)
        await checkout_ready.assert_on_overview()

    @allure.story("Validation")
    @allure.title("Missing information shows the first missing field's error")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "persona_key",
        ["without_first_name", "without_last_name", "without_postal_code", "without_all"],
    )
    async def test_validation_error(self, checkout_ready: CheckoutPage, persona_key: str):
        persona = PERSONAS[persona_key]
        expected = CheckoutPage.expected_validation_error(
            persona.first_name, persona.last_name, persona.postal_code
        )

        await checkout_ready.fill_info(persona.first_name, persona.last_name, persona.postal_code)
        await checkout_ready.assert_validation_error(expected)
        await checkout_ready.assert_on_info_form()

    @allure.story("Validation")
    @allure.title("Empty form reports the first name, like a missing first name alone")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.asyncio
    async def test_empty_form_reports_first_name(self, checkout_ready: CheckoutPage):
        await checkout_ready.fill_info("", "", "")
        await checkout_ready.assert_validation_error("Error: First Name is required")

    @allure.title("Overview summarises the ordered item")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.asyncio
    async def test_order_summary(self, checkout_ready: CheckoutPage):
        persona = PERSONAS["valid"]
        item = PRODUCTS["backpack"]

        await checkout_ready.fill_info(persona.first_name, persona.last_name, persona.postal_code)
        await checkout_ready.assert_order_summary(item.name, item.price, "1")

    @allure.story("Happy Path")
    @allure.title("Complete purchase end to end")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    @pytest.mark.e2e
    @pytest.mark.smoke
    @pytest.mark.asyncio
    async def test_complete_checkout(self, checkout_ready: CheckoutPage):
        await checkout_ready.fill_info("John", "Doe", "12345")
        await checkout_ready.assert_order_summary("Sauce Labs Backpack", 29.99, "1")
        await checkout_ready.finish()
        await checkout_ready.assert_confirmation()
