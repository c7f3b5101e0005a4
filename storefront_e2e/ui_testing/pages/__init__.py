"""
================================================================================
Page Objects
================================================================================

One page object per storefront screen. Each owns its selectors and is built
from the shared BasePage primitives; page objects never call each other.

Author: Automation Team
License: MIT
================================================================================
"""

from .cart_page import CartPage
from .checkout_page import CheckoutPage
from .inventory_page import InventoryPage, ItemDetail, SortOption
from .login_page import LoginPage

__all__ = [
    "LoginPage",
    "InventoryPage",
    "ItemDetail",
    "SortOption",
    "CartPage",
    "CheckoutPage",
]
