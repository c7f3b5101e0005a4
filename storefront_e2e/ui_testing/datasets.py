"""
================================================================================
Scenario Data
================================================================================

Credentials, catalog products and checkout personas used by the live
scenarios. Values match the public storefront demo.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str
    expected_error: Optional[str] = None


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    price: Decimal
    description: str


@dataclass(frozen=True)
class Persona:
    first_name: str
    last_name: str
    postal_code: str


USERS: Dict[str, Credentials] = {
    "standard": Credentials("standard_user", "secret_sauce"),
    "problem": Credentials("problem_user", "secret_sauce"),
    "performance_glitch": Credentials("performance_glitch_user", "secret_sauce"),
    "invalid": Credentials(
        "invalid_user",
        "invalid_password",
        "Epic sadface: Username and password do not match any user in this service",
    ),
    "without_password": Credentials(
        "standard_user", "", "Epic sadface: Password is required"
    ),
    "without_username": Credentials(
        "", "secret_sauce", "Epic sadface: Username is required"
    ),
    "locked_out": Credentials(
        "locked_out_user", "secret_sauce", "Epic sadface: Sorry, this user has been locked out."
    ),
}

VALID_USERS: List[Credentials] = [user for user in USERS.values() if user.expected_error is None]
INVALID_USERS: List[Credentials] = [user for user in USERS.values() if user.expected_error]

# Catalog default order (Name A to Z)
PRODUCTS: Dict[str, Product] = {
    "backpack": Product(
        "4",
        "Sauce Labs Backpack",
        Decimal("29.99"),
        "carry.allTheThings() with the sleek, streamlined Sly Pack that melds uncompromising "
        "style with unequaled laptop and tablet protection.",
    ),
    "bike_light": Product(
        "0",
        "Sauce Labs Bike Light",
        Decimal("9.99"),
        "A red light isn't the desired state in testing but it sure helps when riding your "
        "bike at night. Water-resistant with 3 lighting modes, 1 AAA battery included.",
    ),
    "bolt_t_shirt": Product(
        "1",
        "Sauce Labs Bolt T-Shirt",
        Decimal("15.99"),
        "Get your testing superhero on with the Sauce Labs bolt T-shirt. From American "
        "Apparel, 100% ringspun combed cotton, heather gray with red bolt.",
    ),
    "fleece_jacket": Product(
        "5",
        "Sauce Labs Fleece Jacket",
        Decimal("49.99"),
        "It's not every day that you come across a midweight quarter-zip fleece jacket "
        "capable of handling everything from a relaxing day outdoors to a busy day at the office.",
    ),
    "onesie": Product(
        "2",
        "Sauce Labs Onesie",
        Decimal("7.99"),
        "Rib snap infant onesie for the junior automation engineer in development. Reinforced "
        "3-snap bottom closure, two-needle hemmed sleeved and bottom won't unravel.",
    ),
    "red_t_shirt": Product(
        "3",
        "Test.allTheThings() T-Shirt (Red)",
        Decimal("15.99"),
        "This classic Sauce Labs t-shirt is perfect to wear when cozying up to your keyboard "
        "to automate a few tests. Super-soft and comfy ringspun combed cotton.",
    ),
}

PERSONAS: Dict[str, Persona] = {
    "valid": Persona("John", "Doe", "12345"),
    "without_first_name": Persona("", "Doe", "12345"),
    "without_last_name": Persona("John", "", "12345"),
    "without_postal_code": Persona("John", "Doe", ""),
    "without_all": Persona("", "", ""),
}
