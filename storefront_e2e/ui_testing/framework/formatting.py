"""Text and currency helpers shared by the page objects."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Optional, Union


def normalize_text(text: Optional[str]) -> str:
    """Collapse whitespace runs and trim, as rendered text is compared."""
    if not text:
        return ""
    return " ".join(text.split())


def parse_price(text: str) -> Decimal:
    """
    Parse a rendered price such as "$29.99" into a Decimal.

    Raises:
        ValueError: If the text holds no parsable amount
    """
    cleaned = normalize_text(text).replace("$", "").replace(",", "").strip()
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Not a price: {text!r}") from None


def to_amount(value: Union[Decimal, float, int, str]) -> Decimal:
    """Convert an expected price to a Decimal without float artefacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, str):
        return parse_price(value)
    return Decimal(str(value))


def format_price(value: Union[Decimal, float, int, str]) -> str:
    """Render an amount the way the storefront does: "$29.99"."""
    return f"${to_amount(value):.2f}"


def quote_text(text: str) -> str:
    """Quote a literal for use inside a :has-text() / :text-is() selector."""
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'
