"""Parsing of SauceDemo currency labels and total reconciliation."""

import re
from decimal import Decimal, InvalidOperation
from typing import Iterable

from .errors import PriceFormatError
from .models import PriceCheck, Product

DEFAULT_TOLERANCE = Decimal("0.01")

PRICE_PATTERN = re.compile(r"^\$(\d+(?:\.\d+)?)$")
SUBTOTAL_PATTERN = re.compile(r"^Item total: \$(\d+(?:\.\d+)?)$")


def _parse(text: str, pattern: re.Pattern, expected_format: str) -> Decimal:
    match = pattern.match(text.strip())
    if not match:
        raise PriceFormatError(text, expected_format)
    try:
        return Decimal(match.group(1))
    except InvalidOperation as e:
        raise PriceFormatError(text, expected_format) from e


def parse_price(text: str) -> Decimal:
    """Parse a catalog price label such as ``"$29.99"``."""
    return _parse(text, PRICE_PATTERN, '"$" + decimal')


def parse_subtotal(text: str) -> Decimal:
    """Parse the overview label such as ``"Item total: $29.99"``."""
    return _parse(text, SUBTOTAL_PATTERN, '"Item total: $" + decimal')


def sum_prices(products: Iterable[Product]) -> Decimal:
    return sum((product.price for product in products), Decimal("0"))


def reconcile(products: Iterable[Product], displayed: Decimal, tolerance: Decimal = DEFAULT_TOLERANCE) -> PriceCheck:
    """Build the price check between the selected products and the displayed total."""
    return PriceCheck(expected=sum_prices(products), actual=displayed, tolerance=tolerance)
