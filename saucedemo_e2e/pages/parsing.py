"""Parse SauceDemo screens from their rendered HTML."""

import logging

from bs4 import BeautifulSoup

from ..errors import SelectorMatchError
from ..models import Product
from ..pricing import parse_price

logger = logging.getLogger(__name__)

ITEM_SELECTOR = ".inventory_item"
ITEM_NAME_SELECTOR = ".inventory_item_name"
ITEM_PRICE_SELECTOR = ".inventory_item_price"
CART_ITEM_SELECTOR = ".cart_item"


def parse_catalog(html: str) -> list[Product]:
    """
    Parse every listed product from the inventory page.

    Args:
        html: Rendered page content

    Returns:
        Products in rendering order

    Raises:
        SelectorMatchError: If a listed item has no name or price element
        PriceFormatError: If a price label is not "$" + decimal
    """
    soup = BeautifulSoup(html, "lxml")
    products = []

    for position, item in enumerate(soup.select(ITEM_SELECTOR)):
        name_elem = item.select_one(ITEM_NAME_SELECTOR)
        price_elem = item.select_one(ITEM_PRICE_SELECTOR)

        if name_elem is None or price_elem is None:
            raise SelectorMatchError(
                f"Catalog item #{position} is missing its name or price",
                selector=ITEM_NAME_SELECTOR if name_elem is None else ITEM_PRICE_SELECTOR,
                matches=0,
            )

        products.append(
            Product(
                name=name_elem.get_text(strip=True),
                price=parse_price(price_elem.get_text(strip=True)),
            )
        )

    logger.debug(f"Parsed {len(products)} catalog items")
    return products


def parse_cart_names(html: str) -> list[str]:
    """Parse the item names listed on the cart screen, in rendering order."""
    soup = BeautifulSoup(html, "lxml")
    names = []

    for item in soup.select(CART_ITEM_SELECTOR):
        name_elem = item.select_one(ITEM_NAME_SELECTOR)
        if name_elem is None:
            raise SelectorMatchError(
                "Cart item is missing its name", selector=ITEM_NAME_SELECTOR, matches=0
            )
        names.append(name_elem.get_text(strip=True))

    return names
