"""SauceDemo catalog (inventory) screen."""

import logging
import re

from ..errors import SelectorMatchError
from ..models import Product
from .base import BasePage
from .parsing import ITEM_NAME_SELECTOR, ITEM_SELECTOR, parse_catalog

logger = logging.getLogger(__name__)


class InventoryPage(BasePage):
    """The product listing reached after login."""

    CART_LINK = ".shopping_cart_link"
    CART_BADGE = ".shopping_cart_badge"
    CART_LIST = ".cart_list"

    async def list_catalog(self) -> list[Product]:
        """
        Scan every product currently rendered.

        Returns:
            Products in the order the shop lists them

        Raises:
            PriceFormatError: If a price label is not "$" + decimal
        """
        logger.info("=== LIST CATALOG ===")
        html = await self.page.content()
        products = parse_catalog(html)
        logger.info(f"Found {len(products)} products")
        return products

    async def add_to_cart(self, product_name: str) -> None:
        """
        Click "Add to cart" on the one catalog entry named ``product_name``.

        Raises:
            SelectorMatchError: If no entry, or more than one, has that exact name
        """
        logger.info(f"=== ADD TO CART: name={product_name} ===")

        exact_name = re.compile(rf"^\s*{re.escape(product_name)}\s*$")
        entries = self.page.locator(ITEM_SELECTOR).filter(
            has=self.page.locator(ITEM_NAME_SELECTOR, has_text=exact_name)
        )

        matches = await entries.count()
        if matches != 1:
            await self.screenshot("add_to_cart_match")
            raise SelectorMatchError(
                f"Expected exactly one catalog entry named {product_name!r}, found {matches}",
                selector=ITEM_SELECTOR,
                matches=matches,
            )

        await entries.get_by_role("button", name="Add to cart").click()
        logger.info("ADD TO CART SUCCESS")

    async def cart_badge_count(self) -> int:
        """Number shown on the cart badge (0 when the badge is hidden)."""
        badge = self.page.locator(self.CART_BADGE)
        if await badge.count() == 0:
            return 0
        return int((await badge.inner_text()).strip())

    async def open_cart(self) -> None:
        """Navigate to the cart screen."""
        logger.info("=== OPEN CART ===")
        await self.page.click(self.CART_LINK)
        await self.page.locator(self.CART_LIST).wait_for(state="visible")
