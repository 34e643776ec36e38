"""SauceDemo cart screen."""

import logging

from .base import BasePage
from .parsing import CART_ITEM_SELECTOR, parse_cart_names

logger = logging.getLogger(__name__)


class CartPage(BasePage):
    """The cart view reached from the cart link."""

    CHECKOUT_FORM = ".checkout_info"

    async def item_count(self) -> int:
        """Number of line entries in the cart."""
        return await self.page.locator(CART_ITEM_SELECTOR).count()

    async def item_names(self) -> list[str]:
        """Item names in the cart's own rendering order (compare as sets)."""
        return parse_cart_names(await self.page.content())

    async def proceed_to_checkout(self) -> None:
        logger.info("=== PROCEED TO CHECKOUT ===")
        await self.page.get_by_role("button", name="Checkout").click()
        await self.page.locator(self.CHECKOUT_FORM).wait_for(state="visible")
