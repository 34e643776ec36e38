"""End-to-end purchase scenarios driven through the page capabilities."""

import logging
import random
from collections import Counter
from decimal import Decimal
from typing import Optional, Sequence

from .errors import ScenarioAssertionError
from .models import CheckoutInfo, Credentials, Product, PurchaseReport
from .pricing import DEFAULT_TOLERANCE, reconcile
from .protocols import CartScreen, CatalogScreen, CheckoutScreen, LoginScreen
from .selection import DEFAULT_ITEM_LIMIT, select_products

logger = logging.getLogger(__name__)

CONFIRMATION_MESSAGE = "Thank you for your order!"


class PurchaseFlow:
    """
    Random purchase with price validation.

    Logs in, picks up to ``item_limit`` random catalog products, checks the
    cart shows exactly those, checks out with the fixed customer record,
    reconciles the displayed item total and finishes the order. The first
    failing step raises and ends the scenario.
    """

    def __init__(
        self,
        login: LoginScreen,
        inventory: CatalogScreen,
        cart: CartScreen,
        checkout: CheckoutScreen,
        credentials: Credentials,
        customer: CheckoutInfo,
        rng: Optional[random.Random] = None,
        item_limit: int = DEFAULT_ITEM_LIMIT,
        tolerance: Decimal = DEFAULT_TOLERANCE,
        seed: Optional[int] = None,
    ) -> None:
        self.login = login
        self.inventory = inventory
        self.cart = cart
        self.checkout = checkout
        self.credentials = credentials
        self.customer = customer
        if rng is None and seed is None:
            seed = random.randrange(2**32)
            logger.info(f"No seed given, drew seed={seed}")
        self.rng = rng or random.Random(seed)
        self.item_limit = item_limit
        self.tolerance = tolerance
        self.seed = seed

    async def run(self) -> PurchaseReport:
        report = PurchaseReport(seed=self.seed)

        # 1. Login
        await self.login.authenticate(self.credentials)

        # 2. Scan the catalog and pick the products
        catalog = await self.inventory.list_catalog()
        report.selected = select_products(catalog, self.item_limit, self.rng)
        logger.info(f"Selected {len(report.selected)} products: {report.selected_names}")

        # 3. Add them to the cart
        for product in report.selected:
            await self.inventory.add_to_cart(product.name)

        # 4. Open the cart and compare with the selection
        await self.inventory.open_cart()
        report.cart_names = await self.cart.item_names()
        verify_cart(report.selected, report.cart_names, await self.cart.item_count())

        # 5. Checkout information
        await self.cart.proceed_to_checkout()
        await self.checkout.submit_information(
            self.customer.first_name,
            self.customer.last_name,
            self.customer.postal_code,
        )

        # 6. Price reconciliation
        displayed = await self.checkout.read_subtotal()
        report.price_check = reconcile(report.selected, displayed, self.tolerance)
        if not report.price_check.matches:
            raise ScenarioAssertionError(
                "price reconciliation",
                report.price_check.expected,
                report.price_check.actual,
                f"tolerance {report.price_check.tolerance}",
            )
        logger.info(f"Item total matches: expected {report.price_check.expected}, displayed {displayed}")

        # 7. Finish the order
        await self.checkout.confirm_purchase()
        report.confirmation = await self.checkout.read_confirmation_message()
        if report.confirmation != CONFIRMATION_MESSAGE:
            raise ScenarioAssertionError("confirmation", CONFIRMATION_MESSAGE, report.confirmation)

        logger.info("PURCHASE FLOW SUCCESS")
        return report


def verify_cart(selected: Sequence[Product], cart_names: Sequence[str], cart_count: int) -> None:
    """
    Check the cart holds exactly the selected products.

    Raises:
        ScenarioAssertionError: If the name sets differ, a name repeats, or the counts differ
    """
    expected_names = [product.name for product in selected]

    if set(cart_names) != set(expected_names):
        raise ScenarioAssertionError("cart contents", sorted(expected_names), sorted(cart_names))

    duplicates = sorted(name for name, count in Counter(cart_names).items() if count > 1)
    if duplicates:
        raise ScenarioAssertionError("cart contents", "no repeated entries", duplicates)

    if cart_count != len(expected_names) or len(cart_names) != len(expected_names):
        raise ScenarioAssertionError("cart item count", len(expected_names), cart_count)


async def add_named_items(
    login: LoginScreen,
    inventory: CatalogScreen,
    cart: CartScreen,
    credentials: Credentials,
    product_names: Sequence[str],
) -> int:
    """
    Log in, add the given products by name and check the cart count.

    Returns:
        The number of entries in the cart
    """
    await login.authenticate(credentials)

    for name in product_names:
        await inventory.add_to_cart(name)

    await inventory.open_cart()
    count = await cart.item_count()
    if count != len(product_names):
        raise ScenarioAssertionError("cart item count", len(product_names), count)
    return count
