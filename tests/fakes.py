"""In-memory stand-ins for the SauceDemo screens."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from saucedemo_e2e.errors import (
    AuthenticationError,
    CheckoutStageError,
    FormValidationError,
    SelectorMatchError,
)
from saucedemo_e2e.flow import CONFIRMATION_MESSAGE
from saucedemo_e2e.models import Credentials, Product

SIX_PRODUCT_CATALOG = [
    Product(name="Backpack", price=Decimal("9.99")),
    Product(name="Bike Light", price=Decimal("9.99")),
    Product(name="Bolt T-Shirt", price=Decimal("15.99")),
    Product(name="Fleece Jacket", price=Decimal("49.99")),
    Product(name="Onesie", price=Decimal("7.99")),
    Product(name="Sauce Labs T-Shirt", price=Decimal("15.99")),
]


class FakeShop:
    """Shared state behind the fake screens."""

    def __init__(self, catalog: list[Product]) -> None:
        self.catalog = list(catalog)
        self.cart: list[str] = []
        self.logged_in = False
        self.on_cart_screen = False
        self.stage = "information"
        self.valid_username = "standard_user"
        self.valid_password = "secret_sauce"
        self.subtotal_override: Optional[Decimal] = None
        self.confirmation = CONFIRMATION_MESSAGE
        self.drop_cart_add: Optional[str] = None
        self.calls: list[str] = []

    @property
    def cart_total(self) -> Decimal:
        prices = {product.name: product.price for product in self.catalog}
        return sum((prices[name] for name in self.cart), Decimal("0"))


class FakeLogin:
    def __init__(self, shop: FakeShop) -> None:
        self.shop = shop

    async def authenticate(self, credentials: Credentials) -> None:
        self.shop.calls.append("authenticate")
        if (credentials.username, credentials.password) != (self.shop.valid_username, self.shop.valid_password):
            raise AuthenticationError("Login rejected: Username and password do not match")
        self.shop.logged_in = True


class FakeInventory:
    def __init__(self, shop: FakeShop) -> None:
        self.shop = shop

    async def list_catalog(self) -> list[Product]:
        self.shop.calls.append("list_catalog")
        return list(self.shop.catalog)

    async def add_to_cart(self, product_name: str) -> None:
        self.shop.calls.append(f"add_to_cart:{product_name}")
        matches = [product for product in self.shop.catalog if product.name == product_name]
        if len(matches) != 1:
            raise SelectorMatchError(f"{len(matches)} entries named {product_name!r}", matches=len(matches))
        if product_name == self.shop.drop_cart_add:
            return
        if product_name not in self.shop.cart:
            self.shop.cart.append(product_name)

    async def open_cart(self) -> None:
        self.shop.calls.append("open_cart")
        self.shop.on_cart_screen = True


class FakeCart:
    def __init__(self, shop: FakeShop) -> None:
        self.shop = shop

    async def item_count(self) -> int:
        return len(self.shop.cart)

    async def item_names(self) -> list[str]:
        # The shop renders the cart in its own order, not insertion order
        return sorted(self.shop.cart)

    async def proceed_to_checkout(self) -> None:
        self.shop.calls.append("proceed_to_checkout")


class FakeCheckout:
    def __init__(self, shop: FakeShop) -> None:
        self.shop = shop

    async def submit_information(self, first_name: str, last_name: str, postal_code: str) -> None:
        self.shop.calls.append("submit_information")
        if not (first_name and last_name and postal_code):
            raise FormValidationError("Error: all fields are required")
        self.shop.stage = "overview"

    async def read_subtotal(self) -> Decimal:
        if self.shop.stage != "overview":
            raise CheckoutStageError("read_subtotal outside overview")
        if self.shop.subtotal_override is not None:
            return self.shop.subtotal_override
        return self.shop.cart_total

    async def confirm_purchase(self) -> None:
        self.shop.calls.append("confirm_purchase")
        if self.shop.stage != "overview":
            raise CheckoutStageError("confirm_purchase outside overview")
        self.shop.stage = "confirmation"

    async def read_confirmation_message(self) -> str:
        if self.shop.stage != "confirmation":
            raise CheckoutStageError("read_confirmation_message outside confirmation")
        return self.shop.confirmation


def make_screens(shop: FakeShop) -> tuple[FakeLogin, FakeInventory, FakeCart, FakeCheckout]:
    return FakeLogin(shop), FakeInventory(shop), FakeCart(shop), FakeCheckout(shop)
