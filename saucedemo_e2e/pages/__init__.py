"""Page objects for the SauceDemo web shop."""

from functools import cached_property

from playwright.async_api import Page

from .cart import CartPage
from .checkout import CheckoutPage, CheckoutStage
from .inventory import InventoryPage
from .login import LoginPage


class Pages:
    """All page objects of one scenario, bound to the same Playwright page."""

    def __init__(self, page: Page, base_url: str = "https://www.saucedemo.com") -> None:
        self.page = page
        self.base_url = base_url

    @cached_property
    def login(self) -> LoginPage:
        return LoginPage(self.page, self.base_url)

    @cached_property
    def inventory(self) -> InventoryPage:
        return InventoryPage(self.page, self.base_url)

    @cached_property
    def cart(self) -> CartPage:
        return CartPage(self.page, self.base_url)

    @cached_property
    def checkout(self) -> CheckoutPage:
        return CheckoutPage(self.page, self.base_url)


__all__ = [
    "CartPage",
    "CheckoutPage",
    "CheckoutStage",
    "InventoryPage",
    "LoginPage",
    "Pages",
]
