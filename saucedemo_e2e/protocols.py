"""Capability interfaces the purchase flow drives.

The Playwright page objects in :mod:`saucedemo_e2e.pages` implement these,
and so do the in-memory fakes used by the offline tests.
"""

from decimal import Decimal
from typing import Protocol, runtime_checkable

from .models import Credentials, Product


@runtime_checkable
class LoginScreen(Protocol):
    async def authenticate(self, credentials: Credentials) -> None: ...


@runtime_checkable
class CatalogScreen(Protocol):
    async def list_catalog(self) -> list[Product]: ...

    async def add_to_cart(self, product_name: str) -> None: ...

    async def open_cart(self) -> None: ...


@runtime_checkable
class CartScreen(Protocol):
    async def item_count(self) -> int: ...

    async def item_names(self) -> list[str]: ...

    async def proceed_to_checkout(self) -> None: ...


@runtime_checkable
class CheckoutScreen(Protocol):
    async def submit_information(self, first_name: str, last_name: str, postal_code: str) -> None: ...

    async def read_subtotal(self) -> Decimal: ...

    async def confirm_purchase(self) -> None: ...

    async def read_confirmation_message(self) -> str: ...
