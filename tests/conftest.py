"""Pytest fixtures for the SauceDemo suite."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio

from fakes import SIX_PRODUCT_CATALOG, FakeShop, make_screens
from saucedemo_e2e.config import Settings, load_settings
from saucedemo_e2e.models import CheckoutInfo, Credentials, Product


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="run tests against the real SauceDemo site and JSONPlaceholder API",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if config.getoption("--live"):
        return
    skip_live = pytest.mark.skip(reason="needs --live")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture
def catalog() -> list[Product]:
    return list(SIX_PRODUCT_CATALOG)


@pytest.fixture
def shop(catalog: list[Product]) -> FakeShop:
    return FakeShop(catalog)


@pytest.fixture
def screens(shop: FakeShop) -> tuple:
    return make_screens(shop)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(username="standard_user", password="secret_sauce")


@pytest.fixture
def customer() -> CheckoutInfo:
    return CheckoutInfo(first_name="John", last_name="Doe", postal_code="12345")


@pytest.fixture
def live_settings() -> Settings:
    settings = load_settings()
    if not settings.username:
        settings.username = "standard_user"
        settings.password = "secret_sauce"
    return settings


@pytest_asyncio.fixture
async def live_pages(live_settings: Settings) -> AsyncIterator:
    """Page objects on a fresh browser, opened at the login screen."""
    from saucedemo_e2e.browser import BrowserSession
    from saucedemo_e2e.pages import Pages

    async with BrowserSession(headless=live_settings.headless, timeout_ms=live_settings.timeout_ms) as page:
        pages = Pages(page, live_settings.base_url)
        await pages.login.open()
        yield pages
