"""Shared plumbing for the SauceDemo page objects."""

import logging
from typing import Optional

from playwright.async_api import Page

logger = logging.getLogger(__name__)

ERROR_SELECTOR = '[data-test="error"]'


class BasePage:
    """A single SauceDemo screen bound to a Playwright page."""

    def __init__(self, page: Page, base_url: str = "https://www.saucedemo.com") -> None:
        """
        Initialize the page object.

        Args:
            page: Playwright page owned by the current scenario
            base_url: Root URL of the web shop
        """
        self.page = page
        self.base_url = base_url.rstrip("/")

    async def error_message(self) -> Optional[str]:
        """Return the inline form error the app shows, if any."""
        error = self.page.locator(ERROR_SELECTOR)
        if await error.count() == 0 or not await error.first.is_visible():
            return None
        return (await error.first.inner_text()).strip()

    async def screenshot(self, name: str) -> None:
        """Save a debugging screenshot; failures are logged, not raised."""
        path = f"/tmp/saucedemo_{name}.png"
        try:
            await self.page.screenshot(path=path)
            logger.info(f"Screenshot saved to {path}")
        except Exception as e:
            logger.debug(f"Could not save screenshot {path}: {e}")
