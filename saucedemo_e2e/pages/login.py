"""SauceDemo login screen."""

import logging

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..errors import AuthenticationError
from ..models import Credentials
from .base import ERROR_SELECTOR, BasePage

logger = logging.getLogger(__name__)


class LoginPage(BasePage):
    """The login form shown at the web shop root."""

    USERNAME = "#user-name"
    PASSWORD = "#password"
    LOGIN_BUTTON = "#login-button"
    INVENTORY_LIST = ".inventory_list"

    async def open(self) -> None:
        """Navigate to the login form."""
        await self.page.goto(f"{self.base_url}/", wait_until="domcontentloaded")

    async def authenticate(self, credentials: Credentials) -> None:
        """
        Log in and wait for the catalog screen.

        Args:
            credentials: Username and password

        Raises:
            AuthenticationError: If the app rejects the credentials or the
                catalog does not appear within the default action timeout
        """
        logger.info(f"=== LOGIN: username={credentials.username} ===")

        await self.page.fill(self.USERNAME, credentials.username)
        await self.page.fill(self.PASSWORD, credentials.password)
        await self.page.click(self.LOGIN_BUTTON)

        # Either the catalog or the inline error shows up
        outcome = self.page.locator(f"{self.INVENTORY_LIST}, {ERROR_SELECTOR}").first
        try:
            await outcome.wait_for(state="visible")
        except PlaywrightTimeoutError as e:
            await self.screenshot("login_timeout")
            raise AuthenticationError(
                "Login failed: catalog did not appear", selector=self.INVENTORY_LIST, matches=0
            ) from e

        rejection = await self.error_message()
        if rejection:
            await self.screenshot("login_rejected")
            raise AuthenticationError(f"Login rejected: {rejection}", selector=self.INVENTORY_LIST, matches=0)

        logger.info("LOGIN SUCCESS")
