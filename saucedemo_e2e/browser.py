"""Playwright browser lifecycle for one scenario."""

import logging
from typing import Optional

from playwright.async_api import async_playwright, Browser, BrowserContext, Page, Playwright

logger = logging.getLogger(__name__)


class BrowserSession:
    """Owns the Playwright driver, browser, context and page of a single scenario."""

    def __init__(self, headless: bool = True, timeout_ms: int = 30_000) -> None:
        """
        Initialize the session.

        Args:
            headless: Run the browser without a window
            timeout_ms: Default timeout for every Playwright action
        """
        self.headless = headless
        self.timeout_ms = timeout_ms
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self.page: Optional[Page] = None

    async def start(self) -> Page:
        """Launch Chromium and open a fresh page."""
        if self.page is not None:
            return self.page

        self.playwright = await async_playwright().start()
        try:
            self.browser = await self.playwright.chromium.launch(
                headless=self.headless,
                args=[
                    '--disable-dev-shm-usage',
                    '--no-sandbox',
                ],
            )
            self.context = await self.browser.new_context(
                viewport={'width': 1920, 'height': 1080},
                locale='en-US',
            )
            self.context.set_default_timeout(self.timeout_ms)
            self.page = await self.context.new_page()
        except Exception:
            await self.close()
            raise
        logger.info(f"Browser started (headless={self.headless}, timeout={self.timeout_ms}ms)")
        return self.page

    async def close(self) -> None:
        """Close the browser and cleanup; a failing step does not skip the next ones."""
        steps = [
            ("page", self.page, "close"),
            ("context", self.context, "close"),
            ("browser", self.browser, "close"),
            ("playwright", self.playwright, "stop"),
        ]
        self.page = None
        self.context = None
        self.browser = None
        self.playwright = None

        for name, resource, method in steps:
            if resource is None:
                continue
            try:
                await getattr(resource, method)()
            except Exception as e:
                logger.warning(f"Error closing {name}: {e}")

    async def __aenter__(self) -> Page:
        return await self.start()

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
