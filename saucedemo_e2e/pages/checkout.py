"""SauceDemo checkout: information, overview and confirmation steps."""

import logging
from decimal import Decimal
from enum import Enum

from playwright.async_api import Page

from ..errors import CheckoutStageError, FormValidationError, SelectorMatchError
from ..pricing import parse_subtotal
from .base import ERROR_SELECTOR, BasePage

logger = logging.getLogger(__name__)


class CheckoutStage(str, Enum):
    INFORMATION = "information"
    OVERVIEW = "overview"
    CONFIRMATION = "confirmation"


class CheckoutPage(BasePage):
    """
    The three-step checkout.

    Starts at INFORMATION (the page reached from the cart). Operations that
    belong to a later step raise CheckoutStageError when called early.
    """

    FIRST_NAME = '[data-test="firstName"]'
    LAST_NAME = '[data-test="lastName"]'
    POSTAL_CODE = '[data-test="postalCode"]'
    CONTINUE_BUTTON = '[data-test="continue"]'
    SUBTOTAL_LABEL = ".summary_subtotal_label"
    FINISH_BUTTON = '[data-test="finish"]'
    COMPLETE_HEADER = ".complete-header"

    def __init__(self, page: Page, base_url: str = "https://www.saucedemo.com") -> None:
        super().__init__(page, base_url)
        self.stage = CheckoutStage.INFORMATION

    def _require(self, stage: CheckoutStage, operation: str) -> None:
        if self.stage is not stage:
            raise CheckoutStageError(
                f"{operation} is only valid at the {stage.value} step (currently at {self.stage.value})"
            )

    async def submit_information(self, first_name: str, last_name: str, postal_code: str) -> None:
        """
        Fill the customer form and continue to the overview.

        Raises:
            FormValidationError: If the form rejects the input; the stage stays INFORMATION
        """
        self._require(CheckoutStage.INFORMATION, "submit_information")
        logger.info(f"=== CHECKOUT INFORMATION: {first_name} {last_name}, {postal_code} ===")

        await self.page.fill(self.FIRST_NAME, first_name)
        await self.page.fill(self.LAST_NAME, last_name)
        await self.page.fill(self.POSTAL_CODE, postal_code)
        await self.page.click(self.CONTINUE_BUTTON)

        await self.page.locator(f"{self.SUBTOTAL_LABEL}, {ERROR_SELECTOR}").first.wait_for(state="visible")

        rejection = await self.error_message()
        if rejection:
            await self.screenshot("checkout_information")
            raise FormValidationError(f"Checkout form rejected the input: {rejection}")

        self.stage = CheckoutStage.OVERVIEW

    async def read_subtotal(self) -> Decimal:
        """
        Read the item total shown on the overview.

        Raises:
            SelectorMatchError: If the subtotal label is absent
            PriceFormatError: If the label is not "Item total: $" + decimal
        """
        self._require(CheckoutStage.OVERVIEW, "read_subtotal")

        label = self.page.locator(self.SUBTOTAL_LABEL)
        if await label.count() == 0:
            raise SelectorMatchError("Subtotal label is missing", selector=self.SUBTOTAL_LABEL, matches=0)

        text = await label.inner_text()
        subtotal = parse_subtotal(text)
        logger.info(f"Displayed subtotal: {subtotal}")
        return subtotal

    async def confirm_purchase(self) -> None:
        self._require(CheckoutStage.OVERVIEW, "confirm_purchase")
        logger.info("=== FINISH CHECKOUT ===")

        await self.page.click(self.FINISH_BUTTON)
        await self.page.locator(self.COMPLETE_HEADER).wait_for(state="visible")
        self.stage = CheckoutStage.CONFIRMATION

    async def read_confirmation_message(self) -> str:
        self._require(CheckoutStage.CONFIRMATION, "read_confirmation_message")
        return await self.page.locator(self.COMPLETE_HEADER).inner_text()
