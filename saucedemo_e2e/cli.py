"""CLI entry point for the SauceDemo end-to-end suite."""

import argparse
import asyncio
import logging
import random
import sys

import httpx
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .api import (
    JsonPlaceholderClient,
    check_create_post,
    check_delete_post,
    check_list_posts,
    check_update_post,
    make_post,
)
from .browser import BrowserSession
from .config import Settings, load_settings
from .errors import SauceDemoError
from .flow import PurchaseFlow
from .models import PurchaseReport
from .pages import Pages

logger = logging.getLogger("saucedemo-e2e")


async def run_purchase(settings: Settings, item_limit: int) -> PurchaseReport:
    """Run the random purchase flow in a browser owned by this call."""
    credentials = settings.credentials()
    customer = settings.customer()

    async with BrowserSession(headless=settings.headless, timeout_ms=settings.timeout_ms) as page:
        pages = Pages(page, settings.base_url)
        await pages.login.open()
        flow = PurchaseFlow(
            pages.login,
            pages.inventory,
            pages.cart,
            pages.checkout,
            credentials,
            customer,
            item_limit=item_limit,
            seed=settings.seed,
        )
        return await flow.run()


def run_api_checks(settings: Settings) -> bool:
    """
    Run the four contract checks, each on its own.

    A failing check is reported and the remaining checks still run.

    Returns:
        True if every check passed
    """
    rng = random.Random(settings.seed)

    def list_posts(client: JsonPlaceholderClient) -> str:
        return f"{len(check_list_posts(client))} posts"

    def create_post(client: JsonPlaceholderClient) -> str:
        return f"Created Post: {check_create_post(client, make_post(rng)).model_dump(by_alias=True)}"

    def update_post(client: JsonPlaceholderClient) -> str:
        updated = check_update_post(client, make_post(rng, prefix="Updated"))
        return f"Updated Post: {updated.model_dump(by_alias=True)}"

    def delete_post(client: JsonPlaceholderClient) -> str:
        check_delete_post(client)
        return "ok"

    checks = [
        ("GET /posts", list_posts),
        ("POST /posts", create_post),
        ("PUT /posts/1", update_post),
        ("DELETE /posts/1", delete_post),
    ]

    failures = 0
    with JsonPlaceholderClient(settings.api_base_url) as client:
        for name, check in checks:
            try:
                print(f"{name}: {check(client)}")
            except (SauceDemoError, httpx.HTTPError) as e:
                failures += 1
                logger.error(f"{name} failed: {e}")
                print(f"{name}: FAILED: {e}", file=sys.stderr)

    return failures == 0


def print_report(report: PurchaseReport) -> None:
    print(f"Selected {len(report.selected)} products: {report.selected_names}")
    if report.price_check:
        print(f"Item total: expected ${report.price_check.expected}, displayed ${report.price_check.actual}")
    print(f"Confirmation: {report.confirmation}")
    print(f"Seed: {report.seed}")


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be zero or greater, got {number}")
    return number


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="SauceDemo end-to-end suite")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    purchase = subparsers.add_parser("purchase", help="Run the random purchase flow against the web shop")
    purchase.add_argument(
        "--items",
        type=non_negative_int,
        default=5,
        help="Maximum number of products to buy (default: 5)",
    )
    purchase.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the product selection (default: SAUCE_SEED or random)",
    )
    purchase.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window",
    )

    subparsers.add_parser("api", help="Run the JSONPlaceholder contract checks")

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        settings = load_settings()
        if args.command == "purchase":
            if args.seed is not None:
                settings.seed = args.seed
            if args.headed:
                settings.headless = False
            report = asyncio.run(run_purchase(settings, args.items))
            print_report(report)
        elif not run_api_checks(settings):
            print("FAILURE: one or more API contract checks failed", file=sys.stderr)
            sys.exit(1)
    except PlaywrightTimeoutError as e:
        print(f"A step timed out. The page may be slow or elements changed: {e}", file=sys.stderr)
        sys.exit(2)
    except SauceDemoError as e:
        print(f"FAILURE: {e}", file=sys.stderr)
        sys.exit(1)

    print("SUCCESS")


if __name__ == "__main__":
    main()
