"""Configuration loaded from the environment and the bundled test data."""

import json
import os
from pathlib import Path
from typing import Optional
import logging

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigurationError
from .models import CheckoutInfo, Credentials

logger = logging.getLogger(__name__)

DEFAULT_TEST_DATA = Path(__file__).parent / "data" / "test_data.json"


class Settings(BaseModel):
    """Settings for one suite run."""

    base_url: str = Field(default="https://www.saucedemo.com", description="SauceDemo web shop")
    api_base_url: str = Field(default="https://jsonplaceholder.typicode.com", description="REST API under test")
    username: Optional[str] = Field(None, description="SauceDemo username")
    password: Optional[str] = Field(None, description="SauceDemo password")
    headless: bool = Field(default=True, description="Run the browser headless")
    timeout_ms: int = Field(default=30_000, gt=0, description="Default Playwright action timeout")
    test_data_file: Path = Field(default=DEFAULT_TEST_DATA, description="JSON file holding the customer record")
    seed: Optional[int] = Field(None, description="Seed for the random product selection")

    def credentials(self) -> Credentials:
        """
        Get the login credentials.

        Raises:
            ConfigurationError: If SAUCE_USERNAME or SAUCE_PASSWORD is not set
        """
        if not self.username or not self.password:
            raise ConfigurationError("SAUCE_USERNAME and SAUCE_PASSWORD must be set")
        return Credentials(username=self.username, password=self.password)

    def customer(self) -> CheckoutInfo:
        """Load the fixed customer record used on the checkout form."""
        return load_customer(self.test_data_file)


def load_customer(path: Path) -> CheckoutInfo:
    """
    Load the customer record from a test data file.

    The file holds ``{"customer": {"firstName", "lastName", "zip"}}``.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return CheckoutInfo(**data["customer"])
    except (OSError, json.JSONDecodeError, KeyError, TypeError, ValidationError) as e:
        raise ConfigurationError(f"Could not load customer data from {path}: {e}") from e


def _env_flag(value: str) -> bool:
    return value.strip().lower() not in ("0", "false", "no", "off", "")


def load_settings(environ: Optional[dict[str, str]] = None) -> Settings:
    """
    Build settings from environment variables.

    Environment variable mapping:
    - SAUCE_BASE_URL → base_url
    - SAUCE_USERNAME / SAUCE_PASSWORD → credentials
    - API_BASE_URL → api_base_url
    - SAUCE_HEADLESS → headless ("0", "false", "no", "off" disable it)
    - SAUCE_TIMEOUT_MS → timeout_ms
    - SAUCE_TEST_DATA → test_data_file
    - SAUCE_SEED → seed
    """
    env = os.environ if environ is None else environ
    values: dict = {}

    if env.get("SAUCE_BASE_URL"):
        values["base_url"] = env["SAUCE_BASE_URL"].rstrip("/")
    if env.get("API_BASE_URL"):
        values["api_base_url"] = env["API_BASE_URL"].rstrip("/")
    if env.get("SAUCE_USERNAME"):
        values["username"] = env["SAUCE_USERNAME"]
    if env.get("SAUCE_PASSWORD"):
        values["password"] = env["SAUCE_PASSWORD"]
    if "SAUCE_HEADLESS" in env:
        values["headless"] = _env_flag(env["SAUCE_HEADLESS"])
    if env.get("SAUCE_TIMEOUT_MS"):
        values["timeout_ms"] = env["SAUCE_TIMEOUT_MS"]
    if env.get("SAUCE_TEST_DATA"):
        values["test_data_file"] = env["SAUCE_TEST_DATA"]
    if env.get("SAUCE_SEED"):
        values["seed"] = env["SAUCE_SEED"]

    try:
        settings = Settings(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    if settings.username:
        logger.info(f"Credentials loaded from environment for: {settings.username}")
    else:
        logger.debug("No credentials found in environment variables (SAUCE_USERNAME, SAUCE_PASSWORD)")
    return settings
