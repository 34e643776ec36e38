"""Exceptions raised by the SauceDemo page objects, flows and API checks."""

from typing import Any, Optional


class SauceDemoError(Exception):
    """Base class for every failure raised by this package."""


class ConfigurationError(SauceDemoError):
    """Required configuration is missing or unreadable."""


class SelectorMatchError(SauceDemoError):
    """An expected element is absent, or a by-name lookup is ambiguous."""

    def __init__(self, message: str, selector: Optional[str] = None, matches: Optional[int] = None) -> None:
        super().__init__(message)
        self.selector = selector
        self.matches = matches


class AuthenticationError(SelectorMatchError):
    """Login was rejected or the catalog never appeared."""


class PriceFormatError(SauceDemoError, ValueError):
    """A currency label does not match its fixed format."""

    def __init__(self, raw_text: str, expected_format: str) -> None:
        super().__init__(f"Cannot parse {raw_text!r} as {expected_format}")
        self.raw_text = raw_text
        self.expected_format = expected_format


class FormValidationError(SauceDemoError):
    """The checkout form rejected the submitted information."""


class CheckoutStageError(SauceDemoError):
    """A checkout operation was invoked outside the stage it belongs to."""


class ScenarioAssertionError(SauceDemoError, AssertionError):
    """A purchase-flow invariant did not hold."""

    def __init__(self, step: str, expected: Any, actual: Any, detail: str = "") -> None:
        message = f"[{step}] expected {expected!r}, got {actual!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.step = step
        self.expected = expected
        self.actual = actual


class ContractViolation(SauceDemoError, AssertionError):
    """A REST response does not have the expected shape or values."""

    def __init__(self, endpoint: str, field: str, expected: Any, actual: Any) -> None:
        super().__init__(f"{endpoint}: field {field!r} expected {expected!r}, got {actual!r}")
        self.endpoint = endpoint
        self.field = field
        self.expected = expected
        self.actual = actual


class TransportError(SauceDemoError):
    """An HTTP call did not return a success status."""

    def __init__(self, method: str, url: str, status_code: int) -> None:
        super().__init__(f"{method} {url} returned HTTP {status_code}")
        self.method = method
        self.url = url
        self.status_code = status_code
