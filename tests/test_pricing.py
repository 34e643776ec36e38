"""Tests for currency label parsing and total reconciliation."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from saucedemo_e2e.errors import PriceFormatError
from saucedemo_e2e.models import PriceCheck, Product
from saucedemo_e2e.pricing import parse_price, parse_subtotal, reconcile, sum_prices


class TestParsePrice:
    def test_catalog_price(self) -> None:
        assert parse_price("$29.99") == Decimal("29.99")

    def test_surrounding_whitespace(self) -> None:
        assert parse_price("  $7.99\n") == Decimal("7.99")

    def test_whole_dollars(self) -> None:
        assert parse_price("$10") == Decimal("10")

    @pytest.mark.parametrize("text", ["29.99", "€29.99", "$", "$29.99 USD", "", "$-1.00", "$abc"])
    def test_malformed_price_fails(self, text: str) -> None:
        with pytest.raises(PriceFormatError) as exc_info:
            parse_price(text)
        assert exc_info.value.raw_text == text

    def test_price_format_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_price("29.99")


class TestParseSubtotal:
    def test_item_total_label(self) -> None:
        assert parse_subtotal("Item total: $29.99") == Decimal("29.99")

    def test_large_total(self) -> None:
        assert parse_subtotal("Item total: $103.95") == Decimal("103.95")

    @pytest.mark.parametrize(
        "text",
        ["Item total: 29.99", "Total: $29.99", "$29.99", "Item total: $", "Tax: $2.40"],
    )
    def test_malformed_label_fails(self, text: str) -> None:
        with pytest.raises(PriceFormatError) as exc_info:
            parse_subtotal(text)
        assert text in str(exc_info.value)


class TestReconcile:
    def test_sum_is_exact(self, catalog: list[Product]) -> None:
        assert sum_prices(catalog) == Decimal("109.94")

    def test_empty_sum_is_zero(self) -> None:
        assert sum_prices([]) == Decimal("0")

    def test_within_tolerance(self, catalog: list[Product]) -> None:
        check = reconcile(catalog[:2], Decimal("19.99"))
        assert check.expected == Decimal("19.98")
        assert check.matches

    def test_outside_tolerance(self, catalog: list[Product]) -> None:
        check = reconcile(catalog[:2], Decimal("20.00"))
        assert check.difference == Decimal("0.02")
        assert not check.matches

    def test_exact_comparison_with_zero_tolerance(self) -> None:
        assert PriceCheck(expected=Decimal("1.00"), actual=Decimal("1.00"), tolerance=Decimal("0")).matches
        assert not PriceCheck(expected=Decimal("1.00"), actual=Decimal("1.01"), tolerance=Decimal("0")).matches


class TestProductValidation:
    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Product(name="", price=Decimal("1.00"))

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Product(name="Onesie", price=Decimal("-7.99"))

    def test_non_finite_price_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Product(name="Onesie", price=Decimal("NaN"))
