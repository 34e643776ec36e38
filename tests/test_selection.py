"""Tests for random product selection."""

from __future__ import annotations

import random

import pytest

from saucedemo_e2e.models import Product
from saucedemo_e2e.selection import make_rng, sample_without_replacement, select_products


class TestSampleWithoutReplacement:
    @pytest.mark.parametrize("size", [0, 1, 4, 5, 6, 20])
    def test_size_is_min_of_limit_and_catalog(self, size: int) -> None:
        items = list(range(size))
        drawn = sample_without_replacement(items, 5, random.Random(size))
        assert len(drawn) == min(5, size)

    def test_no_entry_drawn_twice(self) -> None:
        items = [f"item-{i}" for i in range(50)]
        for seed in range(25):
            drawn = sample_without_replacement(items, 5, random.Random(seed))
            assert len(set(drawn)) == len(drawn)
            assert set(drawn) <= set(items)

    def test_whole_catalog_when_limit_exceeds_it(self) -> None:
        items = ["a", "b", "c"]
        assert sorted(sample_without_replacement(items, 5, random.Random(1))) == items

    def test_negative_limit_rejected(self) -> None:
        with pytest.raises(ValueError):
            sample_without_replacement([1, 2, 3], -1)

    def test_same_seed_replays_selection(self) -> None:
        items = list(range(30))
        first = sample_without_replacement(items, 5, make_rng(42))
        second = sample_without_replacement(items, 5, make_rng(42))
        assert first == second

    def test_input_is_not_mutated(self) -> None:
        items = [3, 1, 2]
        sample_without_replacement(items, 2, random.Random(0))
        assert items == [3, 1, 2]


class TestSelectProducts:
    def test_default_limit_is_five(self, catalog: list[Product]) -> None:
        selection = select_products(catalog, rng=random.Random(7))
        assert len(selection) == 5
        assert len({product.name for product in selection}) == 5

    def test_empty_catalog(self) -> None:
        assert select_products([], rng=random.Random(7)) == []

    def test_selection_comes_from_catalog(self, catalog: list[Product]) -> None:
        selection = select_products(catalog, rng=random.Random(3))
        assert all(product in catalog for product in selection)
