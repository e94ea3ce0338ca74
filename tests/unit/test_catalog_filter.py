"""Unit tests for product listing filters."""

import pytest

from rural_connect.models.catalog_models import Product
from rural_connect.services.catalog_filter import (
    ALL_CATEGORIES,
    category_label,
    filter_products,
    list_categories,
)
from rural_connect.services.seed_service import build_products


@pytest.mark.unit
class TestFilterProducts:
    """Test suite for filter_products."""

    @pytest.fixture
    def products(
        self, rice: Product, paracetamol: Product, sold_out_lantern: Product
    ) -> list[Product]:
        """Three products across three categories."""
        return [rice, paracetamol, sold_out_lantern]

    def test_no_filters_returns_everything_in_order(self, products: list[Product]) -> None:
        """Test that an empty search and "all" keep the full list in order."""
        assert filter_products(products, "", ALL_CATEGORIES) == products

    def test_defaults_return_everything(self, products: list[Product]) -> None:
        """Test the default arguments apply no filter."""
        assert filter_products(products) == products

    def test_search_is_case_insensitive(self, products: list[Product]) -> None:
        """Test that the search term matches names regardless of case."""
        result = filter_products(products, "BASMATI")

        assert [p.id for p in result] == ["prod_rice"]

    def test_search_does_not_match_description(self, products: list[Product]) -> None:
        """Test that only product names are searched."""
        assert filter_products(products, "fever") == []

    def test_category_filter(self, products: list[Product]) -> None:
        """Test filtering on a single category."""
        result = filter_products(products, category="electronics")

        assert [p.id for p in result] == ["prod_lantern"]

    def test_out_of_stock_products_are_listed(self, products: list[Product]) -> None:
        """Test that stock does not affect filtering."""
        result = filter_products(products, "lantern")

        assert [p.id for p in result] == ["prod_lantern"]
        assert result[0].in_stock is False

    def test_unknown_category_matches_nothing(self, products: list[Product]) -> None:
        """Test that an unknown category yields an empty list."""
        assert filter_products(products, category="toys") == []

    def test_seed_catalog_medicines_paracetamol(self) -> None:
        """Test that the seed catalog has exactly one paracetamol medicine."""
        result = filter_products(build_products(), "paracetamol", "medicines")

        assert len(result) == 1
        assert result[0].name == "Paracetamol Tablets (Strip of 10)"
        assert result[0].price == 25

    def test_seed_catalog_search_across_categories(self) -> None:
        """Test a search matching products in several categories."""
        result = filter_products(build_products(), "organic")

        assert [p.name for p in result] == [
            "Organic Jaggery (1kg)",
            "Organic Turmeric Powder (200g)",
            "Organic Fertilizer (5kg)",
        ]



@pytest.mark.unit
class TestCategories:
    """Test suite for category helpers."""

    def test_list_categories_first_seen_order(
        self, rice: Product, paracetamol: Product, sold_out_lantern: Product
    ) -> None:
        """Test that categories follow "all" in first-seen order without repeats."""
        products = [paracetamol, rice, sold_out_lantern, rice]

        assert list_categories(products) == ["all", "medicines", "groceries", "electronics"]

    def test_list_categories_empty(self) -> None:
        """Test that an empty catalog only offers "all"."""
        assert list_categories([]) == ["all"]

    def test_seed_categories(self) -> None:
        """Test the categories present in the seed catalog."""
        assert list_categories(build_products()) == [
            "all",
            "groceries",
            "medicines",
            "household",
            "electronics",
            "agriculture",
        ]

    @pytest.mark.parametrize(
        ("category", "label"),
        [("all", "All Categories"), ("groceries", "Groceries"), ("medicines", "Medicines")],
    )
    def test_category_label(self, category: str, label: str) -> None:
        """Test display labels for category options."""
        assert category_label(category) == label
