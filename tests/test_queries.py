"""
==============================================================================
Catalog Query Tests
==============================================================================

Tests for price, category, rating and name queries.

==============================================================================
"""

import pytest
from decimal import Decimal
from typing import List

from product_filter.catalog.catalog import ProductCatalog
from product_filter.catalog.models import Product
from product_filter.catalog.queries import (
    filter_by_category,
    filter_by_price_ceiling,
    find_by_name,
    sort_by_rating_descending,
)


def make(name: str, category: str = "Misc", price: str = "1", rating: str = "3") -> Product:
    return Product(name=name, category=category, price=price, rating=rating)


class TestScenario:
    """The seeded Widget/Gadget/Gizmo catalog."""

    def test_price_ceiling(self, catalog: ProductCatalog):
        names = [p.name for p in filter_by_price_ceiling(catalog, Decimal("9.99"))]
        assert names == ["Widget", "Gizmo"]

    def test_rating_sort(self, catalog: ProductCatalog):
        ranked = sort_by_rating_descending(catalog)
        assert [(p.name, p.rating) for p in ranked] == [
            ("Gizmo", Decimal("4.9")),
            ("Widget", Decimal("4.2")),
            ("Gadget", Decimal("3.8")),
        ]

    def test_find_ignores_case(self, catalog: ProductCatalog, gadget: Product):
        lookup = find_by_name(catalog, "gadget")
        assert lookup.found
        assert lookup.unwrap() == gadget


class TestFilterByPriceCeiling:
    """Tests for filter_by_price_ceiling()."""

    def test_exactly_matching_elements(self):
        products = [make("a", price="5"), make("b", price="12"), make("c", price="0"), make("d", price="10")]

        result = filter_by_price_ceiling(products, Decimal("10"))

        assert result == [p for p in products if p.price <= Decimal("10")]
        assert [p.name for p in result] == ["a", "c", "d"]

    def test_negative_ceiling_is_empty(self, seeded_products: List[Product]):
        assert filter_by_price_ceiling(seeded_products, Decimal("-1")) == []

    def test_does_not_mutate_input(self, seeded_products: List[Product]):
        before = list(seeded_products)
        filter_by_price_ceiling(seeded_products, Decimal("0"))
        assert seeded_products == before


class TestFilterByCategory:
    """Tests for filter_by_category()."""

    def test_case_insensitive_equality(self, seeded_products: List[Product]):
        names = [p.name for p in filter_by_category(seeded_products, "TOOLS")]
        assert names == ["Widget", "Gadget"]

    def test_not_substring(self, seeded_products: List[Product]):
        assert filter_by_category(seeded_products, "Tool") == []

    def test_unknown_category(self, seeded_products: List[Product]):
        assert filter_by_category(seeded_products, "Garden") == []


class TestSortByRatingDescending:
    """Tests for sort_by_rating_descending()."""

    def test_ties_keep_catalog_order(self):
        products = [
            make("first", rating="4"),
            make("low", rating="1"),
            make("second", rating="4"),
            make("top", rating="5"),
            make("third", rating="4.0"),
        ]

        ranked = sort_by_rating_descending(products)

        assert [p.name for p in ranked] == ["top", "first", "second", "third", "low"]

    def test_non_increasing(self, seeded_products: List[Product]):
        ratings = [p.rating for p in sort_by_rating_descending(seeded_products)]
        assert all(a >= b for a, b in zip(ratings, ratings[1:]))

    def test_returns_new_list(self, seeded_products: List[Product]):
        before = list(seeded_products)
        ranked = sort_by_rating_descending(seeded_products)
        assert ranked is not seeded_products
        assert seeded_products == before

    def test_empty(self):
        assert sort_by_rating_descending([]) == []


class TestFindByName:
    """Tests for find_by_name()."""

    def test_absent(self, seeded_products: List[Product]):
        lookup = find_by_name(seeded_products, "Sprocket")
        assert not lookup.found
        assert lookup.product is None
        with pytest.raises(LookupError):
            lookup.unwrap()

    def test_first_match_wins(self):
        products = [make("Lamp", price="10"), make("lamp", price="20")]
        assert find_by_name(products, "LAMP").unwrap().price == Decimal("10")

    def test_exact_not_partial(self, seeded_products: List[Product]):
        assert not find_by_name(seeded_products, "Widg").found
