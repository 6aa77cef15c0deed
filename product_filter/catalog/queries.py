"""
==============================================================================
Catalog Query Module
==============================================================================

Side-effect-free queries over a catalog snapshot.

Every function accepts any iterable of products (a ProductCatalog
iterates over a snapshot of itself) and returns new lists, so the
catalog is never mutated.

==============================================================================
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List

from .models import Product, ProductLookup


def filter_by_price_ceiling(products: Iterable[Product], max_price: Decimal) -> List[Product]:
    """
    Get products priced at or below a ceiling, in catalog order.

    A negative ceiling simply matches nothing.
    """
    return [product for product in products if product.price <= max_price]


def filter_by_category(products: Iterable[Product], category: str) -> List[Product]:
    """Get products whose category equals `category`, ignoring case."""
    wanted = category.casefold()
    return [product for product in products if product.category.casefold() == wanted]


def sort_by_rating_descending(products: Iterable[Product]) -> List[Product]:
    """
    Get products ordered by rating, highest first.

    sorted() is stable and reverse=True keeps equal keys in their
    original order, so ties stay in catalog order.
    """
    return sorted(products, key=lambda product: product.rating, reverse=True)


def find_by_name(products: Iterable[Product], name: str) -> ProductLookup:
    """
    Find the first product whose name equals `name`, ignoring case.

    Returns:
        ProductLookup.present(product) or ProductLookup.absent()
    """
    wanted = name.casefold()
    for product in products:
        if product.name.casefold() == wanted:
            return ProductLookup.present(product)
    return ProductLookup.absent()
