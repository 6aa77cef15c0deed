"""
==============================================================================
Catalog Service Module
==============================================================================

Caller-facing catalog operations.

This module implements:
- CatalogService: Parses raw caller input and delegates to the
  catalog store and the query functions

Error Handling:
--------------
- Unparseable price/rating/ceiling input raises InputFormatError and
  leaves the catalog unchanged
- Storage failures on add are returned in AddResult, never raised

==============================================================================
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Union

from pydantic import ValidationError

from product_filter.catalog import queries
from product_filter.catalog.catalog import ProductCatalog
from product_filter.catalog.models import AddResult, LoadReport, Product, ProductLookup
from product_filter.core.exceptions import InputFormatError
from product_filter.utils.validators import decimal_validator


# Module logger
logger = logging.getLogger(__name__)

DecimalInput = Union[str, int, float, Decimal]


class CatalogService:
    """
    Catalog operations for a single ProductCatalog.

    Attributes:
        _catalog: The catalog store this service reads and writes

    Example:
        >>> service = CatalogService(ProductCatalog(Path("products.txt")))
        >>> service.filter_by_price("10")
        [Product(name='Widget', ...), ...]
        >>> result = service.add_product("Gizmo", "Toys", "9.99", "4.9")
        >>> result.persisted
        True
    """

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> ProductCatalog:
        return self._catalog

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def load_report(self) -> LoadReport:
        """Get the count loaded and the skipped-line warnings."""
        return self._catalog.load_report

    def list_products(self) -> List[Product]:
        return self._catalog.products

    def filter_by_price(self, max_price: DecimalInput) -> List[Product]:
        """
        Get products priced at or below `max_price`.

        Raises:
            InputFormatError: If max_price is not a valid decimal
        """
        ceiling = self._parse_decimal("max_price", max_price)
        return queries.filter_by_price_ceiling(self._catalog, ceiling)

    def filter_by_category(self, category: str) -> List[Product]:
        return queries.filter_by_category(self._catalog, category)

    def sort_by_rating(self) -> List[Product]:
        return queries.sort_by_rating_descending(self._catalog)

    def find_by_name(self, name: str) -> ProductLookup:
        return queries.find_by_name(self._catalog, name)

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    def add_product(
        self,
        name: str,
        category: str,
        price: DecimalInput,
        rating: DecimalInput
    ) -> AddResult:
        """
        Build a product from raw input and add it to the catalog.

        Args:
            name: Product name
            category: Product category
            price: Price as text or number
            rating: Rating as text or number

        Returns:
            AddResult; check `persisted` for the storage outcome

        Raises:
            InputFormatError: If any field is invalid (catalog unchanged)
        """
        parsed_price = self._parse_decimal("price", price)
        parsed_rating = self._parse_decimal("rating", rating)

        try:
            product = Product(
                name=name,
                category=category,
                price=parsed_price,
                rating=parsed_rating
            )
        except ValidationError as e:
            first = e.errors()[0]
            field = str(first["loc"][0]) if first["loc"] else "product"
            logger.warning(f"Rejected product input: {e}")
            raise InputFormatError(field, first.get("input"), first["msg"]) from e

        result = self._catalog.add(product)
        if not result.persisted:
            logger.warning(f"Product {product.name!r} kept in memory only")
        return result

    # =========================================================================
    # HELPERS
    # =========================================================================

    @staticmethod
    def _parse_decimal(field: str, value: DecimalInput) -> Decimal:
        is_valid, parsed, error = decimal_validator.validate(value)
        if not is_valid:
            raise InputFormatError(field, value, error)
        return parsed
