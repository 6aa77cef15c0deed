"""
==============================================================================
Catalog Package - Product Management
==============================================================================

Flat-file product catalog with price, category, rating and name queries.

Classes:
--------
- Product: Pydantic model for products
- ProductCatalog: Catalog store with file-backed appends

Functions:
----------
- encode / decode: Record codec for the flat product file
- filter_by_price_ceiling, filter_by_category,
  sort_by_rating_descending, find_by_name: Catalog queries

==============================================================================
"""

from .models import AddResult, LoadReport, Product, ProductLookup, SkippedRecord
from .codec import decode, encode
from .catalog import ProductCatalog, get_catalog, init_catalog
from .queries import (
    filter_by_category,
    filter_by_price_ceiling,
    find_by_name,
    sort_by_rating_descending,
)

__all__ = [
    "AddResult",
    "LoadReport",
    "Product",
    "ProductLookup",
    "SkippedRecord",
    "decode",
    "encode",
    "ProductCatalog",
    "get_catalog",
    "init_catalog",
    "filter_by_category",
    "filter_by_price_ceiling",
    "find_by_name",
    "sort_by_rating_descending",
]
