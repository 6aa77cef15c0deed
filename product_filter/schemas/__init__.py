"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas using Pydantic for validation.

==============================================================================
"""

from .product import (
    CatalogStatsResponse,
    ProductAddResponse,
    ProductCreate,
    ProductDetail,
    ProductListResponse,
    ProductResponse,
)

__all__ = [
    # Product
    "CatalogStatsResponse",
    "ProductAddResponse",
    "ProductCreate",
    "ProductDetail",
    "ProductListResponse",
    "ProductResponse",
]
