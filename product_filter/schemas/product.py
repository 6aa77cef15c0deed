"""
==============================================================================
Product Schemas Module
==============================================================================

Request and response schemas for the product endpoints.

Numbers in requests may be sent as JSON numbers or strings; they are
parsed by the catalog service so malformed values produce the same
INVALID_INPUT error everywhere.

==============================================================================
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field

from product_filter.catalog.models import AddResult, LoadReport, Product


DecimalField = Union[str, int, float]


class ProductCreate(BaseModel):
    """Schema for adding a product."""

    name: str = Field(..., description="Product name")
    category: str = Field(..., description="Product category")
    price: DecimalField = Field(..., description="Unit price, e.g. \"9.99\"")
    rating: DecimalField = Field(..., description="Rating, e.g. \"4.2\"")


class ProductResponse(BaseModel):
    """Product response schema for API endpoints."""

    name: str
    category: str
    price: float
    rating: float

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        """Create response from Product model."""
        return cls(
            name=product.name,
            category=product.category,
            price=float(product.price),
            rating=float(product.rating)
        )


class ProductListResponse(BaseModel):
    """List of products with total count."""

    success: bool = Field(default=True)
    total: int = Field(ge=0)
    products: List[ProductResponse]

    @classmethod
    def from_products(cls, products: List[Product]) -> "ProductListResponse":
        return cls(
            total=len(products),
            products=[ProductResponse.from_product(p) for p in products]
        )


class ProductDetail(BaseModel):
    """Single product response."""

    success: bool = Field(default=True)
    product: ProductResponse


class ProductAddResponse(BaseModel):
    """Result of adding a product."""

    success: bool = Field(default=True)
    persisted: bool
    product: ProductResponse
    error: Optional[dict] = None

    @classmethod
    def from_result(cls, result: AddResult) -> "ProductAddResponse":
        return cls(
            persisted=result.persisted,
            product=ProductResponse.from_product(result.product),
            error=result.error.to_dict()["error"] if result.error else None
        )


class CatalogStatsResponse(BaseModel):
    """Catalog statistics with load warnings."""

    success: bool = Field(default=True)
    stats: dict
    storage_present: bool
    warnings: List[str]

    @classmethod
    def create(cls, stats: dict, report: LoadReport) -> "CatalogStatsResponse":
        return cls(
            stats=stats,
            storage_present=report.storage_present,
            warnings=report.warnings
        )
