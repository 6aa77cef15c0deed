"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Endpoints for querying the product catalog and adding products.

==============================================================================
"""

from fastapi import APIRouter, Depends, Query, Response, status

from product_filter.core import exceptions
from product_filter.core.dependencies import get_catalog_service
from product_filter.schemas.product import (
    CatalogStatsResponse,
    ProductAddResponse,
    ProductCreate,
    ProductDetail,
    ProductListResponse,
    ProductResponse,
)
from product_filter.services.catalog_service import CatalogService


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, service: CatalogService):
        self._service = service

    def list_products(self) -> ProductListResponse:
        return ProductListResponse.from_products(self._service.list_products())

    def filter_by_price(self, max_price: str) -> ProductListResponse:
        return ProductListResponse.from_products(self._service.filter_by_price(max_price))

    def filter_by_category(self, category: str) -> ProductListResponse:
        return ProductListResponse.from_products(self._service.filter_by_category(category))

    def sort_by_rating(self) -> ProductListResponse:
        return ProductListResponse.from_products(self._service.sort_by_rating())

    def get_by_name(self, name: str) -> ProductDetail:
        """Get product by name."""
        lookup = self._service.find_by_name(name)

        if not lookup.found:
            raise exceptions.product_not_found(name)

        return ProductDetail(product=ProductResponse.from_product(lookup.unwrap()))

    def add_product(self, data: ProductCreate) -> ProductAddResponse:
        result = self._service.add_product(
            data.name,
            data.category,
            data.price,
            data.rating
        )
        return ProductAddResponse.from_result(result)

    def get_stats(self) -> CatalogStatsResponse:
        """Get catalog statistics."""
        return CatalogStatsResponse.create(
            self._service.catalog.get_stats(),
            self._service.load_report()
        )


@router.get("", response_model=ProductListResponse)
async def list_products(service: CatalogService = Depends(get_catalog_service)):
    """List all products in catalog order."""
    return ProductController(service).list_products()


@router.get("/filter/price", response_model=ProductListResponse)
async def filter_by_price(
    max_price: str = Query(..., description="Inclusive price ceiling"),
    service: CatalogService = Depends(get_catalog_service)
):
    """List products priced at or below max_price."""
    return ProductController(service).filter_by_price(max_price)


@router.get("/filter/category", response_model=ProductListResponse)
async def filter_by_category(
    category: str = Query(...),
    service: CatalogService = Depends(get_catalog_service)
):
    """List products in a category (case-insensitive)."""
    return ProductController(service).filter_by_category(category)


@router.get("/sorted/rating", response_model=ProductListResponse)
async def sort_by_rating(service: CatalogService = Depends(get_catalog_service)):
    """List products by rating, highest first."""
    return ProductController(service).sort_by_rating()


@router.get("/name/{name}", response_model=ProductDetail)
async def get_product_by_name(
    name: str,
    service: CatalogService = Depends(get_catalog_service)
):
    """Get the first product with this name (case-insensitive)."""
    return ProductController(service).get_by_name(name)


@router.get("/stats", response_model=CatalogStatsResponse)
async def get_catalog_stats(service: CatalogService = Depends(get_catalog_service)):
    """Get catalog statistics and load warnings."""
    return ProductController(service).get_stats()


@router.post("", response_model=ProductAddResponse)
def add_product(
    data: ProductCreate,
    response: Response,
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Add a product.

    Returns 201 when the product reached the file. When only the
    in-memory catalog was updated, returns 200 with persisted=false.

    Runs in the threadpool; the file append blocks.
    """
    result = ProductController(service).add_product(data)
    if result.persisted:
        response.status_code = status.HTTP_201_CREATED
    return result
