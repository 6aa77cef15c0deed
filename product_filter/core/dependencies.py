"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection functions for FastAPI routes.

Usage:
------
    from fastapi import Depends
    from product_filter.core.dependencies import get_catalog_service

    @router.get("/products")
    async def list_products(service: CatalogService = Depends(get_catalog_service)):
        ...

Tests replace `get_catalog_service` through `app.dependency_overrides`.

==============================================================================
"""

from __future__ import annotations

from product_filter.catalog.catalog import ProductCatalog, get_catalog
from product_filter.core import exceptions
from product_filter.services.catalog_service import CatalogService


def require_catalog() -> ProductCatalog:
    """
    Get the process catalog.

    Raises:
        AppException: CATALOG_NOT_LOADED before startup has run
    """
    catalog = get_catalog()
    if catalog is None:
        raise exceptions.catalog_not_loaded()
    return catalog


def get_catalog_service() -> CatalogService:
    """Get a CatalogService bound to the process catalog."""
    return CatalogService(require_catalog())
