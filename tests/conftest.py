"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides product files, catalog, service and API client fixtures.

==============================================================================
"""

import pytest
from decimal import Decimal
from pathlib import Path
from typing import Generator, List

from fastapi.testclient import TestClient

from product_filter.catalog import catalog as catalog_module
from product_filter.catalog.catalog import ProductCatalog, init_catalog
from product_filter.catalog.models import Product
from product_filter.main import app
from product_filter.services.catalog_service import CatalogService


SEED_LINES = [
    "Widget,Tools,9.99,4.2",
    "Gadget,Tools,19.99,3.8",
    "Gizmo,Toys,9.99,4.9",
]


# ============================================================================
# PRODUCT FIXTURES
# ============================================================================

@pytest.fixture
def widget() -> Product:
    return Product(name="Widget", category="Tools", price=Decimal("9.99"), rating=Decimal("4.2"))


@pytest.fixture
def gadget() -> Product:
    return Product(name="Gadget", category="Tools", price=Decimal("19.99"), rating=Decimal("3.8"))


@pytest.fixture
def gizmo() -> Product:
    return Product(name="Gizmo", category="Toys", price=Decimal("9.99"), rating=Decimal("4.9"))


@pytest.fixture
def seeded_products(widget: Product, gadget: Product, gizmo: Product) -> List[Product]:
    """Products matching SEED_LINES, in file order."""
    return [widget, gadget, gizmo]


# ============================================================================
# STORAGE FIXTURES
# ============================================================================

@pytest.fixture
def products_file(tmp_path: Path) -> Path:
    """Backing file seeded with three well-formed records."""
    path = tmp_path / "products.txt"
    path.write_text("\n".join(SEED_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def missing_file(tmp_path: Path) -> Path:
    """Path to a backing file that does not exist yet."""
    return tmp_path / "products.txt"


@pytest.fixture
def catalog(products_file: Path) -> ProductCatalog:
    return ProductCatalog(products_file)


@pytest.fixture
def service(catalog: ProductCatalog) -> CatalogService:
    return CatalogService(catalog)


# ============================================================================
# API FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def client(products_file: Path) -> Generator[TestClient, None, None]:
    """Create test client serving the seeded catalog."""
    with TestClient(app) as test_client:
        # Startup loads the configured file; swap in the test catalog
        init_catalog(products_file)
        yield test_client

    catalog_module._catalog_instance = None
