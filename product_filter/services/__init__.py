"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes sitting between the API routers and the catalog.

    ┌─────────────────┐
    │   API Router    │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │ CatalogService  │  ← Input parsing, operation set
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │ ProductCatalog  │  ← Memory + flat file
    └─────────────────┘

==============================================================================
"""

from .catalog_service import CatalogService

__all__ = [
    "CatalogService",
]
