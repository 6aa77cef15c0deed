"""
==============================================================================
API Package
==============================================================================

REST API routers for the product catalog.

==============================================================================
"""

from .router import api_router

__all__ = ["api_router"]
