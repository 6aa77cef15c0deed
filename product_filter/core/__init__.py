"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the application.

Modules:
--------
- exceptions: AppException hierarchy and error factory functions
- dependencies: FastAPI dependency injection functions

Usage:
------
    from product_filter.core import exceptions
    raise exceptions.product_not_found("widget")

==============================================================================
"""

from .exceptions import (
    AppException,
    InputFormatError,
    PersistenceWriteError,
    RecordParseError,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "InputFormatError",
    "PersistenceWriteError",
    "RecordParseError",
    "register_exception_handlers",
]
