"""
Application Exception Handling

Single AppException base for all catalog errors with FastAPI integration.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides consistent error response format across the entire API.

    Usage:
        raise AppException("Product not found", "PRODUCT_NOT_FOUND", 404)

    Error Codes:
        Storage:
            - RECORD_PARSE_ERROR (422)
            - PERSISTENCE_FAILED (503)

        Input:
            - INVALID_INPUT (422)

        Catalog:
            - PRODUCT_NOT_FOUND (404)
            - CATALOG_NOT_LOADED (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "PRODUCT_NOT_FOUND")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


class RecordParseError(AppException):
    """A stored line does not decode to a valid Product."""

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(
            f"Malformed product record: {reason}",
            "RECORD_PARSE_ERROR",
            422,
            {"line": line, "reason": reason}
        )


class PersistenceWriteError(AppException):
    """Appending a record to the backing file failed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(
            f"Could not persist product to {path}: {reason}",
            "PERSISTENCE_FAILED",
            503,
            {"path": path, "reason": reason}
        )


class InputFormatError(AppException):
    """Caller-supplied input could not be parsed."""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        super().__init__(
            f"Invalid {field}: {reason}",
            "INVALID_INPUT",
            422,
            {"field": field, "value": str(value), "reason": reason}
        )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Convert AppException to a JSON error response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def product_not_found(name: Optional[str] = None) -> AppException:
    """Create product not found exception."""
    details = {"name": name} if name else {}
    return AppException("Product not found", "PRODUCT_NOT_FOUND", 404, details)


def catalog_not_loaded() -> AppException:
    """Create catalog not loaded exception."""
    return AppException(
        "Product catalog not loaded",
        "CATALOG_NOT_LOADED",
        500
    )
