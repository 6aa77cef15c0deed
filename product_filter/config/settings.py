"""
==============================================================================
Application Settings Module
==============================================================================

Service configuration read through Pydantic Settings.

Sources, strongest first: environment variables, a local .env file,
then the defaults below. Variable names match the field names in any
case (PRODUCTS_FILE, products_file, ...).

==============================================================================
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Settings for the product filter service.

    Attributes:
        app_name: Title shown in the API docs and startup log
        debug: Verbose logging and uvicorn auto-reload
        host: Address uvicorn binds to
        port: Port uvicorn listens on
        products_file: Flat product file, one record per line
        cors_origins: JSON array of allowed CORS origins

    Example:
        >>> Settings(products_file="data/products.txt").products_path
        PosixPath('data/products.txt')
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # SERVICE
    # =========================================================================
    app_name: str = Field(
        default="Product Filter API",
        description="Title shown in the API docs"
    )

    debug: bool = Field(
        default=False,
        description="Verbose logging and auto-reload"
    )

    host: str = Field(default="0.0.0.0", description="Bind address")

    port: int = Field(default=8000, ge=1, le=65535, description="Listen port")

    # =========================================================================
    # STORAGE
    # =========================================================================
    products_file: str = Field(
        default="products.txt",
        min_length=1,
        description="Flat product file (one record per line)"
    )

    # =========================================================================
    # CORS
    # =========================================================================
    cors_origins: str = Field(
        default='["*"]',
        description="Allowed CORS origins as a JSON array string"
    )

    @property
    def products_path(self) -> Path:
        return Path(self.products_file)

    @property
    def cors_origins_list(self) -> List[str]:
        """
        Allowed CORS origins as a list.

        Anything other than a JSON array falls back to ["*"] with a warning.
        """
        try:
            origins = json.loads(self.cors_origins)
        except json.JSONDecodeError:
            origins = None

        if not isinstance(origins, list):
            logger.warning(
                f"CORS_ORIGINS is not a JSON array: {self.cors_origins!r}, "
                "allowing all origins"
            )
            return ["*"]
        return origins

    def ensure_directories(self) -> None:
        """Create the directory holding the products file."""
        self.products_path.parent.mkdir(parents=True, exist_ok=True)

    def __repr__(self) -> str:
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"debug={self.debug}, "
            f"products_file={self.products_file!r})"
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide Settings, creating the storage directory once."""
    settings = Settings()
    settings.ensure_directories()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
