"""
==============================================================================
Product Catalog Module
==============================================================================

In-memory product catalog mirrored by a flat append-only file.

Features:
---------
- One-shot load at construction (missing file means an empty catalog)
- Malformed lines are reported and skipped, never fatal
- Append writes memory first, then the file (open-append-close)
- Storage failures are returned to the caller, memory stays updated

File Structure:
--------------
    Widget,Tools,9.99,4.2
    Gadget,Tools,19.99,3.8

==============================================================================
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from product_filter.core.exceptions import PersistenceWriteError, RecordParseError

from .codec import decode, encode
from .models import AddResult, LoadReport, Product, SkippedRecord


# Module logger
logger = logging.getLogger(__name__)


class ProductCatalog:
    """
    Product catalog store backed by a flat file.

    Owns the authoritative ordered list of products. Products keep
    load order followed by append order.

    Attributes:
        products: Snapshot of all products
        load_report: Outcome of the last load

    Example:
        >>> catalog = ProductCatalog(Path("products.txt"))
        >>> result = catalog.add(Product(name="Widget", category="Tools", price="9.99", rating="4.2"))
        >>> result.persisted
        True
    """

    def __init__(self, products_file: Path) -> None:
        """
        Initialize catalog from the backing file.

        Args:
            products_file: Path to the flat product file
        """
        self._products_file = Path(products_file)
        self._products: List[Product] = []
        self._lock = threading.Lock()
        self._load_report = self.load()

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> List[Product]:
        """Get a snapshot of all products."""
        with self._lock:
            return self._products.copy()

    @property
    def products_file(self) -> Path:
        return self._products_file

    @property
    def load_report(self) -> LoadReport:
        return self._load_report

    def list(self) -> List[Product]:
        """Return the current products in catalog order."""
        return self.products

    def __iter__(self) -> Iterator[Product]:
        return iter(self.products)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    # =========================================================================
    # LOADING
    # =========================================================================

    def load(self) -> LoadReport:
        """
        Load products from the backing file.

        Replaces the in-memory list with the decoded records. Never
        raises for storage problems; they are logged and reported.

        Returns:
            LoadReport describing loaded and skipped records
        """
        report = LoadReport(path=self._products_file)
        loaded: List[Product] = []

        # Read and swap under one lock; adds wait for the load to finish
        with self._lock:
            if not self._products_file.exists():
                logger.info(
                    f"Products file not found: {self._products_file}, "
                    "starting with an empty catalog"
                )
                report.storage_present = False
            else:
                try:
                    with self._products_file.open("rb") as f:
                        for line_number, raw in enumerate(f, start=1):
                            try:
                                loaded.append(decode(self._decode_bytes(raw)))
                            except RecordParseError as e:
                                logger.warning(
                                    f"Skipping line {line_number} of {self._products_file}: {e.reason}"
                                )
                                report.skipped.append(SkippedRecord(
                                    line_number=line_number,
                                    line=e.line,
                                    reason=e.reason
                                ))
                except OSError as e:
                    logger.error(f"Error loading products from {self._products_file}: {e}")
                    report.read_error = str(e)

            report.loaded = len(loaded)
            self._products = loaded

        logger.info(
            f"✅ Loaded {report.loaded} products from {self._products_file} "
            f"({len(report.skipped)} skipped)"
        )
        return report

    @staticmethod
    def _decode_bytes(raw: bytes) -> str:
        """Decode one stored line as UTF-8."""
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            text = raw.decode("utf-8", errors="replace").rstrip("\r\n")
            raise RecordParseError(text, f"invalid UTF-8: {e.reason} at byte {e.start}") from e

    def reload(self) -> LoadReport:
        """Reload catalog from file."""
        logger.info("Reloading product catalog...")
        self._load_report = self.load()
        return self._load_report

    # =========================================================================
    # WRITING
    # =========================================================================

    def add(self, product: Product) -> AddResult:
        """
        Append a product to memory and to the backing file.

        The product stays in memory even when the file append fails.

        Args:
            product: Product to add

        Returns:
            AddResult with persisted=False and the error on storage failure
        """
        with self._lock:
            self._products.append(product)
            try:
                self._append_line(encode(product))
            except OSError as e:
                error = PersistenceWriteError(str(self._products_file), str(e))
                logger.error(f"Error saving product {product.name!r}: {e}")
                return AddResult(product=product, persisted=False, error=error)

        logger.info(f"Added product {product.name!r} to {self._products_file}")
        return AddResult(product=product, persisted=True)

    def _append_line(self, line: str) -> None:
        """Append one record line, keeping records on separate lines."""
        with self._products_file.open("a+b") as f:
            prefix = b""
            if f.tell() > 0:
                f.seek(-1, 2)
                if f.read(1) != b"\n":
                    prefix = b"\n"
            f.write(prefix + line.encode("utf-8") + b"\n")

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get_categories(self) -> List[str]:
        """Get distinct categories in first-seen order."""
        seen: Dict[str, str] = {}
        for product in self.products:
            seen.setdefault(product.category.casefold(), product.category)
        return list(seen.values())

    def get_stats(self) -> Dict:
        """Get catalog statistics."""
        products = self.products
        stats = {
            "total_products": len(products),
            "skipped_lines": len(self._load_report.skipped),
            "categories": {}
        }

        for category in self.get_categories():
            stats["categories"][category] = sum(
                1 for p in products if p.category.casefold() == category.casefold()
            )

        return stats


# =============================================================================
# PROCESS INSTANCE MANAGEMENT
# =============================================================================

_catalog_instance: Optional[ProductCatalog] = None


def get_catalog() -> Optional[ProductCatalog]:
    """Get the process catalog instance."""
    return _catalog_instance


def init_catalog(products_file: Path) -> ProductCatalog:
    """
    Initialize the process catalog instance.

    Args:
        products_file: Path to the flat product file

    Returns:
        ProductCatalog instance
    """
    global _catalog_instance
    _catalog_instance = ProductCatalog(products_file)
    return _catalog_instance
