"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for catalog products and catalog operation results.

==============================================================================
"""

from decimal import Decimal
from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from product_filter.core.exceptions import PersistenceWriteError
from product_filter.utils.validators import decimal_validator, record_text_validator


class Product(BaseModel):
    """
    Product model for catalog items.

    Immutable value object; two products are equal when all four
    fields are equal.

    Attributes:
        name: Product display name
        category: Category label, matched case-insensitively
        price: Unit price, never negative
        rating: Customer rating, conventionally 0-5 (not enforced)
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Product name")
    category: str = Field(..., description="Product category")
    price: Decimal = Field(..., ge=0, description="Unit price")
    rating: Decimal = Field(..., description="Customer rating")

    @field_validator("name", "category")
    @classmethod
    def validate_record_text(cls, value: str) -> str:
        """Reject characters the flat file format cannot represent."""
        is_valid, error = record_text_validator.validate(value)
        if not is_valid:
            raise ValueError(error)
        return value

    @field_validator("price", "rating", mode="before")
    @classmethod
    def parse_decimal(cls, value: Any) -> Decimal:
        """Accept text, int, float or Decimal input."""
        return decimal_validator.parse(value)

    def __str__(self) -> str:
        return (
            f"Product(name={self.name!r}, category={self.category!r}, "
            f"price={self.price}, rating={self.rating})"
        )


class ProductLookup(BaseModel):
    """
    Present/absent result of a name lookup.

    Callers check `found` before reading `product`, or call `unwrap()`.

    Example:
        >>> lookup = find_by_name(catalog, "gadget")
        >>> if lookup.found:
        ...     print(lookup.product.price)
    """

    model_config = ConfigDict(frozen=True)

    product: Optional[Product] = None

    @classmethod
    def present(cls, product: Product) -> "ProductLookup":
        return cls(product=product)

    @classmethod
    def absent(cls) -> "ProductLookup":
        return cls(product=None)

    @property
    def found(self) -> bool:
        return self.product is not None

    def unwrap(self) -> Product:
        """Return the product, raising LookupError when absent."""
        if self.product is None:
            raise LookupError("No product matched the lookup")
        return self.product


class SkippedRecord(BaseModel):
    """A stored line that was dropped during load."""

    line_number: int = Field(..., ge=1)
    line: str
    reason: str


class LoadReport(BaseModel):
    """
    Outcome of loading the backing file.

    Attributes:
        path: Backing file that was read
        storage_present: False when the file did not exist
        loaded: Number of products decoded
        skipped: Lines that failed to decode, in file order
        read_error: OS error that stopped reading early, if any
    """

    path: Path
    storage_present: bool = True
    loaded: int = 0
    skipped: List[SkippedRecord] = Field(default_factory=list)
    read_error: Optional[str] = None

    @property
    def warnings(self) -> List[str]:
        """Human-readable load warnings."""
        messages = [
            f"line {record.line_number}: {record.reason}"
            for record in self.skipped
        ]
        if self.read_error:
            messages.append(f"read error: {self.read_error}")
        return messages


class AddResult(BaseModel):
    """
    Outcome of adding a product.

    The product is always part of the in-memory catalog after an add;
    `persisted` reports whether it also reached the backing file.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    product: Product
    persisted: bool
    error: Optional[PersistenceWriteError] = None
