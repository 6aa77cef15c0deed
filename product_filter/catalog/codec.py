"""
==============================================================================
Record Codec Module
==============================================================================

Conversion between a Product and its line in the flat product file.

Line Format:
-----------
    <name>,<category>,<price>,<rating>

No header, no quoting, no escaping. Numbers are written in plain
decimal text. Names and categories cannot contain the delimiter.

==============================================================================
"""

from __future__ import annotations

from pydantic import ValidationError

from product_filter.core.exceptions import RecordParseError
from product_filter.utils.validators import decimal_validator

from .models import Product


DELIMITER = ","
FIELD_COUNT = 4


def encode(product: Product) -> str:
    """
    Encode a product as a single line (without line terminator).

    Example:
        >>> encode(Product(name="Widget", category="Tools", price="9.99", rating="4.2"))
        'Widget,Tools,9.99,4.2'
    """
    return DELIMITER.join(
        (product.name, product.category, format(product.price, "f"), format(product.rating, "f"))
    )


def decode(line: str) -> Product:
    """
    Decode a single stored line into a Product.

    Args:
        line: Raw line, with or without trailing line terminator

    Returns:
        Decoded Product

    Raises:
        RecordParseError: Wrong field count, bad number, or invalid values
    """
    text = line.rstrip("\r\n")
    parts = text.split(DELIMITER)

    if len(parts) != FIELD_COUNT:
        raise RecordParseError(
            text, f"expected {FIELD_COUNT} fields, found {len(parts)}"
        )

    name, category, raw_price, raw_rating = parts

    is_valid, price, error = decimal_validator.validate(raw_price)
    if not is_valid:
        raise RecordParseError(text, f"price {raw_price!r}: {error}")

    is_valid, rating, error = decimal_validator.validate(raw_rating)
    if not is_valid:
        raise RecordParseError(text, f"rating {raw_rating!r}: {error}")

    try:
        return Product(name=name, category=category, price=price, rating=rating)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise RecordParseError(text, errors) from e
