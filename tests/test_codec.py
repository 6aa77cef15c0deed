"""
==============================================================================
Record Codec Tests
==============================================================================

Tests for encoding and decoding flat product file lines.

==============================================================================
"""

import pytest
from decimal import Decimal
from pydantic import ValidationError

from product_filter.catalog.codec import decode, encode
from product_filter.catalog.models import Product
from product_filter.core.exceptions import RecordParseError


class TestEncode:
    """Tests for encode()."""

    def test_field_order(self, widget: Product):
        assert encode(widget) == "Widget,Tools,9.99,4.2"

    def test_no_line_terminator(self, gadget: Product):
        assert not encode(gadget).endswith("\n")

    def test_integral_values_written_plainly(self):
        product = Product(name="Box", category="Storage", price=Decimal("5"), rating=Decimal("0"))
        assert encode(product) == "Box,Storage,5,0"

    def test_exponent_input_written_plainly(self):
        product = Product(name="Crate", category="Storage", price="1e2", rating="4.5E-1")

        line = encode(product)

        assert line == "Crate,Storage,100,0.45"
        assert decode(line) == product


class TestDecode:
    """Tests for decode()."""

    def test_decodes_fields(self):
        product = decode("Gizmo,Toys,9.99,4.9\n")
        assert product.name == "Gizmo"
        assert product.category == "Toys"
        assert product.price == Decimal("9.99")
        assert product.rating == Decimal("4.9")

    def test_strips_windows_line_ending(self):
        assert decode("Gizmo,Toys,9.99,4.9\r\n").rating == Decimal("4.9")

    def test_text_fields_kept_verbatim(self):
        product = decode(" Lamp , Home ,12.50,3")
        assert product.name == " Lamp "
        assert product.category == " Home "

    @pytest.mark.parametrize("line", [
        "Widget,Tools,9.99",
        "Widget,Tools,9.99,4.2,extra",
        "Widget,Tools,9.99,4.2,",
        "",
    ])
    def test_wrong_field_count(self, line: str):
        with pytest.raises(RecordParseError) as exc_info:
            decode(line)
        assert "expected 4 fields" in exc_info.value.reason

    @pytest.mark.parametrize("line,field", [
        ("Widget,Tools,cheap,4.2", "price"),
        ("Widget,Tools,9.99,", "rating"),
        ("Widget,Tools,NaN,4.2", "price"),
        ("Widget,Tools,9.99,Infinity", "rating"),
    ])
    def test_invalid_number(self, line: str, field: str):
        with pytest.raises(RecordParseError) as exc_info:
            decode(line)
        assert exc_info.value.reason.startswith(field)
        assert exc_info.value.code == "RECORD_PARSE_ERROR"

    def test_empty_name_rejected(self):
        with pytest.raises(RecordParseError) as exc_info:
            decode(",Tools,1.00,2")
        assert "name" in exc_info.value.reason

    def test_negative_price_rejected(self):
        with pytest.raises(RecordParseError):
            decode("Widget,Tools,-1,2")


class TestRoundTrip:
    """decode(encode(p)) reproduces p."""

    @pytest.mark.parametrize("name,category,price,rating", [
        ("Widget", "Tools", "9.99", "4.2"),
        ("Über Lamp", "Home & Garden", "0", "-1"),
        ("Bulk Pack", "tools", "1234567.891", "5"),
    ])
    def test_round_trip(self, name: str, category: str, price: str, rating: str):
        product = Product(name=name, category=category, price=price, rating=rating)
        assert decode(encode(product)) == product


class TestDelimiterRule:
    """Fields containing the delimiter cannot be represented."""

    @pytest.mark.parametrize("field,value", [
        ("name", "Widget, large"),
        ("category", "Tools\nHardware"),
        ("name", "Widget\r"),
    ])
    def test_rejected_at_construction(self, field: str, value: str):
        values = {"name": "Widget", "category": "Tools", "price": "1", "rating": "1"}
        values[field] = value
        with pytest.raises(ValidationError):
            Product(**values)
