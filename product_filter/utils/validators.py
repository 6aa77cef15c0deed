"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation classes for primitive text input.

This module implements:
- DecimalValidator: Parses decimal literals (prices, ratings)
- RecordTextValidator: Checks free text against the flat record format

Decimal Rules:
-------------
- Surrounding whitespace is ignored
- Must be a finite decimal literal ("9.99", "4", "1e2")
- NaN and Infinity are rejected

==============================================================================
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Tuple


class DecimalValidator:
    """
    Validator for decimal literals.

    Example:
        >>> validator = DecimalValidator()
        >>> validator.validate("9.99")
        (True, Decimal('9.99'), None)
        >>> validator.validate("abc")
        (False, None, 'not a valid decimal number')
    """

    def validate(self, value: Any) -> Tuple[bool, Optional[Decimal], Optional[str]]:
        """
        Validate and convert a decimal input.

        Args:
            value: Raw text, int, float or Decimal

        Returns:
            Tuple of (is_valid, parsed_value, error_message)
        """
        if isinstance(value, bool) or value is None:
            return False, None, "not a valid decimal number"

        if isinstance(value, Decimal):
            parsed = value
        elif isinstance(value, (int, float)):
            # str() keeps the shortest repr, so 9.99 stays 9.99
            parsed = Decimal(str(value))
        else:
            text = str(value).strip()
            if not text:
                return False, None, "value is empty"
            try:
                parsed = Decimal(text)
            except InvalidOperation:
                return False, None, "not a valid decimal number"

        if not parsed.is_finite():
            return False, None, "must be a finite number"

        return True, parsed, None

    def parse(self, value: Any) -> Decimal:
        """
        Parse a decimal input, raising ValueError when invalid.

        Args:
            value: Raw text, int, float or Decimal

        Returns:
            Parsed Decimal
        """
        is_valid, parsed, error = self.validate(value)
        if not is_valid:
            raise ValueError(f"{error}: {value!r}")
        return parsed


class RecordTextValidator:
    """
    Validator for text fields written to the flat product file.

    The file format has no escaping, so the delimiter and line
    terminators cannot appear inside a field.
    """

    DELIMITER = ","
    FORBIDDEN = (DELIMITER, "\r", "\n")

    def validate(self, value: str) -> Tuple[bool, Optional[str]]:
        """
        Check a text field.

        Returns:
            Tuple of (is_valid, error_message)
        """
        for char in self.FORBIDDEN:
            if char in value:
                return False, f"must not contain {char!r}"
        return True, None


decimal_validator = DecimalValidator()
record_text_validator = RecordTextValidator()
