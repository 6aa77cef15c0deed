"""
==============================================================================
Utilities Package
==============================================================================

Modules:
--------
- validators: Decimal and record text validation

==============================================================================
"""

from .validators import DecimalValidator, RecordTextValidator

__all__ = [
    "DecimalValidator",
    "RecordTextValidator",
]
