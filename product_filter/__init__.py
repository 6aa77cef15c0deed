"""Flat-file product catalog with filtering, sorting and lookup."""

__version__ = "1.0.0"
