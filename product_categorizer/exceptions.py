#!/usr/bin/env python3
"""
Exceptions raised by the product categorizer.
"""

from typing import Any, Optional


class CategorizerError(Exception):
    """Base exception for everything the categorizer raises."""


class ConfigurationError(CategorizerError):
    """Raised when the reference lists or the similarity threshold are unusable."""


class InvalidProductError(CategorizerError):
    """Raised when a product record has no string title."""

    def __init__(self, record: Any, index: Optional[int] = None, reason: str = "missing or non-string title"):
        self.record = record
        self.index = index
        self.reason = reason
        where = f" at position {index}" if index is not None else ""
        super().__init__(f"Invalid product{where}: {reason} ({record!r})")


class ProductFileError(CategorizerError):
    """Raised when a product file cannot be parsed."""
