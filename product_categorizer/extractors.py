#!/usr/bin/env python3
"""
Brand and product type extraction from product titles.

Both extractors scan a fixed, ordered reference list and return the first entry
that appears anywhere in the title, ignoring case. Matching is on substrings, so
an entry hidden inside an unrelated word is still picked up.
"""

from typing import Iterable, List

from .config import UNKNOWN_BRAND, UNKNOWN_TYPE
from .exceptions import ConfigurationError


def extract_term(title: str, reference: Iterable[str], unknown: str) -> str:
    """
    Return the first reference entry contained in the title, or the sentinel.

    Args:
        title: Product title
        reference: Ordered reference list
        unknown: Value returned when no entry matches
    """
    title_lower = title.lower()
    for term in reference:
        if term.lower() in title_lower:
            return term
    return unknown


class TermExtractor:
    """Maps titles onto one entry of an ordered reference list."""

    def __init__(self, reference: Iterable[str], unknown: str):
        self.reference: List[str] = list(reference)
        if not self.reference:
            raise ConfigurationError(f"{type(self).__name__} needs a non-empty reference list")
        self.unknown = unknown

    def extract(self, title: str) -> str:
        return extract_term(title, self.reference, self.unknown)


class BrandExtractor(TermExtractor):
    def __init__(self, known_brands: Iterable[str], unknown: str = UNKNOWN_BRAND):
        super().__init__(known_brands, unknown)


class TypeExtractor(TermExtractor):
    def __init__(self, known_types: Iterable[str], unknown: str = UNKNOWN_TYPE):
        super().__init__(known_types, unknown)
