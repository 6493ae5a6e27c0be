#!/usr/bin/env python3
"""
Description normalization.

Turns a free-text product title into an order-insensitive key so that
"Leite Integral Piracanjuba 1L" and "piracanjuba leite integral 1l" compare equal.
"""

import re

PUNCTUATION_PATTERN = re.compile(r'[^\w\s]')


def normalize_description(description: str) -> str:
    """
    Normalize a product description for comparison.

    Lower-cases the text, strips every character that is not a word character or
    whitespace, splits on single spaces, sorts the words and joins them back with
    one space. Runs of spaces yield empty words, which are kept and sort first.

    Args:
        description: Product title

    Returns:
        The normalized key
    """
    words = PUNCTUATION_PATTERN.sub('', description.lower()).split(' ')
    return ' '.join(sorted(words))
