#!/usr/bin/env python3
"""
Edit-distance similarity between normalized descriptions.
"""

import jellyfish


def similarity(a: str, b: str) -> float:
    """
    Levenshtein similarity scaled to [0, 1].

    Returns 1 - distance / max(len(a), len(b)); two empty strings are identical.
    The score is symmetric but not a metric, so grouping by it is not transitive.

    Args:
        a: First normalized key
        b: Second normalized key

    Returns:
        Similarity score between 0 and 1
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - jellyfish.levenshtein_distance(a, b) / longest
