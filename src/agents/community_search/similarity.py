"""
Similarity & Centrality Toolkit

Pure functions over integer attribute collections. Collections are treated
as sets, so duplicates and ordering never change a score.
"""

import math
from typing import Iterable


def jaccard(attrs_a: Iterable[int], attrs_b: Iterable[int]) -> float:
    """|A ∩ B| / |A ∪ B|, or 0.0 when both collections are empty."""
    a, b = set(attrs_a), set(attrs_b)
    union = len(a | b)
    if union == 0:
        return 0.0
    return len(a & b) / union


def cosine(attrs_a: Iterable[int], attrs_b: Iterable[int]) -> float:
    """Cosine similarity of the 0/1 presence vectors of two collections.

    With binary indicators the dot product is |A ∩ B| and the norms are
    sqrt(|A|) and sqrt(|B|). Returns 0.0 when either collection is empty.
    """
    a, b = set(attrs_a), set(attrs_b)
    if not a or not b:
        return 0.0
    score = len(a & b) / math.sqrt(len(a) * len(b))
    return min(1.0, max(0.0, score))


def degree_centrality(degree: int, community_size: int) -> float | None:
    """degree / (community_size - 1); None for communities of one or fewer."""
    if community_size <= 1:
        return None
    return degree / (community_size - 1)
