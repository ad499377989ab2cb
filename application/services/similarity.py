"""Cosine similarity between sparse TF-IDF vectors."""
from __future__ import annotations

import math

from domain.entities import TfidfVector


def cosine_similarity(query: TfidfVector, document: TfidfVector) -> float:
    """Return the cosine of the angle between two vectors.

    The result is NaN when either vector has zero length; callers filter it.
    """
    numerator = sum(query.weight(word) * document.weight(word) for word in query.common_words_with(document))
    denominator = query.length * document.length
    if denominator == 0.0:
        return math.nan
    return numerator / denominator


__all__ = ["cosine_similarity"]
