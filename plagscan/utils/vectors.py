"""
Term weighting and cosine similarity over sparse term vectors.

Every document is weighted as its own one-document corpus; the two vectors
being compared never share document frequencies.
"""
import math
from collections import Counter
from typing import Dict, Mapping, Sequence

import numpy as np

TermVector = Dict[str, float]

# idf = 1 + ln(N / (1 + df)) with N = 1 and df = 1 for every present term
SINGLE_DOCUMENT_IDF = 1 + math.log(1 / (1 + 1))


def vectorize(tokens: Sequence[str]) -> TermVector:
    """Map each distinct token to term frequency x single-document idf"""
    counts = Counter(tokens)
    return {term: count * SINGLE_DOCUMENT_IDF for term, count in counts.items()}


def cosine_similarity(vec1: Mapping[str, float], vec2: Mapping[str, float]) -> float:
    """
    Cosine of the angle between two sparse term vectors.

    Keys missing from one vector count as 0. Returns 0.0 (never NaN) when
    either vector has zero magnitude or is not a mapping.
    """
    if not isinstance(vec1, Mapping) or not isinstance(vec2, Mapping):
        return 0.0

    keys = sorted(set(vec1) | set(vec2))
    if not keys:
        return 0.0

    a = np.array([vec1.get(k, 0.0) for k in keys], dtype=float)
    b = np.array([vec2.get(k, 0.0) for k in keys], dtype=float)

    mag1 = float(np.sqrt(np.dot(a, a)))
    mag2 = float(np.sqrt(np.dot(b, b)))
    if not mag1 or not mag2:
        return 0.0

    similarity = float(np.dot(a, b)) / (mag1 * mag2)
    return min(max(similarity, 0.0), 1.0)
