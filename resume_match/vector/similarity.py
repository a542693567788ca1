"""
Cosine similarity with total, non-raising fallbacks.
"""

from typing import Any

from ..util.logging import logger
from .ops import as_array, dot, l2_norm


def cosine_similarity(a: Any, b: Any) -> float:
    """Cosine of the angle between a and b.

    Returns 0.0 instead of raising when either side is not a finite,
    non-empty numeric vector, when either norm is zero, or when the
    lengths differ. The result is clamped to [-1, 1].
    """
    va = as_array(a)
    vb = as_array(b)
    if va is None or vb is None or va.size == 0 or vb.size == 0:
        return 0.0

    if va.size != vb.size:
        logger.debug(f"Dimension mismatch in cosine_similarity: {va.size} vs {vb.size}")
        return 0.0

    na = l2_norm(va)
    nb = l2_norm(vb)
    if na == 0 or nb == 0:
        return 0.0

    score = dot(va, vb) / (na * nb)
    return max(-1.0, min(1.0, score))


# Short alias used by the ranker and the public package namespace
similarity = cosine_similarity
