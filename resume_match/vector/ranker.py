"""
Top-k ranking of stored candidates against a query vector.
"""

from typing import Iterable, List, Sequence

from ..util.logging import logger
from .ops import deserialize_vector
from .similarity import cosine_similarity
from .types import Candidate, ScoredResult


def score_candidate(query_vector: Sequence[float], candidate: Candidate) -> float:
    """Score one candidate, degrading to 0.0 for unreadable stored vectors."""
    vector = deserialize_vector(candidate.vector)
    if vector is None:
        logger.log_degraded_vector(candidate.id, "unparsable embedding")
        return 0.0

    if len(vector) != len(query_vector):
        logger.log_degraded_vector(
            candidate.id, f"dimension {len(vector)} != query dimension {len(query_vector)}"
        )
        return 0.0

    return cosine_similarity(query_vector, vector)


def rank(query_vector: Sequence[float], candidates: Iterable[Candidate], k: int) -> List[ScoredResult]:
    """Rank candidates by cosine similarity to query_vector.

    Every candidate is scored; malformed ones score 0.0 rather than being
    dropped. Results are sorted by descending score with ties left in input
    order, then truncated to k. k <= 0 yields an empty list and k larger
    than the candidate count yields all of them.
    """
    if k is None or k <= 0:
        return []

    query_vector = tuple(query_vector) if query_vector is not None else ()
    scored = [
        ScoredResult(
            id=candidate.id,
            score=score_candidate(query_vector, candidate),
            display=dict(candidate.display),
        )
        for candidate in candidates
    ]

    # sorted() is stable, so equal scores keep insertion order
    scored = sorted(scored, key=lambda result: result.score, reverse=True)
    return scored[:k]
