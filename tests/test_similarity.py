"""
Cosine similarity: metric properties and non-raising fallbacks.
"""

import math

import numpy as np
import pytest

from resume_match.vector.embeddings import embed
from resume_match.vector.similarity import cosine_similarity, similarity

TEXTS = [
    "Software Engineer with Python experience",
    "Registered nurse, ICU, 8 years",
    "Frontend developer React TypeScript",
    "",
    "Data analyst with SQL and Tableau",
]


def test_self_similarity_is_one():
    for text in TEXTS:
        v = embed(text)
        assert math.isclose(similarity(v, v), 1.0, abs_tol=1e-9)


def test_symmetry():
    for a in TEXTS:
        for b in TEXTS:
            assert similarity(embed(a), embed(b)) == similarity(embed(b), embed(a))


def test_bounded_range():
    for a in TEXTS:
        for b in TEXTS:
            score = similarity(embed(a), embed(b))
            assert -1.0 <= score <= 1.0


def test_known_angles():
    assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)
    assert cosine_similarity([1.0, 0.0], [-1.0, 0.0]) == pytest.approx(-1.0)
    assert cosine_similarity([1.0, 1.0], [2.0, 2.0]) == pytest.approx(1.0)


def test_magnitude_independent():
    """Non-unit inputs are compared by direction only."""
    assert cosine_similarity([3.0, 4.0], [6.0, 8.0]) == pytest.approx(1.0)


def test_accepts_numpy_arrays():
    assert cosine_similarity(np.array([1.0, 0.0]), (1, 0)) == pytest.approx(1.0)


@pytest.mark.parametrize("a, b", [
    (None, [1.0, 0.0]),
    ([1.0, 0.0], None),
    ([], [1.0]),
    ([], []),
    ("1,0", [1.0, 0.0]),
    ([1.0, "x"], [1.0, 0.0]),
    ([True, False], [1.0, 0.0]),
    ([[1.0, 0.0]], [1.0, 0.0]),
    ([float("nan"), 1.0], [1.0, 0.0]),
    ([float("inf"), 1.0], [1.0, 0.0]),
    ({"a": 1.0}, [1.0]),
    (42, [1.0]),
])
def test_invalid_inputs_score_zero(a, b):
    assert cosine_similarity(a, b) == 0.0


def test_zero_norm_scores_zero():
    assert cosine_similarity([0.0, 0.0, 0.0], [1.0, 0.0, 0.0]) == 0.0
    assert cosine_similarity([1.0, 0.0, 0.0], [0.0, 0.0, 0.0]) == 0.0


def test_mismatched_lengths_score_zero():
    assert cosine_similarity(embed("a", 128), embed("a", 64)) == 0.0
    assert cosine_similarity([1.0, 0.0], [1.0, 0.0, 0.0]) == 0.0
