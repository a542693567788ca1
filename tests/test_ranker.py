"""
Top-k ranking: ordering, truncation, tie stability and graceful degradation.
"""

import pytest

from resume_match.vector.embeddings import embed
from resume_match.vector.ops import serialize_vector
from resume_match.vector.ranker import rank
from resume_match.vector.types import Candidate, ScoredResult

TEXTS = [
    "Software Engineer with Python experience",
    "Registered nurse, ICU, 8 years",
    "Frontend developer React TypeScript",
    "Data analyst with SQL and Tableau",
    "Mechanical engineer, CAD, automotive",
    "Product manager, B2B SaaS",
]


def _candidates(texts):
    return [
        Candidate(id=str(i + 1), vector=serialize_vector(embed(t)), display={"name": f"Candidate {i + 1}"})
        for i, t in enumerate(texts)
    ]


def test_results_sorted_non_increasing():
    results = rank(embed("Python backend developer"), _candidates(TEXTS), k=10)

    scores = [r.score for r in results]
    assert scores == sorted(scores, reverse=True)
    assert all(isinstance(r, ScoredResult) for r in results)


@pytest.mark.parametrize("k", [1, 3, 6, 7, 100])
def test_length_never_exceeds_k_or_candidates(k):
    results = rank(embed("query"), _candidates(TEXTS), k=k)

    assert len(results) == min(k, len(TEXTS))


def test_k_five_against_three_candidates():
    results = rank(embed("query"), _candidates(TEXTS[:3]), k=5)

    assert len(results) == 3
    assert [r.score for r in results] == sorted((r.score for r in results), reverse=True)


def test_empty_collection_returns_empty_list():
    assert rank(embed("query"), [], k=5) == []


@pytest.mark.parametrize("k", [0, -1, -100, None])
def test_non_positive_k_returns_nothing(k):
    assert rank(embed("query"), _candidates(TEXTS), k=k) == []


def test_identical_text_scores_one():
    text = "Senior Python developer, Django, AWS"
    candidates = [
        Candidate(id="1", vector=serialize_vector(embed(text)), display={}),
        Candidate(id="2", vector=serialize_vector(embed("Unrelated resume")), display={}),
        Candidate(id="3", vector=serialize_vector(embed(text)), display={}),
    ]

    results = rank(embed(text), candidates, k=3)

    assert [r.id for r in results[:2]] == ["1", "3"]
    assert results[0].score == pytest.approx(1.0)
    assert results[1].score == pytest.approx(1.0)


def test_ties_keep_insertion_order():
    vector = serialize_vector(embed("same"))
    candidates = [Candidate(id=str(i), vector=vector, display={}) for i in range(5)]

    for _ in range(3):
        results = rank(embed("other"), candidates, k=5)
        assert [r.id for r in results] == ["0", "1", "2", "3", "4"]


def test_unparsable_vector_scores_zero_and_is_kept():
    candidates = _candidates(TEXTS[:2]) + [
        Candidate(id="broken", vector="{not json", display={"name": "Broken"}),
        Candidate(id="missing", vector=None, display={"name": "Missing"}),
    ]

    results = rank(embed(TEXTS[0]), candidates, k=10)

    by_id = {r.id: r for r in results}
    assert len(results) == 4
    assert by_id["broken"].score == 0.0
    assert by_id["missing"].score == 0.0
    assert by_id["broken"].display == {"name": "Broken"}


def test_out_of_range_stored_number_scores_zero():
    """An integer too large for a float is treated as an unreadable vector."""
    candidates = [
        Candidate(id="huge", vector="[1" + "0" * 400 + "]", display={}),
        Candidate(id="ok", vector=serialize_vector(embed("q", 1)), display={}),
    ]

    results = rank(embed("q", 1), candidates, k=5)

    assert [r.id for r in results] == ["ok", "huge"]
    assert results[1].score == 0.0


def test_mismatched_dimension_scores_zero():
    candidates = [
        Candidate(id="short", vector=serialize_vector(embed("x", 64)), display={}),
        Candidate(id="ok", vector=serialize_vector(embed("x", 128)), display={}),
    ]

    results = rank(embed("x", 128), candidates, k=2)

    assert results[0].id == "ok"
    assert results[1].id == "short"
    assert results[1].score == 0.0


def test_accepts_in_memory_vectors():
    candidates = [
        Candidate(id="a", vector=[1.0, 0.0], display={}),
        Candidate(id="b", vector=(0.0, 1.0), display={}),
    ]

    results = rank([0.0, 1.0], candidates, k=2)

    assert [r.id for r in results] == ["b", "a"]


def test_display_fields_copied_and_input_untouched():
    display = {"name": "Ada", "email": "ada@example.com", "file_name": "ada.txt"}
    candidate = Candidate(id="1", vector=serialize_vector(embed("Ada")), display=display)

    result = rank(embed("Ada"), [candidate], k=1)[0]
    result.display["name"] = "changed"

    assert display["name"] == "Ada"
    assert result.to_dict()["email"] == "ada@example.com"
    assert result.to_dict()["id"] == "1"
    assert "score" in result.to_dict()


def test_repeated_queries_are_deterministic():
    candidates = _candidates(TEXTS)
    query = embed("Nurse practitioner")

    first = [(r.id, r.score) for r in rank(query, candidates, k=6)]
    second = [(r.id, r.score) for r in rank(query, candidates, k=6)]

    assert first == second
