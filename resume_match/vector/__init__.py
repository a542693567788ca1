"""
Embedding and similarity-ranking engine.
"""

# Package initialization for vector module
from .embeddings import IEmbeddingProvider, DeterministicHashEmbedding, SentenceTransformerEmbedding, embed
from .similarity import cosine_similarity, similarity
from .ranker import rank
from .types import Candidate, ScoredResult

__all__ = [
    'IEmbeddingProvider',
    'DeterministicHashEmbedding',
    'SentenceTransformerEmbedding',
    'embed',
    'cosine_similarity',
    'similarity',
    'rank',
    'Candidate',
    'ScoredResult'
]
