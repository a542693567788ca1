"""
Embedding providers. Text in, fixed-dimension unit vector out.
"""

from abc import ABC, abstractmethod
import hashlib
from typing import Optional

import numpy as np

from .ops import Embedding, normalize

DEFAULT_DIMENSION = 128


def embed(text: Optional[str], dim: int = DEFAULT_DIMENSION) -> Embedding:
    """Derive a deterministic pseudo-embedding from the SHA-256 digest of text.

    Component i is digest byte (i mod 32) mapped from [0, 255] onto [-1, 1];
    the vector is then scaled to unit length. None and "" both hash the empty
    string. If the norm is zero the vector is returned unscaled.

    This is a content fingerprint, not a semantic embedding: identical texts
    always match, similar texts do not.
    """
    if dim < 1:
        raise ValueError(f"dimension must be positive, got {dim}")

    digest = hashlib.sha256((text or "").encode("utf-8")).digest()
    raw = np.frombuffer(digest, dtype=np.uint8)
    values = (raw[np.arange(dim) % len(raw)] / 255) * 2 - 1
    return normalize(values)


class IEmbeddingProvider(ABC):
    """Abstract interface for embedding providers."""

    @abstractmethod
    def embed(self, text: str, dim: Optional[int] = None) -> Embedding:
        """Generate a unit-length embedding vector for the given text."""
        pass

    @abstractmethod
    def get_dimension(self) -> int:
        """Get the dimension of the embedding vectors."""
        pass

    def embed_text(self, text: str) -> Embedding:
        """Embed text at the provider's own dimension."""
        return self.embed(text, self.get_dimension())


class DeterministicHashEmbedding(IEmbeddingProvider):
    """Deterministic hash-based embedding provider.

    Reproducible across processes and machines, needs no model download,
    and is what the service uses unless a learned model is configured.
    """

    def __init__(self, dimension: int = DEFAULT_DIMENSION):
        if dimension < 1:
            raise ValueError(f"dimension must be positive, got {dimension}")
        self.dimension = dimension

    def embed(self, text: str, dim: Optional[int] = None) -> Embedding:
        return embed(text, dim or self.dimension)

    def get_dimension(self) -> int:
        return self.dimension


class SentenceTransformerEmbedding(IEmbeddingProvider):
    """Sentence transformers embedding provider using pre-trained models.

    The model is loaded on first use. Its output is L2-normalized so it can
    be ranked alongside any other provider's vectors of the same dimension.
    """

    def __init__(self, model_name: str = "all-MiniLM-L6-v2", dimension: Optional[int] = None):
        self.model_name = model_name
        self._model = None
        self._dimension = None
        self._expected_dimension = dimension

    @property
    def model(self):
        if self._model is None:
            try:
                from sentence_transformers import SentenceTransformer
            except ImportError:
                raise ImportError(
                    "sentence-transformers not installed; pip install 'resume-match[semantic]'"
                )
            self._model = SentenceTransformer(self.model_name)
        return self._model

    def embed(self, text: str, dim: Optional[int] = None) -> Embedding:
        model_dim = self.get_dimension()
        if dim is not None and dim != model_dim:
            raise ValueError(
                f"model {self.model_name} produces {model_dim}-dim vectors, {dim} requested"
            )
        vector = self.model.encode(text or "", convert_to_numpy=True)
        return normalize(vector)

    def get_dimension(self) -> int:
        if self._dimension is None:
            self._dimension = int(self.model.get_sentence_embedding_dimension())
            if self._expected_dimension and self._expected_dimension != self._dimension:
                raise ValueError(
                    f"EMBED_DIM={self._expected_dimension} does not match "
                    f"{self.model_name} dimension {self._dimension}"
                )
        return self._dimension
