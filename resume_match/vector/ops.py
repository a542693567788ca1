"""
Vector helpers shared by the embedder, scorer and ranker.
Embeddings cross process boundaries as JSON arrays of floats.
"""

import json
from typing import Any, Optional, Sequence, Tuple

import numpy as np

Embedding = Tuple[float, ...]


def as_array(vector: Any) -> Optional[np.ndarray]:
    """Coerce a sequence of numbers into a 1-D float64 array.

    Returns None for anything that is not a flat, finite, numeric sequence.
    Booleans and strings are rejected even though numpy would accept them.
    """
    if vector is None or isinstance(vector, (str, bytes, bytearray, dict)):
        return None
    if isinstance(vector, np.ndarray):
        if vector.ndim != 1 or not np.issubdtype(vector.dtype, np.number):
            return None
        arr = vector.astype(np.float64)
    else:
        try:
            items = list(vector)
        except TypeError:
            return None
        for item in items:
            if isinstance(item, bool) or not isinstance(item, (int, float, np.number)):
                return None
        try:
            arr = np.array(items, dtype=np.float64)
        except (OverflowError, ValueError):
            # e.g. a JSON integer beyond float range
            return None

    if arr.ndim != 1 or not np.all(np.isfinite(arr)):
        return None
    return arr


def l2_norm(vector: Sequence[float]) -> float:
    """Euclidean norm of a vector."""
    return float(np.linalg.norm(np.asarray(vector, dtype=np.float64)))


def normalize(vector: Sequence[float]) -> Embedding:
    """Scale a vector to unit length.

    A zero vector is returned unchanged (the divisor falls back to 1).
    """
    arr = np.asarray(vector, dtype=np.float64)
    norm = float(np.linalg.norm(arr)) or 1.0
    return tuple(float(v) for v in arr / norm)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    return float(np.dot(np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64)))


def serialize_vector(vector: Sequence[float]) -> str:
    """Encode an embedding for storage."""
    return json.dumps([float(v) for v in vector])


def deserialize_vector(raw: Any) -> Optional[Embedding]:
    """Decode a stored embedding.

    Accepts the JSON text produced by serialize_vector or an in-memory
    sequence. Returns None when the value cannot be read as a vector.
    """
    if raw is None:
        return None
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            return None
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            return None
        if not isinstance(raw, list):
            return None

    arr = as_array(raw)
    if arr is None:
        return None
    return tuple(float(v) for v in arr)
