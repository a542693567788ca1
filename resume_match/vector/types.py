"""
Value types passed between the store, the ranker and the API.
"""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Candidate:
    """A stored record eligible to be scored against a query."""

    id: str
    """Store-assigned identifier"""

    vector: Any
    """Stored embedding, either serialized JSON text or a numeric sequence"""

    display: Dict[str, Any] = field(default_factory=dict)
    """Fields copied verbatim into the scored result"""


@dataclass(frozen=True)
class ScoredResult:
    """Represents a ranked match for a query."""

    id: str
    """Identifier of the matching record"""

    score: float
    """Cosine similarity to the query (-1 to 1)"""

    display: Dict[str, Any] = field(default_factory=dict)
    """Display fields carried over from the candidate"""

    def to_dict(self) -> Dict[str, Any]:
        result = {"id": self.id}
        result.update(self.display)
        result["score"] = self.score
        return result
