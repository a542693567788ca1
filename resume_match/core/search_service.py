"""
Resume ingestion and search orchestration.

Ingest: text -> embedding -> store.append.
Search: query -> embedding -> one store snapshot -> rank -> top k.
"""

from typing import List, Optional

from . import config as config_module
from .dao import IResumeStore
from .schema import IngestResult, ResumeRecord
from ..util.logging import logger
from ..vector.embeddings import IEmbeddingProvider
from ..vector.ops import serialize_vector
from ..vector.ranker import rank
from ..vector.types import Candidate, ScoredResult


class InvalidRequestError(ValueError):
    """Raised when a caller supplies unusable input (empty text, bad k)."""
    pass


class ResumeNotFoundError(LookupError):
    """Raised when a resume id is not present in the store."""
    pass


def make_snippet(text: Optional[str], length: int, ellipsis: bool = False) -> str:
    snippet = (text or "")[:length]
    return snippet + "..." if ellipsis else snippet


def resolve_top_k(top_k: Optional[int]) -> int:
    """Apply the default result count and reject unusable values.

    None means "not given" and becomes DEFAULT_TOP_K. Zero is allowed and
    returns no results; negative values are rejected.
    """
    if top_k is None:
        return config_module.DEFAULT_TOP_K
    if isinstance(top_k, bool) or not isinstance(top_k, int):
        raise InvalidRequestError(f"top_k must be an integer, got {top_k!r}")
    if top_k < 0:
        raise InvalidRequestError(f"top_k must not be negative, got {top_k}")
    return top_k


class ResumeSearchService:
    """Couples an embedding provider with a resume store."""

    def __init__(self, store: IResumeStore, embedding_provider: IEmbeddingProvider):
        self.store = store
        self.embedding_provider = embedding_provider

    def ingest_resume(self, text: str, name: Optional[str] = None, email: Optional[str] = None,
                      file_name: Optional[str] = None) -> IngestResult:
        """Embed and store a resume. Returns the new id and a leading snippet."""
        if not text or not text.strip():
            raise InvalidRequestError("Resume text is required")

        embedding = self.embedding_provider.embed_text(text)
        record = ResumeRecord(
            name=name or config_module.DEFAULT_CANDIDATE_NAME,
            email=email or config_module.DEFAULT_CANDIDATE_EMAIL,
            text=text,
            embedding=serialize_vector(embedding),
            file_name=file_name
        )
        resume_id = self.store.append(record)
        logger.log_ingest(resume_id, file_name=file_name, text_length=len(text))

        return IngestResult(
            id=resume_id,
            snippet=make_snippet(text, config_module.INGEST_SNIPPET_CHARS)
        )

    def search(self, query: str, top_k: Optional[int] = None) -> List[ScoredResult]:
        """Rank stored resumes against the query text.

        Raises InvalidRequestError for an empty query or unusable top_k.
        An empty store yields an empty list.
        """
        if not isinstance(query, str) or not query.strip():
            raise InvalidRequestError("Query is required")
        k = resolve_top_k(top_k)

        query_vector = self.embedding_provider.embed_text(query)
        records = self.store.read_all()

        candidates = [
            Candidate(
                id=record.id,
                vector=record.embedding,
                display={
                    "name": record.name,
                    "email": record.email,
                    "file_name": record.file_name,
                    "snippet": make_snippet(record.text, config_module.SEARCH_SNIPPET_CHARS, ellipsis=True),
                }
            )
            for record in records
        ]

        results = rank(query_vector, candidates, k)
        logger.log_search(query, k, len(candidates), len(results))
        return results

    def get_resume(self, resume_id: str) -> ResumeRecord:
        record = self.store.get(resume_id)
        if record is None:
            raise ResumeNotFoundError(f"Resume {resume_id} not found")
        return record

    def list_resumes(self) -> List[ResumeRecord]:
        return self.store.read_all()

    def reembed_all(self) -> int:
        """Recompute every stored embedding with the current provider.

        Needed after switching providers or dimensions, since vectors from
        different providers are not comparable.
        """
        updated = 0
        for record in self.store.read_all():
            embedding = self.embedding_provider.embed_text(record.text)
            if self.store.update_embedding(record.id, serialize_vector(embedding)):
                updated += 1
        logger.log_operation("resume.reembed", "success", {
            "updated": updated,
            "provider": self.embedding_provider.__class__.__name__,
            "dimension": self.embedding_provider.get_dimension()
        })
        return updated


_default_service: Optional[ResumeSearchService] = None


def get_search_service() -> ResumeSearchService:
    """Process-wide service built from configuration."""
    global _default_service
    if _default_service is None:
        _default_service = ResumeSearchService(
            store=config_module.get_resume_store(),
            embedding_provider=config_module.get_embedding_provider()
        )
    return _default_service
