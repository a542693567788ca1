"""
Runtime configuration, read from environment variables.
"""

import os
from pathlib import Path

# Database path configuration
DB_PATH = os.getenv("DB_PATH", "./data/resumes.db")

DEBUG = os.getenv("DEBUG", "true").lower() == "true"

# Comma-separated browser origins allowed by CORS; "*" allows any origin
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Storage and embedding providers
STORE_PROVIDER = os.getenv("STORE_PROVIDER", "sqlite")  # sqlite|memory
EMBED_PROVIDER = os.getenv("EMBED_PROVIDER", "hash")  # hash|sentence
EMBED_DIM = int(os.getenv("EMBED_DIM", "128"))  # must equal the model dimension when EMBED_PROVIDER=sentence
EMBED_MODEL_NAME = os.getenv("EMBED_MODEL_NAME", "all-MiniLM-L6-v2")

# Search defaults
DEFAULT_TOP_K = int(os.getenv("DEFAULT_TOP_K", "5"))
SEARCH_SNIPPET_CHARS = int(os.getenv("SEARCH_SNIPPET_CHARS", "300"))
INGEST_SNIPPET_CHARS = int(os.getenv("INGEST_SNIPPET_CHARS", "200"))

# Display fallbacks for resumes uploaded without metadata
DEFAULT_CANDIDATE_NAME = "Unknown Candidate"
DEFAULT_CANDIDATE_EMAIL = "No Email"

# Version string
VERSION = "1.0.0"


def get_resume_store():
    """Get configured resume store implementation."""
    if STORE_PROVIDER == "memory":
        from .dao import InMemoryResumeStore
        return InMemoryResumeStore()

    # Default to sqlite for unknown providers
    from .dao import SqliteResumeStore
    return SqliteResumeStore(DB_PATH)


def get_embedding_provider():
    """Get configured embedding provider implementation."""
    if EMBED_PROVIDER == "sentence":
        from ..vector.embeddings import SentenceTransformerEmbedding
        return SentenceTransformerEmbedding(EMBED_MODEL_NAME, dimension=EMBED_DIM)

    from ..vector.embeddings import DeterministicHashEmbedding
    return DeterministicHashEmbedding(dimension=EMBED_DIM)


def debug_enabled():
    """Check if debug mode is enabled."""
    return os.getenv("DEBUG", "true").lower() == "true"


def ensure_db_directory(db_path: str = None):
    """Ensure the database directory exists."""
    Path(db_path or DB_PATH).parent.mkdir(parents=True, exist_ok=True)


def validate_config():
    """Validate configuration and return any issues."""
    issues = []

    if STORE_PROVIDER not in ["sqlite", "memory"]:
        issues.append(f"Invalid STORE_PROVIDER: {STORE_PROVIDER} (falling back to sqlite)")

    if EMBED_PROVIDER not in ["hash", "sentence"]:
        issues.append(f"Invalid EMBED_PROVIDER: {EMBED_PROVIDER} (falling back to hash)")

    if EMBED_DIM < 1:
        issues.append("EMBED_DIM must be >= 1")

    if DEFAULT_TOP_K < 1:
        issues.append("DEFAULT_TOP_K must be >= 1")

    return issues
