#!/usr/bin/env python3
"""
Embedding Rebuild Utility
Recomputes every stored resume embedding with the configured provider.
Run after changing EMBED_PROVIDER or EMBED_DIM, since vectors from different
providers or dimensions are not comparable and would all score 0.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from resume_match.core.config import get_embedding_provider, get_resume_store
from resume_match.core.search_service import ResumeSearchService


def main(argv=None):
    """Rebuild resume embeddings from stored text."""
    parser = argparse.ArgumentParser(description="Re-embed all stored resumes")
    parser.add_argument("--verify-query", default=None,
                        help="Run a search with this query after rebuilding")
    args = parser.parse_args(argv)

    service = ResumeSearchService(
        store=get_resume_store(),
        embedding_provider=get_embedding_provider()
    )

    total = service.store.count()
    print(f"Found {total} resumes in store")
    if total == 0:
        print("No entries to rebuild. Exiting.")
        return 0

    updated = service.reembed_all()
    print(f"✓ Re-embedded {updated}/{total} resumes "
          f"({service.embedding_provider.__class__.__name__}, dim={service.embedding_provider.get_dimension()})")

    if args.verify_query:
        results = service.search(args.verify_query, top_k=min(3, total))
        print(f"✓ Verification search returned {len(results)} results")
        for result in results:
            print(f"  {result.id}  {result.score:.4f}  {result.display.get('name')}")

    return 0 if updated == total else 1


if __name__ == "__main__":
    sys.exit(main())
