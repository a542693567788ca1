#!/usr/bin/env python3
"""
Bulk ingest plain-text resumes (.txt) from files or directories.
Text is read as UTF-8; other formats must be converted to text first.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from resume_match.core.config import get_embedding_provider, get_resume_store
from resume_match.core.search_service import InvalidRequestError, ResumeSearchService


def collect_paths(inputs):
    """Expand directories into the .txt files they contain, sorted by name."""
    paths = []
    for raw in inputs:
        path = Path(raw)
        if path.is_dir():
            paths.extend(sorted(p for p in path.iterdir() if p.suffix.lower() == ".txt"))
        elif path.suffix.lower() == ".txt":
            paths.append(path)
        else:
            print(f"WARNING: skipping {path} (only .txt is supported)")
    return paths


def main(argv=None):
    parser = argparse.ArgumentParser(description="Ingest .txt resumes into the store")
    parser.add_argument("paths", nargs="+", help="Files or directories to ingest")
    parser.add_argument("--email", default=None, help="Contact email applied to every resume")
    args = parser.parse_args(argv)

    service = ResumeSearchService(
        store=get_resume_store(),
        embedding_provider=get_embedding_provider()
    )

    paths = collect_paths(args.paths)
    ingested = 0
    for path in paths:
        try:
            text = path.read_text(encoding="utf-8")
            result = service.ingest_resume(text, name=path.stem, email=args.email, file_name=path.name)
        except (OSError, UnicodeDecodeError, InvalidRequestError) as e:
            print(f"ERROR: Failed to ingest {path}: {e}")
            continue
        ingested += 1
        print(f"✓ {path.name} -> id {result.id}")

    print(f"Ingested {ingested}/{len(paths)} resumes")
    return 0 if ingested == len(paths) else 1


if __name__ == "__main__":
    sys.exit(main())
