"""
Search shareholder letters from the command line.

Also checks that embeddings are reproducible: the same text embedded twice
must give the same vector, otherwise stored passages cannot be found again.

Usage:
    python scripts/search_letters.py "What does Berkshire look for in managers?"
    python scripts/search_letters.py "cryptocurrency" --year 2022 --limit 3
    python scripts/search_letters.py --check-consistency
"""

import argparse
import sys
from pathlib import Path

import numpy as np
from dotenv import load_dotenv

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.rag.config import get_rag_config
from src.rag.embedding_service import create_embedder
from src.rag.vector_store import get_vector_store

# Load environment
load_dotenv()

SAMPLE_QUERIES = [
    "What does Berkshire think about cryptocurrency?",
    "How does Berkshire evaluate management quality?",
    "What are economic moats?",
]


def check_consistency() -> int:
    """Embed sample queries twice and compare."""
    embedder = create_embedder(get_rag_config())
    failures = 0

    for query in SAMPLE_QUERIES:
        first = np.array(embedder.embed(query))
        second = np.array(embedder.embed(query))
        identical = np.array_equal(first, second)
        print(f"{'✅' if identical else '❌'} {query[:50]:<50} norm={np.linalg.norm(first):.6f}")
        if not identical:
            failures += 1

    print(f"\n{len(SAMPLE_QUERIES) - failures}/{len(SAMPLE_QUERIES)} queries reproducible")
    return 1 if failures else 0


def search(query: str, limit: int, year: str = None) -> int:
    """Run a search and print the results."""
    vector_store = get_vector_store()
    print(f"\nQuery: '{query}'" + (f" (year {year})" if year else ""))
    print("-" * 80)

    outcome = vector_store.search(query, limit=limit, year_filter=year)

    if not outcome.ok:
        print(f"❌ Search failed: {outcome.error}")
        return 1

    if not outcome.results:
        print("No results found")
        return 0

    print(f"Found {len(outcome.results)} results:\n")
    for i, result in enumerate(outcome.results, 1):
        print(f"Result {i}:")
        print(f"  Score: {result.similarity_score:.3f}")
        print(f"  Letter: {result.filename} ({result.year}), chunk {result.chunk_index}")
        print(f"  Text: {result.content[:150]}...")
        print()
    return 0


def main():
    parser = argparse.ArgumentParser(description="Search shareholder letters")
    parser.add_argument("query", nargs="?", help="Search query")
    parser.add_argument("--limit", type=int, default=5, help="Number of results (default: 5)")
    parser.add_argument("--year", help="Only search this letter year")
    parser.add_argument("--check-consistency", action="store_true", help="Check embedding reproducibility")
    args = parser.parse_args()

    if args.check_consistency:
        return check_consistency()

    if not args.query:
        parser.error("query is required unless --check-consistency is given")

    return search(args.query, max(1, args.limit), args.year)


if __name__ == "__main__":
    sys.exit(main())
