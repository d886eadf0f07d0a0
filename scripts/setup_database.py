"""
Setup the document store for shareholder letter search.

pgvector: creates the vector extension and the documents table.
qdrant:   creates the collection and its year index.

Usage:
    python scripts/setup_database.py
    python scripts/setup_database.py --recreate   # qdrant only
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv
from sqlalchemy import text

from src.rag.config import get_rag_config
from src.rag.stores import PgVectorDocumentStore, QdrantDocumentStore, create_document_store


def main():
    """Setup document store schema"""
    parser = argparse.ArgumentParser(description="Create the document store schema")
    parser.add_argument("--recreate", action="store_true", help="Drop and recreate the Qdrant collection")
    args = parser.parse_args()

    print("=" * 60)
    print("Shareholder Letter Store Setup")
    print("=" * 60)

    load_dotenv()
    config = get_rag_config()
    print(f"\n📦 Store backend: {config.store_backend}")

    try:
        store = create_document_store(config)

        if isinstance(store, PgVectorDocumentStore):
            url = config.database_url
            print(f"   URL: {url.split('@')[1] if '@' in url else 'localhost'}")

            with store.engine.connect() as conn:
                version = conn.execute(text("SELECT version();")).scalar()
            print(f"✅ Connected successfully!")
            print(f"   PostgreSQL version: {version.split(',')[0]}\n")

            print(f"🔨 Creating table '{store.table_name}' (vector({store.dimension}))...")
            store.create_schema()

        elif isinstance(store, QdrantDocumentStore):
            print(f"   URL: {config.qdrant_url}")
            created = store.create_collection(recreate=args.recreate)
            print(f"🔨 Collection '{store.collection_name}' {'created' if created else 'already exists'}")

        else:
            print("ℹ️  In-memory store needs no setup")
            return 0

        print(f"✅ Schema ready. Documents stored: {store.count()}")
        print("\nNext steps:")
        print("  1. Load sample data: python scripts/load_sample_data.py")
        print("  2. Or ingest letters: python -m src.ingestion.ingest --folder data/letters")
        return 0

    except Exception as e:
        print(f"\n❌ ERROR: {e}")
        print("\nTroubleshooting:")
        print("  1. Check DATABASE_URL / RAG_QDRANT_URL in .env")
        print("  2. For pgvector: the server must have the 'vector' extension installed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
