"""
Shareholder letter ingestion.

Pipeline:
1. Read each letter PDF (sample passages stand in for missing files
   outside production)
2. Chunk and embed the passages
3. Insert them into the document store

Usage:
    python -m src.ingestion.ingest --folder data/letters
    python -m src.ingestion.ingest --file data/letters/berkshire-hathaway-2023.pdf
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from tqdm import tqdm

from ..models import Document, EmbeddedDocument
from ..rag.config import RAGConfig, get_rag_config
from ..rag.document_processor import DocumentProcessor
from ..rag.vector_store import VectorStore, get_vector_store

logger = logging.getLogger(__name__)


class LetterIngestionPipeline:
    """Processes letter files and stores their passages."""

    def __init__(self, processor: DocumentProcessor, vector_store: VectorStore):
        self.processor = processor
        self.vector_store = vector_store

    def ingest_documents(self, documents: List[Document], show_progress: bool = False) -> int:
        """
        Embed and insert passages in order.

        Raises:
            Exception: The first store error (the remaining passages are not inserted)
        """
        items: Iterable[Document] = documents
        if show_progress:
            items = tqdm(documents, desc="Inserting passages", unit="chunk")

        inserted = 0
        for doc in items:
            embedding = self.processor.generate_embedding(doc.content)
            self.vector_store.insert_embedded(EmbeddedDocument.from_document(doc, embedding))
            inserted += 1
        return inserted

    def ingest_file(self, path: Path, show_progress: bool = False) -> Dict[str, int]:
        """
        Ingest one letter PDF.

        Returns:
            Dictionary with chunk and insert counts
        """
        documents = self.processor.process_pdf(path)
        logger.info(f"Created {len(documents)} chunks from {path.name}")

        inserted = self.ingest_documents(documents, show_progress=show_progress)
        return {"files": 1, "chunks_created": len(documents), "documents_inserted": inserted}

    def ingest_folder(self, folder: Path, pattern: str = "*.pdf") -> Dict[str, int]:
        """Ingest every matching letter in a folder, in filename order."""
        stats = {"files": 0, "chunks_created": 0, "documents_inserted": 0}

        files = sorted(folder.glob(pattern))
        if not files:
            logger.warning(f"No files matching {pattern} in {folder}")
            return stats

        for path in tqdm(files, desc="Letters", unit="file"):
            file_stats = self.ingest_file(path)
            for key, value in file_stats.items():
                stats[key] += value

        return stats


def build_pipeline(config: Optional[RAGConfig] = None) -> LetterIngestionPipeline:
    """Build a pipeline sharing one embedder between processing and storage."""
    config = config or get_rag_config()
    processor = DocumentProcessor(config)
    vector_store = get_vector_store(config, embedder=processor.embedder)
    return LetterIngestionPipeline(processor, vector_store)


def main():
    """Main entry point for ingestion CLI."""
    parser = argparse.ArgumentParser(
        description="Ingest shareholder letter PDFs into the document store"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--folder",
        type=Path,
        help="Folder containing letter PDFs (e.g. berkshire-hathaway-2023.pdf)",
    )
    source.add_argument(
        "--file",
        type=Path,
        help="A single letter PDF",
    )
    parser.add_argument(
        "--pattern",
        default="*.pdf",
        help="Glob pattern for --folder (default: *.pdf)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.folder and not args.folder.exists():
        print(f"Error: Folder not found: {args.folder}", file=sys.stderr)
        sys.exit(1)

    pipeline = build_pipeline()

    try:
        if args.folder:
            stats = pipeline.ingest_folder(args.folder, pattern=args.pattern)
        else:
            stats = pipeline.ingest_file(args.file, show_progress=True)
    except Exception as e:
        logger.error(f"Ingestion failed: {e}", exc_info=True)
        sys.exit(1)

    print("\n" + "=" * 60)
    print("INGESTION SUMMARY")
    print("=" * 60)
    for key, value in stats.items():
        print(f"{key.replace('_', ' ').title()}: {value:,}")
    print(f"Total documents in store: {pipeline.vector_store.get_document_count():,}")
    print("=" * 60)


if __name__ == "__main__":
    main()
