"""
Document Processor

Turns shareholder letters into embedded, retrievable passages.

Steps:
1. Load letter text (PDF via pypdf, or raw text)
2. Extract the letter year from its filename
3. Chunk the text into overlapping passages
4. Embed each passage (remote provider with deterministic fallback)

Persistence is the caller's job (see vector_store.VectorStore).
"""

import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from pypdf import PdfReader

from ..models import Document, DocumentMetadata, EmbeddedDocument, SourceDocument
from .chunker import TextChunker
from .config import RAGConfig
from .embedding_service import Embedder, create_embedder
from .exceptions import DocumentProcessingError
from .sample_content import get_sample_passages

logger = logging.getLogger(__name__)

YEAR_PATTERN = re.compile(r"(\d{4})")
UNKNOWN_YEAR = "unknown"


def extract_year(filename: str) -> str:
    """
    Extract the letter year from a filename.

    Example: "berkshire-hathaway-2023.pdf" -> "2023", "letter.pdf" -> "unknown"
    """
    match = YEAR_PATTERN.search(filename)
    return match.group(1) if match else UNKNOWN_YEAR


class DocumentProcessor:
    """Chunks letters and attaches metadata and embeddings to each passage."""

    def __init__(
        self,
        config: Optional[RAGConfig] = None,
        embedder: Optional[Embedder] = None,
        chunker: Optional[TextChunker] = None
    ):
        """
        Initialize document processor.

        Args:
            config: RAG configuration (optional, loads from env if not provided)
            embedder: Embedder instance (optional, built from config)
            chunker: Chunker instance (optional, built from config)
        """
        if config is None:
            from .config import get_rag_config
            config = get_rag_config()

        self.config = config
        self.embedder = embedder or create_embedder(config)
        self.chunker = chunker or TextChunker(config)

    def extract_year(self, filename: str) -> str:
        return extract_year(filename)

    def split_document(self, text: str, filename: str) -> List[Document]:
        """
        Chunk text and label each chunk with filename, year and position.

        Args:
            text: Full letter text
            filename: Source file name (used for the year)

        Returns:
            List of Document passages in document order
        """
        year = extract_year(filename)
        chunks = self.chunker.chunk(text)

        return [
            Document(
                content=chunk,
                metadata=DocumentMetadata(filename=filename, year=year, chunk_index=index)
            )
            for index, chunk in enumerate(chunks)
        ]

    def generate_embedding(self, text: str) -> List[float]:
        """Embed text with the configured embedder (falls back offline on provider errors)."""
        return self.embedder.embed(text)

    def embed_documents(self, documents: List[Document]) -> List[EmbeddedDocument]:
        """Attach an embedding to each passage, one provider call per passage."""
        return [
            EmbeddedDocument.from_document(doc, self.generate_embedding(doc.content))
            for doc in documents
        ]

    def process(self, document: SourceDocument) -> List[EmbeddedDocument]:
        """
        Chunk and embed a whole letter.

        Args:
            document: Source letter (filename + text)

        Returns:
            Embedded passages, ready for VectorStore.insert_embedded()
        """
        passages = self.split_document(document.text, document.filename)
        logger.info(f"Created {len(passages)} chunks from {document.filename}")
        return self.embed_documents(passages)

    def load_pdf(self, file_path: Union[str, Path]) -> SourceDocument:
        """
        Extract the text of every page of a PDF.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(file_path)
        reader = PdfReader(str(path))
        text = "\n".join(page.extract_text() or "" for page in reader.pages)
        logger.info(f"Extracted {len(text)} characters from {path.name}")
        return SourceDocument(filename=path.name, text=text)

    def process_pdf(self, file_path: Union[str, Path]) -> List[Document]:
        """
        Load and chunk a letter PDF.

        Outside production an unreadable or missing PDF is replaced by
        sample passages for the filename's year so demos keep working.

        Raises:
            DocumentProcessingError: In production, when the PDF cannot be read
        """
        path = Path(file_path)
        logger.info(f"Processing PDF: {path}")

        try:
            source = self.load_pdf(path)
        except Exception as e:
            if self.config.is_production:
                raise DocumentProcessingError(
                    f"Error processing PDF {path}: {e}. Authentic PDFs are required in production."
                ) from e

            logger.warning(f"Could not read PDF {path}: {e}")
            return self.generate_sample_content(path.name)

        return self.split_document(source.text, source.filename)

    def generate_sample_content(self, filename: str) -> List[Document]:
        """
        Sample passages standing in for a missing letter (development only).

        Raises:
            DocumentProcessingError: In production
        """
        if self.config.is_production:
            raise DocumentProcessingError(
                "Cannot generate sample content in production mode. Authentic PDFs required."
            )

        year = extract_year(filename)
        logger.warning(
            f"Using sample content for {filename} (year: {year}). "
            "This is NOT authentic shareholder letter text."
        )

        return [
            Document(
                content=content,
                metadata=DocumentMetadata(filename=filename, year=year, chunk_index=index)
            )
            for index, content in enumerate(get_sample_passages(year))
        ]
