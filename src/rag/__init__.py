"""
RAG (Retrieval Augmented Generation) System

This module provides semantic search over shareholder letters.

Components:
- chunker: Splits letter text into overlapping passages
- embedding_service: Remote, deterministic and fallback embedders
- document_processor: Chunks and embeds letters, extracts letter years
- stores: pgvector, Qdrant and in-memory document stores
- vector_store: Inserts passages and runs similarity searches
"""

from .config import RAGConfig, get_rag_config
from .chunker import TextChunker, chunk_text
from .embedding_service import (
    DeterministicEmbedder,
    Embedder,
    FallbackEmbedder,
    RemoteEmbedder,
    create_embedder,
)
from .document_processor import DocumentProcessor, extract_year
from .exceptions import DocumentProcessingError, EmbeddingProviderError, RAGError
from .vector_store import VectorStore, get_vector_store

__all__ = [
    "RAGConfig",
    "get_rag_config",
    "TextChunker",
    "chunk_text",
    "Embedder",
    "DeterministicEmbedder",
    "RemoteEmbedder",
    "FallbackEmbedder",
    "create_embedder",
    "DocumentProcessor",
    "extract_year",
    "RAGError",
    "EmbeddingProviderError",
    "DocumentProcessingError",
    "VectorStore",
    "get_vector_store",
]
