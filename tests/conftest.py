"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path

from src.rag.config import RAGConfig
from src.rag.embedding_service import DeterministicEmbedder
from src.rag.stores import InMemoryDocumentStore
from src.rag.vector_store import VectorStore


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def rag_config():
    """Offline configuration: deterministic embeddings, in-memory store."""
    return RAGConfig(
        embedding_provider="deterministic",
        embedding_dimension=16,
        embedding_api_key=None,
        store_backend="memory",
        environment="development",
    )


@pytest.fixture
def deterministic_embedder():
    return DeterministicEmbedder(dimensions=16)


@pytest.fixture
def memory_store():
    return InMemoryDocumentStore()


@pytest.fixture
def vector_store(memory_store, deterministic_embedder):
    """VectorStore over an empty in-memory store."""
    return VectorStore(store=memory_store, embedder=deterministic_embedder)
