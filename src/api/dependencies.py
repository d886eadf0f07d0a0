"""
FastAPI Dependencies

Provides dependency injection for configuration and the vector store.
"""

from functools import lru_cache

from ..rag.config import RAGConfig, get_rag_config
from ..rag.vector_store import VectorStore, get_vector_store


@lru_cache(maxsize=1)
def get_config() -> RAGConfig:
    """RAG configuration dependency (read once from the environment)."""
    return get_rag_config()


@lru_cache(maxsize=1)
def get_vector_store_dependency() -> VectorStore:
    """
    Vector store dependency.

    Built lazily on first use so the app starts without a reachable store.
    Tests override it with app.dependency_overrides.

    Usage:
        @router.post("/search")
        def search(vector_store: VectorStore = Depends(get_vector_store_dependency)):
            ...
    """
    return get_vector_store(get_config())
