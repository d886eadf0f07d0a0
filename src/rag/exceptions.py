"""Exceptions raised by the RAG components."""


class RAGError(Exception):
    """Base class for RAG errors"""
    pass


class EmbeddingProviderError(RAGError):
    """Raised when the remote embedding provider cannot produce a vector"""
    pass


class DocumentProcessingError(RAGError):
    """Raised when a source document cannot be read in production mode"""
    pass
