"""Test doubles shared across test modules."""

import math
from typing import Any, Dict, List, Optional

from src.rag.embedding_service import Embedder
from src.rag.stores import DocumentStore


class MappingEmbedder(Embedder):
    """Returns preset vectors for known texts and a default vector otherwise."""

    def __init__(self, vectors, default=None):
        self.vectors = dict(vectors)
        self.default = default
        self.calls = []

    def embed(self, text):
        self.calls.append(text)
        if text in self.vectors:
            return list(self.vectors[text])
        if self.default is None:
            raise KeyError(text)
        return list(self.default)


class FailingEmbedder(Embedder):
    """Embedder standing in for an unreachable provider."""

    def __init__(self, message="provider unavailable"):
        self.message = message
        self.calls = 0

    def embed(self, text):
        self.calls += 1
        raise ConnectionError(self.message)


class FakeDocumentStore(DocumentStore):
    """Returns preset rows and records calls; optionally fails."""

    def __init__(self, rows: Optional[List[Dict[str, Any]]] = None, error: Optional[Exception] = None):
        self.rows = rows or []
        self.error = error
        self.inserted = []
        self.queries = []

    def insert(self, content, metadata, embedding):
        if self.error:
            raise self.error
        self.inserted.append((content, metadata, embedding))

    def query(self, embedding, limit, year_filter=None):
        self.queries.append((embedding, limit, year_filter))
        if self.error:
            raise self.error
        return list(self.rows)

    def count(self):
        if self.error:
            raise self.error
        return len(self.inserted)


def unit_vector_at(similarity: float) -> List[float]:
    """2-d unit vector whose cosine similarity to [1, 0] is ``similarity``."""
    return [similarity, math.sqrt(1 - similarity ** 2)]
