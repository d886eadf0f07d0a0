"""Pydantic data models for shareholder letter passages."""

from .document import (
    Document,
    DocumentMetadata,
    EmbeddedDocument,
    SearchOutcome,
    SearchResult,
    SourceDocument,
)

__all__ = [
    "Document",
    "DocumentMetadata",
    "EmbeddedDocument",
    "SearchOutcome",
    "SearchResult",
    "SourceDocument",
]
