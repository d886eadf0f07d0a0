"""
Vector Retrieval Service

Stores embedded letter passages and answers similarity queries.

Failure policy:
- insert: store errors are logged and re-raised (a lost write would leave
  a processed passage unretrievable)
- search / count: store errors are logged and degrade to an empty result
  or zero, so a calling agent never crashes on retrieval
- search() reports the failure in SearchOutcome.error for callers that
  need to tell "no matches" from "query failed"
"""

import logging
from typing import Iterable, List, Optional

from ..models import Document, EmbeddedDocument, SearchOutcome, SearchResult
from .config import RAGConfig
from .embedding_service import Embedder, create_embedder
from .stores import DocumentStore, create_document_store

logger = logging.getLogger(__name__)


class VectorStore:
    """Similarity search over shareholder letter passages."""

    def __init__(self, store: DocumentStore, embedder: Embedder):
        """
        Initialize vector store.

        Args:
            store: Document store backend
            embedder: Embedder for passages and queries
        """
        self.store = store
        self.embedder = embedder

    def insert_document(self, doc: Document) -> None:
        """
        Embed and persist one passage.

        Raises:
            Exception: Any store error, after logging it
        """
        embedding = self.embedder.embed(doc.content)
        self.insert_embedded(EmbeddedDocument.from_document(doc, embedding))

    def insert_embedded(self, doc: EmbeddedDocument) -> None:
        """
        Persist a passage that already carries its embedding.

        Raises:
            Exception: Any store error, after logging it
        """
        try:
            self.store.insert(
                content=doc.content,
                metadata=doc.metadata.model_dump(exclude_none=True),
                embedding=doc.embedding
            )
        except Exception as e:
            logger.error(
                f"Error inserting document {doc.metadata.filename}#{doc.metadata.chunk_index}: {e}",
                exc_info=True
            )
            raise

    def insert_documents(self, docs: Iterable[Document]) -> int:
        """
        Insert passages in order, stopping at the first failure.

        Embedded passages are stored as-is; plain ones are embedded first.

        Returns:
            Number of passages inserted
        """
        inserted = 0
        for doc in docs:
            if isinstance(doc, EmbeddedDocument):
                self.insert_embedded(doc)
            else:
                self.insert_document(doc)
            inserted += 1

        logger.info(f"Inserted {inserted} documents")
        return inserted

    def search(
        self,
        query: str,
        limit: int = 5,
        year_filter: Optional[str] = None
    ) -> SearchOutcome:
        """
        Search for passages similar to a query.

        Args:
            query: Natural language query
            limit: Maximum number of results
            year_filter: Only passages whose metadata year equals this

        Returns:
            SearchOutcome with results ordered by descending similarity,
            or an empty result and the error message if the query failed.
            A limit below 1 yields an empty successful outcome.
        """
        if limit < 1:
            logger.warning(f"Search called with limit={limit}, returning no results")
            return SearchOutcome(results=[])

        year_filter = year_filter or None

        try:
            query_embedding = self.embedder.embed(query)
            rows = self.store.query(query_embedding, limit=limit, year_filter=year_filter)

            results = [
                SearchResult(
                    content=row["content"],
                    metadata=row.get("metadata") or {},
                    similarity_score=row.get("similarity_score")
                )
                for row in rows[:limit]
            ]
        except Exception as e:
            logger.error(f"Error searching similar documents: {e}", exc_info=True)
            return SearchOutcome(results=[], error=str(e) or e.__class__.__name__)

        logger.info(
            f"Search returned {len(results)} results"
            + (f" for year {year_filter}" if year_filter else "")
        )
        return SearchOutcome(results=results)

    def search_similar(
        self,
        query: str,
        limit: int = 5,
        year_filter: Optional[str] = None
    ) -> List[SearchResult]:
        """
        Search for similar passages; an empty list on any store failure.

        An empty list means "no information available", not "confirmed
        no matches". Use search() to tell the two apart.
        """
        return self.search(query, limit=limit, year_filter=year_filter).results

    def get_document_count(self) -> int:
        """Number of stored passages, or 0 if the store cannot be reached."""
        try:
            return self.store.count()
        except Exception as e:
            logger.error(f"Error getting document count: {e}", exc_info=True)
            return 0


def get_vector_store(
    config: Optional[RAGConfig] = None,
    store: Optional[DocumentStore] = None,
    embedder: Optional[Embedder] = None
) -> VectorStore:
    """
    Get vector store instance.

    Args:
        config: RAG configuration (optional)
        store: Document store (optional, built from config)
        embedder: Embedder (optional, built from config)

    Returns:
        VectorStore instance
    """
    if config is None:
        from .config import get_rag_config
        config = get_rag_config()

    return VectorStore(
        store=store or create_document_store(config),
        embedder=embedder or create_embedder(config)
    )
