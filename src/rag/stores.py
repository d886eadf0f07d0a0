"""
Document Stores

Persistence and nearest-neighbour search for embedded passages.

Backends:
- PgVectorDocumentStore: PostgreSQL + pgvector (cosine distance operator <=>)
- QdrantDocumentStore: Qdrant collection with cosine distance
- InMemoryDocumentStore: numpy cosine search, for tests and offline use

Every backend returns rows shaped as
{"content": str, "metadata": dict, "similarity_score": float}
ordered by ascending distance (descending similarity).
"""

import json
import logging
import re
import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import numpy as np
from sqlalchemy import text
from sqlalchemy.engine import Engine

from .config import RAGConfig

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def format_vector(embedding: List[float]) -> str:
    """Serialize an embedding as a pgvector literal, e.g. '[0.12,-0.98]'."""
    return "[" + ",".join(repr(float(value)) for value in embedding) + "]"


class DocumentStore(ABC):
    """Storage boundary for (content, metadata, embedding) rows."""

    @abstractmethod
    def insert(self, content: str, metadata: Dict[str, Any], embedding: List[float]) -> None:
        """Persist one passage."""

    @abstractmethod
    def query(
        self,
        embedding: List[float],
        limit: int,
        year_filter: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Nearest passages to an embedding.

        Args:
            embedding: Query vector
            limit: Maximum number of rows
            year_filter: Only rows whose metadata year equals this string

        Returns:
            Rows ordered by ascending cosine distance
        """

    @abstractmethod
    def count(self) -> int:
        """Number of stored passages."""


class PgVectorDocumentStore(DocumentStore):
    """PostgreSQL table with a pgvector embedding column."""

    def __init__(self, engine: Engine, table_name: str = "documents", dimension: int = 1536):
        """
        Initialize pgvector store.

        Args:
            engine: SQLAlchemy engine (connections are taken per call)
            table_name: Table holding the passages
            dimension: Embedding dimension of the vector column
        """
        if not _IDENTIFIER.match(table_name):
            raise ValueError(f"Invalid table name: {table_name}")

        self.engine = engine
        self.table_name = table_name
        self.dimension = dimension

    def create_schema(self) -> None:
        """Create the vector extension and the passages table if missing."""
        logger.info(f"Creating table {self.table_name} (vector({self.dimension}))")
        with self.engine.begin() as conn:
            conn.execute(text("CREATE EXTENSION IF NOT EXISTS vector"))
            conn.execute(text(f"""
                CREATE TABLE IF NOT EXISTS {self.table_name} (
                    id SERIAL PRIMARY KEY,
                    content TEXT NOT NULL,
                    metadata JSONB,
                    embedding vector({self.dimension})
                )
            """))

    def insert(self, content: str, metadata: Dict[str, Any], embedding: List[float]) -> None:
        with self.engine.begin() as conn:
            conn.execute(
                text(f"""
                    INSERT INTO {self.table_name} (content, metadata, embedding)
                    VALUES (:content, CAST(:metadata AS jsonb), CAST(:embedding AS vector))
                """),
                {
                    "content": content,
                    "metadata": json.dumps(metadata),
                    "embedding": format_vector(embedding),
                }
            )

    def query(
        self,
        embedding: List[float],
        limit: int,
        year_filter: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        params = {"embedding": format_vector(embedding), "limit": limit}
        where = ""
        if year_filter:
            where = "WHERE metadata->>'year' = :year"
            params["year"] = year_filter

        sql = text(f"""
            SELECT
                content,
                metadata,
                1 - (embedding <=> CAST(:embedding AS vector)) AS similarity_score
            FROM {self.table_name}
            {where}
            ORDER BY embedding <=> CAST(:embedding AS vector)
            LIMIT :limit
        """)

        with self.engine.connect() as conn:
            rows = conn.execute(sql, params).mappings().all()

        results = []
        for row in rows:
            metadata = row["metadata"]
            if isinstance(metadata, str):
                metadata = json.loads(metadata)
            results.append({
                "content": row["content"],
                "metadata": metadata or {},
                "similarity_score": row["similarity_score"],
            })
        return results

    def count(self) -> int:
        with self.engine.connect() as conn:
            value = conn.execute(text(f"SELECT COUNT(*) AS count FROM {self.table_name}")).scalar()
        return int(value or 0)


class QdrantDocumentStore(DocumentStore):
    """Qdrant collection using cosine distance."""

    def __init__(self, client, collection_name: str = "shareholder_letters", dimension: int = 1536):
        """
        Initialize Qdrant store.

        Args:
            client: qdrant_client.QdrantClient instance
            collection_name: Name of the collection
            dimension: Embedding dimension
        """
        self.client = client
        self.collection_name = collection_name
        self.dimension = dimension

    def create_collection(self, recreate: bool = False) -> bool:
        """
        Create the collection and its year index.

        Args:
            recreate: If True, delete existing collection and recreate

        Returns:
            True if collection was created, False if already existed
        """
        from qdrant_client.models import Distance, PayloadSchemaType, VectorParams

        collection_names = [c.name for c in self.client.get_collections().collections]

        if self.collection_name in collection_names:
            if not recreate:
                logger.info(f"Collection already exists: {self.collection_name}")
                return False
            logger.warning(f"Deleting existing collection: {self.collection_name}")
            self.client.delete_collection(self.collection_name)

        logger.info(f"Creating collection: {self.collection_name}")
        self.client.create_collection(
            collection_name=self.collection_name,
            vectors_config=VectorParams(size=self.dimension, distance=Distance.COSINE)
        )
        self.client.create_payload_index(
            collection_name=self.collection_name,
            field_name="year",
            field_schema=PayloadSchemaType.KEYWORD
        )
        return True

    def insert(self, content: str, metadata: Dict[str, Any], embedding: List[float]) -> None:
        from qdrant_client.models import PointStruct

        point = PointStruct(
            id=str(uuid.uuid4()),
            vector=list(embedding),
            payload={
                "content": content,
                "metadata": metadata,
                "year": str(metadata.get("year", "")),
            }
        )
        self.client.upsert(collection_name=self.collection_name, points=[point])

    def query(
        self,
        embedding: List[float],
        limit: int,
        year_filter: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        from qdrant_client.models import FieldCondition, Filter, MatchValue

        query_filter = None
        if year_filter:
            query_filter = Filter(must=[
                FieldCondition(key="year", match=MatchValue(value=year_filter))
            ])

        points = self.client.query_points(
            collection_name=self.collection_name,
            query=list(embedding),
            limit=limit,
            query_filter=query_filter,
            with_payload=True
        ).points

        return [
            {
                "content": point.payload.get("content", ""),
                "metadata": point.payload.get("metadata") or {},
                "similarity_score": point.score,
            }
            for point in points
        ]

    def count(self) -> int:
        result = self.client.count(collection_name=self.collection_name, exact=True)
        return result.count or 0


class InMemoryDocumentStore(DocumentStore):
    """
    Process-local store with exact cosine search.

    Equal distances keep insertion order.
    """

    def __init__(self):
        self.rows: List[Dict[str, Any]] = []

    def insert(self, content: str, metadata: Dict[str, Any], embedding: List[float]) -> None:
        self.rows.append({
            "content": content,
            "metadata": dict(metadata),
            "embedding": np.asarray(embedding, dtype=float),
        })

    def query(
        self,
        embedding: List[float],
        limit: int,
        year_filter: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        candidates = [
            row for row in self.rows
            if not year_filter or row["metadata"].get("year") == year_filter
        ]
        if not candidates or limit < 1:
            return []

        query_vec = np.asarray(embedding, dtype=float)
        distances = np.array([cosine_distance(query_vec, row["embedding"]) for row in candidates])
        order = np.argsort(distances, kind="stable")[:limit]

        return [
            {
                "content": candidates[i]["content"],
                "metadata": dict(candidates[i]["metadata"]),
                "similarity_score": float(1 - distances[i]),
            }
            for i in order
        ]

    def count(self) -> int:
        return len(self.rows)


def cosine_distance(vec1: np.ndarray, vec2: np.ndarray) -> float:
    """1 - cosine similarity; 1.0 when either vector has zero length."""
    norm1 = np.linalg.norm(vec1)
    norm2 = np.linalg.norm(vec2)

    if norm1 == 0 or norm2 == 0:
        return 1.0

    return float(1 - np.dot(vec1, vec2) / (norm1 * norm2))


def create_document_store(config: Optional[RAGConfig] = None) -> DocumentStore:
    """
    Build the document store selected by configuration.

    Args:
        config: RAG configuration (optional, loads from env if not provided)

    Returns:
        DocumentStore for config.store_backend
    """
    if config is None:
        from .config import get_rag_config
        config = get_rag_config()

    backend = config.store_backend.lower()

    if backend == "pgvector":
        from ..db.session import create_db_engine
        logger.info(f"Using pgvector store (table: {config.documents_table})")
        return PgVectorDocumentStore(
            create_db_engine(config.database_url),
            table_name=config.documents_table,
            dimension=config.embedding_dimension
        )

    if backend == "qdrant":
        from qdrant_client import QdrantClient
        logger.info(f"Connecting to Qdrant at {config.qdrant_url}")
        client = QdrantClient(url=config.qdrant_url, api_key=config.qdrant_api_key)
        return QdrantDocumentStore(
            client,
            collection_name=config.qdrant_collection_name,
            dimension=config.embedding_dimension
        )

    if backend == "memory":
        logger.info("Using in-memory document store")
        return InMemoryDocumentStore()

    raise ValueError(f"Unknown store backend: {config.store_backend}")
