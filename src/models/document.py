"""Pydantic models for letter passages and search results."""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator


class DocumentMetadata(BaseModel):
    """
    Where a passage came from.

    Serialized as JSON next to the passage in the document store.
    """

    filename: str = Field(..., description="Source file name (e.g., 'berkshire-hathaway-2023.pdf')")
    year: str = Field(
        default="unknown",
        description="4-digit year taken from the filename, or 'unknown'"
    )
    chunk_index: int = Field(
        ...,
        description="Position of the passage within its source document",
        ge=0
    )
    page: Optional[int] = Field(default=None, description="Source page, when known", ge=1)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "filename": "berkshire-hathaway-2023.pdf",
                "year": "2023",
                "chunk_index": 0
            }
        }


class Document(BaseModel):
    """A retrievable passage (chunk) of a source document."""

    content: str = Field(..., description="Passage text", min_length=1)
    metadata: DocumentMetadata

    @field_validator('content')
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        """Reject whitespace-only passages."""
        if not v.strip():
            raise ValueError("content must not be blank")
        return v

    class Config:
        frozen = True


class EmbeddedDocument(Document):
    """A passage together with the embedding generated for it."""

    embedding: List[float] = Field(..., description="Embedding vector", min_length=1)

    @classmethod
    def from_document(cls, document: Document, embedding: List[float]) -> "EmbeddedDocument":
        return cls(content=document.content, metadata=document.metadata, embedding=embedding)

    def to_document(self) -> Document:
        return Document(content=self.content, metadata=self.metadata)


class SourceDocument(BaseModel):
    """Raw text of a whole letter before chunking."""

    filename: str
    text: str

    class Config:
        frozen = True


class SearchResult(BaseModel):
    """Single passage returned by a similarity search."""

    content: str = Field(..., description="Matched passage text")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Stored passage metadata")
    similarity_score: float = Field(
        default=0.0,
        description="1 - cosine distance to the query (0.0 when the store omits it)"
    )

    @field_validator('similarity_score', mode='before')
    @classmethod
    def default_missing_score(cls, v: Any) -> float:
        """Stores may return NULL or a numeric string for the score."""
        if v is None or v == "":
            return 0.0
        return float(v)

    @property
    def year(self) -> Optional[str]:
        return self.metadata.get("year")

    @property
    def filename(self) -> Optional[str]:
        return self.metadata.get("filename")

    @property
    def chunk_index(self) -> Optional[int]:
        return self.metadata.get("chunk_index")


class SearchOutcome(BaseModel):
    """
    Result of a search that keeps a failed query apart from an empty one.

    ``ok`` with no results means the store confirmed there were no
    matches; ``not ok`` means the query itself failed and the empty
    result carries no information.
    """

    results: List[SearchResult] = Field(default_factory=list)
    error: Optional[str] = Field(default=None, description="Error message if the query failed")

    @property
    def ok(self) -> bool:
        return self.error is None
