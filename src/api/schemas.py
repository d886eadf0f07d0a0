"""
API Request/Response Models (Pydantic Schemas)

Defines data validation and serialization for FastAPI endpoints.
"""

from typing import List, Dict, Any, Optional
from pydantic import BaseModel, Field
from datetime import datetime


# Health Check
class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status", examples=["healthy"])
    document_count: int = Field(..., description="Stored passages (0 if the store is unreachable)")
    version: str = Field(..., description="API version", examples=["0.1.0"])
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Current server time")


# Error Response
class ErrorResponse(BaseModel):
    """Standard error response"""

    detail: str = Field(..., description="Error message")
    error_code: Optional[str] = Field(None, description="Error code for client handling")
    timestamp: datetime = Field(default_factory=datetime.utcnow)


# Semantic search
class SemanticSearchRequest(BaseModel):
    """Request for semantic search over shareholder letters"""

    query: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Search query (semantic, not keyword-based)",
        examples=["What does Berkshire look for in managers?"]
    )
    limit: int = Field(
        default=5,
        ge=1,
        le=20,
        description="Number of results to return (1-20)"
    )
    year_filter: Optional[str] = Field(
        None,
        description="Only search the letter for this year (exact match, e.g. '2023')"
    )


class SemanticSearchResult(BaseModel):
    """Individual search result"""

    content: str = Field(..., description="Matched passage")
    metadata: Dict[str, Any] = Field(..., description="Passage metadata (filename, year, chunk_index)")
    similarity_score: float = Field(..., description="1 - cosine distance to the query")


class SemanticSearchResponse(BaseModel):
    """Response from semantic search"""

    success: bool = Field(..., description="False when the search failed and results carry no information")
    query: str = Field(..., description="Original query")
    results: List[SemanticSearchResult] = Field(..., description="Search results")
    results_count: int = Field(..., description="Number of results returned")
    error: Optional[str] = Field(None, description="Error message if the search failed")


class DocumentCountResponse(BaseModel):
    """Number of stored passages"""

    count: int = Field(..., description="Stored passages (0 if the store is unreachable)")
