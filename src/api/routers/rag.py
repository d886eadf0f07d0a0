"""
RAG Router

Semantic search endpoints for shareholder letter passages.
"""

from fastapi import APIRouter, Depends
import logging

from ..dependencies import get_vector_store_dependency
from ..schemas import (
    DocumentCountResponse,
    SemanticSearchRequest,
    SemanticSearchResponse,
    SemanticSearchResult,
)
from ...rag.vector_store import VectorStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/search", response_model=SemanticSearchResponse)
def semantic_search(
    request: SemanticSearchRequest,
    vector_store: VectorStore = Depends(get_vector_store_dependency)
):
    """
    Search shareholder letters using semantic search.

    Results are ordered by descending similarity. A search that fails
    on the store side still returns 200, with `success=false` and no
    results: treat that as "no information available", not as
    "no matching passages".

    **Parameters:**
    - `query`: Your search query (1-500 characters)
    - `limit`: Number of results to return (1-20, default: 5)
    - `year_filter`: Optional - only passages from this letter year
    """
    logger.info(f"Semantic search: {request.query[:100]}...")

    outcome = vector_store.search(
        request.query,
        limit=request.limit,
        year_filter=request.year_filter
    )

    if not outcome.ok:
        logger.error(f"Search failed: {outcome.error}")

    return SemanticSearchResponse(
        success=outcome.ok,
        query=request.query,
        results=[
            SemanticSearchResult(
                content=result.content,
                metadata=result.metadata,
                similarity_score=result.similarity_score
            )
            for result in outcome.results
        ],
        results_count=len(outcome.results),
        error=outcome.error
    )


@router.get("/documents/count", response_model=DocumentCountResponse)
def document_count(vector_store: VectorStore = Depends(get_vector_store_dependency)):
    """Number of stored passages (0 when the store cannot be reached)."""
    return DocumentCountResponse(count=vector_store.get_document_count())
