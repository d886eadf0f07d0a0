"""
FastAPI Application - Shareholder Letter Search

Main entry point for the REST API.
"""

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from contextlib import asynccontextmanager
import time
import logging
from typing import AsyncGenerator

from .dependencies import get_config, get_vector_store_dependency
from .schemas import ErrorResponse, HealthResponse
from .routers import rag
from ..rag.vector_store import VectorStore

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Version
VERSION = "0.1.0"


def _error(status_code: int, detail: str, error_code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(detail=detail, error_code=error_code).model_dump(mode='json')
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Log the effective configuration on startup."""
    config = get_config()

    logger.info("=" * 60)
    logger.info(f"Shareholder Letter Search API v{VERSION} ({config.environment})")
    logger.info(f"Store backend: {config.store_backend}")
    logger.info(f"Embedding provider: {config.embedding_provider} ({config.embedding_model})")
    if config.embedding_provider == "remote" and not config.embedding_api_key:
        logger.warning("⚠️  Embedding API key not configured, deterministic embeddings will be used")
    logger.info("=" * 60)

    yield

    logger.info("Shutting down API...")


app = FastAPI(
    title="Shareholder Letter Search API",
    description="""
    Semantic search over Berkshire Hathaway shareholder letters.

    ## Features
    - Meaning-based passage retrieval
    - Optional filtering by letter year
    - Degrades to empty results when the document store is unavailable

    ## Example Questions
    - "What does Berkshire think about cryptocurrency?"
    - "How are managers evaluated?"
    """,
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().allowed_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log each request with its status and duration"""
    start_time = time.perf_counter()

    response = await call_next(request)

    duration_ms = (time.perf_counter() - start_time) * 1000
    response.headers["X-Process-Time-Ms"] = f"{duration_ms:.0f}"
    logger.info(f"{request.method} {request.url.path} → {response.status_code} ({duration_ms:.0f}ms)")

    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reject malformed request bodies"""
    errors = exc.errors()
    logger.warning(f"Validation error on {request.url.path}: {errors}")
    return _error(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        f"Validation error: {errors[0]['msg']}",
        "VALIDATION_ERROR"
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    logger.error(f"ValueError: {exc}")
    return _error(status.HTTP_400_BAD_REQUEST, str(exc), "VALUE_ERROR")


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error. Please try again later.",
        "INTERNAL_ERROR"
    )


@app.get("/", tags=["Root"])
async def root():
    """API info"""
    return {
        "name": "Shareholder Letter Search API",
        "version": VERSION,
        "docs": "/docs",
        "health": "/health",
        "search": "/rag/search"
    }


@app.get("/health", response_model=HealthResponse, tags=["Health"])
def health_check(vector_store: VectorStore = Depends(get_vector_store_dependency)):
    """
    Health check endpoint.

    Always healthy while the process runs; document_count is 0 when the
    store is unreachable.
    """
    return HealthResponse(
        status="healthy",
        document_count=vector_store.get_document_count(),
        version=VERSION
    )


app.include_router(rag.router, prefix="/rag", tags=["RAG"])
