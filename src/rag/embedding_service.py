"""
Embedding Service

Generates vector embeddings for letter passages and queries.

Embedders:
- RemoteEmbedder: provider embeddings through LiteLLM
  (default text-embedding-ada-002, 1536 dimensions)
- DeterministicEmbedder: hash-seeded unit vectors, no network access,
  identical output for identical text on every run
- FallbackEmbedder: tries a primary embedder and answers with a
  secondary one when the primary fails

Use create_embedder() to get the composition selected by RAGConfig.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import List, Optional

import litellm
from tenacity import Retrying, stop_after_attempt, wait_exponential

from .config import RAGConfig
from .exceptions import EmbeddingProviderError

logger = logging.getLogger(__name__)

DEFAULT_DIMENSIONS = 1536

# Linear congruential generator constants
_LCG_MULTIPLIER = 9301
_LCG_INCREMENT = 49297
_LCG_MODULUS = 233280


class Embedder(ABC):
    """Turns text into a fixed-length embedding vector."""

    @abstractmethod
    def embed(self, text: str) -> List[float]:
        """
        Generate embedding for a single text.

        Args:
            text: Text to embed

        Returns:
            Embedding vector as list of floats
        """

    def embed_batch(self, texts: List[str]) -> List[List[float]]:
        """Generate embeddings for multiple texts, in order."""
        return [self.embed(text) for text in texts]


def stable_hash(text: str) -> int:
    """
    32-bit rolling hash (h * 31 + unit) over the UTF-16 code units of text.

    Wraps like a signed 32-bit integer and returns the absolute value.
    """
    h = 0
    encoded = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(encoded), 2):
        unit = encoded[i] | (encoded[i + 1] << 8)
        h = (h * 31 + unit) & 0xFFFFFFFF

    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


class DeterministicEmbedder(Embedder):
    """
    Offline embedder producing reproducible unit-length vectors.

    The text hash seeds a linear congruential generator whose draws fill
    the vector, which is then L2-normalized. Different texts may collide;
    this is a stand-in for a real embedding, not a semantic one.
    """

    def __init__(self, dimensions: int = DEFAULT_DIMENSIONS):
        if dimensions < 1:
            raise ValueError(f"dimensions must be positive, got {dimensions}")
        self.dimensions = dimensions

    def embed(self, text: str) -> List[float]:
        seed = stable_hash(text)
        embedding = []
        for _ in range(self.dimensions):
            seed = (seed * _LCG_MULTIPLIER + _LCG_INCREMENT) % _LCG_MODULUS
            embedding.append((seed / _LCG_MODULUS - 0.5) * 2)

        # Sequential sum keeps the result bit-identical across runs
        total = 0.0
        for value in embedding:
            total += value * value
        magnitude = math.sqrt(total)

        if magnitude == 0:
            return embedding
        return [value / magnitude for value in embedding]


class RemoteEmbedder(Embedder):
    """Embeddings from an external provider through LiteLLM."""

    def __init__(self, config: RAGConfig):
        """
        Initialize remote embedder.

        Args:
            config: RAG configuration
        """
        self.config = config
        self.model = config.embedding_model
        self.dimension = config.embedding_dimension
        self.max_attempts = max(1, config.embedding_max_retries)

        logger.info(f"Remote embedding model: {self.model} ({self.dimension} dims)")

    def _request(self, texts: List[str]) -> List[List[float]]:
        if not self.config.embedding_api_key:
            raise EmbeddingProviderError("Embedding API key not configured")

        params = {
            "model": self.model,
            "input": texts,
            "api_key": self.config.embedding_api_key,
            "timeout": self.config.embedding_timeout,
        }
        if self.config.embedding_base_url:
            params["api_base"] = self.config.embedding_base_url

        try:
            for attempt in Retrying(
                stop=stop_after_attempt(self.max_attempts),
                wait=wait_exponential(multiplier=1, min=1, max=8),
                reraise=True
            ):
                with attempt:
                    response = litellm.embedding(**params)
        except Exception as e:
            raise EmbeddingProviderError(f"Embedding request failed: {e}") from e

        embeddings = []
        for item in response.data:
            vector = item["embedding"] if isinstance(item, dict) else item.embedding
            if len(vector) != self.dimension:
                raise EmbeddingProviderError(
                    f"Provider returned {len(vector)} dimensions, expected {self.dimension}"
                )
            embeddings.append(list(vector))

        if len(embeddings) != len(texts):
            raise EmbeddingProviderError(
                f"Provider returned {len(embeddings)} embeddings for {len(texts)} inputs"
            )
        return embeddings

    def embed(self, text: str) -> List[float]:
        return self._request([text])[0]

    def embed_batch(self, texts: List[str]) -> List[List[float]]:
        if not texts:
            return []
        return self._request(texts)


class FallbackEmbedder(Embedder):
    """
    Answers from ``primary`` and falls back to ``fallback`` on any error.

    Errors raised by the fallback itself propagate.
    """

    def __init__(self, primary: Embedder, fallback: Embedder):
        self.primary = primary
        self.fallback = fallback
        self.fallback_count = 0

    def embed(self, text: str) -> List[float]:
        try:
            return self.primary.embed(text)
        except Exception as e:
            self.fallback_count += 1
            logger.warning(f"Primary embedder unavailable, using fallback embeddings: {e}")
            return self.fallback.embed(text)

    def embed_batch(self, texts: List[str]) -> List[List[float]]:
        if not texts:
            return []
        try:
            return self.primary.embed_batch(texts)
        except Exception as e:
            self.fallback_count += 1
            logger.warning(
                f"Primary embedder unavailable for batch of {len(texts)}, "
                f"using fallback embeddings: {e}"
            )
            return self.fallback.embed_batch(texts)


def create_embedder(config: Optional[RAGConfig] = None) -> Embedder:
    """
    Get the embedder selected by configuration.

    Args:
        config: RAG configuration (optional, will load from env if not provided)

    Returns:
        FallbackEmbedder(RemoteEmbedder, DeterministicEmbedder) for the
        'remote' provider, DeterministicEmbedder for 'deterministic'
    """
    if config is None:
        from .config import get_rag_config
        config = get_rag_config()

    provider = config.embedding_provider.lower()
    deterministic = DeterministicEmbedder(config.embedding_dimension)

    if provider == "deterministic":
        logger.info("Using deterministic embeddings (offline mode)")
        return deterministic
    if provider == "remote":
        return FallbackEmbedder(RemoteEmbedder(config), deterministic)

    raise ValueError(f"Unknown embedding provider: {config.embedding_provider}")
