"""
Text Chunking for RAG

Splits long letters into overlapping passages that can be embedded and
retrieved independently.

Strategy:
- Fixed-size character windows
- Each window is pulled back to the last sentence end or line break
  inside it, so passages do not stop mid-sentence
- Consecutive windows overlap for context continuity
- Short fragments (headers, trailing bits) are dropped
"""

from typing import List, Optional

from .config import RAGConfig

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 200
DEFAULT_MIN_CHUNK_LENGTH = 50


def chunk_text(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    overlap: int = DEFAULT_CHUNK_OVERLAP,
    min_length: int = DEFAULT_MIN_CHUNK_LENGTH
) -> List[str]:
    """
    Split text into overlapping chunks.

    Args:
        text: Text to chunk
        chunk_size: Maximum characters per window (a window may grow by one
            character when it ends exactly on a boundary character)
        overlap: Characters shared between consecutive windows
        min_length: Chunks whose trimmed length is <= this are dropped

    Returns:
        List of trimmed chunk strings, in document order

    Raises:
        ValueError: If chunk_size < 1 or overlap < 0
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if overlap < 0:
        raise ValueError(f"overlap must not be negative, got {overlap}")

    chunks = []
    text_length = len(text)
    start = 0

    while start < text_length:
        end = start + chunk_size

        # Try to break at sentence or paragraph boundaries
        if end < text_length:
            last_period = text.rfind('.', 0, end + 1)
            last_newline = text.rfind('\n', 0, end + 1)
            break_point = max(last_period, last_newline)

            if break_point > start:
                end = break_point + 1

        chunks.append(text[start:end].strip())

        # The window must always move forward, even when overlap >= the
        # distance just covered
        next_start = end - overlap
        start = next_start if next_start > start else end

    return [chunk for chunk in chunks if len(chunk) > min_length]


class TextChunker:
    """Splits letter text into overlapping passages using configured sizes."""

    def __init__(self, config: Optional[RAGConfig] = None):
        """
        Initialize chunker.

        Args:
            config: RAG configuration (defaults are used when omitted)
        """
        self.config = config or RAGConfig()
        self.chunk_size = self.config.chunk_size
        self.chunk_overlap = self.config.chunk_overlap
        self.min_chunk_length = self.config.min_chunk_length

    def chunk(self, text: str) -> List[str]:
        """Split text into chunks with the configured size and overlap."""
        if not text:
            return []

        return chunk_text(
            text,
            chunk_size=self.chunk_size,
            overlap=self.chunk_overlap,
            min_length=self.min_chunk_length
        )
