"""Seed passages for a fresh document store (development and demos)."""

import logging
from typing import List

from ..models import Document, DocumentMetadata
from ..rag.vector_store import VectorStore

logger = logging.getLogger(__name__)


def _doc(content: str, year: str, chunk_index: int) -> Document:
    return Document(
        content=content,
        metadata=DocumentMetadata(
            filename=f"berkshire-hathaway-{year}.pdf",
            year=year,
            chunk_index=chunk_index
        )
    )


SAMPLE_DOCUMENTS: List[Document] = [
    _doc(
        "Our economic principles at Berkshire are simple: we buy businesses we can understand "
        "that are trading at reasonable prices relative to their earnings power. We focus on "
        "companies with strong competitive positions and predictable cash flows. We prefer "
        "businesses that don't require significant capital expenditures to maintain their "
        "competitive position.",
        "2023", 0
    ),
    _doc(
        "Cryptocurrency has no productive output. It produces nothing, creates nothing, and adds "
        "no value to society. It is essentially a gambling token, and we will never invest in it. "
        "Our focus remains on productive assets that generate real value for shareholders and "
        "society.",
        "2022", 1
    ),
    _doc(
        "The key to successful investing is buying wonderful companies at fair prices, not fair "
        "companies at wonderful prices. We look for businesses with wide economic moats - "
        "sustainable competitive advantages that protect their profits from competitors. These "
        "might include brand recognition, economies of scale, or regulatory advantages.",
        "2023", 2
    ),
    _doc(
        "Market volatility is not risk - it's opportunity. When others are fearful, we see chances "
        "to buy great businesses at discounted prices. Our cash position allows us to take "
        "advantage of market downturns when quality companies trade below their intrinsic value.",
        "2021", 3
    ),
    _doc(
        "Management quality is perhaps the most important factor in our investment decisions. We "
        "look for leaders who are honest, competent, and aligned with shareholder interests. They "
        "should have a track record of capital allocation excellence and treating shareholders "
        "fairly.",
        "2023", 4
    ),
]


def load_sample_data(vector_store: VectorStore) -> int:
    """
    Insert the sample passages.

    Returns:
        Total number of passages in the store afterwards

    Raises:
        Exception: The first insert failure
    """
    logger.info("Loading sample Berkshire Hathaway data...")

    for i, doc in enumerate(SAMPLE_DOCUMENTS, 1):
        logger.info(f"Inserting document {i}/{len(SAMPLE_DOCUMENTS)}: {doc.metadata.filename}")
        vector_store.insert_document(doc)

    count = vector_store.get_document_count()
    logger.info(
        f"Loaded {len(SAMPLE_DOCUMENTS)} documents. Total documents in store: {count}"
    )
    return count
