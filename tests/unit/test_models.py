"""Unit tests for Pydantic data models."""

import pytest
from pydantic import ValidationError

from src.models import (
    Document,
    DocumentMetadata,
    EmbeddedDocument,
    SearchOutcome,
    SearchResult,
)


class TestDocumentMetadata:
    """Tests for DocumentMetadata model."""

    def test_valid_metadata(self):
        metadata = DocumentMetadata(
            filename="berkshire-hathaway-2023.pdf",
            year="2023",
            chunk_index=4,
        )

        assert metadata.filename == "berkshire-hathaway-2023.pdf"
        assert metadata.year == "2023"
        assert metadata.chunk_index == 4
        assert metadata.page is None

    def test_year_defaults_to_unknown(self):
        metadata = DocumentMetadata(filename="letter.pdf", chunk_index=0)
        assert metadata.year == "unknown"

    def test_negative_chunk_index(self):
        with pytest.raises(ValidationError):
            DocumentMetadata(filename="letter.pdf", chunk_index=-1)

    def test_page_must_be_positive(self):
        with pytest.raises(ValidationError):
            DocumentMetadata(filename="letter.pdf", chunk_index=0, page=0)

    def test_frozen(self):
        metadata = DocumentMetadata(filename="letter.pdf", chunk_index=0)
        with pytest.raises(ValidationError):
            metadata.year = "2023"

    def test_dump_omits_missing_page(self):
        metadata = DocumentMetadata(filename="letter.pdf", year="2021", chunk_index=2)
        assert metadata.model_dump(exclude_none=True) == {
            "filename": "letter.pdf",
            "year": "2021",
            "chunk_index": 2,
        }


class TestDocument:
    """Tests for Document and EmbeddedDocument models."""

    @pytest.fixture
    def metadata(self):
        return DocumentMetadata(filename="berkshire-hathaway-2022.pdf", year="2022", chunk_index=1)

    def test_valid_document(self, metadata):
        doc = Document(content="Cryptocurrency has no productive output.", metadata=metadata)
        assert doc.metadata.year == "2022"

    def test_empty_content(self, metadata):
        with pytest.raises(ValidationError):
            Document(content="", metadata=metadata)

    def test_blank_content(self, metadata):
        with pytest.raises(ValidationError, match="blank"):
            Document(content="   \n", metadata=metadata)

    def test_embedded_round_trip(self, metadata):
        doc = Document(content="Moats protect profits.", metadata=metadata)

        embedded = EmbeddedDocument.from_document(doc, [0.6, 0.8])

        assert embedded.embedding == [0.6, 0.8]
        assert embedded.content == doc.content
        assert embedded.to_document() == doc

    def test_embedding_required(self, metadata):
        with pytest.raises(ValidationError):
            EmbeddedDocument(content="text", metadata=metadata, embedding=[])


class TestSearchResult:
    """Tests for SearchResult model."""

    def test_metadata_properties(self):
        result = SearchResult(
            content="Management quality matters.",
            metadata={"filename": "berkshire-hathaway-2023.pdf", "year": "2023", "chunk_index": 4},
            similarity_score=0.91,
        )

        assert result.year == "2023"
        assert result.filename == "berkshire-hathaway-2023.pdf"
        assert result.chunk_index == 4

    def test_missing_metadata_fields(self):
        result = SearchResult(content="text")

        assert result.metadata == {}
        assert result.year is None
        assert result.chunk_index is None

    @pytest.mark.parametrize("raw", [None, ""])
    def test_missing_score_defaults_to_zero(self, raw):
        assert SearchResult(content="text", similarity_score=raw).similarity_score == 0.0

    def test_numeric_string_score(self):
        assert SearchResult(content="text", similarity_score="0.75").similarity_score == 0.75

    def test_non_numeric_score(self):
        with pytest.raises(ValidationError):
            SearchResult(content="text", similarity_score="high")


class TestSearchOutcome:
    """Tests for SearchOutcome model."""

    def test_empty_success(self):
        outcome = SearchOutcome()

        assert outcome.ok
        assert outcome.results == []

    def test_failure(self):
        outcome = SearchOutcome(error="connection refused")

        assert not outcome.ok
        assert outcome.results == []
