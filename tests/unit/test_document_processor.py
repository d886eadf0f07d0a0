"""Unit tests for the document processor."""

import pytest
from unittest.mock import MagicMock, patch

from src.models import SourceDocument
from src.rag.chunker import TextChunker, chunk_text
from src.rag.config import RAGConfig
from src.rag.document_processor import DocumentProcessor, extract_year
from src.rag.exceptions import DocumentProcessingError
from src.rag.sample_content import get_sample_passages

from tests.helpers import MappingEmbedder


LETTER_TEXT = " ".join(
    f"Paragraph {i} explains why we prefer businesses with durable economics."
    for i in range(60)
)


@pytest.fixture
def processor(rag_config, deterministic_embedder):
    return DocumentProcessor(config=rag_config, embedder=deterministic_embedder)


@pytest.fixture
def production_processor(deterministic_embedder):
    config = RAGConfig(environment="production", embedding_provider="deterministic")
    return DocumentProcessor(config=config, embedder=deterministic_embedder)


def _mock_reader(*page_texts):
    reader = MagicMock()
    reader.pages = []
    for page_text in page_texts:
        page = MagicMock()
        page.extract_text.return_value = page_text
        reader.pages.append(page)
    return reader


class TestExtractYear:
    """Tests for year extraction from filenames."""

    @pytest.mark.parametrize("filename,year", [
        ("berkshire-hathaway-2023.pdf", "2023"),
        ("2019_letter.pdf", "2019"),
        ("letters/2021/annual.pdf", "2021"),
        ("letter.pdf", "unknown"),
        ("letter-23.pdf", "unknown"),
        ("", "unknown"),
    ])
    def test_extract_year(self, filename, year):
        assert extract_year(filename) == year

    def test_first_four_digit_run_wins(self):
        assert extract_year("1999-2023-letter.pdf") == "1999"

    def test_method_delegates(self, processor):
        assert processor.extract_year("berkshire-hathaway-2022.pdf") == "2022"


class TestSplitDocument:
    """Tests for chunking with metadata."""

    def test_chunks_carry_metadata(self, processor):
        docs = processor.split_document(LETTER_TEXT, "berkshire-hathaway-2023.pdf")

        assert len(docs) > 1
        assert [d.metadata.chunk_index for d in docs] == list(range(len(docs)))
        assert all(d.metadata.year == "2023" for d in docs)
        assert all(d.metadata.filename == "berkshire-hathaway-2023.pdf" for d in docs)

    def test_matches_chunker(self, processor):
        docs = processor.split_document(LETTER_TEXT, "letter.pdf")
        assert [d.content for d in docs] == chunk_text(LETTER_TEXT)

    def test_unknown_year(self, processor):
        docs = processor.split_document(LETTER_TEXT, "letter.pdf")
        assert docs[0].metadata.year == "unknown"

    def test_empty_text(self, processor):
        assert processor.split_document("", "berkshire-hathaway-2023.pdf") == []

    def test_custom_chunker(self, rag_config, deterministic_embedder):
        processor = DocumentProcessor(
            config=rag_config,
            embedder=deterministic_embedder,
            chunker=TextChunker(RAGConfig(chunk_size=200, chunk_overlap=0)),
        )

        docs = processor.split_document(LETTER_TEXT, "letter.pdf")

        assert all(len(d.content) <= 201 for d in docs)


class TestProcess:
    """Tests for chunk-and-embed."""

    def test_process_embeds_every_passage(self, processor, deterministic_embedder):
        embedded = processor.process(SourceDocument(filename="berkshire-hathaway-2021.pdf", text=LETTER_TEXT))

        assert len(embedded) == len(chunk_text(LETTER_TEXT))
        for doc in embedded:
            assert doc.embedding == deterministic_embedder.embed(doc.content)
            assert doc.metadata.year == "2021"

    def test_generate_embedding(self, rag_config):
        embedder = MappingEmbedder({"text": [0.6, 0.8]})
        processor = DocumentProcessor(config=rag_config, embedder=embedder)

        assert processor.generate_embedding("text") == [0.6, 0.8]

    def test_default_parts_from_config(self, rag_config):
        processor = DocumentProcessor(config=rag_config)

        assert processor.embedder.dimensions == 16
        assert processor.chunker.chunk_size == rag_config.chunk_size


class TestPdf:
    """Tests for PDF loading and the sample content fallback."""

    @patch("src.rag.document_processor.PdfReader")
    def test_load_pdf_joins_pages(self, mock_reader, processor):
        mock_reader.return_value = _mock_reader("Page one.", None, "Page three.")

        source = processor.load_pdf("/letters/berkshire-hathaway-2023.pdf")

        assert source.filename == "berkshire-hathaway-2023.pdf"
        assert source.text == "Page one.\n\nPage three."

    @patch("src.rag.document_processor.PdfReader")
    def test_process_pdf(self, mock_reader, processor):
        mock_reader.return_value = _mock_reader(LETTER_TEXT)

        docs = processor.process_pdf("berkshire-hathaway-2022.pdf")

        assert [d.content for d in docs] == chunk_text(LETTER_TEXT)
        assert all(d.metadata.year == "2022" for d in docs)

    def test_missing_pdf_uses_sample_content(self, processor, tmp_path):
        docs = processor.process_pdf(tmp_path / "berkshire-hathaway-2021.pdf")

        assert [d.content for d in docs] == get_sample_passages("2021")
        assert all(d.metadata.year == "2021" for d in docs)
        assert all(d.metadata.filename == "berkshire-hathaway-2021.pdf" for d in docs)

    @patch("src.rag.document_processor.PdfReader")
    def test_unreadable_pdf_uses_sample_content(self, mock_reader, processor):
        mock_reader.side_effect = ValueError("EOF marker not found")

        docs = processor.process_pdf("berkshire-hathaway-2023.pdf")

        assert [d.content for d in docs] == get_sample_passages("2023")

    def test_missing_pdf_in_production(self, production_processor, tmp_path):
        with pytest.raises(DocumentProcessingError, match="production"):
            production_processor.process_pdf(tmp_path / "berkshire-hathaway-2021.pdf")

    def test_sample_content_unknown_year(self, processor):
        docs = processor.generate_sample_content("letter.pdf")

        assert [d.content for d in docs] == get_sample_passages("unknown")
        assert all(d.metadata.year == "unknown" for d in docs)

    def test_sample_content_refused_in_production(self, production_processor):
        with pytest.raises(DocumentProcessingError):
            production_processor.generate_sample_content("berkshire-hathaway-2023.pdf")
